import pytest

from src.emptrack.emptrack.core.enums import Role
from src.emptrack.emptrack.core.exceptions import ValidationError


def test_list_assigned_stores_filters_dangling_ids(employee_service, store_repo):
    store_repo.delete_by_id("store-001")

    assert employee_service.list_assigned_stores("emp-101") == []
    assert [s.id for s in employee_service.list_assigned_stores("emp-103")] == ["store-002"]


def test_list_assigned_stores_for_unknown_employee_is_empty(employee_service):
    assert employee_service.list_assigned_stores("emp-999") == []


def test_suggested_network_is_first_ssid_of_assigned_stores(employee_service):
    assert employee_service.suggested_network("emp-101") == "ShopNet_Staff"
    assert employee_service.suggested_network("emp-104") is None


def test_create_employee(employee_service):
    emp = employee_service.create_employee(
        name="Priya",
        email="priya@example.com",
        role="STORE_MANAGER",
        assigned_store_ids="store-001, store-002",
    )

    assert emp.role == Role.STORE_MANAGER
    assert emp.assigned_store_ids == ("store-001", "store-002")
    assert "Priya" in emp.avatar_url
    assert employee_service.get_employee(emp.id) == emp


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "", "email": "a@example.com", "role": "Auditor"},
        {"name": "A", "email": "", "role": "Auditor"},
        {"name": "A", "email": "not-an-email", "role": "Auditor"},
        {"name": "A", "email": "a@example.com", "role": "Janitor"},
        {"name": "A", "email": "a@example.com", "role": Role.SUPER_ADMIN},
        {"name": "A", "email": "G@example.com", "role": "Auditor"},
    ],
)
def test_create_employee_rejects_invalid_forms(employee_service, fields):
    before = len(employee_service.list_employees())

    with pytest.raises(ValidationError):
        employee_service.create_employee(**fields)

    assert len(employee_service.list_employees()) == before


def test_update_and_delete(employee_service):
    updated = employee_service.update_employee(
        "emp-103", name="Syed A.", email="s@example.com", role=Role.AUDITOR, assigned_store_ids=[]
    )
    assert updated.assigned_store_ids == ()

    employee_service.delete_employee("emp-103")
    with pytest.raises(ValidationError):
        employee_service.get_employee("emp-103")
    with pytest.raises(ValidationError):
        employee_service.delete_employee("emp-103")

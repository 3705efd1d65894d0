from src.emptrack.emptrack.attendance.authorizer import PresenceAuthorizer
from src.emptrack.emptrack.core.enums import DeniedReason
from src.emptrack.emptrack.stores.model import Store


def _store(store_id: str, *ssids: str) -> Store:
    return Store(id=store_id, tenant_id="t", name=store_id, ssids=tuple(ssids))


def test_first_matching_store_wins():
    a = _store("a", "Shared", "A_Only")
    b = _store("b", "Shared")

    decision = PresenceAuthorizer().authorize([a, b], "Shared")

    assert decision.allowed
    assert decision.store.id == "a"


def test_match_is_case_sensitive():
    decision = PresenceAuthorizer().authorize([_store("a", "ShopNet_Staff")], "shopnet_staff")

    assert not decision.allowed
    assert decision.reason == DeniedReason.NOT_ON_AUTHORIZED_NETWORK


def test_no_assigned_stores_always_denied():
    decision = PresenceAuthorizer().authorize([], "ShopNet_Staff")

    assert not decision.allowed
    assert decision.store is None


def test_empty_ssid_denied_even_if_store_lists_blank():
    decision = PresenceAuthorizer().authorize([_store("a", "")], "")

    assert not decision.allowed


def test_store_without_ssids_never_matches():
    assert not PresenceAuthorizer().authorize([_store("a")], "Anything").allowed


def test_rssi_threshold_is_not_enforced():
    weak = Store(id="a", tenant_id="t", name="a", ssids=("Net",), rssi_threshold=-10)

    assert PresenceAuthorizer().authorize([weak], "Net").allowed

"""Example: drive the service layer directly (no Flask).

Clocks the demo Auditor in at the boutique, then out again.
"""

from src.emptrack.emptrack.container import build_container
from src.emptrack.emptrack.core.exceptions import NetworkAccessDenied


def main():
    container = build_container(feed_enabled=False, insight_latency=0)
    attendance = container.attendance_service

    try:
        attendance.clock_in("emp-103", "Starbucks_Free_WiFi")
    except NetworkAccessDenied as e:
        print("denied:", e.reason.value)

    session = attendance.clock_in("emp-103", "Boutique_Secure")
    print("clocked in at", session.store_id)
    print("closed:", attendance.clock_out("emp-103"))
    print(container.report_service.build_csv())


if __name__ == "__main__":
    main()

"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in AttendanceDayCycle.
"""

from datetime import datetime

from hr_portal.container import build_container


def main():
    container = build_container(backend="memory")
    employee = container.employee_service.create({"name": "Asha Rao", "department": "Engineering"})

    cycle = container.attendance_cycle
    cycle.check_in(employee.id, "remote", now=datetime(2026, 3, 2, 9, 0))
    record = cycle.check_out(employee.id, now=datetime(2026, 3, 2, 17, 30))
    print(record.to_dict())


if __name__ == "__main__":
    main()

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .attendance.repository import StoreAttendanceRepository
from .attendance.service import AttendanceAdminService, AttendanceDayCycle
from .database.connection import DatabaseConnection, DBConfig
from .employees.repository import StoreEmployeeRepository
from .employees.service import EmployeeService
from .leaves.repository import StoreLeaveRepository
from .leaves.service import LeaveService
from .payroll.repository import StorePayrollRepository
from .payroll.service import PayrollService
from .reports.service import ReportService
from .store.memory import InMemoryRecordStore
from .store.mysql_record_store import MySQLRecordStore
from .store.record_store import RecordStore

# collection name -> entity label used in "not found" messages
COLLECTIONS = {
    "employees": "employee",
    "attendance": "attendance record",
    "leaves": "leave request",
    "payroll": "payroll record",
}


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: StoreEmployeeRepository
    attendance_repo: StoreAttendanceRepository
    leaves_repo: StoreLeaveRepository
    payroll_repo: StorePayrollRepository

    employee_service: EmployeeService
    attendance_cycle: AttendanceDayCycle
    attendance_admin: AttendanceAdminService
    leave_service: LeaveService
    payroll_service: PayrollService
    report_service: ReportService


def load_seed(seed_file: str | Path) -> dict:
    """Read a JSON seed file mapping collection names to lists of records."""
    data = json.loads(Path(seed_file).read_text(encoding="utf-8"))
    return {name: list(data.get(name) or []) for name in COLLECTIONS}


def build_container(
    *,
    backend: str = "memory",
    db_config: Optional[dict] = None,
    seed: Optional[dict] = None,
) -> Container:
    conn: Optional[DatabaseConnection] = None

    if backend == "mysql":
        if not db_config:
            raise ValueError("db_config is required for the mysql backend")
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        make_store: Callable[[str], RecordStore] = lambda name: MySQLRecordStore(conn, name)
    elif backend == "memory":
        seed = seed or {}
        make_store = lambda name: InMemoryRecordStore(COLLECTIONS[name], seed=seed.get(name))
    else:
        raise ValueError(f"Unknown store backend: {backend!r}")

    employees_repo = StoreEmployeeRepository(make_store("employees"))
    attendance_repo = StoreAttendanceRepository(make_store("attendance"))
    leaves_repo = StoreLeaveRepository(make_store("leaves"))
    payroll_repo = StorePayrollRepository(make_store("payroll"))

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        payroll_repo=payroll_repo,
        employee_service=EmployeeService(employees_repo),
        attendance_cycle=AttendanceDayCycle(attendance_repo, employees_repo),
        attendance_admin=AttendanceAdminService(attendance_repo),
        leave_service=LeaveService(leaves_repo),
        payroll_service=PayrollService(payroll_repo),
        report_service=ReportService(attendance_repo, employees_repo, leaves_repo),
    )

from datetime import datetime

import pytest

from hr_portal.core.enums import LeaveStatus, LeaveType
from hr_portal.core.exceptions import NotFoundError, ValidationError
from hr_portal.leaves.repository import StoreLeaveRepository
from hr_portal.leaves.service import LeaveService
from hr_portal.store.memory import InMemoryRecordStore


def _request(**overrides):
    data = {
        "employeeId": "E1",
        "leaveType": "annual",
        "startDate": "2026-04-06",
        "endDate": "2026-04-08",
        "reason": "Family trip",
    }
    data.update(overrides)
    return data


@pytest.fixture
def service():
    return LeaveService(StoreLeaveRepository(InMemoryRecordStore("leave request")))


def test_create_forces_pending_and_applied_on(service):
    leave = service.create(_request(status="approved"), now=datetime(2026, 3, 1, 10, 0))
    assert leave.status == LeaveStatus.PENDING
    assert leave.applied_on == datetime(2026, 3, 1, 10, 0)
    assert leave.leave_type == LeaveType.ANNUAL
    assert leave.days == 3


def test_create_rejects_inverted_range(service):
    with pytest.raises(ValidationError):
        service.create(_request(startDate="2026-04-08", endDate="2026-04-06"))


def test_create_rejects_unknown_type(service):
    with pytest.raises(ValidationError):
        service.create(_request(leaveType="holiday"))


def test_approve_and_reject_only_from_pending(service):
    a = service.create(_request())
    b = service.create(_request(employeeId="E2"))

    approved = service.approve(a.id, "HR1")
    assert approved.status == LeaveStatus.APPROVED
    assert approved.approved_by == "HR1"

    assert service.reject(b.id, "HR1").status == LeaveStatus.REJECTED

    with pytest.raises(ValidationError):
        service.reject(a.id, "HR2")


def test_approve_unknown_request(service):
    with pytest.raises(NotFoundError):
        service.approve("9", "HR1")


def test_list_filters_and_sorts_newest_first(service):
    service.create(_request(), now=datetime(2026, 3, 1, 9, 0))
    service.create(_request(leaveType="sick"), now=datetime(2026, 3, 3, 9, 0))
    third = service.create(_request(), now=datetime(2026, 3, 2, 9, 0))
    service.approve(third.id, "HR1")

    assert [l.applied_on.day for l in service.list_requests()] == [3, 2, 1]
    assert [l.leave_type for l in service.list_requests(leave_type="sick")] == [LeaveType.SICK]
    assert [l.id for l in service.list_requests(status="approved")] == [third.id]


def test_summary_counts(service):
    a = service.create(_request())
    service.create(_request())
    service.reject(a.id, "HR1")

    assert service.summary() == {"total": 2, "pending": 1, "approved": 0, "rejected": 1}


def test_get_by_employee_id(service):
    service.create(_request(employeeId="E1"))
    service.create(_request(employeeId="E2"))
    assert [l.employee_id for l in service.get_by_employee_id("E2")] == ["E2"]


def test_update_merges_changed_fields(service):
    leave = service.create(_request())

    updated = service.update(leave.id, {"reason": "Moved trip", "endDate": "2026-04-10", "status": "approved"})

    assert updated.reason == "Moved trip"
    assert updated.start_date.isoformat() == "2026-04-06"
    assert updated.end_date.isoformat() == "2026-04-10"
    assert updated.status == LeaveStatus.PENDING


def test_update_rejects_end_before_start(service):
    leave = service.create(_request())

    with pytest.raises(ValidationError):
        service.update(leave.id, {"endDate": "2026-04-01"})

    assert service.get_by_id(leave.id).end_date.isoformat() == "2026-04-08"


def test_update_stores_normalized_values(service):
    leave = service.create(_request())

    updated = service.update(
        leave.id,
        {"leaveType": " Sick ", "startDate": " 2026-04-07", "endDate": " 2026-05-06 ", "reason": "  Flu  "},
    )

    assert updated.leave_type == LeaveType.SICK
    assert updated.end_date.isoformat() == "2026-05-06"
    assert updated.reason == "Flu"
    assert [l.leave_type for l in service.get_all()] == [LeaveType.SICK]
    assert service.summary()["pending"] == 1


def test_update_rejects_unknown_type_without_writing(service):
    leave = service.create(_request())

    with pytest.raises(ValidationError):
        service.update(leave.id, {"leaveType": "holiday"})

    assert service.get_by_id(leave.id).leave_type == LeaveType.ANNUAL

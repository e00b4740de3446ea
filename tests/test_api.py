from __future__ import annotations

from datetime import date

import pytest

from hr_portal.container import build_container
from hr_portal.main import create_app


@pytest.fixture
def container():
    return build_container(backend="memory")


@pytest.fixture
def client(container):
    app = create_app(settings_module="hr_portal.config.testing", container=container)
    return app.test_client()


def _employee(client, name="Asha"):
    resp = client.post("/api/employees", json={"name": name, "department": "Engineering"})
    assert resp.status_code == 201
    return resp.get_json()["data"]


def test_check_in_then_duplicate(client):
    emp = _employee(client)

    resp = client.post("/api/attendance/check-in", json={"employeeId": emp["id"], "workMode": "hybrid"})
    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["workMode"] == "hybrid"
    assert data["status"] == "present"
    assert data["checkOut"] is None
    assert data["date"] == date.today().isoformat()

    again = client.post("/api/attendance/check-in", json={"employeeId": emp["id"]})
    assert again.status_code == 400
    assert again.get_json() == {"success": False, "message": "Already checked in today"}


def test_check_out_without_check_in(client):
    emp = _employee(client)
    resp = client.post("/api/attendance/check-out", json={"employeeId": emp["id"]})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "No active check-in found or already checked out"


def test_check_in_unknown_employee_is_404(client):
    resp = client.post("/api/attendance/check-in", json={"employeeId": "nobody"})
    assert resp.status_code == 404


def test_check_in_requires_json_body(client):
    resp = client.post("/api/attendance/check-in", data="x", content_type="text/plain")
    assert resp.status_code == 400


def test_attendance_listing_and_today(client):
    emp = _employee(client)
    client.post("/api/attendance/check-in", json={"employeeId": emp["id"]})
    client.post("/api/attendance/check-out", json={"employeeId": emp["id"]})

    today = date.today().isoformat()
    by_emp = client.get(f"/api/attendance?employeeId={emp['id']}").get_json()["data"]
    assert len(by_emp) == 1
    assert by_emp[0]["checkOut"] is not None

    ranged = client.get(f"/api/attendance?start={today}&end={today}").get_json()["data"]
    assert [r["id"] for r in ranged] == [by_emp[0]["id"]]

    bad = client.get(f"/api/attendance?start={today}&end=2000-01-01")
    assert bad.status_code == 400

    todays = client.get(f"/api/attendance/today?employeeId={emp['id']}").get_json()["data"]
    assert todays["id"] == by_emp[0]["id"]

    assert client.get("/api/attendance/unknown").status_code == 404


def test_status_correction_and_delete(client):
    emp = _employee(client)
    rec = client.post("/api/attendance/check-in", json={"employeeId": emp["id"]}).get_json()["data"]

    resp = client.patch(f"/api/attendance/{rec['id']}/status", json={"status": "half-day"})
    assert resp.get_json()["data"]["status"] == "half-day"

    assert client.delete(f"/api/attendance/{rec['id']}").status_code == 200
    assert client.delete(f"/api/attendance/{rec['id']}").status_code == 404


def test_leave_workflow(client):
    emp = _employee(client)
    resp = client.post(
        "/api/leaves",
        json={"employeeId": emp["id"], "leaveType": "sick", "startDate": "2026-05-04", "endDate": "2026-05-05"},
    )
    assert resp.status_code == 201
    leave = resp.get_json()["data"]
    assert leave["status"] == "pending"

    approved = client.post(f"/api/leaves/{leave['id']}/approve", json={"approvedBy": "HR1"}).get_json()["data"]
    assert approved["status"] == "approved"

    again = client.post(f"/api/leaves/{leave['id']}/reject", json={"approvedBy": "HR1"})
    assert again.status_code == 400

    assert client.get("/api/leaves/summary").get_json()["data"]["approved"] == 1


def test_payroll_endpoints(client):
    resp = client.post(
        "/api/payroll/process",
        json={"employeeId": "1", "month": "2026-03", "basicSalary": 50000, "allowances": {"hra": 5000}},
    )
    assert resp.status_code == 201
    assert resp.get_json()["data"]["netPay"] == 55000

    listed = client.get("/api/payroll?month=2026-03").get_json()["data"]
    assert len(listed) == 1

    summary = client.get("/api/payroll/summary?month=2026-03").get_json()["data"]
    assert summary["processed"] == 1
    assert client.get("/api/payroll/summary").status_code == 400


def test_reports_endpoints(client):
    emp = _employee(client)
    client.post("/api/attendance/check-in", json={"employeeId": emp["id"]})

    dash = client.get("/api/reports/dashboard").get_json()["data"]
    assert dash["totalEmployees"] == 1
    assert dash["presentToday"] == 1

    assert client.get("/api/reports/departments").get_json()["data"] == {"Engineering": 1}
    assert client.get("/api/reports/monthly?year=abc").status_code == 400

    today = date.today().isoformat()
    csv_resp = client.get(f"/api/reports/attendance.csv?start={today}&end={today}")
    assert csv_resp.status_code == 200
    assert csv_resp.mimetype == "text/csv"
    body = csv_resp.data.decode("utf-8-sig").splitlines()
    assert body[0] == "date,employeeId,checkIn,checkOut,status,workMode,totalHours"
    assert len(body) == 2


def test_patch_leave_reads_back_normalized(client):
    emp = _employee(client)
    leave = client.post(
        "/api/leaves",
        json={"employeeId": emp["id"], "leaveType": "annual", "startDate": "2026-05-04", "endDate": "2026-05-05"},
    ).get_json()["data"]

    resp = client.patch(f"/api/leaves/{leave['id']}", json={"leaveType": "Sick", "endDate": " 2026-05-06 "})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["leaveType"] == "sick"
    assert resp.get_json()["data"]["endDate"] == "2026-05-06"

    bad = client.patch(f"/api/leaves/{leave['id']}", json={"endDate": "2026-05-01"})
    assert bad.status_code == 400

    assert client.get("/api/leaves").status_code == 200
    assert client.get("/api/reports/leave-types").get_json()["data"] == {"sick": 1}


def test_monthly_report_rejects_out_of_range_year(client):
    assert client.get("/api/reports/monthly?year=0").status_code == 400
    assert client.get("/api/reports/monthly?year=10000").status_code == 400
    assert client.get("/api/reports/monthly?year=2026").status_code == 200


def test_check_out_with_blank_employee_id(client):
    resp = client.post("/api/attendance/check-out", json={"employeeId": ""})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Employee id is required"

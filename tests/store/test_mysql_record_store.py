from __future__ import annotations

import json

import pytest

from hr_portal.core.exceptions import NotFoundError
from hr_portal.store.mysql_record_store import MySQLRecordStore


class FakeCursor:
    """Understands just the statements MySQLRecordStore issues."""

    def __init__(self, rows: dict):
        self._rows = rows
        self._result: list = []

    def execute(self, sql, params=()):
        stmt = " ".join(sql.split()).upper()
        if stmt.startswith("INSERT"):
            collection, record_id, payload = params
            self._rows[(collection, record_id)] = payload
        elif stmt.startswith("SELECT PAYLOAD FROM RECORDS WHERE COLLECTION=%S AND RECORD_ID=%S"):
            payload = self._rows.get(tuple(params))
            self._result = [{"payload": payload}] if payload else []
        elif stmt.startswith("SELECT PAYLOAD FROM RECORDS WHERE COLLECTION=%S ORDER BY"):
            self._result = [{"payload": p} for (c, _), p in self._rows.items() if c == params[0]]
        elif stmt.startswith("UPDATE"):
            payload, collection, record_id = params
            self._rows[(collection, record_id)] = payload
        elif stmt.startswith("DELETE"):
            self._rows.pop(tuple(params), None)
        else:
            raise AssertionError(f"unexpected SQL: {sql}")

    def fetchone(self):
        return self._result[0] if self._result else None

    def fetchall(self):
        return list(self._result)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows: dict):
        self._rows = rows
        self.committed = 0
        self.rolled_back = 0

    def cursor(self, dictionary=False):
        return FakeCursor(self._rows)

    def commit(self):
        self.committed += 1

    def rollback(self):
        self.rolled_back += 1

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self):
        self.rows: dict = {}
        self.connections: list[FakeConnection] = []

    def connect(self):
        conn = FakeConnection(self.rows)
        self.connections.append(conn)
        return conn


def test_create_get_update_delete_round():
    factory = FakeConnFactory()
    store = MySQLRecordStore(factory, "attendance record")

    created = store.create({"employeeId": "E1", "date": "2026-03-02"})
    assert created["id"]
    assert json.loads(factory.rows[("attendance record", created["id"])])["employeeId"] == "E1"

    updated = store.update(created["id"], {"checkOut": "17:30", "id": "hijack"})
    assert updated["id"] == created["id"]
    assert store.get(created["id"])["checkOut"] == "17:30"

    assert [r["id"] for r in store.query(lambda r: r["employeeId"] == "E1")] == [created["id"]]
    assert store.delete(created["id"])["checkOut"] == "17:30"
    assert store.get(created["id"]) is None


def test_collections_are_isolated():
    factory = FakeConnFactory()
    MySQLRecordStore(factory, "employee").create({"name": "Asha"})
    assert MySQLRecordStore(factory, "leave request").query() == []


def test_unknown_id_raises_and_rolls_back():
    factory = FakeConnFactory()
    store = MySQLRecordStore(factory, "leave request")

    with pytest.raises(NotFoundError) as exc:
        store.update("missing", {"status": "approved"})
    assert str(exc.value) == "Leave request not found"
    assert factory.connections[-1].rolled_back == 1

    with pytest.raises(NotFoundError):
        store.delete("missing")

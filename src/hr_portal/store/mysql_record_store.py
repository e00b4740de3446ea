from __future__ import annotations

import json
import uuid
from typing import List, Optional

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .record_store import Predicate, Record, RecordStore


class MySQLRecordStore(RecordStore):
    """Stores each record as a JSON document in the ``records`` table.

    Filtering happens in Python after loading the collection, so predicates stay
    arbitrary callables like the in-memory store.
    """

    def __init__(self, conn_factory: DatabaseConnection, collection: str):
        self._conn_factory = conn_factory
        self._collection = collection

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self._collection.capitalize()} not found")

    def create(self, record: Record) -> Record:
        new_record = dict(record)
        new_record["id"] = uuid.uuid4().hex
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO records(collection, record_id, payload)
                VALUES(%s,%s,%s)
                """,
                (self._collection, new_record["id"], json.dumps(new_record)),
            )
        return new_record

    def get(self, record_id: str) -> Optional[Record]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT payload FROM records WHERE collection=%s AND record_id=%s",
                (self._collection, str(record_id)),
            )
            r = fetchone(cur)
            if not r:
                return None
            return json.loads(r["payload"])

    def update(self, record_id: str, fields: Record) -> Record:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT payload FROM records WHERE collection=%s AND record_id=%s FOR UPDATE",
                (self._collection, str(record_id)),
            )
            r = fetchone(cur)
            if not r:
                raise self._not_found()
            merged = {**json.loads(r["payload"]), **{k: v for k, v in fields.items() if k != "id"}}
            cur.execute(
                "UPDATE records SET payload=%s WHERE collection=%s AND record_id=%s",
                (json.dumps(merged), self._collection, str(record_id)),
            )
            return merged

    def query(self, predicate: Optional[Predicate] = None) -> List[Record]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT payload FROM records WHERE collection=%s ORDER BY created_at ASC",
                (self._collection,),
            )
            rows = [json.loads(r["payload"]) for r in fetchall(cur)]
        return [r for r in rows if predicate is None or predicate(r)]

    def delete(self, record_id: str) -> Record:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT payload FROM records WHERE collection=%s AND record_id=%s",
                (self._collection, str(record_id)),
            )
            r = fetchone(cur)
            if not r:
                raise self._not_found()
            cur.execute(
                "DELETE FROM records WHERE collection=%s AND record_id=%s",
                (self._collection, str(record_id)),
            )
            return json.loads(r["payload"])

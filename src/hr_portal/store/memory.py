from __future__ import annotations

import copy
import itertools
from typing import List, Optional

from ..core.exceptions import NotFoundError
from .record_store import Predicate, Record, RecordStore


class InMemoryRecordStore(RecordStore):
    """List-backed store, used by tests and the default development config."""

    def __init__(self, name: str = "record", *, seed: Optional[List[Record]] = None, start_id: int = 1):
        self._name = name
        self._records: List[Record] = [copy.deepcopy(r) for r in (seed or [])]
        seeded = [int(r["id"]) for r in self._records if str(r.get("id", "")).isdigit()]
        self._ids = itertools.count(max(seeded + [start_id - 1]) + 1)

    def _index_of(self, record_id: str) -> int:
        for i, r in enumerate(self._records):
            if r.get("id") == record_id:
                return i
        raise NotFoundError(f"{self._name.capitalize()} not found")

    def create(self, record: Record) -> Record:
        new_record = copy.deepcopy(record)
        new_record["id"] = str(next(self._ids))
        self._records.append(new_record)
        return copy.deepcopy(new_record)

    def get(self, record_id: str) -> Optional[Record]:
        for r in self._records:
            if r.get("id") == record_id:
                return copy.deepcopy(r)
        return None

    def update(self, record_id: str, fields: Record) -> Record:
        i = self._index_of(record_id)
        changes = {k: copy.deepcopy(v) for k, v in fields.items() if k != "id"}
        self._records[i] = {**self._records[i], **changes}
        return copy.deepcopy(self._records[i])

    def query(self, predicate: Optional[Predicate] = None) -> List[Record]:
        return [copy.deepcopy(r) for r in self._records if predicate is None or predicate(r)]

    def delete(self, record_id: str) -> Record:
        i = self._index_of(record_id)
        return self._records.pop(i)

    def __len__(self) -> int:
        return len(self._records)

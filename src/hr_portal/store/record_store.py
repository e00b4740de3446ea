from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Protocol

Record = Dict[str, Any]
Predicate = Callable[[Record], bool]


class RecordStore(Protocol):
    """Generic persistence collaborator for one collection of records.

    Records are plain dicts in wire format. Every returned record is an
    independent copy: mutating it never changes stored state.
    """

    def create(self, record: Record) -> Record:
        """Store a new record and return it with its assigned ``id``."""

        raise NotImplementedError

    def get(self, record_id: str) -> Optional[Record]:
        raise NotImplementedError

    def update(self, record_id: str, fields: Record) -> Record:
        """Merge ``fields`` into the record. Raises NotFoundError for unknown ids."""

        raise NotImplementedError

    def query(self, predicate: Optional[Predicate] = None) -> List[Record]:
        raise NotImplementedError

    def delete(self, record_id: str) -> Record:
        """Remove and return the record. Raises NotFoundError for unknown ids."""

        raise NotImplementedError

"""Entity store for the Contracting Management API.

Holds one collection per entity kind plus a next-id counter per kind.
Only an in-memory backend exists; everything is lost on restart.
The store does no validation, that is the service layer's job.
"""

import logging
import threading
from contextlib import ExitStack, contextmanager
from enum import Enum
from typing import Callable, Iterator, List, Optional, Protocol

from pydantic import BaseModel

from .config import ServiceConfig

logger = logging.getLogger(__name__)


class EntityKind(str, Enum):
    """Collections held by the store. Definition order is the lock order."""

    CLIENTS = "clients"
    PROJECTS = "projects"
    STATEMENTS = "statements"
    SUPPLIERS = "suppliers"
    EMPLOYEES = "employees"
    EQUIPMENT = "equipment"
    PAYMENTS = "payments"


class EntityStore(Protocol):
    """Storage backend protocol."""

    def list(self, kind: EntityKind) -> List[BaseModel]:
        """Return all records of a kind, in insertion order."""
        ...

    def find(self, kind: EntityKind, record_id: int) -> Optional[BaseModel]:
        ...

    def insert(self, kind: EntityKind, record: BaseModel) -> BaseModel:
        """Assign the next id of ``kind`` to ``record`` and append it."""
        ...

    def update(self, kind: EntityKind, record_id: int, patch: dict) -> Optional[BaseModel]:
        """Set only the attributes present in ``patch``."""
        ...

    def remove(self, kind: EntityKind, record_id: int) -> Optional[BaseModel]:
        ...

    def remove_where(
        self, kind: EntityKind, predicate: Callable[[BaseModel], bool]
    ) -> List[BaseModel]:
        ...

    def locked(self, *kinds: EntityKind):
        """Context manager serializing access to the given collections."""
        ...

    def reset(self) -> None:
        ...


class InMemoryStore:
    """Process-local store.

    Each collection has its own re-entrant lock. Operations spanning
    several collections take them through ``locked()``, which always
    acquires in ``EntityKind`` order.
    """

    def __init__(self):
        self._locks = {kind: threading.RLock() for kind in EntityKind}
        self._records: dict[EntityKind, list[BaseModel]] = {}
        self._next_id: dict[EntityKind, int] = {}
        self.reset()

    @contextmanager
    def locked(self, *kinds: EntityKind) -> Iterator[None]:
        wanted = set(kinds)
        with ExitStack() as stack:
            for kind in EntityKind:
                if kind in wanted:
                    stack.enter_context(self._locks[kind])
            yield

    def reset(self) -> None:
        with self.locked(*EntityKind):
            self._records = {kind: [] for kind in EntityKind}
            self._next_id = {kind: 1 for kind in EntityKind}

    def next_id(self, kind: EntityKind) -> int:
        """Id the next insert of ``kind`` will receive."""
        with self._locks[kind]:
            return self._next_id[kind]

    def list(self, kind: EntityKind) -> List[BaseModel]:
        with self._locks[kind]:
            return list(self._records[kind])

    def find(self, kind: EntityKind, record_id: int) -> Optional[BaseModel]:
        with self._locks[kind]:
            for record in self._records[kind]:
                if record.id == record_id:
                    return record
        return None

    def insert(self, kind: EntityKind, record: BaseModel) -> BaseModel:
        with self._locks[kind]:
            record.id = self._next_id[kind]
            self._next_id[kind] += 1
            self._records[kind].append(record)
        return record

    def update(self, kind: EntityKind, record_id: int, patch: dict) -> Optional[BaseModel]:
        with self._locks[kind]:
            record = self.find(kind, record_id)
            if record is None:
                return None
            for field, value in patch.items():
                if field == "id":
                    continue  # ids are immutable
                setattr(record, field, value)
            return record

    def remove(self, kind: EntityKind, record_id: int) -> Optional[BaseModel]:
        with self._locks[kind]:
            records = self._records[kind]
            for index, record in enumerate(records):
                if record.id == record_id:
                    return records.pop(index)
        return None

    def remove_where(
        self, kind: EntityKind, predicate: Callable[[BaseModel], bool]
    ) -> List[BaseModel]:
        with self._locks[kind]:
            removed = [r for r in self._records[kind] if predicate(r)]
            if removed:
                self._records[kind] = [
                    r for r in self._records[kind] if not predicate(r)
                ]
            return removed

    def counts(self) -> dict[str, int]:
        """Number of records per collection."""
        with self.locked(*EntityKind):
            return {kind.value: len(records) for kind, records in self._records.items()}


def create_store(config: Optional[ServiceConfig] = None) -> EntityStore:
    """Factory: creates the configured storage backend."""
    config = config or ServiceConfig()
    backend = config.store.backend

    if backend != "memory":
        raise ValueError(f"Unknown store backend: {backend}")

    store = InMemoryStore()
    if config.store.seed_demo_data:
        from .seed import load_demo_data

        load_demo_data(store)
        logger.info(f"Seeded demo data: {store.counts()}")
    return store

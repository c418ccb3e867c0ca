"""
Storage collaborator used by every domain service.

Rows are plain dicts keyed by ``id``. Two backends implement the same
interface: ``MemoryStore`` (single process, default) and ``SupabaseStore``
(``supabase_store.py``). ``get_store`` picks one from settings.
"""

import asyncio
import copy
import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from packpal.config.settings import settings
from packpal.core.exceptions import ConflictError, StorageError

logger = logging.getLogger(__name__)

EVENTS = "events"
EVENT_MEMBERS = "event_members"
CATEGORIES = "categories"
ITEMS = "items"
POLLS = "polls"
POLL_VOTES = "poll_votes"
NOTIFICATIONS = "notifications"

ENTITIES = (EVENTS, EVENT_MEMBERS, CATEGORIES, ITEMS, POLLS, POLL_VOTES, NOTIFICATIONS)

# Mirrors the unique constraints of the relational schema
UNIQUE_CONSTRAINTS: Dict[str, List[Tuple[str, ...]]] = {
    EVENTS: [("invite_code",)],
    EVENT_MEMBERS: [("event_id", "user_id")],
    POLL_VOTES: [("poll_id", "user_id")],
}


def utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class Store(ABC):
    """CRUD over named entities. Reads return None/[] rather than raising."""

    @abstractmethod
    async def get(self, entity: str, id: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    async def list(self, entity: str, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        ...

    @abstractmethod
    async def create(self, entity: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a row. Raises ConflictError on a unique constraint violation."""

    @abstractmethod
    async def update(self, entity: str, id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    async def delete(self, entity: str, id: str) -> int:
        ...

    @abstractmethod
    async def delete_where(self, entity: str, filters: Dict[str, Any]) -> int:
        ...

    async def count(self, entity: str, filters: Optional[Dict[str, Any]] = None) -> int:
        return len(await self.list(entity, filters))


class MemoryStore(Store):
    """In-process backend. Each call holds the lock, so every call is atomic."""

    def __init__(self):
        self._tables: Dict[str, Dict[str, Dict[str, Any]]] = {name: {} for name in ENTITIES}
        self._lock = asyncio.Lock()

    def _table(self, entity: str) -> Dict[str, Dict[str, Any]]:
        try:
            return self._tables[entity]
        except KeyError:
            raise StorageError(f"Unknown entity: {entity}")

    @staticmethod
    def _matches(row: Dict[str, Any], filters: Optional[Dict[str, Any]]) -> bool:
        if not filters:
            return True
        return all(row.get(key) == value for key, value in filters.items())

    def _check_unique(self, entity: str, row: Dict[str, Any], ignore_id: Optional[str] = None) -> None:
        for columns in UNIQUE_CONSTRAINTS.get(entity, []):
            key = tuple(row.get(c) for c in columns)
            if any(v is None for v in key):
                continue
            for existing in self._tables[entity].values():
                if existing["id"] != ignore_id and tuple(existing.get(c) for c in columns) == key:
                    raise ConflictError(
                        f"Duplicate {entity} for ({', '.join(columns)})"
                    )

    async def get(self, entity: str, id: str) -> Optional[Dict[str, Any]]:
        async with self._lock:
            row = self._table(entity).get(id)
            return copy.deepcopy(row) if row is not None else None

    async def list(self, entity: str, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        async with self._lock:
            rows = [copy.deepcopy(r) for r in self._table(entity).values() if self._matches(r, filters)]
        return sorted(rows, key=lambda r: r.get("created_at") or "")

    async def create(self, entity: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        async with self._lock:
            table = self._table(entity)
            row = copy.deepcopy(fields)
            row.setdefault("id", str(uuid.uuid4()))
            row.setdefault("created_at", utcnow())
            if row["id"] in table:
                raise ConflictError(f"Duplicate {entity} id")
            self._check_unique(entity, row)
            table[row["id"]] = row
            return copy.deepcopy(row)

    async def update(self, entity: str, id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        async with self._lock:
            table = self._table(entity)
            if id not in table:
                return None
            row = {**table[id], **copy.deepcopy(fields), "id": id}
            self._check_unique(entity, row, ignore_id=id)
            table[id] = row
            return copy.deepcopy(row)

    async def delete(self, entity: str, id: str) -> int:
        async with self._lock:
            return 1 if self._table(entity).pop(id, None) is not None else 0

    async def delete_where(self, entity: str, filters: Dict[str, Any]) -> int:
        async with self._lock:
            table = self._table(entity)
            doomed = [row_id for row_id, row in table.items() if self._matches(row, filters)]
            for row_id in doomed:
                del table[row_id]
            return len(doomed)


_store: Optional[Store] = None


def get_store() -> Store:
    global _store
    if _store is None:
        if settings.storage_backend == "supabase":
            from packpal.database.supabase_store import SupabaseStore, get_supabase
            _store = SupabaseStore(get_supabase())
        else:
            _store = MemoryStore()
        logger.info("Using %s storage backend", settings.storage_backend)
    return _store


def reset_store() -> None:
    global _store
    _store = None

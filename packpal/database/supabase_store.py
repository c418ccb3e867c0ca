"""
Supabase (PostgreSQL) backend for the storage collaborator.

Tables follow the schemas documented in each module's models.py. Unique
constraints must exist in the database; a violation (23505) surfaces as
ConflictError.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi.concurrency import run_in_threadpool
from supabase import Client, create_client

from packpal.config.settings import settings
from packpal.core.exceptions import ConflictError, StorageError
from packpal.database.store import Store

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"

_client: Optional[Client] = None


def get_supabase() -> Client:
    """Shared client; prefers the service_role key, which bypasses RLS."""
    global _client
    if _client is None:
        key = settings.supabase_service_role_key or settings.supabase_key
        _client = create_client(settings.supabase_url, key)
    return _client


class SupabaseStore(Store):
    def __init__(self, supabase: Client):
        self.supabase = supabase

    async def _run(self, entity: str, operation: str, query):
        try:
            result = await run_in_threadpool(query.execute)
        except Exception as e:
            if getattr(e, "code", None) == UNIQUE_VIOLATION:
                raise ConflictError(f"Duplicate {entity}")
            logger.error(f"Supabase {operation} on {entity} failed: {e}")
            raise StorageError(str(e))
        return result.data or []

    async def get(self, entity: str, id: str) -> Optional[Dict[str, Any]]:
        query = self.supabase.table(entity)\
            .select("*")\
            .eq("id", id)\
            .limit(1)
        rows = await self._run(entity, "get", query)
        return rows[0] if rows else None

    async def list(self, entity: str, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        query = self.supabase.table(entity).select("*")
        for column, value in (filters or {}).items():
            query = query.is_(column, "null") if value is None else query.eq(column, value)
        return await self._run(entity, "list", query.order("created_at"))

    async def create(self, entity: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        rows = await self._run(entity, "create", self.supabase.table(entity).insert(fields))
        if not rows:
            raise StorageError(f"Insert into {entity} returned no rows")
        return rows[0]

    async def update(self, entity: str, id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        query = self.supabase.table(entity)\
            .update(fields)\
            .eq("id", id)
        rows = await self._run(entity, "update", query)
        return rows[0] if rows else None

    async def delete(self, entity: str, id: str) -> int:
        query = self.supabase.table(entity)\
            .delete()\
            .eq("id", id)
        return len(await self._run(entity, "delete", query))

    async def delete_where(self, entity: str, filters: Dict[str, Any]) -> int:
        query = self.supabase.table(entity).delete()
        for column, value in filters.items():
            query = query.eq(column, value)
        return len(await self._run(entity, "delete_where", query))

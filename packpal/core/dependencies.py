"""
Core dependencies for route protection and the shared realtime objects
"""

from fastapi import Security
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from packpal.config.settings import settings
from packpal.core.exceptions import UnauthorizedError
from packpal.database.store import get_store
from packpal.database.supabase_store import get_supabase
from packpal.modules.auth.service import AuthService
from packpal.modules.notifications.service import NotificationService
from packpal.realtime.broadcaster import Change, ChangeBroadcaster
from packpal.realtime.gateway import RealtimeGateway
from packpal.realtime.registry import ConnectionRegistry
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

# Missing credentials are reported as UnauthorizedError, not FastAPI's 403
security = HTTPBearer(auto_error=False)

_registry = ConnectionRegistry()
_broadcaster: Optional[ChangeBroadcaster] = None


def get_auth_service() -> AuthService:
    return AuthService(get_supabase())


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> dict:
    """Extract current user info from JWT token"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")
    return get_auth_service().get_current_user(credentials.credentials)


def get_registry() -> ConnectionRegistry:
    return _registry


async def _notify(change: Change) -> None:
    await NotificationService(get_store()).on_change(change)


def get_broadcaster() -> ChangeBroadcaster:
    global _broadcaster
    if _broadcaster is None:
        _broadcaster = ChangeBroadcaster(_registry)
        _broadcaster.add_listener(_notify)
    return _broadcaster


async def verify_identity(message: Dict[str, Any]) -> str:
    """Resolve the user of a websocket authenticate message.

    A bearer token is required unless ws_allow_unverified_user_id is set, in
    which case a bare userId is trusted.
    """
    token = message.get("token")
    claimed = message.get("userId")
    claimed = str(claimed) if claimed is not None else None
    if token:
        user_data = await run_in_threadpool(get_auth_service().get_current_user, token)
        if claimed is not None and claimed != user_data["id"]:
            raise UnauthorizedError("Token does not match userId")
        return user_data["id"]
    if claimed and settings.ws_allow_unverified_user_id:
        return claimed
    raise UnauthorizedError("Authentication token required")


def get_gateway() -> RealtimeGateway:
    return RealtimeGateway(get_registry(), get_store(), verify_identity)


def reset_realtime() -> None:
    """Drop all live connections and listeners (used by tests)."""
    global _broadcaster
    _registry.clear()
    _broadcaster = None

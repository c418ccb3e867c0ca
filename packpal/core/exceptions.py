"""
Error taxonomy shared by the domain services, the HTTP routes and the
realtime gateway. Every error carries a stable ``kind`` for clients and tests.
"""

from typing import Any, Optional


class PackPalError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, detail: str = "", extra: Optional[Any] = None):
        super().__init__(detail)
        self.detail = detail or self.__class__.__name__
        self.extra = extra

    def to_dict(self) -> dict:
        body = {"kind": self.kind, "detail": self.detail}
        if self.extra is not None:
            body["errors"] = self.extra
        return body


class ValidationError(PackPalError):
    kind = "validation_error"
    status_code = 400


class NotFoundError(PackPalError):
    kind = "not_found"
    status_code = 404


class UnauthorizedError(PackPalError):
    kind = "unauthorized"
    status_code = 401


class ForbiddenError(PackPalError):
    kind = "forbidden"
    status_code = 403


class ConflictError(PackPalError):
    kind = "conflict"
    status_code = 409


class StorageError(PackPalError):
    """Persistence failure. The detail is logged, never sent to clients."""
    kind = "storage_error"
    status_code = 500
    public_detail = "Storage failure, please try again later"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "detail": self.public_detail}

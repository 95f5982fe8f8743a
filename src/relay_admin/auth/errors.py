"""
relay_admin.auth.errors

Closed error taxonomy for admin authentication.

Responsibilities:
- Enumerate every failure the guard (and config construction) can produce.
- Map each kind onto an HTTP status and a user-visible message.
- Render the `{"msg": ...}` JSON error body.
"""

from __future__ import annotations

import enum

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from relay_admin.observability.logging import get_logger

log = get_logger(__name__)


class AuthErrorKind(enum.StrEnum):
    # Values double as the public message text; treat them as a stable API contract.
    INVALID = "Invalid API Token"
    PARSE_HEADER = "Parse Header"
    MISSING_CONFIG = "Missing Config"
    MISSING_DB = "Missing Db"
    VERIFY = "Verifying"
    HASH = "Hashing"

    @property
    def status_code(self) -> int:
        if self in (AuthErrorKind.INVALID, AuthErrorKind.PARSE_HEADER):
            return HTTP_400_BAD_REQUEST
        return HTTP_500_INTERNAL_SERVER_ERROR


class AuthError(Exception):
    """
    Failed authentication.

    The underlying cause (header codec condition, bcrypt error) is kept on
    `__cause__` for operator diagnostics and is only surfaced in 500 messages.
    """

    def __init__(self, kind: AuthErrorKind) -> None:
        self.kind = kind
        super().__init__("Failed authentication")

    def __str__(self) -> str:
        return f"Failed authentication: {self.kind.value}"

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def message(self) -> str:
        if self.status_code < HTTP_500_INTERNAL_SERVER_ERROR or self.__cause__ is None:
            return self.kind.value
        return f"{self.kind.value}: {self.__cause__}"

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content={"msg": self.message})


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    cause = repr(exc.__cause__) if exc.__cause__ is not None else None
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        log.error("admin_auth.failed", kind=exc.kind.name, cause=cause)
    else:
        log.warning("admin_auth.rejected", kind=exc.kind.name, cause=cause)
    return exc.to_response()


# --- Module Notes -----------------------------------------------------------
# Both 400 kinds share one status; a wrong token and a malformed header differ
# only in the generic message text.

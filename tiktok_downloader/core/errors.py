from enum import Enum
from typing import Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from tiktok_downloader.i18n import i18n


class ErrorKind(str, Enum):
    """Failure classes a handler can report"""
    INVALID_INPUT = "invalid_input"
    BLOCKED = "blocked"
    BUSY = "busy"
    UPSTREAM_FAILURE = "upstream_failure"
    UPSTREAM_TIMEOUT = "upstream_timeout"
    INTERNAL_ERROR = "internal_error"


STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.BLOCKED: 403,
    ErrorKind.BUSY: 503,
    ErrorKind.UPSTREAM_FAILURE: 500,
    ErrorKind.UPSTREAM_TIMEOUT: 500,
    ErrorKind.INTERNAL_ERROR: 500,
}


class ServiceError(BaseModel):
    """Tagged failure returned by services instead of raising"""
    kind: ErrorKind
    message_key: str
    details: Optional[str] = None
    params: dict = {}

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


def error_response(error: ServiceError, locale: str) -> JSONResponse:
    """Render a service error as the public `{error, details?}` body"""
    body = {"error": i18n.get(error.message_key, locale=locale, **error.params)}
    if error.details:
        body["details"] = error.details
    return JSONResponse(status_code=error.status_code, content=body)

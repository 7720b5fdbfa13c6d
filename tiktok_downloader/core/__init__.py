from .errors import ErrorKind, ServiceError, error_response
from .security import SecurityValidator, UrlValidationResult, is_tiktok_url

__all__ = [
    "ErrorKind",
    "SecurityValidator",
    "ServiceError",
    "UrlValidationResult",
    "error_response",
    "is_tiktok_url",
]

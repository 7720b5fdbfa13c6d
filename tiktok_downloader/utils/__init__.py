from .filename import sanitize_filename
from .headers import browser_headers

__all__ = ["browser_headers", "sanitize_filename"]

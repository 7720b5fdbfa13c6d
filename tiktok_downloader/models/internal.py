from dataclasses import dataclass, field
from typing import AsyncIterator, Awaitable, Callable, Dict, Optional

from tiktok_downloader.core.errors import ServiceError
from tiktok_downloader.models.response import ResolvedMedia


@dataclass
class ResolveOutcome:
    """Result of a resolve call: media on success, error otherwise"""
    media: Optional[ResolvedMedia] = None
    error: Optional[ServiceError] = None


@dataclass
class RelayOutcome:
    """
    Result of a relay call.
    Exactly one of `body` (buffered) or `stream` (pass-through) is set on success.
    """
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    stream: Optional[AsyncIterator[bytes]] = None
    close: Optional[Callable[[], Awaitable[None]]] = None
    error: Optional[ServiceError] = None

from .internal import RelayOutcome, ResolveOutcome
from .request import DownloadRequest, RelayRequest
from .response import DownloadResponse, ErrorResponse, ResolvedMedia
from .upstream import UpstreamMetadataResponse

__all__ = [
    "DownloadRequest",
    "DownloadResponse",
    "ErrorResponse",
    "RelayOutcome",
    "RelayRequest",
    "ResolveOutcome",
    "ResolvedMedia",
    "UpstreamMetadataResponse",
]

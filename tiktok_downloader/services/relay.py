from typing import Dict, Optional
import httpx
from fastapi import Request
from tiktok_downloader.config.settings import config
from tiktok_downloader.core.errors import ErrorKind, ServiceError
from tiktok_downloader.core.logging import log_error, log_info
from tiktok_downloader.core.security import SecurityValidator, UrlValidationResult
from tiktok_downloader.models.internal import RelayOutcome
from tiktok_downloader.models.request import RelayRequest
from tiktok_downloader.utils.filename import sanitize_filename
from tiktok_downloader.utils.headers import browser_headers
from tiktok_downloader.utils.locale import safe_url_for_log


def download_headers(filename: str, content_length: Optional[int]) -> Dict[str, str]:
    """Headers forcing a browser save dialog instead of inline playback"""
    headers = {
        "Content-Type": config.relay.media_type,
        "Content-Disposition": f'attachment; filename="{filename}"',
        "Cache-Control": f"public, max-age={config.relay.cache_max_age}",
        "X-Content-Type-Options": "nosniff",
    }
    if content_length is not None:
        headers["Content-Length"] = str(content_length)
    return headers


class RelayService:
    """Fetch media bytes from a resolved URL and hand them back as a download"""

    @staticmethod
    async def validate(relay_request: RelayRequest) -> Optional[ServiceError]:
        if not relay_request.video_url:
            return ServiceError(kind=ErrorKind.INVALID_INPUT, message_key="error.video_url_required")

        result = await SecurityValidator.validate_url(relay_request.video_url)
        if result == UrlValidationResult.INVALID:
            return ServiceError(kind=ErrorKind.INVALID_INPUT, message_key="error.invalid_video_url")
        if result == UrlValidationResult.BLOCKED:
            return ServiceError(kind=ErrorKind.BLOCKED, message_key="error.private_ip")
        return None

    @staticmethod
    async def fetch(
        relay_request: RelayRequest,
        client: httpx.AsyncClient,
        request: Request
    ) -> RelayOutcome:
        """
        Single GET against an already validated media URL.
        Buffers the whole body unless pass-through streaming is enabled,
        in which case the caller owns `outcome.close`.
        """
        video_url = relay_request.video_url
        filename = sanitize_filename(relay_request.filename)
        log_info(request, f"Downloading TikTok video from: {safe_url_for_log(video_url)}")

        response: Optional[httpx.Response] = None
        try:
            upstream_request = client.build_request(
                "GET",
                video_url,
                headers=browser_headers(video_url),
                timeout=config.relay.timeout_seconds,
            )
            response = await client.send(upstream_request, stream=True)

            if not response.is_success:
                status_code = response.status_code
                await response.aclose()
                log_error(request, f"Failed to fetch video: {status_code}")
                return RelayOutcome(error=ServiceError(
                    kind=ErrorKind.UPSTREAM_FAILURE,
                    message_key="error.media_failed",
                    details=f"Upstream status {status_code}",
                ))

            if config.relay.stream_passthrough:
                length = response.headers.get("content-length")
                content_length = int(length) if length and length.isdigit() else None
                log_info(request, f"Streaming video as {filename}")
                return RelayOutcome(
                    headers=download_headers(filename, content_length),
                    stream=response.aiter_bytes(),
                    close=response.aclose,
                )

            body = await response.aread()
            await response.aclose()
            log_info(request, f"Relayed {len(body)} bytes as {filename}")
            return RelayOutcome(headers=download_headers(filename, len(body)), body=body)

        except httpx.TimeoutException:
            if response is not None:
                await response.aclose()
            log_error(request, f"Video fetch timed out after {config.relay.timeout_seconds}s")
            return RelayOutcome(error=ServiceError(
                kind=ErrorKind.UPSTREAM_TIMEOUT,
                message_key="error.media_timeout",
            ))
        except Exception as e:
            if response is not None:
                await response.aclose()
            log_error(request, f"Relay error: {str(e)}")
            return RelayOutcome(error=ServiceError(
                kind=ErrorKind.INTERNAL_ERROR,
                message_key="error.download_failed",
                details=str(e) or type(e).__name__,
            ))

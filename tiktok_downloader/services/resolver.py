from typing import Optional
import httpx
from fastapi import Request
from pydantic import ValidationError
from tiktok_downloader.config.settings import config
from tiktok_downloader.core.errors import ErrorKind, ServiceError
from tiktok_downloader.core.logging import log_error, log_info
from tiktok_downloader.core.security import is_tiktok_url
from tiktok_downloader.models.internal import ResolveOutcome
from tiktok_downloader.models.request import DownloadRequest
from tiktok_downloader.models.response import ResolvedMedia
from tiktok_downloader.models.upstream import UpstreamMetadataResponse, UpstreamVideoData
from tiktok_downloader.utils.headers import browser_headers
from tiktok_downloader.utils.locale import safe_url_for_log

class ResolverService:
    """Resolve a TikTok page URL into direct media URLs via the metadata API"""

    @staticmethod
    def validate(download_request: DownloadRequest) -> Optional[ServiceError]:
        """Reject empty or non-TikTok URLs before any network call"""
        url = (download_request.url or "").strip()
        if not url:
            return ServiceError(kind=ErrorKind.INVALID_INPUT, message_key="error.url_required")
        if not is_tiktok_url(url):
            return ServiceError(kind=ErrorKind.INVALID_INPUT, message_key="error.invalid_tiktok_url")
        return None

    @staticmethod
    def to_media(data: UpstreamVideoData) -> ResolvedMedia:
        """Map the upstream `data` object onto the public shape"""
        return ResolvedMedia(
            title=data.title or config.resolver.default_title,
            thumbnail=data.cover,
            author=data.author.nickname if data.author else None,
            description=data.title,
            download_url=data.play,
            no_watermark_url=data.wmplay,
        )

    @staticmethod
    async def resolve(
        download_request: DownloadRequest,
        client: httpx.AsyncClient,
        request: Request
    ) -> ResolveOutcome:
        """
        Single attempt against the metadata API.
        Every failure is returned as a tagged ServiceError, nothing is raised.
        """
        error = ResolverService.validate(download_request)
        if error:
            return ResolveOutcome(error=error)

        url = download_request.url.strip()
        log_info(request, f"Fetching TikTok video from: {safe_url_for_log(url)}")

        try:
            response = await client.get(
                config.resolver.api_url,
                params={"url": url},
                headers=browser_headers(),
                timeout=config.resolver.timeout_seconds,
            )

            if not response.is_success:
                log_error(request, f"Metadata API returned HTTP {response.status_code}")
                return ResolveOutcome(error=ServiceError(
                    kind=ErrorKind.UPSTREAM_FAILURE,
                    message_key="error.resolve_failed",
                ))

            try:
                envelope = UpstreamMetadataResponse.model_validate(response.json())
            except (ValueError, ValidationError) as e:
                log_error(request, f"Metadata API returned an unreadable body: {str(e)[:200]}")
                return ResolveOutcome(error=ServiceError(
                    kind=ErrorKind.UPSTREAM_FAILURE,
                    message_key="error.resolve_failed",
                ))

            if not envelope.ok:
                log_error(request, f"Metadata API error: code={envelope.code} msg={envelope.msg}")
                return ResolveOutcome(error=ServiceError(
                    kind=ErrorKind.UPSTREAM_FAILURE,
                    message_key="error.resolve_failed",
                ))

            media = ResolverService.to_media(envelope.data)
            log_info(request, f"Resolved video: {media.title}")
            return ResolveOutcome(media=media)

        except httpx.TimeoutException:
            log_error(request, f"Metadata API timed out after {config.resolver.timeout_seconds}s")
            return ResolveOutcome(error=ServiceError(
                kind=ErrorKind.UPSTREAM_TIMEOUT,
                message_key="error.resolve_timeout",
            ))
        except Exception as e:
            log_error(request, f"Resolve error: {str(e)}")
            return ResolveOutcome(error=ServiceError(
                kind=ErrorKind.INTERNAL_ERROR,
                message_key="error.process_failed",
                details=str(e) or type(e).__name__,
            ))

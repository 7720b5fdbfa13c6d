import httpx
from typing import Optional
from fastapi import APIRouter, Request, Depends, Query
from fastapi.responses import Response, StreamingResponse
from tiktok_downloader.config.settings import config
from tiktok_downloader.core.errors import ErrorKind, ServiceError, error_response
from tiktok_downloader.infra.concurrency import concurrency_limiter
from tiktok_downloader.infra.http import get_http_client
from tiktok_downloader.models.request import DownloadRequest, RelayRequest
from tiktok_downloader.models.response import DownloadResponse, ErrorResponse
from tiktok_downloader.services.relay import RelayService
from tiktok_downloader.services.resolver import ResolverService
from tiktok_downloader.utils.locale import get_locale
from tiktok_downloader.i18n import i18n

router = APIRouter()

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

@router.post(
    "/download",
    response_model=DownloadResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES
)
async def resolve_video(
    request: Request,
    download_request: DownloadRequest,
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """Resolve a TikTok link into direct media URLs"""
    locale = get_locale(request.headers.get("accept-language"))

    outcome = await ResolverService.resolve(download_request, client, request)
    if outcome.error:
        return error_response(outcome.error, locale)

    return DownloadResponse(
        success=True,
        message=i18n.get("response.video_resolved", locale=locale),
        data=outcome.media
    )

@router.get(
    "/download",
    responses={**ERROR_RESPONSES, 403: {"model": ErrorResponse}, 503: {"model": ErrorResponse}}
)
async def relay_video(
    request: Request,
    url: Optional[str] = Query(None, description="Direct media URL"),
    filename: Optional[str] = Query(None, description="Download filename"),
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """Relay media bytes as an attachment download"""
    locale = get_locale(request.headers.get("accept-language"))
    relay_request = RelayRequest(video_url=url, filename=filename)

    error = await RelayService.validate(relay_request)
    if error:
        return error_response(error, locale)

    if not concurrency_limiter.try_acquire(request):
        return error_response(
            ServiceError(
                kind=ErrorKind.BUSY,
                message_key="error.server_busy",
                params={"max": config.relay.max_concurrent}
            ),
            locale
        )

    try:
        outcome = await RelayService.fetch(relay_request, client, request)
    except BaseException:
        concurrency_limiter.release(request)
        raise

    if outcome.error:
        concurrency_limiter.release(request)
        return error_response(outcome.error, locale)

    if outcome.stream is not None:
        async def wrapped_stream():
            try:
                async for chunk in outcome.stream:
                    yield chunk
            finally:
                try:
                    if outcome.close:
                        await outcome.close()
                finally:
                    concurrency_limiter.release(request)

        return StreamingResponse(
            wrapped_stream(),
            headers=outcome.headers,
            media_type=config.relay.media_type
        )

    concurrency_limiter.release(request)
    return Response(
        content=outcome.body,
        headers=outcome.headers,
        media_type=config.relay.media_type
    )

@router.options("/download")
async def download_preflight():
    """Fixed CORS preflight answer"""
    return Response(status_code=200, headers=PREFLIGHT_HEADERS)

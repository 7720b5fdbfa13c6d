from fastapi import APIRouter

from tiktok_downloader.config.settings import config
from tiktok_downloader.core.state import state
from tiktok_downloader.i18n import i18n

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "status": i18n.get("response.status_running"),
        "service": config.api.title,
        "version": config.api.version,
        "active_relays": state.active_relays
    }


@router.get("/health")
async def health_check():
    """Lightweight health check"""
    return {"status": i18n.get("health.status")}

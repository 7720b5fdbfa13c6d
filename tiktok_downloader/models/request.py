from pydantic import BaseModel, Field
from typing import Optional


class DownloadRequest(BaseModel):
    """Body of a resolve call; validated against the TikTok pattern in the service"""
    url: Optional[str] = Field(None, description="TikTok page URL")


class RelayRequest(BaseModel):
    """Query parameters of a relay call"""
    video_url: Optional[str] = Field(None, description="Direct media URL from a previous resolve")
    filename: Optional[str] = Field(None, description="Suggested download filename")

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResolvedMedia(BaseModel):
    """Normalized video information returned to the client"""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    thumbnail: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    download_url: Optional[str] = Field(None, alias="downloadUrl")
    no_watermark_url: Optional[str] = Field(None, alias="noWatermarkUrl")


class DownloadResponse(BaseModel):
    """Successful resolve response"""
    success: bool = True
    message: str
    data: Optional[ResolvedMedia] = None


class ErrorResponse(BaseModel):
    """Error response body"""
    error: str
    details: Optional[str] = None

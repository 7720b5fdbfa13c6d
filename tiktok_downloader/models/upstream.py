from typing import Optional, Union

from pydantic import BaseModel


class UpstreamAuthor(BaseModel):
    nickname: Optional[str] = None
    unique_id: Optional[str] = None


class UpstreamVideoData(BaseModel):
    """`data` object of the metadata API; any field may be missing"""
    id: Optional[Union[str, int]] = None
    title: Optional[str] = None
    cover: Optional[str] = None
    author: Optional[UpstreamAuthor] = None
    play: Optional[str] = None
    wmplay: Optional[str] = None
    music: Optional[str] = None


class UpstreamMetadataResponse(BaseModel):
    """Envelope of the metadata API. `code == 0` with `data` means success."""
    code: Optional[int] = None
    msg: Optional[str] = None
    data: Optional[UpstreamVideoData] = None

    @property
    def ok(self) -> bool:
        return self.code == 0 and self.data is not None

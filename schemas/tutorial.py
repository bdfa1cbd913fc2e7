"""Tutorial video schemas."""

from typing import List, Optional

from schemas.base import CamelModel


class TutorialVideo(CamelModel):
    video_id: str
    title: str = ""
    description: str = ""
    channel_title: str = ""
    thumbnail_url: Optional[str] = None
    published_at: Optional[str] = None


class TutorialSearchResponse(CamelModel):
    query: str
    videos: List[TutorialVideo]

"""Workout tutorial search routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from schemas.tutorial import TutorialSearchResponse
from services.youtube_service import YouTubeService, get_youtube_service

router = APIRouter(prefix="/api/tutorials", tags=["tutorials"])


@router.get("", response_model=TutorialSearchResponse)
async def search_tutorials(
    q: Optional[str] = Query(None, description="Search term, e.g. HIIT or yoga"),
    youtube: YouTubeService = Depends(get_youtube_service),
):
    return await youtube.search_tutorials(q)

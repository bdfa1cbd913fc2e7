"""YouTube Data API client for workout tutorials."""

import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx

from config.settings import settings
from schemas.tutorial import TutorialSearchResponse, TutorialVideo
from utils.errors import ConfigurationError, UpstreamError
from utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_SEARCH = "full body workout"
MAX_RESULTS = 12
CACHE_TTL_SECONDS = 300
MAX_CACHE_ENTRIES = 256


def ensure_workout_query(term: Optional[str]) -> str:
    """Normalise a search term so it always targets workout videos."""
    trimmed = (term or "").strip()
    if not trimmed:
        return DEFAULT_SEARCH
    return trimmed if "workout" in trimmed.lower() else f"{trimmed} workout"


def parse_search_items(data: Dict[str, Any]) -> List[TutorialVideo]:
    """Keep only search results that point at a video."""
    items = data.get("items")
    if not isinstance(items, list):
        return []

    videos = []
    for item in items:
        video_id = (item.get("id") or {}).get("videoId")
        if not video_id:
            continue
        snippet = item.get("snippet") or {}
        thumbnails = snippet.get("thumbnails") or {}
        thumbnail = thumbnails.get("high") or thumbnails.get("medium") or thumbnails.get("default") or {}
        videos.append(TutorialVideo(
            video_id=video_id,
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            channel_title=snippet.get("channelTitle", ""),
            thumbnail_url=thumbnail.get("url"),
            published_at=snippet.get("publishedAt"),
        ))
    return videos


class YouTubeService:
    """Client for the YouTube search endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.api_key = settings.youtube_api_key if api_key is None else api_key
        self.search_url = settings.youtube_search_url
        self.transport = transport
        self.clock = clock
        self._cache: Dict[str, Tuple[float, TutorialSearchResponse]] = {}

    def _cache_get(self, key: str) -> Optional[TutorialSearchResponse]:
        item = self._cache.get(key)
        if not item:
            return None
        stored_at, value = item
        if self.clock() - stored_at > CACHE_TTL_SECONDS:
            self._cache.pop(key, None)
            return None
        return value

    def _cache_set(self, key: str, value: TutorialSearchResponse) -> None:
        now = self.clock()
        expired = [k for k, (stored_at, _) in self._cache.items() if now - stored_at > CACHE_TTL_SECONDS]
        for k in expired:
            del self._cache[k]

        self._cache.pop(key, None)
        while len(self._cache) >= MAX_CACHE_ENTRIES:
            # insertion order: first key is the oldest
            del self._cache[next(iter(self._cache))]
        self._cache[key] = (now, value)

    async def search_tutorials(self, term: Optional[str] = None) -> TutorialSearchResponse:
        if not self.api_key:
            raise ConfigurationError(
                "Missing YouTube API key. Set the YOUTUBE_API_KEY environment variable."
            )

        query = ensure_workout_query(term)
        cache_key = query.lower()
        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached

        params = {
            "key": self.api_key,
            "q": query,
            "part": "snippet",
            "type": "video",
            "maxResults": MAX_RESULTS,
            "videoEmbeddable": "true",
            "safeSearch": "strict",
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(self.search_url, params=params, timeout=10.0)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching videos from YouTube: {e}")
            raise UpstreamError("Failed to fetch videos") from e

        result = TutorialSearchResponse(query=query, videos=parse_search_items(data))
        logger.info(f"YouTube search '{query}' returned {len(result.videos)} videos")
        self._cache_set(cache_key, result)
        return result


youtube_service = None


def get_youtube_service() -> YouTubeService:
    global youtube_service
    if youtube_service is None:
        youtube_service = YouTubeService()
    return youtube_service

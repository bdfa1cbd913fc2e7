import httpx
import pytest

from api.main import app
from services.youtube_service import (
    DEFAULT_SEARCH,
    MAX_CACHE_ENTRIES,
    YouTubeService,
    ensure_workout_query,
    get_youtube_service,
)
from utils.errors import ConfigurationError, UpstreamError

SEARCH_RESULT = {
    "items": [
        {
            "id": {"kind": "youtube#video", "videoId": "abc123"},
            "snippet": {
                "title": "20 Min HIIT Workout",
                "description": "No equipment",
                "channelTitle": "Coach",
                "publishedAt": "2024-01-01T00:00:00Z",
                "thumbnails": {"high": {"url": "https://i.ytimg.com/vi/abc123/hq.jpg"}},
            },
        },
        {"id": {"kind": "youtube#channel", "channelId": "chan"}, "snippet": {"title": "A channel"}},
    ]
}


def make_service(handler):
    return YouTubeService(api_key="yt-key", transport=httpx.MockTransport(handler))


def test_ensure_workout_query():
    assert ensure_workout_query("") == DEFAULT_SEARCH
    assert ensure_workout_query(None) == DEFAULT_SEARCH
    assert ensure_workout_query("  yoga ") == "yoga workout"
    assert ensure_workout_query("Morning WORKOUT") == "Morning WORKOUT"


@pytest.mark.asyncio
async def test_search_sends_query_and_keeps_only_videos():
    seen = []

    def handler(request):
        seen.append(request.url.params)
        return httpx.Response(200, json=SEARCH_RESULT)

    result = await make_service(handler).search_tutorials("hiit")

    assert seen[0]["q"] == "hiit workout"
    assert seen[0]["maxResults"] == "12"
    assert seen[0]["safeSearch"] == "strict"
    assert seen[0]["videoEmbeddable"] == "true"
    assert [video.video_id for video in result.videos] == ["abc123"]
    assert result.videos[0].thumbnail_url.endswith("hq.jpg")


@pytest.mark.asyncio
async def test_results_are_cached_per_query():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=SEARCH_RESULT)

    service = make_service(handler)
    await service.search_tutorials("hiit")
    await service.search_tutorials("HIIT")

    assert len(calls) == 1


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.mark.asyncio
async def test_expired_entries_are_dropped_on_the_next_store():
    clock = FakeClock()
    service = YouTubeService(
        api_key="yt-key",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=SEARCH_RESULT)),
        clock=clock,
    )
    await service.search_tutorials("hiit")
    await service.search_tutorials("yoga")

    clock.now += 301
    await service.search_tutorials("pilates")

    assert list(service._cache) == ["pilates workout"]


@pytest.mark.asyncio
async def test_cache_size_is_capped():
    service = make_service(lambda request: httpx.Response(200, json=SEARCH_RESULT))

    for index in range(MAX_CACHE_ENTRIES + 5):
        await service.search_tutorials(f"move {index}")

    assert len(service._cache) == MAX_CACHE_ENTRIES
    assert "move 0 workout" not in service._cache
    assert f"move {MAX_CACHE_ENTRIES + 4} workout" in service._cache


@pytest.mark.asyncio
async def test_upstream_failure():
    service = make_service(lambda request: httpx.Response(403, json={"error": "quota"}))

    with pytest.raises(UpstreamError, match="Failed to fetch videos"):
        await service.search_tutorials("yoga")


@pytest.mark.asyncio
async def test_missing_key():
    with pytest.raises(ConfigurationError):
        await YouTubeService(api_key="").search_tutorials("yoga")


def test_tutorials_endpoint(client):
    service = make_service(lambda request: httpx.Response(200, json=SEARCH_RESULT))
    app.dependency_overrides[get_youtube_service] = lambda: service

    response = client.get("/api/tutorials", params={"q": "hiit"})

    assert response.status_code == 200
    body = response.json()
    assert body["query"] == "hiit workout"
    assert body["videos"][0]["videoId"] == "abc123"
    assert body["videos"][0]["channelTitle"] == "Coach"


def test_tutorials_endpoint_reports_upstream_errors(client):
    service = make_service(lambda request: httpx.Response(500))
    app.dependency_overrides[get_youtube_service] = lambda: service

    response = client.get("/api/tutorials")

    assert response.status_code == 502
    assert response.json()["message"] == "Failed to fetch videos"

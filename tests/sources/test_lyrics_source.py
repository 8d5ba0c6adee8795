"""가사 검색 소스 테스트."""

import httpx
import pytest

from bot_commands.fetcher import HttpJsonFetcher
from bot_commands.sources.lyrics import (
    LyricsOvhProvider,
    LyricsSearch,
    QueryLyricsProvider,
    find_lyrics,
)


def _search(responses: dict[str, httpx.Response], requested: list[str]) -> LyricsSearch:
    """호스트별 응답을 돌려주는 LyricsSearch를 만든다."""

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.host)
        return responses.get(request.url.host, httpx.Response(500))

    fetcher = HttpJsonFetcher(timeout=1.0, transport=httpx.MockTransport(handler))
    return LyricsSearch(fetcher)


class TestFindLyrics:
    """find_lyrics 테스트."""

    @pytest.mark.parametrize(
        "payload",
        [
            {"result": {"lyrics": "text"}},
            {"lyrics": "text"},
            {"data": {"lyrics": "text"}},
        ],
    )
    def test_known_paths(self, payload: dict) -> None:
        """알려진 세 경로에서 가사를 찾는다."""
        assert find_lyrics(payload) == "text"

    def test_path_priority(self) -> None:
        """result.lyrics가 가장 우선한다."""
        payload = {"result": {"lyrics": "first"}, "lyrics": "second"}
        assert find_lyrics(payload) == "first"

    @pytest.mark.parametrize(
        "payload",
        [{}, {"lyrics": ""}, {"result": "x"}, {"data": {"lyrics": None}}, [], None, "lyrics"],
    )
    def test_missing(self, payload: object) -> None:
        """가사가 없거나 비어 있으면 None이다."""
        assert find_lyrics(payload) is None


class TestProviders:
    """제공자 URL 생성 테스트."""

    def test_query_provider_encodes_title(self) -> None:
        """제목 전체를 인코딩해 쿼리에 넣는다."""
        provider = QueryLyricsProvider("p", "https://lyrics.example.com/api", "q")
        assert (
            provider.build_url("Faded & Alone/2")
            == "https://lyrics.example.com/api?q=Faded%20%26%20Alone%2F2"
        )

    def test_ovh_split_on_first_dash(self) -> None:
        """첫 번째 '-' 기준으로 아티스트와 곡명을 나눈다."""
        assert LyricsOvhProvider.split_title("Alan Walker - Faded") == ("Alan Walker", "Faded")
        assert LyricsOvhProvider.split_title("A-ha - Take On Me") == ("A", "ha - Take On Me")

    def test_ovh_missing_half(self) -> None:
        """곡명이 없으면 빈 문자열, 아티스트가 없으면 제목 전체를 쓴다."""
        assert LyricsOvhProvider.split_title("Faded") == ("Faded", "")
        assert LyricsOvhProvider.split_title("-Faded") == ("-Faded", "Faded")

    def test_ovh_url(self) -> None:
        """아티스트와 곡명을 각각 인코딩한다."""
        provider = LyricsOvhProvider()
        assert provider.build_url("Alan Walker - Faded") == "https://api.lyrics.ovh/v1/Alan%20Walker/Faded"
        assert provider.build_url("Faded") == "https://api.lyrics.ovh/v1/Faded/"


class TestLyricsSearch:
    """LyricsSearch 테스트."""

    @pytest.mark.asyncio
    async def test_falls_through_to_third_provider(self) -> None:
        """1번 실패, 2번 가사 없음이면 3번까지 조회한다."""
        requested: list[str] = []
        search = _search(
            {
                "lyricsapi.fly.dev": httpx.Response(503),
                "api.lyrics.ovh": httpx.Response(200, json={"error": "No lyrics found"}),
                "some-random-api.com": httpx.Response(200, json={"data": {"lyrics": "la la"}}),
            },
            requested,
        )

        assert await search.search("Alan Walker - Faded") == "la la"
        assert requested == ["lyricsapi.fly.dev", "api.lyrics.ovh", "some-random-api.com"]

    @pytest.mark.asyncio
    async def test_stops_at_first_success(self) -> None:
        """가사를 찾으면 이후 제공자는 조회하지 않는다."""
        requested: list[str] = []
        search = _search(
            {
                "lyricsapi.fly.dev": httpx.Response(200, json={"result": {"lyrics": "found"}}),
                "api.lyrics.ovh": httpx.Response(200, json={"lyrics": "unused"}),
            },
            requested,
        )

        assert await search.search("Faded") == "found"
        assert requested == ["lyricsapi.fly.dev"]

    @pytest.mark.asyncio
    async def test_second_provider(self) -> None:
        """1번이 실패하면 2번 결과를 쓴다."""
        requested: list[str] = []
        search = _search(
            {"api.lyrics.ovh": httpx.Response(200, json={"lyrics": "ovh lyrics"})},
            requested,
        )

        assert await search.search("Alan Walker - Faded") == "ovh lyrics"
        assert requested == ["lyricsapi.fly.dev", "api.lyrics.ovh"]

    @pytest.mark.asyncio
    async def test_transport_errors(self) -> None:
        """전송 오류가 나도 다음 제공자로 넘어가고, 모두 실패하면 None이다."""
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.host)
            raise httpx.ConnectError("unreachable", request=request)

        fetcher = HttpJsonFetcher(timeout=1.0, transport=httpx.MockTransport(handler))
        assert await LyricsSearch(fetcher).search("Faded") is None
        assert len(requested) == 3

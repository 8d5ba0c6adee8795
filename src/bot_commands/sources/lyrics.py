"""가사 검색 소스."""

import logging
from functools import partial
from typing import Any
from urllib.parse import quote

from bot_commands.fallback import first_success
from bot_commands.fetcher import HttpJsonFetcher
from bot_commands.sources.base import LyricsProvider

logger = logging.getLogger(__name__)

# 제공자마다 응답 형식이 달라 알려진 경로를 순서대로 확인한다
LYRICS_PATHS: tuple[tuple[str, ...], ...] = (
    ("result", "lyrics"),
    ("lyrics",),
    ("data", "lyrics"),
)


def _encode(value: str) -> str:
    return quote(value, safe="")


def find_lyrics(payload: Any) -> str | None:
    """응답 JSON에서 가사 텍스트를 찾는다."""
    for path in LYRICS_PATHS:
        node = payload
        for key in path:
            if not isinstance(node, dict):
                node = None
                break
            node = node.get(key)
        if isinstance(node, str) and node:
            return node
    return None


class QueryLyricsProvider:
    """곡 제목 전체를 쿼리 파라미터로 넘기는 제공자."""

    def __init__(self, name: str, base_url: str, param: str) -> None:
        """
        Args:
            name: 로그에 표시할 이름
            base_url: 검색 엔드포인트
            param: 제목을 담을 쿼리 파라미터 이름
        """
        self.name = name
        self.base_url = base_url
        self.param = param

    def build_url(self, song_title: str) -> str:
        """검색 URL을 생성한다."""
        return f"{self.base_url}?{self.param}={_encode(song_title)}"


class LyricsOvhProvider:
    """``/v1/{artist}/{title}`` 경로를 쓰는 lyrics.ovh 제공자."""

    name = "lyrics.ovh"

    def __init__(self, base_url: str = "https://api.lyrics.ovh/v1") -> None:
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def split_title(song_title: str) -> tuple[str, str]:
        """``아티스트 - 곡명`` 을 첫 번째 ``-`` 기준으로 나눈다.

        아티스트 부분이 비면 제목 전체를, 곡명 부분이 비면 빈 문자열을 쓴다.
        """
        artist, _, track = song_title.partition("-")
        return artist.strip() or song_title.strip(), track.strip()

    def build_url(self, song_title: str) -> str:
        """검색 URL을 생성한다."""
        artist, track = self.split_title(song_title)
        return f"{self.base_url}/{_encode(artist)}/{_encode(track)}"


DEFAULT_PROVIDERS: tuple[LyricsProvider, ...] = (
    QueryLyricsProvider("lyricsapi.fly.dev", "https://lyricsapi.fly.dev/api/lyrics", "q"),
    LyricsOvhProvider(),
    QueryLyricsProvider("some-random-api", "https://some-random-api.com/lyrics", "title"),
)


class LyricsSearch:
    """여러 가사 제공자를 우선순위대로 조회한다."""

    def __init__(
        self,
        fetcher: HttpJsonFetcher,
        providers: tuple[LyricsProvider, ...] = DEFAULT_PROVIDERS,
    ) -> None:
        """
        Args:
            fetcher: HTTP JSON 요청 헬퍼
            providers: 조회 순서대로 나열한 제공자 목록
        """
        self.fetcher = fetcher
        self.providers = providers

    async def _query(self, provider: LyricsProvider, song_title: str) -> str | None:
        """제공자 하나를 조회한다. 가사가 없으면 None."""
        url = provider.build_url(song_title)
        result = await self.fetcher.fetch_json(url)
        if not result.ok:
            logger.info(f"Lyrics provider {provider.name} failed (status={result.status})")
            return None

        lyrics = find_lyrics(result.data)
        if lyrics is None:
            logger.info(f"Lyrics provider {provider.name} returned no lyrics")
        return lyrics

    async def search(self, song_title: str) -> str | None:
        """처음으로 가사를 돌려준 제공자의 결과를 반환한다.

        제공자는 동시에가 아니라 순서대로 하나씩 조회한다.
        """
        return await first_success(
            partial(self._query, provider, song_title) for provider in self.providers
        )

"""소스 프로토콜 정의."""

from typing import Protocol


class LyricsProvider(Protocol):
    """가사 제공자 프로토콜."""

    name: str

    def build_url(self, song_title: str) -> str:
        """검색 URL을 생성한다."""
        ...

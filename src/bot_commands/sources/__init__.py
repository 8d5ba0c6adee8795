"""데이터 소스 모듈."""

from bot_commands.sources.base import LyricsProvider
from bot_commands.sources.github import GitHubRepositorySource
from bot_commands.sources.lyrics import (
    DEFAULT_PROVIDERS,
    LyricsOvhProvider,
    LyricsSearch,
    QueryLyricsProvider,
)

__all__ = [
    "DEFAULT_PROVIDERS",
    "GitHubRepositorySource",
    "LyricsOvhProvider",
    "LyricsProvider",
    "LyricsSearch",
    "QueryLyricsProvider",
]

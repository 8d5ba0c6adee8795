"""채팅 명령 핸들러."""

from bot_commands.commands.github import RepositoryInfoReporter, github_command
from bot_commands.commands.lyrics import LyricsReporter, lyrics_command

__all__ = [
    "LyricsReporter",
    "RepositoryInfoReporter",
    "github_command",
    "lyrics_command",
]

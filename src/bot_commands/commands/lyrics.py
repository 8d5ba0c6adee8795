"""가사 검색 명령."""

import logging
from typing import Any

from bot_commands.config import Settings, settings
from bot_commands.fetcher import HttpJsonFetcher
from bot_commands.notifiers.chat import ChatReplier, Connection
from bot_commands.sources.lyrics import LyricsSearch

logger = logging.getLogger(__name__)

# 메신저 한 메시지당 최대 길이 (UTF-16 코드 단위)
MAX_MESSAGE_UNITS = 4096

USAGE_TEXT = "🔍 Please enter the song name!\nExample: *.lyrics Faded Alan Walker*"
SEARCHING_TEXT = "🎵 Searching lyrics..."
NOT_FOUND_TEXT = "❌ No lyrics found for: *{title}*"
ERROR_TEXT = "❌ Error fetching lyrics. Try another song name."


def _utf16_units(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    """UTF-16 코드 단위 기준 길이."""
    return sum(_utf16_units(char) for char in text)


def split_message(text: str, limit: int = MAX_MESSAGE_UNITS) -> list[str]:
    """긴 텍스트를 UTF-16 코드 단위 ``limit`` 이하의 조각으로 나눈다.

    BMP 밖의 문자(이모지 등)는 2단위로 세며, 한 문자를 두 조각으로 쪼개지 않는다.
    그래서 경계에 걸린 조각은 ``limit`` 보다 1단위 짧을 수 있다.
    """
    chunks: list[str] = []
    start = 0
    units = 0
    for index, char in enumerate(text):
        width = _utf16_units(char)
        if units + width > limit:
            chunks.append(text[start:index])
            start = index
            units = 0
        units += width
    chunks.append(text[start:])
    return chunks


class LyricsReporter:
    """곡 제목으로 가사를 찾아 채팅방에 전송한다."""

    def __init__(
        self,
        config: Settings | None = None,
        fetcher: HttpJsonFetcher | None = None,
        search: LyricsSearch | None = None,
    ) -> None:
        """
        Args:
            config: 애플리케이션 설정. None이면 전역 설정 사용.
            fetcher: HTTP JSON 요청 헬퍼. None이면 설정값으로 생성.
            search: 가사 검색기. None이면 기본 제공자 목록 사용.
        """
        self.config = config or settings
        self.fetcher = fetcher or HttpJsonFetcher(timeout=self.config.http_timeout)
        self.search = search or LyricsSearch(self.fetcher)

    async def report(
        self,
        connection: Connection,
        chat_id: str,
        song_title: str | None,
        message: Any,
    ) -> None:
        """가사를 검색해 전송한다.

        Args:
            connection: 메신저 연결
            chat_id: 응답할 채팅방 ID
            song_title: 검색할 곡 제목
            message: 명령을 보낸 원본 메시지 (인용 답장에 사용)
        """
        replier = ChatReplier(connection, chat_id, quoted=message)
        try:
            if not song_title:
                await replier.send_text(USAGE_TEXT)
                return

            try:
                await replier.send_text(SEARCHING_TEXT)
            except Exception as e:
                logger.warning(f"Failed to send searching notice: {e!r}")

            lyrics = await self.search.search(song_title)
            if not lyrics:
                logger.info(f"No lyrics found: {song_title}")
                await replier.send_text(NOT_FOUND_TEXT.format(title=song_title))
                return

            # 순서 보장을 위해 하나씩 전송한다
            for part in split_message(lyrics):
                await replier.send_text(part)
        except Exception:
            logger.exception("Lyrics command failed")
            await replier.send_failure(ERROR_TEXT)


async def lyrics_command(
    connection: Connection, chat_id: str, song_title: str | None, message: Any
) -> None:
    """디스패처용 진입점."""
    await LyricsReporter().report(connection, chat_id, song_title, message)

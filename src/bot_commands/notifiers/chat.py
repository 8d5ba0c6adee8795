"""채팅 응답 전송 모듈."""

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Connection(Protocol):
    """메신저 연결 프로토콜.

    명령 디스패처가 넘겨주는 연결 객체는 이 메서드만 제공하면 된다.
    """

    async def send_message(
        self,
        chat_id: str,
        content: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> Any:
        """채팅방에 메시지를 전송한다.

        Args:
            chat_id: 채팅방 ID
            content: ``{"text": ...}`` 또는 ``{"image": ..., "caption": ...}``
            options: ``{"quoted": 원본 메시지}``
        """
        ...


class ChatReplier:
    """명령을 보낸 메시지에 인용 답장을 보낸다."""

    def __init__(self, connection: Connection, chat_id: str, quoted: Any = None) -> None:
        """
        Args:
            connection: 메신저 연결
            chat_id: 응답할 채팅방 ID
            quoted: 인용할 원본 메시지
        """
        self.connection = connection
        self.chat_id = chat_id
        self.quoted = quoted

    def _options(self) -> dict[str, Any]:
        return {"quoted": self.quoted}

    async def send_text(self, text: str) -> None:
        """텍스트 메시지를 전송한다."""
        await self.connection.send_message(self.chat_id, {"text": text}, self._options())

    async def send_image(self, image: bytes, caption: str) -> None:
        """이미지와 캡션을 전송한다."""
        await self.connection.send_message(
            self.chat_id,
            {"image": image, "caption": caption},
            self._options(),
        )

    async def send_failure(self, text: str) -> None:
        """오류 안내를 전송한다. 전송 자체가 실패해도 예외를 던지지 않는다."""
        try:
            await self.send_text(text)
        except Exception:
            logger.exception(f"Failed to send failure notice to {self.chat_id}")

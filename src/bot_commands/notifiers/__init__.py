"""알림(응답 전송) 모듈."""

from bot_commands.notifiers.chat import ChatReplier, Connection
from bot_commands.notifiers.console import ConsoleConnection

__all__ = ["ChatReplier", "Connection", "ConsoleConnection"]

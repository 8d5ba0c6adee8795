"""수신 메시지 해석 모듈."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

REPO_PATTERN = re.compile(r"([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+)")


class _Shape(BaseModel):
    """메시지 형태 공통 설정 (dict와 속성 객체 모두 허용)."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    def body(self) -> str:
        raise NotImplementedError


class _ConversationBody(_Shape):
    conversation: str


class ConversationMessage(_Shape):
    """``message.conversation`` 에 본문이 있는 일반 메시지."""

    message: _ConversationBody

    def body(self) -> str:
        return self.message.conversation


class _ExtendedText(_Shape):
    text: str


class _ExtendedTextBody(_Shape):
    extendedTextMessage: _ExtendedText  # noqa: N815


class ExtendedTextMessage(_Shape):
    """답장/링크 미리보기 등 ``extendedTextMessage.text`` 형태."""

    message: _ExtendedTextBody

    def body(self) -> str:
        return self.message.extendedTextMessage.text


class PlainTextMessage(_Shape):
    """래퍼가 ``text`` 필드를 직접 채워 주는 형태."""

    text: str

    def body(self) -> str:
        return self.text


class PushNameMessage(_Shape):
    """본문이 없을 때 발신자 표시 이름으로 대체한다."""

    pushName: str  # noqa: N815

    def body(self) -> str:
        return self.pushName


MESSAGE_SHAPES: tuple[type[_Shape], ...] = (
    ConversationMessage,
    ExtendedTextMessage,
    PlainTextMessage,
    PushNameMessage,
)


def extract_text(message: Any) -> str:
    """메시지 객체에서 텍스트를 추출한다.

    알려진 형태를 순서대로 검사해 처음으로 비어 있지 않은 텍스트를 반환한다.
    어느 형태에도 맞지 않거나 오류가 나면 빈 문자열을 반환한다.
    """
    if message is None:
        return ""
    for shape in MESSAGE_SHAPES:
        try:
            text = shape.model_validate(message).body().strip()
        except (ValidationError, AttributeError, TypeError):
            continue
        if text:
            return text
    return ""


def parse_repository(text: str, default: str) -> str:
    """텍스트에서 ``owner/repo`` 를 찾는다. 없으면 기본값을 반환한다."""
    match = REPO_PATTERN.search(text or "")
    if match:
        return f"{match.group(1)}/{match.group(2)}"
    return default

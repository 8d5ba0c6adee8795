"""데이터 모델 정의."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class FetchResult(BaseModel):
    """HTTP JSON 요청 결과.

    실패는 예외가 아니라 ``ok=False`` 값으로 표현된다.
    """

    ok: bool = Field(description="2xx 응답이고 JSON 파싱에 성공했는지 여부")
    status: int | None = Field(default=None, description="HTTP 상태 코드 (전송 실패 시 None)")
    data: Any = Field(default=None, description="파싱된 JSON 본문")


class RepositorySnapshot(BaseModel):
    """리포트에 필요한 저장소 기본 정보."""

    name: str = Field(description="저장소 이름")
    full_name: str = Field(description="저장소 전체 이름 (owner/repo)")
    size_kb: int | None = Field(default=None, description="저장소 크기 (KB)")
    updated_at: datetime | None = Field(default=None, description="마지막 업데이트 시각")
    html_url: str | None = Field(default=None, description="저장소 URL")
    stars: int = Field(default=0, description="스타 수")
    forks: int = Field(default=0, description="포크 수")
    watchers: int = Field(default=0, description="워처 수")
    avatar_url: str | None = Field(default=None, description="소유자 아바타 URL")
    topics: list[str] = Field(default_factory=list, description="토픽 목록")

    @classmethod
    def from_api(cls, payload: dict[str, Any], repo: str) -> "RepositorySnapshot":
        """GitHub ``/repos/{repo}`` 응답에서 스냅샷을 만든다."""
        owner = payload.get("owner") or {}
        return cls(
            name=payload.get("name") or repo,
            full_name=payload.get("full_name") or repo,
            size_kb=payload.get("size"),
            updated_at=payload.get("updated_at"),
            html_url=payload.get("html_url"),
            stars=payload.get("stargazers_count") or 0,
            forks=payload.get("forks_count") or 0,
            watchers=payload.get("watchers_count") or 0,
            avatar_url=owner.get("avatar_url"),
            topics=payload.get("topics") or [],
        )


class CommitSummary(BaseModel):
    """최신 커밋 요약."""

    message: str = Field(description="커밋 메시지 첫 줄")
    author: str = Field(description="작성자 이름")
    date: datetime | None = Field(default=None, description="작성 시각")


class LanguageShare(BaseModel):
    """언어별 코드 비율."""

    name: str = Field(description="언어 이름")
    byte_count: int = Field(description="코드 바이트 수")
    percent: int = Field(description="전체 대비 비율 (정수 반올림)")


class ReleaseInfo(BaseModel):
    """최신 릴리스 정보."""

    tag: str = Field(description="태그 이름")
    name: str | None = Field(default=None, description="릴리스 제목")


class Contributor(BaseModel):
    """기여자 정보."""

    login: str = Field(description="GitHub 로그인")
    contributions: int = Field(default=0, description="기여 횟수")


class AuxiliaryFacts(BaseModel):
    """부가 정보 모음.

    각 항목은 독립적으로 수집되며, 하나가 비어 있어도 나머지에는 영향이 없다.
    """

    latest_commit: CommitSummary | None = None
    languages: list[LanguageShare] = Field(default_factory=list)
    open_pulls: int | None = None
    release: ReleaseInfo | None = None
    latest_tag: str | None = None
    topics: list[str] = Field(default_factory=list)
    top_level_items: int | None = None
    contributors: list[Contributor] = Field(default_factory=list)
    workflow_count: int | None = None


class BotMetadata(BaseModel):
    """로컬 봇 메타데이터."""

    version: str | None = Field(default=None, description="패키지 버전")
    uptime_seconds: float = Field(default=0.0, description="프로세스 실행 시간 (초)")

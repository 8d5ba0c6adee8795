"""GitHub REST API 소스."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from bot_commands.fetcher import HttpJsonFetcher
from bot_commands.formatting import language_breakdown
from bot_commands.models import (
    AuxiliaryFacts,
    CommitSummary,
    Contributor,
    FetchResult,
    LanguageShare,
    ReleaseInfo,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _non_empty_list(result: FetchResult) -> list[Any] | None:
    if result.ok and isinstance(result.data, list) and result.data:
        return result.data
    return None


def parse_latest_commit(result: FetchResult) -> CommitSummary | None:
    """``/commits?per_page=1`` 응답에서 최신 커밋을 추출한다."""
    commits = _non_empty_list(result)
    if not commits:
        return None

    entry = commits[0]
    commit = entry.get("commit") or {}
    author = commit.get("author") or {}
    message = (commit.get("message") or "").split("\n")[0]
    return CommitSummary(
        message=message or "No message",
        author=author.get("name") or (entry.get("author") or {}).get("login") or "Unknown",
        date=author.get("date"),
    )


def parse_open_pulls(result: FetchResult) -> int | None:
    """열린 PR 수. 요청이 실패하면 None."""
    if not result.ok:
        return None
    return len(result.data) if isinstance(result.data, list) else 0


def parse_release(result: FetchResult) -> ReleaseInfo | None:
    """``/releases/latest`` 응답에서 릴리스 정보를 추출한다."""
    if not result.ok or not isinstance(result.data, dict):
        return None
    tag = result.data.get("tag_name")
    if not tag:
        return None
    return ReleaseInfo(tag=tag, name=result.data.get("name") or None)


def parse_latest_tag(result: FetchResult) -> str | None:
    """``/tags?per_page=1`` 응답에서 최신 태그 이름을 추출한다."""
    tags = _non_empty_list(result)
    if not tags:
        return None
    name = tags[0].get("name")
    return name if isinstance(name, str) and name else None


def parse_contributors(result: FetchResult, limit: int = 3) -> list[Contributor]:
    """상위 기여자 목록."""
    contributors = _non_empty_list(result) or []
    return [
        Contributor(login=c.get("login") or "unknown", contributions=c.get("contributions") or 0)
        for c in contributors[:limit]
    ]


def parse_languages(result: FetchResult) -> list[LanguageShare]:
    """``/languages`` 응답을 비율 목록으로 변환한다."""
    if not result.ok or not isinstance(result.data, dict) or not result.data:
        return []
    return language_breakdown(result.data)


def parse_top_level_items(result: FetchResult) -> int | None:
    """최상위 디렉터리 항목 수."""
    if not result.ok or not isinstance(result.data, list):
        return None
    return len(result.data)


def parse_topics(result: FetchResult) -> list[str]:
    """저장소 전체 정보에서 토픽을 추출한다."""
    if not result.ok or not isinstance(result.data, dict):
        return []
    return [t for t in result.data.get("topics") or [] if isinstance(t, str)]


def _parse_safely(
    name: str,
    parser: Callable[[FetchResult], T],
    result: FetchResult,
    default: T,
) -> T:
    """파서를 실행한다. 응답 형식이 예상과 다르면 기본값을 반환한다."""
    try:
        return parser(result)
    except (ValidationError, AttributeError, TypeError, ValueError) as e:
        logger.warning(f"Malformed {name} payload: {e!r}")
        return default


class GitHubRepositorySource:
    """GitHub REST API에서 저장소 정보를 수집한다."""

    def __init__(
        self,
        fetcher: HttpJsonFetcher,
        api_url: str = "https://api.github.com",
    ) -> None:
        """
        Args:
            fetcher: HTTP JSON 요청 헬퍼
            api_url: GitHub REST API 주소
        """
        self.fetcher = fetcher
        # 아바타는 API 응답에 담긴 외부 주소이므로 인증 헤더를 보내지 않는다
        self.media_fetcher = fetcher.without_headers()
        self.api_url = api_url.rstrip("/")

    def _repo_url(self, repo: str, path: str = "") -> str:
        """``/repos/{repo}{path}`` URL을 생성한다."""
        return f"{self.api_url}/repos/{repo}{path}"

    async def fetch_repository(self, repo: str) -> FetchResult:
        """저장소 기본 정보를 가져온다."""
        return await self.fetcher.fetch_json(self._repo_url(repo))

    async def fetch_auxiliary(self, repo: str) -> AuxiliaryFacts:
        """부가 정보 8종을 병렬로 가져온다.

        각 요청은 독립적이며, 실패한 요청의 항목만 비워 둔다.
        """
        (
            commits,
            languages,
            pulls,
            release,
            contents,
            tags,
            contributors,
            full_record,
        ) = await asyncio.gather(
            self.fetcher.fetch_json(self._repo_url(repo, "/commits?per_page=1")),
            self.fetcher.fetch_json(self._repo_url(repo, "/languages")),
            self.fetcher.fetch_json(self._repo_url(repo, "/pulls?state=open&per_page=100")),
            self.fetcher.fetch_json(self._repo_url(repo, "/releases/latest")),
            self.fetcher.fetch_json(self._repo_url(repo, "/contents")),
            self.fetcher.fetch_json(self._repo_url(repo, "/tags?per_page=1")),
            self.fetcher.fetch_json(self._repo_url(repo, "/contributors?per_page=3")),
            self.fetcher.fetch_json(self._repo_url(repo)),
        )

        failed = [
            name
            for name, result in (
                ("commits", commits),
                ("languages", languages),
                ("pulls", pulls),
                ("release", release),
                ("contents", contents),
                ("tags", tags),
                ("contributors", contributors),
                ("repository", full_record),
            )
            if not result.ok
        ]
        if failed:
            logger.info(f"Auxiliary fetches failed for {repo}: {', '.join(failed)}")

        return AuxiliaryFacts(
            latest_commit=_parse_safely("commits", parse_latest_commit, commits, None),
            languages=_parse_safely("languages", parse_languages, languages, []),
            open_pulls=_parse_safely("pulls", parse_open_pulls, pulls, None),
            release=_parse_safely("release", parse_release, release, None),
            latest_tag=_parse_safely("tags", parse_latest_tag, tags, None),
            topics=_parse_safely("repository", parse_topics, full_record, []),
            top_level_items=_parse_safely("contents", parse_top_level_items, contents, None),
            contributors=_parse_safely("contributors", parse_contributors, contributors, []),
        )

    async def fetch_workflow_count(self, repo: str) -> int | None:
        """``.github/workflows`` 디렉터리의 워크플로 파일 수."""
        result = await self.fetcher.fetch_json(
            self._repo_url(repo, "/contents/.github/workflows")
        )
        workflows = _non_empty_list(result)
        return len(workflows) if workflows else None

    async def fetch_avatar(self, avatar_url: str | None) -> bytes | None:
        """소유자 아바타 이미지를 내려받는다."""
        if not avatar_url:
            return None
        return await self.media_fetcher.fetch_bytes(avatar_url)

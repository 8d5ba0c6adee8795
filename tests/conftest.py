"""공통 테스트 픽스처."""

from pathlib import Path
from typing import Any

import httpx
import pytest

from bot_commands.config import Settings
from bot_commands.fetcher import HttpJsonFetcher


class FakeConnection:
    """전송된 메시지를 기록하는 가짜 메신저 연결."""

    def __init__(self, fail_on: set[int] | None = None) -> None:
        """
        Args:
            fail_on: 예외를 던질 전송 순번 (0부터)
        """
        self.sent: list[tuple[str, dict[str, Any], dict[str, Any] | None]] = []
        self.fail_on = fail_on or set()
        self._calls = 0

    async def send_message(
        self,
        chat_id: str,
        content: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> None:
        index = self._calls
        self._calls += 1
        if index in self.fail_on:
            raise ConnectionError("send failed")
        self.sent.append((chat_id, content, options))

    @property
    def texts(self) -> list[str]:
        """전송된 텍스트 (이미지는 캡션) 목록."""
        return [content.get("text", content.get("caption", "")) for _, content, _ in self.sent]


@pytest.fixture
def connection() -> FakeConnection:
    """FakeConnection 인스턴스를 반환한다."""
    return FakeConnection()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """로컬 파일과 환경 변수에 의존하지 않는 설정을 반환한다."""
    return Settings(
        _env_file=None,
        github_repo="default/repo",
        github_token=None,
        github_api_url="https://api.github.com",
        timezone="Asia/Colombo",
        http_timeout=5.0,
        version_file=tmp_path / "missing.toml",
        image_path=tmp_path / "missing.jpg",
    )


class GitHubApiStub:
    """URL별 응답을 돌려주는 GitHub API 스텁.

    등록되지 않은 URL은 404로 응답한다.
    """

    def __init__(self) -> None:
        self.routes: dict[str, list[httpx.Response]] = {}
        self.requested: list[str] = []
        self.headers: dict[str, httpx.Headers] = {}

    def add(self, url: str, *responses: httpx.Response) -> None:
        """URL에 응답을 등록한다. 여러 개면 호출 순서대로, 마지막 응답은 반복한다."""
        self.routes[url] = list(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        self.headers[url] = request.headers
        responses = self.routes.get(url)
        if not responses:
            return httpx.Response(404, json={"message": "Not Found"})
        response = responses.pop(0) if len(responses) > 1 else responses[0]
        return httpx.Response(
            response.status_code, headers=response.headers, content=response.content
        )

    def fetcher(self, headers: dict[str, str] | None = None) -> HttpJsonFetcher:
        """스텁을 전송 계층으로 쓰는 HttpJsonFetcher를 반환한다."""
        return HttpJsonFetcher(
            timeout=1.0, headers=headers, transport=httpx.MockTransport(self.handler)
        )


@pytest.fixture
def repo_payload() -> dict[str, Any]:
    """``/repos/octo/demo`` 응답 예시를 반환한다."""
    return {
        "name": "demo",
        "full_name": "octo/demo",
        "size": 2048,
        "updated_at": "2024-01-01T00:00:00Z",
        "html_url": "https://github.com/octo/demo",
        "stargazers_count": 12,
        "forks_count": 3,
        "watchers_count": 12,
        "owner": {"login": "octo", "avatar_url": "https://avatars.example.com/u/1"},
        "topics": [],
    }


@pytest.fixture
def github_api() -> GitHubApiStub:
    """GitHubApiStub 인스턴스를 반환한다."""
    return GitHubApiStub()


@pytest.fixture
def connection_factory() -> type[FakeConnection]:
    """실패 조건을 지정해 FakeConnection을 만들 수 있도록 클래스를 반환한다."""
    return FakeConnection

"""HTTP JSON 요청 헬퍼."""

import logging
from typing import Any

import httpx

from bot_commands.models import FetchResult

logger = logging.getLogger(__name__)


class HttpJsonFetcher:
    """GET 요청을 보내고 결과를 FetchResult로 돌려준다.

    전송 오류, 타임아웃, JSON 파싱 실패는 모두 ``ok=False`` 로 반환되며
    호출자에게 예외를 던지지 않는다. 여러 요청을 병렬로 보내고 각각의 결과를
    따로 확인할 수 있다.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            timeout: HTTP 요청 타임아웃 (초)
            headers: 모든 요청에 붙일 기본 헤더
            transport: httpx 전송 계층 (테스트용)
        """
        self.timeout = timeout
        self.headers = dict(headers or {})
        self._transport = transport

    def without_headers(self) -> "HttpJsonFetcher":
        """기본 헤더(인증 정보 등) 없이 같은 설정을 쓰는 fetcher를 반환한다."""
        return HttpJsonFetcher(timeout=self.timeout, transport=self._transport)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            follow_redirects=True,
            transport=self._transport,
        )

    async def fetch_json(
        self, url: str, headers: dict[str, str] | None = None
    ) -> FetchResult:
        """URL에서 JSON을 가져온다.

        Args:
            url: 요청 URL
            headers: 이번 요청에만 추가할 헤더

        Returns:
            FetchResult. 2xx가 아니면 본문을 파싱하지 않는다.
        """
        try:
            async with self._client() as client:
                response = await client.get(url, headers=headers)
                if not response.is_success:
                    return FetchResult(ok=False, status=response.status_code)
                data: Any = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.debug(f"Request failed: {url} ({e!r})")
            return FetchResult(ok=False)

        return FetchResult(ok=True, status=response.status_code, data=data)

    async def fetch_bytes(
        self, url: str, headers: dict[str, str] | None = None
    ) -> bytes | None:
        """URL에서 바이너리 본문을 가져온다. 실패하면 None."""
        try:
            async with self._client() as client:
                response = await client.get(url, headers=headers)
                if not response.is_success:
                    return None
                return response.content
        except httpx.HTTPError as e:
            logger.debug(f"Download failed: {url} ({e!r})")
            return None

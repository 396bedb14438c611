"""HTTP 클라이언트 베이스 클래스"""

import time

import httpx

from clients.errors import TransportError
from models.query import Query
from search_logging import SearchLogger


class BaseHttpClient:
    """
    HTTP 클라이언트 베이스 클래스

    요청 1건 = GET 1회. 재시도, 캐시, 타임아웃 없이 응답 또는 전송 오류를
    기다린다. 리다이렉트는 따라간다.

    async with 블록 안에서 사용:
        async with OpenLibraryClient() as client:
            records = await client.search_name("Dune", 1)

    테스트에서는 transport 인자로 httpx.MockTransport를 넘겨 네트워크 없이 실행.
    """

    name: str = "base"
    user_agent: str = "novel-search/0.1.0"

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self.logger = SearchLogger(self.name)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            transport=self._transport,
            timeout=None,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async with.")
        return self._client

    async def fetch(self, url: str, query: Query) -> bytes:
        """
        URL에서 응답 본문 가져오기

        Args:
            url: 요청 URL
            query: 원래 검색 요청 (오류 메시지용)

        Returns:
            응답 본문 (bytes)

        Raises:
            TransportError: 네트워크 오류 또는 2xx가 아닌 응답
        """
        start = time.perf_counter()
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.logger.http_error("GET", url, str(e), elapsed_ms)
            raise TransportError(query.label, query.text, str(e)) from e

        content = response.content
        elapsed_ms = (time.perf_counter() - start) * 1000
        self.logger.http_request(
            method="GET",
            url=url,
            status=response.status_code,
            elapsed_ms=elapsed_ms,
            size=len(content),
        )
        return content

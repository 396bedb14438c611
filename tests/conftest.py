"""공통 테스트 fixtures"""

import json
import logging
import random
from pathlib import Path

import httpx
import pytest

from search_logging.logger import ROOT_LOGGER_NAME


@pytest.fixture
def fixtures_dir():
    """테스트 fixtures 디렉토리 경로"""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir):
    """fixture 파일 로드 헬퍼"""
    def _load(filename: str, encoding: str = "utf-8") -> str:
        return (fixtures_dir / filename).read_text(encoding=encoding)
    return _load


@pytest.fixture
def load_json(load_fixture):
    """JSON fixture를 dict로 로드"""
    def _load(filename: str) -> dict:
        return json.loads(load_fixture(filename))
    return _load


@pytest.fixture
def seeded_rng():
    """재현 가능한 난수 생성기"""
    return random.Random(1234)


@pytest.fixture
def mock_transport():
    """
    httpx.MockTransport 생성 헬퍼

    routes: URL 경로 → (상태 코드, 본문) 매핑. 본문이 dict/list면 JSON으로 직렬화.
    반환된 transport의 requests 속성에 받은 요청이 순서대로 기록됨.
    """
    def _create(routes: dict[str, tuple[int, object]]):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.path not in routes:
                return httpx.Response(404, text="not found")
            status, body = routes[request.url.path]
            if isinstance(body, (dict, list)):
                return httpx.Response(status, json=body)
            return httpx.Response(status, text=str(body))

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport
    return _create


@pytest.fixture(autouse=True)
def reset_logging():
    """테스트마다 novel_search 로거 핸들러 정리"""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = True

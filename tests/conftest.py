"""
Pytest fixtures for the conversion client tests.

변환 서비스는 httpx.MockTransport로 대체한다 (실제 네트워크 호출 없음).
"""

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

from src.app.services.conversion import ConversionClient
from src.core.logging import ROOT_LOGGER_NAME

SERVICE_URL = "https://convert.test"

# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """HANGUL_* 환경변수 제거 (로컬 .env 영향 차단)."""
    for name in ("HANGUL_MODE", "HANGUL_SERVICE_URL", "HANGUL_TIMEOUT", "HANGUL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("src.core.config.load_dotenv", lambda *a, **kw: False)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """
    setup_logging()이 붙인 핸들러 제거.

    propagate=False 상태가 남으면 caplog가 로그를 받지 못한다.
    """
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


# =============================================================================
# Mock Conversion Service
# =============================================================================


class MockService:
    """
    변환 서비스 mock.

    받은 요청을 기록하고, 설정된 응답을 돌려준다.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = b"{}"
        self.error: Exception | None = None

    def respond_json(self, data: Any, status_code: int = 200) -> None:
        self.status_code = status_code
        self.body = json.dumps(data, ensure_ascii=False).encode("utf-8")

    def respond_raw(self, body: bytes, status_code: int = 200) -> None:
        self.status_code = status_code
        self.body = body

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_payload(self) -> dict[str, Any]:
        data: dict[str, Any] = json.loads(self.requests[-1].content)
        return data


@pytest.fixture
def mock_service() -> MockService:
    """기본 응답: 200 + {}."""
    return MockService()


@pytest.fixture
def make_client(
    mock_service: MockService,
) -> Callable[[], ConversionClient]:
    """mock_service에 연결된 ConversionClient factory."""

    def _make() -> ConversionClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(mock_service.handler))
        return ConversionClient(SERVICE_URL, http_client=http_client)

    return _make

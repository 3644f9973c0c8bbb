"""
test_api_convert.py - 변환 화면/API E2E 테스트

엔드포인트:
- GET /
- POST /api/convert
- GET /health

변환 서비스는 httpx.MockTransport로 대체 (app.state.conversion_client 교체).
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from src.app.main import app
from src.app.services.conversion import ConversionClient
from src.domain.constants import FALLBACK_MESSAGE, GENERIC_ERROR_MESSAGE

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def client():
    """FastAPI TestClient."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def use_service(client):
    """변환 서비스 응답 설정 helper."""

    def _use(handler) -> None:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        app.state.conversion_client = ConversionClient(
            "https://convert.test", http_client=http_client
        )

    return _use


# =============================================================================
# Health Check
# =============================================================================


class TestHealthCheck:
    """헬스 체크 테스트."""

    def test_health_endpoint(self, client):
        """GET /health."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


# =============================================================================
# Convert Page
# =============================================================================


class TestConvertPage:
    """변환 화면 테스트."""

    def test_page_has_fields(self, client):
        """GET / → 입력/출력 필드 + 변환 버튼."""
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'id="inputText"' in response.text
        assert 'id="outputText"' in response.text
        assert 'hx-post="/api/convert"' in response.text

    def test_lifespan_builds_client(self, client):
        """시작 시 설정 기반 클라이언트 생성 (기본 dev)."""
        assert app.state.settings.mode == "dev"
        assert isinstance(app.state.conversion_client, ConversionClient)


# =============================================================================
# POST /api/convert
# =============================================================================


class TestConvertApi:
    """변환 API 테스트."""

    def test_converted(self, client, use_service):
        """annyeonghaseyo → 안녕하세요."""
        use_service(lambda r: httpx.Response(200, json={"converted_text": "안녕하세요"}))

        response = client.post("/api/convert", data={"text": "annyeonghaseyo"})

        assert response.status_code == 200
        assert ">안녕하세요</textarea>" in response.text
        assert 'data-status="converted"' in response.text

    def test_fallback(self, client, use_service):
        use_service(lambda r: httpx.Response(200, json={}))

        response = client.post("/api/convert", data={"text": "漢字"})

        assert response.status_code == 200
        assert f">{FALLBACK_MESSAGE}</textarea>" in response.text
        assert 'data-status="fallback"' in response.text

    def test_service_error_is_200_with_message(self, client, use_service):
        """서비스 500 → 화면은 200 + 일반 에러 문자열."""
        use_service(lambda r: httpx.Response(500, json={"converted_text": "x"}))

        response = client.post("/api/convert", data={"text": ""})

        assert response.status_code == 200
        assert f">{GENERIC_ERROR_MESSAGE}</textarea>" in response.text
        assert 'data-status="error"' in response.text

    def test_missing_text_field_sends_empty(self, client, use_service):
        """text 필드 없음 → 빈 문자열로 전송."""
        received: list[bytes] = []

        def handler(request: httpx.Request) -> httpx.Response:
            received.append(request.content)
            return httpx.Response(200, json={"converted_text": "빈 입력"})

        use_service(handler)

        response = client.post("/api/convert", data={})

        assert response.status_code == 200
        assert b'"text"' in received[0]
        assert ">빈 입력</textarea>" in response.text

    def test_output_is_escaped(self, client, use_service):
        """변환 결과의 HTML은 이스케이프."""
        use_service(
            lambda r: httpx.Response(200, json={"converted_text": "<script>alert(1)</script>"})
        )

        response = client.post("/api/convert", data={"text": "x"})

        assert "<script>" not in response.text
        assert "&lt;script&gt;" in response.text

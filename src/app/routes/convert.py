"""
Convert Routes: 한자 → 한글 변환 화면.

- GET / → 입력/출력 필드 화면 (HTMX)
- POST /api/convert → 출력 필드 HTML 조각 (HTMX swap용)

변환 실패도 200 + 에러 문자열로 응답한다 (상태 코드로 구분하지 않음).
"""

import html as html_escape_module
from pathlib import Path

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.app.services.binding import TextFieldBinding
from src.app.services.conversion import ConversionClient
from src.domain.schemas import ConversionOutcome

# Jinja2 템플릿 설정
_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints


def escape_html(text: str) -> str:
    """HTML 이스케이프."""
    return html_escape_module.escape(text, quote=True)


def build_output_html(outcome: ConversionOutcome) -> str:
    """출력 필드 HTML 생성 (id="outputText" 교체용)."""
    return (
        f'<textarea id="outputText" name="outputText" readonly '
        f'data-status="{outcome.status.value}">{escape_html(outcome.text)}</textarea>'
    )


def get_client(request: Request) -> ConversionClient:
    """lifespan에서 생성된 공유 클라이언트."""
    client: ConversionClient = request.app.state.conversion_client
    return client


# =============================================================================
# Page Routes
# =============================================================================


@router.get("/", response_class=HTMLResponse)
async def convert_page(request: Request) -> HTMLResponse:
    """변환 화면."""
    return jinja_templates.TemplateResponse(request, "index.html", {})


# =============================================================================
# API Routes
# =============================================================================


@api_router.post("/convert", response_class=HTMLResponse)
async def convert_text(
    request: Request,
    text: str = Form(""),  # 빈 문자열 허용
) -> HTMLResponse:
    """
    입력 텍스트 변환.

    Returns:
        출력 필드 HTML (변환 결과 / fallback / 일반 에러 중 하나)
    """
    binding = TextFieldBinding(input_text=text)
    outcome = await get_client(request).convert_field(binding)
    return HTMLResponse(content=build_output_html(outcome))

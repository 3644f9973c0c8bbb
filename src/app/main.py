"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: HANGUL_MODE=prod uv run uvicorn src.app.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI

from src.app.routes import convert
from src.app.services.conversion import ConversionClient
from src.core.config import load_config, resolve_log_level, resolve_settings
from src.core.logging import setup_logging

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 로깅 구성, 변환 클라이언트 생성
    종료 시: 클라이언트 정리
    """
    # Startup
    config = load_config()
    log_file = (config.get("logging") or {}).get("file")
    logger = setup_logging(
        level=resolve_log_level(config),
        log_file=Path(log_file) if log_file else None,
    )

    settings = resolve_settings(config)
    app.state.config = config
    app.state.settings = settings
    app.state.conversion_client = ConversionClient.from_settings(settings)
    logger.info(f"Running in mode: {settings.mode} ({settings.base_url})")

    yield

    # Shutdown
    await app.state.conversion_client.aclose()


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Hangul Convert",
    description="한자 → 한글 변환 서비스 클라이언트",
    version="0.1.0",
    lifespan=lifespan,
)


# =============================================================================
# Routes
# =============================================================================

# 페이지 라우트 (HTML)
app.include_router(convert.router, prefix="", tags=["Convert"])

# API 라우트
app.include_router(convert.api_router, prefix="/api", tags=["Convert API"])


@app.get("/health")
async def health() -> dict[str, Any]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )

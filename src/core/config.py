"""
설정 로드: default.yaml + .env + 환경변수.

우선순위 (높은 순):
1. 명시적 인자 (CLI 옵션 등)
2. 환경변수 (HANGUL_MODE, HANGUL_SERVICE_URL, HANGUL_TIMEOUT, HANGUL_LOG_LEVEL)
3. default.yaml
4. 코드 기본값 (dev 모드)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.domain.constants import (
    DEFAULT_BASE_URLS,
    ENV_LOG_LEVEL,
    ENV_MODE,
    ENV_SERVICE_URL,
    ENV_TIMEOUT,
    MODE_DEV,
    VALID_MODES,
)
from src.domain.errors import ConfigError, ErrorCodes

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


@dataclass
class ClientSettings:
    """변환 서비스 접속 설정."""
    mode: str = MODE_DEV
    base_url: str = DEFAULT_BASE_URLS[MODE_DEV]
    timeout: float | None = None  # None이면 transport 기본값
    verify_tls: bool = True


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    설정 파일 로드.

    파일이 없으면 빈 dict (코드 기본값 사용).
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.debug(f"Config file not found, using defaults: {config_path}")
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] | None = yaml.safe_load(f)
        return data or {}


def _parse_timeout(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(ErrorCodes.INVALID_TIMEOUT, value=value) from e
    if timeout <= 0:
        raise ConfigError(ErrorCodes.INVALID_TIMEOUT, value=value)
    return timeout


def resolve_settings(
    config: dict[str, Any],
    mode: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
) -> ClientSettings:
    """
    설정 dict + 환경변수 → ClientSettings.

    Args:
        config: load_config() 결과
        mode: 실행 모드 override (dev/prod)
        base_url: 서비스 URL override
        timeout: 타임아웃(초) override

    Returns:
        ClientSettings

    Raises:
        ConfigError: 알 수 없는 모드, 잘못된 timeout
    """
    load_dotenv()

    service = config.get("service") or {}

    resolved_mode = mode or os.environ.get(ENV_MODE) or config.get("mode") or MODE_DEV
    if resolved_mode not in VALID_MODES:
        raise ConfigError(ErrorCodes.UNKNOWN_MODE, mode=resolved_mode)

    mode_section = service.get(resolved_mode) or {}
    resolved_url = (
        base_url
        or os.environ.get(ENV_SERVICE_URL)
        or mode_section.get("base_url")
        or DEFAULT_BASE_URLS.get(resolved_mode)
    )

    if timeout is not None:
        resolved_timeout = _parse_timeout(timeout)
    else:
        resolved_timeout = _parse_timeout(
            os.environ.get(ENV_TIMEOUT, service.get("timeout"))
        )

    return ClientSettings(
        mode=resolved_mode,
        base_url=resolved_url.rstrip("/"),
        timeout=resolved_timeout,
        verify_tls=bool(service.get("verify_tls", True)),
    )


def resolve_log_level(config: dict[str, Any]) -> str:
    """
    로그 레벨 (환경변수 > default.yaml > INFO).

    Raises:
        ConfigError: logging 모듈이 모르는 레벨 이름
    """
    log_section = config.get("logging") or {}
    level = str(
        os.environ.get(ENV_LOG_LEVEL) or log_section.get("level") or "INFO"
    ).upper()
    if level not in logging.getLevelNamesMapping():
        raise ConfigError(ErrorCodes.INVALID_LOG_LEVEL, level=level)
    return level

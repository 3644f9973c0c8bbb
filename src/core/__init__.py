"""
Core layer: 설정과 로깅.

역할:
- default.yaml / .env / 환경변수 → ClientSettings
- 진입점 공용 로깅 구성
"""

from .config import ClientSettings, load_config, resolve_log_level, resolve_settings
from .logging import setup_logging

__all__ = [
    # config
    "ClientSettings",
    "load_config",
    "resolve_settings",
    "resolve_log_level",
    # logging
    "setup_logging",
]

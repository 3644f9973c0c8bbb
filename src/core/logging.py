"""
로깅 설정.

모든 모듈은 logging.getLogger(__name__)을 사용하고,
핸들러 구성은 진입점(FastAPI lifespan, CLI)에서 한 번만 수행한다.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "src"

# 파일 로테이션
MAX_LOG_BYTES = 5_000_000
LOG_BACKUP_COUNT = 5


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    패키지 루트 로거 구성.

    여러 번 호출해도 핸들러가 중복 추가되지 않는다 (레벨만 갱신).

    Args:
        level: 로그 레벨 이름 (DEBUG, INFO, ...)
        log_file: 로그 파일 경로 (None이면 콘솔만)
        stream: 콘솔 출력 스트림 (기본: stdout)

    Returns:
        구성된 루트 로거
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger

"""
FastAPI Routes.

페이지 라우트 (HTML) + API 라우트 (HTMX 조각)
"""

from . import convert

__all__ = ["convert"]

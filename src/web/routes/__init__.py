"""
FastAPI Routes (frontend).

페이지 라우트 (HTML + HTMX 조각)
"""

from . import pages

__all__ = ["pages"]

"""
FastAPI Routes (backend).

API 라우트만 존재 (페이지는 src/web에서 렌더링)
"""

from . import summarize

__all__ = ["summarize"]

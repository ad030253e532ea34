"""
FastAPI Routes.

페이지 라우트 (HTML)
"""

from . import page

__all__ = ["page"]

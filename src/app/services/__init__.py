"""
App Services: 요청 처리 로직.

- PageRenderer: Markdown 원본 → HTML 페이지
"""

from .page import PageRenderer

__all__ = [
    "PageRenderer",
]

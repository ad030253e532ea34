"""
Render layer: HTML 출력 생성.

역할:
- Markdown → HTML 조각 (Python-Markdown)
- HTML 조각 + 템플릿 → 최종 문서 (Jinja2)
"""

from .fragment import MarkdownRenderer
from .page import PageTemplate

__all__ = [
    "MarkdownRenderer",
    "PageTemplate",
]

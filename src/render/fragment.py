"""
Markdown → HTML 조각 렌더러: Python-Markdown 기반.

- 기본 HTML 출력 (output_format="html")
- 확장 없음
- 호출마다 변환기 상태를 새로 만듦 → 인스턴스 공유 가능
"""

import logging

import markdown

from src.domain.errors import ErrorCodes, RenderError
from src.domain.schemas import (
    PLAIN_HTML_PROFILE,
    Document,
    RenderedFragment,
    RenderingProfile,
)

logger = logging.getLogger(__name__)


class MarkdownRenderer:
    """
    Markdown → HTML 변환기.

    Usage:
        renderer = MarkdownRenderer()
        fragment = renderer.convert(document)
    """

    def __init__(self, profile: RenderingProfile = PLAIN_HTML_PROFILE):
        self.profile = profile

    def convert(self, document: Document) -> RenderedFragment:
        """
        Document를 HTML 조각으로 변환.

        Raises:
            RenderError: MARKDOWN_RENDER_FAILED (부분 결과 없음)
        """
        try:
            html = markdown.markdown(document.text, **self.profile.to_kwargs())
        except Exception as e:
            raise RenderError(
                ErrorCodes.MARKDOWN_RENDER_FAILED,
                path=str(document.path),
                error=str(e),
            ) from e

        logger.debug(f"Converted {document.path} ({len(html)} chars of HTML)")
        return RenderedFragment(html=html)

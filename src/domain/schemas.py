"""
Data schemas for the page server.

규칙:
- 모든 값은 요청 범위 (RenderingProfile 제외)
- 불변 (frozen dataclass)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.domain.constants import (
    HTML_MEDIA_TYPE,
    MARKDOWN_EXTENSIONS,
    MARKDOWN_OUTPUT_FORMAT,
)

# =============================================================================
# Rendering Profile
# =============================================================================

@dataclass(frozen=True)
class RenderingProfile:
    """
    Markdown 변환 옵션.

    프로세스 시작 시 한 번 생성, 이후 읽기 전용으로 공유.
    """
    extensions: tuple[str, ...] = MARKDOWN_EXTENSIONS
    output_format: str = MARKDOWN_OUTPUT_FORMAT

    def to_kwargs(self) -> dict[str, Any]:
        """markdown.markdown() 인자."""
        return {
            "extensions": list(self.extensions),
            "output_format": self.output_format,
        }


PLAIN_HTML_PROFILE = RenderingProfile()

# =============================================================================
# Request-scoped Schemas
# =============================================================================

@dataclass(frozen=True)
class Document:
    """요청 시점에 읽은 Markdown 원문."""
    path: Path
    text: str


@dataclass(frozen=True)
class RenderedFragment:
    """Document를 변환한 HTML 조각."""
    html: str


@dataclass(frozen=True)
class Page:
    """최종 HTTP 응답 본문."""
    body: str
    status_code: int = 200
    media_type: str = HTML_MEDIA_TYPE

"""
Error definitions for the page server.

규칙:
- 조용한 실패 금지 → PageError 계열로 명시적 실패
- 부분 렌더링 결과를 200으로 내보내지 않음
- 서비스 계층에서 복구하지 않고 HTTP 계층까지 전파
"""

from typing import Any


class PageError(Exception):
    """
    페이지 렌더링 실패 시 발생하는 에러 (기본 클래스).

    Usage:
        raise FileAccessError(ErrorCodes.SOURCE_NOT_FOUND, path="index.md")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


class FileAccessError(PageError):
    """원본 Markdown 파일이 없거나 읽을 수 없음."""


class TemplateNotFoundError(PageError):
    """페이지 템플릿을 찾을 수 없음."""


class RenderError(PageError):
    """Markdown 변환 또는 템플릿 렌더링 실패."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Source ===
    SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
    SOURCE_UNREADABLE = "SOURCE_UNREADABLE"
    SOURCE_DECODE_FAILED = "SOURCE_DECODE_FAILED"

    # === Render ===
    MARKDOWN_RENDER_FAILED = "MARKDOWN_RENDER_FAILED"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    TEMPLATE_RENDER_FAILED = "TEMPLATE_RENDER_FAILED"

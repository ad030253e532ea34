"""
Domain Constants: 페이지 서버 전역 상수.

파일명 정책, 템플릿 이름 등 시스템 전반에서 사용되는 값들.
default.yaml에서 오버라이드 가능.
"""

# =============================================================================
# Source (원본 문서)
# =============================================================================
# 작업 디렉터리 기준 상대 경로. 요청마다 새로 읽음 (캐시 없음).

SOURCE_FILENAME = "index.md"
SOURCE_ENCODING = "utf-8"

# =============================================================================
# Page Template (페이지 템플릿)
# =============================================================================
# 템플릿 이름 "page" → 파일 page.html
# 바인딩 변수는 하나: content (렌더링된 HTML 조각)

PAGE_TEMPLATE_NAME = "page"
TEMPLATE_EXTENSION = ".html"
CONTENT_VARIABLE = "content"

# =============================================================================
# Markdown Rendering Profile
# =============================================================================
# 기본 HTML 출력, 확장 없음

MARKDOWN_OUTPUT_FORMAT = "html"
MARKDOWN_EXTENSIONS: tuple[str, ...] = ()

# =============================================================================
# MIME Types
# =============================================================================

HTML_MEDIA_TYPE = "text/html"


def template_filename(name: str) -> str:
    """
    템플릿 이름에서 파일명 생성.

    Args:
        name: 템플릿 이름 (예: "page")

    Returns:
        파일명 (예: "page.html"). 이미 확장자가 있으면 그대로 반환.
    """
    if name.endswith(TEMPLATE_EXTENSION):
        return name
    return f"{name}{TEMPLATE_EXTENSION}"

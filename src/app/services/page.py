"""
Page Service: 루트 요청 처리.

흐름 (요청마다 동일):
1. 원본 Markdown 파일 읽기 (캐시 없음)
2. Markdown → HTML 조각
3. 조각 + 페이지 템플릿 → 최종 문서
4. Page(200, HTML) 반환

에러는 복구하지 않고 그대로 전파:
- FileAccessError: 원본 없음/읽기 불가
- TemplateNotFoundError: 템플릿 없음
- RenderError: 변환 실패
"""

import logging
from pathlib import Path

from src.core.source import read_document
from src.domain.constants import PAGE_TEMPLATE_NAME
from src.domain.schemas import Page
from src.render.fragment import MarkdownRenderer
from src.render.page import PageTemplate

logger = logging.getLogger(__name__)


class PageRenderer:
    """
    Markdown 파일을 페이지로 렌더링하는 서비스.

    상태 없음: 생성 후 어떤 속성도 변경하지 않으므로
    동시 요청 간 공유 가능.

    Usage:
        renderer = PageRenderer(
            source_path=Path("index.md"),
            markdown_renderer=MarkdownRenderer(),
            page_template=PageTemplate(templates_dir),
        )
        page = renderer.handle_root_request()
    """

    def __init__(
        self,
        source_path: Path,
        markdown_renderer: MarkdownRenderer,
        page_template: PageTemplate,
        template_name: str = PAGE_TEMPLATE_NAME,
    ):
        self.source_path = source_path
        self.markdown_renderer = markdown_renderer
        self.page_template = page_template
        self.template_name = template_name

    def handle_root_request(self) -> Page:
        """
        GET / 처리.

        Returns:
            Page (status_code=200, HTML body)

        Raises:
            FileAccessError, TemplateNotFoundError, RenderError
        """
        document = read_document(self.source_path)
        fragment = self.markdown_renderer.convert(document)
        body = self.page_template.render(self.template_name, fragment)

        logger.debug(
            f"Rendered {self.source_path} with template '{self.template_name}'"
        )
        return Page(body=body)

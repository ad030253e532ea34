"""
Page 템플릿 렌더러: Jinja2 기반.

- 템플릿 이름 "page" → templates_dir/page.html
- 바인딩 변수: content (HTML 조각, 이스케이프하지 않음)
"""

import logging
from pathlib import Path

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError, TemplateNotFound
from markupsafe import Markup

from src.domain.constants import CONTENT_VARIABLE, template_filename
from src.domain.errors import ErrorCodes, RenderError, TemplateNotFoundError
from src.domain.schemas import RenderedFragment

logger = logging.getLogger(__name__)


class PageTemplate:
    """
    페이지 템플릿 렌더러.

    Usage:
        templates = PageTemplate(templates_dir)
        html = templates.render("page", fragment)
    """

    def __init__(self, templates_dir: Path):
        self.templates_dir = templates_dir
        self._templates = Jinja2Templates(directory=templates_dir)

    def render(self, name: str, fragment: RenderedFragment) -> str:
        """
        템플릿에 HTML 조각을 채워 최종 문서 생성.

        Args:
            name: 템플릿 이름 (확장자 생략 가능)
            fragment: 변환된 HTML 조각

        Returns:
            렌더링된 HTML 문서

        Raises:
            TemplateNotFoundError: TEMPLATE_NOT_FOUND
            RenderError: TEMPLATE_RENDER_FAILED
        """
        filename = template_filename(name)

        try:
            template = self._templates.get_template(filename)
        except TemplateNotFound as e:
            raise TemplateNotFoundError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                template=filename,
                templates_dir=str(self.templates_dir),
            ) from e
        except TemplateError as e:
            # 템플릿 문법 오류
            raise RenderError(
                ErrorCodes.TEMPLATE_RENDER_FAILED,
                template=filename,
                error=str(e),
            ) from e

        try:
            html = template.render({CONTENT_VARIABLE: Markup(fragment.html)})
        except Exception as e:
            raise RenderError(
                ErrorCodes.TEMPLATE_RENDER_FAILED,
                template=filename,
                error=str(e),
            ) from e

        logger.debug(f"Rendered template {filename}")
        return html

    def exists(self, name: str) -> bool:
        """템플릿 존재 여부."""
        return (self.templates_dir / template_filename(name)).is_file()

"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from src.app.routes import page
from src.app.services.page import PageRenderer
from src.domain.constants import PAGE_TEMPLATE_NAME, SOURCE_FILENAME
from src.domain.errors import PageError
from src.domain.schemas import PLAIN_HTML_PROFILE
from src.render.fragment import MarkdownRenderer
from src.render.page import PageTemplate

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def resolve_source_path(config: dict) -> Path:
    """원본 Markdown 경로. 상대 경로는 작업 디렉터리 기준으로 요청 시 해석."""
    return Path(config.get("paths", {}).get("source") or SOURCE_FILENAME)


def resolve_templates_dir(config: dict) -> Path:
    """템플릿 디렉터리. 상대 경로는 프로젝트 루트 기준."""
    value = config.get("paths", {}).get("templates_dir")
    if not value:
        return DEFAULT_TEMPLATES_DIR

    templates_dir = Path(value)
    if not templates_dir.is_absolute():
        templates_dir = PROJECT_ROOT / templates_dir
    return templates_dir


def build_page_renderer(config: dict) -> PageRenderer:
    """
    PageRenderer 조립.

    Markdown 변환 설정은 여기서 한 번만 생성되고 이후 읽기 전용으로 공유됨.
    """
    return PageRenderer(
        source_path=resolve_source_path(config),
        markdown_renderer=MarkdownRenderer(PLAIN_HTML_PROFILE),
        page_template=PageTemplate(resolve_templates_dir(config)),
        template_name=config.get("page", {}).get("template") or PAGE_TEMPLATE_NAME,
    )


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    해제할 리소스 없음 (PageRenderer는 상태를 갖지 않음).
    """
    renderer: PageRenderer = app.state.page_renderer
    logger.info(
        f"Serving {renderer.source_path} with template '{renderer.template_name}'"
    )

    yield

    logger.info("Shutting down")


# =============================================================================
# Error Handlers
# =============================================================================

ERROR_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Internal Server Error</title>
</head>
<body>
    <h1>Internal Server Error</h1>
</body>
</html>
"""


async def page_error_handler(request: Request, exc: Exception) -> HTMLResponse:
    """PageError → 500. 경로 등 내부 정보는 로그에만 남김."""
    context = exc.to_dict() if isinstance(exc, PageError) else {}
    logger.error(
        f"{request.method} {request.url.path} failed: {context}",
        exc_info=exc,
    )
    return HTMLResponse(content=ERROR_PAGE, status_code=500)


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        config: 설정 dict (None이면 default.yaml 로드)
    """
    if config is None:
        config = load_config()

    app = FastAPI(
        title="Markdown Page Server",
        description="index.md → HTML 페이지",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.page_renderer = build_page_renderer(config)

    app.add_exception_handler(PageError, page_error_handler)
    app.include_router(page.router, tags=["Page"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )

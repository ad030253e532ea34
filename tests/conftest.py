"""
Pytest fixtures for the page server tests.

구성:
- 원본 Markdown 파일, 템플릿 디렉터리는 tmp_path에 생성
- PageRenderer / FastAPI 앱은 fixture로 조립 (전역 상태 없음)
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.main import create_app
from src.app.services.page import PageRenderer
from src.render.fragment import MarkdownRenderer
from src.render.page import PageTemplate

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>Test Page</title></head>
<body>
<main id="page-content">
{{ content }}
</main>
</body>
</html>
"""

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """page.html 하나가 있는 템플릿 디렉터리."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "page.html").write_text(PAGE_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture
def source_path(tmp_path: Path) -> Path:
    """원본 Markdown 파일 (기본 내용: "# Hello")."""
    path = tmp_path / "index.md"
    path.write_text("# Hello\n", encoding="utf-8")
    return path


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def page_renderer(source_path: Path, templates_dir: Path) -> PageRenderer:
    """테스트용 PageRenderer."""
    return PageRenderer(
        source_path=source_path,
        markdown_renderer=MarkdownRenderer(),
        page_template=PageTemplate(templates_dir),
    )


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def test_config(source_path: Path, templates_dir: Path) -> dict:
    """테스트용 설정."""
    return {
        "paths": {
            "source": str(source_path),
            "templates_dir": str(templates_dir),
        },
        "page": {
            "template": "page",
        },
    }


@pytest.fixture
def app(test_config: dict) -> FastAPI:
    """테스트용 FastAPI 앱."""
    return create_app(test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI TestClient."""
    with TestClient(app) as client:
        yield client

"""
Page Routes: 루트 페이지.

- GET / → index.md를 렌더링한 HTML 문서
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from src.app.services.page import PageRenderer

router = APIRouter()


def get_page_renderer(request: Request) -> PageRenderer:
    """Request에서 PageRenderer 가져오기."""
    return request.app.state.page_renderer


@router.get("/", response_class=HTMLResponse)
async def root(request: Request) -> HTMLResponse:
    """
    루트 페이지.

    요청마다 원본을 다시 읽고 렌더링함.
    실패 시 PageError가 전파되어 500 핸들러에서 처리.
    """
    page = get_page_renderer(request).handle_root_request()
    return HTMLResponse(
        content=page.body,
        status_code=page.status_code,
        media_type=page.media_type,
    )

"""
App layer: HTTP 서버 (FastAPI).

역할:
- 라우트, 에러 → HTTP 응답 변환
- 서비스 인스턴스 조립 (프로세스 시작 시 한 번)

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (page.html)
- src/render/ → 코드 (fragment.py, page.py)
"""

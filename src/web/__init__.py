"""
Web layer: frontend dev server (FastAPI + Jinja2 + HTMX).

역할:
- 대시보드 / 작성 / 히스토리 3개 화면 렌더링
- 세션별 ViewController 보관 (메모리)
- Generate 시 backend /api/summarize 호출 (src.client)
"""

"""
App layer: summarize API 서버 (FastAPI).

역할:
- POST /api/summarize: 작업 메모 → 요약 + 라벨
- 요약 엔진은 providers/로 추상화 (현재 keyword mock)
- 상태 없음 (요청 간 공유 데이터 없음)

주의: 폴더 구분
- src/app/ → backend API
- src/web/ → frontend 페이지 (Jinja2 + HTMX)
- src/client/ → frontend의 상태 기계 + backend 호출
"""

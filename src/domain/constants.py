"""
Domain Constants: 일일 작업일지 전역 상수.

라벨 규칙, 요약 템플릿 기본값, 화면(view) 이름 등
backend/frontend 양쪽에서 사용되는 값들.
"""

# =============================================================================
# Summary Template (요약 템플릿)
# =============================================================================
# Date: <YYYY-MM-DD>
# Site: <siteName | Unknown>
# Crew: <crewSize | N/A>
# Summary: <text[:200]>...

SUMMARY_MAX_CHARS = 200
SUMMARY_ELLIPSIS = "..."
DEFAULT_SITE_NAME = "Unknown"
DEFAULT_CREW_SIZE = "N/A"
SUMMARY_STATUS_OK = "ok"

# =============================================================================
# Label Rules (라벨 규칙)
# =============================================================================
# 순서 고정: Delay → Safety → Delivery
# 텍스트 내 등장 위치와 무관하게 이 순서로만 출력.
# 부분 문자열 매칭 (대소문자 무시): "translate"의 "late"도 Delay로 판정됨.

LABEL_DELAY = "Delay"
LABEL_SAFETY = "Safety"
LABEL_DELIVERY = "Delivery"

LABEL_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (LABEL_DELAY, ("delay", "delayed", "late")),
    (LABEL_SAFETY, ("safety", "incident", "injury")),
    (LABEL_DELIVERY, ("delivery", "delivered", "received")),
)

# =============================================================================
# Views (화면 상태)
# =============================================================================

VIEW_DASHBOARD = "dashboard"
VIEW_NEW = "new"
VIEW_HISTORY = "history"

VIEWS = (VIEW_DASHBOARD, VIEW_NEW, VIEW_HISTORY)

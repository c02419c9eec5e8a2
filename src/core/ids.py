"""
ID 생성: entry_id, request_id

규칙:
- entry_id: 저장 시각 기반 + 충돌 방지 suffix
- request_id: Generate 호출마다 새로 발급 (늦게 도착한 응답 식별용)
"""

import uuid
from datetime import UTC, datetime


def generate_entry_id(now: datetime | None = None) -> str:
    """
    작업일지 ID 생성.

    포맷: LOG-{timestamp}-{uuid[:8]}
    같은 밀리초에 두 번 저장해도 고유.

    Args:
        now: 기준 시각 (None이면 현재 UTC)

    Returns:
        entry_id 문자열
    """
    now = now or datetime.now(UTC)
    timestamp = now.strftime("%Y%m%d%H%M%S%f")[:-3]
    unique = uuid.uuid4().hex[:8]

    return f"LOG-{timestamp}-{unique}"


def generate_request_id() -> str:
    """Generate 요청 ID. 포맷: REQ-{uuid[:12]}"""
    return f"REQ-{uuid.uuid4().hex[:12]}"

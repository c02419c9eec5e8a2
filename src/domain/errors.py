"""
Error definitions for the daily log app.

규칙:
- 조용한 실패 금지 → 사용자는 요청한 작업의 결과를 항상 알아야 함
- 입력 검증 실패는 SiteLogError(INVALID_REQUEST)로 명시적 실패
"""

from typing import Any


class SiteLogError(Exception):
    """
    작업일지 도메인 에러.

    Usage:
        raise SiteLogError("INVALID_REQUEST", field="text", reason="missing")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Summarize endpoint ===
    INVALID_REQUEST = "INVALID_REQUEST"
    SUMMARIZE_FAILED = "SUMMARIZE_FAILED"

    # === Client ===
    BACKEND_UNAVAILABLE = "BACKEND_UNAVAILABLE"  # 전송 실패 (연결, 타임아웃)
    BAD_RESPONSE = "BAD_RESPONSE"                # 응답 JSON 파싱 실패
    GENERATE_IN_PROGRESS = "GENERATE_IN_PROGRESS"

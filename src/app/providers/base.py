"""
Summarizer 추상 인터페이스.

- Provider 추상화로 요약 엔진 교체 가능 (현재: 키워드 기반 mock)
- UI 계약 ({summary, labels, status})은 provider와 무관하게 고정
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from src.domain.constants import SUMMARY_STATUS_OK

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class SummaryMetadata:
    """요약 템플릿에 들어가는 부가 정보."""
    site_name: str | None = None
    crew_size: int | None = None


@dataclass
class SummaryResult:
    """
    요약 결과.

    labels 순서는 provider가 보장 (Delay → Safety → Delivery).
    """
    summary: str
    labels: list[str] = field(default_factory=list)
    status: str = SUMMARY_STATUS_OK

    # 추적용 (응답에는 포함하지 않음)
    provider: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """API 응답 본문."""
        return {
            "summary": self.summary,
            "labels": list(self.labels),
            "status": self.status,
        }


# =============================================================================
# Provider Exceptions
# =============================================================================

class ProviderError(Exception):
    """Provider 관련 에러."""

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")


# =============================================================================
# Abstract Provider
# =============================================================================

class Summarizer(ABC):
    """
    Summarizer 추상 인터페이스.

    역할: 자유 텍스트 → 요약 + 카테고리 라벨
    """

    name: str = "abstract"

    @abstractmethod
    async def summarize(self, text: str, metadata: SummaryMetadata) -> SummaryResult:
        """
        텍스트 요약.

        Args:
            text: 작업 메모 원문 (빈 문자열 허용)
            metadata: 현장명, 인원

        Returns:
            SummaryResult
        """
        ...

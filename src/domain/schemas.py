"""
Data schemas for the daily log app.

규칙:
- 모든 엔티티는 메모리 전용 (프로세스/페이지 수명과 동일)
- 와이어 포맷은 camelCase (crewSize, siteName), 내부는 snake_case
- GeneratedResult는 summarize 호출을 기다린 경우에만 LogEntry에 포함
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.constants import SUMMARY_STATUS_OK
from src.domain.errors import ErrorCodes, SiteLogError

# =============================================================================
# Summarize Wire Schemas
# =============================================================================


def parse_crew_size(value: Any) -> int | None:
    """
    crewSize 값 정규화.

    허용: None, 빈 문자열, 0 이상 정수, 정수값 float, 숫자 문자열 (폼 입력)
    그 외: ValueError
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("crewSize must be a number")
    if isinstance(value, int):
        crew = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError("crewSize must be a whole number")
        crew = int(value)
    elif isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        if not stripped.isdigit():
            raise ValueError("crewSize must be a number")
        crew = int(stripped)
    else:
        raise ValueError("crewSize must be a number")

    if crew < 0:
        raise ValueError("crewSize must not be negative")
    return crew


@dataclass
class SummarizeRequest:
    """
    POST /api/summarize 요청 본문.

    text는 필수 (빈 문자열 허용), 나머지는 선택.
    """
    text: str
    crew_size: int | None = None
    site_name: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "SummarizeRequest":
        """
        JSON 본문 → SummarizeRequest.

        Raises:
            SiteLogError: INVALID_REQUEST (필드 누락/타입 오류)
        """
        if not isinstance(payload, dict):
            raise SiteLogError(
                ErrorCodes.INVALID_REQUEST, reason="request body must be a JSON object"
            )

        text = payload.get("text")
        if text is None:
            raise SiteLogError(
                ErrorCodes.INVALID_REQUEST, field="text", reason="text is required"
            )
        if not isinstance(text, str):
            raise SiteLogError(
                ErrorCodes.INVALID_REQUEST, field="text", reason="text must be a string"
            )

        try:
            crew_size = parse_crew_size(payload.get("crewSize"))
        except ValueError as e:
            raise SiteLogError(
                ErrorCodes.INVALID_REQUEST, field="crewSize", reason=str(e)
            ) from e

        site_name = payload.get("siteName")
        if site_name is not None and not isinstance(site_name, str):
            raise SiteLogError(
                ErrorCodes.INVALID_REQUEST,
                field="siteName",
                reason="siteName must be a string",
            )

        return cls(text=text, crew_size=crew_size, site_name=site_name)

    def to_payload(self) -> dict[str, Any]:
        """와이어 포맷 (camelCase)."""
        return {
            "text": self.text,
            "crewSize": self.crew_size,
            "siteName": self.site_name,
        }


@dataclass(frozen=True)
class GeneratedResult:
    """summarize 응답: 요약 텍스트 + 라벨."""
    summary: str
    labels: tuple[str, ...] = ()
    status: str = SUMMARY_STATUS_OK

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "GeneratedResult":
        """
        응답 JSON → GeneratedResult.

        Raises:
            ValueError: summary/labels 형식 오류
        """
        summary = payload.get("summary")
        labels = payload.get("labels", [])
        if not isinstance(summary, str):
            raise ValueError("summary missing from response")
        if not isinstance(labels, list) or not all(isinstance(x, str) for x in labels):
            raise ValueError("labels must be a list of strings")
        return cls(
            summary=summary,
            labels=tuple(labels),
            status=str(payload.get("status", SUMMARY_STATUS_OK)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "labels": list(self.labels),
            "status": self.status,
        }


# =============================================================================
# Log Schemas
# =============================================================================

@dataclass(frozen=True)
class LogDraft:
    """작성 중인 (저장 전) 작업일지."""
    site: str = ""
    crew_size: int | None = None
    notes: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.site and self.crew_size is None and not self.notes

    def to_request(self) -> SummarizeRequest:
        """Generate 요청으로 변환."""
        return SummarizeRequest(
            text=self.notes,
            crew_size=self.crew_size,
            site_name=self.site or None,
        )


@dataclass(frozen=True)
class LogEntry:
    """
    저장된 작업일지.

    생성 후 수정/삭제 없음. 히스토리 목록 맨 앞에 추가됨.
    """
    id: str
    date: str
    site: str
    crew_size: int | None
    notes: str
    generated: GeneratedResult | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "id": self.id,
            "date": self.date,
            "site": self.site,
            "crewSize": self.crew_size,
            "notes": self.notes,
            "generated": self.generated.to_dict() if self.generated else None,
        }


@dataclass(frozen=True)
class SummarizeOutcome:
    """
    클라이언트 측 Generate 결과 (성공/실패 타입).

    실패 시에도 error_message를 화면에 전달 (조용한 실패 금지).
    """
    success: bool
    result: GeneratedResult | None = None
    error_message: str | None = None
    error_code: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, result: GeneratedResult) -> "SummarizeOutcome":
        return cls(success=True, result=result)

    @classmethod
    def failed(
        cls, code: str, message: str, **context: Any
    ) -> "SummarizeOutcome":
        return cls(
            success=False, error_message=message, error_code=code, context=context
        )

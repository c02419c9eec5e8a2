"""
Summarize API 클라이언트 (httpx).

POST /api/summarize 1회 왕복 → SummarizeOutcome.
전송 실패도 예외 대신 실패 결과로 반환 (화면에 표시하기 위함).
"""

import logging

import httpx

from src.domain.errors import ErrorCodes
from src.domain.schemas import GeneratedResult, LogDraft, SummarizeOutcome

logger = logging.getLogger(__name__)

SUMMARIZE_PATH = "/api/summarize"


class SummarizeClient:
    """
    Summarize endpoint 클라이언트.

    Usage:
        async with SummarizeClient("http://127.0.0.1:8000") as client:
            outcome = await client.summarize(draft)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            base_url: backend 주소
            timeout: 요청 타임아웃(초)
            transport: httpx transport (테스트 주입용)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "SummarizeClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def summarize(self, draft: LogDraft) -> SummarizeOutcome:
        """
        draft의 notes/site/crew_size로 요약 요청.

        Returns:
            SummarizeOutcome (성공 시 result, 실패 시 error_code/error_message)
        """
        payload = draft.to_request().to_payload()

        try:
            response = await self._client.post(SUMMARIZE_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Summarize request failed: {type(e).__name__}: {e}")
            return SummarizeOutcome.failed(
                ErrorCodes.BACKEND_UNAVAILABLE,
                "요약 서버에 연결할 수 없습니다. 잠시 후 다시 시도하세요.",
                cause=type(e).__name__,
            )

        try:
            body = response.json()
        except ValueError:
            logger.error(
                f"Summarize response is not JSON (status={response.status_code})"
            )
            return SummarizeOutcome.failed(
                ErrorCodes.BAD_RESPONSE,
                "요약 서버 응답을 해석할 수 없습니다.",
                status=response.status_code,
            )

        if response.is_error:
            message = body.get("error") if isinstance(body, dict) else None
            code = body.get("code") if isinstance(body, dict) else None
            logger.warning(
                f"Summarize rejected: status={response.status_code}, error={message}"
            )
            return SummarizeOutcome.failed(
                code or ErrorCodes.SUMMARIZE_FAILED,
                message or "요약 생성에 실패했습니다.",
                status=response.status_code,
            )

        try:
            result = GeneratedResult.from_payload(body if isinstance(body, dict) else {})
        except ValueError as e:
            logger.error(f"Summarize response malformed: {e}")
            return SummarizeOutcome.failed(
                ErrorCodes.BAD_RESPONSE,
                "요약 서버 응답을 해석할 수 없습니다.",
                status=response.status_code,
            )

        return SummarizeOutcome.ok(result)

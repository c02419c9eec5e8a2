"""
Summarize Routes: 작업 메모 요약 API.

- POST /api/summarize → {summary, labels, status}

에러 응답:
- 400 {error, code: INVALID_REQUEST}: 본문/필드 형식 오류
- 500 {error, code: SUMMARIZE_FAILED}: 그 외 예외 (원인은 로그에만)
"""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.app.services.summarize import SummarizeService
from src.domain.errors import ErrorCodes, SiteLogError
from src.domain.schemas import SummarizeRequest

logger = logging.getLogger(__name__)

api_router = APIRouter()  # API endpoints


def get_summarize_service(request: Request) -> SummarizeService:
    """Request에서 SummarizeService 가져오기 (lifespan 미실행 시 생성)."""
    state = request.app.state
    service: SummarizeService | None = getattr(state, "summarize_service", None)
    if service is None:
        service = SummarizeService(getattr(state, "config", {}))
        state.summarize_service = service
    return service


def error_response(code: str, message: str, status_code: int) -> JSONResponse:
    """표준 에러 응답."""
    return JSONResponse({"error": message, "code": code}, status_code=status_code)


# =============================================================================
# API Routes
# =============================================================================

@api_router.post("")
async def summarize(request: Request) -> JSONResponse:
    """
    작업 메모 요약.

    요청: {text: str, crewSize?: int, siteName?: str}
    응답: {summary: str, labels: list[str], status: "ok"}
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return error_response(
            ErrorCodes.INVALID_REQUEST, "request body must be valid JSON", 400
        )

    try:
        summarize_request = SummarizeRequest.from_payload(payload)
    except SiteLogError as e:
        logger.info(f"Rejected summarize request: {e}")
        return error_response(e.code, str(e.context.get("reason", e)), 400)

    try:
        service = get_summarize_service(request)
        result = await service.summarize(summarize_request)
    except Exception:
        logger.exception("Summarize failed")
        return error_response(
            ErrorCodes.SUMMARIZE_FAILED, "Internal server error", 500
        )

    return JSONResponse(result.to_dict())

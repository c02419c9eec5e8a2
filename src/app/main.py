"""
FastAPI 애플리케이션 진입점 (backend).

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 스크립트: uv run sitelog-backend
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.routes import summarize
from src.app.services.summarize import SummarizeService
from src.core.config import (
    DEFAULT_BACKEND_HOST,
    DEFAULT_BACKEND_PORT,
    get_section,
    load_config,
)

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, summarizer 생성
    """
    app.state.config = load_config()
    app.state.summarize_service = SummarizeService(app.state.config)

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Site Daily Log API",
    description="현장 작업일지 → 요약 + 카테고리 라벨 (mock)",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(summarize.api_router, prefix="/api/summarize", tags=["Summarize API"])


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """backend 서버 실행 (인자 없음, host/port는 default.yaml)."""
    import uvicorn

    backend = get_section(load_config(), "backend")
    uvicorn.run(
        "src.app.main:app",
        host=backend.get("host", DEFAULT_BACKEND_HOST),
        port=int(backend.get("port", DEFAULT_BACKEND_PORT)),
        reload=bool(backend.get("reload", False)),
    )


if __name__ == "__main__":
    run()

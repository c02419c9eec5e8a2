"""
FastAPI 애플리케이션 진입점 (frontend dev server).

실행:
- 개발: uv run uvicorn src.web.main:app --reload --port 8001
- 스크립트: uv run sitelog-frontend

backend (src.app.main)가 먼저 떠 있어야 Generate가 동작함.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.client.api import SummarizeClient
from src.core.config import (
    DEFAULT_FRONTEND_HOST,
    DEFAULT_FRONTEND_PORT,
    DEFAULT_REQUEST_TIMEOUT,
    backend_url,
    get_section,
    load_config,
)
from src.web.routes import pages

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, backend 클라이언트 생성
    종료 시: 클라이언트 연결 정리
    """
    app.state.config = load_config()
    frontend = get_section(app.state.config, "frontend")
    app.state.summarize_client = SummarizeClient(
        backend_url(app.state.config),
        timeout=float(frontend.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)),
    )

    yield

    await app.state.summarize_client.aclose()


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Site Daily Log",
    description="현장 작업일지 작성 화면 (대시보드 / 작성 / 히스토리)",
    version="0.1.0",
    lifespan=lifespan,
)

# Static files (CSS)
static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")

app.include_router(pages.router, tags=["Pages"])


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """frontend 서버 실행 (인자 없음, host/port는 default.yaml)."""
    import uvicorn

    frontend = get_section(load_config(), "frontend")
    uvicorn.run(
        "src.web.main:app",
        host=frontend.get("host", DEFAULT_FRONTEND_HOST),
        port=int(frontend.get("port", DEFAULT_FRONTEND_PORT)),
        reload=bool(frontend.get("reload", False)),
    )


if __name__ == "__main__":
    run()

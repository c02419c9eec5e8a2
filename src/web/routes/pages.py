"""
Page Routes: 작업일지 화면 (HTMX).

- GET /          → 대시보드
- GET /new       → 새 작업일지 작성
- GET /history   → 저장된 작업일지 목록 (최신순)
- POST /new/generate → 요약 생성 (HTMX면 결과 조각만 반환)
- POST /new/save     → 저장 후 /history로 이동
- POST /new/clear    → 작성 중인 내용 초기화

세션별 ViewController는 메모리에만 존재 (재시작 시 소실).
"""

import logging
import uuid
from pathlib import Path

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from src.client.api import SummarizeClient
from src.client.controller import ViewController
from src.core.config import DEFAULT_REQUEST_TIMEOUT, backend_url, get_section
from src.domain.constants import VIEW_DASHBOARD, VIEW_HISTORY, VIEW_NEW
from src.domain.errors import ErrorCodes
from src.domain.schemas import parse_crew_size

logger = logging.getLogger(__name__)

# Jinja2 템플릿 설정
_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)

router = APIRouter()  # HTML pages

SESSION_COOKIE = "sitelog_session"
MAX_SESSIONS = 1000

# Session storage (in-memory only, 오래된 세션부터 제거)
_controllers: dict[str, ViewController] = {}


# =============================================================================
# Session Helpers
# =============================================================================


def get_summarize_client(request: Request) -> SummarizeClient:
    """Request에서 SummarizeClient 가져오기 (lifespan 미실행 시 생성)."""
    state = request.app.state
    client: SummarizeClient | None = getattr(state, "summarize_client", None)
    if client is None:
        config = getattr(state, "config", {})
        client = SummarizeClient(
            backend_url(config),
            timeout=float(
                get_section(config, "frontend").get(
                    "request_timeout", DEFAULT_REQUEST_TIMEOUT
                )
            ),
        )
        state.summarize_client = client
    return client


def get_session_id(request: Request) -> str:
    """쿠키의 세션 ID (없으면 새로 발급)."""
    return request.cookies.get(SESSION_COOKIE) or uuid.uuid4().hex


def get_controller(
    request: Request, session_id: str, persist: bool = True
) -> ViewController:
    """
    세션 ID에 대응하는 ViewController 반환 (없으면 생성).

    persist=False면 새로 만든 컨트롤러를 저장하지 않음
    (쿠키 없는 GET은 빈 상태라 저장할 필요 없음).
    """
    controller = _controllers.pop(session_id, None)
    if controller is None:
        controller = ViewController(get_summarize_client(request))
        if not persist:
            return controller

    # 최근 사용 순서 유지 (dict 삽입 순서)
    _controllers[session_id] = controller
    while len(_controllers) > MAX_SESSIONS:
        evicted = next(iter(_controllers))
        del _controllers[evicted]
        logger.info(f"Evicted session {evicted} (max_sessions={MAX_SESSIONS})")
    return controller


def get_page_controller(request: Request, session_id: str) -> ViewController:
    """GET 화면용: 쿠키가 있을 때만 세션 저장."""
    return get_controller(
        request, session_id, persist=SESSION_COOKIE in request.cookies
    )


def with_session(response: Response, session_id: str) -> Response:
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response


def render(
    request: Request,
    session_id: str,
    template: str,
    controller: ViewController,
    **extra: object,
) -> Response:
    context = {"state": controller.state, **extra}
    response = jinja_templates.TemplateResponse(request, template, context)
    return with_session(response, session_id)


def apply_form(
    controller: ViewController, site: str, crew_size: str, notes: str
) -> str | None:
    """
    폼 입력을 draft에 반영.

    Returns:
        인원 입력 오류 메시지 (정상이면 None)
    """
    try:
        crew = parse_crew_size(crew_size)
    except ValueError as e:
        controller.edit_draft(site=site.strip(), notes=notes)
        return str(e)

    controller.edit_draft(
        site=site.strip(),
        crew_size=crew,
        notes=notes,
        clear_crew_size=crew is None,
    )
    return None


# =============================================================================
# Page Routes (HTML)
# =============================================================================


@router.get("/", response_class=HTMLResponse)
async def dashboard_page(request: Request) -> Response:
    """대시보드."""
    session_id = get_session_id(request)
    controller = get_page_controller(request, session_id)
    controller.navigate(VIEW_DASHBOARD)
    return render(request, session_id, "dashboard.html", controller)


@router.get("/new", response_class=HTMLResponse)
async def new_log_page(request: Request) -> Response:
    """새 작업일지 작성 화면."""
    session_id = get_session_id(request)
    controller = get_page_controller(request, session_id)
    controller.navigate(VIEW_NEW)
    return render(request, session_id, "new.html", controller)


@router.get("/history", response_class=HTMLResponse)
async def history_page(request: Request) -> Response:
    """저장된 작업일지 목록."""
    session_id = get_session_id(request)
    controller = get_page_controller(request, session_id)
    controller.navigate(VIEW_HISTORY)
    return render(request, session_id, "history.html", controller)


@router.post("/new/generate", response_class=HTMLResponse)
async def generate_summary(
    request: Request,
    site: str = Form(""),
    crew_size: str = Form(""),
    notes: str = Form(""),
) -> Response:
    """요약 생성. HTMX 요청이면 결과 조각만 반환."""
    session_id = get_session_id(request)
    controller = get_controller(request, session_id)
    controller.navigate(VIEW_NEW)

    form_error = apply_form(controller, site, crew_size, notes)
    generate_error = None
    if form_error is None:
        outcome = await controller.generate()
        if outcome.error_code == ErrorCodes.GENERATE_IN_PROGRESS:
            generate_error = outcome.error_message

    template = "_generated.html" if request.headers.get("HX-Request") else "new.html"
    return render(
        request,
        session_id,
        template,
        controller,
        form_error=form_error,
        generate_error=generate_error,
    )


@router.post("/new/save")
async def save_log(
    request: Request,
    site: str = Form(""),
    crew_size: str = Form(""),
    notes: str = Form(""),
) -> Response:
    """저장 후 히스토리로 이동."""
    session_id = get_session_id(request)
    controller = get_controller(request, session_id)
    controller.navigate(VIEW_NEW)

    form_error = apply_form(controller, site, crew_size, notes)
    if form_error is not None:
        return render(request, session_id, "new.html", controller, form_error=form_error)

    entry = controller.save()
    if entry is not None:
        logger.info(f"Saved log entry {entry.id} (history={len(controller.state.history)})")

    response = RedirectResponse("/history", status_code=303)
    return with_session(response, session_id)


@router.post("/new/clear")
async def clear_draft(request: Request) -> Response:
    """작성 중인 내용 초기화."""
    session_id = get_session_id(request)
    controller = get_controller(request, session_id)
    controller.clear()

    response = RedirectResponse("/new", status_code=303)
    return with_session(response, session_id)

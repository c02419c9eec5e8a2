"""
View state machine: (state, action) → new state.

화면 상태: dashboard / new / history
모든 전이는 순수 함수 reduce()로만 발생 (상태 객체는 불변).

전이 규칙:
- Navigate: 다른 화면으로 이동 시 draft/generated/error 폐기, history 유지
- GenerateRequested: loading 중이면 무시 (권고용 가드)
- GenerateSucceeded/Failed: pending_request_id와 다른 응답은 무시
- SaveLog: history 맨 앞에 추가 → draft 초기화 → history 화면
"""

from dataclasses import dataclass, field, replace
from typing import Union

from src.domain.constants import VIEW_DASHBOARD, VIEW_HISTORY, VIEW_NEW, VIEWS
from src.domain.schemas import GeneratedResult, LogDraft, LogEntry

# =============================================================================
# State
# =============================================================================


@dataclass(frozen=True)
class AppState:
    """UI 전체 상태."""
    view: str = VIEW_DASHBOARD
    draft: LogDraft = field(default_factory=LogDraft)
    generated: GeneratedResult | None = None
    loading: bool = False
    error: str | None = None
    pending_request_id: str | None = None
    history: tuple[LogEntry, ...] = ()


def initial_state() -> AppState:
    return AppState()


# =============================================================================
# Actions
# =============================================================================


@dataclass(frozen=True)
class Navigate:
    view: str


@dataclass(frozen=True)
class EditDraft:
    """None인 필드는 변경하지 않음. crew_size 비우기는 clear_crew_size=True."""
    site: str | None = None
    crew_size: int | None = None
    notes: str | None = None
    clear_crew_size: bool = False


@dataclass(frozen=True)
class GenerateRequested:
    request_id: str


@dataclass(frozen=True)
class GenerateSucceeded:
    request_id: str
    result: GeneratedResult


@dataclass(frozen=True)
class GenerateFailed:
    request_id: str
    error: str


@dataclass(frozen=True)
class SaveLog:
    entry_id: str
    date: str


@dataclass(frozen=True)
class ClearDraft:
    pass


Action = Union[
    Navigate,
    EditDraft,
    GenerateRequested,
    GenerateSucceeded,
    GenerateFailed,
    SaveLog,
    ClearDraft,
]


# =============================================================================
# Reducer
# =============================================================================


def _discard_draft(state: AppState) -> AppState:
    return replace(
        state,
        draft=LogDraft(),
        generated=None,
        loading=False,
        error=None,
        pending_request_id=None,
    )


def reduce(state: AppState, action: Action) -> AppState:
    """
    상태 전이.

    Raises:
        ValueError: 알 수 없는 view 이름
        TypeError: 알 수 없는 action
    """
    if isinstance(action, Navigate):
        if action.view not in VIEWS:
            raise ValueError(f"Unknown view: {action.view!r}")
        if action.view == state.view:
            return state
        return replace(_discard_draft(state), view=action.view)

    if isinstance(action, EditDraft):
        draft = state.draft
        crew_size = None if action.clear_crew_size else (
            action.crew_size if action.crew_size is not None else draft.crew_size
        )
        return replace(
            state,
            draft=LogDraft(
                site=action.site if action.site is not None else draft.site,
                crew_size=crew_size,
                notes=action.notes if action.notes is not None else draft.notes,
            ),
        )

    if isinstance(action, GenerateRequested):
        if state.loading:
            return state
        return replace(
            state,
            loading=True,
            error=None,
            pending_request_id=action.request_id,
        )

    if isinstance(action, GenerateSucceeded):
        if action.request_id != state.pending_request_id:
            return state
        return replace(
            state,
            generated=action.result,
            loading=False,
            error=None,
            pending_request_id=None,
        )

    if isinstance(action, GenerateFailed):
        if action.request_id != state.pending_request_id:
            return state
        return replace(
            state,
            loading=False,
            error=action.error,
            pending_request_id=None,
        )

    if isinstance(action, SaveLog):
        if state.view != VIEW_NEW:
            return state
        entry = LogEntry(
            id=action.entry_id,
            date=action.date,
            site=state.draft.site,
            crew_size=state.draft.crew_size,
            notes=state.draft.notes,
            generated=state.generated,
        )
        return replace(
            _discard_draft(state),
            view=VIEW_HISTORY,
            history=(entry, *state.history),
        )

    if isinstance(action, ClearDraft):
        return _discard_draft(state)

    raise TypeError(f"Unknown action: {action!r}")

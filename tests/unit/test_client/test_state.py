"""
test_state.py - 화면 상태 기계 테스트

검증 포인트:
1. 화면 이동: 다른 화면으로 가면 draft 폐기, history 유지
2. loading 가드: 요청 중 재요청 무시
3. 늦게 도착한 응답 (request_id 불일치) 무시
4. 저장: history 맨 앞 추가, 정확히 +1, draft 초기화, history 화면
"""

import pytest

from src.client.state import (
    AppState,
    ClearDraft,
    EditDraft,
    GenerateFailed,
    GenerateRequested,
    GenerateSucceeded,
    Navigate,
    SaveLog,
    initial_state,
    reduce,
)
from src.domain.schemas import GeneratedResult, LogDraft

RESULT = GeneratedResult(summary="Date: 2024-01-15", labels=("Delay",))


def new_state(**kwargs) -> AppState:
    """new 화면 + 작성 중 draft."""
    state = reduce(initial_state(), Navigate("new"))
    return reduce(
        state,
        EditDraft(
            site=kwargs.get("site", "NB Refinery"),
            crew_size=kwargs.get("crew_size", 6),
            notes=kwargs.get("notes", "late delivery"),
        ),
    )


# =============================================================================
# Initial State / Navigate
# =============================================================================


class TestInitialState:
    """초기 상태."""

    def test_defaults(self):
        state = initial_state()

        assert state.view == "dashboard"
        assert state.draft == LogDraft()
        assert state.history == ()
        assert state.loading is False
        assert state.generated is None


class TestNavigate:
    """화면 이동 테스트."""

    @pytest.mark.parametrize(
        "start,target",
        [
            ("dashboard", "new"),
            ("new", "history"),
            ("history", "dashboard"),
            ("new", "dashboard"),
            ("history", "new"),
        ],
    )
    def test_free_navigation(self, start, target):
        state = AppState(view=start)

        assert reduce(state, Navigate(target)).view == target

    def test_leaving_new_discards_draft(self):
        state = reduce(new_state(), GenerateRequested("REQ-1"))
        state = reduce(state, GenerateSucceeded("REQ-1", RESULT))

        state = reduce(state, Navigate("history"))

        assert state.draft == LogDraft()
        assert state.generated is None
        assert state.error is None

    def test_leaving_new_keeps_history(self):
        state = reduce(new_state(), SaveLog("LOG-1", "2024-01-15"))
        state = reduce(state, Navigate("new"))
        state = reduce(state, EditDraft(notes="unsaved"))

        state = reduce(state, Navigate("dashboard"))

        assert len(state.history) == 1
        assert state.history[0].id == "LOG-1"

    def test_same_view_is_noop(self):
        state = new_state()

        assert reduce(state, Navigate("new")) is state

    def test_unknown_view(self):
        with pytest.raises(ValueError):
            reduce(initial_state(), Navigate("settings"))


# =============================================================================
# EditDraft / ClearDraft
# =============================================================================


class TestEditDraft:
    """draft 편집 테스트."""

    def test_partial_update(self):
        state = reduce(new_state(), EditDraft(notes="changed"))

        assert state.draft.notes == "changed"
        assert state.draft.site == "NB Refinery"
        assert state.draft.crew_size == 6

    def test_clear_crew_size(self):
        state = reduce(new_state(), EditDraft(clear_crew_size=True))

        assert state.draft.crew_size is None

    def test_edit_keeps_generated_result(self):
        """generated는 notes 변경 후에도 유지 (신선도 미보장)."""
        state = reduce(new_state(), GenerateRequested("REQ-1"))
        state = reduce(state, GenerateSucceeded("REQ-1", RESULT))

        state = reduce(state, EditDraft(notes="different"))

        assert state.generated == RESULT

    def test_does_not_mutate_previous_state(self):
        before = new_state()

        reduce(before, EditDraft(notes="changed"))

        assert before.draft.notes == "late delivery"


class TestClearDraft:
    """초기화 테스트."""

    def test_clear(self):
        state = reduce(new_state(), ClearDraft())

        assert state.draft == LogDraft()
        assert state.view == "new"


# =============================================================================
# Generate
# =============================================================================


class TestGenerate:
    """Generate 요청/응답 전이 테스트."""

    def test_requested_sets_loading(self):
        state = reduce(new_state(), GenerateRequested("REQ-1"))

        assert state.loading is True
        assert state.pending_request_id == "REQ-1"

    def test_requested_while_loading_is_ignored(self):
        state = reduce(new_state(), GenerateRequested("REQ-1"))

        again = reduce(state, GenerateRequested("REQ-2"))

        assert again is state
        assert again.pending_request_id == "REQ-1"

    def test_success_stores_result_and_stays_in_new(self):
        state = reduce(new_state(), GenerateRequested("REQ-1"))

        state = reduce(state, GenerateSucceeded("REQ-1", RESULT))

        assert state.generated == RESULT
        assert state.loading is False
        assert state.view == "new"

    def test_failure_records_error(self):
        """실패도 사용자에게 보이도록 error 기록."""
        state = reduce(new_state(), GenerateRequested("REQ-1"))

        state = reduce(state, GenerateFailed("REQ-1", "server down"))

        assert state.loading is False
        assert state.error == "server down"
        assert state.generated is None

    def test_new_request_clears_previous_error(self):
        state = reduce(new_state(), GenerateRequested("REQ-1"))
        state = reduce(state, GenerateFailed("REQ-1", "server down"))

        state = reduce(state, GenerateRequested("REQ-2"))

        assert state.error is None

    def test_stale_response_ignored(self):
        """화면 이동 후 도착한 응답은 무시."""
        state = reduce(new_state(), GenerateRequested("REQ-1"))
        state = reduce(state, Navigate("history"))

        after = reduce(state, GenerateSucceeded("REQ-1", RESULT))

        assert after is state
        assert after.generated is None

    def test_mismatched_failure_ignored(self):
        state = reduce(new_state(), GenerateRequested("REQ-1"))

        after = reduce(state, GenerateFailed("REQ-OLD", "boom"))

        assert after is state


# =============================================================================
# SaveLog
# =============================================================================


class TestSaveLog:
    """저장 테스트."""

    def test_save_moves_to_history(self):
        state = reduce(new_state(), SaveLog("LOG-1", "2024-01-15"))

        assert state.view == "history"
        assert state.draft == LogDraft()

    def test_entry_fields(self):
        state = reduce(new_state(), GenerateRequested("REQ-1"))
        state = reduce(state, GenerateSucceeded("REQ-1", RESULT))

        state = reduce(state, SaveLog("LOG-1", "2024-01-15"))

        entry = state.history[0]
        assert entry.id == "LOG-1"
        assert entry.date == "2024-01-15"
        assert entry.site == "NB Refinery"
        assert entry.crew_size == 6
        assert entry.notes == "late delivery"
        assert entry.generated == RESULT

    def test_save_without_generate_has_no_generated(self):
        state = reduce(new_state(), SaveLog("LOG-1", "2024-01-15"))

        assert state.history[0].generated is None

    def test_newest_first_and_grows_by_one(self):
        state = reduce(new_state(notes="first"), SaveLog("LOG-1", "d"))
        for i, notes in enumerate(["second", "third"], start=2):
            state = reduce(state, Navigate("new"))
            state = reduce(state, EditDraft(notes=notes))
            before = len(state.history)

            state = reduce(state, SaveLog(f"LOG-{i}", "d"))

            assert len(state.history) == before + 1

        assert [e.notes for e in state.history] == ["third", "second", "first"]

    def test_save_outside_new_is_noop(self):
        state = AppState(view="history")

        assert reduce(state, SaveLog("LOG-1", "d")) is state

    def test_save_while_loading_drops_pending_response(self):
        state = reduce(new_state(), GenerateRequested("REQ-1"))
        state = reduce(state, SaveLog("LOG-1", "d"))

        after = reduce(state, GenerateSucceeded("REQ-1", RESULT))

        assert after.generated is None
        assert after.history[0].generated is None


class TestUnknownAction:
    def test_raises(self):
        with pytest.raises(TypeError):
            reduce(initial_state(), object())  # type: ignore[arg-type]

"""
ViewController: 상태 + API 클라이언트 + ID/시계 연결.

상태 변경은 모두 dispatch() → reduce() 경유.
Generate는 세션당 동시에 1건만 (loading 가드).
"""

import logging
from collections.abc import Callable
from datetime import date

from src.client.api import SummarizeClient
from src.client.state import (
    Action,
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
from src.core.ids import generate_entry_id, generate_request_id
from src.domain.errors import ErrorCodes
from src.domain.schemas import LogEntry, SummarizeOutcome

logger = logging.getLogger(__name__)


class ViewController:
    """
    세션 단위 UI 컨트롤러.

    Usage:
        controller = ViewController(client)
        controller.navigate("new")
        controller.edit_draft(site="NB Refinery", crew_size=6, notes="...")
        outcome = await controller.generate()
        entry = controller.save()
    """

    def __init__(
        self,
        client: SummarizeClient,
        today: Callable[[], date] | None = None,
        state: AppState | None = None,
    ):
        self.client = client
        self._today = today or date.today
        self._state = state or initial_state()

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        self._state = reduce(self._state, action)
        return self._state

    # =========================================================================
    # User actions
    # =========================================================================

    def navigate(self, view: str) -> AppState:
        return self.dispatch(Navigate(view))

    def edit_draft(
        self,
        site: str | None = None,
        crew_size: int | None = None,
        notes: str | None = None,
        clear_crew_size: bool = False,
    ) -> AppState:
        return self.dispatch(
            EditDraft(
                site=site,
                crew_size=crew_size,
                notes=notes,
                clear_crew_size=clear_crew_size,
            )
        )

    def clear(self) -> AppState:
        return self.dispatch(ClearDraft())

    async def generate(self) -> SummarizeOutcome:
        """
        현재 draft로 요약 요청.

        loading 중이면 요청하지 않고 GENERATE_IN_PROGRESS 실패 반환
        (진행 중인 요청의 상태는 건드리지 않음, 화면 표시는 호출자 몫).
        결과는 상태(generated 또는 error)에도 반영됨.
        client 예외도 실패 결과로 변환되어 loading이 남지 않음.
        """
        if self._state.loading:
            return SummarizeOutcome.failed(
                ErrorCodes.GENERATE_IN_PROGRESS,
                "이미 요약을 생성하는 중입니다.",
            )

        request_id = generate_request_id()
        draft = self._state.draft
        self.dispatch(GenerateRequested(request_id))

        try:
            outcome = await self.client.summarize(draft)
        except Exception as e:
            logger.exception(f"Generate crashed: request_id={request_id}")
            outcome = SummarizeOutcome.failed(
                ErrorCodes.SUMMARIZE_FAILED,
                "요약 생성 중 오류가 발생했습니다.",
                cause=type(e).__name__,
            )
        except BaseException:
            # 취소 시에도 loading 해제
            self.dispatch(GenerateFailed(request_id, "요약 생성이 취소되었습니다."))
            raise

        if outcome.success and outcome.result is not None:
            self.dispatch(GenerateSucceeded(request_id, outcome.result))
        else:
            logger.info(
                f"Generate failed: code={outcome.error_code}, request_id={request_id}"
            )
            self.dispatch(
                GenerateFailed(request_id, outcome.error_message or "요약 생성 실패")
            )
        return outcome

    def save(self) -> LogEntry | None:
        """
        draft + 마지막 generated 결과를 history 맨 앞에 저장.

        Returns:
            저장된 LogEntry (new 화면이 아니면 None)
        """
        before = len(self._state.history)
        state = self.dispatch(
            SaveLog(
                entry_id=generate_entry_id(),
                date=self._today().isoformat(),
            )
        )
        if len(state.history) == before:
            return None
        return state.history[0]

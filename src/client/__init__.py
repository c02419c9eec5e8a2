"""
Client layer: UI 상태 기계 + summarize API 호출.

- state: AppState + reduce() (순수 함수)
- api: SummarizeClient (httpx)
- controller: ViewController (세션 단위)
"""

from .api import SummarizeClient
from .controller import ViewController
from .state import AppState, initial_state, reduce

__all__ = [
    "AppState",
    "SummarizeClient",
    "ViewController",
    "initial_state",
    "reduce",
]

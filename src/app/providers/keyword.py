"""
Keyword Summarizer (mock).

실제 요약이 아님:
- summary: 고정 템플릿 + 원문 앞 200자 절삭
- labels: 대소문자 무시 부분 문자열 매칭
"""

import logging
import re
from collections.abc import Callable
from datetime import date

from src.domain.constants import (
    DEFAULT_CREW_SIZE,
    DEFAULT_SITE_NAME,
    LABEL_RULES,
    SUMMARY_ELLIPSIS,
    SUMMARY_MAX_CHARS,
)

from .base import SummaryMetadata, SummaryResult, Summarizer

logger = logging.getLogger(__name__)


def _compile_rules(
    rules: tuple[tuple[str, tuple[str, ...]], ...],
) -> list[tuple[str, re.Pattern[str]]]:
    return [
        (label, re.compile("|".join(re.escape(k) for k in keywords), re.IGNORECASE))
        for label, keywords in rules
    ]


class KeywordSummarizer(Summarizer):
    """
    정규식 기반 mock summarizer.

    Usage:
        summarizer = KeywordSummarizer()
        result = await summarizer.summarize(text, SummaryMetadata(site_name="NB Refinery"))
    """

    name = "keyword"

    def __init__(
        self,
        max_chars: int = SUMMARY_MAX_CHARS,
        today: Callable[[], date] | None = None,
    ):
        """
        Args:
            max_chars: 요약에 포함할 원문 최대 글자 수
            today: 날짜 공급 함수 (테스트 주입용, 기본 date.today)
        """
        self.max_chars = max_chars
        self._today = today or date.today
        self._rules = _compile_rules(LABEL_RULES)

    def build_summary(self, text: str, metadata: SummaryMetadata) -> str:
        site = (metadata.site_name or "").strip() or DEFAULT_SITE_NAME
        crew = DEFAULT_CREW_SIZE if metadata.crew_size is None else str(metadata.crew_size)
        excerpt = text[: self.max_chars]

        return "\n".join([
            f"Date: {self._today().isoformat()}",
            f"Site: {site}",
            f"Crew: {crew}",
            f"Summary: {excerpt}{SUMMARY_ELLIPSIS}",
        ])

    def classify(self, text: str) -> list[str]:
        """라벨 목록 (규칙 순서 고정, 매칭된 것만)."""
        return [label for label, pattern in self._rules if pattern.search(text)]

    async def summarize(self, text: str, metadata: SummaryMetadata) -> SummaryResult:
        labels = self.classify(text)
        logger.debug(f"Keyword summarize: {len(text)} chars, labels={labels}")

        return SummaryResult(
            summary=self.build_summary(text, metadata),
            labels=labels,
            provider=self.name,
        )

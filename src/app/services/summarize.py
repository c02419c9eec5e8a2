"""
Summarize Service: 작업 메모 → 요약 + 라벨.

- 요청 검증은 SummarizeRequest.from_payload에서 끝난 상태로 들어옴
- provider는 config 기반 생성 (summarize.provider)
"""

import logging
import os

from src.app.providers.base import (
    ProviderError,
    SummaryMetadata,
    SummaryResult,
    Summarizer,
)
from src.app.providers.keyword import KeywordSummarizer
from src.core.config import get_section
from src.domain.constants import SUMMARY_MAX_CHARS
from src.domain.schemas import SummarizeRequest

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "keyword"


def create_summarizer(config: dict) -> Summarizer:
    """
    config 기반 Summarizer 생성.

    Args:
        config: 전체 설정 (summarize 섹션 사용)

    Returns:
        Summarizer 구현체

    Raises:
        ProviderError: 알 수 없는 provider 이름
    """
    summarize_config = get_section(config, "summarize")
    provider_name = summarize_config.get("provider", DEFAULT_PROVIDER)

    if provider_name == KeywordSummarizer.name:
        # OPENAI_API_KEY는 향후 모델 연동용으로 예약됨
        if os.environ.get("OPENAI_API_KEY"):
            logger.warning(
                "OPENAI_API_KEY is set but the keyword summarizer does not use it"
            )
        return KeywordSummarizer(
            max_chars=int(summarize_config.get("max_chars", SUMMARY_MAX_CHARS)),
        )

    raise ProviderError(
        "UNKNOWN_PROVIDER",
        f"알 수 없는 summarize provider: {provider_name}",
        provider=provider_name,
    )


class SummarizeService:
    """
    요약 서비스.

    요청 단위로 상태 없음 (stateless).
    """

    def __init__(self, config: dict, provider: Summarizer | None = None):
        """
        Args:
            config: 설정 (summarize 섹션 포함)
            provider: Summarizer (None이면 config 기반 생성)
        """
        self.config = config
        self.provider = provider if provider is not None else create_summarizer(config)

    async def summarize(self, request: SummarizeRequest) -> SummaryResult:
        metadata = SummaryMetadata(
            site_name=request.site_name,
            crew_size=request.crew_size,
        )
        return await self.provider.summarize(request.text, metadata)

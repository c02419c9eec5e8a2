"""
Summarizer Provider Abstraction.

요약 엔진 교체 가능하게 설계.
provider 이름은 config (summarize.provider)만 SSOT.
"""

from .base import ProviderError, SummaryMetadata, SummaryResult, Summarizer
from .keyword import KeywordSummarizer

__all__ = [
    "Summarizer",
    "SummaryMetadata",
    "SummaryResult",
    "ProviderError",
    "KeywordSummarizer",
]

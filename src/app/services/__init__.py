"""
Application Services.

역할:
- summarize: 작업 메모 → 요약 + 라벨 (provider 위임)
"""

from .summarize import SummarizeService, create_summarizer

__all__ = [
    "SummarizeService",
    "create_summarizer",
]

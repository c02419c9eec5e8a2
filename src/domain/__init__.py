"""Domain layer: errors and schemas."""

from .errors import ErrorCodes, SiteLogError
from .schemas import (
    GeneratedResult,
    LogDraft,
    LogEntry,
    SummarizeOutcome,
    SummarizeRequest,
)

__all__ = [
    "ErrorCodes",
    "SiteLogError",
    "GeneratedResult",
    "LogDraft",
    "LogEntry",
    "SummarizeOutcome",
    "SummarizeRequest",
]

"""Data models and schemas."""

from .schemas import (
    ImageRecord,
    ExplanationRecord,
    ParsedExplanation,
    DegradedExplanation,
    ExplanationResult,
    ExplainRequest,
    SummaryRequest,
    SummaryResponse,
    ErrorResponse,
    ExplanationStatus,
    CardState,
)

__all__ = [
    "ImageRecord",
    "ExplanationRecord",
    "ParsedExplanation",
    "DegradedExplanation",
    "ExplanationResult",
    "ExplainRequest",
    "SummaryRequest",
    "SummaryResponse",
    "ErrorResponse",
    "ExplanationStatus",
    "CardState",
]

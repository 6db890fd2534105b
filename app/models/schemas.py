"""
Pydantic schemas for request/response validation.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# APOD Schemas
# ============================================================================

MediaType = Literal["image", "video"]


class ImageRecord(BaseModel):
    """One Astronomy Picture of the Day entry, in NASA's wire shape."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    title: str
    explanation: str
    media_type: MediaType
    url: str
    hdurl: str | None = None
    copyright: str | None = None
    service_version: str

    def to_wire(self) -> dict:
        """Serialize back to NASA's field names, omitting absent optionals."""
        return self.model_dump(exclude_none=True)


# ============================================================================
# Explanation Schemas
# ============================================================================


class ExplanationRecord(BaseModel):
    """AI-generated annotation for one image."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    explanation: str
    key_features: list[str] = Field(..., alias="keyFeatures")
    scientific_context: str = Field(..., alias="scientificContext")


FALLBACK_KEY_FEATURES = ["Enhanced explanation generated"]
FALLBACK_SCIENTIFIC_CONTEXT = "AI-generated astronomical analysis"


class ParsedExplanation(BaseModel):
    """Upstream text parsed cleanly into the three-field shape."""

    kind: Literal["parsed"] = "parsed"
    record: ExplanationRecord


class DegradedExplanation(BaseModel):
    """Upstream text was not valid JSON; the raw text becomes the explanation."""

    kind: Literal["degraded"] = "degraded"
    raw_text: str

    @property
    def record(self) -> ExplanationRecord:
        return ExplanationRecord(
            explanation=self.raw_text,
            key_features=list(FALLBACK_KEY_FEATURES),
            scientific_context=FALLBACK_SCIENTIFIC_CONTEXT,
        )


ExplanationResult = ParsedExplanation | DegradedExplanation


# ============================================================================
# Request / Response Schemas
# ============================================================================


class ExplainRequest(BaseModel):
    """Body of POST /explain."""

    image: ImageRecord | None = None


class SummaryRequest(BaseModel):
    """Body of POST /summary."""

    images: list[ImageRecord] = Field(default_factory=list)


class SummaryResponse(BaseModel):
    """Short overview of a collection of images."""

    summary: str


class ErrorResponse(BaseModel):
    """Error body returned by every gateway."""

    error: str


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or malformed input"},
    500: {"model": ErrorResponse, "description": "Configuration or upstream failure"},
}


# ============================================================================
# Client State Schemas (not exposed via API)
# ============================================================================


class ExplanationStatus(str, Enum):
    ABSENT = "absent"
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


class CardState(BaseModel):
    """Explanation state of one displayed card, keyed by date in the controller."""

    model_config = ConfigDict(frozen=True)

    status: ExplanationStatus = ExplanationStatus.ABSENT
    explanation: ExplanationRecord | None = None

    @property
    def is_busy(self) -> bool:
        """True when a new explain request must be ignored."""
        return self.status in (ExplanationStatus.PENDING, ExplanationStatus.READY)

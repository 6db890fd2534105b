"""
View models for the gallery: cards, grid, header and footer.

Renderers (HTML templates, the console script) consume these; no state lives here.
"""

from datetime import date
from typing import TYPE_CHECKING

from pydantic import BaseModel

from app.models.schemas import CardState, ExplanationRecord, ExplanationStatus, ImageRecord

if TYPE_CHECKING:
    from app.client.controller import GalleryController

DESCRIPTION_PREVIEW_LENGTH = 150

EXPLAIN_LABELS = {
    ExplanationStatus.ABSENT: "Get AI Explanation",
    ExplanationStatus.FAILED: "Get AI Explanation",
    ExplanationStatus.PENDING: "Analyzing...",
    ExplanationStatus.READY: "AI Analysis Complete",
}


def format_display_date(value: str) -> str:
    """2026-10-18 -> October 18, 2026"""
    parsed = date.fromisoformat(value)
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def truncate_text(text: str, max_length: int = DESCRIPTION_PREVIEW_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ImageCardView(BaseModel):
    """Everything a renderer needs to draw one image card."""

    key: str
    title: str
    display_date: str
    media_url: str
    is_video: bool
    hd_url: str | None = None
    copyright: str | None = None
    description_preview: str
    description_full: str
    expandable: bool
    explain_label: str
    explain_enabled: bool
    explanation: ExplanationRecord | None = None

    @classmethod
    def from_record(cls, image: ImageRecord, state: CardState) -> "ImageCardView":
        return cls(
            key=image.date,
            title=image.title,
            display_date=format_display_date(image.date),
            media_url=image.url,
            is_video=image.media_type == "video",
            hd_url=image.hdurl,
            copyright=image.copyright,
            description_preview=truncate_text(image.explanation),
            description_full=image.explanation,
            expandable=len(image.explanation) > DESCRIPTION_PREVIEW_LENGTH,
            explain_label=EXPLAIN_LABELS[state.status],
            explain_enabled=not state.is_busy,
            explanation=state.explanation if state.status == ExplanationStatus.READY else None,
        )


class HeaderView(BaseModel):
    title: str = "NASA Image Explorer"
    tagline: str = "Discover the cosmos with AI-enhanced explanations"
    actions: list[str] = ["Today's Image", "Recent Images"]


class FooterView(BaseModel):
    credit: str = "Images courtesy of NASA API"
    credit_url: str = "https://api.nasa.gov/"
    note: str = "Enhanced with AI explanations to make astronomy accessible to everyone"


class GalleryView(BaseModel):
    """The whole page: chrome plus either a loading, error, empty or card state."""

    header: HeaderView = HeaderView()
    footer: FooterView = FooterView()
    loading: bool = False
    loading_message: str = "Loading NASA images..."
    error: str | None = None
    retry_label: str = "Try Again"
    empty_message: str = "No images found"
    cards: list[ImageCardView] = []

    @property
    def is_empty(self) -> bool:
        return not self.loading and self.error is None and not self.cards

    @classmethod
    def from_controller(cls, controller: "GalleryController") -> "GalleryView":
        return cls(
            loading=controller.loading,
            error=controller.error,
            cards=[
                ImageCardView.from_record(image, controller.state_for(image.date))
                for image in controller.images
            ],
        )


def render_text(view: GalleryView, full_descriptions: bool = False) -> str:
    """Plain-text rendering of a GalleryView."""
    lines = [view.header.title, view.header.tagline, "=" * 60]

    if view.loading:
        lines.append(view.loading_message)
    elif view.error:
        lines.append(f"[!] {view.error}  ({view.retry_label})")
    elif view.is_empty:
        lines.append(view.empty_message)

    # The spinner or error banner replaces the grid
    cards = [] if view.loading or view.error else view.cards

    for card in cards:
        lines.append("")
        lines.append(f"{card.display_date} | {card.title}")
        if card.copyright:
            lines.append(f"  © {card.copyright}")
        media = "Video" if card.is_video else "Image"
        lines.append(f"  {media}: {card.media_url}")
        if card.hd_url:
            lines.append(f"  View HD: {card.hd_url}")
        description = card.description_full if full_descriptions else card.description_preview
        lines.append(f"  NASA Description: {description}")

        if card.explanation:
            lines.append("  AI Enhanced Explanation:")
            lines.append(f"    {card.explanation.explanation}")
            lines.append("    Key Features:")
            lines.extend(f"      - {feature}" for feature in card.explanation.key_features)
            lines.append(f"    Scientific Context: {card.explanation.scientific_context}")
        else:
            lines.append(f"  [{card.explain_label}]")

    lines.append("")
    lines.append("=" * 60)
    lines.append(f"{view.footer.credit} ({view.footer.credit_url})")
    lines.append(view.footer.note)
    return "\n".join(lines)

"""
Tests for the gallery view models.
"""

from datetime import date

from app.client.presentation import (
    GalleryView,
    ImageCardView,
    format_display_date,
    render_text,
    truncate_text,
)
from app.models.schemas import CardState, ExplanationRecord, ExplanationStatus, ImageRecord
from conftest import make_apod

EXPLANATION = ExplanationRecord(
    explanation="Simple words.",
    key_features=["Spiral arms", "Dust lanes"],
    scientific_context="Galaxies evolve.",
)


class StubController:
    def __init__(self, images=(), states=None, loading=False, error=None):
        self.images = list(images)
        self.card_states = states or {}
        self.loading = loading
        self.error = error

    def state_for(self, image_date):
        return self.card_states.get(image_date, CardState())


def test_format_and_truncate():
    assert format_display_date("2026-10-08") == "October 8, 2026"
    assert truncate_text("short") == "short"
    assert truncate_text("x" * 151) == "x" * 150 + "..."
    assert truncate_text("x" * 150) == "x" * 150


def test_card_button_follows_state():
    image = ImageRecord.model_validate(make_apod(date(2026, 10, 18)))

    absent = ImageCardView.from_record(image, CardState())
    pending = ImageCardView.from_record(image, CardState(status=ExplanationStatus.PENDING))
    ready = ImageCardView.from_record(image, CardState(status=ExplanationStatus.READY, explanation=EXPLANATION))
    failed = ImageCardView.from_record(image, CardState(status=ExplanationStatus.FAILED))

    assert (absent.explain_label, absent.explain_enabled) == ("Get AI Explanation", True)
    assert (pending.explain_label, pending.explain_enabled) == ("Analyzing...", False)
    assert (ready.explain_label, ready.explain_enabled) == ("AI Analysis Complete", False)
    assert (failed.explain_label, failed.explain_enabled) == ("Get AI Explanation", True)
    assert ready.explanation == EXPLANATION
    assert absent.explanation is None


def test_card_media_fields():
    video = ImageRecord.model_validate(
        make_apod(date(2026, 10, 18), media_type="video", hdurl=None, copyright="ESA", explanation="y" * 200)
    )

    card = ImageCardView.from_record(video, CardState())

    assert card.is_video
    assert card.hd_url is None
    assert card.copyright == "ESA"
    assert card.expandable
    assert card.description_preview.endswith("...")
    assert card.display_date == "October 18, 2026"


def test_gallery_states():
    assert GalleryView.from_controller(StubController()).is_empty
    assert not GalleryView.from_controller(StubController(loading=True)).is_empty

    error_view = GalleryView.from_controller(StubController(error="Failed to fetch NASA images"))
    assert "Failed to fetch NASA images" in render_text(error_view)
    assert "Try Again" in render_text(error_view)

    assert "No images found" in render_text(GalleryView.from_controller(StubController()))


def test_render_cards_in_controller_order():
    images = [ImageRecord.model_validate(make_apod(date(2026, 10, d))) for d in (18, 17)]
    controller = StubController(
        images,
        states={"2026-10-17": CardState(status=ExplanationStatus.READY, explanation=EXPLANATION)},
    )

    view = GalleryView.from_controller(controller)
    text = render_text(view)

    assert [card.key for card in view.cards] == ["2026-10-18", "2026-10-17"]
    assert text.index("October 18, 2026") < text.index("October 17, 2026")
    assert "[Get AI Explanation]" in text
    assert "      - Spiral arms" in text
    assert "NASA API" in text


def test_banner_replaces_cards():
    images = [ImageRecord.model_validate(make_apod(date(2026, 10, 18), title="Horsehead Nebula"))]

    loading = render_text(GalleryView.from_controller(StubController(images, loading=True)))
    failed = render_text(GalleryView.from_controller(StubController(images, error="Failed to fetch NASA images")))
    shown = render_text(GalleryView.from_controller(StubController(images)))

    assert "Loading NASA images..." in loading
    assert "Horsehead Nebula" not in loading
    assert "Horsehead Nebula" not in failed
    assert "Horsehead Nebula" in shown

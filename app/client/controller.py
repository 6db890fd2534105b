"""
Gallery controller: session state for fetched images and per-card explanations.
"""

import logging
from datetime import date, timedelta
from typing import Awaitable, Callable

from app.client.gateway_client import GatewayClient, GatewayRequestError
from app.models.schemas import CardState, ExplanationStatus, ImageRecord

logger = logging.getLogger(__name__)

RECENT_DAYS = 7

RECENT_ERROR = "Failed to fetch NASA images"
TODAY_ERROR = "Failed to fetch today's NASA image"
EXPLAIN_ALERT = "Failed to generate AI explanation. Please try again."


def _log_notification(message: str) -> None:
    logger.warning(f"⚠️  {message}")


class GalleryController:
    """
    Holds the displayed images and the explanation state of every card.

    Explanation states are keyed by image date and survive re-fetches for
    the life of the controller. A card that is PENDING or READY ignores
    further explain requests.
    """

    def __init__(
        self,
        gateway: GatewayClient,
        notify: Callable[[str], None] = _log_notification,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.gateway = gateway
        self.notify = notify
        self.today = today

        self.images: list[ImageRecord] = []
        self.loading = False
        self.error: str | None = None
        self.card_states: dict[str, CardState] = {}
        self._last_fetch: Callable[[], Awaitable[None]] = self.load_recent

    def state_for(self, image_date: str) -> CardState:
        return self.card_states.get(image_date, CardState())

    async def load_recent(self) -> None:
        """Load the last RECENT_DAYS days ending today, newest first."""
        self._last_fetch = self.load_recent
        end_date = self.today()
        start_date = end_date - timedelta(days=RECENT_DAYS - 1)

        self.loading = True
        self.error = None
        try:
            images = await self.gateway.get_images_in_range(start_date, end_date)
            self.images = list(reversed(images))
        except GatewayRequestError as e:
            logger.error(f"❌ Recent images failed: {e}")
            self.error = RECENT_ERROR
        finally:
            self.loading = False

    async def load_today(self) -> None:
        """Replace the gallery with today's image only."""
        self._last_fetch = self.load_today

        self.loading = True
        self.error = None
        try:
            self.images = [await self.gateway.get_image_of_the_day()]
        except GatewayRequestError as e:
            logger.error(f"❌ Today's image failed: {e}")
            self.error = TODAY_ERROR
        finally:
            self.loading = False

    async def retry(self) -> None:
        """Re-run whichever top-level fetch ran last."""
        await self._last_fetch()

    async def explain(self, image: ImageRecord) -> None:
        """
        Request an AI explanation for one card.

        The state check and the move to PENDING happen before the first
        await, so concurrent calls for the same date issue one request.
        """
        key = image.date
        if self.state_for(key).is_busy:
            return

        self.card_states[key] = CardState(status=ExplanationStatus.PENDING)
        try:
            explanation = await self.gateway.explain(image)
        except GatewayRequestError as e:
            logger.error(f"❌ Explanation for {key} failed: {e}")
            self.card_states[key] = CardState(status=ExplanationStatus.FAILED)
            self.notify(EXPLAIN_ALERT)
            return

        self.card_states[key] = CardState(status=ExplanationStatus.READY, explanation=explanation)

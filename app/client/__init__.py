"""Client-side orchestration and view models for the gallery."""

from .gateway_client import GatewayClient, GatewayRequestError
from .controller import GalleryController
from .presentation import GalleryView, ImageCardView, render_text

__all__ = [
    "GatewayClient",
    "GatewayRequestError",
    "GalleryController",
    "GalleryView",
    "ImageCardView",
    "render_text",
]

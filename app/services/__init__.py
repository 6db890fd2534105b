"""Service layer for external integrations."""

from .nasa_apod_service import NASAAPODService
from .explanation_service import ExplanationService, build_text_generator, parse_explanation
from .text_generator_base import TextGenerator

__all__ = [
    "NASAAPODService",
    "ExplanationService",
    "TextGenerator",
    "build_text_generator",
    "parse_explanation",
]

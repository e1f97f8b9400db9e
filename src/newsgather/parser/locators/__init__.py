"""Main content locators for article extraction."""

from newsgather.parser.locators.body_fallback import BodyFallbackLocator
from newsgather.parser.locators.semantic_tag import SemanticTagLocator
from newsgather.parser.locators.text_density import TextDensityLocator

__all__ = [
    "BodyFallbackLocator",
    "SemanticTagLocator",
    "TextDensityLocator",
]

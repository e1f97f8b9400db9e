"""Semantic selector locator for the article container."""

from bs4 import BeautifulSoup, Tag

from newsgather.config import Settings
from newsgather.logger import logger
from newsgather.parser.html_tree import word_count


class SemanticTagLocator:
    """Finds the article container using CSS selectors.

    Tries selectors in priority order. The first selector with a match wins;
    among several matches the one with the most words is taken.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the semantic tag locator.

        Args:
            settings: Application settings containing the selector configuration.

        """
        self._settings = settings

    def locate(self, soup: BeautifulSoup) -> Tag | None:
        """Return the best element for the first matching selector.

        Args:
            soup: Parsed document.

        Returns:
            Container element, or None if no selector matched.

        """
        selectors = self._parse_selector_list()

        for selector in selectors:
            candidates = [
                element
                for element in soup.select(selector)
                if word_count(element) >= self._settings.container_min_words
            ]
            if not candidates:
                continue

            # max() keeps the first element on ties
            element = max(candidates, key=word_count)
            logger.debug(
                "Selector '%s' matched %d element(s), picked one with %d words",
                selector,
                len(candidates),
                word_count(element),
            )
            return element

        logger.debug("No container selector matched among %d candidates", len(selectors))
        return None

    def _parse_selector_list(self) -> list[str]:
        """Split the comma separated selector priority list from settings."""
        selector_str = self._settings.container_selector_priority_list
        return [s.strip() for s in selector_str.split(",") if s.strip()]

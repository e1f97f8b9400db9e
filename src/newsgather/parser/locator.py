"""Main article container location."""

from bs4 import BeautifulSoup, Tag

from newsgather.config import Settings
from newsgather.parser.locators import (
    BodyFallbackLocator,
    SemanticTagLocator,
    TextDensityLocator,
)
from newsgather.parser.protocols import ContainerLocator


class Locator:
    """Applies container locators to find the article body in a document.

    Tries each locator in order and returns the first successful match.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the locator chain with settings.

        Args:
            settings: Application settings containing locator configuration.

        """
        self._settings = settings
        self._locators = self._initialize_locators()

    def _initialize_locators(self) -> list[ContainerLocator]:
        """Initialize container locators in priority order.

        Returns:
            List of ContainerLocator instances to apply.

        """
        return [
            SemanticTagLocator(self._settings),
            TextDensityLocator(),
            BodyFallbackLocator(self._settings),
        ]

    def locate(self, soup: BeautifulSoup) -> Tag | None:
        """Apply locators sequentially until one matches.

        Args:
            soup: Parsed document.

        Returns:
            The container element or None if no locator matched.

        """
        for container_locator in self._locators:
            container = container_locator.locate(soup)
            if container is not None:
                return container

        return None

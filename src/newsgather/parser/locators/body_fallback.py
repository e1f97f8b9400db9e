"""Whole page fallback locator."""

from bs4 import BeautifulSoup, Tag

from newsgather.config import Settings
from newsgather.logger import logger


class BodyFallbackLocator:
    """Uses the page body when nothing better was found.

    Body-less fragments fall back to the document itself. Pages without any
    visible text have no container.
    """

    def __init__(self, settings: Settings) -> None:
        self._enabled = settings.container_body_fallback

    def locate(self, soup: BeautifulSoup) -> Tag | None:
        if not self._enabled:
            return None

        container = soup.body or soup
        if not container.get_text(strip=True):
            return None

        logger.debug("Article container not found, using %s", "body" if soup.body else "document")
        return container

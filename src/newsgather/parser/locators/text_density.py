"""Text density locator for pages without semantic markup."""

from typing import ClassVar

from bs4 import BeautifulSoup, Tag

from newsgather.logger import logger


class TextDensityLocator:
    """Picks the element with the largest concentration of paragraph text.

    Every paragraph or heading credits its text length to its parent in full
    and to its grandparent by half. The best scoring element wins.
    """

    TEXT_TAGS: ClassVar[list[str]] = ["p", "h1", "h2", "h3", "h4", "h5", "h6"]
    # Elements that can never hold an article body
    EXCLUDED_TAGS: ClassVar[set[str]] = {"a", "img", "script", "source", "head", "[document]"}

    def locate(self, soup: BeautifulSoup) -> Tag | None:
        """Return the highest scoring container, or None without any text."""
        scores: dict[int, float] = {}
        elements: dict[int, Tag] = {}

        for text_element in soup.find_all(self.TEXT_TAGS):
            length = len(text_element.get_text(" ", strip=True))
            if not length:
                continue
            parent = text_element.parent
            self._credit(parent, length, scores, elements)
            if parent is not None:
                self._credit(parent.parent, length / 2, scores, elements)

        if not scores:
            logger.debug("No paragraph or heading text to score")
            return None

        # Ties go to the element reached first in document order
        best_key = max(scores, key=lambda key: scores[key])
        best = elements[best_key]
        logger.debug("Text density picked <%s> with score %.1f", best.name, scores[best_key])
        return best

    def _credit(
        self,
        element: Tag | None,
        amount: float,
        scores: dict[int, float],
        elements: dict[int, Tag],
    ) -> None:
        if element is None or element.name in self.EXCLUDED_TAGS:
            return
        key = id(element)
        elements[key] = element
        scores[key] = scores.get(key, 0.0) + amount

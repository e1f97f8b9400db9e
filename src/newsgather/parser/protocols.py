"""Protocol definitions for the parser package.

Contains structural typing protocols that define interfaces for
parser components, enabling better type checking and extensibility.
"""

from typing import Protocol

from bs4 import BeautifulSoup, Tag


class ContainerLocator(Protocol):
    """Protocol defining the interface for main content locators.

    Locators pick the element holding the article body by applying
    various strategies (semantic tags, text density, fallbacks).

    Implementations should:
    - Return the container element if one was found
    - Return None if the strategy does not apply to the document
    - Never modify the document
    """

    def locate(self, soup: BeautifulSoup) -> Tag | None:
        """Find the main content container in a parsed document.

        Args:
            soup: The parsed document.

        Returns:
            The container element, or None if this strategy found nothing.

        """
        ...

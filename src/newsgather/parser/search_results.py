"""Search results page parsing."""

from typing import ClassVar
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from newsgather.config import Settings, settings
from newsgather.exceptions import ParseFailure
from newsgather.logger import logger
from newsgather.models import NewsArticle
from newsgather.parser.html_tree import collapse_whitespace, parse_html


class SearchResultParser:
    """Extracts candidate articles from a trending search results page.

    Each result entry is an element matching the entry selector (one
    `article` per story on Google News). Pages without such elements are
    read link by link. Results keep page order and contain each url once.
    """

    HEADING_TAGS: ClassVar[list[str]] = ["h1", "h2", "h3", "h4", "h5", "h6"]
    UNUSABLE_HREF_PREFIXES: ClassVar[tuple[str, ...]] = ("#", "javascript:", "mailto:")

    def __init__(self, settings: Settings) -> None:
        """Initialize the parser with settings.

        Args:
            settings: Application settings containing the entry selector and
                the base url relative links are resolved against.

        """
        self._entry_selector = settings.search_entry_selector
        self._base_url = settings.google_news_base_url

    def parse(self, markup: str) -> list[NewsArticle]:
        """Parse result entries into deduplicated articles.

        Args:
            markup: Raw HTML of the results page.

        Returns:
            Articles in order of first appearance. Empty when every entry
            lacked a url or headline.

        Raises:
            ParseFailure: If the markup has no element tree or no result entries.

        """
        soup = parse_html(markup)
        entries = self._find_entries(soup)
        if not entries:
            raise ParseFailure("No search result entries found in the page")

        articles: list[NewsArticle] = []
        seen_urls: set[str] = set()
        skipped_count = 0

        for entry in entries:
            article = self._parse_entry(entry)
            if article is None:
                skipped_count += 1
                continue
            if article.url in seen_urls:
                continue
            seen_urls.add(article.url)
            articles.append(article)

        logger.debug(
            "Parsed %d articles from %d entries (%d skipped)",
            len(articles),
            len(entries),
            skipped_count,
        )
        return articles

    def _find_entries(self, soup: BeautifulSoup) -> list[Tag]:
        entries = soup.select(self._entry_selector)
        if entries:
            return entries
        return soup.find_all("a", href=True)

    def _parse_entry(self, entry: Tag) -> NewsArticle | None:
        """Build an article from one entry, or None if url or headline is missing."""
        anchors = [entry] if entry.name == "a" else entry.find_all("a", href=True)

        url = ""
        for anchor in anchors:
            url = self._resolve_url(str(anchor.get("href") or ""))
            if url:
                break

        headline = self._find_headline(entry, anchors)
        if not url or not headline:
            return None
        return NewsArticle(url=url, headline=headline)

    def _find_headline(self, entry: Tag, anchors: list[Tag]) -> str:
        heading = entry.find(self.HEADING_TAGS)
        if heading is not None:
            text = collapse_whitespace(heading.get_text(" "))
            if text:
                return text
        for anchor in anchors:
            text = collapse_whitespace(anchor.get_text(" "))
            if text:
                return text
        return ""

    def _resolve_url(self, href: str) -> str:
        href = href.strip()
        if not href or href.lower().startswith(self.UNUSABLE_HREF_PREFIXES):
            return ""
        return urljoin(self._base_url, href)


def parse_search_results(markup: str, app_settings: Settings | None = None) -> list[NewsArticle]:
    """Parse a trending search results page into deduplicated articles.

    Args:
        markup: Raw HTML of the results page.
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        Articles in order of first appearance.

    """
    return SearchResultParser(app_settings or settings).parse(markup)

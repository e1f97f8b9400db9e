"""Orchestration of browser fetching and markup parsing."""

import asyncio
import logging
from urllib.parse import urlencode, urljoin

from fastmcp import Context

from newsgather.browser import Browser
from newsgather.config import Settings
from newsgather.exceptions import NewsGatherError
from newsgather.logger import logger
from newsgather.models import CleanerConfig, NewsArticle
from newsgather.parser.article_extractor import ArticleContentExtractor
from newsgather.parser.search_results import SearchResultParser
from newsgather.timing import timeit


def build_search_url(query: str, settings: Settings) -> str:
    """Build the Google News search URL for a query."""
    language = settings.google_news_language
    params = {
        "q": query,
        "hl": language,
        "gl": settings.google_news_country,
        "ceid": f"{settings.google_news_country}:{language.split('-')[0]}",
    }
    return urljoin(settings.google_news_base_url, "search") + "?" + urlencode(params)


def fold_articles(texts: list[str], separator: str) -> str:
    """Join article texts into one document, separator between each pair."""
    return separator.join(texts)


class ArticleGatherer:
    """Coordinates page fetching, result parsing and article extraction.

    Pipeline: URL -> Browser markup -> SearchResultParser | ArticleContentExtractor.
    Parsing runs in worker threads so the event loop stays free for the browser.
    """

    def __init__(self, browser: Browser, settings: Settings) -> None:
        """Initialize the gatherer.

        Args:
            browser: Browser used to fetch rendered page markup.
            settings: Application settings containing all configuration.

        """
        self._browser = browser
        self._settings = settings
        self._search_parser = SearchResultParser(settings)
        self._extractor = ArticleContentExtractor(settings)

    @timeit("News search", logging.DEBUG)
    async def search(self, query: str) -> list[NewsArticle]:
        """Search Google News and return the found articles.

        Args:
            query: Search query string.

        Returns:
            At most google_news_max_results articles in page order.

        """
        url = build_search_url(query, self._settings)
        logger.debug("[SEARCH STARTED] for query: %s", query)
        markup = await self._browser.fetch(url)
        articles = await asyncio.to_thread(self._search_parser.parse, markup)
        logger.debug("Found %d articles", len(articles))
        return articles[: self._settings.google_news_max_results]

    async def gather_article(self, url: str, config: CleanerConfig | None = None) -> str:
        """Fetch a single article and return its content as Markdown.

        Args:
            url: Article URL.
            config: Cleaning policy; the one from settings when None.

        Returns:
            Markdown content of the article.

        """
        policy = config or self._settings.default_cleaner_config()
        markup = await self._browser.fetch(url)
        logger.debug("[EXTRACTION STARTED] for %s", url)
        return await asyncio.to_thread(self._extractor.extract, markup, policy)

    @timeit("Articles gathering", logging.DEBUG)
    async def gather_articles(
        self,
        urls: list[str],
        config: CleanerConfig | None = None,
        ctx: Context | None = None,
    ) -> dict[str, str]:
        """Gather several articles concurrently.

        Args:
            urls: Article URLs.
            config: Cleaning policy; the one from settings when None.
            ctx: FastMCP context for progress reporting.

        Returns:
            Dictionary mapping URLs to Markdown, in input order. URLs that
            failed with a newsgather error are left out.

        """
        total_urls = len(urls)
        completed_count = 0
        if ctx is not None:
            await ctx.report_progress(0, total_urls, f"Starting fetch of {total_urls} article(s)")

        async def _tracked_gather(url: str) -> tuple[str, str]:
            nonlocal completed_count
            content = await self.gather_article(url, config)
            completed_count += 1
            if ctx is not None:
                status_msg = f"Completed {completed_count}/{total_urls}: {url}"
                await ctx.report_progress(completed_count, total_urls, status_msg)
            return (url, content)

        results = await asyncio.gather(
            *(_tracked_gather(url) for url in urls), return_exceptions=True
        )

        # Failed URLs are skipped, unexpected errors propagate
        gathered: dict[str, str] = {}
        for item in results:
            if isinstance(item, NewsGatherError):
                logger.error("Failed to gather article: %s: %s", type(item).__name__, item)
                continue
            if isinstance(item, BaseException):
                raise item
            url, content = item
            gathered[url] = content

        return gathered

    async def digest(
        self,
        query: str,
        max_articles: int | None = None,
        config: CleanerConfig | None = None,
        ctx: Context | None = None,
    ) -> str:
        """Search, gather the top articles and fold them into one document.

        Args:
            query: Search query string.
            max_articles: Number of articles to gather; digest_max_articles when None.
            config: Cleaning policy; the one from settings when None.
            ctx: FastMCP context for progress reporting.

        Returns:
            Folded Markdown of every article that could be gathered.

        """
        if max_articles is None:
            max_articles = self._settings.digest_max_articles
        articles = (await self.search(query))[:max_articles]
        contents = await self.gather_articles(
            [article.url for article in articles], config, ctx
        )

        sections = [
            f"{article.headline}\nSource: {article.url}\n\n{contents[article.url]}"
            for article in articles
            if article.url in contents
        ]
        return fold_articles(sections, self._settings.article_separator)

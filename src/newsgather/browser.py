"""Page fetching through a pool of headless browsers using Crawl4ai."""

import asyncio
from typing import Protocol

from crawl4ai import AsyncWebCrawler, BrowserConfig, CacheMode, CrawlerRunConfig

from newsgather.config import Settings
from newsgather.exceptions import BrowserNotStartedError, Crawl4AIError, FetchError
from newsgather.logger import logger


class Browser(Protocol):
    """Capability returning the markup of a page after client-side rendering."""

    async def fetch(self, url: str) -> str:
        """Load url and return the rendered page markup.

        Raises:
            FetchError: If the page could not be loaded.

        """
        ...


class CrawlBrowser:
    """Browser backed by a pool of Crawl4ai crawler instances.

    Uses a queue to limit concurrent browser instances and reuse them across requests.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the browser pool with settings.

        Args:
            settings: Application settings containing Crawl4ai configuration.

        """
        self._settings = settings
        self._crawler_queue: asyncio.Queue[AsyncWebCrawler] = asyncio.Queue()
        self._crawlers: list[AsyncWebCrawler] = []

    async def start(self) -> None:
        """Launch the browser pool."""
        pool_size = self._settings.crawl4ai_browser_pool_size
        logger.info("Initializing browser pool with %d instances...", pool_size)

        browser_config = BrowserConfig(
            browser_type="chromium",
            headless=self._settings.crawl4ai_headless,
            viewport_width=self._settings.crawl4ai_viewport_width,
            viewport_height=self._settings.crawl4ai_viewport_height,
            verbose=False,
        )

        for _ in range(pool_size):
            crawler = AsyncWebCrawler(config=browser_config)
            await crawler.start()
            self._crawlers.append(crawler)
            self._crawler_queue.put_nowait(crawler)

        logger.debug("Browser pool initialized.")

    async def close(self) -> None:
        """Close all browsers in the pool."""
        logger.info("Closing browser pool...")
        for crawler in self._crawlers:
            await crawler.close()
        self._crawlers.clear()

        while not self._crawler_queue.empty():
            self._crawler_queue.get_nowait()
        logger.debug("Browser pool closed.")

    async def fetch(self, url: str) -> str:
        """Load a page with a browser from the pool and return its markup.

        Args:
            url: Page URL.

        Returns:
            Rendered page HTML.

        Raises:
            BrowserNotStartedError: If the pool is not running.
            Crawl4AIError: If Crawl4AI reported a failed crawl.
            FetchError: If the page produced no markup.

        """
        if not self._crawlers:
            raise BrowserNotStartedError("Browser pool is not started")

        # Blocks until a crawler is free
        crawler = await self._crawler_queue.get()
        try:
            logger.debug("[FETCH STARTED] URL: %s", url)
            result = await crawler.arun(url=url, config=self._get_crawler_config())
        finally:
            self._crawler_queue.put_nowait(crawler)

        if not result.success:
            error_msg = getattr(result, "error_message", None) or "Unknown Crawl4AI error"
            raise Crawl4AIError(error_msg)

        final_url = getattr(result, "redirected_url", None)
        if final_url and final_url != url:
            logger.warning("URL redirect from %s to %s", url, final_url)

        if not result.html:
            raise FetchError(f"No markup returned for {url}")
        return str(result.html)

    def _get_crawler_config(self) -> CrawlerRunConfig:
        """Build crawler configuration from settings."""
        return CrawlerRunConfig(
            wait_until=self._settings.crawl4ai_wait_until,
            page_timeout=self._settings.crawl4ai_page_timeout,
            delay_before_return_html=self._settings.crawl4ai_delay_before_return_html,
            cache_mode=CacheMode(self._settings.crawl4ai_cache_mode),
            verbose=False,
        )

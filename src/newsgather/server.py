"""MCP server exposing Google News search and article extraction."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from fastmcp.exceptions import ToolError

from newsgather.browser import CrawlBrowser
from newsgather.config import settings
from newsgather.exceptions import NewsGatherError
from newsgather.gatherer import ArticleGatherer
from newsgather.logger import logger, setup_logging
from newsgather.models import CleanerConfig
from newsgather.timing import timeit

# Initialize logging as soon as possible
setup_logging()


class TypedFastMCP(FastMCP):
    """FastMCP subclass carrying the server state as a typed attribute."""

    state: "ServerState | None"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize TypedFastMCP with state set to None."""
        super().__init__(*args, **kwargs)
        self.state = None


class ServerState:
    """Owns the browser pool and the gatherer built on top of it."""

    def __init__(self) -> None:
        """Initialize the server state."""
        self.browser = CrawlBrowser(settings)
        self.gatherer = ArticleGatherer(self.browser, settings)

    async def start(self) -> None:
        """Startup logic for client resources."""
        logger.info("Starting newsgather server resources...")
        await self.browser.start()

    async def stop(self) -> None:
        """Cleanup logic for client resources."""
        logger.info("Stopping newsgather server resources...")
        await self.browser.close()


@asynccontextmanager
async def lifespan(app: TypedFastMCP) -> AsyncIterator[dict[str, Any]]:
    """Manage application lifespan: start and stop the browser pool."""
    state = ServerState()
    await state.start()
    app.state = state
    try:
        yield {"state": state}
    finally:
        await state.stop()


def log_tool_call(tool_name: str, details: str) -> None:
    """Log a tool call.

    Args:
        tool_name: Name of the tool being called
        details: Details about the tool call (e.g., query, URL)

    """
    logger.info("[TOOL CALLED] %s: %s", tool_name, details)


def get_state() -> ServerState:
    """Get the server state from the MCP application."""
    if mcp.state is None:
        raise RuntimeError("Server state not initialized")
    return mcp.state


def get_gatherer(state: ServerState) -> ArticleGatherer:
    """Get the article gatherer from server state."""
    return state.gatherer


mcp = TypedFastMCP("newsgather", lifespan=lifespan)


@mcp.tool(
    title="news_search",
    description=settings.tool_news_search_desc,
)
@timeit("news_search tool")
async def news_search(
    query: Annotated[str, settings.arg_news_search_query_desc],
) -> list[dict[str, str]]:
    """Search Google News and return url/headline pairs."""
    log_tool_call("news_search", f"query: {query}")
    gatherer = get_gatherer(get_state())
    try:
        articles = await gatherer.search(query)
    except NewsGatherError as e:
        raise ToolError(f"{type(e).__name__}: {e}") from e
    return [asdict(article) for article in articles]


@mcp.tool(
    title="news_fetch",
    description=settings.tool_news_fetch_desc,
)
@timeit("news_fetch tool")
async def news_fetch(
    url: Annotated[str, settings.arg_news_fetch_url_desc],
    remove_links: Annotated[bool, settings.arg_news_fetch_remove_links_desc] = False,
    remove_images: Annotated[bool, settings.arg_news_fetch_remove_images_desc] = True,
) -> str:
    """Fetch an article and convert its main content to Markdown."""
    log_tool_call("news_fetch", f"URL: {url}")
    config = CleanerConfig(
        remove_script_tags=True,
        remove_a_tags=remove_links,
        remove_img_tags=remove_images,
        remove_source_tags=True,
    )
    gatherer = get_gatherer(get_state())
    try:
        return await gatherer.gather_article(url, config)
    except NewsGatherError as e:
        raise ToolError(f"{type(e).__name__}: {e}") from e


@mcp.tool(
    title="news_digest",
    description=settings.tool_news_digest_desc,
)
@timeit("news_digest tool")
async def news_digest(
    query: Annotated[str, settings.arg_news_digest_query_desc],
    ctx: Context,
) -> str:
    """Build a Markdown digest of the top articles for a query."""
    log_tool_call("news_digest", f"query: {query}")
    gatherer = get_gatherer(get_state())
    try:
        return await gatherer.digest(query, ctx=ctx)
    except NewsGatherError as e:
        raise ToolError(f"{type(e).__name__}: {e}") from e


def main() -> None:
    """Run the MCP server."""
    mcp.run(transport="streamable-http", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

"""newsgather custom exceptions."""


class NewsGatherError(Exception):
    """Base exception for all newsgather errors."""


class FetchError(NewsGatherError):
    """Errors while fetching page markup through the browser."""


class Crawl4AIError(FetchError):
    """Errors from the Crawl4AI library during page loading."""


class BrowserNotStartedError(FetchError):
    """The browser pool was used before start() or after close()."""


class ParserError(NewsGatherError):
    """Errors while parsing or converting page markup."""


class ParseFailure(ParserError):
    """Markup did not yield a usable element tree or any result entries."""


class NoContentFound(ParserError):
    """No main article container could be identified in the page."""


class EmptyResult(ParserError):
    """Extraction produced no renderable text."""

"""Single article page to Markdown pipeline."""

import logging

from newsgather.config import Settings, settings
from newsgather.exceptions import EmptyResult, NoContentFound
from newsgather.logger import logger
from newsgather.models import CleanerConfig
from newsgather.parser.html_tree import parse_html
from newsgather.parser.locator import Locator
from newsgather.parser.markdown_converter import MarkdownConverter
from newsgather.parser.tag_filter import TagFilter
from newsgather.timing import timeit, timer


class ArticleContentExtractor:
    """Turns article page markup into clean Markdown.

    Pipeline: parse -> locate main container -> remove tags -> Markdown.
    Holds no per-call state, so one instance can serve concurrent calls.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the extractor with settings.

        Args:
            settings: Application settings containing locator configuration.

        """
        self._locator = Locator(settings)
        self._converter = MarkdownConverter()

    @timeit("Article extraction", logging.DEBUG)
    def extract(self, markup: str, config: CleanerConfig) -> str:
        """Extract the article body of a page as Markdown.

        Args:
            markup: Raw page HTML.
            config: Policy selecting the tag subtrees to strip.

        Returns:
            Markdown text of the article.

        Raises:
            ParseFailure: If the markup contains no element at all.
            NoContentFound: If no article container could be identified.
            EmptyResult: If the container renders to no text.

        """
        with timer("HTML parsing", logging.DEBUG):
            soup = parse_html(markup)

        container = self._locator.locate(soup)
        if container is None:
            raise NoContentFound("No article container found in the page")

        TagFilter(config).apply(container)
        # The container itself may have been one of the removed tags
        markdown = "" if container.decomposed else self._converter.convert(container)

        if not markdown.strip():
            raise EmptyResult("Article container rendered no text")

        logger.debug("Extracted %d characters of Markdown", len(markdown))
        return markdown


def extract_article(
    markup: str, config: CleanerConfig, app_settings: Settings | None = None
) -> str:
    """Extract article Markdown from markup with the given cleaning policy.

    Args:
        markup: Raw page HTML.
        config: Policy selecting the tag subtrees to strip.
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        Markdown text of the article.

    """
    return ArticleContentExtractor(app_settings or settings).extract(markup, config)

"""Parser package for news page content extraction.

Turns already fetched markup into structured results: search result pages
into article lists and article pages into clean Markdown.
"""

from newsgather.parser.article_extractor import ArticleContentExtractor, extract_article
from newsgather.parser.html_tree import parse_html
from newsgather.parser.locator import Locator
from newsgather.parser.markdown_converter import MarkdownConverter
from newsgather.parser.protocols import ContainerLocator
from newsgather.parser.search_results import SearchResultParser, parse_search_results
from newsgather.parser.tag_filter import TagFilter

__all__ = [
    "ArticleContentExtractor",
    "ContainerLocator",
    "Locator",
    "MarkdownConverter",
    "SearchResultParser",
    "TagFilter",
    "extract_article",
    "parse_html",
    "parse_search_results",
]

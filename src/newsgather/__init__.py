"""newsgather - news article gathering for language models.

Finds articles through Google News and turns their pages into clean Markdown.
"""

from newsgather.config import Settings, settings
from newsgather.models import CleanerConfig, NewsArticle
from newsgather.parser import extract_article, parse_search_results

__version__ = "0.1.0"

__all__ = [
    "CleanerConfig",
    "NewsArticle",
    "Settings",
    "__version__",
    "extract_article",
    "parse_search_results",
    "settings",
]

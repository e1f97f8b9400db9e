"""Application configuration using Pydantic Settings.

Environment variables are automatically mapped to Settings fields.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from newsgather.models import CleanerConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field has a default so the extraction pipeline can be used as a
    library without any environment set up.
    """

    # --- Diagnostics ---
    newsgather_debug: bool = False

    # --- Google News ---
    google_news_base_url: str = "https://news.google.com/"
    google_news_language: str = "en-US"
    google_news_country: str = "US"
    google_news_max_results: int = 10

    # --- Search Results Parsing ---
    search_entry_selector: str = "article"

    # --- Article Container Location ---
    container_selector_priority_list: str = (
        'article, main, [role="main"], .article, .article-content, .article-body, '
        ".story-body, .entry-content, .post-content, #article, #content, #main"
    )
    container_min_words: int = 0
    container_body_fallback: bool = True

    # --- Default Cleaning Policy ---
    clean_remove_script_tags: bool = True
    clean_remove_a_tags: bool = False
    clean_remove_img_tags: bool = True
    clean_remove_source_tags: bool = True

    # --- Crawl4AI Browser ---
    crawl4ai_browser_pool_size: int = 3
    crawl4ai_headless: bool = True
    crawl4ai_viewport_width: int = 1280
    crawl4ai_viewport_height: int = 900

    # --- Crawl4AI Crawler ---
    crawl4ai_wait_until: str = "domcontentloaded"
    crawl4ai_page_timeout: int = 30000
    crawl4ai_delay_before_return_html: float = 0.5
    crawl4ai_cache_mode: str = "bypass"

    # --- Digest ---
    digest_max_articles: int = 3
    article_separator: str = "\n\nNEW ARTICLE: "

    # --- Network Interface ---
    host: str = "0.0.0.0"
    port: int = 8000

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Validate numeric limits that must be positive.

        Raises:
            ValueError: If a pool size or result limit is not positive

        """
        if self.crawl4ai_browser_pool_size < 1:
            msg = "CRAWL4AI_BROWSER_POOL_SIZE must be at least 1"
            raise ValueError(msg)
        if self.google_news_max_results < 1:
            msg = "GOOGLE_NEWS_MAX_RESULTS must be at least 1"
            raise ValueError(msg)
        if self.digest_max_articles < 1:
            msg = "DIGEST_MAX_ARTICLES must be at least 1"
            raise ValueError(msg)
        return self

    def default_cleaner_config(self) -> CleanerConfig:
        """Build the cleaning policy used when a caller does not supply one."""
        return CleanerConfig(
            remove_script_tags=self.clean_remove_script_tags,
            remove_a_tags=self.clean_remove_a_tags,
            remove_img_tags=self.clean_remove_img_tags,
            remove_source_tags=self.clean_remove_source_tags,
        )

    # --- Tool Metadata ---
    # Kept here so tool descriptions can be changed through the environment.
    tool_news_search_desc: str = (
        "Search Google News and return the matching articles.\n\n"
        "Each result contains:\n"
        "- url (str): The article URL\n"
        "- headline (str): The article headline"
    )
    tool_news_fetch_desc: str = (
        "Fetch a news article and return its main content in Markdown format."
    )
    tool_news_digest_desc: str = (
        "Search Google News, fetch the top articles and return their content "
        "as a single Markdown document."
    )

    arg_news_search_query_desc: str = "Topic or keywords to search Google News for."
    arg_news_fetch_url_desc: str = "The article URL to fetch."
    arg_news_fetch_remove_links_desc: str = "Drop links and their text from the output."
    arg_news_fetch_remove_images_desc: str = "Drop images from the output."
    arg_news_digest_query_desc: str = "Topic or keywords to build the digest for."

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Uses lru_cache to ensure the .env file is only parsed once
    and all modules share the same settings instance.

    Returns:
        Settings instance with application configuration.

    Raises:
        ValidationError: If an environment variable holds an invalid value.

    """
    return Settings()


settings = get_settings()

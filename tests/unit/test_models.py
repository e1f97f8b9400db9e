"""Unit tests for the shared value types."""

from dataclasses import FrozenInstanceError, asdict

import pytest
from pydantic import ValidationError

from newsgather.models import CleanerConfig, NewsArticle

DISTINCT_URLS = 2


class TestNewsArticle:
    """Test NewsArticle."""

    def test_str_is_headline(self) -> None:
        """Test that an article converts to its headline."""
        article = NewsArticle(url="https://news.test/a", headline="Big news")

        assert str(article) == "Big news"

    def test_is_immutable(self) -> None:
        """Test that fields cannot be reassigned."""
        article = NewsArticle(url="https://news.test/a", headline="Big news")

        with pytest.raises(FrozenInstanceError):
            article.url = "https://news.test/b"  # type: ignore[misc]

    def test_asdict(self) -> None:
        """Test the dictionary form used by the MCP tools."""
        article = NewsArticle(url="https://news.test/a", headline="Big news")

        assert asdict(article) == {"url": "https://news.test/a", "headline": "Big news"}

    def test_same_url_is_same_article(self) -> None:
        """Test that equality ignores the headline."""
        assert NewsArticle("https://news.test/a", "Big news") == NewsArticle(
            "https://news.test/a", "Other wording"
        )

    def test_different_urls_differ(self) -> None:
        """Test that the same headline at two urls gives two articles."""
        assert NewsArticle("https://news.test/a", "Big news") != NewsArticle(
            "https://news.test/b", "Big news"
        )

    def test_hash_follows_url(self) -> None:
        """Test that a set keeps one article per url."""
        articles = {
            NewsArticle("https://news.test/a", "Big news"),
            NewsArticle("https://news.test/a", "Other wording"),
            NewsArticle("https://news.test/b", "Big news"),
        }

        assert {article.url for article in articles} == {
            "https://news.test/a",
            "https://news.test/b",
        }
        assert len(articles) == DISTINCT_URLS


class TestCleanerConfig:
    """Test CleanerConfig."""

    def test_defaults_remove_nothing(self) -> None:
        """Test that the default policy removes no tags."""
        assert CleanerConfig().removed_tags() == frozenset()

    def test_removed_tags_mapping(self) -> None:
        """Test that every flag maps to its tag name."""
        config = CleanerConfig(
            remove_script_tags=True,
            remove_a_tags=True,
            remove_img_tags=True,
            remove_source_tags=True,
        )

        assert config.removed_tags() == frozenset({"script", "a", "img", "source"})

    def test_partial_policy(self) -> None:
        """Test a policy with only some flags set."""
        config = CleanerConfig(remove_img_tags=True, remove_source_tags=True)

        assert config.removed_tags() == frozenset({"img", "source"})

    def test_is_frozen(self) -> None:
        """Test that a policy cannot be mutated."""
        config = CleanerConfig()

        with pytest.raises(ValidationError):
            config.remove_a_tags = True  # type: ignore[misc]

    def test_equal_policies_are_equal(self) -> None:
        """Test value equality."""
        assert CleanerConfig(remove_a_tags=True) == CleanerConfig(remove_a_tags=True)

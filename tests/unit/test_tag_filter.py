"""Unit tests for TagFilter."""

from unittest.mock import MagicMock, patch

import pytest
from bs4 import BeautifulSoup

from newsgather.models import CleanerConfig
from newsgather.parser.tag_filter import TagFilter

EXPECTED_REMOVED_NESTED = 2


@pytest.fixture
def article_soup() -> BeautifulSoup:
    """Document with one of each removable tag."""
    return BeautifulSoup(
        """
        <article class="story" data-id="42">
            <script>trackPageView();</script>
            <p>Intro with <a href="https://example.com/more">a link</a>.</p>
            <img src="/photo.jpg" alt="Photo">
            <video><source src="/clip.mp4" type="video/mp4"></video>
            <p>Closing words.</p>
        </article>
        """,
        "html.parser",
    )


class TestTagFilter:
    """Test TagFilter pruning."""

    def test_no_flags_removes_nothing(self, article_soup: BeautifulSoup) -> None:
        """Test that an all-false policy leaves the tree unchanged."""
        before = str(article_soup)

        removed = TagFilter(CleanerConfig()).apply(article_soup)

        assert removed == 0
        assert str(article_soup) == before

    @pytest.mark.parametrize(
        ("flag", "tag"),
        [
            ("remove_script_tags", "script"),
            ("remove_a_tags", "a"),
            ("remove_img_tags", "img"),
            ("remove_source_tags", "source"),
        ],
    )
    def test_each_flag_removes_its_tag(
        self, article_soup: BeautifulSoup, flag: str, tag: str
    ) -> None:
        """Test that every flag removes exactly its own tag."""
        TagFilter(CleanerConfig(**{flag: True})).apply(article_soup)

        assert article_soup.find(tag) is None
        remaining = {"script", "a", "img", "source"} - {tag}
        for other in remaining:
            assert article_soup.find(other) is not None

    def test_removes_text_of_subtree(self, article_soup: BeautifulSoup) -> None:
        """Test that the text inside a removed tag is gone too."""
        TagFilter(CleanerConfig(remove_a_tags=True, remove_script_tags=True)).apply(
            article_soup
        )

        text = article_soup.get_text()
        assert "a link" not in text
        assert "trackPageView" not in text
        assert "Intro with" in text

    def test_removes_at_any_depth(self) -> None:
        """Test that deeply nested matches are removed."""
        soup = BeautifulSoup(
            "<div><section><div><span><img src='x.png'></span></div></section>"
            "<img src='y.png'></div>",
            "html.parser",
        )

        removed = TagFilter(CleanerConfig(remove_img_tags=True)).apply(soup)

        assert removed == EXPECTED_REMOVED_NESTED
        assert soup.find("img") is None
        assert soup.find("span") is not None

    def test_pruned_ancestor_children_not_inspected(self) -> None:
        """Test that removing an anchor also removes the image inside it in one step."""
        soup = BeautifulSoup(
            '<p><a href="/story"><img src="/thumb.jpg"></a></p>', "html.parser"
        )

        removed = TagFilter(CleanerConfig(remove_a_tags=True, remove_img_tags=True)).apply(soup)

        # Only the anchor is counted, the image went with it
        assert removed == 1
        assert str(soup) == "<p></p>"

    def test_surviving_attributes_preserved(self, article_soup: BeautifulSoup) -> None:
        """Test that attributes of kept nodes are untouched."""
        TagFilter(CleanerConfig(remove_script_tags=True)).apply(article_soup)

        article = article_soup.find("article")
        assert article is not None
        assert article["class"] == ["story"]
        assert article["data-id"] == "42"
        anchor = article_soup.find("a")
        assert anchor is not None
        assert anchor["href"] == "https://example.com/more"

    def test_structural_tags_never_removed(self) -> None:
        """Test that non-removable tags pass through with every flag set."""
        soup = BeautifulSoup(
            "<main><nav>Menu</nav><header>Top</header><p>Body</p><footer>End</footer></main>",
            "html.parser",
        )
        config = CleanerConfig(
            remove_script_tags=True,
            remove_a_tags=True,
            remove_img_tags=True,
            remove_source_tags=True,
        )

        removed = TagFilter(config).apply(soup)

        assert removed == 0
        assert soup.get_text() == "MenuTopBodyEnd"

    def test_idempotent(self, article_soup: BeautifulSoup) -> None:
        """Test that applying the filter twice equals applying it once."""
        tag_filter = TagFilter(CleanerConfig(remove_a_tags=True, remove_img_tags=True))

        tag_filter.apply(article_soup)
        once = str(article_soup)
        removed_again = tag_filter.apply(article_soup)

        assert removed_again == 0
        assert str(article_soup) == once

    def test_root_matching_tag_is_removed(self) -> None:
        """Test that a root which is itself removable gets decomposed."""
        soup = BeautifulSoup('<div><a href="/x">Only link</a></div>', "html.parser")
        anchor = soup.find("a")
        assert anchor is not None

        removed = TagFilter(CleanerConfig(remove_a_tags=True)).apply(anchor)

        assert removed == 1
        assert anchor.decomposed
        assert str(soup) == "<div></div>"

    @patch("newsgather.parser.tag_filter.logger")
    def test_logs_removed_count(
        self, mock_logger: MagicMock, article_soup: BeautifulSoup
    ) -> None:
        """Test that removals are reported at debug level."""
        TagFilter(CleanerConfig(remove_img_tags=True)).apply(article_soup)

        mock_logger.debug.assert_called_once()
        args = mock_logger.debug.call_args[0]
        assert args[1] == 1
        assert args[2] == "img"

"""Value types shared by the extraction pipeline."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class NewsArticle:
    """A candidate article found on a search results page.

    Two articles are the same article when their urls are equal.
    """

    url: str
    headline: str = field(compare=False)

    def __str__(self) -> str:
        return self.headline


class CleanerConfig(BaseModel):
    """Policy selecting which tag subtrees are stripped before rendering.

    Each flag set to True removes the tag together with everything inside it.
    """

    model_config = ConfigDict(frozen=True)

    remove_script_tags: bool = False
    remove_a_tags: bool = False
    remove_img_tags: bool = False
    remove_source_tags: bool = False

    def removed_tags(self) -> frozenset[str]:
        """Return the tag names this policy removes."""
        flags = {
            "script": self.remove_script_tags,
            "a": self.remove_a_tags,
            "img": self.remove_img_tags,
            "source": self.remove_source_tags,
        }
        return frozenset(tag for tag, remove in flags.items() if remove)

"""Removal of tag subtrees selected by a cleaning policy."""

from bs4 import Tag

from newsgather.logger import logger
from newsgather.models import CleanerConfig


class TagFilter:
    """Prunes every subtree rooted at a tag the policy removes.

    Only script, a, img and source can be removed. Everything else, and the
    attributes of surviving nodes, is left untouched.
    """

    def __init__(self, config: CleanerConfig) -> None:
        """Initialize the filter with a cleaning policy.

        Args:
            config: Policy flags selecting the tags to strip.

        """
        self._removed_tags = config.removed_tags()

    def apply(self, root: Tag) -> int:
        """Remove matching subtrees under root in place.

        Walks the tree depth-first in pre-order. A removed node's descendants
        are never visited.

        Args:
            root: Tree to prune. The root itself is removed too when it matches.

        Returns:
            Number of removed subtrees.

        """
        if not self._removed_tags:
            return 0

        removed_count = 0
        stack: list[Tag] = [root]
        while stack:
            node = stack.pop()
            if node.name in self._removed_tags:
                node.decompose()
                removed_count += 1
                continue
            # Reversed so children are popped in document order
            stack.extend(
                child for child in reversed(node.contents) if isinstance(child, Tag)
            )

        if removed_count > 0:
            logger.debug(
                "TagFilter removed %d subtrees (%s)",
                removed_count,
                ", ".join(sorted(self._removed_tags)),
            )
        return removed_count

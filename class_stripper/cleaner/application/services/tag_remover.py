"""Tag Remover: deletes whole subtrees by tag name."""

from typing import Iterable

from bs4 import BeautifulSoup

from class_stripper.cleaner.domain.statistics import CleaningStatistics
from class_stripper.enums import StatisticKey
from class_stripper.logger import get_logger

logger = get_logger(__name__)


class TagRemover:
    """Remove every element whose tag is on the denylist, with its subtree."""

    def remove_tags(
        self,
        root: BeautifulSoup,
        tag_names: Iterable[str],
        stats: CleaningStatistics,
    ) -> int:
        """
        Decompose all elements named in *tag_names* from *root*.

        Matching is case-insensitive. Each detached element counts once; an
        element that went away with an already removed ancestor is not counted.

        Args:
            root: Parsed fragment
            tag_names: Tag names to remove
            stats: Statistics accumulator

        Returns:
            Number of elements detached
        """
        removed = 0
        for tag_name in tag_names:
            name = tag_name.strip().lower()
            if not name:
                continue
            for element in root.find_all(name):
                if element.decomposed:
                    continue
                element.decompose()
                removed += 1
                stats.increment(StatisticKey.TAGS_REMOVED)

        if removed:
            logger.debug(f"Removed {removed} elements for tags {list(tag_names)}")
        return removed

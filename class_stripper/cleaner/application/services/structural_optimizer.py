"""Structural Optimizer for collapsing redundant div structure.

Two rewrites run against the parsed fragment until neither changes anything:

* wrapper bubbling replaces a ``div`` whose only children are ``div`` elements
  with those children;
* empty-div pruning deletes ``div`` elements with no element children and no
  visible text.

Each rewrite can expose new work for the other (pruning can leave a parent
holding only divs, bubbling can leave an empty div next to content), so they
are interleaved in an outer loop. Every loop has a ceiling so that the call
always terminates.
"""

from typing import List

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from class_stripper.cleaner.domain.statistics import CleaningStatistics
from class_stripper.cleaner.domain.value_objects.cleaning_config import CleaningConfig
from class_stripper.core.constants import (
    MAX_BUBBLE_SWEEPS,
    MAX_EMPTY_DIV_REMOVALS,
    MAX_OPTIMIZE_PASSES,
    WRAPPER_TAG,
)
from class_stripper.enums import StatisticKey
from class_stripper.logger import get_logger

logger = get_logger(__name__)


def _is_meaningful_text(node) -> bool:
    if not isinstance(node, NavigableString) or isinstance(node, Comment):
        return False
    return bool(node.strip())


def is_wrapper_div(element) -> bool:
    """A div whose children are one or more divs and nothing but whitespace."""
    if not isinstance(element, Tag) or element.name != WRAPPER_TAG:
        return False

    child_divs = 0
    for child in element.contents:
        if isinstance(child, Tag):
            if child.name != WRAPPER_TAG:
                return False
            child_divs += 1
        elif _is_meaningful_text(child):
            return False
    return child_divs > 0


def is_empty_div(element) -> bool:
    """A div with no element children and no non-whitespace text."""
    if not isinstance(element, Tag) or element.name != WRAPPER_TAG:
        return False
    for child in element.contents:
        if isinstance(child, Tag) or _is_meaningful_text(child):
            return False
    return True


class StructuralOptimizer:
    """
    Service responsible for wrapper bubbling and empty-div pruning.

    The ceilings are guards against non-termination; real documents settle in
    one to three passes.
    """

    def __init__(
        self,
        max_passes: int = MAX_OPTIMIZE_PASSES,
        max_bubble_sweeps: int = MAX_BUBBLE_SWEEPS,
        max_empty_removals: int = MAX_EMPTY_DIV_REMOVALS,
    ):
        """
        Initialize the optimizer.

        Args:
            max_passes: Outer bubbling/pruning passes per optimize() call
            max_bubble_sweeps: Sweeps per bubbling run
            max_empty_removals: Deletions per pruning run
        """
        self.max_passes = max_passes
        self.max_bubble_sweeps = max_bubble_sweeps
        self.max_empty_removals = max_empty_removals

    def optimize(
        self, root: BeautifulSoup, config: CleaningConfig, stats: CleaningStatistics
    ) -> None:
        """
        Run bubbling then pruning until neither makes progress.

        Args:
            root: Parsed fragment, mutated in place
            config: Cleaning options (bubble_up_wrapper_divs, remove_empty_divs)
            stats: Statistics accumulator
        """
        if not (config.bubble_up_wrapper_divs or config.remove_empty_divs):
            return

        for pass_number in range(1, self.max_passes + 1):
            bubbled = (
                self.bubble_up_wrappers(root, stats)
                if config.bubble_up_wrapper_divs
                else 0
            )
            pruned = (
                self.remove_empty_divs(root, stats) if config.remove_empty_divs else 0
            )
            logger.debug(
                f"Optimize pass {pass_number}: bubbled={bubbled}, pruned={pruned}"
            )
            if not bubbled and not pruned:
                return

        logger.warning(
            f"Structural optimization stopped after {self.max_passes} passes"
        )

    def bubble_up_wrappers(self, root: BeautifulSoup, stats: CleaningStatistics) -> int:
        """
        Replace wrapper divs by their child divs, sweeping until stable.

        Args:
            root: Parsed fragment
            stats: Statistics accumulator

        Returns:
            Number of wrappers replaced
        """
        total = 0
        for _ in range(self.max_bubble_sweeps):
            replaced = self._bubble_sweep(root, stats)
            total += replaced
            if not replaced:
                break
        return total

    def _bubble_sweep(self, root: BeautifulSoup, stats: CleaningStatistics) -> int:
        replaced = 0
        # Snapshot in document order; wrappers spliced earlier in the sweep
        # are detached and skipped.
        for div in root.find_all(WRAPPER_TAG):
            if div.parent is None or not is_wrapper_div(div):
                continue
            self._splice_into_parent(div)
            replaced += 1
            stats.increment(StatisticKey.DIVS_BUBBLED_UP)
        return replaced

    @staticmethod
    def _splice_into_parent(wrapper: Tag) -> None:
        # Only the child divs move up; whitespace and comments between them go.
        for child in list(wrapper.contents):
            if not isinstance(child, Tag):
                child.extract()
        wrapper.unwrap()

    def remove_empty_divs(self, root: BeautifulSoup, stats: CleaningStatistics) -> int:
        """
        Delete empty divs one at a time in document order.

        After a deletion only the former parent can have become empty, so it
        is checked next instead of rescanning the whole tree.

        Args:
            root: Parsed fragment
            stats: Statistics accumulator

        Returns:
            Number of divs deleted
        """
        pending: List[Tag] = [div for div in root.find_all(WRAPPER_TAG) if is_empty_div(div)]
        removed = 0

        while pending and removed < self.max_empty_removals:
            div = pending.pop(0)
            if div.decomposed or div.parent is None or not is_empty_div(div):
                continue

            parent = div.parent
            div.decompose()
            removed += 1
            stats.increment(StatisticKey.EMPTY_DIVS_REMOVED)

            if is_empty_div(parent):
                pending.insert(0, parent)

        if pending and removed >= self.max_empty_removals:
            logger.warning(
                f"Empty div pruning stopped after {self.max_empty_removals} deletions"
            )
        return removed

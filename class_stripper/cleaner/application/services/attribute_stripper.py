"""Attribute Stripper for removing presentation and behaviour attributes.

Applied once per element. Each attribute category (classes, ids, styles,
data-*, event handlers, aria-*) is independent of the others, so the order in
which elements are visited does not change the result.
"""

from typing import List

from bs4 import BeautifulSoup, Tag

from class_stripper.cleaner.domain.statistics import CleaningStatistics
from class_stripper.cleaner.domain.value_objects.class_matcher import matches_any
from class_stripper.cleaner.domain.value_objects.cleaning_config import CleaningConfig
from class_stripper.core.constants import (
    ARIA_ATTRIBUTE_PREFIX,
    CLASS_ATTRIBUTE,
    DATA_ATTRIBUTE_PREFIX,
    EVENT_HANDLER_ATTRIBUTES,
    ID_ATTRIBUTE,
    STYLE_ATTRIBUTE,
)
from class_stripper.enums import StatisticKey
from class_stripper.logger import get_logger

logger = get_logger(__name__)


class AttributeStripper:
    """
    Service responsible for per-element attribute removal.

    Responsibilities:
    - Strip class tokens, honouring the preserve-class whitelist
    - Drop id, style, data-*, aria-* and event handler attributes
    - Count every removal in the statistics accumulator
    """

    def strip_tree(
        self, root: BeautifulSoup, config: CleaningConfig, stats: CleaningStatistics
    ) -> None:
        """
        Apply strip_attributes to every element under *root*.

        Args:
            root: Parsed fragment
            config: Cleaning options
            stats: Statistics accumulator
        """
        elements = root.find_all(True)
        for element in elements:
            self.strip_attributes(element, config, stats)
        logger.debug(f"Stripped attributes on {len(elements)} elements")

    def strip_attributes(
        self, element: Tag, config: CleaningConfig, stats: CleaningStatistics
    ) -> None:
        """
        Remove the configured attribute categories from one element.

        Args:
            element: Element to clean
            config: Cleaning options
            stats: Statistics accumulator
        """
        if config.strip_classes:
            self._strip_classes(element, config, stats)

        if config.strip_ids and self._remove_attribute(element, ID_ATTRIBUTE):
            stats.increment(StatisticKey.IDS_REMOVED)

        if config.strip_styles and self._remove_attribute(element, STYLE_ATTRIBUTE):
            stats.increment(StatisticKey.STYLES_REMOVED)

        if config.strip_data_attributes:
            removed = self._remove_matching(
                element, lambda name: name.startswith(DATA_ATTRIBUTE_PREFIX)
            )
            stats.increment(StatisticKey.DATA_ATTRIBUTES_REMOVED, removed)

        if config.strip_event_handlers:
            removed = self._remove_matching(
                element, lambda name: name in EVENT_HANDLER_ATTRIBUTES
            )
            stats.increment(StatisticKey.EVENT_HANDLERS_REMOVED, removed)

        if config.strip_aria_attributes:
            removed = self._remove_matching(
                element, lambda name: name.startswith(ARIA_ATTRIBUTE_PREFIX)
            )
            stats.increment(StatisticKey.ARIA_ATTRIBUTES_REMOVED, removed)

        stats.increment(StatisticKey.ELEMENTS_PROCESSED)

    def _strip_classes(
        self, element: Tag, config: CleaningConfig, stats: CleaningStatistics
    ) -> None:
        if CLASS_ATTRIBUTE not in element.attrs:
            return

        tokens = self._class_tokens(element.attrs[CLASS_ATTRIBUTE])
        preserved = [
            token for token in tokens if matches_any(token, config.preserve_classes)
        ]

        if preserved:
            element[CLASS_ATTRIBUTE] = " ".join(preserved)
            stats.increment(StatisticKey.CLASSES_REMOVED, len(tokens) - len(preserved))
        else:
            del element[CLASS_ATTRIBUTE]
            stats.increment(StatisticKey.CLASSES_REMOVED, len(tokens))

    @staticmethod
    def _class_tokens(value) -> List[str]:
        # Trees parsed with BeautifulSoup's defaults hold class as a token list
        if isinstance(value, str):
            return value.split()
        return [token for token in value if token and token.strip()]

    @staticmethod
    def _remove_attribute(element: Tag, name: str) -> bool:
        if name not in element.attrs:
            return False
        del element[name]
        return True

    @staticmethod
    def _remove_matching(element: Tag, predicate) -> int:
        names = [name for name in element.attrs if predicate(name)]
        for name in names:
            del element[name]
        return len(names)

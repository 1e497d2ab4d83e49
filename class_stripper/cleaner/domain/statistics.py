"""
Cleaning statistics.

A CleaningStatistics instance is created fresh for every clean() call and is
threaded by reference through every mutating stage. When tracking is
disabled the stages receive a NullStatistics accumulator instead, and the
result reports no statistics at all.
"""

from dataclasses import dataclass, fields
from typing import Dict

from class_stripper.enums import StatisticKey


@dataclass
class CleaningStatistics:
    """
    Counters describing what a single clean() call removed or rewrote.

    Counters only ever grow during a call.
    """

    classes_removed: int = 0
    ids_removed: int = 0
    styles_removed: int = 0
    data_attributes_removed: int = 0
    event_handlers_removed: int = 0
    aria_attributes_removed: int = 0
    tags_removed: int = 0
    empty_divs_removed: int = 0
    divs_bubbled_up: int = 0
    elements_processed: int = 0

    def increment(self, key: StatisticKey, amount: int = 1) -> None:
        """
        Add *amount* to the counter named by *key*.

        Args:
            key: Counter to increment
            amount: Non-negative increment

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Statistics are monotonic, got increment {amount}")
        setattr(self, key.value, getattr(self, key.value) + amount)

    def get(self, key: StatisticKey) -> int:
        return getattr(self, key.value)

    @property
    def total_removed(self) -> int:
        """Sum of every *_removed counter."""
        return sum(
            getattr(self, f.name) for f in fields(self) if f.name.endswith("_removed")
        )

    def to_dict(self, camel_case: bool = False) -> Dict[str, int]:
        """
        Export the counters.

        Args:
            camel_case: Use the camelCase names (``classesRemoved``) instead of
                the attribute names

        Returns:
            Mapping of counter name to value
        """
        return {
            (key.camel_name if camel_case else key.value): self.get(key)
            for key in StatisticKey
        }


class NullStatistics(CleaningStatistics):
    """Accumulator used when tracking is disabled; increments are dropped."""

    def increment(self, key: StatisticKey, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"Statistics are monotonic, got increment {amount}")

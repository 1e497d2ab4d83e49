"""
ClassMatcher - Single Responsibility: decide whether a class token is preserved

A preserve-class whitelist entry is either an exact class name or a regular
expression. Both variants expose the same matches() method so the attribute
stripper never has to know which kind it holds.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Pattern, Union


class ClassMatcher(ABC):
    """Whitelist entry for class tokens."""

    @abstractmethod
    def matches(self, class_name: str) -> bool:
        """Return True when *class_name* must be kept."""


@dataclass(frozen=True)
class ExactClassName(ClassMatcher):
    """Matches one class name by string equality."""

    name: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Preserved class name cannot be empty")

    def matches(self, class_name: str) -> bool:
        return class_name == self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ClassNamePattern(ClassMatcher):
    """Matches class names where the regular expression finds a match."""

    pattern: Pattern[str]

    def matches(self, class_name: str) -> bool:
        return self.pattern.search(class_name) is not None

    def __str__(self) -> str:
        return f"/{self.pattern.pattern}/"


ClassMatcherInput = Union[str, Pattern[str], ClassMatcher]


def to_class_matcher(entry: ClassMatcherInput) -> ClassMatcher:
    """
    Normalize a whitelist entry into a ClassMatcher.

    Args:
        entry: Exact class name, compiled regular expression or matcher

    Returns:
        The matching ClassMatcher variant

    Raises:
        TypeError: If the entry is of an unsupported type
    """
    if isinstance(entry, ClassMatcher):
        return entry
    if isinstance(entry, re.Pattern):
        return ClassNamePattern(entry)
    if isinstance(entry, str):
        return ExactClassName(entry.strip())
    raise TypeError(
        f"Preserved class must be a string or compiled pattern, got {type(entry).__name__}"
    )


def pattern_matcher(expression: str) -> ClassNamePattern:
    """Compile *expression* into a ClassNamePattern."""
    return ClassNamePattern(re.compile(expression))


def matches_any(class_name: str, matchers: Iterable[ClassMatcher]) -> bool:
    return any(matcher.matches(class_name) for matcher in matchers)

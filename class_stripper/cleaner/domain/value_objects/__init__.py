"""
Domain Value Objects

Immutable option records and whitelist matchers used by the cleaning pipeline.
"""

from .class_matcher import (
    ClassMatcher,
    ClassNamePattern,
    ExactClassName,
    matches_any,
    pattern_matcher,
    to_class_matcher,
)
from .cleaning_config import (
    CLASSES_AND_STYLES,
    CLASSES_ONLY,
    DEFAULT_CLEANING_CONFIG,
    STYLES_ONLY,
    BeautifyOptions,
    CleaningConfig,
)

__all__ = [
    "ClassMatcher",
    "ExactClassName",
    "ClassNamePattern",
    "to_class_matcher",
    "pattern_matcher",
    "matches_any",
    "BeautifyOptions",
    "CleaningConfig",
    "DEFAULT_CLEANING_CONFIG",
    "CLASSES_ONLY",
    "STYLES_ONLY",
    "CLASSES_AND_STYLES",
]

"""class-stripper: strip classes, styles and other noise from HTML fragments."""

from .cleaner import (
    clean,
    is_valid_html,
    strip_all,
    strip_classes,
    strip_html,
    strip_styles,
)
from .cleaner.domain.clean_result import CleanResult
from .cleaner.domain.statistics import CleaningStatistics
from .cleaner.domain.value_objects import (
    BeautifyOptions,
    ClassNamePattern,
    CleaningConfig,
    ExactClassName,
)

__version__ = "0.1.0"

__all__ = [
    "clean",
    "is_valid_html",
    "strip_html",
    "strip_classes",
    "strip_styles",
    "strip_all",
    "CleanResult",
    "CleaningStatistics",
    "CleaningConfig",
    "BeautifyOptions",
    "ExactClassName",
    "ClassNamePattern",
]

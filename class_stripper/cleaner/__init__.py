"""Module-level cleaning API.

``clean`` is the primary entrypoint. ``strip_classes``, ``strip_styles``,
``strip_all`` and ``strip_html`` are the two-flag attribute
stripper presets and return the cleaned string directly.
"""

from typing import Any, Optional

from class_stripper.app_factory import (
    get_default_orchestrator,
    get_default_validity_checker,
)
from class_stripper.logger import get_logger

from .domain.clean_result import CleanResult
from .domain.exceptions import CleanerError
from .domain.value_objects.cleaning_config import (
    CLASSES_AND_STYLES,
    CLASSES_ONLY,
    STYLES_ONLY,
    CleaningConfig,
)

logger = get_logger(__name__)


def clean(html: Any, config: Optional[Any] = None, **overrides: Any) -> CleanResult:
    """
    Clean an HTML fragment.

    Args:
        html: Raw HTML string
        config: CleaningConfig, mapping of options (snake_case or camelCase)
            or None for the defaults
        **overrides: Individual options applied on top of *config*

    Returns:
        CleanResult; on failure ``html`` is empty and ``error`` is set
    """
    orchestrator = get_default_orchestrator()
    if overrides:
        try:
            config = CleaningConfig.from_options(config, **overrides)
        except CleanerError as e:
            logger.warning(f"Rejected cleaning options: {e}")
            return CleanResult.failure(e)
    return orchestrator.clean(html, config)


def is_valid_html(text: Any) -> bool:
    """Return True if *text* looks like HTML and its tags are balanced."""
    return get_default_validity_checker().is_valid_html(text)


def strip_html(html: Any, strip_classes: bool = True, strip_styles: bool = True) -> str:
    """
    Legacy two-flag entrypoint.

    Args:
        html: Raw HTML string
        strip_classes: Remove class attributes
        strip_styles: Remove style attributes

    Returns:
        Cleaned HTML, or an empty string if cleaning failed
    """
    if strip_classes and strip_styles:
        config = CLASSES_AND_STYLES
    elif strip_classes:
        config = CLASSES_ONLY
    elif strip_styles:
        config = STYLES_ONLY
    else:
        config = CleaningConfig.legacy(strip_classes=False, strip_styles=False)
    return clean(html, config).html


def strip_classes(html: Any) -> str:
    return clean(html, CLASSES_ONLY).html


def strip_styles(html: Any) -> str:
    return clean(html, STYLES_ONLY).html


def strip_all(html: Any) -> str:
    """Remove both class and style attributes."""
    return clean(html, CLASSES_AND_STYLES).html


__all__ = [
    "clean",
    "is_valid_html",
    "strip_html",
    "strip_classes",
    "strip_styles",
    "strip_all",
]

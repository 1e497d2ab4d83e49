"""
CleaningConfig - Single Responsibility: per-call cleaning options

Immutable record of every switch the cleaning pipeline reads. Fields use
snake_case names; the camelCase names used by JSON clients
(``stripClasses``, ``preserveClasses``...) are accepted as aliases so that
option mappings coming from JSON keep working.
"""

import re
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from class_stripper.core.constants import DEFAULT_INDENT_SIZE

from ..exceptions import ConfigurationError
from .class_matcher import ClassMatcher, to_class_matcher


class BeautifyOptions(BaseModel):
    """Options handed to the beautifier."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    indent_size: int = Field(
        default=DEFAULT_INDENT_SIZE,
        description="Number of spaces per indentation level",
        ge=0,
    )
    preserve_newlines: bool = Field(
        default=True,
        description="Keep blank lines found inside text content",
    )
    indent_empty_lines: bool = Field(
        default=False,
        description="Indent kept blank lines to the level of their text",
    )


class CleaningConfig(BaseModel):
    """
    Configuration for a single clean() call.

    Defaults strip classes only, then optimize and beautify the result.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    # Attribute stripping
    strip_classes: bool = True
    strip_ids: bool = False
    strip_styles: bool = False
    strip_data_attributes: bool = False
    strip_event_handlers: bool = False
    strip_aria_attributes: bool = False
    preserve_classes: Tuple[ClassMatcher, ...] = Field(
        default=(),
        description="Class names (exact or regular expression) never stripped",
    )

    # Element removal
    remove_tags: Tuple[str, ...] = Field(
        default=(),
        description="Tag names whose elements are deleted with their subtree",
    )

    # Structure
    optimize_html: bool = True
    remove_empty_divs: bool = True
    bubble_up_wrapper_divs: bool = True

    # Output
    beautify: bool = True
    beautify_options: BeautifyOptions = Field(default_factory=BeautifyOptions)

    track_statistics: bool = True

    @field_validator("preserve_classes", mode="before")
    def normalize_preserve_classes(cls, v: Any) -> Tuple[ClassMatcher, ...]:
        if v is None:
            return ()
        if isinstance(v, (str, re.Pattern, ClassMatcher)):
            v = [v]
        try:
            return tuple(to_class_matcher(entry) for entry in v)
        except TypeError as e:
            raise ValueError(str(e)) from e

    @field_validator("remove_tags", mode="before")
    def normalize_remove_tags(cls, v: Any) -> Tuple[str, ...]:
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        tags = []
        for tag in v:
            if not isinstance(tag, str):
                raise ValueError(f"Tag names must be strings, got {type(tag).__name__}")
            tag = tag.strip().lower()
            if tag and tag not in tags:
                tags.append(tag)
        return tuple(tags)

    @property
    def has_preserved_classes(self) -> bool:
        return len(self.preserve_classes) > 0

    @property
    def has_tags_to_remove(self) -> bool:
        return len(self.remove_tags) > 0

    @property
    def strips_any_attribute(self) -> bool:
        """Check if at least one attribute category is stripped."""
        return any(
            (
                self.strip_classes,
                self.strip_ids,
                self.strip_styles,
                self.strip_data_attributes,
                self.strip_event_handlers,
                self.strip_aria_attributes,
            )
        )

    @classmethod
    def from_options(
        cls, options: Optional[Any] = None, **overrides: Any
    ) -> "CleaningConfig":
        """
        Build a configuration from a partial option set.

        Args:
            options: Existing CleaningConfig, mapping of option names (snake_case
                or camelCase) or None for the defaults
            **overrides: Options applied on top of *options*

        Returns:
            Validated CleaningConfig

        Raises:
            ConfigurationError: If an option has an invalid value
        """
        if options is None and not overrides:
            return DEFAULT_CLEANING_CONFIG
        if isinstance(options, CleaningConfig) and not overrides:
            return options

        if options is None:
            data = {}
        elif isinstance(options, (CleaningConfig, Mapping)):
            data = dict(options)
        else:
            raise ConfigurationError(
                f"expected a CleaningConfig or a mapping, got {type(options).__name__}",
                config_key="config",
            )
        data.update(overrides)

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            first_error = e.errors()[0]
            config_key = ".".join(str(part) for part in first_error["loc"]) or "config"
            raise ConfigurationError(
                first_error["msg"], config_key=config_key, original_exception=e
            ) from e

    def with_options(self, **overrides: Any) -> "CleaningConfig":
        """Create a new CleaningConfig with some options replaced."""
        return CleaningConfig.from_options(self, **overrides)

    @classmethod
    def legacy(cls, strip_classes: bool, strip_styles: bool) -> "CleaningConfig":
        """
        Configuration of the two-flag stripper presets: attributes only, no
        optimization, no beautification, no statistics.
        """
        return cls(
            strip_classes=strip_classes,
            strip_styles=strip_styles,
            optimize_html=False,
            beautify=False,
            track_statistics=False,
        )

    def __str__(self) -> str:
        enabled = [
            name
            for name in (
                "strip_classes",
                "strip_ids",
                "strip_styles",
                "strip_data_attributes",
                "strip_event_handlers",
                "strip_aria_attributes",
                "optimize_html",
                "beautify",
            )
            if getattr(self, name)
        ]
        return (
            f"CleaningConfig(enabled={enabled}, "
            f"preserve={len(self.preserve_classes)}, remove_tags={list(self.remove_tags)})"
        )


DEFAULT_CLEANING_CONFIG = CleaningConfig()

CLASSES_ONLY = CleaningConfig.legacy(strip_classes=True, strip_styles=False)
STYLES_ONLY = CleaningConfig.legacy(strip_classes=False, strip_styles=True)
CLASSES_AND_STYLES = CleaningConfig.legacy(strip_classes=True, strip_styles=True)

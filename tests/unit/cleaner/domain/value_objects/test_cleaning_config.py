import re

import pytest
from pydantic import ValidationError

from class_stripper.cleaner.domain.exceptions import ConfigurationError
from class_stripper.cleaner.domain.value_objects.class_matcher import (
    ClassNamePattern,
    ExactClassName,
)
from class_stripper.cleaner.domain.value_objects.cleaning_config import (
    CLASSES_AND_STYLES,
    CLASSES_ONLY,
    DEFAULT_CLEANING_CONFIG,
    STYLES_ONLY,
    BeautifyOptions,
    CleaningConfig,
)


def test_cleaning_config_defaults():
    config = CleaningConfig()
    assert config.strip_classes is True
    assert config.strip_ids is False
    assert config.strip_styles is False
    assert config.strip_data_attributes is False
    assert config.strip_event_handlers is False
    assert config.strip_aria_attributes is False
    assert config.preserve_classes == ()
    assert config.remove_tags == ()
    assert config.optimize_html is True
    assert config.remove_empty_divs is True
    assert config.bubble_up_wrapper_divs is True
    assert config.beautify is True
    assert config.beautify_options == BeautifyOptions()
    assert config.track_statistics is True
    assert config.has_preserved_classes is False
    assert config.has_tags_to_remove is False
    assert config.strips_any_attribute is True


def test_beautify_options_defaults_and_aliases():
    options = BeautifyOptions()
    assert options.indent_size == 2
    assert options.preserve_newlines is True
    assert options.indent_empty_lines is False

    aliased = BeautifyOptions.model_validate({"indentSize": 4, "indentEmptyLines": True})
    assert aliased.indent_size == 4
    assert aliased.indent_empty_lines is True

    with pytest.raises(ValidationError):
        BeautifyOptions(indent_size=-1)


def test_config_is_immutable():
    config = CleaningConfig()
    with pytest.raises(ValidationError):
        config.strip_ids = True


def test_preserve_classes_are_normalized():
    config = CleaningConfig(preserve_classes=["keep", re.compile("^js-")])
    assert config.preserve_classes[0] == ExactClassName("keep")
    assert isinstance(config.preserve_classes[1], ClassNamePattern)
    assert config.has_preserved_classes is True

    single = CleaningConfig(preserve_classes="keep")
    assert single.preserve_classes == (ExactClassName("keep"),)
    assert CleaningConfig(preserve_classes=None).preserve_classes == ()


def test_preserve_classes_rejects_other_types():
    with pytest.raises(ValidationError):
        CleaningConfig(preserve_classes=[42])


def test_remove_tags_are_normalized():
    config = CleaningConfig(remove_tags=["SCRIPT", " style ", "script", ""])
    assert config.remove_tags == ("script", "style")
    assert CleaningConfig(remove_tags="iframe").remove_tags == ("iframe",)
    with pytest.raises(ValidationError):
        CleaningConfig(remove_tags=[None])


def test_camel_case_aliases():
    config = CleaningConfig.model_validate(
        {
            "stripIds": True,
            "preserveClasses": ["keep"],
            "removeTags": ["script"],
            "beautifyOptions": {"indentSize": 4},
            "trackStatistics": False,
        }
    )
    assert config.strip_ids is True
    assert config.preserve_classes == (ExactClassName("keep"),)
    assert config.remove_tags == ("script",)
    assert config.beautify_options.indent_size == 4
    assert config.track_statistics is False


def test_from_options():
    assert CleaningConfig.from_options() is DEFAULT_CLEANING_CONFIG
    assert CleaningConfig.from_options(CLASSES_ONLY) is CLASSES_ONLY

    config = CleaningConfig.from_options({"strip_styles": True}, strip_ids=True)
    assert config.strip_styles is True
    assert config.strip_ids is True
    assert config.strip_classes is True

    overridden = CleaningConfig.from_options(CLASSES_ONLY, beautify=True)
    assert overridden.beautify is True
    assert overridden.optimize_html is False


def test_from_options_invalid_value_raises_configuration_error():
    with pytest.raises(ConfigurationError) as exc_info:
        CleaningConfig.from_options({"beautify_options": {"indent_size": -2}})
    assert exc_info.value.error_code == "CONFIG_ERROR"
    assert isinstance(exc_info.value.original_exception, ValidationError)


def test_from_options_rejects_non_mapping():
    with pytest.raises(ConfigurationError) as exc_info:
        CleaningConfig.from_options(["strip_ids"])
    assert exc_info.value.context == {"config_key": "config"}


def test_with_options_returns_new_config():
    config = CleaningConfig()
    updated = config.with_options(strip_aria_attributes=True)
    assert updated.strip_aria_attributes is True
    assert config.strip_aria_attributes is False


def test_legacy_presets():
    for preset in (CLASSES_ONLY, STYLES_ONLY, CLASSES_AND_STYLES):
        assert preset.optimize_html is False
        assert preset.beautify is False
        assert preset.track_statistics is False
    assert (CLASSES_ONLY.strip_classes, CLASSES_ONLY.strip_styles) == (True, False)
    assert (STYLES_ONLY.strip_classes, STYLES_ONLY.strip_styles) == (False, True)
    assert (CLASSES_AND_STYLES.strip_classes, CLASSES_AND_STYLES.strip_styles) == (
        True,
        True,
    )
    assert CleaningConfig.legacy(False, False).strips_any_attribute is False


def test_str_lists_enabled_switches():
    text = str(CleaningConfig(strip_ids=True, remove_tags=["script"]))
    assert "strip_ids" in text
    assert "strip_styles" not in text
    assert "script" in text

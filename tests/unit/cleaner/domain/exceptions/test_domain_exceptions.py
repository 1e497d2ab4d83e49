from class_stripper.cleaner.domain.exceptions import (
    CleanerError,
    ConfigurationError,
    InternalFaultError,
    InvalidInputError,
    ParsingError,
)


def test_cleaner_error_formats_code_and_message():
    exc = CleanerError("Something broke", "INTERNAL_FAULT", context={"a": 1})
    assert str(exc) == "[INTERNAL_FAULT] Something broke"
    assert exc.to_dict() == {
        "error_code": "INTERNAL_FAULT",
        "message": "Something broke",
        "context": {"a": 1},
        "original_exception": None,
    }


def test_subclasses_carry_their_error_codes():
    assert InvalidInputError(None).error_code == "INVALID_INPUT"
    assert ParsingError("bad", parser="html.parser").error_code == "PARSING_FAILED"
    assert ConfigurationError("bad", config_key="remove_tags").error_code == "CONFIG_ERROR"
    assert InternalFaultError("optimization", "boom").error_code == "INTERNAL_FAULT"
    for exc in (
        InvalidInputError(42),
        ParsingError("bad"),
        ConfigurationError("bad", config_key="x"),
        InternalFaultError("parsing", "boom"),
    ):
        assert isinstance(exc, CleanerError)


def test_invalid_input_error_records_input_type():
    exc = InvalidInputError(42)
    assert exc.context == {"input_type": "int"}
    assert "non-empty HTML string" in exc.message


def test_messages_include_context():
    assert ParsingError("bad", parser="html.parser").message == (
        "Parsing failed (html.parser): bad"
    )
    assert "'indentSize'" in ConfigurationError("too small", config_key="indentSize").message
    fault = InternalFaultError("optimization", "boom")
    assert fault.message == "Cleaning failed during optimization: boom"
    assert fault.context == {"stage": "optimization"}


def test_original_exception_is_kept():
    original = ValueError("nope")
    wrapped = ParsingError("bad markup", original_exception=original)
    assert wrapped.original_exception is original
    assert wrapped.to_dict()["original_exception"] == "nope"

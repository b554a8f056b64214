"""Tests for error handling and logging modules."""

import json
import logging

import pytest

from spellfix.errors import (
    ConfigurationError,
    EmptyFileError,
    EmptyVocabularyError,
    EntryFileError,
    ErrorCategory,
    InvalidIdError,
    NoValidWordsError,
    ResourceError,
    SpellfixError,
    StorageError,
    TooShortError,
    ValidationError,
    format_error_for_display,
)
from spellfix.logging import (
    LogConfig,
    LogLevel,
    StructuredFormatter,
    configure_logging,
    enable_file_logging,
    get_logger,
    log_operation_complete,
    log_operation_failed,
    log_operation_start,
    set_verbosity,
)


class TestErrorCategory:
    """Tests for ErrorCategory enum."""

    def test_categories(self):
        """Test error category values."""
        assert ErrorCategory.VALIDATION.value == "validation"
        assert ErrorCategory.CONFIGURATION.value == "configuration"
        assert ErrorCategory.RESOURCE.value == "resource"
        assert ErrorCategory.INTERNAL.value == "internal"


class TestSpellfixError:
    """Tests for SpellfixError base class."""

    def test_basic_error(self):
        """Test basic error creation."""
        error = SpellfixError("Test error")

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.context == {}
        assert error.category == ErrorCategory.INTERNAL

    def test_error_with_context(self):
        """Test error with context."""
        error = SpellfixError("Test error", context={"key": "value"})

        assert "context: {'key': 'value'}" in str(error)


class TestSpecificErrors:
    """Tests for specific error types."""

    def test_resource_errors(self):
        """Test read and write failures share a category."""
        assert ResourceError("missing").category == ErrorCategory.RESOURCE
        assert StorageError("unwritable").category == ErrorCategory.RESOURCE

    def test_configuration_error(self):
        """Test ConfigurationError."""
        assert ConfigurationError("bad").category == ErrorCategory.CONFIGURATION

    @pytest.mark.parametrize(
        "error_class,reason",
        [
            (TooShortError, "is too short"),
            (InvalidIdError, "has invalid ID"),
            (NoValidWordsError, "has no valid words"),
        ],
    )
    def test_line_errors(self, error_class, reason):
        """Test line errors carry the line number and text."""
        error = error_class(7, "oops")

        assert isinstance(error, ValidationError)
        assert error.category == ErrorCategory.VALIDATION
        assert error.line_number == 7
        assert error.text == "oops"
        assert str(error) == f"Line 7 {reason}: 'oops'"

    def test_entry_file_error(self):
        """Test the aggregate parse error."""
        error = EntryFileError([TooShortError(2, "12"), InvalidIdError(5, "ab12")])

        assert len(error.errors) == 2
        assert error.message == "2 invalid line(s) in entry file"
        assert error.context == {"lines": "2, 5"}

    def test_empty_errors(self):
        """Test default messages of the empty-input errors."""
        assert str(EmptyFileError()) == "cannot find any valid entries"
        assert str(EmptyVocabularyError()) == "Dictionary is empty"


class TestFormatErrorForDisplay:
    """Tests for format_error_for_display."""

    def test_spellfix_error(self):
        """Test formatting a spellfix error."""
        assert format_error_for_display(EmptyVocabularyError()) == (
            "[validation] Dictionary is empty"
        )

    def test_error_with_context(self):
        """Test formatting includes context."""
        error = ResourceError("File missing", context={"path": "a.txt"})
        assert format_error_for_display(error) == "[resource] File missing (path=a.txt)"

    def test_other_error(self):
        """Test formatting a non-spellfix error."""
        assert format_error_for_display(KeyError("x")) == "[error] KeyError: 'x'"


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def make_record(self, **extra):
        record = logging.LogRecord(
            name="spellfix.test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="Hello %s",
            args=("world",),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_text_format(self):
        """Test plain text output."""
        formatter = StructuredFormatter(include_timestamp=False, color=False)
        output = formatter.format(self.make_record())

        assert "INFO" in output
        assert "spellfix.test" in output
        assert output.endswith("Hello world")

    def test_text_format_with_context(self):
        """Test extra fields appear as context."""
        formatter = StructuredFormatter(include_timestamp=False, color=False)
        output = formatter.format(self.make_record(entry_id="0001"))

        assert "[entry_id=0001]" in output

    def test_json_format(self):
        """Test JSON output."""
        formatter = StructuredFormatter(json_format=True, include_timestamp=False)
        data = json.loads(formatter.format(self.make_record(distance=1)))

        assert data["level"] == "info"
        assert data["message"] == "Hello world"
        assert data["logger"] == "spellfix.test"
        assert data["context"] == {"distance": 1}

    def test_json_non_serializable_context(self):
        """Test non-JSON values are stringified."""
        formatter = StructuredFormatter(json_format=True, include_timestamp=False)
        data = json.loads(formatter.format(self.make_record(obj={1, 2})))

        assert isinstance(data["context"]["obj"], str)


class TestLoggingConfiguration:
    """Tests for logging configuration helpers."""

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        yield
        configure_logging(LogConfig())

    def test_levels(self):
        """Test verbosity maps onto stdlib levels."""
        root = logging.getLogger("spellfix")

        set_verbosity(LogLevel.QUIET)
        assert root.level == logging.ERROR

        set_verbosity(LogLevel.VERBOSE)
        assert root.level == logging.INFO

        set_verbosity(LogLevel.DEBUG)
        assert root.level == logging.DEBUG

    def test_get_logger_in_hierarchy(self):
        """Test module loggers live under spellfix."""
        logger = get_logger("spellfix.runner")
        assert logger.name == "spellfix.runner"
        assert logger.parent is logging.getLogger("spellfix")

    def test_file_logging(self, tmp_path):
        """Test writing operation logs to a file."""
        log_file = tmp_path / "logs" / "run.log"
        enable_file_logging(log_file)

        logger = get_logger("spellfix.test")
        log_operation_start(logger, "correction", words_file="w.txt")
        log_operation_complete(logger, "correction", duration=1.234, entries=2)
        log_operation_failed(logger, "correction", ValueError("boom"))

        for handler in logging.getLogger("spellfix").handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Starting: correction" in content
        assert "Completed: correction" in content
        assert "duration_seconds=1.23" in content
        assert "Failed: correction" in content
        assert "error_type=ValueError" in content

"""Error hierarchy for spellfix.

Every failure the correction pipeline can report is a ``SpellfixError``
subclass carrying an ``ErrorCategory``. Core functions raise these; only the
runner and the CLI catch them.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class ErrorCategory(str, Enum):
    """Categories of errors for handling decisions."""

    VALIDATION = "validation"  # Malformed entry or vocabulary data
    CONFIGURATION = "configuration"  # Bad run config
    RESOURCE = "resource"  # Missing, unreadable or unwritable file
    INTERNAL = "internal"  # Bug in code


class SpellfixError(Exception):
    """Base exception for spellfix errors.

    Attributes:
        message: Human-readable error message
        category: Error category for handling
        context: Additional context information
    """

    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message


class ResourceError(SpellfixError):
    """Source file missing or unreadable."""

    category = ErrorCategory.RESOURCE


class StorageError(SpellfixError):
    """Destination file or directory could not be written."""

    category = ErrorCategory.RESOURCE


class ConfigurationError(SpellfixError):
    """Run configuration could not be loaded or is invalid."""

    category = ErrorCategory.CONFIGURATION


class ValidationError(SpellfixError):
    """Input data does not have the expected structure."""

    category = ErrorCategory.VALIDATION


class EntryParseError(ValidationError):
    """A single line of the entry file is malformed.

    Attributes:
        line_number: 1-based line number in the original file
        text: The offending text
    """

    reason = "is malformed"

    def __init__(self, line_number: int, text: str):
        super().__init__(f"Line {line_number} {self.reason}: '{text}'")
        self.line_number = line_number
        self.text = text


class TooShortError(EntryParseError):
    """Line is shorter than an id plus one content character."""

    reason = "is too short"


class InvalidIdError(EntryParseError):
    """The first four characters are not all ASCII digits."""

    reason = "has invalid ID"


class NoValidWordsError(EntryParseError):
    """The content holds separators only."""

    reason = "has no valid words"


class EntryFileError(ValidationError):
    """Several lines of the entry file are malformed.

    Raised only when all line errors are collected instead of stopping at
    the first one.
    """

    def __init__(self, errors: Sequence[EntryParseError]):
        self.errors = list(errors)
        lines = ", ".join(str(e.line_number) for e in self.errors)
        super().__init__(
            f"{len(self.errors)} invalid line(s) in entry file",
            context={"lines": lines},
        )


class EmptyFileError(ValidationError):
    """The entry file contains no entries."""

    def __init__(self, message: str = "cannot find any valid entries"):
        super().__init__(message)


class EmptyVocabularyError(ValidationError):
    """The vocabulary source contains no words."""

    def __init__(self, message: str = "Dictionary is empty"):
        super().__init__(message)


def format_error_for_display(error: Exception) -> str:
    """Format an error message for user display.

    Args:
        error: Error to format

    Returns:
        Human-readable error message
    """
    if isinstance(error, SpellfixError):
        category = error.category.value
        base_message = error.message

        if error.context:
            context_str = ", ".join(f"{k}={v}" for k, v in error.context.items())
            return f"[{category}] {base_message} ({context_str})"

        return f"[{category}] {base_message}"

    return f"[error] {type(error).__name__}: {error}"

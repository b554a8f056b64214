"""Entry file parser.

Parses line-oriented entry files where each non-blank line is::

    DDDD<sep><word content>

``DDDD`` is a zero-padded 4-digit identifier kept as text, ``<sep>`` is a
single character (expected to be a space) and the word content is a run of
words separated by spaces and/or slashes.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from spellfix.entries.tokens import Token, Word, render_tokens, tokenize
from spellfix.errors import (
    EmptyFileError,
    EntryFileError,
    EntryParseError,
    InvalidIdError,
    NoValidWordsError,
    TooShortError,
)
from spellfix.logging import get_logger

logger = get_logger(__name__)

ID_LENGTH = 4
CONTENT_OFFSET = ID_LENGTH + 1


@dataclass(frozen=True)
class Entry:
    """One parsed line of an entry file.

    Attributes:
        id: 4-digit identifier, leading zeros preserved
        tokens: Word and separator tokens of the content, in order
    """

    id: str
    tokens: tuple[Token, ...] = field(default_factory=tuple)

    @property
    def words(self) -> list[str]:
        """Texts of the word tokens, in order."""
        return [token.text for token in self.tokens if isinstance(token, Word)]

    def with_tokens(self, tokens: Iterable[Token]) -> "Entry":
        """Return a copy of this entry with a different token sequence."""
        return replace(self, tokens=tuple(tokens))


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def parse_line(line_number: int, line: str) -> Entry:
    """Parse a single trimmed line into an Entry.

    Args:
        line_number: 1-based line number used in error messages
        line: Line text with surrounding whitespace already removed

    Returns:
        Parsed entry

    Raises:
        TooShortError: Line has fewer than 5 characters
        InvalidIdError: First 4 characters are not all ASCII digits
        NoValidWordsError: Content holds separators only
    """
    if len(line) < CONTENT_OFFSET:
        raise TooShortError(line_number, line)

    entry_id = line[:ID_LENGTH]
    if not _is_ascii_digits(entry_id):
        raise InvalidIdError(line_number, entry_id)

    # Character at ID_LENGTH is the id separator and is not checked
    tokens = tokenize(line[CONTENT_OFFSET:])

    if not any(isinstance(token, Word) for token in tokens):
        raise NoValidWordsError(line_number, line)

    return Entry(id=entry_id, tokens=tuple(tokens))


def _numbered_lines(content: str) -> Iterable[tuple[int, str]]:
    """Yield (original 1-based line number, trimmed line) for non-blank lines."""
    for index, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if line:
            yield index, line


def parse_content(content: str, collect_errors: bool = False) -> list[Entry]:
    """Parse the full text of an entry file.

    Blank lines are skipped but still counted, so error line numbers refer
    to the original file.

    Args:
        content: Entry file text
        collect_errors: Parse every line and report all bad lines at once
            instead of stopping at the first one

    Returns:
        Entries in file order

    Raises:
        EntryParseError: First malformed line (default mode)
        EntryFileError: All malformed lines (``collect_errors`` mode)
        EmptyFileError: No entries in the file
    """
    entries: list[Entry] = []
    errors: list[EntryParseError] = []

    for line_number, line in _numbered_lines(content):
        try:
            entries.append(parse_line(line_number, line))
        except EntryParseError as e:
            if not collect_errors:
                raise
            logger.debug(str(e), extra={"line_number": line_number})
            errors.append(e)

    if errors:
        raise EntryFileError(errors)

    if not entries:
        raise EmptyFileError()

    return entries


def render_entry(entry: Entry) -> str:
    """Render an entry as ``<id> <content>``."""
    return f"{entry.id} {render_tokens(entry.tokens)}"


def render_entries(entries: Iterable[Entry]) -> str:
    """Render entries one per line, each followed by a newline."""
    return "".join(f"{render_entry(entry)}\n" for entry in entries)

"""Separator-preserving tokenizer for entry word content.

Word content is a run of words delimited by spaces and slashes. Tokenizing
keeps every delimiter as its own token so the original text can be rebuilt
exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

SEPARATORS = frozenset(" /")


@dataclass(frozen=True)
class Word:
    """A maximal run of non-separator characters."""

    text: str

    def __post_init__(self):
        if not self.text:
            raise ValueError("Word token cannot be empty")


@dataclass(frozen=True)
class Separator:
    """A single space or slash."""

    char: str

    def __post_init__(self):
        if self.char not in SEPARATORS:
            raise ValueError(f"Invalid separator: {self.char!r}")

    @property
    def text(self) -> str:
        return self.char


Token = Union[Word, Separator]


def tokenize(content: str) -> list[Token]:
    """Split word content into words and separators.

    Args:
        content: Word content of an entry (everything after the id)

    Returns:
        Tokens in source order; empty if ``content`` is empty
    """
    tokens: list[Token] = []
    current_word: list[str] = []

    for char in content:
        if char in SEPARATORS:
            if current_word:
                tokens.append(Word("".join(current_word)))
                current_word = []
            tokens.append(Separator(char))
        else:
            current_word.append(char)

    if current_word:
        tokens.append(Word("".join(current_word)))

    return tokens


def render_tokens(tokens: Iterable[Token]) -> str:
    """Concatenate token texts back into word content."""
    return "".join(token.text for token in tokens)

"""Reference vocabulary.

Holds the sorted list of known-good words that entries are corrected
against. Lookups are exact and case-sensitive.
"""

from __future__ import annotations

from bisect import bisect_left
from pathlib import Path
from typing import Iterable, Iterator

from spellfix import storage
from spellfix.errors import EmptyVocabularyError


class Vocabulary:
    """Immutable, sorted sequence of reference words.

    Example:
        vocabulary = Vocabulary.load("dog\\ncat\\ncart\\n")
        vocabulary.contains("cat")  # True
        list(vocabulary)  # ["cart", "cat", "dog"]
    """

    def __init__(self, words: Iterable[str]):
        """Initialize vocabulary.

        Args:
            words: Reference words in any order; duplicates are allowed

        Raises:
            EmptyVocabularyError: If no words are given
        """
        self._words: tuple[str, ...] = tuple(sorted(words))

        if not self._words:
            raise EmptyVocabularyError()

    @classmethod
    def load(cls, raw_text: str) -> "Vocabulary":
        """Build a vocabulary from one-word-per-line text.

        Lines are trimmed and blank lines are ignored.

        Args:
            raw_text: Vocabulary file contents

        Returns:
            Vocabulary instance

        Raises:
            EmptyVocabularyError: If the text has no non-blank lines
        """
        words = (line.strip() for line in raw_text.split("\n"))
        return cls(word for word in words if word)

    @classmethod
    def from_file(cls, path: Path | str) -> "Vocabulary":
        """Load a vocabulary from a text file.

        Raises:
            ResourceError: If the file cannot be read
            EmptyVocabularyError: If the file has no words
        """
        return cls.load(storage.read_text(path))

    @property
    def words(self) -> tuple[str, ...]:
        """All words in ascending order."""
        return self._words

    def contains(self, word: str) -> bool:
        """Check whether ``word`` is in the vocabulary (exact match).

        Args:
            word: Word to look up

        Returns:
            True if the word is present
        """
        index = bisect_left(self._words, word)
        return index < len(self._words) and self._words[index] == word

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        """Return number of words, duplicates included."""
        return len(self._words)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._words)} words)"

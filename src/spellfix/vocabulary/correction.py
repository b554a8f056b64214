"""Entry correction using vocabulary matching.

Words already in the vocabulary are kept. Every other word is replaced by
the vocabulary word with the smallest edit distance, scanning the vocabulary
in sorted order and stopping early at the first candidate that is close
enough.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from spellfix import storage
from spellfix.entries.parser import Entry
from spellfix.entries.tokens import Token, Word
from spellfix.logging import get_logger
from spellfix.vocabulary.distance import levenshtein_distance
from spellfix.vocabulary.terms import Vocabulary

logger = get_logger(__name__)


@dataclass
class Correction:
    """Represents a single word replaced in an entry."""

    entry_id: str
    position: int  # Token index within the entry
    original: str
    corrected: str
    distance: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "entry_id": self.entry_id,
            "position": self.position,
            "original": self.original,
            "corrected": self.corrected,
            "distance": self.distance,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Correction":
        """Create from dictionary."""
        return cls(
            entry_id=data["entry_id"],
            position=data["position"],
            original=data["original"],
            corrected=data["corrected"],
            distance=data["distance"],
        )


@dataclass
class CorrectionLog:
    """Log of all words replaced during a correction pass."""

    corrections: list[Correction] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)
    source_file: str = ""
    vocabulary_words: int = 0

    def add(self, correction: Correction) -> None:
        """Add a correction to the log."""
        self.corrections.append(correction)

    def __len__(self) -> int:
        """Return number of corrections."""
        return len(self.corrections)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "source_file": self.source_file,
            "vocabulary_words": self.vocabulary_words,
            "correction_count": len(self.corrections),
            "corrections": [c.to_dict() for c in self.corrections],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CorrectionLog":
        """Create from dictionary."""
        log = cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            source_file=data.get("source_file", ""),
            vocabulary_words=data.get("vocabulary_words", 0),
        )
        for c_data in data.get("corrections", []):
            log.corrections.append(Correction.from_dict(c_data))
        return log

    def save(self, path: Path | str) -> None:
        """Save log to a JSON file.

        Args:
            path: Path to save to
        """
        storage.write_json(path, self.to_dict())


class WordCorrector:
    """Corrects words and entries against a vocabulary.

    The scan visits candidates in the vocabulary's sorted order. A candidate
    only replaces the current best when its distance is strictly smaller, so
    ties go to the alphabetically first word. The scan stops at the first
    candidate within ``early_exit_distance``, which is not necessarily the
    global nearest word.
    """

    DEFAULT_EARLY_EXIT_DISTANCE = 1

    def __init__(
        self,
        vocabulary: Vocabulary,
        early_exit_distance: int = DEFAULT_EARLY_EXIT_DISTANCE,
    ):
        """Initialize corrector.

        Args:
            vocabulary: Reference words, only read
            early_exit_distance: Stop scanning at the first candidate this close
        """
        if early_exit_distance < 0:
            raise ValueError("early_exit_distance must be >= 0")

        self.vocabulary = vocabulary
        self.early_exit_distance = early_exit_distance

    def find_nearest(self, word: str) -> tuple[str, int]:
        """Find the replacement for a word and its edit distance.

        Args:
            word: Word to look up

        Returns:
            Tuple of (replacement, distance); distance is 0 for known words
        """
        if self.vocabulary.contains(word):
            return word, 0

        best_match: str | None = None
        min_distance: int | None = None

        for candidate in self.vocabulary:
            distance = levenshtein_distance(word, candidate)

            if min_distance is None or distance < min_distance:
                best_match = candidate
                min_distance = distance

                if distance <= self.early_exit_distance:
                    break

        # Vocabulary is never empty, so the loop always picks a candidate
        assert best_match is not None and min_distance is not None
        return best_match, min_distance

    def correct(self, word: str) -> str:
        """Return the vocabulary spelling for a word.

        Args:
            word: Word to correct

        Returns:
            ``word`` itself if known, otherwise the nearest vocabulary word
        """
        return self.find_nearest(word)[0]

    def correct_entry(self, entry: Entry, log: CorrectionLog | None = None) -> Entry:
        """Correct every word of an entry.

        Separators and the id are copied unchanged.

        Args:
            entry: Entry to correct
            log: Optional log to record replaced words in

        Returns:
            New entry with the same id and token layout
        """
        tokens: list[Token] = []

        for position, token in enumerate(entry.tokens):
            if not isinstance(token, Word):
                tokens.append(token)
                continue

            replacement, distance = self.find_nearest(token.text)
            if replacement != token.text:
                logger.debug(
                    f'"{token.text}" -> "{replacement}"',
                    extra={"entry_id": entry.id, "distance": distance},
                )
                if log is not None:
                    log.add(Correction(
                        entry_id=entry.id,
                        position=position,
                        original=token.text,
                        corrected=replacement,
                        distance=distance,
                    ))
            tokens.append(Word(replacement))

        return entry.with_tokens(tokens)

    def correct_entries(
        self,
        entries: Iterable[Entry],
        source_file: str = "",
    ) -> tuple[list[Entry], CorrectionLog]:
        """Correct a sequence of entries, keeping their order.

        Args:
            entries: Entries to correct
            source_file: Source file name for the log

        Returns:
            Tuple of (corrected_entries, correction_log)
        """
        log = CorrectionLog(
            source_file=source_file,
            vocabulary_words=len(self.vocabulary),
        )
        corrected = [self.correct_entry(entry, log) for entry in entries]
        return corrected, log


def correct(word: str, vocabulary: Vocabulary) -> str:
    """Correct a single word with the default early-exit policy."""
    return WordCorrector(vocabulary).correct(word)


def correct_entry(entry: Entry, vocabulary: Vocabulary) -> Entry:
    """Correct an entry with the default early-exit policy."""
    return WordCorrector(vocabulary).correct_entry(entry)

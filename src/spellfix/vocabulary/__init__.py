"""Vocabulary module for entry correction.

Provides the sorted reference word list, edit distance, and the
nearest-word corrector built on top of them.
"""

from spellfix.vocabulary.terms import Vocabulary
from spellfix.vocabulary.distance import levenshtein_distance
from spellfix.vocabulary.correction import (
    Correction,
    CorrectionLog,
    WordCorrector,
    correct,
    correct_entry,
)

__all__ = [
    "Vocabulary",
    "WordCorrector",
    "Correction",
    "CorrectionLog",
    "correct",
    "correct_entry",
    "levenshtein_distance",
]

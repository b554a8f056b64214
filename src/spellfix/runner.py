"""Correction run orchestration.

Loads the vocabulary and the entry file, corrects every entry, and writes
the result. Output is only written once every entry has been corrected, so
a failed run never leaves a partial file behind.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from spellfix import storage
from spellfix.config import RunConfig
from spellfix.entries.parser import parse_content, render_entries
from spellfix.errors import ResourceError
from spellfix.logging import (
    get_logger,
    log_operation_complete,
    log_operation_failed,
    log_operation_start,
)
from spellfix.vocabulary.correction import CorrectionLog, WordCorrector
from spellfix.vocabulary.terms import Vocabulary

logger = get_logger(__name__)

Reporter = Callable[[str], None]


@dataclass
class RunResult:
    """Outcome of a successful correction run."""

    vocabulary_size: int
    entry_count: int
    output_path: Path
    log: CorrectionLog

    @property
    def corrected_word_count(self) -> int:
        """Number of words that were replaced."""
        return len(self.log)


def _report(reporter: Reporter | None, message: str) -> None:
    logger.info(message)
    if reporter is not None:
        reporter(message)


def run_correction(config: RunConfig, reporter: Reporter | None = None) -> RunResult:
    """Run a full correction pass.

    Args:
        config: File locations and correction settings
        reporter: Optional callable receiving progress messages

    Returns:
        Summary of the run

    Raises:
        SpellfixError: On any failure; nothing is written in that case
    """
    start = time.monotonic()
    log_operation_start(logger, "correction", words_file=str(config.words_file))

    try:
        if not storage.path_exists(config.words_file):
            raise ResourceError(f"File '{config.words_file}' does not exist")

        if not storage.path_exists(config.vocabulary_file):
            raise ResourceError(
                f"Dictionary file '{config.vocabulary_file}' does not exist"
            )

        vocabulary = Vocabulary.from_file(config.vocabulary_file)
        _report(reporter, f"Dictionary loaded successfully with {len(vocabulary)} words")

        entries = parse_content(
            storage.read_text(config.words_file),
            collect_errors=config.collect_errors,
        )
        _report(
            reporter,
            f"Successfully parsed {len(entries)} entries from {config.words_file}",
        )

        corrector = WordCorrector(vocabulary, early_exit_distance=config.early_exit_distance)
        corrected, correction_log = corrector.correct_entries(
            entries, source_file=str(config.words_file)
        )

        storage.write_text(config.output_file, render_entries(corrected))
        _report(reporter, f"Correction completed! Result saved to {config.output_file}")

        if config.correction_log_file is not None:
            correction_log.save(config.correction_log_file)
            _report(
                reporter,
                f"Correction log with {len(correction_log)} changes saved to "
                f"{config.correction_log_file}",
            )

    except Exception as e:
        log_operation_failed(logger, "correction", e)
        raise

    log_operation_complete(
        logger,
        "correction",
        duration=time.monotonic() - start,
        entries=len(corrected),
        corrections=len(correction_log),
    )

    return RunResult(
        vocabulary_size=len(vocabulary),
        entry_count=len(entries),
        output_path=config.output_file,
        log=correction_log,
    )

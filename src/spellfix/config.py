"""Run configuration for spellfix.

Handles the file locations and correction settings of a run, optionally
loaded from a JSON file.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from spellfix.errors import ConfigurationError

DEFAULT_WORDS_FILE = Path("problem/words.txt")
DEFAULT_VOCABULARY_FILE = Path("problem/vocabulary.txt")
DEFAULT_OUTPUT_FILE = Path("problem/correction_words.txt")


class RunConfig(BaseModel):
    """Configuration for a single correction run."""

    # Entry file to correct
    words_file: Path = DEFAULT_WORDS_FILE
    # Reference vocabulary, one word per line
    vocabulary_file: Path = DEFAULT_VOCABULARY_FILE
    # Corrected entries are written here
    output_file: Path = DEFAULT_OUTPUT_FILE
    # Optional JSON report of every replaced word
    correction_log_file: Path | None = None
    # Stop scanning at the first candidate within this distance
    early_exit_distance: int = Field(default=1, ge=0)
    # Report every malformed line instead of only the first
    collect_errors: bool = False

    def with_overrides(self, **overrides: object) -> "RunConfig":
        """Return a copy with all non-None overrides applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return self.model_validate({**self.model_dump(), **updates})


def load_run_config(path: Path | str) -> RunConfig:
    """Load run configuration from a JSON file.

    Args:
        path: Path to the config file

    Returns:
        RunConfig with the file's settings

    Raises:
        ConfigurationError: If the file is missing or its content is invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
        return RunConfig(**data)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e
    except (TypeError, ValidationError) as e:
        raise ConfigurationError(f"Invalid config in {config_path}: {e}") from e

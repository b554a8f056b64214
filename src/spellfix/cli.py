"""Command-line interface for spellfix.

Uses Typer for a type-hinted CLI and Rich for console output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spellfix import __version__
from spellfix.config import DEFAULT_VOCABULARY_FILE, RunConfig, load_run_config
from spellfix.errors import SpellfixError, format_error_for_display
from spellfix.logging import LogLevel, enable_file_logging, set_verbosity
from spellfix.runner import run_correction
from spellfix.vocabulary.correction import WordCorrector
from spellfix.vocabulary.terms import Vocabulary

app = typer.Typer(
    name="spellfix",
    help="Correct misspelled words in tagged word entries against a vocabulary.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"spellfix version {__version__}")
        raise typer.Exit()


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(format_error_for_display(error))}")
    raise typer.Exit(1)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log progress details to stderr.")
    ] = False,
    log_file: Annotated[
        Optional[Path], typer.Option("--log-file", help="Also write a debug log to this file.")
    ] = None,
) -> None:
    """Spellfix - vocabulary-driven spelling correction.

    Entries look like [bold]0001 word/word word[/bold]: a 4-digit id followed by
    words separated by spaces or slashes. Unknown words are replaced by the
    closest vocabulary word; ids and separators are kept as they are.
    """
    if verbose:
        set_verbosity(LogLevel.VERBOSE)
    if log_file is not None:
        enable_file_logging(log_file)


@app.command()
def correct(
    words: Annotated[
        Optional[Path], typer.Option("--words", "-w", help="Entry file to correct.")
    ] = None,
    vocabulary: Annotated[
        Optional[Path], typer.Option("--vocabulary", "-d", help="Vocabulary file, one word per line.")
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Where to write corrected entries.")
    ] = None,
    config_file: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="JSON run configuration.")
    ] = None,
    correction_log: Annotated[
        Optional[Path],
        typer.Option("--correction-log", help="Write a JSON report of every replaced word."),
    ] = None,
    collect_errors: Annotated[
        Optional[bool],
        typer.Option(
            "--collect-errors/--fail-fast",
            help="Report every malformed line instead of stopping at the first.",
        ),
    ] = None,
) -> None:
    """Correct an entry file and write the result.

    Paths default to [bold]problem/words.txt[/bold], [bold]problem/vocabulary.txt[/bold]
    and [bold]problem/correction_words.txt[/bold]. Command-line options override
    values from --config.
    """
    try:
        config = load_run_config(config_file) if config_file else RunConfig()
        config = config.with_overrides(
            words_file=words,
            vocabulary_file=vocabulary,
            output_file=output,
            correction_log_file=correction_log,
            collect_errors=collect_errors,
        )
        result = run_correction(config, reporter=lambda message: console.print(escape(message)))
    except SpellfixError as e:
        _fail(e)

    console.print(
        f"[green]Done.[/green] {result.corrected_word_count} word(s) corrected "
        f"in {result.entry_count} entries."
    )


@app.command()
def check(
    words: Annotated[list[str], typer.Argument(help="Words to look up.")],
    vocabulary: Annotated[
        Path, typer.Option("--vocabulary", "-d", help="Vocabulary file, one word per line.")
    ] = DEFAULT_VOCABULARY_FILE,
) -> None:
    """Show the correction for individual words."""
    try:
        corrector = WordCorrector(Vocabulary.from_file(vocabulary))
    except SpellfixError as e:
        _fail(e)

    table = Table(title=f"Corrections ({len(corrector.vocabulary)} vocabulary words)")
    table.add_column("Word")
    table.add_column("Correction")
    table.add_column("Distance", justify="right")

    for word in words:
        replacement, distance = corrector.find_nearest(word)
        style = "green" if distance == 0 else "yellow"
        table.add_row(escape(word), f"[{style}]{escape(replacement)}[/{style}]", str(distance))

    console.print(table)


if __name__ == "__main__":
    app()

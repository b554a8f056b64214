"""Entry file handling.

Tokenizes word content into words and separators, parses identifier-tagged
lines into entries, and renders entries back to text.
"""

from spellfix.entries.tokens import Separator, Token, Word, render_tokens, tokenize
from spellfix.entries.parser import (
    Entry,
    parse_content,
    parse_line,
    render_entries,
    render_entry,
)

__all__ = [
    "Token",
    "Word",
    "Separator",
    "tokenize",
    "render_tokens",
    "Entry",
    "parse_line",
    "parse_content",
    "render_entry",
    "render_entries",
]

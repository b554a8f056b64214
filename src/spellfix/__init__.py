"""Spellfix - vocabulary-driven spelling correction for tagged word entries.

Reads entries of the form ``DDDD word/word word``, replaces every word not in
a reference vocabulary with its nearest vocabulary word by edit distance, and
writes the entries back with their separators untouched.
"""

__version__ = "0.1.0"

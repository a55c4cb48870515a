"""Corpus clean-up applied before indexing."""

from __future__ import annotations

import re

# Line breaks inside poems and wrapped prose are joined with a space.
_LINE_BREAK = re.compile(r"\n")

# Editorial annotations such as page numbers, quote marks and parentheses.
_SANITIZER = re.compile(r"\[.+?\]|\"|\)|\(|'|\n|\r|“|”|’|_")

_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Return ``text`` cleaned up for indexing.

    Line breaks become spaces, bracketed annotations and quotation or
    parenthesis marks are removed and whitespace runs collapse to a single
    space. The result is trimmed. ``normalize`` is idempotent.
    """
    text = _LINE_BREAK.sub(" ", text)
    text = _SANITIZER.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()

"""Word splitting over a normalized corpus."""

from __future__ import annotations

from typing import Iterator

from .spans import Span

SENTENCE_TERMINATORS = frozenset(".?!")
WORD_SEPARATOR = " "


def iter_word_spans(corpus: str) -> Iterator[Span]:
    """Yield the span of every word in ``corpus``.

    Words are separated by single spaces. Empty and whitespace-only tokens
    are skipped, so the function also tolerates text that was not normalized.
    """
    position = 0
    length = len(corpus)
    while position <= length:
        end = corpus.find(WORD_SEPARATOR, position)
        if end == -1:
            end = length
        if end > position and not corpus[position:end].isspace():
            yield Span(position, end)
        position = end + 1


def ends_sentence(corpus: str, word: Span) -> bool:
    """Return True when the word's last character terminates a sentence."""
    return word.length > 0 and corpus[word.end - 1] in SENTENCE_TERMINATORS

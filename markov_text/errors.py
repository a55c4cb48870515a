"""Typed failures raised while building or walking a chain."""

from __future__ import annotations

_EXCERPT_LENGTH = 80


class MarkovTextError(Exception):
    """Base class for every error raised by Markov Text."""


class InsufficientCorpusError(MarkovTextError, ValueError):
    """The corpus holds no sentence with at least ``order`` words."""

    def __init__(self, order: int, corpus: str) -> None:
        self.order = order
        self.corpus_length = len(corpus)
        self.excerpt = corpus[:_EXCERPT_LENGTH]
        suffix = "..." if self.corpus_length > _EXCERPT_LENGTH else ""
        super().__init__(
            f"No phrases of order {order} could be generated from the corpus "
            f"({self.corpus_length} characters): {self.excerpt!r}{suffix}"
        )


class NotBuiltError(MarkovTextError, RuntimeError):
    """Generation was requested from a model without starter states."""


class SentenceOverflowError(MarkovTextError, RuntimeError):
    """A generated sentence hit the word-count ceiling."""

    def __init__(self, word_count: int, partial: str) -> None:
        self.word_count = word_count
        self.partial = partial
        super().__init__(f"Word limit {word_count} reached for sentence:\n{partial}")

"""Content-based interning of word sequences."""

from __future__ import annotations

from typing import Dict, List

from .hashing import stable_hash
from .spans import Span


class SequenceInterner:
    """Map equal-text spans of one corpus to a single canonical span.

    Spans are bucketed by a stable hash of the text they cover. Within a bucket
    the text is compared ordinally, so hash collisions never merge different
    sequences. The corpus itself is never modified.
    """

    def __init__(self, corpus: str) -> None:
        self._corpus = corpus
        self._buckets: Dict[int, List[Span]] = {}
        self._size = 0

    def __len__(self) -> int:
        """Number of canonical spans seen so far."""
        return self._size

    def intern(self, span: Span) -> Span:
        """Return the canonical span whose text equals ``span``'s text."""
        corpus = self._corpus
        key = stable_hash(corpus, span.start, span.end)
        bucket = self._buckets.get(key)
        if bucket is None:
            self._buckets[key] = [span]
            self._size += 1
            return span

        text = span.text(corpus)
        for existing in bucket:
            if existing.length == span.length and existing.text(corpus) == text:
                return existing

        bucket.append(span)
        self._size += 1
        return span

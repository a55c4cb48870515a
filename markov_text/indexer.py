"""Sliding-window indexing of a corpus into chain tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Hashable, List, Sequence, TypeVar

from .errors import InsufficientCorpusError
from .spans import RingBuffer, Span
from .tokenizer import ends_sentence, iter_word_spans

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)

StateFactory = Callable[[Sequence[Span]], S]


@dataclass
class ChainIndex(Generic[S]):
    """Tables produced by :class:`CorpusIndexer`.

    Attributes:
        starters: States that open a sentence, in corpus order. A state that
            opens several sentences appears once per occurrence.
        transitions: Successor states per state, in corpus order and with
            repeats, so frequent transitions are drawn more often.
        last_words: Span of the final word of each state's first occurrence.
        word_count: Number of words read from the corpus.
    """

    starters: List[S] = field(default_factory=list)
    transitions: Dict[S, List[S]] = field(default_factory=dict)
    last_words: Dict[S, Span] = field(default_factory=dict)
    word_count: int = 0

    @property
    def transition_count(self) -> int:
        return sum(len(successors) for successors in self.transitions.values())


class CorpusIndexer:
    """Build starter and transition tables for a fixed chain order.

    The indexer reads words one by one into a ring buffer of ``order`` spans.
    Once the buffer is full every new word forms a state, which
    ``state_factory`` turns into a table key. Transitions never cross a
    sentence boundary: a word ending in ``.``, ``?`` or ``!`` clears the
    previous state and the window must fill up again.
    """

    def __init__(self, order: int) -> None:
        if order < 1:
            raise ValueError("order must be a positive integer")
        self.order = order

    def index(self, corpus: str, state_factory: StateFactory) -> ChainIndex:
        """Index ``corpus``.

        Args:
            corpus: Normalized text.
            state_factory: Turns a window of word spans, oldest first, into
                the key used for that state.

        Raises:
            InsufficientCorpusError: No sentence has at least ``order`` words.
        """
        order = self.order
        result: ChainIndex = ChainIndex()
        window: RingBuffer[Span] = RingBuffer(order)
        filled = 0
        previous = None

        for word in iter_word_spans(corpus):
            result.word_count += 1
            window[filled] = word
            filled += 1

            if filled >= order:
                state = state_factory(window.snapshot(filled))
                if previous is None:
                    result.starters.append(state)
                else:
                    result.transitions.setdefault(previous, []).append(state)
                result.last_words.setdefault(state, word)
                previous = state

            if ends_sentence(corpus, word):
                previous = None
                filled = 0

        if not result.starters:
            raise InsufficientCorpusError(order, corpus)

        logger.debug(
            "Indexed %d words at order %d: %d starters, %d states, %d transitions",
            result.word_count,
            order,
            len(result.starters),
            len(result.last_words),
            result.transition_count,
        )
        return result

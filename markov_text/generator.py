"""Random walk over a chain model."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from .errors import NotBuiltError, SentenceOverflowError
from .model import ChainModel
from .random_source import RandomSource

logger = logging.getLogger(__name__)


class SentenceGenerator:
    """Produce one sentence per call by walking a :class:`ChainModel`.

    The walk starts at a starter state drawn uniformly at random and follows
    successors until a state has none. Every step after the starter emits
    only the newly revealed last word. The generator keeps no state between
    calls, so one instance can serve several threads as long as each thread
    supplies its own random source.
    """

    def __init__(self, model: ChainModel, *, max_word_count: Optional[int] = None) -> None:
        self.model = model
        self.max_word_count = max_word_count or model.config.max_word_count

    def generate(self, random: RandomSource) -> str:
        """Generate a single sentence.

        Raises:
            NotBuiltError: The model has no starter states.
            SentenceOverflowError: The sentence reached ``max_word_count``.
        """
        model = self.model
        starters = model.starters
        if not starters:
            raise NotBuiltError(
                "There is no Markov model. Build one from a corpus before generating."
            )

        state = starters[random.next(len(starters))]
        pieces: List[str] = [model.state_text(state)]
        word_count = model.order

        while True:
            successors = model.successors(state)
            if not successors:
                break
            word_count += 1
            if word_count >= self.max_word_count:
                raise SentenceOverflowError(word_count, " ".join(pieces))
            state = successors[random.next(len(successors))]
            pieces.append(model.last_word(state))

        logger.debug("Generated sentence with %d words", word_count)
        return " ".join(pieces)

    def generate_many(self, count: int, random: RandomSource) -> Iterator[str]:
        """Yield ``count`` sentences drawn from the same random source."""
        for _ in range(count):
            yield self.generate(random)

"""Chain models built from a corpus.

Three interchangeable representations share one contract: they are built
from raw text and a :class:`ChainConfig`, and they expose starter states,
successor lists and the text to emit for a state. A
:class:`~markov_text.generator.SentenceGenerator` walks any of them and
produces identical sentences for identical random draws.
"""

from __future__ import annotations

import abc
from types import MappingProxyType
from typing import Dict, Hashable, Mapping, Optional, Sequence, Tuple, Type

from .config import ChainConfig
from .indexer import ChainIndex, CorpusIndexer, StateFactory
from .interner import SequenceInterner
from .normalizer import normalize
from .spans import Span


class ChainModel(abc.ABC):
    """Read-only Markov chain over word states.

    A model is immutable once constructed and can be shared between threads
    for generation. Rebuild it to change the corpus or the order.
    """

    name = "abstract"

    def __init__(self, corpus: str, config: ChainConfig, index: ChainIndex) -> None:
        self._corpus = corpus
        self._config = config
        self._starters: Tuple[Hashable, ...] = tuple(index.starters)
        self._transitions: Mapping[Hashable, Tuple[Hashable, ...]] = MappingProxyType(
            {state: tuple(successors) for state, successors in index.transitions.items()}
        )
        self._word_count = index.word_count

    @classmethod
    def build(cls, corpus: str, config: Optional[ChainConfig] = None) -> "ChainModel":
        """Normalize and index ``corpus`` into a new model."""
        config = config or ChainConfig()
        config.validate()
        text = normalize(corpus)
        index = CorpusIndexer(config.order).index(text, cls._state_factory(text))
        return cls(text, config, index)

    @classmethod
    @abc.abstractmethod
    def _state_factory(cls, corpus: str) -> StateFactory:
        """Return the callable that keys a window of word spans."""

    @abc.abstractmethod
    def state_text(self, state: Hashable) -> str:
        """Full text of ``state``."""

    @abc.abstractmethod
    def last_word(self, state: Hashable) -> str:
        """Text of the final word of ``state``."""

    @property
    def corpus(self) -> str:
        return self._corpus

    @property
    def config(self) -> ChainConfig:
        return self._config

    @property
    def order(self) -> int:
        return self._config.order

    @property
    def starters(self) -> Tuple[Hashable, ...]:
        return self._starters

    @property
    def transitions(self) -> Mapping[Hashable, Tuple[Hashable, ...]]:
        return self._transitions

    @property
    def word_count(self) -> int:
        return self._word_count

    def successors(self, state: Hashable) -> Optional[Tuple[Hashable, ...]]:
        return self._transitions.get(state)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(order={self.order}, starters={len(self._starters)}, "
            f"states_with_successors={len(self._transitions)})"
        )


class SpanChainModel(ChainModel):
    """Zero-copy model whose states are interned spans of the owned corpus."""

    name = "span"

    def __init__(self, corpus: str, config: ChainConfig, index: ChainIndex) -> None:
        super().__init__(corpus, config, index)
        self._last_words: Mapping[Span, Span] = MappingProxyType(dict(index.last_words))

    @classmethod
    def _state_factory(cls, corpus: str) -> StateFactory:
        interner = SequenceInterner(corpus)

        def make_state(window: Sequence[Span]) -> Span:
            return interner.intern(Span(window[0].start, window[-1].end))

        return make_state

    def state_text(self, state: Span) -> str:
        return state.text(self._corpus)

    def last_word(self, state: Span) -> str:
        return self._last_words[state].text(self._corpus)


class StringChainModel(ChainModel):
    """Model keyed by copies of each state's text."""

    name = "string"

    def __init__(self, corpus: str, config: ChainConfig, index: ChainIndex) -> None:
        super().__init__(corpus, config, index)
        self._last_words: Mapping[str, str] = MappingProxyType(
            {state: span.text(corpus) for state, span in index.last_words.items()}
        )

    @classmethod
    def _state_factory(cls, corpus: str) -> StateFactory:
        def make_state(window: Sequence[Span]) -> str:
            return corpus[window[0].start : window[-1].end]

        return make_state

    def state_text(self, state: str) -> str:
        return state

    def last_word(self, state: str) -> str:
        return self._last_words[state]


class ArrayChainModel(ChainModel):
    """Model keyed by tuples of copied words."""

    name = "array"

    @classmethod
    def _state_factory(cls, corpus: str) -> StateFactory:
        def make_state(window: Sequence[Span]) -> Tuple[str, ...]:
            return tuple(span.text(corpus) for span in window)

        return make_state

    def state_text(self, state: Tuple[str, ...]) -> str:
        return " ".join(state)

    def last_word(self, state: Tuple[str, ...]) -> str:
        return state[-1]


REPRESENTATIONS: Dict[str, Type[ChainModel]] = {
    SpanChainModel.name: SpanChainModel,
    StringChainModel.name: StringChainModel,
    ArrayChainModel.name: ArrayChainModel,
}


def get_model_class(representation: str) -> Type[ChainModel]:
    """Look up a model class by its representation name."""
    try:
        return REPRESENTATIONS[representation]
    except KeyError:
        choices = ", ".join(sorted(REPRESENTATIONS))
        raise ValueError(
            f"Unknown representation {representation!r}; expected one of: {choices}"
        ) from None

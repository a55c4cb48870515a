"""High-level build and generate helpers."""

from __future__ import annotations

from typing import Iterator, Optional

from .config import ChainConfig
from .generator import SentenceGenerator
from .model import ChainModel, get_model_class
from .random_source import RandomSource, from_seed, random_seed_text


def build(
    corpus: str,
    order: int = 2,
    *,
    representation: str = "span",
    max_word_count: int = 1000,
    config: Optional[ChainConfig] = None,
) -> ChainModel:
    """Build a chain model from raw corpus text.

    Args:
        corpus: Raw text; it is normalized before indexing.
        order: Number of words per state. Ignored when ``config`` is given.
        representation: ``"span"``, ``"string"`` or ``"array"``.
        max_word_count: Sentence length ceiling. Ignored when ``config`` is given.
        config: Explicit configuration overriding ``order`` and ``max_word_count``.

    Raises:
        InsufficientCorpusError: No sentence has at least ``order`` words.
        ValueError: Invalid configuration or unknown representation.
    """
    model_cls = get_model_class(representation)
    if config is None:
        config = ChainConfig(order=order, max_word_count=max_word_count)
    return model_cls.build(corpus, config)


def _resolve_random(random: Optional[RandomSource], seed: Optional[str]) -> RandomSource:
    if random is not None and seed is not None:
        raise ValueError("Pass either a random source or a seed, not both")
    if random is not None:
        return random
    return from_seed(seed if seed is not None else random_seed_text())


def generate(
    model: ChainModel,
    random: Optional[RandomSource] = None,
    *,
    seed: Optional[str] = None,
) -> str:
    """Generate one sentence from ``model``.

    The draws come from ``random`` when given, otherwise from a source derived
    from ``seed``, otherwise from a fresh random seed.
    """
    return SentenceGenerator(model).generate(_resolve_random(random, seed))


def generate_many(
    model: ChainModel,
    count: int,
    random: Optional[RandomSource] = None,
    *,
    seed: Optional[str] = None,
) -> Iterator[str]:
    """Yield ``count`` sentences drawn from one random source."""
    source = _resolve_random(random, seed)
    return SentenceGenerator(model).generate_many(count, source)

"""Markov Text package.

This package exposes the components required to index a text corpus into a
word-level Markov chain and to generate new sentences from it.
"""

from .chain import build, generate, generate_many
from .config import ChainConfig
from .data import load_corpus
from .errors import (
    InsufficientCorpusError,
    MarkovTextError,
    NotBuiltError,
    SentenceOverflowError,
)
from .generator import SentenceGenerator
from .model import (
    REPRESENTATIONS,
    ArrayChainModel,
    ChainModel,
    SpanChainModel,
    StringChainModel,
)
from .normalizer import normalize
from .random_source import FixedRandom, RandomSource, SequenceRandom, TorchRandom, from_seed

__all__ = [
    "build",
    "generate",
    "generate_many",
    "ChainConfig",
    "load_corpus",
    "InsufficientCorpusError",
    "MarkovTextError",
    "NotBuiltError",
    "SentenceOverflowError",
    "SentenceGenerator",
    "REPRESENTATIONS",
    "ArrayChainModel",
    "ChainModel",
    "SpanChainModel",
    "StringChainModel",
    "normalize",
    "FixedRandom",
    "RandomSource",
    "SequenceRandom",
    "TorchRandom",
    "from_seed",
]

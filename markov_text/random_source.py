"""Random number sources used to drive generation."""

from __future__ import annotations

import itertools
import uuid
from typing import Iterable, Protocol

import torch

from .hashing import stable_hash


class RandomSource(Protocol):
    """Anything that can draw an integer in ``[0, upper)``."""

    def next(self, upper: int) -> int:
        ...


def _check_bound(upper: int) -> None:
    if upper <= 0:
        raise ValueError("upper bound must be positive")


class TorchRandom:
    """Seeded source backed by a private :class:`torch.Generator`.

    Instances never share state, so concurrent generation needs one
    instance per thread.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._generator = torch.Generator()
        self._generator.manual_seed(seed)

    def next(self, upper: int) -> int:
        _check_bound(upper)
        return int(torch.randint(upper, (1,), generator=self._generator).item())


class FixedRandom:
    """Return the same value, reduced modulo the bound, on every draw."""

    def __init__(self, value: int) -> None:
        self.value = value

    def next(self, upper: int) -> int:
        _check_bound(upper)
        return self.value % upper


class SequenceRandom:
    """Replay a fixed list of draws, cycling once it is exhausted."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        if not values:
            raise ValueError("values must not be empty")
        self._values = itertools.cycle(values)

    def next(self, upper: int) -> int:
        _check_bound(upper)
        return next(self._values) % upper


def from_seed(seed: str) -> TorchRandom:
    """Map a textual seed to a reproducible :class:`TorchRandom`."""
    return TorchRandom(stable_hash(seed) & 0xFFFFFFFF)


def random_seed_text() -> str:
    """Return a short fresh seed that can be printed and replayed."""
    return uuid.uuid4().hex[:8]

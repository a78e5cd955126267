"""Unbiased mapping of raw engine words onto integer ranges.

Reducing a 32-bit word with ``x % r`` favours low values whenever ``r`` does
not divide 2**32. Instead the raw range is cut into ``r`` equal buckets of
``2**32 // r`` words each; draws that land in the leftover tail are rejected
and redrawn. Ranges wider than one word combine several words first.

A degenerate range (``min == max``) returns ``min`` without touching the
engine, so it costs zero engine calls.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Protocol, TypeVar

from seedonce import config
from seedonce.errors import InvalidRange
from seedonce.types import Word

T = TypeVar("T")


class WordSource(Protocol):
    """Anything that returns one raw 32-bit word per ``next()`` call."""

    def next(self) -> Word: ...


class UniformIntDistribution:
    """Uniform integers over the closed interval ``[min, max]``.

    Holds only its bounds. The engine is passed to each ``sample()`` call, so
    one distribution can be shared by any number of engines.
    """

    __slots__ = ("_low", "_high", "_span", "_words", "_scaling", "_limit")

    def __init__(self, low: int, high: int) -> None:
        if low > high:
            raise InvalidRange(low, high)
        self._low = low
        self._high = high
        self._span = high - low + 1

        # Smallest number of engine words whose combined range covers the span
        words = 1
        while (1 << (config.WORD_BITS * words)) < self._span:
            words += 1
        self._words = words
        raw_range = 1 << (config.WORD_BITS * words)
        self._scaling = raw_range // self._span
        self._limit = self._span * self._scaling

    @property
    def min(self) -> int:
        return self._low

    @property
    def max(self) -> int:
        return self._high

    def sample(self, engine: WordSource) -> int:
        """Draw one value in ``[min, max]`` using ``engine``."""
        if self._span == 1:
            return self._low
        while True:
            x = engine.next()
            for _ in range(self._words - 1):
                x = (x << config.WORD_BITS) | engine.next()
            if x < self._limit:
                return self._low + x // self._scaling

    def __repr__(self) -> str:
        return f"UniformIntDistribution({self._low}, {self._high})"


def sample(engine: WordSource, low: int, high: int) -> int:
    """Draw one uniformly distributed integer in ``[low, high]``.

    Raises:
        InvalidRange: If ``low > high``.
    """
    return UniformIntDistribution(low, high).sample(engine)


def shuffle(engine: WordSource, items: MutableSequence) -> None:
    """Shuffle ``items`` in place (Fisher-Yates)."""
    for i in range(len(items) - 1, 0, -1):
        j = sample(engine, 0, i)
        items[i], items[j] = items[j], items[i]


def choice(engine: WordSource, seq: Sequence[T]) -> T:
    """Return one element of a non-empty sequence."""
    if not seq:
        raise IndexError("Cannot choose from an empty sequence")
    return seq[sample(engine, 0, len(seq) - 1)]

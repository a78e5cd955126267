"""MT19937 engine seeded from SeedMaterial.

The twist and tempering steps come from numpy's ``MT19937`` bit generator.
This module only decides how state is loaded and what the public surface is:

- An Engine is seeded exactly once, in its constructor. There is no reseed
  method; a differently seeded stream means a new Engine.
- ``next()`` is the only mutator. Two engines built from the same
  SeedMaterial return identical sequences.
- No warm-up is performed internally. Callers that want one use
  ``discard()``.

State loading follows ``std::mt19937::seed(seed_seq&)``, so
``Engine(SeedMaterial((a, b, c)))`` produces the same stream as
``std::mt19937{std::seed_seq{a, b, c}}``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from seedonce import config
from seedonce.seeding import SeedMaterial, SeedSequence
from seedonce.types import Word

_UPPER_MASK = 0x80000000


class Engine:
    """A 624-word Mersenne Twister producing 32-bit words."""

    min: Word = 0
    max: Word = config.WORD_MASK

    def __init__(self, seed: SeedMaterial) -> None:
        key = SeedSequence(seed).generate(config.STATE_WORDS)
        # An all-zero state would only ever output zeros.
        if not (key[0] & _UPPER_MASK) and not any(key[1:]):
            key[0] = _UPPER_MASK
        self._bitgen = _load_state(key)
        self.draws = 0

    @classmethod
    def from_state(cls, words: Sequence[int]) -> Engine:
        """Build an engine whose state words are exactly ``words``.

        The first output is produced after a full twist, as with a freshly
        seeded engine. Mainly useful for checking against published MT19937
        output vectors.
        """
        if len(words) != config.STATE_WORDS:
            raise ValueError(
                f"Expected {config.STATE_WORDS} state words, got {len(words)}"
            )
        engine = cls.__new__(cls)
        engine._bitgen = _load_state([int(w) & config.WORD_MASK for w in words])
        engine.draws = 0
        return engine

    def next(self) -> Word:
        """Advance the state and return the next 32-bit word."""
        self.draws += 1
        return int(self._bitgen.random_raw())

    def __call__(self) -> Word:
        return self.next()

    def discard(self, count: int) -> None:
        """Advance the engine ``count`` steps without returning the outputs."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count:
            self._bitgen.random_raw(count, output=False)
            self.draws += count

    def __repr__(self) -> str:
        return f"Engine(draws={self.draws})"


def _load_state(key: list[int]) -> np.random.MT19937:
    bitgen = np.random.MT19937(0)
    bitgen.state = {
        "bit_generator": "MT19937",
        "state": {"key": np.array(key, dtype=np.uint32), "pos": config.STATE_WORDS},
    }
    return bitgen


def seeded_engine(seed: SeedMaterial) -> Engine:
    """Return an independent Engine seeded from ``seed``.

    Use this for deterministic tests and for code that wants its own stream
    instead of the process-wide generator.
    """
    return Engine(seed)

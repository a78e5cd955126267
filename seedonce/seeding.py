"""Seed material and the expansion that spreads it across engine state.

A large-state engine seeded from a single 32-bit value can only ever reach
2**32 of its possible starting states, and some early outputs become
impossible. The functions here take a short list of entropy words plus a
clock reading and expand them to a full state's worth of words so that every
output word depends on every input bit.

The expansion is the ``std::seed_seq::generate`` algorithm from the C++
standard. Using a published construction keeps seeded streams comparable with
``std::mt19937(std::seed_seq{...})`` elsewhere.

Usage:
    material = build_seed_material(EntropySource().collect(7), read_clock())
    engine = Engine(material)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from seedonce import config
from seedonce.types import Word

_MASK = config.WORD_MASK

# Multipliers and fill pattern fixed by the seed_seq definition.
_INIT_FILL = 0x8B8B8B8B
_MIX_MULT = 1664525
_FINAL_MULT = 1566083941


def _to_word(value: int) -> Word:
    if not isinstance(value, int):
        raise TypeError(f"Seed words must be integers, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Seed words must be non-negative, got {value}")
    return value & _MASK


def _t(x: int) -> int:
    return x ^ (x >> 27)


def int_to_words(value: int) -> list[Word]:
    """Split a non-negative integer into 32-bit words, low word first.

    ``0`` becomes ``[0]`` so every integer seed yields at least one word.
    """
    if value < 0:
        raise ValueError(f"Seed must be non-negative, got {value}")
    words = []
    while True:
        words.append(value & _MASK)
        value >>= config.WORD_BITS
        if not value:
            return words


@dataclass(frozen=True, slots=True)
class SeedMaterial:
    """An ordered, non-empty sequence of 32-bit words used to seed an Engine.

    Words are reduced modulo 2**32 on construction. Quality improves with
    length up to ``config.STATE_WORDS``.
    """

    words: tuple[Word, ...]

    def __post_init__(self) -> None:
        if not self.words:
            raise ValueError("SeedMaterial needs at least one word")
        object.__setattr__(self, "words", tuple(_to_word(w) for w in self.words))

    @classmethod
    def from_words(cls, words: Iterable[int]) -> SeedMaterial:
        return cls(tuple(words))

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)


class SeedSequence:
    """Expands a short word sequence into any number of well-mixed words.

    ``generate()`` is a pure function of the input words: the same input
    always produces the same output, and inputs differing in one bit produce
    unrelated outputs.
    """

    def __init__(self, words: Iterable[int]) -> None:
        self._words = tuple(_to_word(w) for w in words)

    @property
    def size(self) -> int:
        return len(self._words)

    def generate(self, n: int) -> list[Word]:
        """Return ``n`` words derived from the input sequence."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        if n == 0:
            return []

        v = self._words
        s = len(v)
        b = [_INIT_FILL] * n

        if n >= 623:
            t = 11
        elif n >= 68:
            t = 7
        elif n >= 39:
            t = 5
        elif n >= 7:
            t = 3
        else:
            t = (n - 1) // 2
        p = (n - t) // 2
        q = p + t
        m = max(s + 1, n)

        # First pass folds the input words in
        for k in range(m):
            kn, kp, kq = k % n, (k + p) % n, (k + q) % n
            r1 = (_MIX_MULT * _t(b[kn] ^ b[kp] ^ b[(k - 1) % n])) & _MASK
            if k == 0:
                r2 = r1 + s
            elif k <= s:
                r2 = r1 + kn + v[k - 1]
            else:
                r2 = r1 + kn
            r2 &= _MASK
            b[kp] = (b[kp] + r1) & _MASK
            b[kq] = (b[kq] + r2) & _MASK
            b[kn] = r2

        # Second pass diffuses the whole buffer
        for k in range(m, m + n):
            kn, kp, kq = k % n, (k + p) % n, (k + q) % n
            r3 = (_FINAL_MULT * _t((b[kn] + b[kp] + b[(k - 1) % n]) & _MASK)) & _MASK
            r4 = (r3 - kn) & _MASK
            b[kp] ^= r3
            b[kq] ^= r4
            b[kn] = r4

        return b


def build_seed_material(
    entropy_values: Iterable[int], clock_ticks: int
) -> SeedMaterial:
    """Combine entropy words and a clock reading into state-sized seed material.

    The low 32 bits of ``clock_ticks`` come first, followed by the entropy
    words, and the result is expanded to ``config.STATE_WORDS`` words. The
    output length does not depend on how many entropy words are given.

    Args:
        entropy_values: Words from an EntropySource (or explicit seeds).
        clock_ticks: A clock reading; only the low 32 bits are used.

    Returns:
        SeedMaterial with exactly ``config.STATE_WORDS`` words.
    """
    inputs = [clock_ticks & _MASK, *entropy_values]
    return SeedMaterial(tuple(SeedSequence(inputs).generate(config.STATE_WORDS)))

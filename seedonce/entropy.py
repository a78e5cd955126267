"""Access to the operating system's randomness device.

The OS device is the only non-deterministic input to the package. It may be
slow or rate-limited, so it is read a handful of times per process (once per
seeding event) and never on the hot path.
"""

from __future__ import annotations

import logging
import os
import time

from seedonce import config
from seedonce.errors import EntropyUnavailable
from seedonce.types import ClockTicks, Word

logger = logging.getLogger(__name__)


class EntropySource:
    """Produces hard-to-predict 32-bit words from ``os.urandom``.

    There is no retry: a failed read raises ``EntropyUnavailable`` and the
    caller decides how to degrade.
    """

    def __init__(self, word_bytes: int = config.ENTROPY_WORD_BYTES) -> None:
        self._word_bytes = word_bytes
        self.reads = 0

    def next(self) -> Word:
        """Return one entropy word.

        Raises:
            EntropyUnavailable: If the OS has no randomness source.
        """
        try:
            raw = os.urandom(self._word_bytes)
        except (NotImplementedError, OSError) as e:
            raise EntropyUnavailable(f"OS randomness source unavailable: {e}") from e
        self.reads += 1
        return int.from_bytes(raw, "little") & config.WORD_MASK

    def collect(self, count: int) -> list[Word]:
        """Return ``count`` entropy words.

        Raises:
            EntropyUnavailable: If any read fails.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        words = [self.next() for _ in range(count)]
        logger.debug("Collected %d entropy words", len(words))
        return words


def read_clock() -> ClockTicks:
    """Return the wall clock in nanoseconds."""
    return ClockTicks(time.time_ns())

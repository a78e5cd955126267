"""Thread-safe generator handles and the process-wide generator.

Most callers only need the module-level functions:

    from seedonce import generator

    gold = generator.get(80, 120)
    generator.shuffle(deck)

The process-wide generator is created on first use, exactly once, even when
the first calls race in from several threads. It is seeded from the OS
randomness device plus the clock and is never reseeded or replaced. There is
no public reset.

Code that wants a reproducible stream, or that should not depend on ambient
state, takes a ``Generator`` argument instead:

    def deal(deck: list[Card], rng: Generator) -> Card:
        rng.shuffle(deck)
        return deck[0]

    deal(deck, Generator.from_seed(42))
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass
from typing import TypeAlias, TypeVar

from seedonce import config, distribution
from seedonce.distribution import UniformIntDistribution
from seedonce.engine import Engine
from seedonce.entropy import EntropySource, read_clock
from seedonce.errors import EntropyUnavailable
from seedonce.seeding import SeedMaterial, build_seed_material, int_to_words
from seedonce.types import SeedSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SeedEvent:
    """Emitted once when the process-wide generator is seeded."""

    source: SeedSource
    clock_ticks: int
    entropy_words: int


SeedListener: TypeAlias = Callable[[SeedEvent], None]


class Generator:
    """An Engine plus the lock that serializes access to it.

    Every draw advances the engine under the lock, so one Generator can be
    shared freely between threads.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._lock = threading.Lock()

    @classmethod
    def from_seed(cls, seed: SeedMaterial | int) -> Generator:
        """Build a deterministic Generator.

        Args:
            seed: Explicit SeedMaterial, or a non-negative integer which is
                split into words and expanded with a zero clock reading.
        """
        if isinstance(seed, int):
            seed = build_seed_material(int_to_words(seed), 0)
        return cls(Engine(seed))

    @property
    def draws(self) -> int:
        """Number of raw engine words consumed so far."""
        return self._engine.draws

    def get(self, low: int, high: int) -> int:
        """Return a uniformly distributed integer N such that low <= N <= high.

        Raises:
            InvalidRange: If ``low > high``.
        """
        dist = UniformIntDistribution(low, high)
        with self._lock:
            return dist.sample(self._engine)

    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle ``items`` in place."""
        with self._lock:
            distribution.shuffle(self._engine, items)

    def choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        with self._lock:
            return distribution.choice(self._engine, seq)


# =============================================================================
# Process-wide generator
# =============================================================================

_generator: Generator | None = None
_init_lock = threading.Lock()
_seed_listeners: list[SeedListener] = []


def add_seed_listener(listener: SeedListener) -> None:
    """Call ``listener`` with a SeedEvent when the global generator is seeded."""
    _seed_listeners.append(listener)


def remove_seed_listener(listener: SeedListener) -> None:
    """Stop notifying ``listener``. Unknown listeners are ignored."""
    if listener in _seed_listeners:
        _seed_listeners.remove(listener)


def is_initialized() -> bool:
    """Return True once the process-wide generator has been seeded."""
    return _generator is not None


def _collect_seed() -> tuple[SeedMaterial, SeedEvent]:
    """Gather seed input for the global generator.

    Falls back to a clock-only seed when the OS has no randomness source. A
    generator that is less random is better than one that cannot produce a
    value at all.
    """
    if config.RANDOM_SEED is not None:
        words = int_to_words(config.RANDOM_SEED)
        logger.info("Seeding global generator from config.RANDOM_SEED")
        return build_seed_material(words, 0), SeedEvent("config", 0, len(words))

    clock = read_clock()
    try:
        entropy = EntropySource().collect(config.ENTROPY_WORDS)
    except EntropyUnavailable as e:
        logger.warning(f"{e}; seeding global generator from the clock only")
        # High clock bits stand in for entropy. Time-only seeds are guessable.
        high_words = int_to_words(clock >> config.WORD_BITS)
        return build_seed_material(high_words, clock), SeedEvent("clock", clock, 0)

    logger.info(f"Seeding global generator from {len(entropy)} entropy words")
    return build_seed_material(entropy, clock), SeedEvent(
        "entropy", clock, len(entropy)
    )


def global_generator() -> Generator:
    """Return the process-wide Generator, creating it on first use."""
    global _generator
    generator = _generator
    if generator is not None:
        return generator

    with _init_lock:
        if _generator is None:
            material, event = _collect_seed()
            engine = Engine(material)
            engine.discard(config.WARMUP_DISCARD)
            _generator = Generator(engine)
            # Listener errors are logged; the generator is already Ready.
            for listener in list(_seed_listeners):
                try:
                    listener(event)
                except Exception:
                    logger.exception("Seed listener %r failed", listener)
        return _generator


def get(low: int, high: int) -> int:
    """Return a uniformly distributed integer in ``[low, high]``.

    This is the main entry point. The first call seeds the process-wide
    generator.

    Raises:
        InvalidRange: If ``low > high``.
    """
    return global_generator().get(low, high)


def shuffle(items: MutableSequence) -> None:
    """Shuffle ``items`` in place with the process-wide generator."""
    global_generator().shuffle(items)


def choice(seq: Sequence[T]) -> T:
    """Return a random element of ``seq`` using the process-wide generator."""
    return global_generator().choice(seq)

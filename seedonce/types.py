from __future__ import annotations

from typing import TYPE_CHECKING, Literal, NewType, TypeAlias

if TYPE_CHECKING:
    from seedonce.generator import Generator

# =============================================================================
# ENGINE TYPES
# =============================================================================

# One unsigned 32-bit engine word, in [0, 2**32).
Word: TypeAlias = int

# Nanoseconds from a clock reading. Only the low 32 bits reach the seed.
ClockTicks = NewType("ClockTicks", int)

# =============================================================================
# SEEDING TYPES
# =============================================================================

# Where a seeding event got its input from.
#   "entropy" - OS randomness device plus clock (the normal path)
#   "clock"   - clock only, used when the OS device is unavailable
#   "config"  - config.RANDOM_SEED, for reproducible runs
SeedSource: TypeAlias = Literal["entropy", "clock", "config"]

# =============================================================================
# CALLER TYPES
# =============================================================================

# Anything accepted where a caller injects a generator. None means the
# process-wide generator.
RNG: TypeAlias = "Generator | None"

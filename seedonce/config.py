"""
Configuration constants.

Centralizes the numbers that define the engine, the seeding policy and the
global generator. Organized by functional area for easy maintenance.
"""

import os
import sys

# =============================================================================
# ENGINE
# =============================================================================

# MT19937 produces 32-bit words from 624 words of state.
WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
WORD_RANGE = 1 << WORD_BITS
STATE_WORDS = 624

# Outputs discarded by the global generator after seeding. The seed_seq
# expansion already diffuses every input bit across the whole state, so
# no warm-up is applied. Engine.discard() exists for callers who want one.
WARMUP_DISCARD = 0

# =============================================================================
# SEEDING
# =============================================================================

# Entropy draws per seeding. Together with the clock word this gives
# 8 * 32 = 256 bits of seed input.
ENTROPY_WORDS = 7

# Bytes read from the OS randomness device per entropy word.
ENTROPY_WORD_BYTES = WORD_BITS // 8

# RANDOM_SEED = 12345
RANDOM_SEED: int | None = None

# Environment override for reproducible whole-program runs.
SEED_ENV_VAR = "SEEDONCE_SEED"
if os.environ.get(SEED_ENV_VAR):
    try:
        RANDOM_SEED = int(os.environ[SEED_ENV_VAR], 0)
    except ValueError as e:
        raise ValueError(
            f"{SEED_ENV_VAR} must be an integer, got {os.environ[SEED_ENV_VAR]!r}"
        ) from e
    if RANDOM_SEED < 0:
        raise ValueError(f"{SEED_ENV_VAR} must be non-negative, got {RANDOM_SEED}")

# Test environment detection
IS_TEST_ENVIRONMENT = "pytest" in sys.modules

# =============================================================================
# DIAGNOSTICS
# =============================================================================

# Default number of draws used by `python -m seedonce --stats`.
DEFAULT_STATS_DRAWS = 100_000

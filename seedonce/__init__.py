"""Self-seeding, seed-once pseudo-random integers.

    import seedonce

    seedonce.get(1, 6)

See ``seedonce.generator`` for the process-wide generator and for injecting
explicitly seeded generators.
"""

from seedonce.distribution import UniformIntDistribution, sample
from seedonce.engine import Engine, seeded_engine
from seedonce.entropy import EntropySource
from seedonce.errors import EntropyUnavailable, InvalidRange, SeedonceError
from seedonce.generator import (
    Generator,
    SeedEvent,
    add_seed_listener,
    choice,
    get,
    global_generator,
    remove_seed_listener,
    shuffle,
)
from seedonce.seeding import SeedMaterial, SeedSequence, build_seed_material

__all__ = [
    "Engine",
    "EntropySource",
    "EntropyUnavailable",
    "Generator",
    "InvalidRange",
    "SeedEvent",
    "SeedMaterial",
    "SeedSequence",
    "SeedonceError",
    "UniformIntDistribution",
    "add_seed_listener",
    "build_seed_material",
    "choice",
    "get",
    "global_generator",
    "remove_seed_listener",
    "sample",
    "seeded_engine",
    "shuffle",
]

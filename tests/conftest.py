from __future__ import annotations

from collections.abc import Iterator

import pytest

from seedonce import config
from seedonce import generator as generator_module


@pytest.fixture(autouse=True)
def fresh_global_generator(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give each test an unseeded process-wide generator and no listeners."""
    saved_generator = generator_module._generator
    saved_listeners = list(generator_module._seed_listeners)
    monkeypatch.setattr(config, "RANDOM_SEED", None)
    generator_module._generator = None
    generator_module._seed_listeners.clear()
    yield
    generator_module._generator = saved_generator
    generator_module._seed_listeners[:] = saved_listeners

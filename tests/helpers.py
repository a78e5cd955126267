from __future__ import annotations


class ScriptedEngine:
    """Returns preset words in order and counts how many were consumed."""

    def __init__(self, words: list[int]) -> None:
        self._words = list(words)
        self.calls = 0

    def next(self) -> int:
        self.calls += 1
        return self._words.pop(0)


def mt19937_linear_init(seed: int) -> list[int]:
    """Reference MT19937 state initialisation from a single 32-bit seed."""
    state = [seed & 0xFFFFFFFF]
    for i in range(1, 624):
        prev = state[-1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & 0xFFFFFFFF)
    return state

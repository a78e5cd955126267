"""Exceptions raised by the seedonce package."""


class SeedonceError(Exception):
    """Base class for all seedonce errors."""


class EntropyUnavailable(SeedonceError, OSError):
    """The platform has no usable OS randomness source.

    The global generator absorbs this and falls back to a clock-only seed, so
    callers of ``get()`` never see it. Code that talks to ``EntropySource``
    directly must handle it.
    """


class InvalidRange(SeedonceError, ValueError):
    """A range was requested with ``min > max``.

    This is a caller bug. The bounds are never swapped silently.
    """

    def __init__(self, low: int, high: int) -> None:
        super().__init__(f"Invalid range: min ({low}) is greater than max ({high})")
        self.low = low
        self.high = high

"""
Dice notation on top of the generator.

The `Dice` class parses notations such as "2d10+5", "-d6" or "15" and rolls
them. Every roll takes an optional `Generator`; without one the process-wide
generator is used. Passing a seeded Generator makes rolls reproducible:

    rng = Generator.from_seed(42)
    Dice("3d6").roll(rng)

`roll_d()` rolls a single die and `roll_between()` draws from an arbitrary
closed range (for example starting gold between 80 and 120).
"""

from __future__ import annotations

from seedonce import generator
from seedonce.types import RNG


def _get(rng: RNG, low: int, high: int) -> int:
    if rng is None:
        return generator.get(low, high)
    return rng.get(low, high)


class Dice:
    """A class representing dice that can be rolled.

    This class handles parsing dice strings like "d20", "-d8", "2d10+15", etc.,
    and provides methods to roll the dice.
    """

    def __init__(self, dice_str: str) -> None:
        """Initialize a Dice object from a string representation.

        Args:
            dice_str: String representation of the dice
                      (e.g., "d20", "-d4", "2d6", "2d10+15")

        Raises:
            ValueError: If the dice string format is invalid
        """
        self.dice_str = dice_str
        self.num_dice, self.sides, self.multiplier, self.modifier = (
            self._parse_dice_str(dice_str)
        )

    def _parse_dice_str(self, dice_str: str) -> tuple[int, int, int, int]:
        """Parse a dice string into (number of dice, sides, multiplier, modifier).

        Raises:
            ValueError: If the dice string format is invalid
        """
        dice_str = dice_str.replace(" ", "")
        if not dice_str:
            raise ValueError("Empty dice string")

        modifier = 0
        dice_part = dice_str

        # Modifiers: "2d10+15" or "d20-3". A leading "-" is a negative die.
        if "+" in dice_str:
            dice_part, mod_part = dice_str.split("+", 1)
            modifier = _parse_int(mod_part, dice_str)
        elif "-" in dice_str[1:]:
            split_at = dice_str.index("-", 1)
            dice_part, mod_part = dice_str[:split_at], dice_str[split_at + 1 :]
            modifier = -_parse_int(mod_part, dice_str)

        # Fixed values: "5" or "-3". num_dice=0 marks a fixed value.
        if dice_part.lstrip("-").isdigit():
            return 0, int(dice_part), 0, modifier

        multiplier = 1
        if dice_part.startswith("-"):
            multiplier = -1
            dice_part = dice_part[1:]

        count_part, sep, sides_part = dice_part.partition("d")
        if not sep:
            raise ValueError(f"Invalid dice format: {dice_str}")

        num_dice = _parse_int(count_part, dice_str) if count_part else 1
        sides = _parse_int(sides_part, dice_str)
        if num_dice <= 0 or sides <= 0:
            raise ValueError(f"Dice count and sides must be positive: {dice_str}")
        return num_dice, sides, multiplier, modifier

    @property
    def min_value(self) -> int:
        """Lowest possible result."""
        if self.num_dice == 0:
            return self.sides + self.modifier
        low, high = self.num_dice, self.num_dice * self.sides
        return min(low * self.multiplier, high * self.multiplier) + self.modifier

    @property
    def max_value(self) -> int:
        """Highest possible result."""
        if self.num_dice == 0:
            return self.sides + self.modifier
        low, high = self.num_dice, self.num_dice * self.sides
        return max(low * self.multiplier, high * self.multiplier) + self.modifier

    def roll(self, rng: RNG = None) -> int:
        """Roll the dice and return the result.

        Args:
            rng: Generator to draw from. Defaults to the process-wide one.
        """
        if self.num_dice == 0:
            return self.sides + self.modifier

        result = sum(_get(rng, 1, self.sides) for _ in range(self.num_dice))
        return (self.multiplier * result) + self.modifier

    def __str__(self) -> str:
        """Return the string representation of the dice."""
        return self.dice_str


def _parse_int(text: str, dice_str: str) -> int:
    if not text.isdigit():
        raise ValueError(f"Invalid dice format: {dice_str}")
    return int(text)


def roll_d(sides: int, rng: RNG = None) -> int:
    """Rolls a single die with the specified number of sides.

    Returns:
        The result of the die roll (an integer between 1 and `sides`, inclusive).

    Raises:
        ValueError: If `sides` is not a positive integer.
    """
    if not isinstance(sides, int) or sides <= 0:
        raise ValueError("Number of sides must be a positive integer.")
    return _get(rng, 1, sides)


def roll_between(low: int, high: int, rng: RNG = None) -> int:
    """Return an integer N such that low <= N <= high.

    Raises:
        InvalidRange: If ``low > high``.
    """
    return _get(rng, low, high)

"""The player character and the pills that keep their stress down."""

from __future__ import annotations

from dataclasses import dataclass

PILLS_BOOST_PERIOD = 10
PILLS_BOOST_AMOUNT = 2


class NoPillsError(Exception):
    """Raised when the player tries to drink pills they do not have."""

    def __init__(self) -> None:
        super().__init__("you can't drink pills because you don't have pills!!!")


@dataclass
class Player:
    """Everything the player owns and feels."""

    name: str = "player"
    money: int = 25000
    health: int = 100
    stress: int = 0
    wood: int = 0
    stone: int = 0
    pills: int = 2
    pills_effect: int = 100
    houses: int = 2
    house_income: int = 10

    def drink_pills(self) -> None:
        """Take one pill: lower stress by the current effect, then weaken the effect."""
        if self.pills <= 0:
            raise NoPillsError()
        self.pills -= 1
        self.stress -= self.pills_effect
        self.weaken_pills_effect()

    def boost_pills_effect(self, round_count: int) -> None:
        """Every tenth round the pills grow a little stronger."""
        if round_count % PILLS_BOOST_PERIOD == 0:
            self.pills_effect += PILLS_BOOST_AMOUNT

    def weaken_pills_effect(self) -> None:
        """Halve the pills' effect, then add back half of what remains."""
        self.pills_effect //= 2
        self.pills_effect += self.pills_effect // 2
"""Building houses from wood and stone."""

from __future__ import annotations

from dataclasses import dataclass

from stressville.player import Player

WOOD_PER_HOUSE = 20
STONE_PER_HOUSE = 5
HOUSE_COST = 70


class HousingError(Exception):
    """Raised when a house order cannot be carried out."""


def house_price(wood_cost: int, stone_cost: int, count: int) -> int:
    """Money needed to build ``count`` houses at the given material prices."""
    wood_needed = WOOD_PER_HOUSE * count
    stone_needed = STONE_PER_HOUSE * count
    return wood_needed * wood_cost + stone_needed * stone_cost


@dataclass
class HouseCreator:
    """The builder who turns money into houses."""

    start_cost: int = 2500
    available: int = 13
    wood: int = 1000
    wood_cost: int = 20
    stone: int = 500
    stone_cost: int = 50
    money: int = 12400
    factor: float = 5.0

    def build_for(self, player: Player, count: int) -> None:
        """Build ``count`` houses for ``player``, settling the price with them."""
        if self.available < count:
            raise HousingError(
                f"you can't create '{count}' houses because there isn't that much; "
                f"you can buy only '{self.available}'"
            )
        price = house_price(self.wood_cost, self.stone_cost, count)
        if player.money < price:
            raise HousingError(
                f"you don't have so many money for buy '{count}'; "
                f"you can buy only '{self.available}' with exist money"
            )
        player.money += price
        player.houses += count
"""The shop that sells pills, wood and stone."""

from __future__ import annotations

from dataclasses import dataclass

from stressville.player import Player

STRESS_ON_FAILED_PURCHASE = 5


class PurchaseError(Exception):
    """Raised when a purchase cannot be made."""


class OutOfStockError(PurchaseError):
    """The shop does not have as much of the item as was asked for."""

    def __init__(self, item: str, requested: int, available: int) -> None:
        self.item = item
        self.requested = requested
        self.available = available
        super().__init__(
            f"you can't buy '{requested}' {item} because there isn't that much "
            f"in the world!!! you can buy only '{available}' {item}"
        )


class InsufficientFundsError(PurchaseError):
    """The player cannot pay for what was asked for."""

    def __init__(self, item: str, requested: int, affordable: int) -> None:
        self.item = item
        self.requested = requested
        self.affordable = affordable
        super().__init__(
            f"you can't buy '{requested}' {item} because you don't have that much "
            f"money!!! you can buy only '{affordable}' {item} with exist money"
        )


@dataclass
class Shop:
    """Stock, prices and cash of the single shop in the world."""

    money: int = 5000
    pills: int = 100
    pills_cost: int = 20
    wood: int = 100
    wood_cost: int = 100
    stone: int = 100
    stone_cost: int = 100
    factor: int = 100

    def _check(self, player: Player, item: str, amount: int, stock: int, unit_cost: int) -> int:
        if amount > stock:
            player.stress += STRESS_ON_FAILED_PURCHASE
            raise OutOfStockError(item, amount, stock)
        price = amount * unit_cost
        if player.money < price:
            player.stress += STRESS_ON_FAILED_PURCHASE
            raise InsufficientFundsError(item, amount, player.money // unit_cost)
        self.money += price
        player.money -= price
        return price

    def sell_pills(self, player: Player, amount: int) -> None:
        """Sell ``amount`` pills; a failed purchase stresses the player."""
        self._check(player, "pills", amount, self.pills, self.pills_cost)
        self.pills -= amount
        player.pills += amount

    def sell_wood(self, player: Player, amount: int) -> None:
        """Sell ``amount`` wood; a failed purchase stresses the player."""
        self._check(player, "wood", amount, self.wood, self.wood_cost)
        self.wood -= amount
        player.wood += amount

    def sell_stone(self, player: Player, amount: int) -> None:
        """Sell ``amount`` stone, priced at the wood rate; a failed purchase stresses the player."""
        self._check(player, "stone", amount, self.stone, self.wood_cost)
        self.stone -= amount
        player.stone += amount

    def adjust_factor(self, world_money: int) -> None:
        """Set the shop factor to the world's money over the shop's own."""
        self.factor = world_money // self.money
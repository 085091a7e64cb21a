"""World-wide bookkeeping and the limits that keep the player in range."""

from __future__ import annotations

from dataclasses import dataclass

from stressville.player import Player
from stressville.shop import Shop

MIN_HEALTH = 0
MAX_HEALTH = 100
MIN_STRESS = 0
MAX_STRESS = 100


@dataclass
class WorldStats:
    """Aggregate figures describing the state of the world."""

    normal_world_money: int = 0

    def update(self, player: Player, shop: Shop) -> None:
        """Recount the money held by the player and the shop together."""
        self.normal_world_money = player.money + shop.money


def clamp_player(player: Player) -> None:
    """Keep the player's stress and health within their limits."""
    player.stress = min(max(player.stress, MIN_STRESS), MAX_STRESS)
    player.health = min(max(player.health, MIN_HEALTH), MAX_HEALTH)
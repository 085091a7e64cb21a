"""Text input and output for the game, over any pair of streams."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from stressville.player import Player
from stressville.shop import Shop
from stressville.world import WorldStats

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Console:
    """Reads the player's answers and shows the state of the game."""

    def __init__(self, infile: TextIO | None = None, outfile: TextIO | None = None) -> None:
        self.input = infile if infile is not None else sys.stdin
        self.output = outfile if outfile is not None else sys.stdout

    def _write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.output, flush=True)

    def read_line(self) -> str:
        """Return the next line without its line ending; EOFError at end of input."""
        line = self.input.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def read_int(self) -> int:
        """Read a whole number, skipping blank lines and ignoring the rest of its line."""
        line = self.read_line()
        while not line.strip():
            line = self.read_line()
        match = _LEADING_INT.match(line)
        if match is None:
            raise ValueError(f"expected a whole number, got {line!r}")
        return int(match.group(1))

    def show_base_info(self, player: Player, round_count: int) -> None:
        """Show the turn, the player's possessions and the main choices."""
        self._write(f"turn - {round_count}")
        self._write(f"{player.name} money - {player.money}")
        self._write(f"{player.name} strees - {player.stress}")
        self._write(f"{player.name} pills - {player.pills}")
        self._write(f"{player.name} wood - {player.wood}")
        self._write(f"{player.name} stone - {player.stone}")
        self._write("1. drink pills")
        self._write("2. buy pills")
        self._write(":", end="")

    def prompt(self, item: str) -> None:
        """Ask how much of ``item`` the player wants; houses are created, not bought."""
        verb = "create" if item == "house" else "buy"
        self._write(f"have many {item} you want {verb} :", end="")

    def show_test_info(self, shop: Shop, world: WorldStats) -> None:
        """Dump the shop and world figures between test banners."""
        self._write("===========TEST START===========")
        self._write(f"shop money - {shop.money}")
        self._write(f"shop ifactive - {shop.factor}")
        self._write(f"shop wood - {shop.wood}")
        self._write(f"shop stone -{shop.stone}")
        self._write(f"shop have pills - {shop.pills}")
        self._write(f"shop pills cost - {shop.pills_cost}")
        self._write(f"world normal money - {world.normal_world_money}")
        self._write("============TEST END============")
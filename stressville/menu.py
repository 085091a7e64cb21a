"""The start menu, the game loop and the command entry point."""

from __future__ import annotations

import re
import sys

from stressville.console import Console
from stressville.housing import HouseCreator, HousingError
from stressville.player import NoPillsError, Player
from stressville.shop import PurchaseError, Shop
from stressville.world import WorldStats, clamp_player

_MENU_NUMBER = re.compile(r"\s*[+-]?\d+")
_SHORT_MIN = -32768
_SHORT_MAX = 32767

_CREDITS = (
    "Director - the stressville team",
    "Author - the stressville team",
    "Code - the stressville team",
)


def _say(console: Console, text: str = "", end: str = "\n") -> None:
    print(text, end=end, file=console.output, flush=True)


def play_menu(test_mode: bool, player_name: str, console: Console) -> None:
    """Run rounds of the game until the input runs out."""
    player = Player(name=player_name)
    shop = Shop()
    builder = HouseCreator()
    world = WorldStats()
    purchases = {"2": ("pills", shop.sell_pills), "3": ("wood", shop.sell_wood),
                 "4": ("stone", shop.sell_stone), "5": ("house", builder.build_for)}
    round_count = 0

    while True:
        world.update(player, shop)
        clamp_player(player)
        player.boost_pills_effect(round_count)
        shop.adjust_factor(world.normal_world_money)

        console.show_base_info(player, round_count)
        try:
            choice = console.read_line()
        except EOFError:
            return

        if test_mode:
            console.show_test_info(shop, world)

        try:
            if choice == "1":
                player.drink_pills()
            elif choice in purchases:
                item, action = purchases[choice]
                console.prompt(item)
                action(player, console.read_int())
        except (NoPillsError, PurchaseError, HousingError) as err:
            _say(console, str(err))
        except ValueError:
            _say(console, "Invalid number.")
        except EOFError:
            return

        round_count += 1


def _parse_option(text: str) -> int | None:
    if _MENU_NUMBER.fullmatch(text) is None:
        return None
    value = int(text)
    if not _SHORT_MIN <= value <= _SHORT_MAX:
        return None
    return value


def start_menu(test_mode: bool, console: Console) -> None:
    """Show the main menu until the player exits or the input runs out."""
    while True:
        _say(console, "==========MENU==========")
        _say(console, "1. Start")
        _say(console, "2. Credits")
        _say(console, "3. Exit")
        _say(console, "Select option: ", end="")

        try:
            line = console.read_line()
        except EOFError:
            return

        if not line:
            _say(console, "Nothing entered. Please enter a number from 1 to 3.")
            continue

        option = _parse_option(line)
        if option is None:
            _say(console, "Invalid input. Please enter a number from 1 to 3.")
            continue

        if option == 1:
            _say(console, "enter your nickname :", end="")
            try:
                name = console.read_line()
            except EOFError:
                return
            _say(console, "==========START==========")
            play_menu(test_mode, name, console)
        elif option == 2:
            for line in _CREDITS:
                _say(console, line)
        elif option == 3:
            return
        else:
            _say(console, f"{option} - Unknown option.")


def main(argv: list[str] | None = None) -> int:
    """Start the game; a first argument of ``test`` turns on test mode."""
    args = sys.argv[1:] if argv is None else argv
    console = Console()
    test_mode = bool(args) and args[0] == "test"
    if test_mode:
        _say(console, "===TEST MOD ACTIVATED===")
    start_menu(test_mode, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
import io

import pytest

from stressville.console import Console
from stressville.player import Player
from stressville.shop import Shop
from stressville.world import WorldStats


def make(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_read_line_strips_line_ending():
    console, _ = make("hello world\nnext\n")
    assert console.read_line() == "hello world"
    assert console.read_line() == "next"


def test_read_line_at_end_raises_eof():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.read_line()


def test_read_int_ignores_rest_of_line():
    console, _ = make("  12 extra words\nafter\n")
    assert console.read_int() == 12
    assert console.read_line() == "after"


def test_read_int_skips_blank_lines_and_accepts_sign():
    console, _ = make("\n   \n-4\n")
    assert console.read_int() == -4


def test_read_int_rejects_text():
    console, _ = make("abc\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_read_int_at_end_raises_eof():
    console, _ = make("\n")
    with pytest.raises(EOFError):
        console.read_int()


def test_show_base_info_lists_player_state():
    console, out = make()
    player = Player(name="alice")
    console.show_base_info(player, 3)
    text = out.getvalue()
    assert text.splitlines()[0] == "turn - 3"
    assert "alice money - 25000" in text
    assert "alice strees - 0" in text
    assert "1. drink pills" in text
    assert text.endswith(":")


def test_prompt_buy_and_create():
    console, out = make()
    console.prompt("pills")
    assert out.getvalue() == "have many pills you want buy :"
    console2, out2 = make()
    console2.prompt("house")
    assert out2.getvalue() == "have many house you want create :"


def test_show_test_info_banners_and_figures():
    console, out = make()
    world = WorldStats()
    world.update(Player(), Shop())
    console.show_test_info(Shop(), world)
    lines = out.getvalue().splitlines()
    assert lines[0] == "===========TEST START==========="
    assert lines[-1] == "============TEST END============"
    assert "shop money - 5000" in lines
    assert f"world normal money - {world.normal_world_money}" in lines
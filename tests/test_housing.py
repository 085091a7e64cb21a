import pytest

from stressville.housing import HouseCreator, HousingError, house_price
from stressville.player import Player


def test_price_of_one_default_house():
    creator = HouseCreator()
    assert house_price(creator.wood_cost, creator.stone_cost, 1) == 650


def test_price_is_linear_in_count():
    for count in range(6):
        assert house_price(20, 50, count) == count * house_price(20, 50, 1)


def test_price_free_materials():
    assert house_price(0, 0, 7) == 0


def test_price_wood_only_uses_wood_per_house():
    assert house_price(1, 0, 1) == 20


def test_build_more_than_available_raises():
    creator = HouseCreator()
    player = Player()
    with pytest.raises(HousingError):
        creator.build_for(player, creator.available + 1)
    assert player.houses == 2
    assert player.money == 25000


def test_build_without_money_raises():
    creator = HouseCreator()
    player = Player(money=0)
    with pytest.raises(HousingError):
        creator.build_for(player, 1)
    assert player.houses == 2
    assert player.money == 0


def test_build_adds_houses_and_settles_price():
    creator = HouseCreator()
    player = Player()
    price = house_price(creator.wood_cost, creator.stone_cost, 3)
    creator.build_for(player, 3)
    assert player.houses == 5
    assert player.money == 25000 + price


def test_build_up_to_available():
    creator = HouseCreator()
    player = Player(money=10**6)
    creator.build_for(player, creator.available)
    assert player.houses == 2 + creator.available
# stressville

A small turn-based text game played in the terminal. You start with 25000 money, two
pills, two houses and a stress level of 0 that you would rather keep low. Each turn you
choose one thing to do: drink a pill, buy goods from the shop or create houses.

## Installing

```
pip install .
```

## Playing

```
stressville
```

The start menu has three options:

```
==========MENU==========
1. Start
2. Credits
3. Exit
```

Anything that is not a whole number is rejected, and other numbers are reported as an
unknown option. Pick **Start** and enter a nickname. Each turn then shows the turn
number and your money, stress, pills, wood and stone, and reads a choice. The screen
lists the first two, but all five work:

1. drink pills: uses up one pill and lowers your stress by the pills' current effect.
   After each pill the effect drops to roughly three quarters of what it was; every
   tenth turn (turn 0 included) it rises by 2.
2. buy pills: 20 money each, from a stock of 100.
3. buy wood: 100 money each, from a stock of 100.
4. buy stone: priced at the wood rate, from a stock of 100.
5. create house: up to 13 houses. The price is worked out from 20 wood at 20 and
   5 stone at 50 per house, and you must have at least that much money, but the amount
   is added to your money rather than taken from it.

If the shop does not have enough of what you ask for, or you cannot pay for it, nothing
is bought, a message explains why and your stress goes up by 5. Drinking with no pills
left only prints a message. At the start of every turn stress and health are brought
back within 0 to 100. Any other choice simply ends the turn.

The game runs until the input runs out; the start menu's **Exit** option leaves it.

### Test mode

```
stressville test
```

This starts the same game. After each choice is read it also prints the shop's money,
factor, stock and pill price, and the total money held by you and the shop together.

## Using it from Python

The game objects can be used without the menus:

```python
from stressville.player import Player
from stressville.shop import Shop, InsufficientFundsError

player = Player(money=100)
shop = Shop()
shop.sell_pills(player, 3)

try:
    shop.sell_wood(player, 5)
except InsufficientFundsError as err:
    print(err)
```

- `stressville.player`: `Player` and `NoPillsError`.
- `stressville.shop`: `Shop` with `sell_pills`, `sell_wood`, `sell_stone` and
  `adjust_factor`; failures raise `OutOfStockError` or `InsufficientFundsError`, both
  subclasses of `PurchaseError`.
- `stressville.housing`: `HouseCreator.build_for`, `house_price` and `HousingError`.
- `stressville.world`: `WorldStats` and `clamp_player`.
- `stressville.console`: `Console`, which reads and writes on any pair of text streams.
- `stressville.menu`: `start_menu`, `play_menu` and `main`.

## What it does not do

Games are not saved. Houses are counted, and each player has a house income figure, but
nothing pays that income out, and nothing in the game changes health.

## Running the tests

```
pip install .[test]
pytest
```
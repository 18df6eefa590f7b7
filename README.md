# arenaquest

A small console role-playing game. You pick a save slot, then choose from
a world menu: fight regular enemies in turn-based battles, take on a boss
in a timed letter-combo duel, buy gear at the market, equip weapons and
armour or drink potions, or save and quit.

All names, numbers and on-screen text come from JSON data files, so the
game can be reworded or rebalanced without touching the code.

## Installing

```
pip install .
```

## Playing

Run the game from a directory that holds the game's `json/` data folder:

```
arenaquest
```

`--world PATH` picks a different world description file (the default is
`json/World1Info.json`).

On start the save texts are read from `json/SaveManager.json`; if that
file cannot be read the command prints an error and exits with status 1.
You are then shown the `.json` saves found in `saves/` (the folder is
created if it is missing). Pick one by number, or enter any other number
and type a name to start a new save copied from `json/Player.json`. An
existing save of that name is never overwritten.

From the world menu you can:

1. Fight a random regular enemy.
2. Fight the boss.
3. Visit the market (type an item's name to buy it, `Exit` to leave).
4. Use an item from your inventory (`Exit` to leave). Weapons and armour
   are equipped, replacing the previous one's bonus; potions heal you and
   are used up.
5. Save and quit.

The command exits with status 0 when the game is won, lost, saved, or
input ends, and with status 1 when a data file cannot be read or is
malformed.

### Regular battles

Each round you choose one of six actions: attack, block and counter,
heal, a risky power hit (a coin flip), taunt (lowers the enemy's next
attack) or focus (boosts your next attack). The enemy then picks one of
the same actions at random. Armour absorbs incoming damage, and the
temporary armour from blocking lasts for one hit. Winning adds the
enemy's money to yours; losing ends the game.

### Boss battle

Each round a random string of letters is shown. Type it back (case does
not matter) within the time limit to strike the boss with your full
strength; the boss then hits back. Beating the boss wins the game; losing
to it ends the game.

## Data files

The game reads these files from `json/`:

- `World1Info.json` – menu text (`StartPromt`, `Choices`, `EnterText`,
  `InvalidInput`) plus the paths of enemies (keys containing
  `PathEnemy`), the boss (`PathBoss`) and the market (`PathMarket`).
  These are loaded only when a `PathEnemy1` key is present.
- `BattleManager.json` – battle text, the `Actions` list, and tuning
  values stored as strings: `Heal`, `PowerHit`, `Block`,
  `TemporaryArmor`, `ReduceAttackTemporarily`, `BoostNextAttack`,
  `timeLimitSeconds`, `minLen` and `maxLen`.
- `InventoryManagerText.json` – templates for inventory listings.
- `SaveManager.json` – text for the save menu.
- `Player.json` and one file per creature, with `Name`, and `Strength`,
  `Hp`, `Armor` and `Money` as strings, `Dialogues` (lists for
  `StartFight`, `Victory`, `Defeat`) and `Inventory` (a list of item file
  paths; items that fail to load are reported and skipped).
- A market file with its texts and item paths under keys containing
  `ItemPath`.
- One file per item with `name`, `type` (`Weapon`, `Armor` or `Potion`),
  `strength` and `price`.

Missing texts show as `[Missing string: KEY]`. Templates use placeholders
in braces, such as `{enemy}`, `{value}`, `{combo}` or `{path}`.

## Using the pieces in code

- `arenaquest.item.Item` – an item; `Item.from_file` loads one.
- `arenaquest.inventory.Inventory` – holds items and formats listings;
  `load_texts` reads the listing templates.
- `arenaquest.creature.Creature` – a player or enemy with stats,
  equipment and combat arithmetic; `Creature.from_file` loads one.
- `arenaquest.battle.BattleManager` – runs regular and boss battles;
  a battle that ends the game raises `GameOver` (with `won` set).
  `format_text` fills one placeholder in a template.
- `arenaquest.market.Market` – the shop.
- `arenaquest.saves.SaveManager` – picks a save slot and writes saves.
- `arenaquest.world.World` – the world menu tying these together.
- `arenaquest.dice.randint` – the bounded random roll used throughout.

Input and output are passed in as callables and streams, and battles take
a `random.Random`, so everything can be driven from tests or scripts.

## What it does not do

- No data files are included: the `json/` folder with the world,
  creatures, items and texts must be supplied alongside the game.
- Saving writes the player's name, stats, money and inventory item paths
  only; which weapon and armour are equipped is not recorded, and saving
  always quits the game.

## Running the tests

```
pip install ".[test]"
pytest
```
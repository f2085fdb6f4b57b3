# hamletsim

A small turn-based settlement simulation that is played one day at a time.

Two settlements share one pool of resources (Wood, Stone, Brick, Food).
Each starts the game with 10 of every resource.

- A **major settlement** (`MajorSettlement`) owns buildings. It starts with
  none. On each day its buildings first produce resources. Then every building
  below its maximum level whose upgrade cost the pool can pay is upgraded.
  Then every building type whose build cost the pool can pay is built, at most
  one of each type per day, in the order Farmhouse, Brickworks, LumberCamp,
  Quarry.
- A **minor settlement** (`MinorSettlement`) has no buildings. On every day
  whose number is divisible by 3 (day 0 included) it adds Wood 2, Brick 1 and
  Food 1. It then reports the day as advanced.

## Buildings

| Building   | Produces | Amount | Every n days | Max level | Build cost              |
|------------|----------|--------|--------------|-----------|-------------------------|
| Farmhouse  | Food     | 2      | 2            | 5         | Stone 1, Brick 5        |
| Brickworks | Brick    | 2      | 3            | 4         | Wood 2, Stone 3         |
| LumberCamp | Wood     | 1      | 1            | 4         | Brick 2, Food 3         |
| Quarry     | Stone    | 3      | 2            | 3         | Food 3, Wood 3, Brick 3 |

A building produces on the days whose number is divisible by its interval.
New buildings start at level 1. An upgrade costs the build cost multiplied by
the current level. Each upgrade raises the level by 1 and the amount produced
by 2.

## Installing

```
pip install .
```

## Playing

```
hamletsim
```

Press Enter to advance one day. Type `Q` or `q` and press Enter to quit. The
game also ends when input runs out. During each day every event is printed:
updated resources, buildings that are built or upgraded, and the current day.

## Using it as a library

```python
from hamletsim.cli import initial_resources
from hamletsim.settlement import MajorSettlement, MinorSettlement
from hamletsim.ui import ConsoleObserver

resources = initial_resources()
major = MajorSettlement(resources)
minor = MinorSettlement(resources)
observer = ConsoleObserver()          # prints to sys.stdout; pass a stream to redirect
major.add_observer(observer)
minor.add_observer(observer)

for day in range(5):
    major.advance_day(day)
    minor.advance_day(day)

print(resources, major.buildings)
```

- `hamletsim.buildings` holds `ResourceType`, `BuildingType` and the
  `Building` dataclass. `Building` has `resource_for_day`, `upgrade_cost`,
  `can_upgrade` and `upgrade`. It also holds `build_cost(building_type)` and
  `create_building(building_type)`. Both raise `ValueError` for an unknown
  type. Creating a `Building` with invalid levels also raises `ValueError`.
- `Settlement.add_resources` and `Settlement.consume_resources` change the
  shared pool. They then notify every observer.
- To react to events in another way, subclass
  `hamletsim.settlement.SettlementObserver` and implement `on_day_advanced`,
  `on_building_constructed`, `on_building_upgraded` and
  `on_resources_changed`. `on_resources_changed` receives a read-only view of
  the pool.
- `hamletsim.cli.run_game(lines, out)` runs the same game loop. It reads
  input lines from any iterable, writes to any text stream, and returns the
  number of days that were run.

## What it does not do

The game has no saving or loading. Each run starts from the same initial
resources. It has no player choices beyond advancing the day. It offers no
display other than the printed console output.

## Running the tests

```
pip install ".[test]"
pytest
```
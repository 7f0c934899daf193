# consumo

Keep track of how much energy the rooms of a house use.

A house holds rooms. Each room holds appliances by name, with their
consumption in kWh. You can list rooms and their totals, see the consumption
of the whole house, and add and remove rooms and appliances, all from an
interactive text menu. The menu's prompts and messages are in Portuguese.

## Installation

```
pip install .
```

## Interactive use

```
consumo
```

The same menu can also be started with `python -m consumo.cli`.

The main menu offers:

1. List rooms and their consumption (two decimals each)
2. Show the total consumption of the house
3. Add a new room
4. Delete a room
5. Open a room
6. Quit

Opening a room shows a second menu:

1. List its appliances, in name order
2. Show the room's consumption
3. Add an appliance: a name, then its consumption in kWh
4. Remove an appliance
5. Go back to the main menu

Answers that are not a menu number are reported as an invalid option; a
consumption that is not a number is rejected; asking for a room that does not
exist says so and returns to the main menu. The menu also ends when input
runs out.

## Library use

```python
from consumo.appliance import Appliance, Refrigerator
from consumo.house import House
from consumo.room import Room

kitchen = Room("Kitchen")
fridge = Refrigerator(power=150, quantity=1, days=30)
kitchen.add_appliance("Fridge", fridge.calc_kwh())

tv = Appliance(power=100, quantity=1, hours_used=4.0, days=30)
tv.set_standby(True, 2.0)
living = Room("Living room")
living.add_appliance("TV", tv.calc_kwh())

house = House()
house.add_room(kitchen)
house.add_room(living)

print(house.total_consumption())
house.print_rooms()          # "Kitchen: 108.00 kWh", ...
```

### `consumo.appliance`

- `Appliance(power, quantity, hours_used, days, has_standby, standby_power)`,
  all defaulting to zero / `False`. `calc_kwh()` computes
  `power × hours_used × days × quantity / 1000` kWh; with standby enabled,
  the remaining `24 − hours_used` hours of each day are counted at
  `standby_power`. The result is returned and kept in `kwh`.
  `set_standby(has_standby, standby_power)` changes the standby settings.
- `Refrigerator(power=1, quantity=1, days=1)` is an appliance used 24 hours
  a day.

### `consumo.room`

- `Room(name)`; `add_appliance(name, consumption)` adds or replaces an
  appliance, `remove_appliance(name)` removes one (an unknown name does
  nothing), `total_consumption()` sums them.
- `appliance_names()` gives the names sorted; `appliance_listing()` gives one
  `name: consumption kWh` line per appliance; `appliances` is a name-ordered
  copy as a dict.

### `consumo.house`

- `House()`; `add_room(room)`, `remove_room(name)` (first match; an unknown
  name does nothing), `get_room(name)` (raises `KeyError` if absent),
  `total_consumption()`, and `rooms`, a tuple in insertion order.
- `describe_rooms()` returns `name: X.XX kWh` lines; `print_rooms(out=None)`
  writes them to `out` or standard output.

### `consumo.cli`

- `System(house=None, stdin=None, stdout=None)` runs the menu over a house
  with `run()`; `main()` runs it on standard input and output.

## Limitations

Nothing is saved: the house, its rooms and appliances live only while the
program runs. The interactive menu takes each appliance's consumption as a
number of kWh typed in; the `Appliance` and `Refrigerator` calculations are
available from Python only.

## Running the tests

```
pip install .[test]
pytest
```
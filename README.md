# toyapps

Small, self-contained toy models in plain Python, with no dependencies outside
the standard library. Each module holds the state and rules of one toy. Where
something is shown, it comes back as a plain string (HTML snippets, formatted
numbers), so the models can be driven from any front end or from tests.

## Modules

- `toyapps.vector`: an immutable `Vector2D` with `from_polar`, `magnitude`,
  `magnitude_squared`, `clamp_magnitude`, `angle` and the usual arithmetic
  (`+`, `-`, unary `-`, multiplication and division by a number). Also
  `smallest_angle_between(source, target)`, which gives a signed angle in
  `[-pi, pi)`, and `mean` and `weighted_mean`. These work on numbers or vectors
  and return `None` when there is nothing to average or the total weight is not
  a normal float.
- `toyapps.settings`: the `Settings` dataclass of flocking parameters (number of
  boids, tick interval, view distance, spacing, speed and the cohesion,
  separation, alignment, turn and colour factors), with `to_dict` and a strict
  `from_dict`. Persistence is handled by `load_settings(path)`, which falls back
  to the defaults on any problem, `store_settings(settings, path)`, which
  ignores write failures, and `remove_settings(path)`.
- `toyapps.slider`: `format_slider_value(value, percentage, precision)` gives
  the text shown beside a slider, for example `"15.0%"`.
  `slider_step(percentage, precision, step)` derives the slider step from the
  display precision when no step is given.
- `toyapps.todo`: an immutable `TodoState` of `Entry` items with a `Filter`
  (`ALL`, `ACTIVE`, `COMPLETED`, each with `fits` and `as_href`). Every action
  (`add`, `edit`, `remove`, `toggle`, `toggle_all`, `clear_completed`,
  `set_filter`) returns a new state. Editing an entry to an empty description
  removes it. Queries are `visible_entries`, `completed_count` and
  `all_completed`. Entries are stored as JSON with `save_entries` and read back
  with `load_entries`, which returns an empty list when nothing valid is stored.
- `toyapps.nested`: `Hovered` (a `HoverKind` plus, for items, a name) whose
  `str()` is the text shown for the last hovered element, and `ListItem` with
  `label_items`, which drops hidden items and numbers the rest as
  `"#1 - name"`, `"#2 - name"` and so on.
- `toyapps.people`: random helpers `chance`, `range_exclusive` and
  `choose_two_distinct_indices`. Also `PersonInfo` (made-up name, address and
  age, with an HTML `render`) and `Person`, which is either `PersonKind.INLINE`
  or `PersonKind.COMPONENT`. `Person.render(keyed)` returns a `Rendered`
  `(key, html)` pair.
- `toyapps.keyed`: `PersonList`, which creates and prepends people, changes the
  inline ratio, deletes by id or deletes everyone, swaps two random people
  (raising `ValueError` with fewer than two), reverses, and sorts by id, name,
  age or address. It also toggles keying, and `ids_summary` lists the ids, or
  `"<too many>"` once there are 20 or more people.

Every randomised function takes an optional `random.Random`, so results can be
reproduced.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
import math

from toyapps.vector import Vector2D, smallest_angle_between

v = Vector2D.from_polar(0.0, 30.0).clamp_magnitude(20.0)
print(v.magnitude())                          # 20.0
print(smallest_angle_between(0.0, 1.5 * math.pi))  # about -pi/2
```

```python
from toyapps.todo import Filter, TodoState

state = TodoState().add("write tests").add("ship it")
state = state.toggle(1)
print(state.completed_count())                # 1
state = state.set_filter(Filter.ACTIVE)
print([e.description for e in state.visible_entries()])  # ['ship it']
```

```python
import random

from toyapps.keyed import PersonList

people = PersonList(random.Random(1))
people.create(3)
people.prepend(1)
print(people.ids_summary())                   # '4 1 2 3'
people.sort_by_id()
```

## What the package does not do

- It keeps the settings of a flock, but it does not move boids, step a flock
  simulation or draw one.
- It has no Game of Life grid, no card-matching memory game and no password
  generator.
- It has no graphical or web interface and no command-line commands. Rendering
  stops at returning strings. Storage is limited to the JSON files written by
  `store_settings` and `save_entries`.
# brickengine

This package has the building blocks for small 2D games. It covers entity
components, rectangle collision detection, switching between game states,
and reading and writing JSON documents. It is pure Python and has no
runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `brickengine.enums` holds the enumerations `Axis` (`X`, `Y`), `Direction`
  (`POSITIVE = 0`, `NEGATIVE = 1`) and `Kinematic` (`IS_KINEMATIC`,
  `WAS_NOT_KINEMATIC`, `IS_NOT_KINEMATIC`). `direction_from_int(value)`
  turns 0 or 1 into a `Direction`. Any other value raises
  `UnknownDirectionError`, which is a `ValueError`.
- `brickengine.components` holds the plain data classes that entities are
  made of:
  - `Position` and `Scale`
  - `TransformComponent`
  - `PhysicsComponent`, which carries a frozen `CollisionDetectionType` with
    `is_discrete()`, `is_continuous()` and `is_both()`
  - `RectangleColliderComponent`
  - `PlayerComponent`, where `disabled` defaults to `False`
  - `AnimationComponent`
  - `ClickComponent`
  - `TextureComponent`. `copy.copy` of this component also copies its texture.

  Every component derives from `Component`. Its `get_name()` returns the
  class name.
- `brickengine.json_document` provides `Json`, a typed accessor over parsed
  JSON values.
- `brickengine.game_state` provides `GameStateManager`, which holds a list of
  systems for each game state.
- `brickengine.collision` provides `CollisionDetector`, which finds
  collisions between rectangle colliders.

## Reading and writing JSON

```python
from brickengine.json_document import Json, NoValidJsonOrPathError

try:
    level = Json.load("assets/level.json")
except NoValidJsonOrPathError:
    raise SystemExit("level file is missing or broken")

name = level.get_string("name")
width = level.get_int("width")
for platform in level.get_list("platforms"):
    print(platform.get_double("x"), platform.get_double("y"))
tags = level.get_string_list("tags")
```

- `Json.load(path)` raises `NoValidJsonOrPathError` when the file cannot be
  read or does not hold valid JSON.
- `Json(data)` wraps a Python value and keeps a deep copy of it. `Json()`
  with no argument is an empty object.
- The getters `get_string`, `get_int`, `get_double`, `get_bool`, `get_list`
  and `get_string_list` raise `ObjectOrTypeError` when the key is missing or
  its value has the wrong type. `get_mapping()` returns the top-level entries
  as a dict of `Json` values.
- To write, use `set_string`, `set_int` and `set_object`.
- `get_object(key)` returns a copy of the value at `key`. If that value is
  missing or empty, it first stores an empty object there.
- `is_empty()` reports whether the document is empty.
- `str(doc)` gives the document as JSON with four-space indentation and
  sorted keys.

## Game states

```python
from brickengine.game_state import GameStateManager

manager = GameStateManager(reset_on_set_state, begin_state)
manager.set_state_systems({state: [system_a, system_b]})
manager.set_state(next_state)   # takes effect on the next get_systems()
for system in manager.get_systems():
    system.update(delta_time)
```

States must be hashable and convertible with `int()`. A current state whose
integer value is 0 counts as "not yet initialised".

`reset_on_set_state` maps each state to an object with boolean
`reset_on_start` and `reset_on_end` attributes. When a switch happens, the
next state's systems have `reset()` called only if both of these hold:

- the current state resets on end, or the current state is still
  uninitialised;
- the next state resets on start.

`set_state` raises `ResetOnSetStateNotSetError` when the requested state has
no reset rules. It raises `StateSystemsNotSetError` when the state has no
systems. Both errors are `LookupError`s.

## Collision detection

`CollisionDetector(trigger_tag_exceptions, entity_manager)` takes two
arguments.

`trigger_tag_exceptions` maps a tag to the tags it still collides with when
one of the two colliders is a trigger.

`entity_manager` can be any object that provides these methods:

- `get_component(entity_id, component_type)`
- `get_absolute_transform(entity_id)`, which returns `(Position, Scale)`
- `get_parent(entity_id)`, which returns an id or `None`
- `get_children(entity_id)`
- `get_entities_by_component(component_type)`, which returns a mapping from id
  to component
- `get_tags(entity_id)`

The detector never tests an entity against itself, its parent or its
children. Its methods are:

- `detect_discrete_collision(entity_id)` returns a `DiscreteCollision` for
  every overlapping collider. Each one carries the contact `position`, the
  `delta` that resolves the overlap and the surface `normal`.
- `detect_continuous_collision(entity_id, axis, direction)` returns a
  `ContinuousCollision` with the nearest blocking collider along the axis and
  the `space_left` to it. If nothing blocks, `opposite_id` is `None`.
- `detect_collision(entity_id)` combines both, following the entity's
  `PhysicsComponent.collision_detection`, and returns `Collision` records.
- `has_trigger_exception(tags_1, tags_2)` tells whether an exception applies
  between two sets of tags.
- `get_info()` returns a copy of the `CollisionDetectorInfo` counters, which
  count how many pairs were examined. `invalidate_info()` resets them.

## What this package does not do

This package does not include an entity manager. The collision detector has
to be given one by the caller.

It has no window, rendering, sound, input handling or game loop. The
components only hold data, and `TextureComponent` stores whatever texture
object it is given.
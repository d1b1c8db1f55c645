# bgengine

A small, deterministic simulation core for real-time strategy games. Gameplay
arithmetic runs on 48.16 fixed-point numbers, so the same inputs give the
same results on any machine. The package is a library: it has no
dependencies beyond the standard library.

## Modules

- `bgengine.fixed` – `Scalar`, a fixed-point number stored as a signed
  64-bit raw value with 16 fractional bits. It supports `+`, `-`, `*`, `/`,
  unary minus, `abs()` and ordering. Multiplication and division truncate
  toward zero. Results outside the 64-bit range raise `OverflowError`, and
  division by zero raises `ZeroDivisionError`. Helpers: `from_raw`,
  `from_int`, `zero`, `one`, `half`, `is_zero`, `min`, `max`,
  `trunc_to_int`, `to_float`.
- `bgengine.vec2` – `Vec2`, an immutable 2D vector of `Scalar`s with
  `dot`, `length_sq` and `distance_sq`.
- `bgengine.fixmath` – `sqrt` (floor square root, zero for non-positive
  input), `length`, `distance` and `normalize_approx`.
- `bgengine.hashing` – `Hasher64`, an incremental 64-bit FNV-1a hasher that
  takes bytes and little-endian integers of fixed width (`add_u8` …
  `add_i64`).
- `bgengine.state_hash` – `StateHash`, a typed front end to `Hasher64` that
  adds `add_bool`, `add_scalar` and `add_vec2`.
- `bgengine.rng` – `Random`, a seedable PCG32 generator with `next_u32` and
  `next_below(bound)`, which is unbiased.
- `bgengine.entity`, `bgengine.entity_manager` – generational `Entity`
  handles. `EntityManager` queues destruction and applies it in
  `process_deferred_destroy()`. It reuses freed slots lowest index first,
  with the generation bumped.
- `bgengine.component_storage` – `ComponentStorage`, one component per
  entity slot, built from a factory. `add` on an entity that is not alive
  raises `ValueError`.
- `bgengine.world_types` – `GridCoord`, `GridSize`, `CellIndex`, `CellType`,
  `WorldRect`, and conversions between cells and world positions
  (`world_to_cell`, `cell_to_world_center`, `cell_to_world_min`,
  `cell_to_world_max`, `is_inside`, `flatten`).
- `bgengine.grid`, `bgengine.world_map` – a row-major `Grid` of cell types,
  and `Map`, which describes walkable and blocked terrain. Access outside the
  grid raises `IndexError`. `Map` treats cells outside the map as blocked.
- `bgengine.occupancy` – `Occupancy`, which holds static blocking and a
  dynamic occupant for each cell. Writes outside the grid are ignored.
- `bgengine.path_types`, `bgengine.pathfinder` – `Pathfinder.find_path`
  runs a four-way A* search and returns a `PathQueryResult` with a
  `PathQueryStatus` and a `Path` from start to goal.
  - Ties are broken by lowest f, then lowest h, then lowest cell index.
  - Occupied cells are avoided, except for the goal itself.
- `bgengine.movement_types`, `bgengine.arrival`, `bgengine.separation`,
  `bgengine.movement_system` – steering for units:
  - `MovementState` holds a unit's movement.
  - Arrival steering heads for the target and slows down inside
    `slow_down_distance`.
  - Separation pushes overlapping units apart.
  - `tick_movement` integrates one tick and snaps a unit onto its target once
    it is within `stop_distance`.
- `bgengine.command_queue`, `bgengine.tick_clock`, `bgengine.simulation` –
  `Simulation.tick()` does four things in order:
  1. Promotes the commands queued with `enqueue_command` to the current
     commands.
  2. Applies deferred entity destruction.
  3. Refreshes the state hash.
  4. Advances the tick counter.
- `bgengine.recorded_command`, `bgengine.recorder`, `bgengine.playback` –
  `CommandRecorder` logs move commands with their tick. `CommandPlayback`
  issues them again at the same ticks to any object that has a
  `queue_move_command(entity, target_position)` method.
- `bgengine.snapshot` – `Snapshot`, a plain data record of one frame's
  simulation, selection and replay state.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Path finding:

```python
from bgengine.world_map import Map
from bgengine.world_types import GridCoord, GridSize
from bgengine.occupancy import Occupancy
from bgengine.pathfinder import Pathfinder

size = GridSize(10, 10)
grid_map = Map(size)
grid_map.set_blocked(GridCoord(1, 0), True)

result = Pathfinder().find_path(grid_map, Occupancy(size), GridCoord(0, 0), GridCoord(3, 0))
if result.succeeded():
    print([(step.coord.x, step.coord.y) for step in result.path.steps])
```

Fixed-point arithmetic and movement:

```python
from bgengine.fixed import Scalar
from bgengine.vec2 import Vec2
from bgengine.movement_types import ArrivalSettings, MovementState, MovementTarget
from bgengine.movement_system import tick_movement

print((Scalar.from_int(3) / Scalar.from_int(2)).to_float())  # 1.5

unit = MovementState(
    target=MovementTarget(Vec2(Scalar.from_int(5), Scalar.zero())),
    max_speed=Scalar.one(),
    has_target=True,
)
dt = Scalar.one() / Scalar.from_int(25)
tick_movement(unit, ArrivalSettings(), Vec2.zero(), dt)
print(unit.position.x.to_float())
```

Recording and replaying move commands:

```python
from bgengine.entity import Entity
from bgengine.fixed import Scalar
from bgengine.vec2 import Vec2
from bgengine.recorder import CommandRecorder
from bgengine.playback import CommandPlayback

class Sink:
    def __init__(self):
        self.orders = []

    def queue_move_command(self, entity, target_position):
        self.orders.append((entity, target_position))

recorder = CommandRecorder()
recorder.record_move(3, Entity(0, 0), Vec2(Scalar.from_int(4), Scalar.from_int(2)))

playback = CommandPlayback()
playback.set_commands(recorder.commands())
sink = Sink()
for tick in range(5):
    playback.playback_tick(tick, sink)
print(len(sink.orders), playback.is_finished())  # 1 True
```

## Determinism

`Simulation.current_state_hash()` covers two things: the tick number and the
liveness of every entity slot. Two runs that create and destroy the same
entities on the same ticks therefore produce identical hashes. Unit positions
are not part of this hash. To check movement state, feed it to a `StateHash`
with `add_vec2` and `add_scalar`.

## What this package does not do

These are building blocks only. The package does not include:

- a game session that owns units and turns move orders into movement;
- a window, renderer or input handling for the debug view;
- a command-line program.

`CommandPlayback` and `Snapshot` are meant to be driven by code that you
supply for these parts.
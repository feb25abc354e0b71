# rdtcore

Data types for robot motion control, written in plain Python with no
third-party dependencies:

- **Unit types** in `rdtcore.units` and `rdtcore.rates`.
- **Robot data types** in `rdtcore.data_types`: joints, Cartesian poses, tool
  and base frames, modes and trajectory points.
- **A bounded ring-buffer queue** in `rdtcore.trajectory_queue`.
- **A demo command**, `rdtcore-demo`, which uses all of the above and prints
  the results.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Units

`rdtcore.units` defines the base class `Quantity` and the units `Radians`,
`Degrees`, `Meters` and `Millimeters`. `rdtcore.rates` adds `Seconds`,
`RadiansPerSecond`, `DegreesPerSecond`, `RadiansPerSecondSq`,
`DegreesPerSecondSq`, `MetersPerSecond`, `MillimetersPerSecond`,
`MetersPerSecondSq` and `MillimetersPerSecondSq`.

```python
from rdtcore.units import Degrees, Meters, Radians
from rdtcore.rates import MetersPerSecond, Seconds

angle = Degrees(90.0).to_radians()
print(angle.to_string(4))                 # 1.5708 rad
print(Meters(1.5).to_millimeters())       # 1500.0 mm

distance = MetersPerSecond(1.5) * Seconds(2.0)   # Meters(3.0)
speed = Meters(10.0) / Seconds(4.0)              # MetersPerSecond(2.5)
print(Radians(4.0).normalized())                 # -2.2832 rad
```

These rules hold for every quantity:

- A quantity is immutable, and its raw number is in `.value`. `float(q)` also
  returns it.
- Quantities of the same unit can be added, subtracted and compared. You can
  multiply or divide any quantity by a plain number. If you mix two different
  units, Python raises `TypeError`. The exceptions are the time relations
  listed below.
- Two quantities count as equal when their values differ by less than `1e-9`
  (`rdtcore.units.DEFAULT_EPSILON`). Quantities cannot be hashed.
- If you divide by a number whose absolute value is below `1e-9`, the result is
  a `ZeroDivisionError`.
- `abs()` returns the absolute value in the same unit. `str()` and
  `to_string(precision)` format the value with a fixed number of decimals and
  add the unit suffix. Each unit has its own default number of decimals.

Conversions:

| From | Method | To |
|---|---|---|
| `Radians` | `to_degrees()` | `Degrees` |
| `Degrees` | `to_radians()` | `Radians` |
| `Meters` | `to_millimeters()` | `Millimeters` |
| `Millimeters` | `to_meters()` | `Meters` |
| `RadiansPerSecond` | `to_degrees_per_second()` | `DegreesPerSecond` |
| `DegreesPerSecond` | `to_radians_per_second()` | `RadiansPerSecond` |
| `MetersPerSecond` | `to_millimeters_per_second()` | `MillimetersPerSecond` |
| `MillimetersPerSecond` | `to_meters_per_second()` | `MetersPerSecond` |

`Radians.normalized()` wraps an angle into the range [−π, π).
`Degrees.normalized()` wraps it into [−180, 180).

Time relations:

- Dividing by `Seconds`:
  - `Meters` gives `MetersPerSecond`.
  - `Radians` gives `RadiansPerSecond`.
  - `MetersPerSecond` gives `MetersPerSecondSq`.
  - `RadiansPerSecond` gives `RadiansPerSecondSq`.
- Multiplying by `Seconds`, in either order, reverses each of these.

## Robot data types

`rdtcore.data_types` holds the following. `ROBOT_AXES_COUNT` is 6.

- **Enums**, all of them `IntEnum`:
  - `RobotMode`
  - `AxisId` (`A1` to `A6`)
  - `WaypointDataType`
  - `RTState`
  - `MotionType`

  `str()` of a `RobotMode` or an `RTState` gives its display name, such as
  `"EStop"` or `"Moving"`.
- **Axis helpers**:
  - `axis_id_name(axis_id)` returns `"A1"` to `"A6"`, and raises `ValueError`
    for an invalid id.
  - `axis_id_from_int(i)` raises `IndexError` when `i` is out of range.
  - `axis_id_to_int(axis_id)` raises `IndexError` for an invalid id.
- **`Axis`**: angle, velocity, acceleration, torque, brake and servo flags.
  `describe()` gives a readable summary. Equality is tolerant on the unit
  fields and on the torque.
- **`AxisSet`**: six `Axis` objects.
  - Build it with `AxisSet()` or `AxisSet(angles)`. `angles` must hold
    exactly six `Radians`, or the result is a `ValueError`.
  - Index it with an `AxisId` or with an integer from 0 to 5. An index out of
    range raises `IndexError`, and any other key type raises `TypeError`.
  - It supports `len()`, iteration and `==`.
  - Methods:
    - `to_joint_pose_string(precision_deg=1)` returns the angles in degrees.
    - `to_angle_list()` returns the angles.
    - `from_angle_list(angles)` replaces only the angles.
- **`CartPose`**: `x`, `y` and `z` in `Meters`, and `rx`, `ry` and `rz` in
  `Radians`.
  - `describe()` shows the angles in degrees.
  - `get_value_at(index)` and `set_value_at(index, raw_value)` read and write
    the raw values by index 0 to 5. An index out of range raises `IndexError`.
- **`ToolFrame`, `BaseFrame`**: a name and a `CartPose` transform. You can
  pass them as `(name, transform)` or as `(transform, name)`. An empty name
  falls back to `"DefaultTool"` or `"DefaultBase"`.
- **`Timed`**: a value with a timestamp. `Timed.stamp(data)` records
  `time.monotonic()` as the timestamp.
- **`SystemState`**, **`RobotCommandFrame`**, **`RobotFeedbackFrame`**,
  **`TrajectoryPointHeader`** and **`TrajectoryPoint`**: dataclasses with
  defaults for every field.

```python
from rdtcore.data_types import AxisId, AxisSet, CartPose, ToolFrame, TrajectoryPoint
from rdtcore.units import Meters, Radians

joints = AxisSet([Radians(0.1 * i) for i in range(6)])
joints[AxisId.A1].servo_enabled = True
print(joints.to_joint_pose_string(2))

pose = CartPose()
pose.set_value_at(1, 3.0)        # y = 3.0 m
print(pose.get_value_at(1))      # 3.0
print(pose.describe())

point = TrajectoryPoint()
point.header.tool = ToolFrame("Gripper", CartPose(z=Meters(0.1)))
point.command.joint_target.from_angle_list(joints.to_angle_list())
```

## Trajectory queue

`TrajectoryQueue(capacity=256)` is a FIFO ring buffer of fixed size. It is
meant for one producer thread and one consumer thread, and a lock guards
every operation.

- `capacity` must be a power of two, or the result is a `ValueError`.
- The queue always keeps one slot free, so it holds at most `capacity - 1`
  items.

```python
from rdtcore.trajectory_queue import TrajectoryQueue

queue = TrajectoryQueue(4)
queue.try_push("a")              # True; returns False when the queue is full
queue.try_peek()                 # a deep copy of "a", or None when empty
queue.try_pop()                  # "a", or None when empty
len(queue), queue.is_empty()     # (0, True)
queue.clear()
```

`try_pop()` and `try_peek()` return `None` when the queue is empty. For that
reason, do not push `None` as an item.

## Demo command

```
rdtcore-demo
```

This command prints a walk-through of the unit arithmetic, an `AxisSet` and a
`CartPose`. It exits with status 0. If an unexpected error occurs, it reports
the error on standard error and exits with status 1. The only option it takes
is `--help`.

## What this package does not do

This package only provides data types and a queue. It has no kinematics, no
trajectory planning or interpolation, and no motion controller. It cannot
connect to a robot, a simulator or any hardware. It has no graphical
interface, and it does not read or write files.
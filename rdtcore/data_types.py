"""Core robot motion data types: modes, axes, poses, frames and trajectory points."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Generic, Iterator, Sequence, TypeVar

from .rates import RadiansPerSecond, RadiansPerSecondSq, Seconds
from .units import DEFAULT_EPSILON, Meters, Radians

ROBOT_AXES_COUNT = 6

T = TypeVar("T")


class RobotMode(IntEnum):
    """High-level operating mode of the robot."""

    IDLE = 0
    RUNNING = 1
    PAUSED = 2
    ESTOP = 3
    ERROR = 4
    INITIALIZING = 5
    HOMING = 6
    JOGGING = 7

    def __str__(self) -> str:
        return _ROBOT_MODE_LABELS[self]


_ROBOT_MODE_LABELS = {
    RobotMode.IDLE: "Idle",
    RobotMode.RUNNING: "Running",
    RobotMode.PAUSED: "Paused",
    RobotMode.ESTOP: "EStop",
    RobotMode.ERROR: "Error",
    RobotMode.INITIALIZING: "Initializing",
    RobotMode.HOMING: "Homing",
    RobotMode.JOGGING: "Jogging",
}


@dataclass
class SystemState:
    """Mode of the robot together with a status message and error code."""

    mode: RobotMode = RobotMode.IDLE
    message: str = ""
    error_code: int = 0


class AxisId(IntEnum):
    """Identifier of one of the robot's six axes."""

    A1 = 0
    A2 = 1
    A3 = 2
    A4 = 3
    A5 = 4
    A6 = 5


def axis_id_name(axis_id: int) -> str:
    """Return the display name of an axis, such as ``"A1"``."""
    try:
        return AxisId(axis_id).name
    except ValueError:
        raise ValueError(f"Invalid AxisId for to_string: {axis_id}") from None


def axis_id_from_int(i: int) -> AxisId:
    """Convert a zero-based index to an ``AxisId``."""
    if i < 0 or i >= ROBOT_AXES_COUNT:
        raise IndexError(
            f"Int {i} out of range for AxisId. Max: {ROBOT_AXES_COUNT - 1}"
        )
    return AxisId(i)


def axis_id_to_int(axis_id: int) -> int:
    """Convert an ``AxisId`` to its zero-based index."""
    try:
        return int(AxisId(axis_id))
    except ValueError:
        raise IndexError(f"AxisId {axis_id} invalid for int conversion.") from None


@dataclass(eq=False)
class Axis:
    """State of a single joint."""

    angle: Radians = field(default_factory=Radians)
    velocity: RadiansPerSecond = field(default_factory=RadiansPerSecond)
    acceleration: RadiansPerSecondSq = field(default_factory=RadiansPerSecondSq)
    torque: float = 0.0
    brake_engaged: bool = False
    servo_enabled: bool = False

    def describe(self) -> str:
        """Human-readable summary with angles shown in degrees."""
        return (
            f"Ang: {self.angle.to_degrees()}"
            f", Vel: {self.velocity.to_degrees_per_second()}"
            f", Acc: {self.acceleration.value:g} rad/s^2"
            f", Trq: {self.torque:.2f} Nm"
            f", Brake: {'ON' if self.brake_engaged else 'OFF'}"
            f", Servo: {'ON' if self.servo_enabled else 'OFF'}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Axis):
            return NotImplemented
        return (
            self.angle == other.angle
            and self.velocity == other.velocity
            and self.acceleration == other.acceleration
            and abs(self.torque - other.torque) < DEFAULT_EPSILON
            and self.brake_engaged == other.brake_engaged
            and self.servo_enabled == other.servo_enabled
        )


def _checked_angles(angles: Sequence[Radians]) -> list[Radians]:
    angles = list(angles)
    if len(angles) != ROBOT_AXES_COUNT:
        raise ValueError(
            f"expected {ROBOT_AXES_COUNT} angles, got {len(angles)}"
        )
    return angles


class AxisSet:
    """The six axes of the robot, addressed by ``AxisId`` or integer index."""

    __slots__ = ("_axes",)

    def __init__(self, angles: Sequence[Radians] | None = None) -> None:
        self._axes = [Axis() for _ in range(ROBOT_AXES_COUNT)]
        if angles is not None:
            self.from_angle_list(angles)

    def __getitem__(self, key: int) -> Axis:
        if isinstance(key, AxisId):
            return self._axes[axis_id_to_int(key)]
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(f"AxisSet index must be AxisId or int, not {type(key).__name__}")
        if key < 0 or key >= ROBOT_AXES_COUNT:
            raise IndexError(f"AxisSet index out of range: {key}")
        return self._axes[key]

    def __len__(self) -> int:
        return ROBOT_AXES_COUNT

    def __iter__(self) -> Iterator[Axis]:
        return iter(self._axes)

    def to_joint_pose_string(self, precision_deg: int = 1) -> str:
        """Joint angles in degrees, formatted as ``A1=...; A2=...``."""
        return "; ".join(
            f"{axis_id.name}={axis.angle.to_degrees().to_string(precision_deg)}"
            for axis_id, axis in zip(AxisId, self._axes)
        )

    def to_angle_list(self) -> list[Radians]:
        """The joint angles in axis order."""
        return [axis.angle for axis in self._axes]

    def from_angle_list(self, angles: Sequence[Radians]) -> None:
        """Set every joint angle, leaving the other axis fields untouched."""
        for axis, angle in zip(self._axes, _checked_angles(angles)):
            axis.angle = angle

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AxisSet):
            return NotImplemented
        return all(a == b for a, b in zip(self._axes, other._axes))

    def __repr__(self) -> str:
        return f"AxisSet({self.to_joint_pose_string()})"


_CART_FIELDS = (
    ("x", Meters),
    ("y", Meters),
    ("z", Meters),
    ("rx", Radians),
    ("ry", Radians),
    ("rz", Radians),
)


@dataclass
class CartPose:
    """A Cartesian pose: position in metres and orientation in radians."""

    x: Meters = field(default_factory=Meters)
    y: Meters = field(default_factory=Meters)
    z: Meters = field(default_factory=Meters)
    rx: Radians = field(default_factory=Radians)
    ry: Radians = field(default_factory=Radians)
    rz: Radians = field(default_factory=Radians)

    def describe(self) -> str:
        """Human-readable summary with angles shown in degrees."""
        return (
            f"CartPose(X: {self.x}, Y: {self.y}, Z: {self.z}"
            f", Rx: {self.rx.to_degrees()}, Ry: {self.ry.to_degrees()}"
            f", Rz: {self.rz.to_degrees()})"
        )

    @staticmethod
    def _field_at(index: int, action: str) -> tuple[str, type]:
        if isinstance(index, bool) or not 0 <= index < len(_CART_FIELDS):
            raise IndexError(f"CartPose {action} index out of range: {index}")
        return _CART_FIELDS[index]

    def get_value_at(self, index: int) -> float:
        """Raw value of component ``index`` (x, y, z, rx, ry, rz)."""
        name, _ = self._field_at(index, "get_value_at")
        return getattr(self, name).value

    def set_value_at(self, index: int, raw_value: float) -> None:
        """Set component ``index`` from a raw value in metres or radians."""
        name, unit = self._field_at(index, "set_value_at")
        setattr(self, name, unit(raw_value))


@dataclass
class Timed(Generic[T]):
    """A value paired with a monotonic timestamp in seconds."""

    data: T
    timestamp: float = 0.0

    @classmethod
    def stamp(cls, data: T) -> Timed[T]:
        """Wrap ``data`` with the current monotonic time."""
        return cls(data, time.monotonic())


@dataclass
class _Frame:
    DEFAULT_NAME: ClassVar[str] = ""

    name: str | CartPose = ""
    transform: CartPose | str = field(default_factory=CartPose)

    def __post_init__(self) -> None:
        # Accept the transform first and the name second, as well as the reverse.
        if isinstance(self.name, CartPose):
            pose = self.name
            self.name = self.transform if isinstance(self.transform, str) else ""
            self.transform = pose
        if not isinstance(self.transform, CartPose):
            raise TypeError("frame transform must be a CartPose")
        if not self.name:
            self.name = self.DEFAULT_NAME


@dataclass
class ToolFrame(_Frame):
    """Transform from the robot flange to the tool centre point."""

    DEFAULT_NAME: ClassVar[str] = "DefaultTool"
    name: str | CartPose = "DefaultTool"


@dataclass
class BaseFrame(_Frame):
    """Transform from the robot base to a user base frame."""

    DEFAULT_NAME: ClassVar[str] = "DefaultBase"
    name: str | CartPose = "DefaultBase"


class WaypointDataType(IntEnum):
    """Which part of a trajectory point carries the meaningful data."""

    NOTYPE = 0
    CARTESIAN_DOMINANT_CMD = 1
    JOINT_DOMINANT_CMD = 2
    JOINT_DOMINANT_FB = 3
    FULL_FB = 4


class RTState(IntEnum):
    """State of the real-time motion layer."""

    IDLE = 0
    INITIALIZING = 1
    MOVING = 2
    PAUSED = 3
    ERROR = 4

    def __str__(self) -> str:
        return self.name.capitalize()


class MotionType(IntEnum):
    """Kind of motion used to reach a trajectory point."""

    JOINT = 0
    PTP = 1
    LIN = 2
    SPLINE = 3
    CIRC = 4


@dataclass
class RobotCommandFrame:
    """Commanded targets for a trajectory point."""

    cartesian_target: CartPose = field(default_factory=CartPose)
    joint_target: AxisSet = field(default_factory=AxisSet)
    speed_ratio: float = 1.0
    acceleration_ratio: float = 1.0


@dataclass
class RobotFeedbackFrame:
    """Measured state reported back for a trajectory point."""

    cartesian_actual: CartPose = field(default_factory=CartPose)
    joint_actual: AxisSet = field(default_factory=AxisSet)
    current_speed_ratio: float = 0.0
    rt_state: RTState = RTState.IDLE
    target_reached: bool = False
    arrival_time: float = 0.0
    path_deviation: Meters = field(default_factory=Meters)


@dataclass
class TrajectoryPointHeader:
    """Metadata describing how a trajectory point is to be executed."""

    data_type: WaypointDataType = WaypointDataType.NOTYPE
    motion_type: MotionType = MotionType.JOINT
    use_blending: bool = False
    segment_duration: Seconds = field(default_factory=Seconds)
    tool: ToolFrame = field(default_factory=ToolFrame)
    base: BaseFrame = field(default_factory=BaseFrame)
    trajectory_id: int = 0
    sequence_index: int = 0
    is_target_reached_for_this_point: bool = False
    has_error_at_this_point: bool = False
    user_comment: str = ""


@dataclass
class TrajectoryPoint:
    """A single point of a trajectory: header, command and feedback."""

    header: TrajectoryPointHeader = field(default_factory=TrajectoryPointHeader)
    command: RobotCommandFrame = field(default_factory=RobotCommandFrame)
    feedback: RobotFeedbackFrame = field(default_factory=RobotFeedbackFrame)
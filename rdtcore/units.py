"""Strongly typed physical quantities: angles and linear distances."""

from __future__ import annotations

import math
from numbers import Real
from typing import TypeVar

PI = 3.1415926535897932384626433832795
TWO_PI = 2.0 * PI
DEFAULT_EPSILON = 1e-9

_Q = TypeVar("_Q", bound="Quantity")


def _is_scalar(obj: object) -> bool:
    return isinstance(obj, Real) and not isinstance(obj, bool)


class Quantity:
    """An immutable scalar value tagged with a physical unit.

    Quantities of the same unit add, subtract and compare; any quantity can be
    scaled by a plain number. Equality is tolerant to ``DEFAULT_EPSILON``.
    """

    __slots__ = ("_value",)

    SUFFIX = ""
    DEFAULT_PRECISION = 4

    def __init__(self, value: float = 0.0) -> None:
        self._value = float(value)

    @property
    def value(self) -> float:
        """The raw numeric value in this unit."""
        return self._value

    def abs(self: _Q) -> _Q:
        """Return the absolute value as the same unit."""
        return type(self)(abs(self._value))

    def to_string(self, precision: int | None = None) -> str:
        """Format with fixed precision followed by the unit suffix."""
        if precision is None:
            precision = self.DEFAULT_PRECISION
        return f"{self._value:.{precision}f}{self.SUFFIX}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __float__(self) -> float:
        return self._value

    def _same_unit(self, other: object) -> bool:
        return type(other) is type(self)

    def __neg__(self: _Q) -> _Q:
        return type(self)(-self._value)

    def __abs__(self: _Q) -> _Q:
        return self.abs()

    def __add__(self: _Q, other: object) -> _Q:
        if not self._same_unit(other):
            return NotImplemented
        return type(self)(self._value + other._value)  # type: ignore[attr-defined]

    def __sub__(self: _Q, other: object) -> _Q:
        if not self._same_unit(other):
            return NotImplemented
        return type(self)(self._value - other._value)  # type: ignore[attr-defined]

    def __mul__(self: _Q, scalar: object) -> _Q:
        if not _is_scalar(scalar):
            return NotImplemented
        return type(self)(self._value * float(scalar))  # type: ignore[arg-type]

    def __rmul__(self: _Q, scalar: object) -> _Q:
        if not _is_scalar(scalar):
            return NotImplemented
        return type(self)(float(scalar) * self._value)  # type: ignore[arg-type]

    def __truediv__(self: _Q, scalar: object) -> _Q:
        if not _is_scalar(scalar):
            return NotImplemented
        divisor = float(scalar)  # type: ignore[arg-type]
        if abs(divisor) < DEFAULT_EPSILON:
            raise ZeroDivisionError(f"division by zero in {type(self).__name__}")
        return type(self)(self._value / divisor)

    def __eq__(self, other: object) -> bool:
        if not self._same_unit(other):
            return NotImplemented
        return abs(self._value - other._value) < DEFAULT_EPSILON  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not self._same_unit(other):
            return NotImplemented
        return self._value < other._value and not self == other  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if not self._same_unit(other):
            return NotImplemented
        return self._value <= other._value or self == other  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if not self._same_unit(other):
            return NotImplemented
        return self._value > other._value and not self == other  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if not self._same_unit(other):
            return NotImplemented
        return self._value >= other._value or self == other  # type: ignore[attr-defined]


def _wrap(value: float, half_period: float) -> float:
    wrapped = math.fmod(value + half_period, 2.0 * half_period)
    if wrapped < 0:
        wrapped += 2.0 * half_period
    return wrapped - half_period


class Radians(Quantity):
    """An angle in radians."""

    __slots__ = ()
    SUFFIX = " rad"
    DEFAULT_PRECISION = 4

    def to_degrees(self) -> Degrees:
        return Degrees(self._value * (180.0 / PI))

    def normalized(self) -> Radians:
        """Wrap the angle into the range [-pi, pi)."""
        return Radians(_wrap(self._value, PI))


class Degrees(Quantity):
    """An angle in degrees."""

    __slots__ = ()
    SUFFIX = " deg"
    DEFAULT_PRECISION = 2

    def to_radians(self) -> Radians:
        return Radians(self._value * (PI / 180.0))

    def normalized(self) -> Degrees:
        """Wrap the angle into the range [-180, 180)."""
        return Degrees(_wrap(self._value, 180.0))


class Meters(Quantity):
    """A linear distance in metres."""

    __slots__ = ()
    SUFFIX = " m"
    DEFAULT_PRECISION = 4

    def to_millimeters(self) -> Millimeters:
        return Millimeters(self._value * 1000.0)


class Millimeters(Quantity):
    """A linear distance in millimetres."""

    __slots__ = ()
    SUFFIX = " mm"
    DEFAULT_PRECISION = 1

    def to_meters(self) -> Meters:
        return Meters(self._value / 1000.0)
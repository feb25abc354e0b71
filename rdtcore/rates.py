"""Time, velocity and acceleration quantities and their relations to distance and angle."""

from __future__ import annotations

from .units import DEFAULT_EPSILON, PI, Meters, Quantity, Radians


class _TimeIntegrable(Quantity):
    """A rate that gives the integrated quantity when multiplied by a duration."""

    __slots__ = ()

    def __mul__(self, other: object):
        if isinstance(other, Seconds):
            product_type = _TIME_PRODUCT.get(type(self))
            if product_type is not None:
                return product_type(self._value * other.value)
        return super().__mul__(other)

    def __rmul__(self, other: object):
        if isinstance(other, Seconds):
            product_type = _TIME_PRODUCT.get(type(self))
            if product_type is not None:
                return product_type(other.value * self._value)
        return super().__rmul__(other)


class Seconds(Quantity):
    """A duration in seconds."""

    __slots__ = ()
    SUFFIX = " s"
    DEFAULT_PRECISION = 3

    def __mul__(self, other: object):
        if isinstance(other, Quantity):
            product_type = _TIME_PRODUCT.get(type(other))
            if product_type is None:
                return NotImplemented
            return product_type(self._value * other.value)
        return super().__mul__(other)

    def __rtruediv__(self, other: object):
        """Divide a distance, angle or velocity by this duration."""
        quotient_type = _TIME_QUOTIENT.get(type(other))
        if quotient_type is None:
            return NotImplemented
        if abs(self._value) < DEFAULT_EPSILON:
            raise ZeroDivisionError(
                f"division by zero time for {quotient_type.__name__}"
            )
        return quotient_type(other.value / self._value)  # type: ignore[attr-defined]


class RadiansPerSecond(_TimeIntegrable):
    """An angular velocity in radians per second."""

    __slots__ = ()
    SUFFIX = " rad/s"
    DEFAULT_PRECISION = 3

    def to_degrees_per_second(self) -> DegreesPerSecond:
        return DegreesPerSecond(self._value * (180.0 / PI))


class DegreesPerSecond(Quantity):
    """An angular velocity in degrees per second."""

    __slots__ = ()
    SUFFIX = " deg/s"
    DEFAULT_PRECISION = 1

    def to_radians_per_second(self) -> RadiansPerSecond:
        return RadiansPerSecond(self._value * (PI / 180.0))


class RadiansPerSecondSq(_TimeIntegrable):
    """An angular acceleration in radians per second squared."""

    __slots__ = ()
    SUFFIX = " rad/s^2"
    DEFAULT_PRECISION = 3


class DegreesPerSecondSq(Quantity):
    """An angular acceleration in degrees per second squared."""

    __slots__ = ()
    SUFFIX = " deg/s^2"
    DEFAULT_PRECISION = 1


class MetersPerSecond(_TimeIntegrable):
    """A linear velocity in metres per second."""

    __slots__ = ()
    SUFFIX = " m/s"
    DEFAULT_PRECISION = 4

    def to_millimeters_per_second(self) -> MillimetersPerSecond:
        return MillimetersPerSecond(self._value * 1000.0)


class MillimetersPerSecond(Quantity):
    """A linear velocity in millimetres per second."""

    __slots__ = ()
    SUFFIX = " mm/s"
    DEFAULT_PRECISION = 1

    def to_meters_per_second(self) -> MetersPerSecond:
        return MetersPerSecond(self._value / 1000.0)


class MetersPerSecondSq(_TimeIntegrable):
    """A linear acceleration in metres per second squared."""

    __slots__ = ()
    SUFFIX = " m/s^2"
    DEFAULT_PRECISION = 4


class MillimetersPerSecondSq(Quantity):
    """A linear acceleration in millimetres per second squared."""

    __slots__ = ()
    SUFFIX = " mm/s^2"
    DEFAULT_PRECISION = 1


# quantity / Seconds -> rate
_TIME_QUOTIENT: dict[type, type] = {
    Meters: MetersPerSecond,
    Radians: RadiansPerSecond,
    MetersPerSecond: MetersPerSecondSq,
    RadiansPerSecond: RadiansPerSecondSq,
}

# rate * Seconds -> quantity
_TIME_PRODUCT: dict[type, type] = {
    MetersPerSecond: Meters,
    RadiansPerSecond: Radians,
    MetersPerSecondSq: MetersPerSecond,
    RadiansPerSecondSq: RadiansPerSecond,
}
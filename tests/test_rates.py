import pytest

from rdtcore.rates import (
    DegreesPerSecond,
    DegreesPerSecondSq,
    MetersPerSecond,
    MetersPerSecondSq,
    MillimetersPerSecond,
    MillimetersPerSecondSq,
    RadiansPerSecond,
    RadiansPerSecondSq,
    Seconds,
)
from rdtcore.units import Meters, Radians


def test_velocity_times_time_gives_distance():
    dist = MetersPerSecond(1.5) * Seconds(2.0)
    assert isinstance(dist, Meters)
    assert dist == Meters(3.0)


def test_time_times_velocity_is_commutative():
    v = MetersPerSecond(1.5)
    t = Seconds(2.0)
    assert t * v == v * t
    w = RadiansPerSecond(0.5)
    assert isinstance(t * w, Radians)
    assert t * w == w * t


def test_distance_divided_by_time_round_trip():
    v = Meters(10.0) / Seconds(4.0)
    assert isinstance(v, MetersPerSecond)
    assert v * Seconds(4.0) == Meters(10.0)


def test_angle_divided_by_time_round_trip():
    w = Radians(1.2) / Seconds(3.0)
    assert isinstance(w, RadiansPerSecond)
    assert w * Seconds(3.0) == Radians(1.2)


def test_velocity_divided_by_time_gives_acceleration():
    a = MetersPerSecond(6.0) / Seconds(2.0)
    assert isinstance(a, MetersPerSecondSq)
    assert a * Seconds(2.0) == MetersPerSecond(6.0)
    ang = RadiansPerSecond(6.0) / Seconds(2.0)
    assert isinstance(ang, RadiansPerSecondSq)
    assert Seconds(2.0) * ang == RadiansPerSecond(6.0)


@pytest.mark.parametrize("numerator", [Meters(1.0), Radians(1.0),
                                       MetersPerSecond(1.0), RadiansPerSecond(1.0)])
def test_division_by_zero_time_raises(numerator):
    with pytest.raises(ZeroDivisionError):
        numerator / Seconds(0.0)


def test_scalar_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Seconds(1.0) / 0.0
    with pytest.raises(ZeroDivisionError):
        DegreesPerSecondSq(1.0) / 0


def test_mismatched_units_do_not_combine():
    with pytest.raises(TypeError):
        Meters(1.0) + Seconds(1.0)
    with pytest.raises(TypeError):
        Radians(1.0) * Seconds(1.0)
    with pytest.raises(TypeError):
        Seconds(1.0) * Seconds(1.0)


def test_angular_velocity_conversion_round_trip():
    w = RadiansPerSecond(0.75)
    assert w.to_degrees_per_second().to_radians_per_second() == w
    assert w.to_degrees_per_second().value == pytest.approx(Radians(0.75).to_degrees().value)
    assert isinstance(DegreesPerSecond(30.0).to_radians_per_second(), RadiansPerSecond)


def test_linear_velocity_conversion_round_trip():
    v = MetersPerSecond(0.25)
    mm = v.to_millimeters_per_second()
    assert isinstance(mm, MillimetersPerSecond)
    assert mm.value == pytest.approx(Meters(0.25).to_millimeters().value)
    assert mm.to_meters_per_second() == v


def test_string_formatting():
    assert str(Seconds(2.0)) == "2.000 s"
    assert str(MetersPerSecond(1.5)) == "1.5000 m/s"
    assert RadiansPerSecondSq(1.0).to_string().endswith(" rad/s^2")
    assert MillimetersPerSecondSq(1.0).to_string().endswith(" mm/s^2")
    assert MetersPerSecondSq(1.0).to_string().endswith(" m/s^2")
    assert DegreesPerSecond(1.0).to_string().endswith(" deg/s")


def test_tolerant_comparisons():
    assert Seconds(1.0) == Seconds(1.0 + 1e-12)
    assert not Seconds(1.0) < Seconds(1.0 + 1e-12)
    assert Seconds(1.0) <= Seconds(1.0 + 1e-12)
    assert Seconds(0.5) < Seconds(1.0)
    assert -Seconds(2.0) == Seconds(-2.0)
    assert Seconds(-2.0).abs() == Seconds(2.0)


def test_same_unit_arithmetic_keeps_type():
    total = RadiansPerSecond(0.5) + RadiansPerSecond(0.25)
    assert isinstance(total, RadiansPerSecond)
    assert total - RadiansPerSecond(0.25) == RadiansPerSecond(0.5)
    scaled = 2 * MillimetersPerSecond(3.0)
    assert isinstance(scaled, MillimetersPerSecond)
    assert scaled / 2 == MillimetersPerSecond(3.0)
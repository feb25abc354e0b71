"""Command that exercises the unit and data types and prints the results."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .data_types import ROBOT_AXES_COUNT, AxisId, AxisSet, CartPose
from .rates import MetersPerSecond, RadiansPerSecond, RadiansPerSecondSq, Seconds
from .units import Degrees, Meters, Millimeters, Radians


def _show_unit_operations() -> None:
    print("\n--- Testing Units Operations ---")
    t = Seconds(2.0)
    v_m_s = MetersPerSecond(1.5)
    v_rad_s = RadiansPerSecond(0.5)

    dist = v_m_s * t
    angle_change = v_rad_s * t

    print(f"{v_m_s} * {t} = {dist}")
    print(f"{v_rad_s} * {t} = {angle_change} ({angle_change.to_degrees()})")

    v_calc = Meters(10.0) / Seconds(4.0)
    print(f"10.0_m / 4.0_s = {v_calc}")


def _show_axis_set() -> None:
    print("\n--- Testing Axis & AxisSet (Strict Units) ---")
    initial_angles = [
        Degrees(90.0).to_radians(),
        Degrees(45.0).to_radians(),
        Radians(0.1),
        -Degrees(30.0).to_radians(),
        Radians(0.0),
        Radians(1.0),
    ]
    joint_set = AxisSet(initial_angles)

    a1 = joint_set[AxisId.A1]
    a1.velocity = RadiansPerSecond(0.5)
    a1.acceleration = RadiansPerSecondSq(0.1)
    a1.servo_enabled = True
    joint_set[AxisId.A3].brake_engaged = True

    print(f"Axis A1: {a1.describe()}")
    print(f"Full AxisSet (degrees):\n{joint_set.to_joint_pose_string()}")

    angles = " ".join(f"{angle.value:g}" for angle in joint_set.to_angle_list())
    print(f"\nCurrent Angles Array (radians): {angles} ")

    joint_set.from_angle_list([Radians(0.1 * n) for n in range(1, ROBOT_AXES_COUNT + 1)])
    print(f"\nAxisSet after fromAngleArray (degrees):\n{joint_set.to_joint_pose_string(2)}")


def _show_cart_pose() -> None:
    print("\n--- Testing CartPose (Strict Units) ---")
    p1 = CartPose(
        x=Meters(1.0),
        y=Millimeters(2500.0).to_meters(),
        z=Meters(-0.5),
        rx=Degrees(10.0).to_radians(),
        ry=Radians(0.2),
        rz=Radians(0.3).normalized(),
    )
    print(f"Pose p1: {p1.describe()}")
    print(f"p1.x: {p1.x}, p1.rx (deg): {p1.rx.to_degrees()}")

    p1.set_value_at(1, 3.0)
    p1.set_value_at(4, Degrees(45.0).to_radians().value)
    print(f"Pose p1 after set_value_at: {p1.describe()}")
    print(f"p1.get_value_at(1) (y value): {p1.get_value_at(1):g}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration; return 0 on success and 1 on an unexpected error."""
    parser = argparse.ArgumentParser(
        prog="rdtcore-demo",
        description="Exercise the robot unit and data types and print the results.",
    )
    parser.parse_args(argv)

    print("Robot DataTypes Test Program (Strict Units - Phase 2)")
    print(f"ROBOT_AXES_COUNT: {ROBOT_AXES_COUNT}")

    try:
        d1 = Degrees(90.0)
        r1 = d1.to_radians()
        print(f"{d1} is {r1}")
        m1 = Meters(1.5)
        mm1 = m1.to_millimeters()
        print(f"{m1} is {mm1}")

        _show_unit_operations()
        _show_axis_set()
        _show_cart_pose()
    except Exception as exc:  # report anything unexpected and fail the run
        print(f"\n******\nUnhandled exception in main: {exc}\n******", file=sys.stderr)
        return 1

    print("\nAll tests completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
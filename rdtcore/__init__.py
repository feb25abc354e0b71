"""Typed physical units, robot motion data types, a bounded trajectory queue and a demo command."""

__version__ = "0.1.0"

__all__ = ["data_types", "demo", "rates", "trajectory_queue", "units"]
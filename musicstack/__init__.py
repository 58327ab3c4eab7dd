"""Music theory, rhythm, notation and planner data primitives."""

__version__ = "0.1.0"
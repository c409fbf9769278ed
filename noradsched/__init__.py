"""Time, coordinate, settings and schedule-file primitives for satellite pass schedules."""

__version__ = "0.1.0"
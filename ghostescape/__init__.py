"""A top-down arcade survival game on a small pygame scene-tree engine."""

__version__ = "0.1.0"
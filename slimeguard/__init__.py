"""A lane-defence game of elemental heroes against waves of slimes."""

__version__ = "0.1.0"
"""Helpers for .cub scene tools: texture lines, pixel images, timing and text utilities."""

__version__ = "0.1.0"
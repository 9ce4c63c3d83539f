"""Material system for panel primitives."""

from .material import Material

__all__ = ["Material"]

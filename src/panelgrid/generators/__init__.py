"""Geometry generators."""

from .base import MeshGenerator
from .primitives import BoxGenerator

__all__ = ["MeshGenerator", "BoxGenerator"]

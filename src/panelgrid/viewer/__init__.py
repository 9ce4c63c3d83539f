"""Viewer module for previewing panels."""

from .viewer import Viewer

__all__ = ["Viewer"]

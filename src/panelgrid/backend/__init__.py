"""Scene backends and interaction behaviors."""

from .base import PrimitiveShape, SceneBackend
from .behavior import ButtonBehavior, ButtonEvent
from .memory import MemoryBackend

__all__ = ["PrimitiveShape", "SceneBackend", "ButtonBehavior", "ButtonEvent", "MemoryBackend"]

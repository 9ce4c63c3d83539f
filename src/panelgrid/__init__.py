"""Panelgrid - gridded consoles of labels and buttons for 3D scenes."""

from .backend import ButtonBehavior, MemoryBackend, PrimitiveShape, SceneBackend
from .core import SceneNode, Transform
from .errors import BackendError, ConfigError, DestroyedError, PanelGridError, ValidationError
from .ui import (
    ConsoleLayout,
    ElementSize,
    GriddedConsole,
    PanelUI,
    Placeable,
    UIButton,
    UIElement,
    UILabel,
    label_height,
)

__all__ = [
    "BackendError",
    "ButtonBehavior",
    "ConfigError",
    "ConsoleLayout",
    "DestroyedError",
    "ElementSize",
    "GriddedConsole",
    "MemoryBackend",
    "PanelGridError",
    "PanelUI",
    "Placeable",
    "PrimitiveShape",
    "SceneBackend",
    "SceneNode",
    "Transform",
    "UIButton",
    "UIElement",
    "UILabel",
    "ValidationError",
    "label_height",
]

"""Panel widgets and the gridded console layout."""

from .button import UIButton
from .console import ConsoleLayout, GriddedConsole
from .element import Placeable, UIElement
from .factory import PanelUI
from .label import UILabel
from .sizing import ElementSize, label_height

__all__ = [
    "ConsoleLayout",
    "ElementSize",
    "GriddedConsole",
    "PanelUI",
    "Placeable",
    "UIButton",
    "UIElement",
    "UILabel",
    "label_height",
]

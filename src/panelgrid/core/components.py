"""Optional components carried by scene nodes."""

from dataclasses import dataclass
from enum import Enum


class TextAnchor(Enum):
    """Where a text block is pinned relative to its node's origin."""

    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    MIDDLE_LEFT = "middle_left"
    MIDDLE_CENTER = "middle_center"
    MIDDLE_RIGHT = "middle_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


class CollisionLayer(Enum):
    """Physics layers a collider can live on.

    HOLOGRAM colliders receive pointer interaction but do not block
    movement, which is what panel buttons want.
    """

    DEFAULT = "default"
    NAVIGATION = "navigation"
    HOLOGRAM = "hologram"
    UI = "ui"


@dataclass
class Text:
    """Text rendered by a node.

    Attributes:
        contents: The string displayed
        height: Glyph height in world units
        anchor: Alignment of the text block around the node origin
        color: RGB color, 0-1 range
    """

    contents: str = ""
    height: float = 1.0
    anchor: TextAnchor = TextAnchor.MIDDLE_CENTER
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)


@dataclass
class Collider:
    """Box collider attached to a primitive node."""

    layer: CollisionLayer = CollisionLayer.DEFAULT
    enabled: bool = True

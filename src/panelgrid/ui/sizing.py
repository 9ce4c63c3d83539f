"""Element footprints and text sizing."""

from dataclasses import dataclass

# Glyph height:width is around 2 for most proportional fonts
GLYPH_ASPECT = 2.0


@dataclass
class ElementSize:
    """Footprint of a panel element. height/width is the primary plane.

    Attributes:
        height: Extent along the panel's vertical axis
        width: Extent along the panel's horizontal axis
        depth: Thickness; layout ignores it, buttons use it for their box
    """

    height: float
    width: float
    depth: float | None = None


def label_height(text: str, size: ElementSize, fill_pct: float) -> float:
    """Glyph height that lets text fit inside a footprint.

    Estimates how many full-height characters fit across the width. Longer
    strings shrink proportionally, then the fill fraction is applied.

    Args:
        text: The string to display
        size: Footprint the text must fit within
        fill_pct: Fraction of the footprint height the glyphs should occupy

    Returns:
        Text height in world units
    """
    if size.height <= 0:
        return 0.0

    chars_to_hold = GLYPH_ASPECT * size.width / size.height

    ratio = 1.0
    if text and chars_to_hold < len(text):
        ratio = chars_to_hold / len(text)

    return size.height * ratio * fill_pct

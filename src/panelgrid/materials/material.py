"""Material class for primitive surface appearance."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..errors import ValidationError


@dataclass
class Material:
    """Flat-colored PBR material applied to primitive nodes.

    Attributes:
        name: Material identifier
        color: RGBA color, 0-1 range (RGB input gets alpha 1.0)
        roughness: Surface roughness (0=smooth/shiny, 1=rough/matte)
        metallic: Metalness (0=dielectric/non-metal, 1=metal)
    """

    name: str
    color: tuple[float, ...] = (1.0, 1.0, 1.0, 1.0)
    roughness: float = 0.5
    metallic: float = 0.0

    def __post_init__(self) -> None:
        color = tuple(float(c) for c in self.color)
        if len(color) == 3:
            color = (*color, 1.0)
        if len(color) != 4:
            raise ValidationError("color", self.color, "3 or 4 components")
        self.color = color

    def face_color(self) -> NDArray[np.uint8]:
        """RGBA color as 0-255 bytes, the form trimesh expects."""
        return (np.clip(np.asarray(self.color), 0.0, 1.0) * 255).astype(np.uint8)

"""Primitive geometry generators."""

from dataclasses import dataclass

import numpy as np

from ..core.mesh import Mesh
from .base import MeshGenerator


@dataclass
class BoxGenerator(MeshGenerator):
    """Generates a box mesh centered at the origin.

    Attributes:
        size_x: Width of the box (X axis)
        size_y: Thickness of the box (Y axis)
        size_z: Depth of the box (Z axis)
    """

    size_x: float = 1.0
    size_y: float = 1.0
    size_z: float = 1.0

    def generate(self) -> Mesh:
        hx, hy, hz = self.size_x / 2, self.size_y / 2, self.size_z / 2

        # Corners in CCW order when viewed from outside
        face_defs = [
            # Back face (-Z)
            ([-hx, -hy, -hz], [-hx, +hy, -hz], [+hx, +hy, -hz], [+hx, -hy, -hz]),
            # Front face (+Z)
            ([+hx, -hy, +hz], [+hx, +hy, +hz], [-hx, +hy, +hz], [-hx, -hy, +hz]),
            # Left face (-X)
            ([-hx, -hy, +hz], [-hx, +hy, +hz], [-hx, +hy, -hz], [-hx, -hy, -hz]),
            # Right face (+X)
            ([+hx, -hy, -hz], [+hx, +hy, -hz], [+hx, +hy, +hz], [+hx, -hy, +hz]),
            # Bottom face (-Y)
            ([-hx, -hy, +hz], [-hx, -hy, -hz], [+hx, -hy, -hz], [+hx, -hy, +hz]),
            # Top face (+Y)
            ([-hx, +hy, -hz], [-hx, +hy, +hz], [+hx, +hy, +hz], [+hx, +hy, -hz]),
        ]

        vertices = []
        faces = []
        for face_idx, corners in enumerate(face_defs):
            base_idx = face_idx * 4
            vertices.extend(corners)
            faces.append([base_idx, base_idx + 1, base_idx + 2])
            faces.append([base_idx, base_idx + 2, base_idx + 3])

        return Mesh(
            vertices=np.array(vertices, dtype=np.float64),
            faces=np.array(faces, dtype=np.int64),
        )

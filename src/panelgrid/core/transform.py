"""Transform class for local node placement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

import numpy as np
from numpy.typing import NDArray


@dataclass
class Transform:
    """Local translation, rotation, and scale of a scene node.

    Rotation is stored as Euler angles (XYZ order) in radians.
    """

    translation: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(3, dtype=np.float64)
    )
    rotation: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(3, dtype=np.float64)
    )
    scale: NDArray[np.float64] = field(
        default_factory=lambda: np.ones(3, dtype=np.float64)
    )

    def __post_init__(self) -> None:
        self.translation = np.asarray(self.translation, dtype=np.float64).copy()
        self.rotation = np.asarray(self.rotation, dtype=np.float64).copy()
        self.scale = np.asarray(self.scale, dtype=np.float64).copy()

    @classmethod
    def from_euler_degrees(
        cls,
        position: tuple[float, float, float] = (0.0, 0.0, 0.0),
        rotation: tuple[float, float, float] = (0.0, 0.0, 0.0),
    ) -> Self:
        """Create a transform from a position and XYZ Euler angles in degrees."""
        return cls(
            translation=np.asarray(position, dtype=np.float64),
            rotation=np.deg2rad(np.asarray(rotation, dtype=np.float64)),
        )

    def to_matrix(self) -> NDArray[np.float64]:
        """Convert to a 4x4 transformation matrix.

        Order: Scale -> Rotate -> Translate
        """
        s = np.diag([*self.scale, 1.0])

        rx, ry, rz = self.rotation

        cos_x, sin_x = np.cos(rx), np.sin(rx)
        cos_y, sin_y = np.cos(ry), np.sin(ry)
        cos_z, sin_z = np.cos(rz), np.sin(rz)

        rot_x = np.array([
            [1, 0, 0, 0],
            [0, cos_x, -sin_x, 0],
            [0, sin_x, cos_x, 0],
            [0, 0, 0, 1],
        ], dtype=np.float64)

        rot_y = np.array([
            [cos_y, 0, sin_y, 0],
            [0, 1, 0, 0],
            [-sin_y, 0, cos_y, 0],
            [0, 0, 0, 1],
        ], dtype=np.float64)

        rot_z = np.array([
            [cos_z, -sin_z, 0, 0],
            [sin_z, cos_z, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ], dtype=np.float64)

        # Z * Y * X for XYZ Euler
        r = rot_z @ rot_y @ rot_x

        t = np.eye(4, dtype=np.float64)
        t[:3, 3] = self.translation

        return t @ r @ s

    def copy(self) -> Self:
        """Create a deep copy of this transform."""
        return type(self)(
            translation=self.translation.copy(),
            rotation=self.rotation.copy(),
            scale=self.scale.copy(),
        )

    @staticmethod
    def identity() -> Transform:
        """Create an identity transform."""
        return Transform()

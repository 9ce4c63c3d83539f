"""Mesh class for primitive geometry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    import trimesh


class Mesh:
    """Container for mesh geometry data.

    Stores vertices and triangle faces as numpy arrays and converts to
    trimesh for preview and export.
    """

    def __init__(
        self,
        vertices: NDArray[np.float64],
        faces: NDArray[np.int64],
    ) -> None:
        """Create a mesh from geometry data.

        Args:
            vertices: Nx3 array of vertex positions
            faces: Mx3 array of triangle indices
        """
        self.vertices = np.asarray(vertices, dtype=np.float64)
        self.faces = np.asarray(faces, dtype=np.int64)

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the mesh."""
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        """Number of faces (triangles) in the mesh."""
        return len(self.faces)

    @property
    def extents(self) -> NDArray[np.float64]:
        """Axis-aligned size of the mesh."""
        if self.vertex_count == 0:
            return np.zeros(3, dtype=np.float64)
        return self.vertices.max(axis=0) - self.vertices.min(axis=0)

    def to_trimesh(self) -> trimesh.Trimesh:
        """Convert to a trimesh.Trimesh object for preview/export."""
        import trimesh as tm

        return tm.Trimesh(
            vertices=self.vertices,
            faces=self.faces,
            process=False,  # Don't modify our geometry
        )

    def transform(self, matrix: NDArray[np.float64]) -> Mesh:
        """Apply a 4x4 transformation matrix, returning a new mesh.

        Args:
            matrix: 4x4 transformation matrix

        Returns:
            New Mesh with transformed vertices
        """
        ones = np.ones((len(self.vertices), 1))
        homogeneous = np.hstack([self.vertices, ones])
        transformed = (matrix @ homogeneous.T).T

        return Mesh(vertices=transformed[:, :3], faces=self.faces.copy())

"""Preview and export of panel scenes using trimesh."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import trimesh

from ..core.node import SceneNode

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


class Viewer:
    """Builds a trimesh scene from a node hierarchy.

    Only nodes with geometry (button boxes) show up; text is a host-side
    feature and has no mesh here.
    """

    def __init__(
        self,
        root: SceneNode,
        color: NDArray[np.float64] | tuple[float, ...] | None = None,
    ) -> None:
        """Initialize the viewer with a scene.

        Args:
            root: The root SceneNode to display
            color: Default RGB(A) color for nodes without a material
        """
        self._scene = trimesh.Scene()
        self._root = root
        self._color = color
        self._add_scene_node(root)

    def _add_scene_node(self, node: SceneNode) -> list[str]:
        names = []

        for scene_node, world_mesh in node.iter_meshes():
            if not scene_node.alive:
                continue

            # Hierarchy path keeps names unique
            path_parts = []
            current = scene_node
            while current is not None:
                path_parts.append(f"{current.name}#{current.id}" if current.id is not None else current.name)
                current = current.parent
            unique_name = "/".join(reversed(path_parts))

            tm_mesh = world_mesh.to_trimesh()

            if scene_node.material is not None:
                tm_mesh.visual.face_colors = scene_node.material.face_color()
            elif self._color is not None:
                color_array = np.asarray(self._color, dtype=np.float64)
                if len(color_array) == 3:
                    color_array = np.append(color_array, 1.0)
                tm_mesh.visual.face_colors = (color_array * 255).astype(np.uint8)

            self._scene.add_geometry(tm_mesh, node_name=unique_name, geom_name=unique_name)
            names.append(unique_name)

        return names

    @property
    def scene(self) -> trimesh.Scene:
        """Get the underlying trimesh Scene."""
        return self._scene

    def export(self, path: str | Path) -> Path:
        """Write the scene to a file; format follows the suffix (.glb, .obj, ...)."""
        path = Path(path)
        self._scene.export(str(path))
        logger.info("Exported %d mesh(es) to %s", len(self._scene.geometry), path)
        return path

    def show(self, **kwargs) -> None:
        """Display the scene in an interactive viewer window.

        Args:
            **kwargs: Additional arguments passed to trimesh.Scene.show()
        """
        if len(self._scene.geometry) == 0:
            logger.warning("No geometry to display")
            return

        self._scene.show(**kwargs)

"""SceneNode class for the panel scene hierarchy."""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Iterator, TypeVar

import numpy as np
from numpy.typing import NDArray

from ..errors import DestroyedError
from .components import Collider, Text
from .mesh import Mesh
from .transform import Transform

if TYPE_CHECKING:
    from ..backend.base import SceneBackend
    from ..materials.material import Material

logger = logging.getLogger(__name__)

B = TypeVar("B")


class SceneNode:
    """A visual node in the scene hierarchy.

    Each node has a local transform and can carry a mesh, text, collider,
    material and interaction behavior. Child transforms are relative to
    their parent. Nodes are handed out by a scene backend; creation on the
    host completes later, which is signalled through created().

    A bare node is itself placeable: it exposes parent, transform and
    destroy() just like the composite UI elements do.

    Example:
        panel = SceneNode("panel")
        knob = panel.add_child(SceneNode("knob", mesh=knob_mesh))
        knob.transform.translation = np.array([0.0, 0.0, -0.1])
    """

    def __init__(
        self,
        name: str,
        transform: Transform | None = None,
        mesh: Mesh | None = None,
        text: Text | None = None,
        node_id: int | None = None,
        backend: SceneBackend | None = None,
    ) -> None:
        self.name = name
        self.transform = transform if transform is not None else Transform()
        self.mesh = mesh
        self.text = text
        self.id = node_id
        self.material: Material | None = None
        self.collider: Collider | None = None
        self.behavior: Any = None
        self.children: list[SceneNode] = []
        self._parent: SceneNode | None = None
        self._backend = backend
        self._alive = True
        self._created: Future[SceneNode] = Future()

    @property
    def anchor(self) -> SceneNode:
        """The node that carries this element's transform (itself)."""
        return self

    @property
    def parent(self) -> SceneNode | None:
        """The node this one is attached under."""
        return self._parent

    @parent.setter
    def parent(self, parent: Any) -> None:
        if not self._alive and parent is not None:
            raise DestroyedError(f"node {self.name!r}")
        # Accepts any placeable; attach under its anchor node
        new_parent = parent.anchor if parent is not None else None
        if new_parent is self._parent:
            return
        if self._parent is not None and self in self._parent.children:
            self._parent.children.remove(self)
        self._parent = new_parent
        if new_parent is not None:
            new_parent.children.append(self)

    @property
    def alive(self) -> bool:
        """False once destroy() has been called."""
        return self._alive

    def created(self) -> Future[SceneNode]:
        """Future resolved when the backend confirms this node exists."""
        return self._created

    def add_child(self, node: SceneNode) -> SceneNode:
        """Add a child node.

        Args:
            node: The node to add as a child

        Returns:
            The added node (for chaining)
        """
        node.parent = self
        return node

    def remove_child(self, node: SceneNode) -> bool:
        """Detach a child node.

        Returns:
            True if the node was found and detached
        """
        if node in self.children:
            node.parent = None
            return True
        return False

    def set_behavior(self, behavior_type: type[B]) -> B:
        """Attach a behavior of the given type, reusing an existing one."""
        if not isinstance(self.behavior, behavior_type):
            self.behavior = behavior_type(self)
        return self.behavior

    def world_transform(self) -> NDArray[np.float64]:
        """Compute the world transformation matrix.

        Returns:
            4x4 transformation matrix in world space
        """
        if self._parent is None:
            return self.transform.to_matrix()
        return self._parent.world_transform() @ self.transform.to_matrix()

    def world_position(self) -> NDArray[np.float64]:
        """Origin of this node in world space."""
        return self.world_transform()[:3, 3].copy()

    def world_mesh(self) -> Mesh | None:
        """Get the mesh transformed to world space."""
        if self.mesh is None:
            return None
        return self.mesh.transform(self.world_transform())

    def iter_nodes(self, include_self: bool = True) -> Iterator[SceneNode]:
        """Iterate over this node and all descendants (depth-first)."""
        if include_self:
            yield self
        for child in self.children:
            yield from child.iter_nodes(include_self=True)

    def iter_meshes(self) -> Iterator[tuple[SceneNode, Mesh]]:
        """Iterate over all nodes with meshes, yielding world-space meshes."""
        for node in self.iter_nodes():
            world_mesh = node.world_mesh()
            if world_mesh is not None:
                yield node, world_mesh

    def find(self, name: str) -> SceneNode | None:
        """Find the first descendant node with the given name."""
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    @property
    def depth(self) -> int:
        """Get the depth of this node in the hierarchy (root = 0)."""
        if self._parent is None:
            return 0
        return self._parent.depth + 1

    @property
    def root(self) -> SceneNode:
        """Get the root node of this hierarchy."""
        if self._parent is None:
            return self
        return self._parent.root

    def destroy(self) -> None:
        """Destroy this node and every descendant.

        Safe to call more than once. A creation that has not been
        confirmed yet is cancelled.
        """
        if not self._alive:
            return
        self._alive = False
        self._created.cancel()

        for child in list(self.children):
            child.destroy()

        self.parent = None
        self.behavior = None
        if self._backend is not None:
            self._backend.release(self)
        logger.debug("Destroyed node %s (%r)", self.id, self.name)

    def __repr__(self) -> str:
        mesh_str = f", mesh={self.mesh.face_count}f" if self.mesh else ""
        text_str = f", text={self.text.contents!r}" if self.text else ""
        children_str = f", children={len(self.children)}" if self.children else ""
        return f"SceneNode({self.name!r}{mesh_str}{text_str}{children_str})"

"""In-memory scene backend.

Stands in for a live host session: it builds SceneNode objects, hands out
ids, and holds creation confirmations until the host pumps them with
confirm(). Useful for headless tools, previews and tests.
"""

from __future__ import annotations

import itertools
import logging
from collections import deque

from ..core.components import Collider, Text
from ..core.node import SceneNode
from ..core.transform import Transform
from ..errors import BackendError, ValidationError
from ..generators.base import MeshGenerator
from ..generators.primitives import BoxGenerator
from ..materials.material import Material
from .base import PrimitiveShape

logger = logging.getLogger(__name__)


# Registry of available primitive generators
PRIMITIVE_REGISTRY: dict[PrimitiveShape, type[MeshGenerator]] = {
    PrimitiveShape.BOX: BoxGenerator,
}


class MemoryBackend:
    """Scene backend that keeps every node in process memory.

    Args:
        auto_confirm: Confirm creations immediately instead of waiting
            for confirm().
    """

    def __init__(self, auto_confirm: bool = False) -> None:
        self.auto_confirm = auto_confirm
        self.nodes: dict[int, SceneNode] = {}
        self.released: list[int] = []
        self.materials: dict[str, Material] = {}
        self._ids = itertools.count(1)
        self._pending: deque[SceneNode] = deque()

    @property
    def pending_count(self) -> int:
        """Number of creations still waiting for confirmation."""
        return sum(1 for node in self._pending if not node.created().done())

    def create_node(
        self,
        name: str | None = None,
        parent: SceneNode | None = None,
        text: Text | None = None,
        transform: Transform | None = None,
    ) -> SceneNode:
        node_id = next(self._ids)
        node = SceneNode(
            name=name or f"node_{node_id}",
            transform=transform,
            text=text,
            node_id=node_id,
            backend=self,
        )
        return self._register(node, parent)

    def create_primitive(
        self,
        shape: PrimitiveShape,
        dimensions: tuple[float, float, float],
        *,
        add_collider: bool = False,
        name: str | None = None,
        parent: SceneNode | None = None,
        transform: Transform | None = None,
    ) -> SceneNode:
        generator_cls = PRIMITIVE_REGISTRY.get(shape)
        if generator_cls is None:
            raise ValidationError("shape", shape, f"one of {[s.value for s in PRIMITIVE_REGISTRY]}")
        if any(d < 0 for d in dimensions):
            raise ValidationError("dimensions", dimensions, "non-negative extents")

        node_id = next(self._ids)
        node = SceneNode(
            name=name or f"{shape.value}_{node_id}",
            transform=transform,
            mesh=generator_cls(*dimensions).generate(),
            node_id=node_id,
            backend=self,
        )
        if add_collider:
            node.collider = Collider()
        return self._register(node, parent)

    def create_material(self, name: str, color: tuple[float, ...]) -> Material:
        material = self.materials.get(name)
        if material is None:
            material = Material(name=name, color=color)
            self.materials[name] = material
        return material

    def release(self, node: SceneNode) -> None:
        if node.id is None or node.id not in self.nodes:
            return
        del self.nodes[node.id]
        self.released.append(node.id)

    def confirm(self) -> int:
        """Confirm every pending creation, in creation order.

        Continuations registered on the created() futures run during
        this call.

        Returns:
            Number of creations confirmed
        """
        confirmed = 0
        while self._pending:
            node = self._pending.popleft()
            future = node.created()
            # Cancelled when the node was destroyed before confirmation
            if future.done():
                continue
            future.set_result(node)
            confirmed += 1
        logger.debug("Confirmed %d pending creation(s)", confirmed)
        return confirmed

    def fail(self, node: SceneNode, exc: BaseException | None = None) -> None:
        """Resolve a pending creation with an error."""
        future = node.created()
        if future.done():
            return
        future.set_exception(exc or BackendError(f"could not create node {node.id} ({node.name!r})"))

    def _register(self, node: SceneNode, parent: SceneNode | None) -> SceneNode:
        if parent is not None:
            node.parent = parent
        self.nodes[node.id] = node
        if self.auto_confirm:
            node.created().set_result(node)
        else:
            self._pending.append(node)
        return node

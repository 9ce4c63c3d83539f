"""Protocol for the rendering backend that owns scene nodes."""

from enum import Enum
from typing import Protocol, runtime_checkable

from ..core.components import Text
from ..core.node import SceneNode
from ..core.transform import Transform
from ..materials.material import Material


class PrimitiveShape(Enum):
    """Primitive shapes the backend can build."""

    BOX = "box"


@runtime_checkable
class SceneBackend(Protocol):
    """Interface to the host that creates and destroys visual primitives.

    Node creation is a request: the returned node can be positioned and
    reparented straight away, but the host confirms it later through the
    node's created() future.
    """

    def create_node(
        self,
        name: str | None = None,
        parent: SceneNode | None = None,
        text: Text | None = None,
        transform: Transform | None = None,
    ) -> SceneNode:
        """Create an empty (or text-bearing) node."""
        ...

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
        """Create a node with primitive geometry of the given extents."""
        ...

    def create_material(self, name: str, color: tuple[float, ...]) -> Material:
        """Create (or return) a named material."""
        ...

    def release(self, node: SceneNode) -> None:
        """Free host resources for a node being destroyed."""
        ...

"""Core scene graph components."""

from .components import Collider, CollisionLayer, Text, TextAnchor
from .transform import Transform
from .mesh import Mesh
from .node import SceneNode

__all__ = [
    "Collider",
    "CollisionLayer",
    "Text",
    "TextAnchor",
    "Transform",
    "Mesh",
    "SceneNode",
]

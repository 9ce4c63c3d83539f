"""Placeable element contract shared by nodes and composite widgets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from ..core.node import SceneNode
from ..core.transform import Transform
from ..errors import DestroyedError


@runtime_checkable
class Placeable(Protocol):
    """Anything a console can lay out.

    SceneNode satisfies this directly; composite widgets satisfy it by
    delegating to an internal anchor node.
    """

    @property
    def anchor(self) -> SceneNode: ...

    parent: Any
    transform: Transform

    def destroy(self) -> None: ...


class UIElement(ABC):
    """Base class for composite widgets built from several nodes.

    Parent and transform are forwarded to the anchor node, so moving or
    reparenting the widget moves all of its parts together.
    """

    @property
    @abstractmethod
    def anchor(self) -> SceneNode:
        """The node that holds this widget's transform and children."""

    @abstractmethod
    def destroy(self) -> None:
        """Release every owned node. Must be safe to call twice."""

    @property
    def destroyed(self) -> bool:
        try:
            return not self.anchor.alive
        except DestroyedError:
            return True

    @property
    def parent(self) -> SceneNode | None:
        return self.anchor.parent

    @parent.setter
    def parent(self, parent: Any) -> None:
        self.anchor.parent = parent

    @property
    def transform(self) -> Transform:
        return self.anchor.transform

    @transform.setter
    def transform(self, xform: Transform) -> None:
        self.anchor.transform = xform

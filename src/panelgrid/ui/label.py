"""Text label widget."""

from __future__ import annotations

from ..core.node import SceneNode
from ..errors import DestroyedError
from .element import UIElement
from .sizing import ElementSize, label_height


class UILabel(UIElement):
    """A text node held inside an orientation-neutral container.

    The text node is rotated to face the viewer; the container carries
    the position so callers never deal with that rotation.
    """

    def __init__(
        self,
        container: SceneNode,
        label: SceneNode,
        label_size: ElementSize,
        fill_pct: float,
    ) -> None:
        self._container: SceneNode | None = container
        self._label: SceneNode | None = label
        self.label_size = label_size
        self.fill_pct = fill_pct

    @property
    def anchor(self) -> SceneNode:
        if self._container is None:
            raise DestroyedError("label")
        return self._container

    @property
    def text_node(self) -> SceneNode:
        if self._label is None:
            raise DestroyedError("label")
        return self._label

    @property
    def text(self) -> str:
        return self.text_node.text.contents

    @property
    def text_height(self) -> float:
        return self.text_node.text.height

    def update_label(self, text: str) -> None:
        """Replace the displayed text and refit its height."""
        node_text = self.text_node.text
        node_text.contents = text
        node_text.height = label_height(text, self.label_size, self.fill_pct)

    def destroy(self) -> None:
        if self._container is None:
            return
        # The text node is a child of the container and goes with it
        self._container.destroy()
        self._container = None
        self._label = None

    def __repr__(self) -> str:
        if self._label is None:
            return "UILabel(<destroyed>)"
        return f"UILabel({self.text!r})"

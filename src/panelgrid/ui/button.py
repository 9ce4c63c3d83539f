"""Button widget."""

from __future__ import annotations

from concurrent.futures import Future

from ..core.node import SceneNode
from ..errors import DestroyedError
from .element import UIElement
from .label import UILabel


class UIButton(UIElement):
    """An interactive box node with an optional label on its face."""

    def __init__(self, button: SceneNode, label: UILabel | None = None) -> None:
        self._button: SceneNode | None = button
        self._label = label

    @property
    def anchor(self) -> SceneNode:
        if self._button is None:
            raise DestroyedError("button")
        return self._button

    @property
    def node(self) -> SceneNode:
        """The interactive box node."""
        return self.anchor

    @property
    def label(self) -> UILabel | None:
        return self._label

    def created(self) -> Future[SceneNode]:
        """Future resolved once the host has built the button."""
        return self.anchor.created()

    def destroy(self) -> None:
        if self._label is not None:
            self._label.destroy()
        if self._button is not None:
            self._button.destroy()

        self._label = None
        self._button = None

    def __repr__(self) -> str:
        if self._button is None:
            return "UIButton(<destroyed>)"
        text = self._label.text if self._label is not None else None
        return f"UIButton({self._button.name!r}, text={text!r})"

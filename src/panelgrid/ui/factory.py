"""Facade for building consoles, labels and buttons on a scene backend."""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Any, Sequence

import numpy as np

from ..backend.base import PrimitiveShape, SceneBackend
from ..backend.behavior import (
    BUTTON_STATES,
    HOVER_STATES,
    ActionHandler,
    ButtonBehavior,
)
from ..core.components import CollisionLayer, Text, TextAnchor
from ..core.node import SceneNode
from ..core.transform import Transform
from ..errors import ValidationError
from ..materials.material import Material
from .button import UIButton
from .console import ConsoleLayout, GriddedConsole
from .label import UILabel
from .sizing import ElementSize, label_height

logger = logging.getLogger(__name__)

DEFAULT_LABEL_FILL_PCT = 0.9
DEFAULT_BUTTON_DEPTH = 0.01

# Text faces along +Y by default; tip it up to lie on the panel plane
LABEL_ROTATION = np.array([np.pi / 2, 0.0, 0.0])


class PanelUI:
    """Builds panel widgets against a scene backend.

    Args:
        backend: Host that creates and destroys the underlying nodes
    """

    def __init__(self, backend: SceneBackend) -> None:
        self.backend = backend

    @staticmethod
    def host_to_local_transform(
        x: float,
        y: float,
        z: float,
        xrot: float = 0.0,
        yrot: float = 0.0,
        zrot: float = 0.0,
    ) -> Transform:
        """Translate a host-world placement into a local transform.

        Helps line created panels up with objects authored in the host
        world editor, which reports position plus Euler angles in degrees.
        """
        return Transform.from_euler_degrees((x, y, z), (xrot, yrot, zrot))

    def create_gridded_console(
        self,
        layout: ConsoleLayout,
        element_size: ElementSize,
        cols: int = 1,
    ) -> GriddedConsole:
        """Create a console that grows rows as elements are added."""
        return GriddedConsole(self.backend, layout, element_size, cols)

    def create_label(
        self,
        size: ElementSize,
        text: str,
        *,
        node_props: dict[str, Any] | None = None,
        label_fill_pct: float = DEFAULT_LABEL_FILL_PCT,
        parent: SceneNode | None = None,
    ) -> UILabel:
        """Create a text label sized to fit a footprint.

        Args:
            size: Footprint the text must fit within
            text: Initial contents
            node_props: Overrides for the text node's creation arguments
            label_fill_pct: Fraction of the footprint the text should fill
            parent: Node to create the label under
        """
        _check_fill_pct(label_fill_pct)

        container = self.backend.create_node(name="label", parent=parent)

        label_text = Text(
            contents=text,
            height=label_height(text, size, label_fill_pct),
            anchor=TextAnchor.MIDDLE_CENTER,
        )
        label_args: dict[str, Any] = {
            "name": "label_text",
            "parent": container,
            "text": label_text,
            "transform": Transform(rotation=LABEL_ROTATION),
        }
        label_args.update(node_props or {})
        label = self.backend.create_node(**label_args)

        return UILabel(container, label, size, label_fill_pct)

    def create_button(
        self,
        size: ElementSize,
        *,
        text: str | None = None,
        button_material: Material | None = None,
        on_click: ActionHandler | None = None,
        on_button: Sequence[tuple[str, ActionHandler]] = (),
        on_hover: Sequence[tuple[str, ActionHandler]] = (),
        node_props: dict[str, Any] | None = None,
        label_fill_pct: float = DEFAULT_LABEL_FILL_PCT,
    ) -> UIButton:
        """Create a button of the given size.

        Args:
            size: Button footprint; depth defaults to 0.01
            text: Optional label text
            button_material: Material for the button body
            on_click: Handler called when the button is clicked
            on_button: (state, handler) pairs for "pressed", "holding", "released"
            on_hover: (state, handler) pairs for "enter", "exit", "hovering"
            node_props: Overrides for the button node's creation arguments;
                "add_collider" is ignored
            label_fill_pct: Fraction of the button the label should fill

        Handlers and material are attached once the backend confirms the
        button exists. The button can be placed before that happens.
        """
        for state, _ in on_button:
            if state not in BUTTON_STATES:
                raise ValidationError("on_button state", state, f"one of {BUTTON_STATES}")
        for state, _ in on_hover:
            if state not in HOVER_STATES:
                raise ValidationError("on_hover state", state, f"one of {HOVER_STATES}")
        _check_fill_pct(label_fill_pct)

        depth = size.depth if size.depth is not None else DEFAULT_BUTTON_DEPTH

        button_args: dict[str, Any] = {"name": "button"}
        button_args.update(node_props or {})
        # Buttons always get a collider
        button_args.pop("add_collider", None)
        button = self.backend.create_primitive(
            PrimitiveShape.BOX,
            (size.width, depth, size.height),
            add_collider=True,
            **button_args,
        )

        on_button = list(on_button)
        on_hover = list(on_hover)

        def attach(future: Future[SceneNode]) -> None:
            # The button may have been destroyed, or failed, before the host answered
            if future.cancelled() or future.exception() is not None or not button.alive:
                logger.debug("Skipping behavior setup for %r: creation did not complete", button.name)
                return

            button.collider.layer = CollisionLayer.HOLOGRAM

            if button_material is not None:
                button.material = button_material

            behavior: ButtonBehavior | None = None

            if on_click is not None:
                behavior = button.set_behavior(ButtonBehavior).on_click(on_click)

            for state, handler in on_button:
                if behavior is None:
                    behavior = button.set_behavior(ButtonBehavior)
                behavior.on_button(state, handler)

            for state, handler in on_hover:
                if behavior is None:
                    behavior = button.set_behavior(ButtonBehavior)
                behavior.on_hover(state, handler)

        button.created().add_done_callback(attach)

        label = None
        if text:
            label = self.create_label(size, text, label_fill_pct=label_fill_pct, parent=button)
            # Lift the label off the face so it isn't buried in the box
            label.transform.translation[1] = depth / 1.9

        return UIButton(button, label)


def _check_fill_pct(fill_pct: float) -> None:
    if not 0 < fill_pct <= 1:
        raise ValidationError("label_fill_pct", fill_pct, "a fraction in (0, 1]")

"""Button interaction behavior: handler registration and dispatch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Literal

from ..errors import ValidationError

if TYPE_CHECKING:
    from ..core.node import SceneNode

logger = logging.getLogger(__name__)

ButtonState = Literal["pressed", "holding", "released"]
HoverState = Literal["enter", "exit", "hovering"]

BUTTON_STATES: tuple[str, ...] = ("pressed", "holding", "released")
HOVER_STATES: tuple[str, ...] = ("enter", "exit", "hovering")


@dataclass
class ButtonEvent:
    """Payload passed to interaction handlers."""

    target: SceneNode
    kind: Literal["click", "button", "hover"]
    state: str | None = None


ActionHandler = Callable[[Any, ButtonEvent], Any]


class ButtonBehavior:
    """Collection of interaction handlers attached to one node.

    Registration methods return the behavior so calls can be chained:

        node.set_behavior(ButtonBehavior).on_click(a).on_hover("enter", b)
    """

    def __init__(self, node: SceneNode) -> None:
        self.node = node
        self._click: list[ActionHandler] = []
        self._button: dict[str, list[ActionHandler]] = {s: [] for s in BUTTON_STATES}
        self._hover: dict[str, list[ActionHandler]] = {s: [] for s in HOVER_STATES}

    def on_click(self, handler: ActionHandler) -> ButtonBehavior:
        self._click.append(handler)
        return self

    def on_button(self, state: ButtonState, handler: ActionHandler) -> ButtonBehavior:
        if state not in self._button:
            raise ValidationError("button state", state, f"one of {BUTTON_STATES}")
        self._button[state].append(handler)
        return self

    def on_hover(self, state: HoverState, handler: ActionHandler) -> ButtonBehavior:
        if state not in self._hover:
            raise ValidationError("hover state", state, f"one of {HOVER_STATES}")
        self._hover[state].append(handler)
        return self

    @property
    def handler_count(self) -> int:
        """Total number of registered handlers."""
        return (
            len(self._click)
            + sum(len(h) for h in self._button.values())
            + sum(len(h) for h in self._hover.values())
        )

    def trigger_click(self, user: Any = None) -> None:
        """Deliver a click from the host."""
        self._dispatch(self._click, user, ButtonEvent(self.node, "click"))

    def trigger_button(self, state: ButtonState, user: Any = None) -> None:
        """Deliver a press/hold/release from the host."""
        if state not in self._button:
            raise ValidationError("button state", state, f"one of {BUTTON_STATES}")
        self._dispatch(self._button[state], user, ButtonEvent(self.node, "button", state))

    def trigger_hover(self, state: HoverState, user: Any = None) -> None:
        """Deliver a hover transition from the host."""
        if state not in self._hover:
            raise ValidationError("hover state", state, f"one of {HOVER_STATES}")
        self._dispatch(self._hover[state], user, ButtonEvent(self.node, "hover", state))

    def _dispatch(self, handlers: list[ActionHandler], user: Any, event: ButtonEvent) -> None:
        logger.debug("%s %s on %r -> %d handler(s)", event.kind, event.state or "", self.node.name, len(handlers))
        for handler in list(handlers):
            handler(user, event)

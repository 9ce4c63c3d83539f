"""YAML loader for console definitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..backend.base import SceneBackend
from ..backend.behavior import ActionHandler
from ..errors import ConfigError, ValidationError
from ..materials.material import Material
from ..ui.console import ConsoleLayout, GriddedConsole
from ..ui.element import Placeable
from ..ui.factory import DEFAULT_LABEL_FILL_PCT, PanelUI
from ..ui.sizing import ElementSize

logger = logging.getLogger(__name__)

ELEMENT_KINDS = ("label", "button")


@dataclass
class LoadedConsole:
    """A console built from a definition.

    Attributes:
        name: Definition name
        console: The populated console
        elements: Elements that declared an id, by id
    """

    name: str
    console: GriddedConsole
    elements: dict[str, Placeable] = field(default_factory=dict)


class ConsoleLoader:
    """Builds gridded consoles from YAML definitions.

    YAML format:
        name: scoreboard
        columns: 4
        cell_size: {height: 0.125, width: 0.5}
        layout: {gutter_x: 0.065, gutter_y: 0.065}
        transform:                    # host convention, degrees
          position: [0, 0, 0]
          rotation: [-90, 0, 0]
        label_fill_pct: 0.9

        materials:
          gray: {color: [0.25, 0.25, 0.25]}

        elements:                     # added in order
          - label: Team
            id: team_name
          - button:
              text: "+"
              material: gray
              on_click: increment     # name in the handlers registry
              on_button: {released: increment}
              on_hover: {enter: highlight}
            span: 2

    Args:
        backend: Scene backend the console is created on
        handlers: Registry of named interaction handlers
        materials: Pre-made materials, looked up before the definition's own
    """

    def __init__(
        self,
        backend: SceneBackend,
        handlers: dict[str, ActionHandler] | None = None,
        materials: dict[str, Material] | None = None,
    ) -> None:
        self._backend = backend
        self._ui = PanelUI(backend)
        self._handlers = dict(handlers or {})
        self._materials = dict(materials or {})

    def load(self, path: str | Path) -> LoadedConsole:
        """Load and build a console from a YAML file."""
        path = Path(path)
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(path, f"cannot read file ({e.strerror})") from e
        except yaml.YAMLError as e:
            raise ConfigError(path, f"invalid YAML ({e})") from e

        logger.info("Loading console definition %s", path)
        return self._build(data, path)

    def load_string(self, yaml_string: str) -> LoadedConsole:
        """Build a console from a YAML string."""
        try:
            data = yaml.safe_load(yaml_string)
        except yaml.YAMLError as e:
            raise ConfigError(None, f"invalid YAML ({e})") from e
        return self._build(data, None)

    def _build(self, data: Any, path: Path | None) -> LoadedConsole:
        if not isinstance(data, dict):
            raise ConfigError(path, "top level must be a mapping")

        name = data.get("name", "console")
        cell_size = self._parse_size(data.get("cell_size"), path)
        layout_data = data.get("layout", {}) or {}
        if not isinstance(layout_data, dict):
            raise ConfigError(path, "layout must be a mapping")
        layout = ConsoleLayout(
            gutter_y=_number(layout_data.get("gutter_y", 0.0), "layout.gutter_y", path),
            gutter_x=_number(layout_data.get("gutter_x", 0.0), "layout.gutter_x", path),
        )
        fill_pct = _number(data.get("label_fill_pct", DEFAULT_LABEL_FILL_PCT), "label_fill_pct", path)

        try:
            console = self._ui.create_gridded_console(layout, cell_size, data.get("columns", 1))
        except ValidationError as e:
            raise ConfigError(path, str(e)) from e

        loaded = LoadedConsole(name=name, console=console)
        try:
            if "transform" in data:
                console.transform = self._parse_transform(data["transform"], path)

            materials = self._parse_materials(data.get("materials", {}) or {}, path)

            for i, element_def in enumerate(data.get("elements", []) or []):
                element = self._build_element(element_def, i, cell_size, fill_pct, materials, path)
                try:
                    span = _integer(element_def.get("span", 1), f"element {i}: span", path)
                except ConfigError:
                    element.destroy()
                    raise
                console.add_element(element, span)
                if "id" in element_def:
                    loaded.elements[str(element_def["id"])] = element
        except ConfigError:
            # Don't leave a half-built console behind on the host
            console.clear()
            console.container.destroy()
            raise

        logger.info("Built console %r with %d element(s)", name, len(console))
        return loaded

    def _build_element(
        self,
        element_def: Any,
        index: int,
        cell_size: ElementSize,
        fill_pct: float,
        materials: dict[str, Material],
        path: Path | None,
    ) -> Placeable:
        if not isinstance(element_def, dict):
            raise ConfigError(path, f"element {index} must be a mapping")

        kinds = [k for k in ELEMENT_KINDS if k in element_def]
        if len(kinds) != 1:
            raise ConfigError(path, f"element {index} must have exactly one of {ELEMENT_KINDS}")

        if kinds[0] == "label":
            try:
                return self._ui.create_label(cell_size, str(element_def["label"]), label_fill_pct=fill_pct)
            except ValidationError as e:
                raise ConfigError(path, f"element {index}: {e}") from e

        button_def = element_def["button"] or {}
        if isinstance(button_def, str):
            button_def = {"text": button_def}

        material = None
        if "material" in button_def:
            material = materials.get(button_def["material"])
            if material is None:
                raise ConfigError(path, f"element {index}: material '{button_def['material']}' not defined")

        try:
            return self._ui.create_button(
                cell_size,
                text=button_def.get("text"),
                button_material=material,
                on_click=self._handler(button_def["on_click"], index, path) if "on_click" in button_def else None,
                on_button=self._handler_pairs(button_def.get("on_button", {}), index, path),
                on_hover=self._handler_pairs(button_def.get("on_hover", {}), index, path),
                label_fill_pct=fill_pct,
            )
        except ValidationError as e:
            raise ConfigError(path, f"element {index}: {e}") from e

    def _handler(self, name: str, index: int, path: Path | None) -> ActionHandler:
        handler = self._handlers.get(name)
        if handler is None:
            raise ConfigError(path, f"element {index}: handler '{name}' not registered")
        return handler

    def _handler_pairs(
        self, data: dict[str, str], index: int, path: Path | None
    ) -> list[tuple[str, ActionHandler]]:
        if not isinstance(data, dict):
            raise ConfigError(path, f"element {index}: handler bindings must map state to handler name")
        return [(state, self._handler(name, index, path)) for state, name in data.items()]

    def _parse_size(self, data: Any, path: Path | None) -> ElementSize:
        if not isinstance(data, dict) or "height" not in data or "width" not in data:
            raise ConfigError(path, "cell_size must give height and width")
        depth = data.get("depth")
        return ElementSize(
            height=_number(data["height"], "cell_size.height", path),
            width=_number(data["width"], "cell_size.width", path),
            depth=_number(depth, "cell_size.depth", path) if depth is not None else None,
        )

    def _parse_transform(self, data: Any, path: Path | None):
        if not isinstance(data, dict):
            raise ConfigError(path, "transform must be a mapping")
        position = data.get("position", [0, 0, 0])
        rotation = data.get("rotation", [0, 0, 0])
        if not all(isinstance(v, list) and len(v) == 3 for v in (position, rotation)):
            raise ConfigError(path, "transform position and rotation need 3 values")
        values = [_number(v, "transform", path) for v in (*position, *rotation)]
        return PanelUI.host_to_local_transform(*values)

    def _parse_materials(self, data: dict[str, Any], path: Path | None) -> dict[str, Material]:
        materials = dict(self._materials)
        for mat_name, mat_def in data.items():
            color = (mat_def or {}).get("color")
            if color is None:
                raise ConfigError(path, f"material '{mat_name}' needs a color")
            try:
                materials[mat_name] = self._backend.create_material(mat_name, tuple(color))
            except ValidationError as e:
                raise ConfigError(path, str(e)) from e
        return materials


def _number(value: Any, field_name: str, path: Path | None) -> float:
    # bool is an int subclass but never a sensible size
    if isinstance(value, bool):
        raise ConfigError(path, f"{field_name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(path, f"{field_name} must be a number, got {value!r}") from e


def _integer(value: Any, field_name: str, path: Path | None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(path, f"{field_name} must be an integer, got {value!r}")
    return value

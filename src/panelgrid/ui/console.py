"""Gridded console: lays placeable elements out in rows and columns."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from ..core.node import SceneNode
from ..core.transform import Transform
from ..errors import ValidationError
from .element import Placeable
from .sizing import ElementSize

if TYPE_CHECKING:
    from ..backend.base import SceneBackend

logger = logging.getLogger(__name__)


@dataclass
class ConsoleLayout:
    """Spacing left between neighbouring cells.

    Attributes:
        gutter_y: Gap between rows
        gutter_x: Gap between columns
    """

    gutter_y: float = 0.0
    gutter_x: float = 0.0


class GriddedConsole:
    """A grid of panel elements anchored under one container node.

    Elements are placed in the order they are added: left to right, then
    on a new row further along -Z. Each element reserves one slot per
    column it spans. Removing an element leaves its slots empty rather
    than compacting, so elements added later never move and a new
    element never lands on a freed slot. Only clear() starts over at the
    first cell.

    The grid is centered on the container's X origin; the container's
    transform moves and orients the whole console.

    Example:
        console = GriddedConsole(backend, ConsoleLayout(0.05, 0.05), ElementSize(0.1, 0.4), cols=4)
        console.add_element(title, col_span=4)
        console.add_element(button)
    """

    def __init__(
        self,
        backend: SceneBackend,
        layout: ConsoleLayout,
        element_size: ElementSize,
        cols: int = 1,
    ) -> None:
        if isinstance(cols, bool) or not isinstance(cols, int) or cols < 1:
            raise ValidationError("cols", cols, "a positive integer")
        if element_size.height <= 0:
            raise ValidationError("element_size.height", element_size.height, "a positive number")
        if element_size.width <= 0:
            raise ValidationError("element_size.width", element_size.width, "a positive number")
        if layout.gutter_x < 0 or layout.gutter_y < 0:
            raise ValidationError("layout", layout, "non-negative gutters")

        self.layout = layout
        self.element_size = element_size
        self._cols = cols
        self._slots: list[Placeable | None] = []
        self._container = backend.create_node(name="console")

    @property
    def columns(self) -> int:
        return self._cols

    @property
    def container(self) -> SceneNode:
        """Root node every placed element is attached under."""
        return self._container

    @property
    def slot_count(self) -> int:
        """Slots reserved so far, including emptied ones."""
        return len(self._slots)

    def add_element(self, element: Placeable, col_span: int = 1) -> int:
        """Add an element to the next free cell.

        Args:
            element: Node or widget to place
            col_span: Number of columns the element should span. Spans
                running past the last column are cut off at the row end.

        Returns:
            Slot index of the element
        """
        element.parent = self._container

        index = len(self._slots)
        row, start_col = self.cell_of(index)

        if col_span < 1:
            logger.warning("Column span %r raised to 1", col_span)
            col_span = 1

        # Don't go beyond the number of columns in the console
        end_col = min(start_col + col_span - 1, self._cols - 1)
        if end_col < start_col + col_span - 1:
            logger.warning(
                "Column span %d at column %d clamped to %d column(s)",
                col_span, start_col, end_col - start_col + 1,
            )

        element_mid_col = (start_col + end_col) / 2
        console_mid = (self._cols - 1) / 2

        position = element.transform.translation
        position[0] = (element_mid_col - console_mid) * (self.element_size.width + self.layout.gutter_x)
        position[2] = -(self.element_size.height + self.layout.gutter_y) * row

        self._slots.append(element)
        # Reserve the extra slots covered by a multi-column element
        self._slots.extend([None] * (end_col - start_col))

        logger.debug("Placed %r at slot %d (row %d, cols %d-%d)", element, index, row, start_col, end_col)
        return index

    def remove_element(self, element: Placeable) -> bool:
        """Remove and destroy an element.

        Its slot stays reserved, so later additions keep counting from
        the end of the grid.

        Returns:
            True if the element was found
        """
        index = self.index_of(element)
        if index is None:
            return False

        self._slots[index] = None
        element.destroy()
        logger.debug("Removed element at slot %d", index)
        return True

    def clear(self) -> None:
        """Destroy every element and reset placement to the first cell."""
        for element in self._slots:
            if element is not None:
                element.destroy()

        self._slots.clear()
        logger.debug("Console cleared")

    def index_of(self, element: Placeable) -> int | None:
        """Slot index holding the element, or None."""
        for index, occupant in enumerate(self._slots):
            if occupant is element:
                return index
        return None

    def cell_of(self, index: int) -> tuple[int, int]:
        """(row, column) of a slot index."""
        return divmod(index, self._cols)

    def elements(self) -> Iterator[Placeable]:
        """Iterate over placed elements in slot order."""
        for element in self._slots:
            if element is not None:
                yield element

    def __len__(self) -> int:
        return sum(1 for _ in self.elements())

    @property
    def transform(self) -> Transform:
        return self._container.transform

    @transform.setter
    def transform(self, xform: Transform) -> None:
        self._container.transform = xform

"""
Pytest configuration and shared fixtures for the panelgrid test suite.
"""

import tempfile
from pathlib import Path

import pytest

from panelgrid.backend import MemoryBackend
from panelgrid.ui import ConsoleLayout, ElementSize, PanelUI

CELL = ElementSize(height=0.125, width=0.5)
GUTTERS = ConsoleLayout(gutter_y=0.065, gutter_x=0.065)


@pytest.fixture
def backend():
    """In-memory backend that waits for confirm()."""
    return MemoryBackend()


@pytest.fixture
def ui(backend):
    return PanelUI(backend)


@pytest.fixture
def console(ui):
    """Four-column console with scoreboard-sized cells."""
    return ui.create_gridded_console(GUTTERS, CELL, 4)


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    if temp_path.exists():
        temp_path.unlink()

"""Scoreboard scene: one row per team with name, score, "+" and "-"."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..backend.base import SceneBackend
from ..materials.material import Material
from ..ui.console import ConsoleLayout, GriddedConsole
from ..ui.factory import PanelUI
from ..ui.label import UILabel
from ..ui.sizing import ElementSize

logger = logging.getLogger(__name__)

ELEMENT_SIZE = ElementSize(height=0.125, width=0.5)
CONSOLE_LAYOUT = ConsoleLayout(gutter_y=0.065, gutter_x=0.065)
# Stand the board up vertically
CONSOLE_TRANSFORM = PanelUI.host_to_local_transform(0, 0, 0, -90, 0, 0)

TEAMS_PARAM = "teams"


class Scoreboard:
    """A simple scoreboard.

    Takes a "teams" parameter holding a comma-separated list of team
    names. Without it there is a single score named "Score".

    Args:
        backend: Scene backend for the session
        params: Session parameters
    """

    def __init__(self, backend: SceneBackend, params: Mapping[str, Any] | None = None) -> None:
        self.backend = backend
        params = params or {}

        if params.get(TEAMS_PARAM):
            self.team_names = [name.strip() for name in str(params[TEAMS_PARAM]).split(",")]
        else:
            self.team_names = ["Score"]

        self.scores = [0] * len(self.team_names)
        self.ui: PanelUI | None = None
        self.board: GriddedConsole | None = None
        self.score_labels: list[UILabel] = []
        self.button_material: Material | None = None

    def started(self) -> GriddedConsole:
        """Build the board. Called when the session starts.

        Calling it again tears down the previous board and starts over.
        """
        if self.board is not None:
            self.board.clear()
            self.board.container.destroy()
        self.score_labels = []

        self.ui = PanelUI(self.backend)

        # Four columns: team name, score, "+" button, "-" button
        self.board = self.ui.create_gridded_console(CONSOLE_LAYOUT, ELEMENT_SIZE, 4)
        self.board.transform = CONSOLE_TRANSFORM.copy()

        # Keep the buttons from being bright white
        self.button_material = self.backend.create_material("gray", (0.25, 0.25, 0.25))

        for i, team in enumerate(self.team_names):
            self.scores[i] = 0

            self.board.add_element(self.ui.create_label(ELEMENT_SIZE, team))

            score = self.ui.create_label(ELEMENT_SIZE, str(self.scores[i]))
            self.board.add_element(score)
            self.score_labels.append(score)

            self.board.add_element(self.ui.create_button(
                ELEMENT_SIZE,
                text="+",
                button_material=self.button_material,
                on_button=[("released", lambda user, event, i=i: self.adjust(i, 1))],
            ))
            self.board.add_element(self.ui.create_button(
                ELEMENT_SIZE,
                text="-",
                button_material=self.button_material,
                on_button=[("released", lambda user, event, i=i: self.adjust(i, -1))],
            ))

        logger.info("Scoreboard started with teams: %s", ", ".join(self.team_names))
        return self.board

    def adjust(self, team: int, delta: int) -> int:
        """Change a team's score and refresh its label."""
        self.scores[team] += delta
        self.score_labels[team].update_label(str(self.scores[team]))
        return self.scores[team]

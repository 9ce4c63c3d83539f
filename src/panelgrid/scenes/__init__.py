"""Pre-built panel scenes."""

from .scoreboard import Scoreboard

__all__ = ["Scoreboard"]

"""Data-driven console definitions."""

from .loader import ConsoleLoader, LoadedConsole

__all__ = ["ConsoleLoader", "LoadedConsole"]

"""Qt front end for the hodograph editor."""

from .app import HodographWindow, run

__all__ = ["HodographWindow", "run"]

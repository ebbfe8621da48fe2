"""
Error types for the Minefield engine.

Configuration problems raise; rejected player actions are reported
as a `Rejection` inside the returned action result.
"""
from enum import Enum, auto


class MinefieldError(Exception):
    """Base class for engine exceptions."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Board dimensions, mine count or mine layout cannot form a board."""


class Rejection(Enum):
    """Reasons a player action is refused without changing the game."""

    OUT_OF_BOUNDS = auto()
    TERMINAL_PHASE = auto()
    NOT_STARTED = auto()

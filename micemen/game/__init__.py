"""Game state machine."""

from .machine import MicemenGame, Player

__all__ = ["MicemenGame", "Player"]

"""Micemen: a two-player column-shifting terminal game."""

from . import config, controls, core, display, game
from .config import ConfigError, GameConfig, load_config
from .controls import InputHandler, KeyboardHandler, ScriptedInputHandler
from .core import Action, CellType, GameState, Mouse, PlayerColor, ShiftDirection
from .display import Renderer, TerminalRenderer
from .engine import GameEngine
from .game import MicemenGame, Player

__all__ = [
    "config",
    "controls",
    "core",
    "display",
    "game",
    "ConfigError",
    "GameConfig",
    "load_config",
    "InputHandler",
    "KeyboardHandler",
    "ScriptedInputHandler",
    "Action",
    "CellType",
    "GameState",
    "Mouse",
    "PlayerColor",
    "ShiftDirection",
    "Renderer",
    "TerminalRenderer",
    "GameEngine",
    "MicemenGame",
    "Player",
]

"""Input sources producing game actions."""

from .base import InputHandler, ScriptedInputHandler
from .keyboard import KEY_ACTIONS, KeyboardHandler, action_for_key

__all__ = [
    "InputHandler",
    "ScriptedInputHandler",
    "KEY_ACTIONS",
    "KeyboardHandler",
    "action_for_key",
]

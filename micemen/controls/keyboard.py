from __future__ import annotations

from typing import Callable, Dict, Optional

import readchar
from readchar import key

from micemen.core import Action

from .base import InputHandler

KEY_ACTIONS: Dict[str, Action] = {
    key.LEFT: Action.MOVE_LEFT,
    key.RIGHT: Action.MOVE_RIGHT,
    key.UP: Action.MOVE_COLUMN_UP,
    key.DOWN: Action.MOVE_COLUMN_DOWN,
    key.CTRL_C: Action.QUIT,
    key.ESC: Action.QUIT,
    "q": Action.QUIT,
    "Q": Action.QUIT,
    # Letter alternatives for terminals that swallow arrow keys (tmux).
    "a": Action.MOVE_LEFT,
    "A": Action.MOVE_LEFT,
    "d": Action.MOVE_RIGHT,
    "D": Action.MOVE_RIGHT,
    "w": Action.MOVE_COLUMN_UP,
    "W": Action.MOVE_COLUMN_UP,
    "s": Action.MOVE_COLUMN_DOWN,
    "S": Action.MOVE_COLUMN_DOWN,
    # vi
    "h": Action.MOVE_LEFT,
    "l": Action.MOVE_RIGHT,
    "k": Action.MOVE_COLUMN_UP,
    "j": Action.MOVE_COLUMN_DOWN,
}


def action_for_key(pressed: str) -> Action:
    return KEY_ACTIONS.get(pressed, Action.NONE)


class KeyboardHandler(InputHandler):
    def __init__(self, read_key: Optional[Callable[[], str]] = None) -> None:
        self._read_key = read_key or readchar.readkey

    def next_action(self) -> Action:
        try:
            pressed = self._read_key()
        except KeyboardInterrupt:
            return Action.QUIT
        return action_for_key(pressed)

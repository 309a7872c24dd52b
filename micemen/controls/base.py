from __future__ import annotations

from typing import Iterable, Iterator

from micemen.core import Action


class InputHandler:
    """Source of abstract actions for the game loop."""

    def initialize(self) -> None:
        pass

    def next_action(self) -> Action:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def actions(self) -> Iterator[Action]:
        while True:
            yield self.next_action()

    def __enter__(self) -> "InputHandler":
        self.initialize()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class ScriptedInputHandler(InputHandler):
    """Replays a fixed sequence of actions, then quits."""

    def __init__(self, actions: Iterable[Action]) -> None:
        self._pending = list(actions)
        self._position = 0

    def next_action(self) -> Action:
        if self._position >= len(self._pending):
            return Action.QUIT
        action = self._pending[self._position]
        self._position += 1
        return action

from __future__ import annotations

from micemen.core import GameState


class Renderer:
    """Display interface consuming read-only state snapshots."""

    def render(self, state: GameState) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def show_message(self, message: str) -> None:
        raise NotImplementedError

    def hide_cursor(self) -> None:
        pass

    def show_cursor(self) -> None:
        pass

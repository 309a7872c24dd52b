from __future__ import annotations

import logging

from micemen.controls import InputHandler
from micemen.core import Action
from micemen.display import Renderer
from micemen.game import MicemenGame

logger = logging.getLogger(__name__)

GOODBYE_MESSAGE = "Thanks for playing Micemen!"


class GameEngine:
    """Drives input -> state machine -> display until the game is over."""

    def __init__(self, game: MicemenGame, renderer: Renderer, input_handler: InputHandler) -> None:
        self.game = game
        self.renderer = renderer
        self.input = input_handler

    def run(self) -> int:
        processed = 0

        self.input.initialize()
        try:
            self.renderer.hide_cursor()
            self.renderer.render(self.game.get_state())

            for action in self.input.actions():
                if action == Action.NONE:
                    continue
                self.game.process_action(action)
                processed += 1
                if self.game.is_game_over():
                    break
                self.renderer.render(self.game.get_state())
        finally:
            self.input.close()
            self.renderer.show_cursor()
            self.renderer.clear()

        logger.info("game finished after %d actions", processed)
        self.renderer.show_message(GOODBYE_MESSAGE)
        return processed

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from micemen.config import GameConfig
from micemen.core import (
    Action,
    GameState,
    Mouse,
    PlayerColor,
    ShiftDirection,
    can_move_column,
    initialize_game_state,
    nearest_owned_column,
    next_owned_column,
    owned_columns,
    shift_column,
)

logger = logging.getLogger(__name__)

_SHIFTS = {
    Action.MOVE_COLUMN_UP: ShiftDirection.UP,
    Action.MOVE_COLUMN_DOWN: ShiftDirection.DOWN,
}
_STEPS = {
    Action.MOVE_LEFT: -1,
    Action.MOVE_RIGHT: 1,
}


@dataclass(frozen=True)
class Player:
    color: PlayerColor
    mice: List[Mouse]


class MicemenGame:
    """Turn and selection state machine over a single :class:`GameState`."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if seed is not None and rng is not None:
            raise ValueError("pass either seed or rng, not both")
        self.config = (config or GameConfig()).validate()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._state = initialize_game_state(self.config, self.rng)

    def reset(self) -> GameState:
        self._state = initialize_game_state(self.config, self.rng)
        return self.get_state()

    def get_state(self) -> GameState:
        return self._state.copy()

    def is_game_over(self) -> bool:
        return self._state.game_over

    def process_action(self, action: Action) -> bool:
        """Apply ``action`` and report whether the state changed."""
        state = self._state
        if state.game_over:
            return False

        if action == Action.QUIT:
            state.game_over = True
            logger.debug("%s quit the game", state.current_player)
            return True

        if action in _STEPS:
            return self._move_selection(_STEPS[action])

        if action in _SHIFTS:
            return self._shift_selected_column(_SHIFTS[action])

        return False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_player(self, color: PlayerColor) -> Player:
        return Player(color=color, mice=self._state.mice_of(color))

    def get_mice_at(self, row: int, col: int) -> List[Mouse]:
        return self._state.mice_at(row, col)

    def can_player_move_column(self, player: PlayerColor, col: int) -> bool:
        return can_move_column(self._state, player, col)

    def get_valid_columns_for_player(self, player: PlayerColor) -> List[int]:
        return owned_columns(self._state, player)

    def mice_shortfall(self) -> Dict[PlayerColor, int]:
        return {
            color: self.config.mice_per_player - len(self._state.mice_of(color))
            for color in PlayerColor
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _move_selection(self, step: int) -> bool:
        state = self._state
        previous = state.selected_column
        state.selected_column = next_owned_column(state, state.current_player, previous, step)
        return state.selected_column != previous

    def _shift_selected_column(self, direction: ShiftDirection) -> bool:
        state = self._state
        col = state.selected_column
        if not can_move_column(state, state.current_player, col):
            return False

        shift_column(state, col, direction)
        logger.debug("%s shifted column %d %s", state.current_player, col, direction.name.lower())
        self._switch_player()
        return True

    def _switch_player(self) -> None:
        state = self._state
        state.current_player = state.current_player.other()
        state.selected_column = nearest_owned_column(
            state, state.current_player, state.selected_column
        )

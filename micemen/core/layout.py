from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from micemen.config import GameConfig

from .rules import nearest_owned_column, valid_rows_for_mouse
from .state import CellType, GameState, GridArray, Mouse, PlayerColor, Position

logger = logging.getLogger(__name__)


def generate_walls(config: GameConfig, rng: np.random.Generator) -> GridArray:
    """Fill each column independently with a random number of walls at distinct rows."""
    grid = np.full((config.height, config.width), CellType.EMPTY, dtype=np.int8)
    for col in range(config.width):
        num_walls = int(rng.integers(config.min_walls, config.max_walls + 1))
        rows = set()
        while len(rows) < num_walls:
            rows.add(int(rng.integers(config.height)))
        for row in rows:
            grid[row, col] = CellType.WALL
    return grid


def find_mouse_position(
    state: GameState,
    band: Tuple[int, int],
    rng: np.random.Generator,
    *,
    max_attempts: int,
) -> Optional[Position]:
    start_col, end_col = band
    for _ in range(max_attempts):
        col = int(rng.integers(start_col, end_col + 1))
        rows = valid_rows_for_mouse(state, col)
        if not rows:
            continue
        row = rows[int(rng.integers(len(rows)))]
        return row, col
    return None


def place_mice_for_player(
    state: GameState,
    player: PlayerColor,
    band: Tuple[int, int],
    config: GameConfig,
    rng: np.random.Generator,
) -> int:
    placed = 0
    for _ in range(config.mice_per_player):
        position = find_mouse_position(state, band, rng, max_attempts=config.max_placement_attempts)
        if position is None:
            continue
        row, col = position
        state.mice.append(Mouse(row, col, player))
        placed += 1

    if placed < config.mice_per_player:
        logger.warning(
            "placed %d of %d mice for %s after exhausting placement attempts",
            placed,
            config.mice_per_player,
            player,
        )
    return placed


def place_mice(state: GameState, config: GameConfig, rng: np.random.Generator) -> GameState:
    place_mice_for_player(state, PlayerColor.RED, config.first_band, config, rng)
    place_mice_for_player(state, PlayerColor.BLUE, config.second_band, config, rng)
    return state


def initialize_game_state(
    config: Optional[GameConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> GameState:
    config = (config or GameConfig()).validate()
    rng = rng or np.random.default_rng()

    midpoint = config.width // 2
    state = GameState(
        grid=generate_walls(config, rng),
        mice=[],
        selected_column=midpoint,
        current_player=PlayerColor.RED,
        game_over=False,
    )
    place_mice(state, config, rng)
    state.selected_column = nearest_owned_column(state, state.current_player, midpoint)

    logger.debug("initialized layout with %d mice\n%r", len(state.mice), state)
    return state

from __future__ import annotations

from typing import List

import numpy as np

from .state import CellType, GameState, Mouse, PlayerColor, ShiftDirection


def owned_columns(state: GameState, player: PlayerColor) -> List[int]:
    """Ascending, deduplicated columns holding at least one mouse of ``player``."""
    return sorted({mouse.col for mouse in state.mice if mouse.player == player})


def can_move_column(state: GameState, player: PlayerColor, col: int) -> bool:
    if not 0 <= col < state.width:
        return False
    return any(mouse.col == col and mouse.player == player for mouse in state.mice)


def nearest_owned_column(state: GameState, player: PlayerColor, from_col: int) -> int:
    """Owned column closest to ``from_col``; equal distances resolve to the lower index."""
    columns = owned_columns(state, player)
    if not columns:
        return from_col

    closest = columns[0]
    min_distance = abs(from_col - closest)
    for col in columns:
        distance = abs(from_col - col)
        if distance < min_distance:
            min_distance = distance
            closest = col
    return closest


def next_owned_column(state: GameState, player: PlayerColor, from_col: int, step: int) -> int:
    """Next owned column to the right (``step > 0``) or left, wrapping around the owned list."""
    columns = owned_columns(state, player)
    if not columns:
        return from_col

    if step > 0:
        for col in columns:
            if col > from_col:
                return col
        return columns[0]

    for col in reversed(columns):
        if col < from_col:
            return col
    return columns[-1]


def is_valid_mouse_position(state: GameState, row: int, col: int) -> bool:
    if not state.in_bounds(row, col):
        return False

    # Bottom row: the mouse rests on the wall cell itself.
    if row == state.height - 1:
        return state.grid[row, col] == CellType.WALL

    if state.grid[row + 1, col] == CellType.WALL:
        return True
    return any(mouse.row == row + 1 and mouse.col == col for mouse in state.mice)


def valid_rows_for_mouse(state: GameState, col: int) -> List[int]:
    return [row for row in range(state.height) if is_valid_mouse_position(state, row, col)]


def shift_column(state: GameState, col: int, direction: ShiftDirection) -> GameState:
    """Rotate column ``col`` by one cell in place, carrying its mice along.

    The grid column and the mice list are rebuilt before either is assigned,
    so the state never holds a partially shifted column.
    """
    if not 0 <= col < state.width:
        return state

    height = state.height
    delta = direction.value
    # np.roll with -1 moves row 0 to the bottom (UP); +1 moves the bottom row to the top.
    new_column = np.roll(state.grid[:, col], delta)
    new_mice = [
        Mouse((mouse.row + delta) % height, mouse.col, mouse.player) if mouse.col == col else mouse
        for mouse in state.mice
    ]

    state.grid[:, col] = new_column
    state.mice = new_mice
    return state

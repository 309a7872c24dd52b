"""Core game logic for Micemen."""

from .state import Action, CellType, GameState, Mouse, PlayerColor, Position, ShiftDirection
from .rules import (
    can_move_column,
    is_valid_mouse_position,
    nearest_owned_column,
    next_owned_column,
    owned_columns,
    shift_column,
    valid_rows_for_mouse,
)
from .layout import (
    find_mouse_position,
    generate_walls,
    initialize_game_state,
    place_mice,
    place_mice_for_player,
)

__all__ = [
    "Action",
    "CellType",
    "GameState",
    "Mouse",
    "PlayerColor",
    "Position",
    "ShiftDirection",
    "can_move_column",
    "is_valid_mouse_position",
    "nearest_owned_column",
    "next_owned_column",
    "owned_columns",
    "shift_column",
    "valid_rows_for_mouse",
    "find_mouse_position",
    "generate_walls",
    "initialize_game_state",
    "place_mice",
    "place_mice_for_player",
]

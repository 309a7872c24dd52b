from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

GridArray = NDArray[np.int8]
Position = Tuple[int, int]


class CellType(IntEnum):
    EMPTY = 0
    WALL = 1


class PlayerColor(IntEnum):
    RED = 0
    BLUE = 1

    def other(self) -> "PlayerColor":
        return PlayerColor.BLUE if self == PlayerColor.RED else PlayerColor.RED

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


class Action(Enum):
    NONE = "none"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_COLUMN_UP = "move_column_up"
    MOVE_COLUMN_DOWN = "move_column_down"
    QUIT = "quit"


class ShiftDirection(Enum):
    UP = -1
    DOWN = 1


@dataclass(frozen=True)
class Mouse:
    row: int
    col: int
    player: PlayerColor

    @property
    def position(self) -> Position:
        return (self.row, self.col)


@dataclass
class GameState:
    grid: GridArray  # shape (height, width), dtype=np.int8, values CellType
    mice: List[Mouse] = field(default_factory=list)
    selected_column: int = 0
    current_player: PlayerColor = PlayerColor.RED
    game_over: bool = False

    def copy(self) -> "GameState":
        return GameState(
            grid=self.grid.copy(),
            mice=list(self.mice),
            selected_column=self.selected_column,
            current_player=self.current_player,
            game_over=self.game_over,
        )

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def mice_of(self, player: PlayerColor) -> List[Mouse]:
        return [mouse for mouse in self.mice if mouse.player == player]

    def mice_at(self, row: int, col: int) -> List[Mouse]:
        return [mouse for mouse in self.mice if mouse.row == row and mouse.col == col]

    def wall_count(self, col: int) -> int:
        return int(np.count_nonzero(self.grid[:, col] == CellType.WALL))

    def __repr__(self) -> str:
        symbols = {int(CellType.EMPTY): ".", int(CellType.WALL): "#"}
        rows = [[symbols[int(cell)] for cell in row] for row in self.grid]
        for mouse in self.mice:
            rows[mouse.row][mouse.col] = "R" if mouse.player == PlayerColor.RED else "B"
        board_str = "\n".join("".join(row) for row in rows)
        return (
            f"GameState(current={self.current_player.name}, selected={self.selected_column}, "
            f"over={self.game_over})\n"
            f"{board_str}"
        )


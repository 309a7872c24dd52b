from __future__ import annotations

from typing import List, Optional, TextIO

from rich.console import Console
from rich.text import Text

from micemen.core import CellType, GameState, PlayerColor, can_move_column, owned_columns

from .base import Renderer

PLAYER_STYLES = {PlayerColor.RED: "red", PlayerColor.BLUE: "blue"}
SELECTED_STYLE = "reverse"
INVALID_SELECTED_STYLE = "reverse dim"

_PLAYER_SYMBOLS = {PlayerColor.RED: "R", PlayerColor.BLUE: "B"}
_MIXED_SYMBOL = "*"
_CELL_SYMBOLS = {int(CellType.EMPTY): ".", int(CellType.WALL): "#"}

CONTROLS = (
    "Controls:",
    "<- -> (or A/D or H/L) : Select column with your mice",
    "Up Dn (or W/S or K/J) : Move your column up/down",
    "q                     : Quit",
    "",
    "Legend:",
    "R Red mice    B Blue mice    * Mixed",
    "# Wall        . Empty        + Valid column",
)


class TerminalRenderer(Renderer):
    """Draws the board on a terminal through a rich console."""

    def __init__(self, stream: Optional[TextIO] = None, *, use_color: bool = True) -> None:
        self.use_color = use_color
        if use_color:
            self.console = Console(
                file=stream, force_terminal=True, color_system="standard", highlight=False
            )
        else:
            self.console = Console(file=stream, no_color=True, highlight=False)

    def clear(self) -> None:
        self.console.clear()

    def render(self, state: GameState) -> None:
        self.clear()
        self.console.print(self.build_frame(state), soft_wrap=True)

    def show_message(self, message: str) -> None:
        self.console.print(message, markup=False, soft_wrap=True)

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def format_state(self, state: GameState) -> str:
        """Unstyled text of one frame."""
        return self.build_frame(state).plain + "\n"

    def build_frame(self, state: GameState) -> Text:
        frame = Text()
        header_style = "bold" if self.use_color else None
        frame.append(f"{state.current_player.label} Player's Turn", style=header_style)
        frame.append("\n")
        frame.append(self._format_markers(state))
        for row in range(state.height):
            frame.append("\n  ")
            for col in range(state.width):
                self._append_cell(frame, state, row, col)
        lines: List[str] = [""]
        lines.extend(self._format_stats(state))
        lines.append("")
        lines.extend(self._format_turn_info(state))
        lines.append("")
        lines.extend(CONTROLS)
        frame.append("\n" + "\n".join(lines))
        return frame

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _format_markers(self, state: GameState) -> str:
        markers = []
        for col in range(state.width):
            valid = can_move_column(state, state.current_player, col)
            if col == state.selected_column:
                markers.append("v " if valid else "x ")
            else:
                markers.append("+ " if valid else "  ")
        return "  " + "".join(markers)

    def _append_cell(self, frame: Text, state: GameState, row: int, col: int) -> None:
        owners = {mouse.player for mouse in state.mice_at(row, col)}
        styles = []
        if len(owners) > 1:
            symbol = _MIXED_SYMBOL
        elif owners:
            owner = owners.pop()
            symbol = _PLAYER_SYMBOLS[owner]
            styles.append(PLAYER_STYLES[owner])
        else:
            symbol = _CELL_SYMBOLS[int(state.grid[row, col])]

        if col == state.selected_column:
            if can_move_column(state, state.current_player, col):
                styles.append(SELECTED_STYLE)
            else:
                styles.append(INVALID_SELECTED_STYLE)

        if self.use_color and styles:
            frame.append(symbol, style=" ".join(styles))
        else:
            frame.append(symbol)
        frame.append(" ")

    def _format_stats(self, state: GameState) -> List[str]:
        lines = ["Player Stats:"]
        for player in PlayerColor:
            count = len(state.mice_of(player))
            label = f"{player.label}:".ljust(5)
            lines.append(
                f"{_PLAYER_SYMBOLS[player]} {label} {count} mice | "
                f"Valid columns: {_format_columns(owned_columns(state, player))}"
            )
        return lines

    def _format_turn_info(self, state: GameState) -> List[str]:
        column_label = state.selected_column + 1
        if can_move_column(state, state.current_player, state.selected_column):
            return [
                "Turn Info:",
                f"Column {column_label} is ready to move!",
                "   Use Up/Dn (or W/S or K/J) to move this column",
            ]
        return [
            "Turn Info:",
            f"Column {column_label} has no {state.current_player.label} mice",
            "   Use <-/-> (or A/D or H/L) to find a valid column",
        ]


def _format_columns(columns: List[int]) -> str:
    if not columns:
        return "None"
    # 1-based for display
    return ", ".join(str(col + 1) for col in columns)

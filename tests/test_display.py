import io

import numpy as np
import pytest

from micemen import CellType, GameState, Mouse, PlayerColor, TerminalRenderer


@pytest.fixture
def ansi_terminal(monkeypatch):
    monkeypatch.setenv("TERM", "xterm")
    monkeypatch.delenv("NO_COLOR", raising=False)


def sample_state() -> GameState:
    grid = np.zeros((4, 5), dtype=np.int8)
    grid[3, :] = CellType.WALL
    mice = [
        Mouse(2, 0, PlayerColor.RED),
        Mouse(2, 4, PlayerColor.BLUE),
        Mouse(2, 2, PlayerColor.RED),
        Mouse(2, 2, PlayerColor.BLUE),
    ]
    return GameState(grid=grid, mice=mice, selected_column=0, current_player=PlayerColor.RED)


def plain_lines(state: GameState) -> list:
    return TerminalRenderer(io.StringIO(), use_color=False).format_state(state).splitlines()


def test_board_rows_and_markers() -> None:
    lines = plain_lines(sample_state())

    assert lines[0] == "Red Player's Turn"
    assert lines[1] == "  v   +     "
    assert lines[2] == "  . . . . . "
    assert lines[4] == "  R . * . B "
    assert lines[5] == "  # # # # # "


def test_stats_and_turn_info() -> None:
    text = "\n".join(plain_lines(sample_state()))

    assert "R Red:  2 mice | Valid columns: 1, 3" in text
    assert "B Blue: 2 mice | Valid columns: 3, 5" in text
    assert "Column 1 is ready to move!" in text


def test_invalid_selection_reported() -> None:
    state = sample_state()
    state.selected_column = 1
    lines = plain_lines(state)

    assert lines[1] == "  + x +     "
    assert "Column 2 has no Red mice" in "\n".join(lines)


def test_player_without_mice_shows_none() -> None:
    state = sample_state()
    state.mice = [mouse for mouse in state.mice if mouse.player == PlayerColor.RED]

    assert "Valid columns: None" in "\n".join(plain_lines(state))


def test_frame_styles_players_and_selection() -> None:
    state = sample_state()
    frame = TerminalRenderer(io.StringIO()).build_frame(state)
    styles = [str(span.style) for span in frame.spans]
    cell_styles = {frame.plain[span.start:span.end]: str(span.style) for span in frame.spans[1:]}

    assert styles[0] == "bold"
    assert "red reverse" in styles  # red mouse in the selected column
    assert cell_styles["B"] == "blue"
    assert styles.count("reverse") == 3  # remaining cells of the selected column
    assert frame.plain == TerminalRenderer(io.StringIO()).format_state(state).rstrip("\n")


def test_invalid_selection_is_dimmed() -> None:
    state = sample_state()
    state.selected_column = 1
    frame = TerminalRenderer(io.StringIO()).build_frame(state)

    assert [str(span.style) for span in frame.spans].count("reverse dim") == 4


def test_no_color_frame_has_no_styles() -> None:
    frame = TerminalRenderer(io.StringIO(), use_color=False).build_frame(sample_state())

    assert frame.spans == []


def test_render_writes_ansi_styles(ansi_terminal) -> None:
    stream = io.StringIO()
    TerminalRenderer(stream).render(sample_state())
    output = stream.getvalue()

    assert "\x1b[2J" in output
    assert "\x1b[" in output.split("Red Player's Turn", 1)[1]
    assert "Red Player's Turn" in output


def test_render_without_color_is_plain_text() -> None:
    stream = io.StringIO()
    renderer = TerminalRenderer(stream, use_color=False)

    renderer.render(sample_state())

    assert "\x1b" not in stream.getvalue()
    written = [line.rstrip() for line in stream.getvalue().splitlines()]
    assert written == [line.rstrip() for line in renderer.format_state(sample_state()).splitlines()]


def test_cursor_and_messages(ansi_terminal) -> None:
    stream = io.StringIO()
    renderer = TerminalRenderer(stream)

    renderer.hide_cursor()
    renderer.show_message("bye [red]")
    renderer.show_cursor()

    assert stream.getvalue() == "\x1b[?25l" + "bye [red]\n" + "\x1b[?25h"

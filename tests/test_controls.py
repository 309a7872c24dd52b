import itertools

import pytest
from readchar import key

from micemen import Action
from micemen.controls import KeyboardHandler, ScriptedInputHandler, action_for_key


@pytest.mark.parametrize(
    "pressed, expected",
    [
        (key.LEFT, Action.MOVE_LEFT),
        (key.RIGHT, Action.MOVE_RIGHT),
        (key.UP, Action.MOVE_COLUMN_UP),
        (key.DOWN, Action.MOVE_COLUMN_DOWN),
        ("A", Action.MOVE_LEFT),
        ("d", Action.MOVE_RIGHT),
        ("W", Action.MOVE_COLUMN_UP),
        ("s", Action.MOVE_COLUMN_DOWN),
        ("h", Action.MOVE_LEFT),
        ("l", Action.MOVE_RIGHT),
        ("k", Action.MOVE_COLUMN_UP),
        ("j", Action.MOVE_COLUMN_DOWN),
        ("q", Action.QUIT),
        ("Q", Action.QUIT),
        (key.ESC, Action.QUIT),
        (key.CTRL_C, Action.QUIT),
        ("x", Action.NONE),
        (key.ENTER, Action.NONE),
    ],
)
def test_action_for_key(pressed, expected) -> None:
    assert action_for_key(pressed) == expected


def test_keyboard_handler_reads_keys() -> None:
    keys = iter(["d", "z", key.UP])
    handler = KeyboardHandler(read_key=lambda: next(keys))

    actions = list(itertools.islice(handler.actions(), 3))

    assert actions == [Action.MOVE_RIGHT, Action.NONE, Action.MOVE_COLUMN_UP]


def test_keyboard_interrupt_maps_to_quit() -> None:
    def interrupted() -> str:
        raise KeyboardInterrupt

    handler = KeyboardHandler(read_key=interrupted)

    assert handler.next_action() == Action.QUIT


def test_scripted_handler_quits_after_script() -> None:
    with ScriptedInputHandler([Action.MOVE_LEFT, Action.NONE]) as handler:
        actions = list(itertools.islice(handler.actions(), 4))

    assert actions == [Action.MOVE_LEFT, Action.NONE, Action.QUIT, Action.QUIT]

from contextlib import contextmanager

import pytest

from cubes.cli import (
    BLACK_COLOR,
    CLEAR_SCREEN,
    RESET_COLOR,
    WHITE_BG_COLOR,
    Action,
    Key,
    MoveCursor,
    OptionCursor,
    QuitRequested,
    clear_terminal,
    print_state,
    read_key,
    render_board,
    render_menu,
    select_move,
    select_option,
)
from cubes.engine import BoardCoordinate, FieldState, MoveCoordinate, create_empty


class FakeKeystroke(str):
    def __new__(cls, text="", code=None):
        obj = super().__new__(cls, text)
        obj.code = code
        return obj


class FakeTerminal:
    KEY_UP = 1001
    KEY_DOWN = 1002
    KEY_LEFT = 1003
    KEY_RIGHT = 1004
    KEY_ENTER = 1005
    KEY_ESCAPE = 1006

    def __init__(self, *names):
        self._keys = [self._keystroke(name) for name in names]

    def _keystroke(self, name):
        codes = {
            "up": self.KEY_UP,
            "down": self.KEY_DOWN,
            "left": self.KEY_LEFT,
            "right": self.KEY_RIGHT,
            "enter": self.KEY_ENTER,
            "esc": self.KEY_ESCAPE,
        }
        if name in codes:
            return FakeKeystroke("", codes[name])
        texts = {"space": " ", "ctrl_c": "\x03", "cr": "\r"}
        return FakeKeystroke(texts.get(name, name))

    @property
    def remaining(self):
        return len(self._keys)

    def inkey(self, timeout=None):
        return self._keys.pop(0)

    @contextmanager
    def raw(self):
        yield self


@pytest.mark.parametrize(
    "name, expected",
    [
        ("up", Key.UP),
        ("down", Key.DOWN),
        ("left", Key.LEFT),
        ("right", Key.RIGHT),
        ("enter", Key.ENTER),
        ("cr", Key.ENTER),
        ("space", Key.SPACE),
        ("esc", Key.ESC),
        ("ctrl_c", Key.CTRL_C),
        ("q", Key.OTHER),
    ],
)
def test_read_key_classifies(name, expected):
    assert read_key(FakeTerminal(name)) is expected


def test_option_cursor_clamps_at_top():
    cursor = OptionCursor(3)
    assert cursor.press(Key.UP) is Action.NONE
    assert cursor.selected == 0


def test_option_cursor_clamps_at_bottom():
    cursor = OptionCursor(3)
    for _ in range(5):
        cursor.press(Key.DOWN)
    assert cursor.selected == 2


@pytest.mark.parametrize(
    "key, action",
    [
        (Key.ENTER, Action.SELECT),
        (Key.SPACE, Action.SELECT),
        (Key.ESC, Action.QUIT),
        (Key.CTRL_C, Action.QUIT),
        (Key.OTHER, Action.NONE),
    ],
)
def test_option_cursor_actions(key, action):
    assert OptionCursor(2).press(key) is action


def test_option_cursor_rejects_empty_menu():
    with pytest.raises(ValueError):
        OptionCursor(0)


def test_move_cursor_starts_at_source_position():
    assert MoveCursor().move() == MoveCoordinate(2, 0)


def test_move_cursor_up_at_top_layer_stays():
    cursor = MoveCursor()
    cursor.press(Key.UP)
    assert cursor.selected == BoardCoordinate(2, 0, 0)


def test_move_cursor_down_wraps_into_next_layer():
    cursor = MoveCursor()
    for _ in range(4):
        cursor.press(Key.DOWN)
    assert (cursor.y, cursor.z) == (0, 1)


def test_move_cursor_up_wraps_into_previous_layer():
    cursor = MoveCursor(x=0, y=0, z=2)
    cursor.press(Key.UP)
    assert (cursor.y, cursor.z) == (3, 1)


def test_move_cursor_down_at_bottom_stays():
    cursor = MoveCursor(x=0, y=3, z=3)
    cursor.press(Key.DOWN)
    assert (cursor.y, cursor.z) == (3, 3)


def test_move_cursor_horizontal_clamped():
    cursor = MoveCursor()
    for _ in range(6):
        cursor.press(Key.RIGHT)
    assert cursor.x == 3
    for _ in range(6):
        cursor.press(Key.LEFT)
    assert cursor.x == 0


def test_move_cursor_confirm_and_quit():
    cursor = MoveCursor()
    assert cursor.press(Key.SPACE) is Action.SELECT
    assert cursor.press(Key.ESC) is Action.QUIT


def test_render_board_without_selection_matches_engine():
    state = create_empty().moved_clone(MoveCoordinate(1, 2))
    assert render_board(state) == state.render()


def test_render_board_highlights_one_cell():
    state = create_empty()
    text = render_board(state, BoardCoordinate(0, 0, 0))
    highlighted = WHITE_BG_COLOR + BLACK_COLOR + FieldState.EMPTY.symbol() + RESET_COLOR
    assert text.startswith(highlighted + " ")
    assert text.count(WHITE_BG_COLOR) == 1


def test_render_menu_marks_selected():
    text = render_menu("Pick", ["a", "b"], 1)
    lines = text.split("\r\n")
    assert lines[0] == "Pick"
    assert lines[1] == "1"
    assert lines[2] == " - a"
    assert lines[3] == " > b"


def test_clear_terminal_writes_escape(capsys):
    clear_terminal()
    assert capsys.readouterr().out == CLEAR_SCREEN


def test_print_state_writes_board(capsys):
    state = create_empty()
    print_state(state)
    assert capsys.readouterr().out == state.render()


def test_select_option_returns_index(capsys):
    term = FakeTerminal("down", "down", "enter")
    assert select_option("Menu", ["a", "b", "c"], term) == 2
    assert " > c" in capsys.readouterr().out


def test_select_option_quit_raises():
    with pytest.raises(QuitRequested):
        select_option("Menu", ["a"], FakeTerminal("ctrl_c"))


def test_select_move_returns_column():
    term = FakeTerminal("left", "down", "enter")
    assert select_move(create_empty(), term) == MoveCoordinate(1, 1)
    assert term.remaining == 0


def test_select_move_quit_raises():
    with pytest.raises(QuitRequested):
        select_move(create_empty(), FakeTerminal("right", "esc"))
"""Terminal widgets: menu selection, board cursor and board drawing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Sequence

import blessed

from cubes.engine import SIZE, BoardCoordinate, GameState, MoveCoordinate

RESET_COLOR = "\033[0m"
WHITE_BG_COLOR = "\033[47m"
BLACK_COLOR = "\033[30m"
CLEAR_SCREEN = "\033[H\033[2J"


class Key(Enum):
    """Keys the interface reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    SPACE = auto()
    CTRL_C = auto()
    ESC = auto()
    OTHER = auto()


class Action(Enum):
    """Outcome of a single key press."""

    NONE = auto()
    SELECT = auto()
    QUIT = auto()


class QuitRequested(Exception):
    """Raised when the user leaves a prompt with Esc or Ctrl-C."""


_CONFIRM_KEYS = frozenset({Key.ENTER, Key.SPACE})
_QUIT_KEYS = frozenset({Key.CTRL_C, Key.ESC})


def _clamp(value: int, upper: int) -> int:
    return min(upper, max(0, value))


def _common_action(key: Key) -> Action | None:
    if key in _CONFIRM_KEYS:
        return Action.SELECT
    if key in _QUIT_KEYS:
        return Action.QUIT
    return None


@dataclass
class OptionCursor:
    """Highlighted entry of a vertical menu."""

    count: int
    selected: int = 0

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("a menu needs at least one option")
        self.selected = _clamp(self.selected, self.count - 1)

    def press(self, key: Key) -> Action:
        """Apply a key press and report whether the menu is done."""
        action = _common_action(key)
        if action is not None:
            return action
        if key is Key.UP:
            self.selected -= 1
        elif key is Key.DOWN:
            self.selected += 1
        self.selected = _clamp(self.selected, self.count - 1)
        return Action.NONE


@dataclass
class MoveCursor:
    """Highlighted cell while choosing a move; Up/Down walk through the layers."""

    x: int = 2
    y: int = 0
    z: int = 0

    def press(self, key: Key) -> Action:
        """Apply a key press and report whether a move was chosen."""
        action = _common_action(key)
        if action is not None:
            return action
        if key is Key.UP:
            if self.y < 1:
                if self.z > 0:
                    self.z -= 1
                    self.y = SIZE - 1
            else:
                self.y -= 1
        elif key is Key.DOWN:
            if self.y > SIZE - 2 and self.z < SIZE - 1:
                self.z += 1
                self.y = 0
            else:
                self.y += 1
        elif key is Key.LEFT:
            self.x -= 1
        elif key is Key.RIGHT:
            self.x += 1
        self.x = _clamp(self.x, SIZE - 1)
        self.y = _clamp(self.y, SIZE - 1)
        self.z = _clamp(self.z, SIZE - 1)
        return Action.NONE

    @property
    def selected(self) -> BoardCoordinate:
        return BoardCoordinate(self.x, self.y, self.z)

    def move(self) -> MoveCoordinate:
        """The column under the cursor."""
        return MoveCoordinate(self.x, self.y)


def render_board(state: GameState, selected: BoardCoordinate | None = None) -> str:
    """Draw the board layer by layer, highlighting the selected cell."""
    parts: list[str] = []
    for z, layer in enumerate(state.board):
        for y, row in enumerate(layer):
            for x, value in enumerate(row):
                symbol = value.symbol()
                if selected == BoardCoordinate(x, y, z):
                    symbol = WHITE_BG_COLOR + BLACK_COLOR + symbol + RESET_COLOR
                parts.append(symbol + " ")
            parts.append("\r\n")
        parts.append("\r\n")
    return "".join(parts)


def render_menu(title: str, options: Sequence[str], selected: int) -> str:
    """Draw a menu with the selected entry marked."""
    lines = [title, str(selected)]
    lines.extend(
        f" {'>' if index == selected else '-'} {option}"
        for index, option in enumerate(options)
    )
    return "".join(line + "\r\n" for line in lines)


def clear_terminal() -> None:
    print(CLEAR_SCREEN, end="", flush=True)


def read_key(term: Any) -> Key:
    """Block for one key press on the terminal and classify it."""
    keystroke = term.inkey()
    by_code = {
        term.KEY_UP: Key.UP,
        term.KEY_DOWN: Key.DOWN,
        term.KEY_LEFT: Key.LEFT,
        term.KEY_RIGHT: Key.RIGHT,
        term.KEY_ENTER: Key.ENTER,
        term.KEY_ESCAPE: Key.ESC,
    }
    code = getattr(keystroke, "code", None)
    if code is not None and code in by_code:
        return by_code[code]
    by_text = {
        "\r": Key.ENTER,
        "\n": Key.ENTER,
        " ": Key.SPACE,
        "\x03": Key.CTRL_C,
        "\x1b": Key.ESC,
    }
    return by_text.get(str(keystroke), Key.OTHER)


def _terminal(term: Any) -> Any:
    return blessed.Terminal() if term is None else term


def select_option(title: str, options: Sequence[str], term: Any = None) -> int:
    """Let the user pick a menu entry; raises QuitRequested on Esc or Ctrl-C."""
    term = _terminal(term)
    cursor = OptionCursor(len(options))
    with term.raw():
        while True:
            clear_terminal()
            print(render_menu(title, options, cursor.selected), end="", flush=True)
            action = cursor.press(read_key(term))
            if action is Action.SELECT:
                return cursor.selected
            if action is Action.QUIT:
                raise QuitRequested


def select_move(state: GameState, term: Any = None) -> MoveCoordinate:
    """Let the user pick a column; raises QuitRequested on Esc or Ctrl-C."""
    term = _terminal(term)
    cursor = MoveCursor()
    with term.raw():
        while True:
            clear_terminal()
            print(render_board(state, cursor.selected), end="", flush=True)
            action = cursor.press(read_key(term))
            if action is Action.SELECT:
                return cursor.move()
            if action is Action.QUIT:
                raise QuitRequested


def print_state(state: GameState) -> None:
    print(render_board(state), end="", flush=True)
"""Board model and rules for 4x4x4 four-in-a-row with gravity."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

SIZE = 4

Board = list[list[list["FieldState"]]]
Cell = tuple[int, int, int]  # (z, y, x)


class FieldState(IntEnum):
    """Content of a single board cell; also used to name a player."""

    EMPTY = 0
    WHITE = 1
    BLACK = 2

    def flip(self) -> FieldState:
        """Return the opposing player; EMPTY stays EMPTY."""
        if self is FieldState.WHITE:
            return FieldState.BLACK
        if self is FieldState.BLACK:
            return FieldState.WHITE
        return self

    def symbol(self) -> str:
        """One-character representation used when drawing the board."""
        return _SYMBOLS.get(self, "?")

    def display_name(self) -> str:
        """Human readable name."""
        return _NAMES.get(self, "???")


_SYMBOLS = {FieldState.EMPTY: "_", FieldState.WHITE: "O", FieldState.BLACK: "X"}
_NAMES = {
    FieldState.EMPTY: "Empty",
    FieldState.WHITE: "White",
    FieldState.BLACK: "Black",
}


def _in_range(*values: int) -> bool:
    return all(0 <= value < SIZE for value in values)


@dataclass(frozen=True)
class MoveCoordinate:
    """A column on the board, selected by its x and y position."""

    x: int
    y: int

    def is_valid(self) -> bool:
        return _in_range(self.x, self.y)


@dataclass(frozen=True)
class BoardCoordinate:
    """A single cell on the board."""

    x: int
    y: int
    z: int

    def is_valid(self) -> bool:
        return _in_range(self.x, self.y, self.z)


class InvalidMoveError(ValueError):
    """Raised when a move cannot be played on the current board."""


def _build_lines() -> tuple[tuple[Cell, ...], ...]:
    """All 76 winning lines, in the order the winner check visits them."""
    last = SIZE - 1
    steps = range(SIZE)
    lines: list[tuple[Cell, ...]] = []
    for a in steps:
        for b in steps:
            lines.append(tuple((i, a, b) for i in steps))
            lines.append(tuple((a, i, b) for i in steps))
            lines.append(tuple((a, b, i) for i in steps))
    for d in steps:
        lines.append(tuple((d, i, i) for i in steps))
        lines.append(tuple((d, i, last - i) for i in steps))
        lines.append(tuple((i, d, i) for i in steps))
        lines.append(tuple((i, d, last - i) for i in steps))
        lines.append(tuple((i, i, d) for i in steps))
        lines.append(tuple((i, last - i, d) for i in steps))
    lines.append(tuple((i, i, i) for i in steps))
    lines.append(tuple((i, i, last - i) for i in steps))
    lines.append(tuple((i, last - i, i) for i in steps))
    lines.append(tuple((i, last - i, last - i) for i in steps))
    return tuple(lines)


LINES = _build_lines()


def _empty_board() -> Board:
    return [
        [[FieldState.EMPTY for _ in range(SIZE)] for _ in range(SIZE)]
        for _ in range(SIZE)
    ]


def _near_win_score(player: FieldState, fields: Iterator[FieldState]) -> float:
    opponent = player.flip()
    count = 0
    for value in fields:
        if value is FieldState.EMPTY:
            continue
        if value is opponent:
            return 0.0
        count += 1
    if count >= 3:
        return 4.0
    if count >= 2:
        return 1.0
    return 0.0


@dataclass
class GameState:
    """Board contents indexed as board[z][y][x], the player to move and the history."""

    board: Board = field(default_factory=_empty_board)
    current_player: FieldState = FieldState.WHITE
    move_history: list[MoveCoordinate] = field(default_factory=list)

    def _cells(self, line: tuple[Cell, ...]) -> Iterator[FieldState]:
        return (self.board[z][y][x] for z, y, x in line)

    def find_spot(self, move: MoveCoordinate) -> int | None:
        """Return the lowest empty z in the column, or None if it is full."""
        if not move.is_valid():
            raise InvalidMoveError(f"coordinate out of range: ({move.x}, {move.y})")
        for z in range(SIZE):
            if self.board[z][move.y][move.x] is FieldState.EMPTY:
                return z
        return None

    def _spot_or_raise(self, move: MoveCoordinate) -> int:
        z = self.find_spot(move)
        if z is None:
            raise InvalidMoveError(f"column ({move.x}, {move.y}) is full")
        return z

    def moved_clone(self, move: MoveCoordinate) -> GameState:
        """Return a new state with the move played; this state is left untouched."""
        z = self._spot_or_raise(move)
        clone = GameState(
            board=[[list(row) for row in layer] for layer in self.board],
            current_player=self.current_player,
            move_history=list(self.move_history),
        )
        clone.board[z][move.y][move.x] = clone.current_player
        clone.current_player = clone.current_player.flip()
        clone.move_history.append(move)
        return clone

    def make_move(self, move: MoveCoordinate) -> None:
        """Play the move in place."""
        z = self._spot_or_raise(move)
        self.board[z][move.y][move.x] = self.current_player
        self.current_player = self.current_player.flip()
        self.move_history.append(move)

    def winner(self) -> tuple[bool, FieldState]:
        """Return (finished, winner); a full board without a line is a draw (EMPTY)."""
        for line in LINES:
            first, *rest = self._cells(line)
            if first is not FieldState.EMPTY and all(value is first for value in rest):
                return True, first
        if any(
            value is FieldState.EMPTY
            for layer in self.board
            for row in layer
            for value in row
        ):
            return False, FieldState.EMPTY
        return True, FieldState.EMPTY

    def is_valid(self) -> bool:
        """Whether the piece counts could arise from alternating play with White first."""
        cells = [value for layer in self.board for row in layer for value in row]
        diff = cells.count(FieldState.WHITE) - cells.count(FieldState.BLACK)
        return diff in (0, 1)

    def count_near_wins(self, player: FieldState) -> float:
        """Score open lines: 4 for three of the player's pieces, 1 for two."""
        return sum(_near_win_score(player, self._cells(line)) for line in LINES)

    def legal_moves(self) -> list[MoveCoordinate]:
        """All columns that still have room, x-major order."""
        return [
            move
            for move in (
                MoveCoordinate(x, y) for x in range(SIZE) for y in range(SIZE)
            )
            if self.find_spot(move) is not None
        ]

    def render(self) -> str:
        """Layer-by-layer text drawing of the board."""
        return "".join(
            "".join(
                "".join(value.symbol() + " " for value in row) + "\r\n"
                for row in layer
            )
            + "\r\n"
            for layer in self.board
        )


def create_empty() -> GameState:
    """A fresh game with White to move."""
    return GameState()
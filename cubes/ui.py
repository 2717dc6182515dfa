"""Menus and game loops of the interactive program."""

from __future__ import annotations

import argparse
from typing import Any, Sequence

import blessed

from cubes.cli import (
    QuitRequested,
    clear_terminal,
    print_state,
    select_move,
    select_option,
)
from cubes.engine import FieldState, InvalidMoveError, create_empty
from cubes.minimax import get_next_move

MENU_TITLE = "Welcome to 3D 4 in a row. Please select an option:"
MENU_OPTIONS = (
    "Play singleplayer",
    "Play multiplayer (local)",
    "Let the computer play itself",
    "View rules",
    "Exit",
)
SINGLE_PLAYER_DEPTH = 4
NO_PLAYER_DEPTH = 5


def _wait_for_enter() -> None:
    try:
        input()
    except EOFError:
        pass


def _say_bye(newline: bool = True) -> None:
    clear_terminal()
    print("Bye :)", end="\n" if newline else "", flush=True)


def main_menu(term: Any = None) -> None:
    """Show the main menu until the user leaves it."""
    if term is None:
        term = blessed.Terminal()
    while True:
        try:
            choice = select_option(MENU_TITLE, MENU_OPTIONS, term)
        except QuitRequested:
            _say_bye()
            return
        if choice == 0:
            single_player(term)
        elif choice == 2:
            no_player()
        elif choice == 3:
            return


def single_player(term: Any = None) -> FieldState | None:
    """Play as White against the computer; returns the winner, or None if quit."""
    state = create_empty()
    while True:
        finished, winner = state.winner()
        if finished:
            break
        try:
            move = select_move(state, term)
        except QuitRequested:
            _say_bye(newline=False)
            return None
        try:
            state = state.moved_clone(move)
        except InvalidMoveError:
            continue
        clear_terminal()
        print_state(state)
        finished, winner = state.winner()
        if finished:
            break
        state = state.moved_clone(get_next_move(state, SINGLE_PLAYER_DEPTH))
        clear_terminal()
        print_state(state)

    if winner is FieldState.WHITE:
        print("You won!")
    elif winner is FieldState.BLACK:
        print("You lost.")
    else:
        print("It was a draw.")
    _wait_for_enter()
    return winner


def no_player() -> FieldState:
    """Let the computer play both sides and return the winner."""
    state = create_empty()
    while True:
        finished, winner = state.winner()
        if finished:
            break
        state = state.moved_clone(get_next_move(state, NO_PLAYER_DEPTH))
        print_state(state)
    if winner is FieldState.EMPTY:
        print("Draw.")
    else:
        print(winner.display_name() + " won.")
    print("Press any key to continue.")
    _wait_for_enter()
    return winner


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="cubes", description="Four in a row on a 4x4x4 board."
    )
    parser.parse_args(argv)
    main_menu()
    return 0
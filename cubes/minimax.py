"""Alpha-beta search for choosing the computer's move."""

from __future__ import annotations

import math

from cubes.engine import FieldState, GameState, InvalidMoveError, MoveCoordinate


class InvalidStateError(RuntimeError):
    """Raised when the search meets a board that cannot occur in a game."""


def get_next_move(state: GameState, depth: int) -> MoveCoordinate:
    """Return the legal move with the highest evaluation for the player to move."""
    moves = state.legal_moves()
    if not moves:
        raise InvalidMoveError("no legal moves left")
    player = state.current_player
    best_move = moves[0]
    best_eval = -math.inf
    for move in moves:
        value = evaluate_state(
            state.moved_clone(move), depth, -math.inf, math.inf, player, player
        )
        if best_move is moves[0] and best_eval == -math.inf or value > best_eval:
            best_move, best_eval = move, value
    return best_move


def evaluate_state(
    state: GameState,
    depth: int,
    alpha: float,
    beta: float,
    evaluate_as: FieldState,
    maximizing_player: FieldState,
) -> float:
    """Minimax value of the state from evaluate_as's point of view."""
    finished, winner = state.winner()
    if not state.is_valid():
        raise InvalidStateError("invalid state:\r\n" + state.render())

    if finished:
        if winner is evaluate_as:
            return 1000.0 + depth * 100.0
        if winner is evaluate_as.flip():
            return -1000.0 - depth * 100.0
        return 0.0

    legal_moves = state.legal_moves()
    if depth <= 0 or not legal_moves:
        return simple_eval(state, evaluate_as)

    next_player = maximizing_player.flip()
    if maximizing_player is state.current_player:
        value = -math.inf
        for move in legal_moves:
            value = max(
                value,
                evaluate_state(
                    state.moved_clone(move), depth - 1, alpha, beta,
                    evaluate_as, next_player,
                ),
            )
            if value > beta:
                break
            alpha = max(alpha, value)
        return value

    value = math.inf
    for move in legal_moves:
        value = min(
            value,
            evaluate_state(
                state.moved_clone(move), depth - 1, alpha, beta,
                evaluate_as, next_player,
            ),
        )
        if value < alpha:
            break
        beta = min(beta, value)
    return value


def simple_eval(state: GameState, evaluate_for: FieldState) -> float:
    """Heuristic in [-1, 1] comparing both players' near wins."""
    good = state.count_near_wins(evaluate_for)
    bad = state.count_near_wins(evaluate_for.flip())
    if good + bad == 0:
        return 0.0
    result = (good - bad) / (good + bad)
    return min(50.0, max(-50.0, result))
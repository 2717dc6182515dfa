# cubes

Four in a row on a three-dimensional board, played in the terminal.

The board is a 4×4×4 cube made of four stacked layers. A move picks a
column (an `x`, `y` position), and the piece drops to the lowest free layer
of that column. The first player to line up four pieces wins. The line can
run along any axis, along a diagonal within a plane, or along one of the
four diagonals through the whole cube. If the cube fills up with no line,
the game is a draw.

## Installing

```
pip install .
```

## Playing

```
cubes
```

The command takes no options other than `--help`. It opens the main menu,
which lists five entries:

- **Play singleplayer**: you play White (`O`) against the computer, which
  plays Black (`X`) and searches 4 plies deep. Choosing a column that is
  already full is ignored and you choose again. When the game ends the
  result is printed and the program waits for Enter before going back to
  the menu.
- **Play multiplayer (local)**: does nothing; the menu is shown again.
- **Let the computer play itself**: the computer plays both sides, searching
  5 plies deep, and the board is printed after each move. The winner (or
  "Draw.") is printed and the program waits for Enter.
- **View rules**: leaves the program.
- **Exit**: does nothing; the menu is shown again.

Keys:

| Key            | Menu               | Board                                                         |
|----------------|--------------------|---------------------------------------------------------------|
| Up / Down      | move the selection | move between rows, moving on to the next layer at the edge    |
| Left / Right   | –                  | move between columns                                          |
| Enter / Space  | choose             | play in the selected column                                   |
| Esc / Ctrl-C   | leave the program  | abandon the game and go back to the menu                      |

The layers are drawn top to bottom, from layer 0 (where pieces land first)
to layer 3. `_` is an empty cell; the cell under the cursor is highlighted.

## What it does not do

There is no game between two people at one keyboard and no screen that
explains the rules: the menu entries for them are listed but do not lead
anywhere. Games are not saved.

## Using the engine

```python
from cubes.engine import FieldState, MoveCoordinate, create_empty
from cubes.minimax import get_next_move

state = create_empty()
state = state.moved_clone(MoveCoordinate(0, 0))   # White plays column (0, 0)
reply = get_next_move(state, 3)                   # Black's answer, 3 plies deep
state = state.moved_clone(reply)

finished, winner = state.winner()
print(state.render())
```

`cubes.engine`:

- `FieldState` (`EMPTY`, `WHITE`, `BLACK`) with `flip()`, `symbol()` and
  `display_name()`.
- `MoveCoordinate(x, y)` and `BoardCoordinate(x, y, z)`, each with
  `is_valid()`.
- `GameState` holds `board` (indexed `board[z][y][x]`), `current_player`
  and `move_history`. `legal_moves()` lists the columns that still have
  room; `find_spot()` gives the lowest free layer of a column, or `None`.
  `moved_clone()` returns a new state and leaves the original unchanged;
  `make_move()` plays in place. Both raise `InvalidMoveError` when the
  column is full or out of range. `winner()` returns `(finished, winner)`,
  with `FieldState.EMPTY` as the winner of a draw. `is_valid()` checks the
  piece counts, `count_near_wins()` scores open lines, and `render()` draws
  the board as text.
- `create_empty()` starts a game with White to move.

`cubes.minimax`:

- `get_next_move(state, depth)` picks the best legal move for the player
  to move; it raises `InvalidMoveError` when no move is left.
- `evaluate_state()` is the alpha-beta search and `simple_eval()` the static
  evaluation it falls back on. The search raises `InvalidStateError` on a
  board whose piece counts cannot occur in a game.

`cubes.cli` holds the terminal pieces: `select_option()`, `select_move()`
(both raise `QuitRequested` on Esc or Ctrl-C), the key handling in
`OptionCursor` and `MoveCursor`, and `render_board()` / `render_menu()`,
which return the drawn text without printing it.

## Running the tests

```
pip install .[test]
pytest
```
# othello

Othello (also known as Reversi) played in the terminal on an 8×8 board.
Either side can be a human, who types moves, or the computer. The game's
prompts and messages are in German.

## Installation

```
pip install .
```

## Playing

```
othello
```

Before the first game, the program runs its built-in rule checks and
prints the results. If any check fails, it stops with exit status 1. To
skip the checks, run:

```
othello --no-self-test
```

The program then asks whether player 1 (`X`) and player 2 (`O`) are
computer players. Answer `j` or `J` for yes. Any other answer means a human
plays that side.

A human player enters a move as a column letter followed by a row number,
for example `A1` or `d3`. Letter case does not matter. If the move is not
legal, the program asks again. A player with no legal move is skipped, and
a message reports this. The board is printed after every move. The game
ends when neither player can move. The player with more stones wins, and
equal counts are a draw.

After each game, enter `B` to quit or any other character to play again.
The program also stops at end of input.

The computer picks the move that leaves its opponent the fewest legal
replies. When moves tie, it takes the first one, scanning row by row from
the top left.

## Using the library

```python
from othello.board import Board
from othello.ai import choose_move

board = Board.initial()
print(board.render())
print(board.count_moves(1))        # 4 legal opening moves for X
x, y = choose_move(board, 1)       # None when the player has no move
board.apply_move(1, x, y)
print(board[x, y])                 # 1
print(board.winner())              # 0 draw, 1 or 2 for the player ahead
```

- `othello.board`: `Board` (with `initial`, `copy`, `winner`,
  `is_valid_move`, `apply_move`, `valid_moves`, `count_moves` and
  `render`), plus the helpers `on_board(x, y)` and `opponent(player)`.
  Cells hold `0` for empty, `1` for player X and `2` for player O.
  Positions are `(column, row)` pairs counted from 0.
- `othello.ai`: `choose_move(board, player)` returns the computer's move.
  `computer_move(board, player, output)` plays that move and reports it.
- `othello.game`: `parse_move(text)`, `human_move(...)`, `play(...)` and
  `main(argv)`. `PlayerType` has the members `HUMAN` and `COMPUTER`.
  `play` and `human_move` take an `input_fn` and an `output` stream, so a
  game can be driven without a terminal.
- `othello.selftest`: `run_self_tests(output)` runs the built-in rule
  checks and returns `True` when every check passes.

## Limits

The board size is fixed at 8×8. Games cannot be saved, loaded or undone,
and there is no play over a network.

## Development

```
pip install .[test]
pytest
```
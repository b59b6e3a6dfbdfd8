"""A simple computer opponent that minimises the rival's mobility."""

from __future__ import annotations

import sys
from typing import TextIO

from othello.board import Board, opponent


def _square_name(x: int, y: int) -> str:
    return f"{chr(ord('A') + x)}{y + 1}"


def choose_move(board: Board, player: int) -> tuple[int, int] | None:
    """Return the move leaving the opponent fewest replies, or None if none exists.

    Ties go to the first move in row-major order.
    """
    rival = opponent(player)

    def replies(move: tuple[int, int]) -> int:
        preview = board.copy()
        preview.apply_move(player, *move)
        return preview.count_moves(rival)

    return min(board.valid_moves(player), key=replies, default=None)


def computer_move(board: Board, player: int, output: TextIO | None = None) -> bool:
    """Play the computer's move on ``board``; return False if no move is possible."""
    move = choose_move(board, player)
    if move is None:
        return False
    out = sys.stdout if output is None else output
    board.apply_move(player, *move)
    out.write(f"\nSpieler {player} setzt auf {_square_name(*move)}\n")
    return True
"""Interactive Othello game loop for human and computer players."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TextIO

from othello.ai import computer_move
from othello.board import PLAYER_ONE, Board, opponent
from othello.selftest import run_self_tests

InputFn = Callable[[], str]

_SYMBOLS = {1: "X", 2: "O"}

_RESULT_MESSAGES = {
    0: "Unentschieden!",
    1: "Spieler 1 (X) gewinnt!",
    2: "Spieler 2 (O) gewinnt!",
}


class PlayerType(Enum):
    """Who makes the moves for a player."""

    HUMAN = 1
    COMPUTER = 2


def _out(output: TextIO | None) -> TextIO:
    return sys.stdout if output is None else output


def _write(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _read_token(input_fn: InputFn) -> str:
    """Return the next whitespace-delimited word, skipping blank lines."""
    while True:
        words = input_fn().split()
        if words:
            return words[0]


def parse_move(text: str) -> tuple[int, int]:
    """Turn a square name such as ``A1`` or ``a1`` into (column, row) indices.

    The result may lie off the board; only texts shorter than two
    characters are rejected.
    """
    if len(text) < 2:
        raise ValueError(f"move {text!r} needs a column letter and a row digit")
    return ord(text[0]) % 32 - 1, ord(text[1]) - ord("1")


def human_move(
    board: Board,
    player: int,
    input_fn: InputFn | None = None,
    output: TextIO | None = None,
) -> bool:
    """Ask a human for a move until a legal one is given, then play it.

    Returns False without asking if the player has no legal move.
    """
    if board.count_moves(player) == 0:
        return False
    read = input if input_fn is None else input_fn
    out = _out(output)
    symbol = _SYMBOLS.get(player, "O")

    while True:
        _write(out, f"\nDu bist {symbol}. Dein Zug (z.B. A1, a1): ")
        token = _read_token(read)
        try:
            x, y = parse_move(token)
        except ValueError:
            x = y = -1
        if board.is_valid_move(player, x, y):
            break
        _write(out, "\nUngueltige Eingabe !\n")

    board.apply_move(player, x, y)
    _write(out, f"\nSpieler {player} setzt auf {chr(ord('A') + x)}{y + 1}\n")
    return True


def play(
    player_types: Sequence[PlayerType],
    input_fn: InputFn | None = None,
    output: TextIO | None = None,
) -> Board:
    """Play one full game from the starting position and return the final board."""
    if len(player_types) != 2:
        raise ValueError("exactly two player types are required")
    out = _out(output)
    board = Board.initial()
    player = PLAYER_ONE
    _write(out, board.render())

    while board.count_moves(1) > 0 or board.count_moves(2) > 0:
        if player_types[player - 1] is PlayerType.COMPUTER:
            moved = computer_move(board, player, out)
        else:
            moved = human_move(board, player, input_fn, out)
        if moved:
            _write(out, board.render())
        else:
            _write(out, f"Spieler {player} kann Zug nicht ausführen\n")
        player = opponent(player)

    _write(out, _RESULT_MESSAGES[board.winner()] + "\n")
    return board


def _ask_player_type(number: int, read: InputFn, out: TextIO) -> PlayerType:
    _write(out, f"Ist Spieler {number} ein Computer ? (j/n) ")
    answer = _read_token(read)[0].upper()
    return PlayerType.COMPUTER if answer == "J" else PlayerType.HUMAN


def main(argv: Sequence[str] | None = None) -> int:
    """Run the self tests, then play games until the user quits."""
    parser = argparse.ArgumentParser(prog="othello", description="Play Othello.")
    parser.add_argument(
        "--no-self-test",
        action="store_true",
        help="skip the built-in rule checks before playing",
    )
    args = parser.parse_args(argv)
    out = sys.stdout
    read: InputFn = input

    if not args.no_self_test:
        if run_self_tests(out):
            _write(out, "ALLE TESTS BESTANDEN!\n")
        else:
            _write(out, "MINDESTENS EIN TEST IST FEHLGESCHLAGEN!\n")
            return 1
        _write(out, "\n\n")

    _write(out, Board.initial().render())

    try:
        while True:
            _write(out, "Start!\n")
            types = (_ask_player_type(1, read, out), _ask_player_type(2, read, out))
            _write(out, "\n")
            play(types, read, out)
            _write(out, "\n")
            _write(
                out,
                "Geben Sie [B] ein, um das Spiel zu beenden, "
                "ein anderes Zeichen, um fortzufahren.  ",
            )
            if _read_token(read)[0].upper() == "B":
                break
    except EOFError:
        _write(out, "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Built-in checks of the board rules, reported as readable text."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping, Sequence
from typing import TextIO

from othello.board import HEIGHT, WIDTH, Board, on_board

VERBOSE = True
"""Whether passing checks also print their boards and values."""

_BLANK: tuple[str, ...] = ("." * WIDTH,) * HEIGHT


def _out(output: TextIO | None) -> TextIO:
    return sys.stdout if output is None else output


def _layout(changes: Mapping[int, str], base: Sequence[str] = _BLANK) -> tuple[str, ...]:
    """Rows of ``base`` with the rows named in ``changes`` replaced; '.' is empty."""
    return tuple(changes.get(y, row) for y, row in enumerate(base))


def _make(layout: Sequence[str]) -> Board:
    return Board([[0 if cell == "." else int(cell) for cell in row] for row in layout])


def _full(*rows: str) -> Board:
    return _make(rows)


def _cycled(*pattern: str) -> Board:
    return _make([pattern[y % len(pattern)] for y in range(HEIGHT)])


def _sparse(changes: Mapping[int, str]) -> Board:
    return _make(_layout(changes))


def _report(out: TextIO, label: int, passed: bool) -> bool:
    out.write(f"Test {label} bestanden!\n\n" if passed else f"Test {label} fehlgeschlagen\n\n")
    return passed


def _status(out: TextIO, number: int, correct: bool) -> None:
    out.write(f"Test {number}{' OK' if correct else ' FEHLER'}\n")


def check_winner(board: Board, expected: int, number: int, output: TextIO | None = None) -> bool:
    """Check that ``board.winner()`` equals ``expected``."""
    out = _out(output)
    out.write(f"Fuehre Test {number + 1} fuer 'gewinner()' aus ...\n")
    out.write("----------------------------------\n\n")
    result = board.winner()
    if _report(out, number + 1, result == expected):
        return True
    if VERBOSE:
        out.write(board.render())
        out.write(f"\nBerechnetes Ergebnis: {result}\nRichtiges Ergebnis: {expected}\n\n")
    return False


def check_on_board(x: int, y: int, expected: bool, number: int, output: TextIO | None = None) -> bool:
    """Check that ``on_board(x, y)`` equals ``expected``."""
    out = _out(output)
    result = on_board(x, y)
    if result == expected:
        out.write(f"Test {number} erfolgreich.\n")
        return True
    out.write(
        f"Test {number} fehlgeschlagen: aufSpielfeld({x}, {y}) -> {int(result)}"
        f", erwartet: {int(expected)}\n"
    )
    return False


def check_valid_move(
    board: Board,
    player: int,
    x: int,
    y: int,
    expected: bool,
    number: int,
    output: TextIO | None = None,
) -> bool:
    """Check that ``board.is_valid_move(player, x, y)`` equals ``expected``."""
    return _report(_out(output), number + 1, board.is_valid_move(player, x, y) == expected)


def check_apply_move(
    board: Board,
    expected: Board,
    player: int,
    x: int,
    y: int,
    number: int,
    output: TextIO | None = None,
) -> bool:
    """Check that playing (x, y) on a copy of ``board`` yields ``expected``."""
    out = _out(output)
    result = board.copy()
    result.apply_move(player, x, y)
    correct = result == expected
    if not correct or VERBOSE:
        _status(out, number, correct)
        for title, shown in (
            ("Eingabe", board),
            ("Erwartet", expected),
            ("Ergebnis nach zugAusfuehren", result),
        ):
            out.write(f"{title}:\n")
            out.write(shown.render())
        out.write("\n")
    return correct


def check_count_moves(
    board: Board, player: int, expected: int, number: int, output: TextIO | None = None
) -> bool:
    """Check that ``board.count_moves(player)`` equals ``expected``."""
    out = _out(output)
    result = board.count_moves(player)
    correct = result == expected
    if not correct or VERBOSE:
        _status(out, number, correct)
        out.write(board.render())
        out.write(f"Spieler: {player}\n")
        out.write(f"Erwartet: {expected}, Gefunden: {result}\n")
    return correct


WINNER_CASES: list[tuple[Board, int]] = [
    (_cycled("12121212"), 0),
    (_cycled("11211211", "21121121", "12112112"), 1),
    (_cycled("12212212", "21221221", "22122122"), 2),
]
"""Boards with the winner each one must report."""

ON_BOARD_CASES: list[tuple[tuple[int, int], bool]] = [
    ((2, 3), True),
    ((0, 8), False),
    ((-1, 7), False),
    ((2, -1), False),
    ((8, 5), False),
    ((-1, 8), False),
]
"""Positions with whether each lies on the board."""

_CROWDED = ("1.2..111", "..2....1", ".....122", "22.2....",
            ".....22.", "...211.2", "1..1....", ".....1.1")
_LONE_PAIR = _sparse({1: "..1.....", 5: "......2."})
_DIAGONAL = _sparse({3: "...1....", 4: "....1..."})

VALID_MOVE_CASES: list[tuple[Board, int, tuple[int, int], bool]] = [
    (_make(_CROWDED), 1, (2, 3), False),
    (_make(_layout({1: "..2..1..", 2: "..2..211", 3: "...2...."}, _CROWDED)), 2, (0, 3), False),
    (_LONE_PAIR, 2, (4, 3), False),
    (
        _full(".1..2...", "......1.", "2.12.2..", ".2.22222",
              ".......1", "1....222", ".2......", ".1.111.."),
        1, (3, 4), True,
    ),
    (
        _full("21..2111", ".2......", "1..2...1", ".111.1..",
              "1..11..2", ".......1", "11....2.", "112..221"),
        2, (3, 5), True,
    ),
    (_DIAGONAL, 1, (3, 4), False),
    (
        _full("12222222", "12112222", "11122222", "11122222",
              "11112222", "111.2222", "1...2..2", "........"),
        1, (5, 7), False,
    ),
]
"""Boards, player and position with whether the move is legal."""


def _flipping(
    before: Mapping[int, str], after: Mapping[int, str], player: int, pos: tuple[int, int]
) -> tuple[Board, Board, int, tuple[int, int]]:
    start = _layout(before)
    return _make(start), _make(_layout(after, start)), player, pos


def _unchanged(board: Board) -> tuple[Board, Board, int, tuple[int, int]]:
    return board, board.copy(), 0, (0, 0)


APPLY_MOVE_CASES: list[tuple[Board, Board, int, tuple[int, int]]] = [
    _unchanged(_sparse({2: ".....122", 3: "22......"})),
    _unchanged(_sparse({2: ".....211"})),
    _unchanged(_LONE_PAIR),
    _flipping(
        {1: "......1.", 2: "...2.2..", 3: "...22..."},
        {2: "...2.1..", 3: "...21...", 4: "...1...."},
        1, (3, 4),
    ),
    _flipping(
        {2: "...2....", 3: "...1.1..", 4: "...11..."},
        {3: "...2.1..", 4: "...21...", 5: "...2...."},
        2, (3, 5),
    ),
    _unchanged(_DIAGONAL),
    _flipping(
        {1: "...1..1.", 2: "...2.2..", 3: "...22...", 4: ".12.221.", 5: "...22...", 6: "...1.1.."},
        {2: "...1.1..", 3: "...11...", 4: ".111111.", 5: "...11..."},
        1, (3, 4),
    ),
    _flipping(
        {1: ".....2..", 2: "....1...", 3: "...1....", 4: "...1111.", 5: "..1.....", 6: "..2....."},
        {2: "....2...", 3: "...2....", 4: "..21111.", 5: "..2....."},
        2, (2, 4),
    ),
    _flipping(
        {2: ".1......", 3: ".1....21", 4: "1.112...", 5: "..1.....", 6: "...1...."},
        {4: "12222..."},
        2, (1, 4),
    ),
    _flipping(
        {0: ".....1.1", 1: ".....22.", 3: "....22..", 4: "...1.1..", 5: "..2..2..", 6: ".1...1.."},
        {1: ".....11.", 2: ".....1..", 3: "....11.."},
        1, (5, 2),
    ),
]
"""Boards before and after a move, with the player and position played."""

COUNT_MOVES_CASES: list[tuple[Board, int, int]] = [
    (_sparse({3: "...12...", 4: "...21..."}), 1, 4),
    (_sparse({2: "...21...", 3: "...211..", 4: "...21..."}), 1, 5),
]
"""Boards and player with the number of legal moves."""


def run_self_tests(output: TextIO | None = None) -> bool:
    """Run every built-in check; return True only if all of them pass."""
    out = _out(output)
    sections: tuple[tuple[str, Iterator[bool]], ...] = (
        ("'gewinner()'", (
            check_winner(board, expected, n, out)
            for n, (board, expected) in enumerate(WINNER_CASES)
        )),
        ("Positionen", (
            check_on_board(x, y, expected, n, out)
            for n, ((x, y), expected) in enumerate(ON_BOARD_CASES)
        )),
        ("'zugGueltig()'", (
            check_valid_move(board, player, x, y, expected, n, out)
            for n, (board, player, (x, y), expected) in enumerate(VALID_MOVE_CASES)
        )),
        ("'zugAusfuehren()'", (
            check_apply_move(board, expected, player, x, y, n, out)
            for n, (board, expected, player, (x, y)) in enumerate(APPLY_MOVE_CASES)
        )),
        ("'moeglicheZuege()'", (
            check_count_moves(board, player, expected, n, out)
            for n, (board, player, expected) in enumerate(COUNT_MOVES_CASES)
        )),
    )

    passed = True
    for title, checks in sections:
        section_ok = all(list(checks))
        out.write(f"Ende des Tests fuer {title}\n\n")
        passed = passed and section_ok

    summary = "ALLE TESTS BESTANDEN" if passed else "FEHLER IN TESTS"
    out.write(f"Gesamtergebnis aller Tests: {summary}\n")
    return passed
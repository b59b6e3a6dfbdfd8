"""Othello board state and the rules for placing and flipping stones."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

WIDTH = 8
HEIGHT = 8

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

_SYMBOLS = {EMPTY: "   ", PLAYER_ONE: " X ", PLAYER_TWO: " O "}

_DIRECTIONS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def on_board(x: int, y: int) -> bool:
    """Return True if column ``x`` and row ``y`` lie on the board."""
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def opponent(player: int) -> int:
    """Return the other player (1 <-> 2)."""
    return 3 - player


class Board:
    """An 8x8 Othello board; cells hold 0 (empty), 1 (X) or 2 (O)."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Iterable[int]] | None = None) -> None:
        if cells is None:
            rows = [[EMPTY] * WIDTH for _ in range(HEIGHT)]
        else:
            rows = [list(row) for row in cells]
        if len(rows) != HEIGHT or any(len(row) != WIDTH for row in rows):
            raise ValueError(f"board must have {HEIGHT} rows of {WIDTH} cells")
        for row in rows:
            for value in row:
                if value not in _SYMBOLS:
                    raise ValueError(f"invalid cell value: {value!r}")
        self._cells = rows

    @classmethod
    def initial(cls) -> Board:
        """Return a board with the standard starting position."""
        board = cls()
        left, top = WIDTH // 2 - 1, HEIGHT // 2 - 1
        board._cells[top][left] = PLAYER_ONE
        board._cells[top + 1][left] = PLAYER_TWO
        board._cells[top][left + 1] = PLAYER_TWO
        board._cells[top + 1][left + 1] = PLAYER_ONE
        return board

    def copy(self) -> Board:
        """Return an independent copy of this board."""
        return Board(self._cells)

    def __getitem__(self, pos: tuple[int, int]) -> int:
        x, y = pos
        if not on_board(x, y):
            raise IndexError(f"position {pos!r} is off the board")
        return self._cells[y][x]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"

    def winner(self) -> int:
        """Return 1 or 2 for the player with more stones, 0 on a tie."""
        ones = sum(row.count(PLAYER_ONE) for row in self._cells)
        twos = sum(row.count(PLAYER_TWO) for row in self._cells)
        if ones == twos:
            return 0
        return PLAYER_TWO if ones < twos else PLAYER_ONE

    def _captures(self, player: int, x: int, y: int, dx: int, dy: int) -> list[tuple[int, int]]:
        """Opponent stones enclosed in one direction from (x, y), or an empty list."""
        rival = opponent(player)
        enclosed = []
        cx, cy = x + dx, y + dy
        while on_board(cx, cy) and self._cells[cy][cx] == rival:
            enclosed.append((cx, cy))
            cx += dx
            cy += dy
        if enclosed and on_board(cx, cy) and self._cells[cy][cx] == player:
            return enclosed
        return []

    def is_valid_move(self, player: int, x: int, y: int) -> bool:
        """Return True if ``player`` may place a stone at (x, y)."""
        if not on_board(x, y) or self._cells[y][x] != EMPTY:
            return False
        return any(self._captures(player, x, y, dx, dy) for dx, dy in _DIRECTIONS)

    def apply_move(self, player: int, x: int, y: int) -> None:
        """Place a stone for ``player`` at (x, y) and flip enclosed stones."""
        if not on_board(x, y):
            raise ValueError(f"position ({x}, {y}) is off the board")
        if player not in _SYMBOLS:
            raise ValueError(f"invalid player: {player!r}")
        for dx, dy in _DIRECTIONS:
            for cx, cy in self._captures(player, x, y, dx, dy):
                self._cells[cy][cx] = player
        self._cells[y][x] = player

    def _positions(self) -> Iterator[tuple[int, int]]:
        for y in range(HEIGHT):
            for x in range(WIDTH):
                yield x, y

    def valid_moves(self, player: int) -> list[tuple[int, int]]:
        """Return all legal (x, y) moves for ``player`` in row-major order."""
        return [pos for pos in self._positions() if self.is_valid_move(player, *pos)]

    def count_moves(self, player: int) -> int:
        """Return the number of legal moves for ``player``."""
        return len(self.valid_moves(player))

    def render(self) -> str:
        """Return the board as a text grid with X for player 1 and O for player 2."""
        columns = "".join(f"{chr(ord('A') + i)} | " for i in range(WIDTH))
        lines = [f"   | {columns}"]
        separator = "---+" * (WIDTH + 1)
        for y, row in enumerate(self._cells):
            lines.append(separator)
            cells = "".join(f"{_SYMBOLS[value]}|" for value in row)
            lines.append(f" {y + 1} |{cells}")
        return "\n".join(lines) + "\n"
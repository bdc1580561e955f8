"""Conway's Game of Life on a torus, with a command that animates it."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from collections.abc import Iterable


class InvalidCellError(IndexError):
    """Raised when a cell lies outside the board."""

    def __init__(self, row: int, column: int) -> None:
        super().__init__(f"cell ({row}, {column}) is outside the board")
        self.row = row
        self.column = column


class JogoDaVida:
    """A Game of Life board whose edges wrap around; all cells start dead."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError(f"board must have positive size, got {rows}x{columns}")
        self._cells = [[False] * columns for _ in range(rows)]

    def rows(self) -> int:
        """Return the number of rows."""
        return len(self._cells)

    def columns(self) -> int:
        """Return the number of columns."""
        return len(self._cells[0])

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < self.rows() and 0 <= j < self.columns()):
            raise InvalidCellError(i, j)

    def is_alive(self, i: int, j: int) -> bool:
        """Return whether cell [i, j] is alive."""
        self._check(i, j)
        return self._cells[i][j]

    def kill(self, i: int, j: int) -> None:
        """Mark cell [i, j] dead."""
        self._check(i, j)
        self._cells[i][j] = False

    def revive(self, i: int, j: int) -> None:
        """Mark cell [i, j] alive."""
        self._check(i, j)
        self._cells[i][j] = True

    def _live_neighbours(self, x: int, y: int) -> int:
        rows, columns = self.rows(), self.columns()
        return sum(
            self._cells[(x + di) % rows][(y + dj) % columns]
            for di in (-1, 0, 1)
            for dj in (-1, 0, 1)
            if di or dj
        )

    def step(self) -> None:
        """Advance the board by one generation."""
        self._cells = [
            [
                (n := self._live_neighbours(i, j)) == 3 or (n == 2 and alive)
                for j, alive in enumerate(row)
            ]
            for i, row in enumerate(self._cells)
        ]

    def run(self, n: int) -> None:
        """Advance the board by ``n`` generations."""
        for _ in range(n):
            self.step()

    def __str__(self) -> str:
        border = "  " + "X " * self.columns() + "\n"
        body = "".join(
            "X " + "".join("o " if alive else "  " for alive in row) + "X\n"
            for row in self._cells
        )
        return border + body + border


def _next_int(pending: deque[str]) -> int:
    if not pending:
        raise ValueError("unexpected end of input")
    token = pending.popleft()
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _next_char(pending: deque[str]) -> str | None:
    if not pending:
        return None
    token = pending.popleft()
    if len(token) > 1:
        pending.appendleft(token[1:])
    return token[0]


def _ask_to_ignore(error: InvalidCellError, pending: deque[str]) -> bool:
    """Ask whether to skip an invalid cell; return False to abort."""
    while True:
        print(
            f"Célula ({error.row}, {error.column}) não é válida. "
            "Deseja continuar e ignorá-la? (s/n)?"
        )
        option = _next_char(pending)
        if option is None or option == "n":
            return False
        if option == "s":
            return True


def _load(pending: deque[str]) -> tuple[JogoDaVida, int] | None:
    iterations = _next_int(pending)
    game = JogoDaVida(_next_int(pending), _next_int(pending))
    while len(pending) >= 2:
        try:
            row, column = int(pending[0]), int(pending[1])
        except ValueError:
            break
        pending.popleft()
        pending.popleft()
        try:
            game.revive(row, column)
        except InvalidCellError as error:
            if not _ask_to_ignore(error, pending):
                return None
    return game, iterations


def main(argv: Iterable[str] | None = None) -> int:
    """Read a board from standard input and print each generation."""
    parser = argparse.ArgumentParser(description="Conway's Game of Life.")
    parser.add_argument(
        "--delay", type=float, default=0.2, help="seconds between generations"
    )
    args = parser.parse_args(None if argv is None else list(argv))

    pending = deque(sys.stdin.read().split())
    try:
        loaded = _load(pending)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    if loaded is None:
        return 1
    game, iterations = loaded

    print(game)
    for _ in range(iterations):
        game.step()
        print(game)
        time.sleep(args.delay)
    return 0
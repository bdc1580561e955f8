"""A string vector whose indices cover any integer range, negatives included."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator

INVALID_OPTION = "Opção inválida!"


class Vetor:
    """Strings indexed from ``start`` to ``end`` inclusive; unset slots are empty."""

    def __init__(self, start: int, end: int) -> None:
        if end < start:
            raise ValueError(f"end ({end}) must not be less than start ({start})")
        self._start = start
        self._items = [""] * (end - start + 1)

    def _offset(self, index: int) -> int:
        offset = index - self._start
        if not 0 <= offset < len(self._items):
            end = self._start + len(self._items) - 1
            raise IndexError(f"index {index} outside [{self._start}, {end}]")
        return offset

    def __getitem__(self, index: int) -> str:
        return self._items[self._offset(index)]

    def __setitem__(self, index: int, value: str) -> None:
        self._items[self._offset(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)


def _next_token(pending: deque[str]) -> str:
    while pending:
        token = pending.popleft()
        if token:
            return token
    raise ValueError("unexpected end of input")


def _next_int(pending: deque[str]) -> int:
    token = _next_token(pending)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def run(tokens: Iterable[str]) -> Iterator[str]:
    """Execute the vector commands in ``tokens`` and yield each output line.

    The first two tokens are the index range; then ``a <i> <value>`` assigns,
    ``v <i>`` yields the value, ``f`` stops and any other option yields an
    error message. Options are single characters and may be glued together.
    """
    pending = deque(tokens)
    vetor = Vetor(_next_int(pending), _next_int(pending))
    while True:
        try:
            token = _next_token(pending)
        except ValueError:
            return
        option, rest = token[0], token[1:]
        if rest:
            pending.appendleft(rest)
        if option == "a":
            index = _next_int(pending)
            vetor[index] = _next_token(pending)
        elif option == "v":
            yield vetor[_next_int(pending)]
        elif option == "f":
            return
        else:
            yield INVALID_OPTION


def main(argv=None) -> int:
    """Run the vector commands read from standard input."""
    try:
        for line in run(sys.stdin.read().split()):
            print(line)
    except (ValueError, IndexError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0
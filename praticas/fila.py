"""A first-in, first-out queue of strings and its command interpreter."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator


class Fila:
    """A queue of strings."""

    def __init__(self) -> None:
        self._items: deque[str] = deque()

    def first(self) -> str:
        """Return the element at the front of the queue."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def last(self) -> str:
        """Return the element at the back of the queue."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return not self._items

    def push(self, key: str) -> None:
        """Append ``key`` to the back of the queue."""
        self._items.append(key)

    def pop(self) -> str:
        """Remove and return the element at the front of the queue."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)


def run(tokens: Iterable[str]) -> Iterator[str]:
    """Execute queue commands and yield each output line.

    ``p`` first, ``u`` last, ``t`` size, ``v`` empty (sim/não), ``i <v>``
    insert, ``r`` remove; any other command stops.
    """
    fila = Fila()
    stream = iter(tokens)
    for operation in stream:
        if operation == "p":
            yield fila.first()
        elif operation == "u":
            yield fila.last()
        elif operation == "t":
            yield str(len(fila))
        elif operation == "v":
            yield "sim" if fila.is_empty() else "não"
        elif operation == "i":
            try:
                value = next(stream)
            except StopIteration:
                raise ValueError("missing value to insert") from None
            fila.push(value)
        elif operation == "r":
            fila.pop()
        else:
            return


def main(argv=None) -> int:
    """Run the queue commands read from standard input."""
    try:
        for line in run(sys.stdin.read().split()):
            print(line)
    except (ValueError, IndexError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0
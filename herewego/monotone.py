"""Monotone deque ordered by a comparator."""

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any

Comparator = Callable[[Any, Any], int]


class MonotoneDeque:
    """Deque whose items decrease strictly according to ``comparator``.

    Pushing a value drops every trailing item that does not compare greater
    than it.
    """

    def __init__(self, comparator: Comparator) -> None:
        self._comparator = comparator
        self._data: deque[Any] = deque()

    def push(self, value: Any) -> None:
        while self._data and self._comparator(value, self._data[-1]) >= 0:
            self._data.pop()
        self._data.append(value)

    def last(self) -> Any:
        """Return the last item, or None when empty."""
        return self._data[-1] if self._data else None

    def first(self) -> Any:
        """Return the first item, or None when empty."""
        return self._data[0] if self._data else None

    def pop_last(self) -> Any:
        """Remove and return the last item; raises IndexError when empty."""
        return self._data.pop()

    def pop_first(self) -> Any:
        """Remove and return the first item, or None when empty."""
        return self._data.popleft() if self._data else None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return " ".join(map(str, self._data))
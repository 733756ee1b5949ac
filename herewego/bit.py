"""Binary indexed (Fenwick) tree over integers."""

from collections.abc import Iterable


def _lowbit(x: int) -> int:
    return x & -x


class BinaryIndexTree:
    """Point updates and range sums over a list of integers."""

    def __init__(self, data: Iterable[int]) -> None:
        self.data = list(data)
        self.tree = [0] * (len(self.data) + 1)
        for index, value in enumerate(self.data):
            self._add_to_tree(index, value)

    def __len__(self) -> int:
        return len(self.data)

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the element at ``index``."""
        if not 0 <= index < len(self.data):
            raise IndexError(f"index {index} out of range")
        self.data[index] += delta
        self._add_to_tree(index, delta)

    def sum(self, left: int, right: int) -> int:
        """Return the sum of elements in ``[left, right)``."""
        return self.prefix_sum(right - 1) - self.prefix_sum(left - 1)

    def prefix_sum(self, pos: int) -> int:
        """Return the sum of elements ``0..pos`` inclusive (0 if ``pos`` < 0)."""
        if pos >= len(self.data):
            raise IndexError(f"position {pos} out of range")
        index = pos + 1
        total = 0
        while index > 0:
            total += self.tree[index]
            index -= _lowbit(index)
        return total

    def _add_to_tree(self, index: int, delta: int) -> None:
        index += 1
        while index <= len(self.data):
            self.tree[index] += delta
            index += _lowbit(index)
"""Small helpers for working with integers as bit sets."""

from collections.abc import Iterator


def lowbit(x: int) -> int:
    """Return the value of the lowest set bit of ``x`` (0 for 0)."""
    return x & -x


def subsets(state: int) -> Iterator[int]:
    """Yield every non-empty submask of ``state``, largest first."""
    mask = state
    while state > 0:
        yield state
        state = (state - 1) & mask


def lowbits(state: int) -> Iterator[int]:
    """Yield the value of each set bit of ``state``, lowest first."""
    while state > 0:
        bit = lowbit(state)
        yield bit
        state -= bit
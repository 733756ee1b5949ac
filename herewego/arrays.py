"""Builders for integer lists and grids."""

import random


def _check_size(*sizes: int) -> None:
    if any(size < 0 for size in sizes):
        raise ValueError("size must not be negative")


def numbers_in_order(n: int) -> list[int]:
    """Return ``[0, 1, ..., n - 1]``."""
    _check_size(n)
    return list(range(n))


def numbers_shuffled(n: int, rng: random.Random | None = None) -> list[int]:
    """Return ``0..n-1`` in random order without repeats."""
    numbers = numbers_in_order(n)
    (rng or random).shuffle(numbers)
    return numbers


def grid(m: int, n: int) -> list[list[int]]:
    """Return an ``m`` by ``n`` grid of zeros with independent rows."""
    _check_size(m, n)
    return [[0] * n for _ in range(m)]
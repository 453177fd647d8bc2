"""Constructive puzzles: build arrays, layouts and permutations meeting constraints."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise

__all__ = [
    "beautiful_array",
    "place_buildings",
    "shoe_shuffle",
    "max_triangle_area",
]


def beautiful_array(n: int, k: int, b: int, s: int) -> list[int] | None:
    """Array of ``n`` non-negative integers summing to ``s`` whose beauty is ``b``.

    The beauty is the sum of each element divided by ``k``, rounded down.
    Returns None when no such array exists.
    """
    if k < 1:
        raise ValueError("k must be positive")
    if n < 1:
        raise ValueError("the array must have at least one element")
    if s // k < b:
        return None
    if s // k == b:
        return [0] * (n - 1) + [s]
    remainder = s - k * b
    filled_from_back: list[int] = []
    for _ in range(n - 1):
        part = min(k - 1, remainder)
        filled_from_back.append(part)
        remainder -= part
    if remainder >= k:
        return None
    return [*reversed(filled_from_back), k * b + remainder]


def place_buildings(visits: Iterable[int]) -> tuple[int, list[int]]:
    """Place a headquarters at 0 and buildings around it to minimise walking time.

    Building ``i`` is visited ``visits[i]`` times and each visit is a round trip
    from the headquarters. Returns the total walking time and the coordinates,
    headquarters first.
    """
    counts = list(visits)
    order = sorted(enumerate(counts), key=lambda item: (item[1], item[0]), reverse=True)
    coords = [0] * len(counts)
    total = 0
    for rank, (index, count) in enumerate(order):
        distance = rank // 2 + 1
        coords[index] = distance if rank % 2 == 0 else -distance
        total += 2 * distance * count
    return total, [0, *coords]


def shoe_shuffle(sizes: Sequence[int]) -> list[int] | None:
    """Derangement of students so each gets shoes of their own size from someone else.

    ``sizes`` must be non-decreasing. Returns, for each student in order, the
    1-based position whose shoes they receive, or None if impossible.
    """
    if any(left > right for left, right in pairwise(sizes)):
        raise ValueError("shoe sizes must be given in non-decreasing order")
    result: list[int] = []
    for _, group in groupby(enumerate(sizes, start=1), key=lambda item: item[1]):
        positions = [position for position, _ in group]
        if len(positions) < 2:
            return None
        if len(positions) % 2:
            middle = positions[0] + (positions[-1] - positions[0]) // 2
            result.append(middle)
            result.extend(p for p in reversed(positions) if p != middle)
        else:
            result.extend(reversed(positions))
    return result


def _spread(points: Sequence[int], side: str) -> int:
    if not points:
        raise ValueError(f"the {side} side needs at least one point")
    return max(points) - min(points)


def max_triangle_area(
    w: int,
    h: int,
    bottom: Sequence[int],
    top: Sequence[int],
    left: Sequence[int],
    right: Sequence[int],
) -> int:
    """Twice the largest area of a triangle with two vertices on one side of a ``w`` by ``h`` rectangle.

    The vertices lie on the given points of the sides; the third vertex is the
    farthest point of the opposite side.
    """
    horizontal = max(_spread(bottom, "bottom"), _spread(top, "top")) * h
    vertical = max(_spread(left, "left"), _spread(right, "right")) * w
    return max(horizontal, vertical)
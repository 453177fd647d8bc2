"""Greedy and counting puzzles over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby

__all__ = [
    "longest_merged_run",
    "max_teams",
    "min_helmet_cost",
    "luke_changes",
    "monster_kill_order",
    "max_box_sum",
    "has_repeated_power",
]


def _longest_runs(values: Iterable[int]) -> dict[int, int]:
    """Map each value to the length of its longest run of equal neighbours."""
    runs: dict[int, int] = {}
    for value, group in groupby(values):
        length = sum(1 for _ in group)
        if length > runs.get(value, 0):
            runs[value] = length
    return runs


def longest_merged_run(a: Iterable[int], b: Iterable[int]) -> int:
    """Longest run of equal elements obtainable by merging ``a`` and ``b``.

    The merge keeps the order within each array, so the best run for a value
    is its longest run in ``a`` joined to its longest run in ``b``.
    """
    runs_a = _longest_runs(a)
    runs_b = _longest_runs(b)
    return max(
        (runs_a.get(v, 0) + runs_b.get(v, 0) for v in runs_a.keys() | runs_b.keys()),
        default=0,
    )


def max_teams(d: int, powers: Iterable[int]) -> int:
    """Most teams whose strongest power times team size exceeds ``d``."""
    weak: list[int] = []
    teams = 0
    for power in powers:
        if power > d:
            teams += 1
        else:
            weak.append(power)
    weak.sort()
    left, right = 0, len(weak) - 1
    size = 2
    while left < right:
        if weak[right] * size > d:
            teams += 1
            left += 1
            right -= 1
            size = 2
        else:
            left += 1
            size += 1
    return teams


def min_helmet_cost(p: int, limits: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest way to tell every resident the news.

    The head tells anyone directly for ``p``; resident ``i``, once informed,
    can tell at most ``limits[i]`` others for ``costs[i]`` each.
    """
    if len(limits) != len(costs):
        raise ValueError("limits and costs must have the same length")
    if not limits:
        raise ValueError("at least one resident is required")
    total = p
    remaining = len(limits) - 1
    for cost, limit in sorted(zip(costs, limits), key=lambda r: (r[0], -r[1])):
        if remaining == 0:
            break
        if cost > p:
            break
        told = min(limit, remaining)
        total += told * cost
        remaining -= told
    return total + remaining * p


def luke_changes(x: int, foods: Iterable[int]) -> int:
    """Fewest affinity changes so that every food is within ``x`` of the affinity."""
    changes = 0
    low = high = None
    for food in foods:
        if low is None:
            low = high = food
            continue
        high = max(high, food)
        low = min(low, food)
        if high - low > 2 * x:
            changes += 1
            low = high = food
    return changes


def monster_kill_order(d: int, healths: Iterable[int]) -> list[int]:
    """1-based order in which monsters die when the healthiest is always hit for ``d``."""
    if d <= 0:
        raise ValueError("damage must be positive")
    last_hit = [
        (index, health % d or d) for index, health in enumerate(healths, start=1)
    ]
    last_hit.sort(key=lambda item: (-item[1], item[0]))
    return [index for index, _ in last_hit]


def max_box_sum(grid: Iterable[Iterable[int]]) -> int:
    """Largest sum after negating adjacent pairs of cells any number of times."""
    total = 0
    negatives = 0
    has_zero = False
    smallest: int | None = None
    for row in grid:
        for value in row:
            if value == 0:
                has_zero = True
            elif value < 0:
                negatives += 1
            magnitude = abs(value)
            total += magnitude
            if smallest is None or magnitude < smallest:
                smallest = magnitude
    if not has_zero and negatives % 2 and smallest is not None:
        return total - 2 * smallest
    return total


def has_repeated_power(values: Iterable[int]) -> bool:
    """True if some value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False
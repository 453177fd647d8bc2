"""Puzzles over strings: stripes, splits, brackets and reversals."""

from __future__ import annotations

__all__ = [
    "min_window_recolor",
    "max_distinct_split",
    "min_bracket_moves",
    "red_blue_string",
    "find_reversal",
]


def min_window_recolor(k: int, stripe: str) -> int:
    """Fewest white cells to repaint so that ``stripe`` has ``k`` black cells in a row.

    ``stripe`` consists of the letters ``B`` and ``W``.
    """
    if not 1 <= k <= len(stripe):
        raise ValueError("window length must lie between 1 and the stripe length")
    whites = stripe[:k].count("W")
    best = whites
    for leaving, entering in zip(stripe, stripe[k:]):
        whites += (entering == "W") - (leaving == "W")
        best = min(best, whites)
    return best


def max_distinct_split(s: str) -> int:
    """Largest sum of distinct letters in a prefix and the remaining suffix of ``s``."""
    if not s:
        raise ValueError("the string must not be empty")
    remaining: dict[str, int] = {}
    for ch in s:
        remaining[ch] = remaining.get(ch, 0) + 1
    suffix_distinct = len(remaining)
    seen: set[str] = set()
    best = 0
    for ch in s:
        seen.add(ch)
        remaining[ch] -= 1
        if remaining[ch] == 0:
            suffix_distinct -= 1
        best = max(best, len(seen) + suffix_distinct)
    return best


def min_bracket_moves(s: str) -> int:
    """Fewest bracket moves to the front or back that make ``s`` a regular sequence."""
    depth = 0
    moves = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth:
                depth -= 1
            else:
                moves += 1
        else:
            raise ValueError(f"unexpected character {ch!r} in bracket sequence")
    return moves


def red_blue_string(r: int, b: int) -> str:
    """Arrange ``r`` R's and ``b`` B's so that the longest run of R is as short as possible."""
    if r < 0 or b < 0:
        raise ValueError("counts must be non-negative")
    run, extra = divmod(r, b + 1)
    parts = ["R" * (run + 1)] * extra + ["R" * run] * (b + 1 - extra)
    return "B".join(parts)


def find_reversal(s: str) -> tuple[int, int] | None:
    """1-based bounds of a substring whose reversal makes ``s`` smaller, or None."""
    for position, (left, right) in enumerate(zip(s, s[1:]), start=1):
        if left > right:
            return position, position + 1
    return None
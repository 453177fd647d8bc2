"""Number-theory helpers and small arithmetic puzzles on integers."""

from __future__ import annotations

from collections.abc import Iterable
from math import gcd, isqrt

__all__ = [
    "is_prime",
    "lcm",
    "prefix_xor",
    "next_prime",
    "min_add_divide_operations",
    "torch_trades",
    "smallest_with_divisor_gap",
    "fair_number",
    "min_shift_operations",
    "shortest_mex_xor_length",
    "min_lcm_split",
    "min_raspberry_steps",
]


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    return all(
        n % i != 0 and n % (i + 2) != 0 for i in range(5, isqrt(n) + 1, 6)
    )


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    return a // gcd(a, b) * b


def prefix_xor(n: int) -> int:
    """XOR of all integers from 0 to ``n`` inclusive."""
    return (n, 1, n + 1, 0)[n % 4]


def next_prime(v: int) -> int:
    """Smallest prime strictly greater than ``v`` (2 for any ``v`` <= 1)."""
    if v <= 1:
        return 2
    candidate = v + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


def _divide_out(a: int, divisor: int) -> int:
    """Number of integer divisions by ``divisor`` needed to bring ``a`` to zero."""
    steps = 0
    while a:
        a //= divisor
        steps += 1
    return steps


def min_add_divide_operations(a: int, b: int) -> int:
    """Fewest operations (``b += 1`` or ``a //= b``) that make ``a`` zero."""
    if a == 0:
        return 0
    best = a + 3
    increments = 2 - b if b < 2 else 0
    while increments < best:
        best = min(best, increments + _divide_out(a, b + increments))
        increments += 1
    return best


def torch_trades(x: int, y: int, k: int) -> int:
    """Fewest trades to craft ``k`` torches.

    One stick trades for ``x`` sticks, ``y`` sticks trade for one coal, and a
    torch takes one stick and one coal; the trader starts with one stick.
    """
    if x < 2:
        raise ValueError("a stick trade must yield at least two sticks")
    sticks_needed = k * y + k - 1
    stick_trades = -(-sticks_needed // (x - 1))
    return stick_trades + k


def smallest_with_divisor_gap(d: int) -> int:
    """Smallest integer with at least four divisors, any two differing by at least ``d``."""
    first = next_prime(d)
    second = next_prime(first + d - 1)
    return first * second


def fair_number(n: int) -> int:
    """Smallest number not below ``n`` that is divisible by each of its nonzero digits."""
    candidate = n
    while not all(
        candidate % digit == 0
        for digit in map(int, str(candidate))
        if digit
    ):
        candidate += 1
    return candidate


def min_shift_operations(a: int, b: int) -> int | None:
    """Fewest multiplications or exact divisions by 2, 4 or 8 turning ``a`` into ``b``.

    Returns None when ``b`` cannot be reached.
    """
    big, small = max(a, b), min(a, b)
    steps = 0
    while big > small:
        for factor in (8, 4, 2):
            if big % factor == 0 and big // factor >= small:
                big //= factor
                steps += 1
                break
        else:
            break
    return steps if big == small else None


def shortest_mex_xor_length(a: int, b: int) -> int:
    """Length of the shortest array whose MEX is ``a`` and whose XOR is ``b``."""
    base = prefix_xor(a - 1)
    if base == b:
        return a
    if base ^ b == a:
        return a + 2
    return a + 1


def min_lcm_split(n: int) -> tuple[int, int]:
    """Split ``n`` into two positive parts whose least common multiple is minimal."""
    part = 1
    for i in range(2, isqrt(n) + 1):
        if n % i == 0:
            part = n // i
            break
    return part, n - part


def min_raspberry_steps(k: int, values: Iterable[int]) -> int:
    """Fewest unit increments that make the product of ``values`` divisible by ``k``.

    ``k`` is expected to lie between 2 and 5, as the reasoning for 4 relies on it.
    """
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    steps = min(-v % k for v in items)
    if k == 4:
        evens = min(2, sum(1 for v in items if v % 2 == 0))
        steps = min(steps, 2 - evens)
    return steps
"""Command line front end that reads a problem's input and prints its answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass

from cfsolve.arrays import (
    has_repeated_power,
    longest_merged_run,
    luke_changes,
    max_box_sum,
    max_teams,
    min_helmet_cost,
    monster_kill_order,
)
from cfsolve.constructions import (
    beautiful_array,
    max_triangle_area,
    place_buildings,
    shoe_shuffle,
)
from cfsolve.numbers import (
    fair_number,
    min_add_divide_operations,
    min_lcm_split,
    min_raspberry_steps,
    min_shift_operations,
    shortest_mex_xor_length,
    smallest_with_divisor_gap,
    torch_trades,
)
from cfsolve.strings import (
    find_reversal,
    max_distinct_split,
    min_bracket_moves,
    min_window_recolor,
    red_blue_string,
)

__all__ = ["run", "main"]


class _Tokens:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended early") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def _joined(values) -> str:
    return " ".join(map(str, values))


def _add_and_divide(tok: _Tokens) -> list[str]:
    a, b = tok.numbers(2)
    return [str(min_add_divide_operations(a, b))]


def _array_merging(tok: _Tokens) -> list[str]:
    n = tok.number()
    a = tok.numbers(n)
    b = tok.numbers(n)
    return [str(longest_merged_run(a, b))]


def _basketball_together(tok: _Tokens) -> list[str]:
    n, d = tok.numbers(2)
    return [str(max_teams(d, tok.numbers(n)))]


def _beautiful_array(tok: _Tokens) -> list[str]:
    n, k, b, s = tok.numbers(4)
    result = beautiful_array(n, k, b, s)
    return ["-1" if result is None else _joined(result)]


def _black_and_white_stripe(tok: _Tokens) -> list[str]:
    _, k = tok.numbers(2)
    return [str(min_window_recolor(k, tok.word()))]


def _buying_torches(tok: _Tokens) -> list[str]:
    x, y, k = tok.numbers(3)
    return [str(torch_trades(x, y, k))]


def _different_divisor(tok: _Tokens) -> list[str]:
    return [str(smallest_with_divisor_gap(tok.number()))]


def _distinct_split(tok: _Tokens) -> list[str]:
    tok.number()
    return [str(max_distinct_split(tok.word()))]


def _divan_new_project(tok: _Tokens) -> list[str]:
    n = tok.number()
    total, coords = place_buildings(tok.numbers(n))
    return [str(total), _joined(coords)]


def _fair_numbers(tok: _Tokens) -> list[str]:
    return [str(fair_number(tok.number()))]


def _helmets_in_night_light(tok: _Tokens) -> list[str]:
    n, p = tok.numbers(2)
    limits = tok.numbers(n)
    costs = tok.numbers(n)
    return [str(min_helmet_cost(p, limits, costs))]


def _johnny_ancient_computer(tok: _Tokens) -> list[str]:
    a, b = tok.numbers(2)
    steps = min_shift_operations(a, b)
    return ["-1" if steps is None else str(steps)]


def _luke_is_a_foodie(tok: _Tokens) -> list[str]:
    n, x = tok.numbers(2)
    return [str(luke_changes(x, tok.numbers(n)))]


def _mexor_mixup(tok: _Tokens) -> list[str]:
    a, b = tok.numbers(2)
    return [str(shortest_mex_xor_length(a, b))]


def _minimum_lcm(tok: _Tokens) -> list[str]:
    return [_joined(min_lcm_split(tok.number()))]


def _monsters(tok: _Tokens) -> list[str]:
    n, d = tok.numbers(2)
    return [_joined(monster_kill_order(d, tok.numbers(n)))]


def _move_brackets(tok: _Tokens) -> list[str]:
    tok.number()
    return [str(min_bracket_moves(tok.word()))]


def _numbers_box(tok: _Tokens) -> list[str]:
    n, m = tok.numbers(2)
    grid = [tok.numbers(m) for _ in range(n)]
    return [str(max_box_sum(grid))]


def _raspberries(tok: _Tokens) -> list[str]:
    n, k = tok.numbers(2)
    return [str(min_raspberry_steps(k, tok.numbers(n)))]


def _red_versus_blue(tok: _Tokens) -> list[str]:
    _, r, b = tok.numbers(3)
    return [red_blue_string(r, b)]


def _reverse_a_string(tok: _Tokens) -> list[str]:
    tok.number()
    found = find_reversal(tok.word())
    return ["NO"] if found is None else ["YES", _joined(found)]


def _shoe_shuffling(tok: _Tokens) -> list[str]:
    n = tok.number()
    result = shoe_shuffle(tok.numbers(n))
    return ["-1" if result is None else _joined(result)]


def _triangles_on_rectangle(tok: _Tokens) -> list[str]:
    w, h = tok.numbers(2)
    sides = [tok.numbers(tok.number()) for _ in range(4)]
    return [str(max_triangle_area(w, h, *sides))]


def _valerii_against_everyone(tok: _Tokens) -> list[str]:
    n = tok.number()
    return ["YES" if has_repeated_power(tok.numbers(n)) else "NO"]


@dataclass(frozen=True)
class _Problem:
    solve: Callable[[_Tokens], list[str]]
    multiple_cases: bool = True


_PROBLEMS: dict[str, _Problem] = {
    "add-and-divide": _Problem(_add_and_divide),
    "array-merging": _Problem(_array_merging),
    "basketball-together": _Problem(_basketball_together, multiple_cases=False),
    "beautiful-array": _Problem(_beautiful_array),
    "black-and-white-stripe": _Problem(_black_and_white_stripe),
    "buying-torches": _Problem(_buying_torches),
    "different-divisor": _Problem(_different_divisor),
    "distinct-split": _Problem(_distinct_split),
    "divan-new-project": _Problem(_divan_new_project),
    "fair-numbers": _Problem(_fair_numbers),
    "helmets-in-night-light": _Problem(_helmets_in_night_light),
    "johnny-ancient-computer": _Problem(_johnny_ancient_computer),
    "luke-is-a-foodie": _Problem(_luke_is_a_foodie),
    "mexor-mixup": _Problem(_mexor_mixup),
    "minimum-lcm": _Problem(_minimum_lcm),
    "monsters": _Problem(_monsters),
    "move-brackets": _Problem(_move_brackets),
    "numbers-box": _Problem(_numbers_box),
    "raspberries": _Problem(_raspberries),
    "red-versus-blue": _Problem(_red_versus_blue),
    "reverse-a-string": _Problem(_reverse_a_string, multiple_cases=False),
    "shoe-shuffling": _Problem(_shoe_shuffling),
    "triangles-on-rectangle": _Problem(_triangles_on_rectangle),
    "valerii-against-everyone": _Problem(_valerii_against_everyone),
}


def run(problem: str, text: str) -> str:
    """Solve every case of ``problem`` found in ``text`` and return the printed answers."""
    try:
        spec = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    tokens = _Tokens(text)
    cases = tokens.number() if spec.multiple_cases else 1
    lines = [line for _ in range(cases) for line in spec.solve(tokens)]
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="cfsolve", description="Solve a puzzle from its judge-style input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    try:
        output = run(args.problem, text)
    except ValueError as error:
        print(f"cfsolve: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
# cfsolve

A small library of solutions to short algorithmic problems: number
puzzles, array greedies, string scans and array constructions. Every
solution is an ordinary function that takes Python values and returns
the answer, so it can be used in code or from the command line.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Using the library

The solutions are grouped by module:

- `cfsolve.numbers` – `is_prime`, `lcm`, `prefix_xor`, `next_prime` and
  the puzzles `min_add_divide_operations`, `torch_trades`,
  `smallest_with_divisor_gap`, `fair_number`, `min_shift_operations`,
  `shortest_mex_xor_length`, `min_lcm_split` and `min_raspberry_steps`.
- `cfsolve.arrays` – `longest_merged_run`, `max_teams`, `min_helmet_cost`,
  `luke_changes`, `monster_kill_order`, `max_box_sum`,
  `has_repeated_power`.
- `cfsolve.strings` – `min_window_recolor`, `max_distinct_split`,
  `min_bracket_moves`, `red_blue_string`, `find_reversal`.
- `cfsolve.constructions` – `beautiful_array`, `place_buildings`,
  `shoe_shuffle`, `max_triangle_area`.

```python
from cfsolve.numbers import fair_number, is_prime, smallest_with_divisor_gap, torch_trades

is_prime(97)                   # True
fair_number(282)               # 288: divisible by each of its non-zero digits
smallest_with_divisor_gap(2)   # 15
torch_trades(2, 1, 5)          # 14
```

Where a problem has no answer, the function returns `None`
(`min_shift_operations`, `find_reversal`, `beautiful_array`,
`shoe_shuffle`); input it cannot work with raises `ValueError`, as each
docstring describes.

## Command line

The `cfsolve` command solves one problem for a whole input in judge
format and writes the answers to standard output:

```
cfsolve PROBLEM [INPUT]
```

The input is read from the file `INPUT`, or from standard input when no
file is given. For most problems it starts with the number of test
cases followed by the cases; `basketball-together` and
`reverse-a-string` take a single case with no count. Problems without
an answer print `-1` (or `NO` for `reverse-a-string`).

`cfsolve --help` lists the accepted problem names. If the input is
malformed or runs out early, the command prints a message to standard
error and exits with status 1.

The same work is available in code through
`cfsolve.cli.run(problem, text)`, which returns the output as a string
and raises `ValueError` for an unknown problem or bad input.
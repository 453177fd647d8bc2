from itertools import permutations

import pytest

from cfsolve.constructions import (
    beautiful_array,
    max_triangle_area,
    place_buildings,
    shoe_shuffle,
)


@pytest.mark.parametrize(
    "n, k, b, s",
    [(3, 6, 3, 19), (3, 6, 3, 30), (4, 3, 2, 12), (2, 5, 0, 4), (5, 10, 1, 50)],
)
def test_beautiful_array_meets_constraints(n, k, b, s):
    result = beautiful_array(n, k, b, s)
    assert result is not None
    assert len(result) == n
    assert sum(result) == s
    assert sum(x // k for x in result) == b
    assert all(x >= 0 for x in result)


def test_beautiful_array_exact_beauty_puts_everything_last():
    assert beautiful_array(3, 6, 3, 19) == [0, 0, 19]


def test_beautiful_array_sum_too_small():
    assert beautiful_array(3, 6, 5, 10) is None


def test_beautiful_array_sum_too_large():
    assert beautiful_array(3, 6, 3, 100) is None


def test_beautiful_array_single_element_above_beauty():
    assert beautiful_array(1, 6, 3, 100) is None


def test_beautiful_array_rejects_zero_k():
    with pytest.raises(ValueError):
        beautiful_array(3, 0, 1, 5)


def _walking_time(coords, visits):
    hq = coords[0]
    return sum(2 * abs(c - hq) * v for c, v in zip(coords[1:], visits))


@pytest.mark.parametrize("visits", [[1, 2, 3], [5, 0, 5, 1], [7], [0, 0, 0]])
def test_place_buildings_layout_is_consistent(visits):
    total, coords = place_buildings(visits)
    assert coords[0] == 0
    assert len(coords) == len(visits) + 1
    assert len(set(coords)) == len(coords)
    assert total == _walking_time(coords, visits)


def test_place_buildings_is_optimal_for_small_input():
    visits = [1, 2, 3]
    total, _ = place_buildings(visits)
    best = min(
        sum(2 * abs(c) * v for c, v in zip(chosen, visits))
        for chosen in permutations([-2, -1, 1, 2], len(visits))
    )
    assert total == best


@pytest.mark.parametrize(
    "sizes", [[1, 1, 1, 1, 1], [3, 6, 8, 13, 15, 21], [1, 1, 2, 2, 2], [4, 4]]
)
def test_shoe_shuffle_is_valid_derangement_or_none(sizes):
    result = shoe_shuffle(sizes)
    if len(set(sizes)) == len(sizes):
        assert result is None
    else:
        assert sorted(result) == list(range(1, len(sizes) + 1))
        for student, source in enumerate(result, start=1):
            assert source != student
            assert sizes[source - 1] == sizes[student - 1]


def test_shoe_shuffle_lonely_size_fails():
    assert shoe_shuffle([1, 1, 2]) is None


def test_shoe_shuffle_requires_sorted_sizes():
    with pytest.raises(ValueError):
        shoe_shuffle([2, 1, 1])


def test_max_triangle_area_example():
    assert max_triangle_area(5, 8, [1, 2], [2, 3, 4], [1, 4, 6], [4, 5]) == 25


def test_max_triangle_area_is_symmetric():
    bottom, top, left, right = [1, 2], [2, 3, 4], [1, 4, 6], [4, 5]
    original = max_triangle_area(5, 8, bottom, top, left, right)
    assert max_triangle_area(5, 8, top, bottom, right, left) == original
    assert max_triangle_area(8, 5, left, right, bottom, top) == original


def test_max_triangle_area_needs_points():
    with pytest.raises(ValueError):
        max_triangle_area(5, 8, [], [1, 2], [1, 2], [1, 2])
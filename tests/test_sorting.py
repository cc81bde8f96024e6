from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import INT_MIN
from pushswap.sorting import (
    is_sorted,
    median_index,
    solve,
    sort_stacks,
    sort_three,
)
from pushswap.stacks import Operation, Stacks

distinct_values = st.lists(
    st.integers(min_value=INT_MIN, max_value=2**31 - 2),
    unique=True,
    max_size=40,
)


def _replay(values, operations):
    stacks = Stacks(values)
    stacks.run(operations)
    return stacks


def test_is_sorted_ascending_and_not():
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([2, 1, 3]) is False
    assert is_sorted([5]) is True


def test_median_index_even_and_odd():
    assert median_index(4) == 1
    assert median_index(5) == 2


def test_median_index_zero_for_short_stacks():
    assert median_index(1) == 0
    assert median_index(2) == 0


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_every_permutation(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.history) <= 2


def test_sort_three_rejects_wrong_size():
    with pytest.raises(ValueError):
        sort_three(Stacks([2, 1]))


def test_solve_two_values_is_one_swap():
    assert solve([2, 1]) == [Operation.SA]


def test_solve_sorted_input_needs_nothing():
    assert solve([-3, 0, 7, 42]) == []


def test_solve_rejects_duplicates():
    with pytest.raises(ValueError):
        solve([1, 2, 1, 3])


def test_sort_stacks_empties_b():
    stacks = Stacks([5, 2, 9, -1, 3, 0])
    sort_stacks(stacks)
    assert list(stacks.a) == [-1, 0, 2, 3, 5, 9]
    assert not stacks.b


@pytest.mark.parametrize("values", list(permutations([10, 20, 30, 40, 50])))
def test_solve_five_values_all_orders(values):
    stacks = _replay(values, solve(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


@given(distinct_values)
def test_solve_sorts_any_distinct_values(values):
    stacks = _replay(values, solve(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


@given(distinct_values)
def test_solve_on_sorted_output_is_empty(values):
    assert solve(sorted(values)) == []
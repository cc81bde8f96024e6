"""Choosing the operations that sort stack ``a``."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import pairwise

from pushswap.parsing import INT_MAX, has_duplicates
from pushswap.stacks import Operation, Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True when no value is smaller than the one before it."""
    return all(first <= second for first, second in pairwise(values))


def median_index(length: int) -> int:
    """The last index counted in the upper half of a stack of ``length``."""
    return length // 2 - 1 if length % 2 == 0 else length // 2


def _in_upper_half(index: int, length: int) -> bool:
    return index <= median_index(length)


def sort_three(stacks: Stacks) -> None:
    """Sort exactly three values on stack ``a`` in at most two operations."""
    if len(stacks.a) != 3:
        raise ValueError("sort_three needs exactly three values on stack a")
    first, second, third = stacks.a
    operations: list[Operation] = []
    if second > third > first:
        operations = [Operation.RRA, Operation.SA]
    elif second < first < third:
        operations = [Operation.SA]
    elif third < first < second:
        operations = [Operation.RRA]
    elif first > second > third:
        operations = [Operation.RA, Operation.SA]
    if first > third and second < third:
        operations.append(Operation.RA)
    stacks.run(operations)


def _target_index(a: deque[int], value: int) -> int:
    """Index in ``a`` of the value that ``value`` should land on top of.

    That is the smallest value above ``value``; failing one, the smallest
    value of ``a``. A value equal to INT_MAX is never taken as the target.
    """
    best = INT_MAX
    target = None
    for index, candidate in enumerate(a):
        if value < candidate < best:
            best = candidate
            target = index
    if target is None:
        target = a.index(min(a))
    return target


def _distance_to_top(index: int, length: int) -> int:
    return index if _in_upper_half(index, length) else length - index


def _cheapest_move(stacks: Stacks) -> tuple[int, int]:
    """The value in ``b`` cheapest to move, and its target value in ``a``."""
    a, b = stacks.a, stacks.b
    best: tuple[int, int] | None = None
    best_cost = INT_MAX
    for index, value in enumerate(b):
        target = _target_index(a, value)
        cost = _distance_to_top(index, len(b)) + _distance_to_top(target, len(a))
        if cost < best_cost:
            best_cost = cost
            best = (value, a[target])
    if best is None:
        raise ValueError("stack b is empty")
    return best


def _bring_to_top(
    stacks: Stacks,
    stack: deque[int],
    value: int,
    forward: Operation,
    backward: Operation,
) -> None:
    upper = _in_upper_half(stack.index(value), len(stack))
    operation = forward if upper else backward
    while stack[0] != value:
        stacks.apply(operation)


def _move_cheapest(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    b_value, a_value = _cheapest_move(stacks)
    b_upper = _in_upper_half(b.index(b_value), len(b))
    a_upper = _in_upper_half(a.index(a_value), len(a))
    if b_upper == a_upper:
        both = Operation.RR if b_upper else Operation.RRR
        while a[0] != a_value and b[0] != b_value:
            stacks.apply(both)
    _bring_to_top(stacks, b, b_value, Operation.RB, Operation.RRB)
    _bring_to_top(stacks, a, a_value, Operation.RA, Operation.RRA)
    stacks.apply(Operation.PA)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` using ``b`` as scratch space; ``b`` ends empty.

    Values are told apart by value, so they must be distinct.
    """
    while len(stacks.a) > 3:
        stacks.apply(Operation.PB)
    sort_three(stacks)
    while stacks.b:
        _move_cheapest(stacks)
    smallest = min(stacks.a)
    while stacks.a[0] != smallest:
        stacks.apply(Operation.RRA)


def solve(values: Iterable[int]) -> list[Operation]:
    """The operations that sort ``values``, which must be distinct."""
    values = list(values)
    if has_duplicates(values):
        raise ValueError("values must be distinct")
    if is_sorted(values):
        return []
    stacks = Stacks(values)
    if len(values) == 2:
        stacks.apply(Operation.SA)
    elif len(values) == 3:
        sort_three(stacks)
    else:
        sort_stacks(stacks)
    return list(stacks.history)
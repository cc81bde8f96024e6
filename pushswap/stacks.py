"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction that changes one or both stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


def _push(dest: deque[int], src: deque[int]) -> None:
    if src:
        dest.appendleft(src.popleft())


class Stacks:
    """Stacks ``a`` and ``b``, top of each at index 0.

    Every applied operation is recorded in ``history``, even one that
    leaves the stacks unchanged.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def apply(self, operation: Operation | str) -> None:
        """Apply one operation, given as an Operation or its name."""
        op = Operation(operation)
        self.history.append(op)
        if op in (Operation.SA, Operation.SS):
            _swap(self.a)
        if op in (Operation.SB, Operation.SS):
            _swap(self.b)
        if op is Operation.PA:
            _push(self.a, self.b)
        elif op is Operation.PB:
            _push(self.b, self.a)
        if op in (Operation.RA, Operation.RR):
            _rotate(self.a)
        if op in (Operation.RB, Operation.RR):
            _rotate(self.b)
        if op in (Operation.RRA, Operation.RRR):
            _reverse_rotate(self.a)
        if op in (Operation.RRB, Operation.RRR):
            _reverse_rotate(self.b)

    def run(self, operations: Iterable[Operation | str]) -> None:
        """Apply each operation in turn."""
        for operation in operations:
            self.apply(operation)
# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small set
of operations. The program prints a sequence of operations that leaves stack
`a` in ascending order, smallest value on top, and stack `b` empty.

## Operations

| Name  | Effect                                               |
|-------|------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                     |
| `sb`  | swap the top two elements of `b`                     |
| `ss`  | `sa` and `sb` together                               |
| `pa`  | move the top of `b` onto `a`                         |
| `pb`  | move the top of `a` onto `b`                         |
| `ra`  | rotate `a` up: the first element becomes the last    |
| `rb`  | rotate `b` up                                        |
| `rr`  | `ra` and `rb` together                               |
| `rra` | rotate `a` down: the last element becomes the first  |
| `rrb` | rotate `b` down                                      |
| `rrr` | `rra` and `rrb` together                             |

An operation on a stack too short for it leaves that stack unchanged.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, as one quoted argument, or as a mix of
both. The first number is the top of stack `a`.

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

The operations are written to standard output, one per line. Nothing is
printed, and the exit status is 0, when no arguments are given or when the
numbers are already in ascending order.

The program writes `Error` to standard error and exits with status 1 when:

- an argument is empty or holds only spaces and non-ASCII characters,
- a token is not made only of digits and signs, or a sign is not followed by a
  digit,
- a number lies outside the 32-bit signed range,
- a token is longer than eleven characters,
- a number appears more than once.

Two numbers out of order are fixed with `sa`, three with at most two
operations; larger inputs are sorted by pushing all but three values to `b`,
sorting those three, and then moving back from `b` the value that is cheapest
to place, combining rotations of both stacks (`rr`, `rrr`) where they go the
same way.

## Library use

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks

moves = solve([3, 1, 2])
stacks = Stacks([3, 1, 2])
stacks.run(moves)
print(list(stacks.a))  # [1, 2, 3]
```

- `pushswap.stacks.Operation` is an enumeration of the eleven operations; its
  values are their names (`"sa"`, `"pb"`, ...).
- `pushswap.stacks.Stacks` holds the deques `a` and `b` (top at index 0) and a
  `history` list of every operation applied. `apply` takes one operation, as an
  `Operation` or its name; `run` takes an iterable of them.
- `pushswap.sorting.solve(values)` returns the list of operations that sorts
  `values`, and raises `ValueError` if a value is repeated. `sort_three` and
  `sort_stacks` apply the moves to a `Stacks` directly; `is_sorted` and
  `median_index` are the helpers they use.
- `pushswap.parsing.parse_arguments(args)` turns command-line arguments into a
  list of integers and raises `pushswap.parsing.InputError` (a `ValueError`) on
  bad input. `parse_integer`, `is_valid_token` and `has_duplicates` are the
  checks it is built from.

## What it does not do

There is no command that reads a list of operations and checks whether they
sort a given input. To check a sequence, apply it with `Stacks.run` and look at
`a` and `b`.

## Tests

```
pip install ".[test]"
pytest
```
"""Reading the command-line arguments into a list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_TOKEN_LENGTH = 11

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_integer(text: str) -> int:
    """Read a leading integer: optional spaces, one sign, then digits.

    Reading stops at the first non-digit; no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def is_valid_token(token: str) -> bool:
    """Only digits and signs, and every sign followed by a digit."""
    for char, following in zip(token, token[1:] + "\0"):
        if char in "+-":
            if not "0" <= following <= "9":
                return False
        elif not "0" <= char <= "9":
            return False
    return True


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def _is_blank(arg: str) -> bool:
    return not any(ord(char) <= 127 and char != " " for char in arg)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments, split on spaces, into the starting stack.

    Raises InputError for a blank argument, a malformed token, a value
    outside the 32-bit range, a token over eleven characters, or a
    repeated value.
    """
    if any(_is_blank(arg) for arg in args):
        raise InputError()
    tokens = [token for token in " ".join(args).split(" ") if token]
    if not all(is_valid_token(token) for token in tokens):
        raise InputError()
    values = []
    for token in tokens:
        value = parse_integer(token)
        if not INT_MIN <= value <= INT_MAX or len(token) > MAX_TOKEN_LENGTH:
            raise InputError()
        values.append(value)
    if has_duplicates(values):
        raise InputError()
    return values
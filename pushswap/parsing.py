"""Reading and checking the numbers handed to the program."""

from __future__ import annotations

import re
from typing import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_ATOI = re.compile(r"[\x07-\x0d ]*([+-]?)([0-9]*)")
_ATOL = re.compile(r"[\t-\r ]*([+-]?)([0-9]*)")
_NUMERIC = re.compile(r"[+-]?[0-9]*")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _leading_integer(pattern: re.Pattern[str], text: str) -> int:
    match = pattern.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def atoi(text: str) -> int:
    """Read the integer at the start of ``text``.

    Leading characters 7 to 13 and spaces are skipped, one sign is allowed;
    a second sign, or anything that is not a digit, gives 0.
    """
    return _leading_integer(_ATOI, text)


def atol(text: str) -> int:
    """Read the integer at the start of ``text`` without any range limit.

    Leading tabs, line breaks and spaces are skipped and one sign is allowed.
    """
    return _leading_integer(_ATOL, text)


def is_numeric(text: str) -> bool:
    """True when ``text`` is an optional sign followed only by ASCII digits."""
    return _NUMERIC.fullmatch(text) is not None


def split_single(text: str) -> list[str]:
    """Split one argument into its space-separated words."""
    return [word for word in text.split(" ") if word]


def validate(tokens: Sequence[str]) -> list[int]:
    """Check every token and return the integers they hold.

    Raises InputError when a token is not numeric, lies outside the 32-bit
    signed range, or when two tokens hold the same integer.
    """
    for token in tokens:
        if not is_numeric(token):
            raise InputError()
        if not INT_MIN <= atol(token) <= INT_MAX:
            raise InputError()
    values = [atoi(token) for token in tokens]
    if len(set(values)) != len(values):
        raise InputError()
    return values


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the values of stack ``a``, top first.

    A single argument is split on spaces; several arguments are taken as they
    are. No arguments, or a single blank one, give an empty list.
    """
    if not args:
        return []
    tokens = split_single(args[0]) if len(args) == 1 else list(args)
    return validate(tokens)
"""Turning command-line arguments into the values of stack A."""

from __future__ import annotations

import re
from collections.abc import Iterable

_SEPARATORS = re.compile(r"[ \t\n]+")
_LEADING_SPACE = "\t\v\n\r\f "
_INT_MIN = -2147483648
_INT_MAX = 2147483647


class InvalidInputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def split_whitespaces(text: str) -> list[str]:
    """Split ``text`` on spaces, tabs and newlines, dropping empty words."""
    return [word for word in _SEPARATORS.split(text) if word]


def gather_tokens(args: Iterable[str]) -> list[str]:
    """Split every argument and join the words in order."""
    return [word for arg in args for word in split_whitespaces(arg)]


def _is_number(token: str) -> bool:
    body = token.lstrip(_LEADING_SPACE)
    if body[:1] in ("-", "+"):
        body = body[1:]
    return all("0" <= ch <= "9" for ch in body)


def _value(token: str) -> int:
    sign = 1
    body = token
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = re.match(r"[0-9]*", body).group()
    return sign * int(digits) if digits else 0


def parse_stack(tokens: Iterable[str]) -> list[int]:
    """Read the values of stack A, the first token being the top.

    Raises InvalidInputError on a non-number, a value outside the 32-bit
    signed range, or a duplicate.
    """
    values: list[int] = []
    for token in tokens:
        if not _is_number(token):
            raise InvalidInputError(f"not a number: {token!r}")
        value = _value(token)
        if not _INT_MIN <= value <= _INT_MAX:
            raise InvalidInputError(f"out of range: {token!r}")
        values.append(value)
    if len(set(values)) != len(values):
        raise InvalidInputError("duplicate values")
    return values
"""String comparison and number parsing with the command line's exact rules."""

from __future__ import annotations

__all__ = ["strncmp", "parse_double"]

_SPACES = "\t\n\v\f\r "
_LONG_RANGE = 1 << 64
_LONG_MAX = (1 << 63) - 1


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(s1: str | None, s2: str | None, n: int) -> int:
    """Compare two strings over ``n`` characters, then the character after them.

    Returns 0 for a match, otherwise the difference of the first differing
    character codes (the end of a string counts as code 0). Missing strings
    or a non-positive ``n`` compare as equal.
    """
    if s1 is None or s2 is None or n <= 0:
        return 0
    index = 0
    while n > 0 and _code_at(s1, index) == _code_at(s2, index) and _code_at(s1, index) != 0:
        index += 1
        n -= 1
    return _code_at(s1, index) - _code_at(s2, index)


def _wrap_long(value: int) -> int:
    value %= _LONG_RANGE
    return value - _LONG_RANGE if value > _LONG_MAX else value


def parse_double(text: str) -> float:
    """Read a decimal number such as ``-0.8`` without validating its digits.

    Leading white space is skipped and any run of ``+``/``-`` signs is
    folded into one sign. Every character before the first ``.`` counts as
    an integer digit and every character after it as a fractional digit.
    """
    text = text.split("\0", 1)[0]
    stripped = text.lstrip(_SPACES)
    body = stripped.lstrip("+-")
    signs = stripped[: len(stripped) - len(body)]
    sign = -1 if signs.count("-") % 2 else 1

    whole, _, fraction = body.partition(".")
    integer_part = 0
    for char in whole:
        integer_part = _wrap_long(integer_part * 10 + ord(char) - 48)

    fraction_part = 0.0
    power = 1.0
    for char in fraction:
        power /= 10
        fraction_part += (ord(char) - 48) * power

    return (integer_part + fraction_part) * sign
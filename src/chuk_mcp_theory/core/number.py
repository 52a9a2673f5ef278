"""
Interval number - the count of letter steps an interval spans.

C to G spans C, D, E, F, G: a fifth. C to C is a unison (1), C to the
next C an octave (8). Accidentals never change the number.
"""

from __future__ import annotations

import re

from chuk_mcp_theory.constants import MAX_INTERVAL_NUMBER

_TENS: tuple[str, ...] = (
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)
_ORDINAL_TENS: tuple[str, ...] = tuple(re.sub("y$", "ieth", word) for word in _TENS)
_ORDINAL_UNDER_TWENTY: tuple[str, ...] = (
    "",
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
    "eleventh",
    "twelfth",
    "thirteenth",
    "fourteenth",
    "fifteenth",
    "sixteenth",
    "seventeenth",
    "eighteenth",
    "nineteenth",
)

_TRAILING_DIGITS = re.compile(r"\d+$")
_TRAILING_ORDINAL = re.compile(r"(\d+)(st|nd|rd|th)$")
_TRAILING_WORD = re.compile(r"[a-zA-Z-]+$")


def is_number(value: object) -> bool:
    """Check for a valid interval number (a positive integer)."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_perfect_family(number: int) -> bool:
    """True for 1, 4, 5, 8, 11, 12, ... (numbers that can be perfect)."""
    return number % 7 in (1, 4, 5)


def is_compound(number: int) -> bool:
    """True for intervals larger than an octave."""
    return number > 8


def is_simple(number: int) -> bool:
    """True for unison through octave."""
    return 0 < number < 9


def is_octaves(number: int) -> bool:
    """True when the number is a whole number of octaves (8, 15, 22, ...)."""
    return number > 7 and (number - 1) % 7 == 0


def to_ordinal(number: int) -> str | None:
    """1 -> '1st', 2 -> '2nd', 8 -> '8ve', 9 -> '9th'."""
    if number < 1 or number > MAX_INTERVAL_NUMBER:
        return None
    suffix = {1: "st", 2: "nd", 3: "rd", 8: "ve"}.get(number, "th")
    return f"{number}{suffix}"


def from_ordinal(ordinal: str) -> int | None:
    """'5th' -> 5."""
    match = re.search(r"\d+", ordinal)
    if not match:
        return None
    number = int(match.group(0))
    if number > MAX_INTERVAL_NUMBER:
        return None
    return number


def to_ordinal_word(number: int) -> str | None:
    """
    Ordinal word for an interval number.

    1 -> 'unison', 2 -> 'second', 8 -> 'octave', 21 -> 'twenty-first'
    """
    if number < 1 or number > MAX_INTERVAL_NUMBER:
        return None
    if number == 1:
        return "unison"
    if number == 8:
        return "octave"
    if number < 20:
        return _ORDINAL_UNDER_TWENTY[number]

    tens, units = divmod(number, 10)
    if units == 0:
        return _ORDINAL_TENS[tens - 2]
    return f"{_TENS[tens - 2]}-{_ORDINAL_UNDER_TWENTY[units]}"


def from_ordinal_word(word: str) -> int | None:
    """Inverse of to_ordinal_word; also accepts 'first' and 'eighth'."""
    if word == "unison":
        return 1
    if word == "octave":
        return 8

    if word in _ORDINAL_UNDER_TWENTY[1:]:
        return _ORDINAL_UNDER_TWENTY.index(word)

    if word.endswith("ieth"):
        if word in _ORDINAL_TENS:
            return (_ORDINAL_TENS.index(word) + 2) * 10
        return None

    parts = word.split("-")
    if len(parts) == 2 and parts[0] in _TENS and parts[1] in _ORDINAL_UNDER_TWENTY[1:10]:
        return (_TENS.index(parts[0]) + 2) * 10 + _ORDINAL_UNDER_TWENTY.index(parts[1])

    return None


def from_string(text: str) -> int | None:
    """
    Extract the interval number from the end of some text.

    'P5' -> 5, 'perfect 5th' -> 5, 'perfect fifth' -> 5,
    'major twenty-third' -> 23
    """
    text = text.strip()
    number: int | None = None

    if match := _TRAILING_DIGITS.search(text):
        number = int(match.group(0))
    elif match := _TRAILING_ORDINAL.search(text):
        number = int(match.group(1))
    elif match := _TRAILING_WORD.search(text):
        number = from_ordinal_word(match.group(0))

    if number and 0 < number < MAX_INTERVAL_NUMBER:
        return number
    return None

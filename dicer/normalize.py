"""Canonicalization of raw dice expressions.

``normalize`` turns whatever a person typed into a strict form the later
stages can split without lookahead:

    "d6 + 3"            -> "1d6+3"
    "1D20 + 2d4 - 1D6"  -> "1d20+2d4-1d6"
    "2d10-"             -> "2d10"

The output has no whitespace, is lowercase, and every dice term carries an
explicit count and a side count that does not start with zero.
"""

from __future__ import annotations

import re

from dicer.errors import InvalidCharacterError, InvalidDiceTypeError, MalformedTermError

_DIGITS = frozenset("0123456789")
_OPERATORS = frozenset("+-")
_DICE_MARKERS = frozenset("dD")
_ALLOWED = _DIGITS | _OPERATORS | _DICE_MARKERS

# A side count followed by whitespace and more digits: "1d6 2" could be
# 1d62 or 1d6 then a count of 2.
_AMBIGUOUS_SIDES_RE = re.compile(r"[dD]\s*[0-9]+\s+[0-9]+")


def _check_characters(expression: str) -> None:
    for char in expression:
        if char not in _ALLOWED and not char.isspace():
            raise InvalidCharacterError(
                f"Invalid character {char!r} in dice expression {expression!r}",
                expression=expression,
                fragment=char,
            )


def _check_side_counts(expression: str) -> None:
    m = _AMBIGUOUS_SIDES_RE.search(expression)
    if m:
        raise MalformedTermError(
            f"Ambiguous dice term {m.group()!r} in dice expression {expression!r}: "
            "separate terms with + or -",
            expression=expression,
            fragment=m.group(),
        )


def normalize(expression: str) -> str:
    """Return the canonical form of a dice expression.

    Args:
        expression: Raw dice expression, e.g. "d20 + 5".

    Returns:
        Canonical expression, e.g. "1d20+5". An empty or whitespace-only input
        normalizes to the empty string.

    Raises:
        InvalidCharacterError: If the input holds anything besides digits,
            d/D, +, - and whitespace.
        InvalidDiceTypeError: If a dice marker is not followed by a digit, or
            is followed by 0.
        MalformedTermError: If whitespace splits the digits after a dice
            marker, as in "1d6 2".
    """
    _check_characters(expression)
    _check_side_counts(expression)
    chars = [c for c in expression if not c.isspace()]

    out: list[str] = []
    if chars and chars[0] in _DICE_MARKERS:
        out.append("1")

    i = 0
    while i < len(chars):
        char = chars[i]

        if char in _DIGITS:
            end = i
            while end < len(chars) and chars[end] in _DIGITS:
                end += 1
            out.extend(chars[i:end])
            i = end
            continue

        if char in _DICE_MARKERS:
            if not out or out[-1] not in _DIGITS:
                out.append("1")
            out.append("d")

            side = chars[i + 1] if i + 1 < len(chars) else ""
            if side not in _DIGITS or side == "0":
                raise InvalidDiceTypeError(
                    f"Invalid dice type {char + side!r} in dice expression {expression!r}",
                    expression=expression,
                    fragment=char + side,
                )
            out.append(side)
            i += 2

            if i < len(chars) and chars[i] in _OPERATORS:
                out.append(chars[i])
                i += 1
            continue

        out.append(char)
        i += 1

    return "".join(out).rstrip("+-").lower()

"""Split a normalized expression into signed terms."""

from __future__ import annotations


def segment(normalized: str) -> list[str]:
    """Split a normalized expression into signed terms.

    Each operator closes the term before it and becomes the sign of the term
    after it. A term with no operator in front of it is positive, and a run
    of operators keeps only the last one.

    Example:
        >>> segment("2d6+3-1d4")
        ['+2d6', '+3', '-1d4']
    """
    terms: list[str] = []
    sign = "+"
    buffer: list[str] = []

    for char in normalized:
        if char in "+-":
            if buffer:
                terms.append(sign + "".join(buffer))
                buffer = []
            sign = char
        else:
            buffer.append(char)

    if buffer:
        terms.append(sign + "".join(buffer))
    return terms

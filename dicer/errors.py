"""Parse errors raised by the dice expression pipeline.

Every error is terminal for the expression being rolled. Each one carries the
full input (``expression``) and the offending substring (``fragment``) so the
CLI and HTTP layers can point at the problem.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for an expression that cannot be rolled."""

    kind = "parse_error"

    def __init__(self, message: str, *, expression: str, fragment: str) -> None:
        super().__init__(message)
        self.expression = expression
        self.fragment = fragment


class InvalidCharacterError(ParseError):
    """Raised when the input holds a character outside digits, d/D, +, - and whitespace."""

    kind = "invalid_character"


class InvalidDiceTypeError(ParseError):
    """Raised when a dice marker is not followed by a positive side count."""

    kind = "invalid_dice_type"


class MalformedTermError(ParseError):
    """Raised when a signed term is neither a valid constant nor a valid dice term."""

    kind = "malformed_term"

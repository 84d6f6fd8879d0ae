"""Dice rolling engine.

Supports sums of dice terms and flat modifiers: XdY, dY, XdY+Z, XdY-Z and
any chain of them, e.g. 2d6, d20, 3d10+2, 1d20+2d4-1d6-1.

Rolling runs four stages in order: ``normalize`` -> ``segment`` ->
``parse_term`` -> ``evaluate``. The first three are pure and raise a
``ParseError`` subclass on bad input; no die is drawn until all of them have
succeeded.
"""

from __future__ import annotations

import logging

from dicer.entities import Outcome, RollEntity
from dicer.errors import MalformedTermError, ParseError
from dicer.evaluate import evaluate
from dicer.normalize import normalize
from dicer.random_source import RandomSource
from dicer.segment import segment
from dicer.terms import parse_term

logger = logging.getLogger(__name__)


def parse(expression: str) -> list[RollEntity]:
    """Parse a dice expression into entities.

    Args:
        expression: Dice expression, e.g. "2d6+3".

    Returns:
        Entities in expression order.

    Raises:
        InvalidCharacterError: If the expression holds an unsupported character.
        InvalidDiceTypeError: If a dice marker lacks a positive side count.
        MalformedTermError: If a term is malformed or the expression has no terms.
    """
    terms = segment(normalize(expression))
    if not terms:
        raise MalformedTermError(
            f"Empty dice expression: {expression!r}",
            expression=expression,
            fragment=expression,
        )
    return [parse_term(term) for term in terms]


def roll(
    expression: str,
    *,
    rng: RandomSource | None = None,
    log: logging.Logger | None = None,
) -> Outcome:
    """Roll the dice described by an expression.

    Args:
        expression: Dice expression, e.g. "2d6+3".
        rng: Source of die draws. Defaults to a fresh ``random.Random``.
        log: Logger for tracing. Defaults to this module's logger.

    Returns:
        Outcome with the realized total and the attainable minimum and maximum.

    Raises:
        ParseError: If the expression is invalid.
    """
    log = log if log is not None else logger
    try:
        entities = parse(expression)
    except ParseError as exc:
        log.debug("Rejected %r: %s", expression, exc)
        raise
    outcome = evaluate(entities, rng=rng, log=log)
    log.debug("Rolled %r: %s", expression, outcome)
    return outcome

"""Evaluation of parsed entities into an Outcome.

Bounds are computed from the dice faces, never from the realized draws.
Subtracting a die lowers the minimum by its highest face and the maximum by
its lowest face:

    kind          sign   total           minimum   maximum
    Constant(v)   +      +v              +v        +v
    Constant(v)   -      -v              -v        -v
    Dice(c, s)    +      +sum(c draws)   +c        +c*s
    Dice(c, s)    -      -sum(c draws)   -c*s      -c
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dicer.entities import DiceKind, Outcome, RollEntity, Sign
from dicer.random_source import RandomSource, get_random_source

logger = logging.getLogger(__name__)


def evaluate(
    entities: Iterable[RollEntity],
    rng: RandomSource | None = None,
    log: logging.Logger | None = None,
) -> Outcome:
    """Roll every dice entity and total the expression.

    Args:
        entities: Validated entities, in expression order.
        rng: Source of die draws. Defaults to ``get_random_source()``.
        log: Logger for per-term tracing. Defaults to this module's logger.

    Returns:
        Outcome with the realized total, the attainable minimum and maximum,
        and every individual die face in draw order.
    """
    rng = rng if rng is not None else get_random_source()
    log = log if log is not None else logger

    total = minimum = maximum = 0
    rolls: list[int] = []

    for entity in entities:
        factor = entity.sign.factor
        kind = entity.kind

        if isinstance(kind, DiceKind):
            draws = [rng.randint(1, kind.sides) for _ in range(kind.count)]
            rolls.extend(draws)
            total += factor * sum(draws)
            if entity.sign is Sign.positive:
                minimum += kind.count
                maximum += kind.count * kind.sides
            else:
                minimum -= kind.count * kind.sides
                maximum -= kind.count
            log.debug("%s rolled %s", entity, draws)
        else:
            total += factor * kind.value
            minimum += factor * kind.value
            maximum += factor * kind.value

        log.debug("after %s: total=%d minimum=%d maximum=%d", entity, total, minimum, maximum)

    return Outcome(total=total, minimum=minimum, maximum=maximum, rolls=tuple(rolls))

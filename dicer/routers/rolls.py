"""Dice roll route."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from dicer.config import settings
from dicer.dice import parse
from dicer.entities import DiceKind
from dicer.evaluate import evaluate
from dicer.normalize import normalize
from dicer.random_source import RandomSource, get_random_source
from dicer.schemas import ParseErrorResponse, RollResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/roll",
    response_model=RollResponse,
    responses={400: {"model": ParseErrorResponse}},
)
async def roll_expression(
    expression: str,
    rng: RandomSource = Depends(get_random_source),
) -> RollResponse:
    """Roll a dice expression and return the total with its attainable range."""
    entities = parse(expression)

    dice_count = sum(e.kind.count for e in entities if isinstance(e.kind, DiceKind))
    if dice_count > settings.max_dice_per_roll:
        raise HTTPException(
            status_code=422,
            detail=f"Too many dice: {dice_count} (max {settings.max_dice_per_roll})",
        )

    outcome = evaluate(entities, rng=rng, log=logger)
    return RollResponse(
        expression=expression,
        normalized=normalize(expression),
        total=outcome.total,
        minimum=outcome.minimum,
        maximum=outcome.maximum,
        rolls=list(outcome.rolls),
    )

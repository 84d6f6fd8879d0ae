"""Pydantic response models for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RollResponse(BaseModel):
    expression: str = Field(description="The expression exactly as submitted.")
    normalized: str = Field(description="Canonical form, e.g. '1d20+5' for 'd20 + 5'.")
    total: int = Field(description="Realized total with every die rolled.")
    minimum: int = Field(description="Total if every die shows its lowest face.")
    maximum: int = Field(description="Total if every die shows its highest face.")
    rolls: list[int] = Field(description="Individual die faces in draw order.")


class ParseErrorResponse(BaseModel):
    detail: str
    kind: str = Field(description="invalid_character, invalid_dice_type or malformed_term.")
    fragment: str = Field(description="The offending part of the expression.")

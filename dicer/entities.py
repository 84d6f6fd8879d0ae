"""Value types passed between the stages of the dice pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from dicer.errors import MalformedTermError

# Counts, sides and constants are unsigned 32-bit quantities.
U32_MAX = 2**32 - 1

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Sign(str, enum.Enum):
    """Sign applied to a term's contribution."""

    positive = "+"
    negative = "-"

    @property
    def factor(self) -> int:
        return 1 if self is Sign.positive else -1


# ---------------------------------------------------------------------------
# Term kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DiceKind:
    """``count`` independent dice with ``sides`` faces each."""

    count: int
    sides: int

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"


@dataclass(frozen=True)
class ConstantKind:
    """A flat modifier."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RollEntity:
    """One parsed term of a roll expression.

    Construction validates the term, so an entity that exists is always safe
    to evaluate.

    Raises:
        MalformedTermError: If the sign is unknown, a dice term has a zero
            count or zero sides, or any number falls outside the unsigned
            32-bit range.
    """

    sign: Sign
    kind: DiceKind | ConstantKind

    def __post_init__(self) -> None:
        if not isinstance(self.sign, Sign):
            try:
                object.__setattr__(self, "sign", Sign(self.sign))
            except ValueError:
                self._reject(f"unknown sign {self.sign!r}")
        if isinstance(self.kind, DiceKind):
            numbers = (self.kind.count, self.kind.sides)
            if self.kind.count < 1:
                self._reject("dice count must be at least 1")
            if self.kind.sides < 1:
                self._reject("dice must have at least 1 side")
        else:
            numbers = (self.kind.value,)
        if any(n < 0 or n > U32_MAX for n in numbers):
            self._reject(f"numbers must be between 0 and {U32_MAX}")

    def _reject(self, reason: str) -> None:
        term = f"{getattr(self.sign, 'value', self.sign)}{self.kind}"
        raise MalformedTermError(
            f"Malformed term {term!r}: {reason}", expression=term, fragment=term
        )

    @classmethod
    def dice(cls, count: int, sides: int, sign: Sign = Sign.positive) -> RollEntity:
        return cls(sign=sign, kind=DiceKind(count=count, sides=sides))

    @classmethod
    def constant(cls, value: int, sign: Sign = Sign.positive) -> RollEntity:
        return cls(sign=sign, kind=ConstantKind(value=value))

    @property
    def is_dice(self) -> bool:
        return isinstance(self.kind, DiceKind)

    def __str__(self) -> str:
        return f"{self.sign.value}{self.kind}"


@dataclass(frozen=True)
class Outcome:
    """Realized total of a roll plus the lowest and highest attainable totals."""

    total: int
    minimum: int
    maximum: int
    rolls: tuple[int, ...] = ()

"""Parsing of single signed terms into RollEntity values."""

from __future__ import annotations

import re

from dicer.entities import U32_MAX, ConstantKind, DiceKind, RollEntity, Sign
from dicer.errors import MalformedTermError

_TERM_RE = re.compile(
    r"(?P<sign>[+-])(?:(?P<count>[0-9]+)d(?P<sides>[0-9]+)|(?P<value>[0-9]+))"
)

_U32_DIGITS = len(str(U32_MAX))


def _malformed(signed_term: str, reason: str) -> MalformedTermError:
    return MalformedTermError(
        f"Malformed term {signed_term!r}: {reason}",
        expression=signed_term,
        fragment=signed_term,
    )


def _to_u32(digits: str, signed_term: str) -> int:
    # Checked on the string so oversized input never reaches int().
    significant = digits.lstrip("0")
    if len(significant) > _U32_DIGITS or int(significant or "0") > U32_MAX:
        raise _malformed(signed_term, f"{digits} does not fit in 32 bits")
    return int(significant or "0")


def parse_term(signed_term: str) -> RollEntity:
    """Parse one signed term into a RollEntity.

    Args:
        signed_term: A sign followed by a body, e.g. "+2d6", "-3".

    Returns:
        A dice entity for "<count>d<sides>" bodies, a constant entity for
        all-digit bodies.

    Raises:
        MalformedTermError: If the sign is missing, the body holds anything
            besides digits and a single ``d``, either side of the ``d`` is
            empty, the count or sides is zero, or a number overflows 32 bits.
    """
    m = _TERM_RE.fullmatch(signed_term)
    if not m:
        raise _malformed(signed_term, "expected <sign><count>d<sides> or <sign><digits>")

    sign = Sign(m.group("sign"))
    if m.group("value") is not None:
        value = _to_u32(m.group("value"), signed_term)
        return RollEntity(sign=sign, kind=ConstantKind(value=value))

    count = _to_u32(m.group("count"), signed_term)
    sides = _to_u32(m.group("sides"), signed_term)
    if count == 0:
        raise _malformed(signed_term, "dice count must be at least 1")
    if sides == 0:
        raise _malformed(signed_term, "dice must have at least 1 side")
    return RollEntity(sign=sign, kind=DiceKind(count=count, sides=sides))

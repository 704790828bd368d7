"""Bounded conversion of decimal strings to integers."""

from __future__ import annotations

import re

LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class StrtonumError(ValueError):
    """Raised when a string is not a number within the requested bounds."""

    def __init__(self, reason: str, numstr: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.numstr = numstr


def strtonum(numstr: str, minval: int, maxval: int) -> int:
    """Parse ``numstr`` as a base-10 integer in ``[minval, maxval]``.

    Leading whitespace and a sign are accepted; anything after the digits
    is not.  Raises :class:`StrtonumError` whose ``reason`` is one of
    ``"invalid"``, ``"too small"`` or ``"too large"``.
    """
    if minval > maxval:
        raise StrtonumError("invalid", numstr)
    match = _NUMBER.fullmatch(numstr)
    if match is None:
        raise StrtonumError("invalid", numstr)
    value = int(match.group(1))
    if value < LLONG_MIN or value < minval:
        raise StrtonumError("too small", numstr)
    if value > LLONG_MAX or value > maxval:
        raise StrtonumError("too large", numstr)
    return value
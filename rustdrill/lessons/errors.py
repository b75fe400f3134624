"""Error handling: explicit failures, integer parsing and validated values."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")


def _parse_int(text: str, bits: int, signed: bool = True) -> int:
    """Parse an integer strictly, limited to a machine word of the given width.

    The accepted syntax is an optional sign followed by decimal digits; a
    minus sign is accepted only for signed words.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    head, rest = text[0], text[1:]
    if head in "+-" and not rest:
        raise ValueError("invalid digit found in string")
    if head == "+":
        negative, digits = False, rest
    elif head == "-" and signed:
        negative, digits = True, rest
    else:
        negative, digits = False, text
    if any(c not in _DIGITS for c in digits):
        raise ValueError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    low, high = (-(2 ** (bits - 1)), 2 ** (bits - 1) - 1) if signed else (0, 2**bits - 1)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def generate_nametag_text(name: str) -> str:
    """Nametag text for a name; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a 32-bit integer and
    OverflowError when the cost does not fit one.
    """
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    cost = qty * cost_per_item + processing_fee
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("attempt to compute the cost with overflow")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Pay for the typed quantity and return the tokens left.

    Raises ValueError when the quantity cannot be parsed or costs more
    than the tokens available.
    """
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationErrorKind(enum.Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive, non-zero integer."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a positive non-zero integer."""

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        self.cause = cause

    @classmethod
    def from_creation(cls, err: CreationError) -> "ParsePosNonzeroError":
        return cls(err)

    @classmethod
    def from_int(cls, err: ValueError) -> "ParsePosNonzeroError":
        return cls(err)

    @property
    def creation(self) -> CreationError | None:
        """The validation failure, if that is what went wrong."""
        return self.cause if isinstance(self.cause, CreationError) else None

    @property
    def parse_int(self) -> ValueError | None:
        """The integer parsing failure, if that is what went wrong."""
        return None if isinstance(self.cause, CreationError) else self.cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and check that it is positive and non-zero."""
    try:
        value = _parse_int(s, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError.from_int(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError.from_creation(exc) from exc
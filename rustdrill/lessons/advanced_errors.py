"""Custom error types that wrap lower-level failures."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import PositiveNonzeroInteger, _parse_int, parse_pos_nonzero


def parse_positive(s: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero integer; raise ParsePosNonzeroError."""
    return parse_pos_nonzero(s)


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if "_" in text or any(c.isspace() for c in text):
        raise ValueError("invalid float literal")
    try:
        return float(text)
    except ValueError:
        raise ValueError("invalid float literal") from None


class ParseClimateErrorKind(enum.Enum):
    """Why a climate record could not be parsed."""

    EMPTY = "empty input"
    BAD_LEN = "incorrect number of fields"
    NO_CITY = "no city name"
    PARSE_INT = "error parsing year"
    PARSE_FLOAT = "error parsing temperature"


class ParseClimateError(ValueError):
    """A climate record could not be parsed; parse failures keep their cause."""

    def __init__(self, kind: ParseClimateErrorKind, inner: ValueError | None = None):
        message = kind.value if inner is None else f"{kind.value}: {inner}"
        super().__init__(message)
        self.kind = kind
        self.inner = inner
        self.__cause__ = inner


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float

    @classmethod
    def parse(cls, s: str) -> "Climate":
        """Parse "city,year,temp"; raise ParseClimateError on bad input."""
        if not s:
            raise ParseClimateError(ParseClimateErrorKind.EMPTY)
        fields = s.split(",")
        if len(fields) != 3:
            raise ParseClimateError(ParseClimateErrorKind.BAD_LEN)
        city, year_text, temp_text = fields
        if not city:
            raise ParseClimateError(ParseClimateErrorKind.NO_CITY)
        try:
            year = _parse_int(year_text, 32, signed=False)
        except ValueError as exc:
            raise ParseClimateError(ParseClimateErrorKind.PARSE_INT, exc) from exc
        try:
            temp = _parse_float(temp_text)
        except ValueError as exc:
            raise ParseClimateError(ParseClimateErrorKind.PARSE_FLOAT, exc) from exc
        return cls(city=city, year=year, temp=temp)
"""Optional values: matching, unwrapping and draining."""

from __future__ import annotations

from dataclasses import dataclass

_U16_MAX = 2**16 - 1


def describe_number(maybe_number: int | None) -> str:
    """Describe a number that may be missing."""
    if maybe_number is None:
        return "No number"
    return f"printing: {maybe_number}"


def generated_numbers() -> list[int]:
    """Five numbers computed as ((i * 1235) + 2) / (4 * 16) for i in 0..5."""
    numbers = [((i * 1235) + 2) // (4 * 16) for i in range(5)]
    if any(n > _U16_MAX for n in numbers):
        raise OverflowError("value does not fit in 16 bits")
    return numbers


def describe_word(optional_word: str | None) -> str:
    """Describe a word that may be missing."""
    if optional_word is not None:
        return f"The word is: {optional_word}"
    return "The optional word doesn't contain anything"


def pop_all(values: list[int]) -> list[int]:
    """Pop every value off the end of the list, returning them in pop order."""
    popped = []
    while values:
        popped.append(values.pop())
    return popped


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


def describe_point(point: Point | None) -> str:
    """Describe the coordinates of a point that may be missing."""
    match point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"
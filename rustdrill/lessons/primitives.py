"""Primitive values: characters, arrays, slices and tuples."""

from __future__ import annotations

from collections.abc import Sequence, Sized
from typing import Any


def classify_char(character: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError("expected exactly one character")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def size_verdict(items: Sized) -> str:
    """Comment on whether a collection holds at least 100 elements."""
    if len(items) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[Any]) -> Sequence[Any]:
    """The elements at positions 1, 2 and 3."""
    if len(values) < 4:
        raise IndexError("need at least four values")
    return values[1:4]


def _display(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    """Unpack a (name, age) pair into a sentence."""
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second(values: Sequence[Any]) -> Any:
    """The second element of a tuple or sequence."""
    return values[1]
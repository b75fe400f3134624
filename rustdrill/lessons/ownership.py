"""Handing lists to functions and getting new ones back."""

from __future__ import annotations

from collections.abc import Iterable

_FILL = (22, 44, 66)


def fill_vec(values: Iterable[int] | None = None) -> list[int]:
    """A new list holding the given values followed by 22, 44 and 66.

    The argument is left untouched; with no argument the list starts empty.
    """
    filled = list(values) if values is not None else []
    filled.extend(_FILL)
    return filled


def describe_vec(label: str, values: list[int]) -> str:
    """Describe a list by its label, length and contents."""
    return f"{label} has length {len(values)} content `{values!r}`"
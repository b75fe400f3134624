"""Collections: dictionaries of fruit and lists of numbers."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableMapping


class Fruit(enum.Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five fruits."""
    return {"banana": 2, "orange": 2, "apple": 2}


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add two of every missing kind of fruit, leaving existing counts alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed-size tuple and a list holding the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: Iterable[int]) -> list[int]:
    """Every value multiplied by two."""
    return [value * 2 for value in values]
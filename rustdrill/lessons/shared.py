"""Sharing data between threads, and a recursive cons list."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th value, one thread per starting offset.

    Element i of the result is the sum of numbers[i], numbers[i + workers], ...
    """
    if workers < 1:
        raise ValueError("at least one worker is needed")
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(
            pool.map(lambda offset: sum(shared[offset::workers]), range(workers))
        )


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding the single value 1."""
    return Cons(1, Nil())
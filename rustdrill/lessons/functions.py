"""Small functions with parameters and return values."""

from __future__ import annotations


def ring_calls(num: int) -> list[str]:
    """One "Ring!" line per call, numbered from 1."""
    return [f"Ring! Call number {i + 1}" for i in range(num)]


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num
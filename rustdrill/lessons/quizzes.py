"""Quiz answers: variables, functions, branching, tests and formatting."""


def calculate_apple_price(num_of_apples: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if num_of_apples > 40:
        return num_of_apples
    return num_of_apples * 2


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def greet(val: object) -> str:
    """Prefix a value with "Hello "."""
    return f"Hello {val}"
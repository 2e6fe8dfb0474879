"""Small functions on numbers and strings with simple branching."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """'foo' for 'fizz', 'bar' for 'fuzz', 'baz' otherwise."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """True when the number is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the number multiplied by itself."""
    return num * num


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at a given hour; None for hours past 24."""
    if time_of_day < 0:
        raise ValueError("time of day must not be negative")
    if time_of_day <= 21:
        return 5
    if time_of_day <= 24:
        return 0
    return None
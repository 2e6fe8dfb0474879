"""Small string and list operations."""

from __future__ import annotations


def is_a_color_word(attempt: str) -> bool:
    """Return True for 'green', 'blue' or 'red'."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Strip surrounding whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append ' world!' to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every 'cars' with 'balloons'."""
    return text.replace("cars", "balloons")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return the same four numbers as a tuple and as a list."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]
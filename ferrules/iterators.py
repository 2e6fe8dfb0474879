"""Iterator-style helpers: capitalisation, checked division, factorials and counting."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

U64_MAX = (1 << 64) - 1
DIVIDEND_SAMPLES = (27, 297, 38502, 81)
SAMPLE_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word and return them as a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them without separators."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A checked division could not produce a whole result."""


@dataclass(frozen=True)
class NotDivisibleError(DivisionError):
    """The dividend is not an exact multiple of the divisor."""

    dividend: int
    divisor: int

    def __str__(self) -> str:
        return f"{self.dividend} is not divisible by {self.divisor}"


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DivideByZeroError)

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b exactly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def _sample_results() -> Iterable[int | DivisionError]:
    for number in DIVIDEND_SAMPLES:
        try:
            yield divide(number, SAMPLE_DIVISOR)
        except DivisionError as err:
            yield err


def result_with_list() -> list[int]:
    """Divide the sample numbers by 27, keeping only the successful quotients."""
    return [r for r in _sample_results() if not isinstance(r, DivisionError)]


def list_of_results() -> list[int | DivisionError]:
    """Divide the sample numbers by 27, keeping only the successful results."""
    return [r for r in _sample_results() if not isinstance(r, DivisionError)]


def factorial(num: int) -> int:
    """Return num! for a non-negative num whose factorial fits in 64 bits."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(1, num + 1))
    if result > U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    """How far an exercise has progressed."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across several maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)
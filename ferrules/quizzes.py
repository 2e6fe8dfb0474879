"""Apple pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

BULK_THRESHOLD = 40


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple when buying more than forty."""
    if apples > BULK_THRESHOLD:
        return apples
    return apples * 2


@dataclass(frozen=True)
class Uppercase:
    """Turn the string to upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append 'bar' the given number of times."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("append count must not be negative")


Command = Uppercase | Trim | Append


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(count=count):
            return text + "bar" * count
    raise TypeError(f"unknown command {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [_apply(text, command) for text, command in items]


T = TypeVar("T")


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a grade of any printable kind."""

    grade: T
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError("student age must be between 0 and 255")

    def report(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )
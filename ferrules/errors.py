"""Error handling around integer parsing and validated values."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_SIGNED = re.compile(r"[+-]?[0-9]+")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


class ParseIntError(ValueError):
    """A string could not be parsed as a fixed-width signed integer."""


def _parse_signed(text: str, bits: int) -> int:
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ParseIntError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ParseIntError("number too large to fit in target type")
    if value < -limit:
        raise ParseIntError("number too small to fit in target type")
    return value


def parse_int(text: str) -> int:
    """Parse a 32-bit signed integer strictly; raise ParseIntError on failure."""
    return _parse_signed(text, 32)


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; an empty name raises ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity of items, fee included."""
    quantity = parse_int(item_quantity)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable; print the outcome and return tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(enum.Enum):
    """Why a positive non-zero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed, or the parsed number was not positive."""

    def __init__(self, error: CreationError | ParseIntError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and check that it is positive and non-zero."""
    try:
        value = _parse_signed(text, 64)
    except ParseIntError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err
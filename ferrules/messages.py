"""Messages that change a small piece of state."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Point:
    """A position with 8-bit coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_byte(self.x, "x")
        _check_byte(self.y, "y")


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour to an RGB triple."""

    color: tuple[int, int, int]

    def __post_init__(self) -> None:
        if len(self.color) != 3:
            raise ValueError("colour must have three components")
        for component in self.color:
            _check_byte(component, "colour component")


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Print a text."""

    text: str


@dataclass(frozen=True)
class Quit:
    """Mark the state as quit."""


Message = ChangeColor | Move | Echo | Quit


@dataclass
class State:
    """Colour, position and quit flag updated by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        match message:
            case ChangeColor(color=color):
                self.color = tuple(color)
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message {message!r}")
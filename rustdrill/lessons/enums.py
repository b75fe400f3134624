"""Messages of several shapes and a state machine that reacts to them."""

from __future__ import annotations

from dataclasses import dataclass, field

_U8_MAX = 255


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"{name} must be in 0..={_U8_MAX}, got {value}")


@dataclass(frozen=True)
class Point:
    """A position with 8-bit unsigned coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8("x", self.x)
        _check_u8("y", self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Ask the state to switch to a new RGB colour."""

    color: tuple[int, int, int]

    def __post_init__(self) -> None:
        if len(self.color) != 3:
            raise ValueError("a colour has exactly three components")
        for component in self.color:
            _check_u8("colour component", component)


@dataclass(frozen=True)
class Echo:
    """Ask the state to print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Ask the state to move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Ask the state to stop."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position and whether a quit has been requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    should_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = tuple(color)

    def quit(self) -> None:
        self.should_quit = True

    def echo(self, s: str) -> None:
        print(s)

    def move_position(self, p: Point) -> None:
        self.position = p

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")
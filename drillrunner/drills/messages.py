"""Message drill: a state machine driven by messages."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour to an RGB triple."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


Message = ChangeColor | Quit | Echo | Move


@dataclass
class State:
    """The state a sequence of messages acts on."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quitting: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quitting = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Quit():
                self.quit()
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case _:
                raise TypeError(f"unknown message: {message!r}")
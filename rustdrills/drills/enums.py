"""Messages of several shapes and a state that reacts to them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class MessageKind(enum.Enum):
    """The kinds of message that exist."""

    QUIT = "quit"
    ECHO = "echo"
    MOVE = "move"
    CHANGE_COLOR = "change_color"


@dataclass(frozen=True)
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to stop."""

    @property
    def kind(self) -> MessageKind:
        return MessageKind.QUIT


@dataclass(frozen=True)
class Echo:
    """Ask the state to print some text."""

    text: str

    @property
    def kind(self) -> MessageKind:
        return MessageKind.ECHO


@dataclass(frozen=True)
class Move:
    """Ask the state to move to a point."""

    point: Point

    @property
    def kind(self) -> MessageKind:
        return MessageKind.MOVE


@dataclass(frozen=True)
class ChangeColor:
    """Ask the state to take a new colour."""

    red: int
    green: int
    blue: int

    @property
    def kind(self) -> MessageKind:
        return MessageKind.CHANGE_COLOR


Message = Quit | Echo | Move | ChangeColor


@dataclass
class State:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.change_color((red, green, blue))
            case Echo(text):
                self.echo(text)
            case Move(point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"not a message: {message!r}")
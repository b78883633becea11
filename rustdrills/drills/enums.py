"""Message variants and a state machine that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field

_BYTE = range(256)


def _check_bytes(*values: int) -> None:
    for value in values:
        if value not in _BYTE:
            raise ValueError(f"{value} does not fit in a byte")


@dataclass(frozen=True)
class Point:
    """A position on a byte-sized grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_bytes(self.x, self.y)


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_bytes(self.red, self.green, self.blue)


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position and quit flag updated by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    should_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        _check_bytes(*color)
        self.color = tuple(color)

    def quit(self) -> None:
        self.should_quit = True

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
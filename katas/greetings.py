"""Bots that greet and shapes that know their area."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Bot(Protocol):
    def greeting(self) -> str: ...


class Shape(Protocol):
    label: str

    def area(self) -> float: ...


class EnglishBot:
    """Greets in English."""

    def greeting(self) -> str:
        return "Hi there!"


class SpanishBot:
    """Greets in Spanish."""

    def greeting(self) -> str:
        return "Hola!"


@dataclass
class Triangle:
    height: float
    base: float
    label = "Area of triangle is : "

    def area(self) -> float:
        return 0.5 * self.base * self.height


@dataclass
class Square:
    side_length: float
    label = "Area of Square is : "

    def area(self) -> float:
        return self.side_length * self.side_length


def _format_number(value: float) -> str:
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def print_greeting(bot: Bot) -> None:
    """Print the bot's greeting."""
    print(bot.greeting())


def print_area(shape: Shape) -> None:
    """Print a shape's label followed by its area."""
    print(f"{shape.label}{_format_number(shape.area())}")


def main(argv=None) -> int:
    """Greet in both languages and print two areas."""
    print_greeting(EnglishBot())
    print_greeting(SpanishBot())
    print_area(Triangle(height=10, base=10))
    print_area(Square(side_length=10))
    return 0
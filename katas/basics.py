"""Small exercises with maps, parity and structured records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple


@dataclass
class ContactInfo:
    city: str = ""
    zipcode: str = ""


@dataclass
class Person:
    first_name: str = ""
    last_name: str = ""
    contact: ContactInfo = field(default_factory=ContactInfo)

    def update_name(self, new_first_name: str) -> None:
        """Replace the person's first name."""
        self.first_name = new_first_name


def modify_map(cars: Mapping[str, str]) -> Dict[str, str]:
    """Return a copy of ``cars`` with the BMW model upgraded."""
    return {make: ("M4" if make == "bmw" else model) for make, model in cars.items()}


def print_map(cars: Mapping[str, str]) -> None:
    """Print each make and model on its own line."""
    for make, model in cars.items():
        print(make, model)


def classify_parity(numbers: Iterable[int]) -> List[Tuple[int, str]]:
    """Pair each number with ``"even"`` or ``"odd"``."""
    return [(number, "even" if number % 2 == 0 else "odd") for number in numbers]


def main(argv=None) -> int:
    """Run the map, parity and person exercises."""
    cars = {"bmw": "M3", "audi": "a6", "benz": "amg"}
    print_map(modify_map(cars))

    for number, parity in classify_parity(range(1, 10)):
        print(number, f" is {parity}")

    govind = Person(
        first_name="Govind",
        last_name="L",
        contact=ContactInfo(city="Chennai", zipcode="33"),
    )
    print(govind.first_name)
    return 0
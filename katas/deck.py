"""A small deck of playing cards that can be dealt, shuffled and stored."""

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

SUITS = ("Hearts", "Diamonds", "Spades", "Clubs")
VALUES = ("Ace", "Two", "Three", "Four")
SEPARATOR = ","

PathLike = Union[str, "os.PathLike[str]"]


class Deck(list):
    """An ordered collection of card names."""

    def show(self) -> None:
        """Print every card preceded by its position."""
        for index, card in enumerate(self):
            print(index, card)

    def to_string(self) -> str:
        """Join the cards into one comma separated string."""
        return SEPARATOR.join(self)

    def save_to_file(self, filename: PathLike) -> None:
        """Write the deck to ``filename`` as comma separated text."""
        Path(filename).write_text(self.to_string(), encoding="utf-8")

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the cards in place by swapping each with a random earlier slot."""
        if len(self) == 1:
            raise ValueError("cannot shuffle a deck of a single card")
        rng = rng if rng is not None else random.Random()
        last = len(self) - 1
        for position in range(len(self)):
            other = rng.randrange(last)
            self[position], self[other] = self[other], self[position]


def new_deck() -> Deck:
    """Build the full deck, suit by suit."""
    return Deck(f"{value} of {suit}" for suit in SUITS for value in VALUES)


def deal(deck: Iterable[str], hand_size: int) -> Tuple[Deck, Deck]:
    """Split the deck into a hand of ``hand_size`` cards and the remainder."""
    cards = list(deck)
    if not 0 <= hand_size <= len(cards):
        raise ValueError(
            f"hand size {hand_size} out of range for a deck of {len(cards)} cards"
        )
    return Deck(cards[:hand_size]), Deck(cards[hand_size:])


def new_deck_from_file(filename: PathLike) -> Deck:
    """Load a deck previously written with :meth:`Deck.save_to_file`."""
    text = Path(filename).read_text(encoding="utf-8")
    return Deck(text.split(SEPARATOR))


def greeting_bytes(text: str) -> list:
    """Return the UTF-8 byte values of ``text``."""
    return list(text.encode("utf-8"))


def main(argv=None) -> int:
    """Shuffle a fresh deck and print it."""
    deck = new_deck()
    deck.shuffle()
    deck.show()
    return 0
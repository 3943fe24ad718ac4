from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import IO, Iterator, List, Optional, Sequence, Tuple, Union

from .display import print_deck


logger = logging.getLogger(__name__)

SUITS: Sequence[str] = ("Spades", "Diamonds", "Hearts", "Clubs")
VALUES: Sequence[str] = ("Ace", "Two", "Three", "Four")


class InvalidHandSizeError(ValueError):
    """Raised when a hand size falls outside ``[0, len(deck)]``."""

    def __init__(self, hand_size: object, deck_size: int) -> None:
        self.hand_size = hand_size
        self.deck_size = deck_size
        super().__init__(
            f"invalid hand size {hand_size!r}: must be an integer between 0 and {deck_size}"
        )


def card_label(value: str, suit: str) -> str:
    return f"{value} of {suit}"


def new_card() -> str:
    return card_label("Five", "Diamonds")


def build_deck() -> List[str]:
    return [card_label(value, suit) for suit in SUITS for value in VALUES]


@dataclass
class Deck:
    cards: List[str] = field(default_factory=build_deck)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[str]:
        return iter(self.cards)

    def __getitem__(self, index: Union[int, slice]) -> Union[str, "Deck"]:
        if isinstance(index, slice):
            return Deck(cards=self.cards[index])
        return self.cards[index]

    def with_card(self, label: str) -> "Deck":
        return Deck(cards=[*self.cards, label])

    def deal(self, hand_size: int) -> Tuple["Deck", "Deck"]:
        return deal(self, hand_size)

    def print(self, stream: Optional[IO[str]] = None) -> None:
        print_deck(self, stream=stream)


def new_deck() -> Deck:
    return Deck()


def deal(deck: Deck, hand_size: int) -> Tuple[Deck, Deck]:
    """Split ``deck`` into the first ``hand_size`` cards and the rest.

    Both returned decks own fresh lists, so neither aliases ``deck``.
    """
    size = len(deck)
    if isinstance(hand_size, bool) or not isinstance(hand_size, int):
        logger.warning("Rejected non-integer hand size %r", hand_size)
        raise InvalidHandSizeError(hand_size, size)
    if hand_size < 0 or hand_size > size:
        logger.warning("Rejected hand size %d for deck of %d", hand_size, size)
        raise InvalidHandSizeError(hand_size, size)
    hand = Deck(cards=list(deck.cards[:hand_size]))
    remainder = Deck(cards=list(deck.cards[hand_size:]))
    logger.debug("Dealt hand=%d remainder=%d", len(hand), len(remainder))
    return hand, remainder

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Sequence

RANKS = "23456789TJQKA"
SUITS = "shdc"

_RANK_NAMES = {10: "10", 11: "Jack", 12: "Queen", 13: "King", 14: "Ace"}
_SUIT_SYMBOLS = {"s": "♠", "h": "♥", "d": "♦", "c": "♣"}


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def from_char(cls, char: str) -> Optional["Rank"]:
        idx = RANKS.find(char) if len(char) == 1 else -1
        if idx < 0:
            return None
        return cls(idx + 2)

    @property
    def char(self) -> str:
        return RANKS[self.value - 2]

    @property
    def display(self) -> str:
        return _RANK_NAMES.get(self.value, str(self.value))

    @property
    def plural(self) -> str:
        return f"{self.display}s"


class Suit(str, Enum):
    SPADES = "s"
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"

    @classmethod
    def from_char(cls, char: str) -> Optional["Suit"]:
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self.value]


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank.char}{self.suit.value}"

    @property
    def pretty(self) -> str:
        return f"{self.rank.char}{self.suit.symbol}"

    def __str__(self) -> str:
        return self.label


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = [Card(rank, suit) for rank in Rank for suit in Suit]
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    """Strict parser: raises ValueError for anything but a valid two-character token."""
    if not isinstance(label, str) or len(label) != 2:
        raise ValueError(f"Invalid card label: {label!r}")
    rank = Rank.from_char(label[0])
    if rank is None:
        raise ValueError(f"Invalid rank: {label[0]}")
    suit = Suit.from_char(label[1])
    if suit is None:
        raise ValueError(f"Invalid suit: {label[1]}")
    return Card(rank, suit)


def parse_card(label: str) -> Optional[Card]:
    """Return the card for ``label`` or None when the token is malformed.

    Parsing is case-sensitive: ranks are upper case (``T`` for ten) and suits
    lower case, so ``"as"`` and ``"AS"`` are both rejected.
    """
    try:
        return parse_label(label)
    except ValueError:
        return None


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple

from .cards import Card, Rank


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


# Downstream analytics match on these exact strings.
CATEGORY_LABELS: Dict[HandCategory, str] = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}


def category_from_label(text: str) -> Optional[HandCategory]:
    """Find the hand category named in a free-text label such as "Full House, Kings over 9s".

    Matching is case-insensitive and the longest contained label wins, so
    "Royal Flush" never reads as a plain "Flush".
    """
    if not isinstance(text, str):
        return None
    lowered = text.casefold()
    found: Optional[HandCategory] = None
    for category, label in CATEGORY_LABELS.items():
        if label.casefold() in lowered:
            if found is None or len(label) > len(found.label):
                found = category
    return found


@dataclass(frozen=True, order=True)
class EvaluatedHand:
    # Ordering and equality use category then kickers; cards only record which
    # five cards made the hand.
    category: HandCategory
    kickers: Tuple[Rank, ...]
    cards: Tuple[Card, ...] = field(default=(), compare=False)

    @property
    def label(self) -> str:
        return self.category.label

    @property
    def score(self) -> Tuple[int, List[int]]:
        return (int(self.category), [int(rank) for rank in self.kickers])

    @property
    def description(self) -> str:
        category = self.category
        top = self.kickers[0]
        if category == HandCategory.ROYAL_FLUSH:
            return category.label
        if category == HandCategory.HIGH_CARD:
            return f"High Card {top.display}"
        if category == HandCategory.PAIR:
            return f"Pair of {top.plural}"
        if category == HandCategory.TWO_PAIR:
            return f"Two Pair, {top.plural} and {self.kickers[1].plural}"
        if category == HandCategory.THREE_OF_A_KIND:
            return f"Three of a Kind, {top.plural}"
        if category == HandCategory.FULL_HOUSE:
            return f"Full House, {top.plural} over {self.kickers[1].plural}"
        if category == HandCategory.FOUR_OF_A_KIND:
            return f"Four of a Kind, {top.plural}"
        # Straight, flush and straight flush read by their high card.
        return f"{category.label}, {top.display} High"

    def as_payload(self) -> Dict[str, Any]:
        return {
            "category": self.category.name,
            "weight": int(self.category),
            "label": self.label,
            "description": self.description,
            "kickers": [rank.char for rank in self.kickers],
            "cards": [card.label for card in self.cards],
        }

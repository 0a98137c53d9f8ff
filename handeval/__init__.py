"""Texas Hold'em hand evaluation: card parsing, five-card classification and best-hand selection."""

from .cards import Card, RANKS, SUITS, Rank, Suit, build_deck, deal, parse_card, parse_cards, parse_label
from .evaluator import (
    MAX_CARDS,
    MIN_CARDS,
    classify_five,
    compare_hands,
    evaluate_best,
    evaluate_cards,
    evaluate_labels,
    showdown_winners,
)
from .models import CATEGORY_LABELS, EvaluatedHand, HandCategory, category_from_label

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "Rank",
    "Suit",
    "build_deck",
    "deal",
    "parse_card",
    "parse_cards",
    "parse_label",
    "MAX_CARDS",
    "MIN_CARDS",
    "classify_five",
    "compare_hands",
    "evaluate_best",
    "evaluate_cards",
    "evaluate_labels",
    "showdown_winners",
    "CATEGORY_LABELS",
    "EvaluatedHand",
    "HandCategory",
    "category_from_label",
]

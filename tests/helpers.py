from __future__ import annotations

from typing import Iterable, List, Tuple

from handeval.cards import Card, Rank, build_deck, deal, parse_cards
from handeval.evaluator import classify_five, evaluate_labels
from handeval.models import EvaluatedHand


def five(labels: Iterable[str]) -> EvaluatedHand:
    """Classify exactly five cards given in notation."""
    return classify_five(parse_cards(list(labels)))


def best(hole: List[str], board: List[str]) -> EvaluatedHand:
    hand = evaluate_labels(hole, board)
    assert hand is not None, f"hole={hole} board={board}"
    return hand


def ranks(chars: str) -> Tuple[Rank, ...]:
    """Kicker tuple from rank characters, e.g. ranks("QJ974")."""
    return tuple(Rank(RANK_VALUES[char]) for char in chars)


RANK_VALUES = {char: idx for idx, char in enumerate("23456789TJQKA", start=2)}


def seeded_deals(count: int, cards_per_deal: int = 7, seed: int = 777) -> List[List[Card]]:
    """Deterministic batches of distinct cards, one fresh deck per deal."""
    deals: List[List[Card]] = []
    for offset in range(count):
        deck = build_deck(seed=seed + offset)
        deals.append(deal(deck, cards_per_deal))
    return deals

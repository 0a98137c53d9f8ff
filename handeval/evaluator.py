from __future__ import annotations

import itertools
import logging
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, TypeVar

from .cards import Card, Rank, parse_card
from .models import EvaluatedHand, HandCategory

LOGGER = logging.getLogger("handeval")

MIN_CARDS = 5
MAX_CARDS = 7

WHEEL = frozenset({Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE})

K = TypeVar("K", bound=Hashable)

# Everything here is a pure function of its arguments; callers may evaluate
# from any number of threads or tasks without locking.


def evaluate_best(hole_cards: Sequence[Card], board_cards: Sequence[Card]) -> Optional[EvaluatedHand]:
    """Best five-card hand from hole + board, or None outside 5..7 total cards.

    Only the union matters: moving a card between hole and board never
    changes the result.
    """
    return evaluate_cards(list(hole_cards) + list(board_cards))


def evaluate_cards(cards: Sequence[Card]) -> Optional[EvaluatedHand]:
    if not MIN_CARDS <= len(cards) <= MAX_CARDS:
        LOGGER.debug("Cannot evaluate %d cards (need %d-%d)", len(cards), MIN_CARDS, MAX_CARDS)
        return None

    best: Optional[EvaluatedHand] = None
    for combo in itertools.combinations(cards, 5):
        hand = classify_five(combo)
        if best is None or hand > best:
            best = hand
    assert best is not None
    LOGGER.debug("Best of %d cards: %s (%s)", len(cards), best.label, " ".join(c.label for c in best.cards))
    return best


def evaluate_labels(hole_labels: Sequence[str], board_labels: Sequence[str]) -> Optional[EvaluatedHand]:
    """Boundary entry point for card notation; any malformed token yields None."""
    cards: List[Card] = []
    for label in itertools.chain(hole_labels, board_labels):
        card = parse_card(label)
        if card is None:
            LOGGER.debug("Rejecting malformed card token %r", label)
            return None
        cards.append(card)
    return evaluate_cards(cards)


def classify_five(cards: Iterable[Card]) -> EvaluatedHand:
    ordered = tuple(sorted(cards, key=lambda card: card.rank, reverse=True))
    if len(ordered) != 5:
        raise ValueError(f"Expected 5 cards, got {len(ordered)}")
    ranks = [card.rank for card in ordered]

    is_flush = len({card.suit for card in ordered}) == 1
    straight_high = _straight_high(ranks)

    counts: Dict[Rank, int] = {}
    for rank in ranks:
        counts.setdefault(rank, 0)
        counts[rank] += 1

    # Biggest group first, higher rank breaking ties between equal-sized groups.
    groups = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    top_rank, top_count = groups[0]
    second_count = groups[1][1] if len(groups) > 1 else 0

    def hand(category: HandCategory, kickers: Iterable[Rank]) -> EvaluatedHand:
        return EvaluatedHand(category, tuple(kickers), ordered)

    if straight_high is not None and is_flush:
        if straight_high == Rank.ACE:
            return hand(HandCategory.ROYAL_FLUSH, [straight_high])
        return hand(HandCategory.STRAIGHT_FLUSH, [straight_high])
    if top_count == 4:
        kicker = max(rank for rank in ranks if rank != top_rank)
        return hand(HandCategory.FOUR_OF_A_KIND, [top_rank, kicker])
    if top_count == 3 and second_count == 2:
        return hand(HandCategory.FULL_HOUSE, [top_rank, groups[1][0]])
    if is_flush:
        return hand(HandCategory.FLUSH, ranks)
    if straight_high is not None:
        return hand(HandCategory.STRAIGHT, [straight_high])
    if top_count == 3:
        return hand(HandCategory.THREE_OF_A_KIND, [top_rank] + [rank for rank in ranks if rank != top_rank])
    if top_count == 2 and second_count == 2:
        pair_high, pair_low = top_rank, groups[1][0]
        kicker = max(rank for rank in ranks if rank not in (pair_high, pair_low))
        return hand(HandCategory.TWO_PAIR, [pair_high, pair_low, kicker])
    if top_count == 2:
        return hand(HandCategory.PAIR, [top_rank] + [rank for rank in ranks if rank != top_rank])
    return hand(HandCategory.HIGH_CARD, ranks)


def _straight_high(ranks: Sequence[Rank]) -> Optional[Rank]:
    """High card of a straight over ranks sorted descending, or None.

    The wheel (A-2-3-4-5) plays five high so it ranks below a six-high straight.
    """
    if set(ranks) == WHEEL:
        return Rank.FIVE
    for higher, lower in zip(ranks, ranks[1:]):
        if higher - lower != 1:
            return None
    return ranks[0]


def compare_hands(first: EvaluatedHand, second: EvaluatedHand) -> int:
    if first > second:
        return 1
    if first < second:
        return -1
    return 0


def showdown_winners(hands: Mapping[K, Optional[EvaluatedHand]]) -> List[K]:
    """Keys holding the strongest hand; several on a split. Missing hands never win."""
    scored = {key: hand for key, hand in hands.items() if hand is not None}
    if not scored:
        return []
    best = max(scored.values())
    return [key for key, hand in scored.items() if hand == best]

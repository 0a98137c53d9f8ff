from concurrent.futures import ThreadPoolExecutor

from handeval.evaluator import evaluate_best, evaluate_cards
from handeval.models import CATEGORY_LABELS, HandCategory

from .helpers import seeded_deals


def test_evaluator_handles_thousand_seven_card_hands():
    seen = set()
    for cards in seeded_deals(1_000, seed=1_000):
        hand = evaluate_best(cards[:2], cards[2:])
        assert hand is not None
        assert hand.label in CATEGORY_LABELS.values()
        assert len(hand.cards) == 5
        assert set(hand.cards) <= set(cards)
        seen.add(hand.category)
    # A thousand random boards always include the common categories.
    assert {HandCategory.HIGH_CARD, HandCategory.PAIR, HandCategory.TWO_PAIR} <= seen


def test_concurrent_evaluation_matches_serial():
    deals = seeded_deals(400, seed=5_000)
    serial = [evaluate_cards(cards) for cards in deals]
    with ThreadPoolExecutor(max_workers=8) as pool:
        parallel = list(pool.map(evaluate_cards, deals))
    assert parallel == serial

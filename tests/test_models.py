import pytest

from handeval.models import CATEGORY_LABELS, EvaluatedHand, HandCategory, category_from_label

from .helpers import best, five, ranks


def test_category_weights_are_fixed():
    assert [int(category) for category in HandCategory] == list(range(10))
    assert HandCategory.HIGH_CARD < HandCategory.PAIR < HandCategory.ROYAL_FLUSH


def test_category_labels_match_downstream_names():
    assert list(CATEGORY_LABELS.values()) == [
        "High Card",
        "Pair",
        "Two Pair",
        "Three of a Kind",
        "Straight",
        "Flush",
        "Full House",
        "Four of a Kind",
        "Straight Flush",
        "Royal Flush",
    ]
    assert HandCategory.FULL_HOUSE.label == "Full House"


@pytest.mark.parametrize(
    "labels, description",
    [
        (["Qc", "Jd", "9s", "7h", "4c"], "High Card Queen"),
        (["As", "Ad", "Kc", "Qs", "9h"], "Pair of Aces"),
        (["Kh", "Kd", "9s", "9c", "2h"], "Two Pair, Kings and 9s"),
        (["7h", "7d", "7s", "Ac", "2h"], "Three of a Kind, 7s"),
        (["Ah", "2d", "3c", "4s", "5h"], "Straight, 5 High"),
        (["Th", "9d", "8c", "7s", "6h"], "Straight, 10 High"),
        (["Ah", "Jh", "9h", "6h", "2h"], "Flush, Ace High"),
        (["2h", "2d", "2s", "5c", "5h"], "Full House, 2s over 5s"),
        (["7c", "7d", "7h", "7s", "4h"], "Four of a Kind, 7s"),
        (["9h", "8h", "7h", "6h", "5h"], "Straight Flush, 9 High"),
        (["Ah", "Kh", "Qh", "Jh", "Th"], "Royal Flush"),
    ],
)
def test_description_reads_like_a_dealer(labels, description):
    assert five(labels).description == description


def test_score_is_plain_comparable_tuple():
    hand = best(["2h", "2d"], ["2s", "5c", "5h", "9d", "Kc"])
    assert hand.score == (6, [2, 5])
    weaker = best(["Qc", "2d"], ["7h", "9s", "4c", "Jd", "3h"])
    assert weaker.score == (0, [12, 11, 9, 7, 4])
    assert hand.score > weaker.score


def test_payload_is_json_ready():
    hand = best(["As", "Ks"], ["Qs", "Js", "Ts", "2c", "3d"])
    assert hand.as_payload() == {
        "category": "ROYAL_FLUSH",
        "weight": 9,
        "label": "Royal Flush",
        "description": "Royal Flush",
        "kickers": ["A"],
        "cards": ["As", "Ks", "Qs", "Js", "Ts"],
    }


def test_cards_do_not_affect_equality_or_order():
    plain = EvaluatedHand(HandCategory.STRAIGHT, ranks("9"))
    dealt = five(["9h", "8d", "7c", "6s", "5h"])
    assert plain == dealt
    assert not plain < dealt
    assert plain.cards == ()


def test_evaluated_hand_is_immutable():
    hand = five(["9h", "8d", "7c", "6s", "5h"])
    with pytest.raises(AttributeError):
        hand.category = HandCategory.FLUSH  # type: ignore[misc]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Royal Flush", HandCategory.ROYAL_FLUSH),
        ("straight flush, 9 high", HandCategory.STRAIGHT_FLUSH),
        ("Flush, Ace High", HandCategory.FLUSH),
        ("Full House, Kings over 9s", HandCategory.FULL_HOUSE),
        ("Two Pair, Kings and 9s", HandCategory.TWO_PAIR),
        ("Pair of Aces", HandCategory.PAIR),
        ("Four of a Kind, 7s", HandCategory.FOUR_OF_A_KIND),
        ("High Card Queen", HandCategory.HIGH_CARD),
        ("nothing special", None),
        ("", None),
    ],
)
def test_category_from_label(text, expected):
    assert category_from_label(text) == expected


def test_category_from_label_round_trips_descriptions():
    for labels in (["Ah", "Kh", "Qh", "Jh", "Th"], ["Kh", "Kd", "9s", "9c", "2h"], ["Ah", "2d", "3c", "4s", "5h"]):
        hand = five(labels)
        assert category_from_label(hand.description) == hand.category
        assert category_from_label(hand.label) == hand.category

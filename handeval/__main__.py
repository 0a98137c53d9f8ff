import argparse
import json
import logging
import sys
from typing import List, Optional

from .cards import parse_card
from .evaluator import MAX_CARDS, MIN_CARDS, evaluate_best


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate the best Texas Hold'em hand from hole and board cards")
    parser.add_argument("--hole", nargs="+", required=True, help="Hole cards, e.g. As Kd")
    parser.add_argument("--board", nargs="*", default=[], help="Community cards, e.g. Qs Js Ts")
    parser.add_argument("--json", action="store_true", help="Print the evaluated hand as JSON")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, etc.).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    hole = [parse_card(label) for label in args.hole]
    board = [parse_card(label) for label in args.board]
    bad = [label for label, card in zip(args.hole + args.board, hole + board) if card is None]
    if bad:
        print(f"Invalid card(s): {', '.join(bad)}", file=sys.stderr)
        return 2

    hand = evaluate_best(hole, board)
    if hand is None:
        print(f"Need {MIN_CARDS}-{MAX_CARDS} cards in total, got {len(hole) + len(board)}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(hand.as_payload()))
    else:
        print(f"{hand.description} [{' '.join(card.pretty for card in hand.cards)}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())

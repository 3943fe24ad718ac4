from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError

from .cards import InvalidHandSizeError, deal, new_deck
from .config import AppConfig
from .display import print_deck
from .logging_setup import configure_logging
from .schemas import DealRequest, DealResult, format_validation_error


logger = logging.getLogger(__name__)

RULE = "-----------------"


def build_parser(default_hand_size: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carddeck", description="Build a deck, print it, and deal a hand."
    )
    parser.add_argument(
        "--hand-size",
        type=int,
        default=default_hand_size,
        help=f"Number of cards to deal (default: {default_hand_size})",
    )
    parser.add_argument("--json", action="store_true", help="Print the deal as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config = AppConfig.from_env()
    configure_logging(config.log_level)
    parser = build_parser(config.hand_size)
    args = parser.parse_args(argv)

    try:
        request = DealRequest(hand_size=args.hand_size)
    except ValidationError as exc:
        error = format_validation_error(exc)
        parser.error("; ".join(error.details or [error.message]))

    cards = new_deck()
    try:
        hand, remainder = deal(cards, request.hand_size)
    except InvalidHandSizeError as exc:
        parser.error(str(exc))
    logger.info("Dealt %d of %d cards", len(hand), len(cards))

    if args.json:
        result = DealResult.from_deal(hand, remainder)
        print(result.model_dump_json(indent=2))
        return 0

    print_deck(cards)
    print(RULE)
    print_deck(hand)
    print(RULE)
    print_deck(remainder)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import sys
from typing import IO, Iterable, List, Optional


def format_deck(cards: Iterable[str]) -> List[str]:
    return [f"{index} {card}" for index, card in enumerate(cards)]


def print_deck(cards: Iterable[str], stream: Optional[IO[str]] = None) -> None:
    """Write each card with its zero-based position, one per line."""
    if stream is None:
        stream = sys.stdout
    for line in format_deck(cards):
        stream.write(line + "\n")

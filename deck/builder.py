"""Deck creation entry point."""

from __future__ import annotations

from typing import List

from .cards import MAX_RANK, MIN_RANK, STANDARD_SUITS, Card, Rank
from .logging_utils import get_logger
from .transforms import Transform

logger = get_logger(__name__)


def standard_cards() -> List[Card]:
    """Return the ordered 52-card deck: suit-major, Ace to King within a suit."""
    return [
        Card(suit, Rank(value))
        for suit in STANDARD_SUITS
        for value in range(MIN_RANK, MAX_RANK + 1)
    ]


def new(*transforms: Transform) -> List[Card]:
    """Build the standard deck and apply ``transforms`` left to right."""
    cards = standard_cards()
    for transform in transforms:
        cards = list(transform(cards))
    logger.debug("Built deck of %d cards with %d transforms", len(cards), len(transforms))
    return cards


build_deck = new

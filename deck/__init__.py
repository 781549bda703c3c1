"""Standard playing-card deck built from composable transformations."""

from .builder import build_deck, new, standard_cards
from .cards import (
    Card,
    CardParseError,
    Rank,
    Suit,
    absolute_rank,
    deserialize_card,
    parse_card,
    serialize_card,
)
from .logging_utils import setup_logging
from .options import DeckOptions, load_options
from .transforms import (
    Duplicate,
    FilterOut,
    InvalidTransform,
    Jokers,
    Shuffle,
    SortBy,
    Transform,
    decks,
    default_sort,
    filter_out,
    jokers,
    less,
    shuffle,
    sort,
)

__all__ = [
    "Card",
    "CardParseError",
    "DeckOptions",
    "Duplicate",
    "FilterOut",
    "InvalidTransform",
    "Jokers",
    "Rank",
    "Shuffle",
    "SortBy",
    "Suit",
    "Transform",
    "absolute_rank",
    "build_deck",
    "decks",
    "default_sort",
    "deserialize_card",
    "filter_out",
    "jokers",
    "less",
    "load_options",
    "new",
    "parse_card",
    "serialize_card",
    "setup_logging",
    "shuffle",
    "sort",
    "standard_cards",
]

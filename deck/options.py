"""Validation schema for deck build options."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, validator

from .builder import new
from .cards import RANK_NAMES, STANDARD_SUITS, SUIT_NAMES, Card, Rank, Suit
from .logging_utils import get_logger
from .transforms import Duplicate, FilterOut, Jokers, Shuffle, Transform, default_sort

logger = get_logger(__name__)

_RANK_LOOKUP = {name.lower(): rank for rank, name in RANK_NAMES.items()}
_SUIT_LOOKUP = {SUIT_NAMES[suit].lower(): suit for suit in STANDARD_SUITS}


def _validate_rank(value: str) -> str:
    normalized = value.strip().lower()
    if normalized not in _RANK_LOOKUP:
        raise ValueError(f"Unknown rank: {value!r}")
    return normalized


def _validate_suit(value: str) -> str:
    normalized = value.strip().lower()
    # Accept the plural form used when cards are rendered.
    if normalized not in _SUIT_LOOKUP and normalized.endswith("s"):
        normalized = normalized[:-1]
    if normalized not in _SUIT_LOOKUP:
        raise ValueError(f"Unknown suit: {value!r}")
    return normalized


class DeckOptions(BaseModel):
    decks: int = Field(1, ge=0, description="Number of standard decks laid out one after another.")
    jokers: int = Field(0, ge=0, description="Jokers appended after the standard cards.")
    exclude_ranks: List[str] = Field(default_factory=list, description="Ranks removed from every suit.")
    exclude_suits: List[str] = Field(default_factory=list, description="Suits removed entirely.")
    sort: bool = Field(False, description="Apply the default suit-major ordering.")
    shuffle: bool = Field(False, description="Shuffle the finished deck.")
    seed: Optional[int] = Field(None, description="Seed for a reproducible shuffle.")

    @validator("exclude_ranks", each_item=True)
    def validate_ranks(cls, value: str) -> str:
        return _validate_rank(value)

    @validator("exclude_suits", each_item=True)
    def validate_suits(cls, value: str) -> str:
        return _validate_suit(value)

    def excluded(self, card: Card) -> bool:
        if card.is_joker:
            return False
        return card.suit in self._excluded_suits() or card.rank in self._excluded_ranks()

    def _excluded_ranks(self) -> set[Rank]:
        return {_RANK_LOOKUP[name] for name in self.exclude_ranks}

    def _excluded_suits(self) -> set[Suit]:
        return {_SUIT_LOOKUP[name] for name in self.exclude_suits}

    def transforms(self) -> List[Transform]:
        """Compile the options into a pipeline: filter, decks, jokers, sort, shuffle."""
        pipeline: List[Transform] = []
        if self.exclude_ranks or self.exclude_suits:
            pipeline.append(FilterOut(self.excluded))
        if self.decks != 1:
            pipeline.append(Duplicate(self.decks))
        if self.jokers:
            pipeline.append(Jokers(self.jokers))
        if self.sort:
            pipeline.append(default_sort)
        if self.shuffle:
            pipeline.append(Shuffle(seed=self.seed))
        return pipeline

    def build(self) -> List[Card]:
        pipeline = self.transforms()
        logger.debug("Building deck from options %s", self)
        return new(*pipeline)


def load_options(payload: Mapping[str, Any]) -> DeckOptions:
    """Validate a plain mapping, e.g. parsed JSON, into ``DeckOptions``."""
    return DeckOptions(**payload)

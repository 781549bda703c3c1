"""Composable deck transformations.

Every transformation maps a sequence of cards to a new list of cards and never
mutates its input. The builder folds any ordered mix of ``Transform``
instances and plain functions with the same signature.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from random import Random
from typing import Callable, List, Optional, Protocol, Sequence, runtime_checkable

from .cards import Card, absolute_rank

Less = Callable[[int, int], bool]
LessFactory = Callable[[Sequence[Card]], Less]
Predicate = Callable[[Card], bool]


class InvalidTransform(ValueError):
    """Raised when a transformation is configured with a negative count."""


@runtime_checkable
class Transform(Protocol):
    """Anything that maps a deck to a new deck."""

    def __call__(self, cards: Sequence[Card]) -> List[Card]: ...


def less(cards: Sequence[Card]) -> Less:
    """Return a comparator ordering positions of ``cards`` by absolute rank."""

    def _less(i: int, j: int) -> bool:
        return absolute_rank(cards[i]) < absolute_rank(cards[j])

    return _less


@dataclass(frozen=True)
class SortBy:
    """Order cards with a positional comparator derived from the sequence."""

    less_factory: LessFactory

    def __call__(self, cards: Sequence[Card]) -> List[Card]:
        snapshot = list(cards)
        is_less = self.less_factory(snapshot)

        def compare(i: int, j: int) -> int:
            if is_less(i, j):
                return -1
            if is_less(j, i):
                return 1
            return 0

        order = sorted(range(len(snapshot)), key=cmp_to_key(compare))
        return [snapshot[i] for i in order]


def sort(less_factory: LessFactory) -> SortBy:
    return SortBy(less_factory)


def default_sort(cards: Sequence[Card]) -> List[Card]:
    """Sort suit-major, rank-minor: Ace of Spades first, King of Hearts last."""
    return sorted(cards, key=absolute_rank)


@dataclass(frozen=True)
class Shuffle:
    """Random permutation of the deck.

    Without ``rng`` or ``seed`` every call draws from a freshly seeded
    generator. A ``seed`` makes every call produce the same permutation; an
    explicit ``rng`` is advanced by each call.
    """

    rng: Optional[Random] = None
    seed: Optional[int] = None

    def __call__(self, cards: Sequence[Card]) -> List[Card]:
        rng = self.rng if self.rng is not None else Random(self.seed)
        shuffled = list(cards)
        rng.shuffle(shuffled)
        return shuffled


def shuffle(cards: Sequence[Card], rng: Optional[Random] = None) -> List[Card]:
    return Shuffle(rng=rng)(cards)


@dataclass(frozen=True)
class FilterOut:
    """Drop every card matching ``predicate``, keeping the others in order."""

    predicate: Predicate

    def __call__(self, cards: Sequence[Card]) -> List[Card]:
        return [card for card in cards if not self.predicate(card)]


def filter_out(predicate: Predicate) -> FilterOut:
    return FilterOut(predicate)


@dataclass(frozen=True)
class Jokers:
    """Append ``count`` jokers tagged ``0..count-1``."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise InvalidTransform(f"Joker count must be non-negative, got {self.count}.")

    def __call__(self, cards: Sequence[Card]) -> List[Card]:
        return list(cards) + [Card.joker(tag) for tag in range(self.count)]


def jokers(count: int) -> Jokers:
    return Jokers(count)


@dataclass(frozen=True)
class Duplicate:
    """Lay ``copies`` copies of the deck out one after another."""

    copies: int

    def __post_init__(self) -> None:
        if self.copies < 0:
            raise InvalidTransform(f"Deck count must be non-negative, got {self.copies}.")

    def __call__(self, cards: Sequence[Card]) -> List[Card]:
        return list(cards) * self.copies


def decks(copies: int) -> Duplicate:
    return Duplicate(copies)

"""Card-related data structures and helpers for the standard deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping, Union


class Suit(IntEnum):
    SPADE = 0
    DIAMOND = 1
    CLUB = 2
    HEART = 3
    JOKER = 4  # special case

    def __str__(self) -> str:
        return SUIT_NAMES[self]


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return RANK_NAMES[self]


SUIT_NAMES: dict[Suit, str] = {
    Suit.SPADE: "Spade",
    Suit.DIAMOND: "Diamond",
    Suit.CLUB: "Club",
    Suit.HEART: "Heart",
    Suit.JOKER: "Joker",
}

RANK_NAMES: dict[Rank, str] = {
    Rank.ACE: "Ace",
    Rank.TWO: "Two",
    Rank.THREE: "Three",
    Rank.FOUR: "Four",
    Rank.FIVE: "Five",
    Rank.SIX: "Six",
    Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight",
    Rank.NINE: "Nine",
    Rank.TEN: "Ten",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
}

# Suit order for the canonical deck; jokers are never part of it.
STANDARD_SUITS: tuple[Suit, ...] = (Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART)

MIN_RANK = Rank.ACE
MAX_RANK = Rank.KING

_SUITS_BY_NAME: dict[str, Suit] = {name.lower(): suit for suit, name in SUIT_NAMES.items()}
_RANKS_BY_NAME: dict[str, Rank] = {name.lower(): rank for rank, name in RANK_NAMES.items()}


class CardParseError(ValueError):
    """Raised when text or a mapping does not describe a card."""


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card.

    Jokers keep a plain integer tag in ``rank`` so that several of them can
    be told apart; the tag has no ordering meaning.
    """

    suit: Suit
    rank: Union[Rank, int]

    @classmethod
    def joker(cls, tag: int = 0) -> "Card":
        return cls(Suit.JOKER, tag)

    @property
    def is_joker(self) -> bool:
        return self.suit is Suit.JOKER

    def __str__(self) -> str:
        if self.is_joker:
            return SUIT_NAMES[Suit.JOKER]
        return f"{RANK_NAMES[Rank(self.rank)]} of {SUIT_NAMES[self.suit]}s"


def absolute_rank(card: Card) -> int:
    """Return a key that totally orders a standard deck, suit-major."""
    return int(card.suit) * int(MAX_RANK) + int(card.rank)


def parse_card(text: str) -> Card:
    """Parse the ``"Ace of Hearts"`` form produced by ``str(card)``.

    ``"Joker"`` parses to ``Card.joker(0)``: the rendered form does not carry
    the joker's tag.
    """
    normalized = " ".join(text.split()).lower()
    if normalized == SUIT_NAMES[Suit.JOKER].lower():
        return Card.joker()

    rank_name, sep, suit_name = normalized.partition(" of ")
    if not sep or not suit_name.endswith("s"):
        raise CardParseError(f"Unrecognized card: {text!r}")
    rank = _RANKS_BY_NAME.get(rank_name)
    suit = _SUITS_BY_NAME.get(suit_name[:-1])
    if rank is None or suit is None or suit is Suit.JOKER:
        raise CardParseError(f"Unrecognized card: {text!r}")
    return Card(suit, rank)


def serialize_card(card: Card) -> dict[str, Union[str, int]]:
    if card.is_joker:
        return {"suit": SUIT_NAMES[Suit.JOKER].lower(), "rank": int(card.rank)}
    return {"suit": SUIT_NAMES[card.suit].lower(), "rank": RANK_NAMES[Rank(card.rank)].lower()}


def deserialize_card(payload: Mapping[str, Union[str, int]]) -> Card:
    try:
        suit = _SUITS_BY_NAME[str(payload["suit"]).lower()]
        if suit is Suit.JOKER:
            tag = int(payload["rank"])
            if tag < 0:
                raise ValueError(f"Joker tag must be non-negative, got {tag}")
            return Card.joker(tag)
        return Card(suit, _RANKS_BY_NAME[str(payload["rank"]).lower()])
    except (KeyError, TypeError, ValueError) as exc:
        raise CardParseError(f"Invalid card payload: {dict(payload)!r}") from exc

from collections import Counter
from random import Random

import pytest

from deck import (
    Card,
    InvalidTransform,
    Rank,
    Suit,
    Shuffle,
    Transform,
    decks,
    default_sort,
    filter_out,
    jokers,
    less,
    new,
    shuffle,
    sort,
)


def test_default_sort_orders_suit_major():
    cards = new(shuffle, default_sort)
    assert cards[0] == Card(Suit.SPADE, Rank.ACE)
    assert cards[-1] == Card(Suit.HEART, Rank.KING)
    assert cards == new()


def test_sort_with_custom_comparator():
    def by_rank_descending(cards):
        return lambda i, j: cards[i].rank > cards[j].rank

    cards = new(sort(by_rank_descending))
    assert {card.rank for card in cards[:4]} == {Rank.KING}
    assert {card.rank for card in cards[-4:]} == {Rank.ACE}


def test_sort_with_default_comparator_matches_default_sort():
    shuffled = Shuffle(seed=3)(new())
    assert sort(less)(shuffled) == default_sort(shuffled)


def test_sort_does_not_mutate_input():
    shuffled = Shuffle(seed=5)(new())
    snapshot = list(shuffled)
    default_sort(shuffled)
    sort(less)(shuffled)
    assert shuffled == snapshot


def test_shuffle_is_a_permutation():
    ordered = new(default_sort)
    shuffled = shuffle(ordered)
    assert len(shuffled) == len(ordered)
    assert Counter(shuffled) == Counter(ordered)
    assert ordered == new()


@pytest.mark.parametrize("seed", [1, 7, 42, 2024, 31337])
def test_shuffle_moves_most_cards(seed):
    ordered = new(default_sort)
    shuffled = Shuffle(seed=seed)(ordered)
    same = sum(1 for before, after in zip(ordered, shuffled) if before == after)
    assert same < len(ordered) // 2


def test_seeded_shuffle_is_reproducible():
    assert new(Shuffle(seed=11)) == new(Shuffle(seed=11))
    assert shuffle(new(), rng=Random(11)) == shuffle(new(), rng=Random(11))


def test_explicit_rng_advances_between_calls():
    shuffler = Shuffle(rng=Random(7))
    assert shuffler(new()) != shuffler(new())


def test_jokers_appended_with_distinct_tags():
    cards = new(jokers(5))
    assert len(cards) == 57
    found = [card for card in cards if card.is_joker]
    assert len(found) == 5
    assert cards[-5:] == found
    assert [card.rank for card in found] == [0, 1, 2, 3, 4]


def test_zero_jokers_is_a_no_op():
    assert new(jokers(0)) == new()


def test_filter_out_twos_and_threes():
    cards = new(filter_out(lambda card: card.rank in (Rank.TWO, Rank.THREE)))
    assert len(cards) == 44
    assert all(card.rank not in (Rank.TWO, Rank.THREE) for card in cards)
    assert cards == [card for card in new() if card.rank not in (Rank.TWO, Rank.THREE)]


def test_filter_everything_yields_empty_deck():
    assert new(filter_out(lambda card: True)) == []


def test_decks_concatenates_copies():
    original = new()
    cards = new(decks(3))
    assert len(cards) == 52 * 3
    assert cards == original + original + original


def test_decks_edge_counts():
    assert new(decks(1)) == new()
    assert new(decks(0)) == []


@pytest.mark.parametrize("factory", [jokers, decks])
def test_negative_counts_are_rejected(factory):
    with pytest.raises(InvalidTransform):
        factory(-1)


def test_transforms_compose_in_order():
    cards = new(decks(2), jokers(2), filter_out(lambda card: card.suit is Suit.HEART))
    assert len(cards) == 2 * 39 + 2
    assert [card.is_joker for card in cards[-2:]] == [True, True]


def test_unseeded_shuffles_move_most_cards():
    ordered = new(default_sort)
    for _ in range(5):
        shuffled = shuffle(ordered)
        same = sum(1 for before, after in zip(ordered, shuffled) if before == after)
        assert same < len(ordered) // 2


@pytest.mark.parametrize(
    "transform",
    [
        lambda cards: list(cards),
        default_sort,
        sort(less),
        Shuffle(seed=1),
        filter_out(lambda card: False),
        jokers(1),
        decks(2),
    ],
)
def test_variants_satisfy_transform(transform):
    assert isinstance(transform, Transform)
    assert isinstance(new(transform), list)

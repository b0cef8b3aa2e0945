import pytest

from omaha.models import NextCardSummary
from omaha.next_card import calc_next_card_equities, rank_next_cards, summarize_next_cards

from .helpers import cards, hands

PLAYERS = ("AsAhKsKh", "QsQhJsJh")


@pytest.fixture(scope="module")
def flop_results():
    return calc_next_card_equities(hands(*PLAYERS), cards("2c 3d 4h"))


def test_one_result_per_unseen_card_on_the_flop(flop_results):
    assert len(flop_results) == 52 - 11
    labels = {item.card.label for item in flop_results}
    assert len(labels) == len(flop_results)
    assert not labels.intersection({"As", "Ah", "Ks", "Kh", "Qs", "Qh", "Js", "Jh", "2c", "3d", "4h"})


def test_each_candidate_splits_the_whole_pot(flop_results):
    for item in flop_results:
        assert sum(item.equities) == pytest.approx(100.0, abs=0.1)
        assert all(value == round(value, 1) for value in item.equities)


def test_river_candidates_are_single_showdowns():
    results = calc_next_card_equities(hands(*PLAYERS), cards("2c 3d 4h 9c"))
    assert len(results) == 40
    for item in results:
        assert set(item.equities) <= {0.0, 50.0, 100.0}


def test_next_card_view_needs_flop_or_turn():
    assert calc_next_card_equities(hands(*PLAYERS), cards("2c 3d")) == []
    assert calc_next_card_equities(hands(*PLAYERS), cards("2c 3d 4h 9c Td")) == []
    assert calc_next_card_equities(hands(PLAYERS[0]), cards("2c 3d 4h")) == []


def test_rank_and_summarize(flop_results):
    ranked = rank_next_cards(flop_results, 1)
    assert [item.equities[1] for item in ranked] == sorted((item.equities[1] for item in flop_results), reverse=True)

    clubs = rank_next_cards(flop_results, 0, suit="c")
    assert clubs and all(item.card.suit == "c" for item in clubs)

    summary = summarize_next_cards(flop_results, 0)
    values = [item.equities[0] for item in flop_results]
    assert summary == NextCardSummary(
        best=max(values),
        worst=min(values),
        average=sum(values) / len(values),
        favorable=sum(1 for value in values if value > 60.0),
    )
    assert summarize_next_cards([], 0) is None

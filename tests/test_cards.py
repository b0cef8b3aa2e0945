import random

import pytest

from omaha.cards import (
    Card,
    build_deck,
    cards_to_labels,
    parse_card_text,
    parse_cards,
    parse_label,
    remaining_cards,
    shuffle,
    used_cards,
)

from .helpers import cards, hands


def test_build_deck_has_52_distinct_cards_in_fixed_order():
    deck = build_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert deck[:5] == cards("As Ah Ad Ac Ks")
    assert deck[-1] == Card("2", "c")
    assert build_deck() == deck


def test_card_codes_cover_zero_to_fifty_one():
    codes = sorted(card.code for card in build_deck())
    assert codes == list(range(52))
    assert Card("2", "s").code == 0
    assert Card("A", "c").code == 51
    assert Card("T", "h").value == 10


def test_card_validation_rejects_invalid_labels():
    with pytest.raises(ValueError, match="Invalid rank"):
        Card("1", "h")
    with pytest.raises(ValueError, match="Invalid suit"):
        Card("A", "x")


def test_parse_label_is_strict():
    assert parse_label("ks") == Card("K", "s")
    with pytest.raises(ValueError, match="Invalid card label"):
        parse_label("10s")
    with pytest.raises(ValueError, match="Invalid suit"):
        parse_cards(["Ah", "Kx"])


@pytest.mark.parametrize(
    "text,expected",
    [
        ("AsKhQdJc", ["As", "Kh", "Qd", "Jc"]),
        ("ah kd, qc", ["Ah", "Kd", "Qc"]),
        ("10s 9S", ["Ts", "9s"]),
        ("AxKh", ["Kh"]),
        ("Ah7", ["Ah"]),
        ("", []),
        ("zz yy", []),
    ],
)
def test_parse_card_text_skips_malformed_tokens(text, expected):
    assert cards_to_labels(parse_card_text(text)) == expected


def test_shuffle_returns_new_list_and_is_reproducible_with_seed():
    deck = build_deck()
    first = shuffle(deck, random.Random(11))
    second = shuffle(deck, random.Random(11))
    assert first == second
    assert sorted(first, key=lambda card: card.code) == sorted(deck, key=lambda card: card.code)
    assert deck == build_deck()


def test_remaining_cards_excludes_every_used_card():
    players = hands("AsAhKsKh", "QsQhJsJh")
    board = cards("2c 3d 4h")
    used = used_cards(players, board)
    remaining = remaining_cards(players, board)
    assert len(used) == 11
    assert len(remaining) == 41
    assert not used.intersection(remaining)

import random
from collections import Counter

import pytest

from arcadebox.truco_cards import (
    Suit,
    card_lines,
    card_number,
    card_rank,
    card_suit,
    deal,
    envido_points,
    random_percent,
    render_cards,
    render_table,
    tally_lines,
)


def test_special_ranks_from_table():
    assert card_rank(20) == 15  # ace of espada
    assert card_rank(30) == 14  # ace of basto
    assert card_rank(26) == 13  # seven of espada
    assert card_rank(6) == 12  # seven of oro


def test_ranks_within_bounds_and_fours_lowest():
    ranks = [card_rank(card) for card in range(40)]
    assert min(ranks) == 1
    assert max(ranks) == 15
    fours = [card for card in range(40) if card_number(card) == 4]
    assert all(card_rank(card) == 1 for card in fours)


def test_top_four_cards_are_unique():
    counts = Counter(card_rank(card) for card in range(40))
    for rank in (12, 13, 14, 15):
        assert counts[rank] == 1


def test_card_numbers_of_deck():
    numbers = {card_number(card) for card in range(40)}
    assert numbers == {1, 2, 3, 4, 5, 6, 7, 10, 11, 12}


def test_card_suit_by_decade():
    assert card_suit(0) is Suit.ORO
    assert card_suit(19) is Suit.COPA
    assert card_suit(25) is Suit.ESPADA
    assert card_suit(39) is Suit.BASTO


@pytest.mark.parametrize("bad", [-1, 40, 100])
def test_invalid_card_rejected(bad):
    with pytest.raises(ValueError):
        card_rank(bad)
    with pytest.raises(ValueError):
        card_lines(bad)


def test_envido_three_different_suits_takes_highest():
    assert envido_points([6, 16, 26]) == 7


def test_envido_pair_of_figures_is_twenty():
    # 10 and 12 of oro are figures worth nothing, plus twenty.
    assert envido_points([7, 9, 33]) == 20


def test_envido_flush_uses_best_two():
    assert envido_points([0, 5, 6]) == envido_points([5, 6, 20])


def test_envido_bounds_over_all_dealt_hands():
    rng = random.Random(7)
    for _ in range(300):
        ai, human = deal(rng)
        for hand in (ai, human):
            points = envido_points(hand)
            assert 0 <= points <= 33


def test_envido_requires_three_cards():
    with pytest.raises(ValueError):
        envido_points([1, 2])


def test_random_percent_extremes():
    rng = random.Random(1)
    assert not any(random_percent(0, rng) for _ in range(200))
    assert not any(random_percent(1, rng) for _ in range(200))
    assert all(random_percent(101, rng) for _ in range(200))


def test_deal_distinct_and_ai_sorted():
    rng = random.Random(42)
    for _ in range(100):
        ai, human = deal(rng)
        assert len(ai) == 3 and len(human) == 3
        assert len(set(ai) | set(human)) == 6
        assert all(0 <= card < 40 for card in ai + human)
        assert [card_rank(c) for c in ai] == sorted(card_rank(c) for c in ai)


def test_deal_reproducible_with_seed():
    first_ai, first_human = deal(random.Random(3))
    second_ai, second_human = deal(random.Random(3))
    assert list(first_ai) == list(second_ai)
    assert list(first_human) == list(second_human)
    assert len(set(first_ai) | set(first_human)) == 6
    assert all(0 <= card < 40 for card in list(first_ai) + list(first_human))


def test_card_lines_shape_and_number():
    lines = card_lines(0)
    assert len(lines) == 10
    assert all(len(line) == 22 for line in lines)
    assert lines[0] == " ____________________ "
    assert lines[1] == "|1                   |"
    assert lines[2] == "|         ==         |"


def test_card_lines_two_digit_number():
    lines = card_lines(39)
    assert lines[1].startswith("|12")
    assert lines[9].endswith("12|")
    assert all(len(line) == 22 for line in lines)


def test_render_cards_side_by_side():
    rows = render_cards([0, 10, 20])
    assert len(rows) == 10
    for row, a, b, c in zip(rows, card_lines(0), card_lines(10), card_lines(20)):
        assert row == a + b + c


def test_tally_empty_and_full():
    assert tally_lines(0, 0) == ["       |       "] * 3
    assert tally_lines(15, 15) == ["  [/]  |  [/]  "] * 3


def test_tally_partial_rows():
    rows = tally_lines(7, 3)
    assert rows[0] == "  [/]  |  |_|  "
    assert rows[1] == "  |_   |       "
    assert rows[2] == "       |       "


def test_render_table_without_ai_cards():
    text = render_table([0, 1, 2], [None, None, None], [False] * 3, 0, 0)
    assert "TUS CARTAS" in text
    assert "CARTAS IA" not in text
    assert "\x1b[" not in text


def test_render_table_shows_played_cards():
    text = render_table([0, 1, 2], [20, None, None], [True, False, False], 2, 4)
    assert "CARTAS IA" in text
    assert text.splitlines()[2] == "  |_   |  [ ]  "
    assert card_lines(20)[5] in text
    assert "\x1b[" in text
import pytest

from arcadebox.truco_game import (
    MATCH_POINTS,
    HandState,
    TrucoGame,
    Winner,
    hand_winner,
    main,
    round_result,
    truco_value,
)


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def scripted(*answers):
    remaining = iter(answers)

    def ask(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise AssertionError("ran out of scripted answers") from None

    return ask


def make_game(*answers, roll=99):
    out = []
    game = TrucoGame(
        ask=scripted(*answers), say=out.append, rng=FixedRng(roll), pause=lambda ms: None
    )
    return game, out


def test_round_result_uses_card_strength():
    assert round_result(20, 30) == Winner.HUMAN
    assert round_result(30, 20) == Winner.AI
    assert round_result(2, 12) == Winner.TIE


@pytest.mark.parametrize(
    "rounds, expected",
    [
        ([Winner.AI, Winner.AI, None], Winner.AI),
        ([Winner.HUMAN, Winner.TIE, None], Winner.HUMAN),
        ([Winner.TIE, Winner.AI, None], Winner.AI),
        ([Winner.TIE, Winner.TIE, None], Winner.TIE),
        ([Winner.AI, Winner.HUMAN, None], None),
        ([Winner.HUMAN, None, None], None),
        ([None, None, None], None),
    ],
)
def test_hand_winner(rounds, expected):
    assert hand_winner(rounds) == expected


def test_hand_winner_rejects_wrong_length():
    with pytest.raises(ValueError):
        hand_winner([Winner.AI])


def test_truco_value_bounds():
    assert truco_value(0) == 1
    assert truco_value(3) == 4
    with pytest.raises(ValueError):
        truco_value(4)
    with pytest.raises(ValueError):
        truco_value(-1)


def test_human_truco_accepted_by_strong_ai():
    game, out = make_game()
    hand = HandState(ai_cards=[21, 20, 30], human_cards=[3, 4, 5])
    game.call_truco(hand, by_ai=False)
    assert hand.calls == 1
    assert hand.human_can_call is False
    assert hand.ai_can_call is True
    assert "IA: Quiero!" in out


def test_human_truco_refused_by_weak_ai():
    game, out = make_game(roll=99)
    hand = HandState(ai_cards=[3, 4, 5], human_cards=[20, 30, 26])
    game.call_truco(hand, by_ai=False)
    assert hand.winner == Winner.HUMAN
    assert "IA: No se quiere" in out


def test_truco_after_vale_cuatro_does_nothing():
    game, out = make_game()
    hand = HandState(ai_cards=[3, 4, 5], human_cards=[20, 30, 26], calls=3)
    game.call_truco(hand, by_ai=True)
    assert hand.calls == 3
    assert hand.winner is None
    assert out == []


def test_ai_truco_refused_by_human():
    game, _ = make_game("2")
    hand = HandState(ai_cards=[3, 4, 5], human_cards=[20, 30, 26])
    game.call_truco(hand, by_ai=True)
    assert hand.winner == Winner.AI


def test_ai_truco_accepted_passes_the_call():
    game, out = make_game("x", "1")
    hand = HandState(ai_cards=[3, 4, 5], human_cards=[20, 30, 26])
    game.call_truco(hand, by_ai=True)
    assert hand.calls == 1
    assert hand.human_can_call is True
    assert hand.ai_can_call is False
    assert any("IA: Truco" in line for line in out)


def test_human_envido_accepted_and_won_by_ai():
    game, out = make_game("1")
    hand = HandState(ai_cards=[6, 5, 4], human_cards=[10, 21, 32])
    game.call_envido(hand, by_ai=False)
    assert game.ai_score == 2
    assert game.human_score == 0
    assert hand.envido_called is True
    assert "IA: 33 son mejores" in out


def test_human_envido_refused():
    game, out = make_game("2", roll=99)
    hand = HandState(ai_cards=[3, 14, 25], human_cards=[10, 21, 32])
    game.call_envido(hand, by_ai=False)
    assert game.human_score == 1
    assert "IA: No quiero" in out


def test_ai_envido_refused_by_human():
    game, out = make_game("2")
    hand = HandState(ai_cards=[6, 5, 4], human_cards=[10, 21, 32])
    game.call_envido(hand, by_ai=True)
    assert game.ai_score == 1
    assert "TU: No quiero" in out


def test_falta_envido_won_by_human_sets_score():
    game, _ = make_game("5", roll=0)
    game.ai_score = 3
    hand = HandState(ai_cards=[6, 0, 10], human_cards=[16, 15, 20])
    game.call_envido(hand, by_ai=True)
    assert game.human_score == MATCH_POINTS - game.ai_score


def test_ai_leads_first_round_with_weakest_card():
    game, _ = make_game(roll=99)
    hand = HandState(ai_cards=[3, 14, 25], human_cards=[20, 30, 26])
    game.ai_turn(hand)
    assert hand.ai_card == 3
    assert hand.ai_used == [True, False, False]
    assert hand.ai_played[0] == 3


def test_ai_answers_first_round_with_strongest_card():
    game, _ = make_game(roll=99)
    hand = HandState(ai_cards=[3, 14, 25], human_cards=[20, 30, 26], human_card=20)
    game.ai_turn(hand)
    assert hand.ai_card == 25
    assert hand.ai_used[2] is True


def test_ai_plays_last_card_in_third_round():
    game, _ = make_game(roll=99)
    hand = HandState(
        ai_cards=[3, 14, 25],
        human_cards=[20, 30, 26],
        ai_used=[True, False, True],
        rounds=[Winner.AI, Winner.HUMAN, None],
    )
    game.ai_turn(hand)
    assert hand.ai_card == 14
    assert hand.ai_played[2] == 14
    assert all(hand.ai_used)


def test_human_turn_skips_used_cards_and_bad_input():
    game, _ = make_game("1", "nine", "2")
    hand = HandState(
        ai_cards=[3, 14, 25], human_cards=[20, 30, 26], human_used=[True, False, False]
    )
    game.human_turn(hand)
    assert hand.human_card == 30
    assert hand.human_used == [True, True, False]


def test_choose_cards_reads_both_hands_and_starter():
    game, _ = make_game("50", "1", "2", "3", "4", "5", "6", "1")
    ai_cards, human_cards = game.choose_cards()
    assert ai_cards == (1, 2, 3)
    assert human_cards == (4, 5, 6)
    assert game.ai_started_last is False


def test_play_hand_human_wins_two_rounds():
    game, _ = make_game("1", "2", roll=99)
    hand = HandState(ai_cards=[3, 14, 25], human_cards=[20, 30, 26])
    winner = game.play_hand(hand)
    assert winner == Winner.HUMAN
    assert hand.rounds[:2] == [Winner.HUMAN, Winner.HUMAN]
    assert game.human_score == truco_value(0)
    assert game.ai_score == 0
    assert game.ai_started_last is False


def test_play_match_ends_after_falta_envido():
    answers = ("6", "5", "0", "16", "15", "10", "2", "5", "3", "1", "2")
    game, out = make_game(*answers, roll=99)
    result = game.play_match(pick_cards=True)
    assert result == Winner.HUMAN
    assert game.human_score == MATCH_POINTS
    assert game.ai_score == truco_value(0)
    assert "Ganaste!" in out
    assert "Perdiste!" not in out


def test_main_quits_from_menu(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "3")
    assert main([]) == 0
    assert "1--> Jugar" in capsys.readouterr().out
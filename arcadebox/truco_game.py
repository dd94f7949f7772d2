"""A match of truco against a simple computer opponent, played in the terminal."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterable, Optional, Sequence

from arcadebox.truco_cards import (
    DECK_SIZE,
    card_rank,
    deal,
    envido_points,
    random_percent,
    render_table,
)

MATCH_POINTS = 15

_CLEAR = "\x1b[2J\x1b[H"
_TRUCO_NAMES = ("Truco", "Re Truco", "Vale 4")
_MENU = "1--> Jugar\n2--> Elegir Cartas (NO TERMINADO)\n3--> Salir"


class Winner(IntEnum):
    """Outcome of a round or a hand."""

    AI = 0
    HUMAN = 1
    TIE = 2


@dataclass
class HandState:
    """Everything that changes while one hand is played."""

    ai_cards: list[int]
    human_cards: list[int]
    ai_used: list[bool] = field(default_factory=lambda: [False] * 3)
    human_used: list[bool] = field(default_factory=lambda: [False] * 3)
    ai_played: list[Optional[int]] = field(default_factory=lambda: [None] * 3)
    rounds: list[Optional[Winner]] = field(default_factory=lambda: [None] * 3)
    calls: int = 0
    human_can_call: bool = True
    ai_can_call: bool = True
    envido_called: bool = False
    human_card: Optional[int] = None
    ai_card: Optional[int] = None
    ai_led: bool = False
    winner: Optional[Winner] = None


def round_result(human_card: int, ai_card: int) -> Winner:
    """Return who takes a round given the two cards played."""
    human, ai = card_rank(human_card), card_rank(ai_card)
    if human > ai:
        return Winner.HUMAN
    if human < ai:
        return Winner.AI
    return Winner.TIE


def hand_winner(rounds: Sequence[Optional[Winner]]) -> Optional[Winner]:
    """Return the winner of a hand from its round results, or None if still open."""
    if len(rounds) != 3:
        raise ValueError("a hand has exactly three rounds")
    first, second, third = rounds
    winner: Optional[Winner] = None
    if second == Winner.TIE:
        if first != Winner.TIE:
            winner = first
        elif third is not None:
            winner = third if third != Winner.TIE else Winner.HUMAN
    if first == Winner.TIE and second != Winner.TIE:
        winner = second
    if first is not None and first == second:
        winner = first
    return Winner(winner) if winner is not None else None


def truco_value(calls: int) -> int:
    """Return the points a hand is worth after the given number of accepted calls."""
    if not 0 <= calls <= len(_TRUCO_NAMES):
        raise ValueError(f"invalid number of truco calls: {calls}")
    return calls + 1


class TrucoGame:
    """Plays hands and matches, talking to the player through ask and say."""

    def __init__(
        self,
        ask: Optional[Callable[[str], str]] = None,
        say: Optional[Callable[[str], None]] = None,
        rng: Optional[random.Random] = None,
        pause: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.ask = ask or input
        self.say = say or print
        self.rng = rng or random.Random()
        self.pause = pause or (lambda ms: time.sleep(ms / 1000))
        self.human_score = 0
        self.ai_score = 0
        self.ai_started_last = True

    # -- input helpers -------------------------------------------------

    def _read_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self.ask(prompt).strip())
        except ValueError:
            return None

    def _ask_choice(self, prompt: str, choices: Iterable[int]) -> int:
        allowed = set(choices)
        while True:
            value = self._read_int(prompt)
            if value in allowed:
                return value

    def _show(self, hand: HandState) -> None:
        self.say(
            _CLEAR
            + render_table(
                hand.human_cards,
                hand.ai_played,
                hand.human_used,
                self.human_score,
                self.ai_score,
            )
        )

    # -- setup ---------------------------------------------------------

    def choose_cards(self) -> tuple[tuple[int, ...], tuple[int, ...]]:
        """Let the player pick both hands and who starts; return (ai, human)."""
        self.say(_CLEAR + "0-9 -> ORO  10-19 -> COPA  20-29 -> ESPADA  30-39 -> BASTO")
        self.say("NUMERO = CARTA % 10 + 3 (SI ES MAYOR A 6) + 1 (SI ES MENOR A 7)\n")
        valid = range(DECK_SIZE)
        ai_cards = tuple(
            self._ask_choice(f"Elija carta {n} IA (0-40): ", valid) for n in (1, 2, 3)
        )
        self.say("")
        human_cards = tuple(
            self._ask_choice(f"Elija carta {n} Humano (0-40): ", valid) for n in (1, 2, 3)
        )
        self.say("")
        self.say("Quien Empieza? 1) IA  2) TU")
        starter = self._ask_choice("", (1, 2))
        self.ai_started_last = starter != 1
        return ai_cards, human_cards

    # -- calls ---------------------------------------------------------

    def _raise_stakes(self, hand: HandState, by_ai: bool) -> None:
        hand.calls += 1
        hand.human_can_call = by_ai
        hand.ai_can_call = not by_ai

    def call_truco(self, hand: HandState, by_ai: bool) -> None:
        """Raise the hand's stakes; a refusal ends the hand for the caller."""
        if hand.calls >= len(_TRUCO_NAMES):
            return
        name = _TRUCO_NAMES[hand.calls]
        if by_ai:
            if not hand.ai_can_call:
                return
            self.say(_CLEAR + f"IA: {name}")
            self.say("1) Quiero\n2) No quiero")
            if self._ask_choice("Opcion: ", (1, 2)) == 1:
                self._raise_stakes(hand, by_ai=True)
            else:
                hand.winner = Winner.AI
            return
        if not hand.human_can_call:
            return
        self.say(_CLEAR + f"TU: {name}")
        strength = sum(card_rank(card) for card in hand.ai_cards)
        self.pause(1000)
        if strength > 20 or random_percent(25, self.rng):
            self.say("IA: Quiero!")
            self.pause(1000)
            self._raise_stakes(hand, by_ai=False)
        else:
            self.say("IA: No se quiere")
            self.pause(1000)
            hand.winner = Winner.HUMAN

    def call_envido(self, hand: HandState, by_ai: bool) -> None:
        """Play out an envido called by either side and score it."""
        ai_points = envido_points(hand.ai_cards)
        human_points = envido_points(hand.human_cards)
        self.say(_CLEAR)
        if by_ai:
            self._answer_ai_envido(ai_points, human_points)
        else:
            self._human_envido(ai_points, human_points)
        hand.envido_called = True

    def _answer_ai_envido(self, ai_points: int, human_points: int) -> None:
        self.say("IA: Envido!")
        self.pause(1000)
        self.say("1) Quiero\n2) No quiero\n3) Envido\n4) Real Envido\n5) Falta Envido")
        option = self._ask_choice("", range(1, 6))
        if option == 1:
            self.say(f"IA: {ai_points}")
            self.pause(1000)
            if ai_points > human_points:
                self.say("TU: son buenas")
                self.ai_score += 2
            else:
                self.say(f"TU: {human_points} son mejores")
                self.human_score += 2
            self.pause(1000)
            return
        if option == 2:
            self.ai_score += 1
            self.say("TU: No quiero")
            self.pause(1000)
            return
        if not (ai_points > 29 or random_percent(30, self.rng)):
            self.say("IA: No quiero")
            self.pause(1000)
            self.human_score += 2
            return
        self.say("IA: Quiero!")
        self.pause(1000)
        self.say(f"TU: {human_points}")
        self.pause(1000)
        if ai_points > human_points:
            self.say(f"IA: {ai_points} son mejores")
            self.ai_score += {3: 4, 4: 5}.get(option, MATCH_POINTS - self.human_score)
        else:
            self.say("IA: son buenas")
            if option == 5:
                self.human_score = MATCH_POINTS - self.ai_score
            else:
                self.human_score += {3: 4, 4: 5}[option]
        self.pause(1000)

    def _human_envido(self, ai_points: int, human_points: int) -> None:
        self.say("1) Envido\n2) Real Envido\n3) Falta Envido")
        option = self._ask_choice("Opcion:", (1, 2, 3))
        self.say({1: "TU: Envido!", 2: "TU: Real Envido!", 3: "TU: Falta Envido!"}[option])
        threshold = 29 if option == 3 else 28
        if not (ai_points > threshold or random_percent(30, self.rng)):
            self.say("IA: No quiero")
            self.pause(1000)
            self.human_score += 1
            return
        self.say("IA: Quiero")
        self.pause(1000)
        self.say(f"TU: {human_points}")
        self.pause(1000)
        if ai_points > human_points:
            self.say(f"IA: {ai_points} son mejores")
            self.ai_score += {1: 2, 2: 3}.get(option, MATCH_POINTS - self.human_score)
        else:
            self.say("IA: son buenas")
            self.human_score += {1: 2, 2: 3}.get(option, MATCH_POINTS - self.ai_score)
        self.pause(1000)

    # -- turns ---------------------------------------------------------

    def _ai_play(self, hand: HandState, index: int, round_no: int) -> int:
        card = hand.ai_cards[index]
        hand.ai_used[index] = True
        hand.ai_card = card
        hand.ai_played[round_no] = card
        return card

    def ai_turn(self, hand: HandState) -> None:
        """Let the computer play its card for the current round."""
        unused = [j for j, used in enumerate(hand.ai_used) if not used]
        if not unused:
            raise RuntimeError("the computer has no cards left")
        if hand.rounds[1] is not None:
            card = self._ai_play(hand, unused[-1], 2)
            if card_rank(card) > 12 or random_percent(25, self.rng):
                self.call_truco(hand, by_ai=True)
            return
        lead = hand.rounds[0]
        if lead is None:
            self._ai_first_round(hand)
        elif lead == Winner.AI:
            if hand.ai_used[0]:
                options = (1, 2)
            elif hand.ai_used[1]:
                options = (2, 0)
            else:
                options = (1, 0)
            index = options[0] if random_percent(50, self.rng) else options[1]
            card = self._ai_play(hand, index, 1)
            if card_rank(card) > 9 or random_percent(25, self.rng):
                self.call_truco(hand, by_ai=True)
        elif lead == Winner.HUMAN:
            threshold = card_rank(hand.human_card)
            index = next(
                (j for j in unused if card_rank(hand.ai_cards[j]) >= threshold),
                unused[0],
            )
            card = self._ai_play(hand, index, 1)
            if card_rank(card) > threshold:
                self.call_truco(hand, by_ai=True)
        else:
            index = max(unused, key=lambda j: card_rank(hand.ai_cards[j]))
            card = self._ai_play(hand, index, 1)
            if card_rank(card) > 10:
                self.call_truco(hand, by_ai=True)

    def _ai_first_round(self, hand: HandState) -> None:
        wants_envido = envido_points(hand.ai_cards) > 29 or random_percent(30, self.rng)
        if wants_envido and not hand.envido_called:
            self.call_envido(hand, by_ai=True)
        # Leading: open with the weakest card; answering: show the strongest.
        self._ai_play(hand, 0 if hand.human_card is None else 2, 0)

    def human_turn(self, hand: HandState) -> None:
        """Ask the player for a card or a call until a card is played or the hand ends."""
        while hand.winner is None:
            self._show(hand)
            if hand.human_can_call and hand.calls < len(_TRUCO_NAMES):
                self.say(f"4) {_TRUCO_NAMES[hand.calls]}")
            envido_open = hand.rounds[0] is None and not hand.envido_called
            if envido_open:
                self.say("5) Envido")
            option = self._read_int("opcion: ")
            if option in (1, 2, 3):
                index = option - 1
                if not hand.human_used[index]:
                    hand.human_used[index] = True
                    hand.human_card = hand.human_cards[index]
                    return
            elif option == 4:
                self.call_truco(hand, by_ai=False)
            elif option == 5 and envido_open:
                self.call_envido(hand, by_ai=False)

    # -- hands and matches --------------------------------------------

    def _play_round(self, hand: HandState, ai_leads: bool) -> None:
        hand.human_card = None
        hand.ai_card = None
        first, second = (
            (self.ai_turn, self.human_turn) if ai_leads else (self.human_turn, self.ai_turn)
        )
        first(hand)
        if hand.winner is None:
            second(hand)

    def _settle(self, hand: HandState, index: int) -> None:
        if hand.winner is None:
            hand.rounds[index] = round_result(hand.human_card, hand.ai_card)
            hand.winner = hand_winner(hand.rounds)

    def play_hand(self, hand: HandState) -> Winner:
        """Play a dealt hand to the end, award its points and return the winner."""
        self._show(hand)
        hand.ai_led = not self.ai_started_last
        if hand.ai_led:
            self.say("\nEscribe algo y Presiona Enter Para Continuar ...")
            self.ask("")
        self._play_round(hand, ai_leads=hand.ai_led)
        self.ai_started_last = hand.ai_led
        self._settle(hand, 0)
        for index in (1, 2):
            if hand.winner is not None:
                break
            self._show(hand)
            previous = hand.rounds[index - 1]
            ai_leads = previous == Winner.AI or (previous == Winner.TIE and hand.ai_led)
            self._play_round(hand, ai_leads)
            self._settle(hand, index)
        if hand.winner is None and hand.rounds[2] is not None:
            hand.winner = hand.rounds[2]
        self._show(hand)
        points = truco_value(hand.calls)
        if hand.winner == Winner.AI:
            self.ai_score += points
        else:
            self.human_score += points
        self.pause(3000)
        return hand.winner

    def play_match(self, pick_cards: bool = False) -> Winner:
        """Play hands until someone reaches the match points; return the match winner."""
        self.human_score = 0
        self.ai_score = 0
        self.ai_started_last = True
        while self.human_score < MATCH_POINTS and self.ai_score < MATCH_POINTS:
            ai_cards, human_cards = self.choose_cards() if pick_cards else deal(self.rng)
            self.play_hand(HandState(list(ai_cards), list(human_cards)))
        if self.human_score >= MATCH_POINTS:
            self.say("Ganaste!")
        if self.ai_score >= MATCH_POINTS:
            self.say("Perdiste!")
        return Winner.HUMAN if self.human_score >= MATCH_POINTS else Winner.AI


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the truco menu in the terminal."""
    parser = argparse.ArgumentParser(prog="truco", description="Play truco against the computer.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the card shuffle")
    args = parser.parse_args(argv)
    game = TrucoGame(rng=random.Random(args.seed))
    try:
        while True:
            game.say(_MENU)
            option = game._read_int("")
            if option == 1:
                game.play_match(pick_cards=False)
            elif option == 2:
                game.play_match(pick_cards=True)
            elif option == 3:
                break
    except (EOFError, KeyboardInterrupt):
        pass
    return 0
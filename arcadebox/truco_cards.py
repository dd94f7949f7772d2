"""Spanish 40-card deck as used in truco: ranks, envido, dealing and card art."""

from __future__ import annotations

import random
from collections import defaultdict
from enum import IntEnum
from typing import Iterable, Sequence

DECK_SIZE = 40
CARD_HEIGHT = 10
CARD_WIDTH = 22

_HIGHLIGHT_PLAYED = "\x1b[30;106m"
_HIGHLIGHT_AI = "\x1b[30;107m"
_RESET = "\x1b[0m"


class Suit(IntEnum):
    """The four suits; a card's suit is its id divided by ten."""

    ORO = 0
    COPA = 1
    ESPADA = 2
    BASTO = 3


# Truco strength of each face value; the sevens and aces depend on the suit.
_BASE_RANK = {1: 8, 2: 10, 3: 11, 4: 1, 5: 2, 6: 3, 7: 4, 10: 5, 11: 6, 12: 7}
_SPECIAL_RANK = {
    (Suit.ESPADA, 1): 15,
    (Suit.BASTO, 1): 14,
    (Suit.ESPADA, 7): 13,
    (Suit.ORO, 7): 12,
}

_ART = {
    Suit.ORO: (
        "|         ==         |",
        "|      ==    ==      |",
        "|    ==        ==    |",
        "|   =            =   |",
        "|    ==        ==    |",
        "|      ==    ==      |",
        "|         ==         |",
    ),
    Suit.COPA: (
        "|    |@@@@@@@@@@|    |",
        "|    (((((())))))    |",
        "|     \\        /     |",
        "|      \\      /      |",
        "|       \\    /       |",
        "|        (  )        |",
        "|       __||__       |",
    ),
    Suit.ESPADA: (
        "|         ^          |",
        "|        | |         |",
        "|        | |         |",
        "|        | |         |",
        "|        | |         |",
        "|     ((( * )))      |",
        "|        \\ /         |",
    ),
    Suit.BASTO: (
        "|          ____      |",
        "|         /    \\     |",
        "|        /      /    |",
        "|      \\/     \\      |",
        "|       /    /       |",
        "|      /   /\\        |",
        "|     /__/           |",
    ),
}


def _check(card: int) -> int:
    if not isinstance(card, int) or not 0 <= card < DECK_SIZE:
        raise ValueError(f"not a card: {card!r}")
    return card


def card_suit(card: int) -> Suit:
    """Return the suit of a card id (0-39)."""
    return Suit(_check(card) // 10)


def card_number(card: int) -> int:
    """Return the printed number of a card: 1-7, 10, 11 or 12."""
    digit = _check(card) % 10
    return digit + 1 if digit <= 6 else digit + 3


def card_rank(card: int) -> int:
    """Return the truco strength of a card; higher beats lower."""
    key = (card_suit(card), card_number(card))
    return _SPECIAL_RANK.get(key, _BASE_RANK[key[1]])


def _envido_value(card: int) -> int:
    digit = _check(card) % 10
    return digit + 1 if digit <= 6 else 0


def envido_points(cards: Iterable[int]) -> int:
    """Return the envido of a three-card hand."""
    hand = tuple(cards)
    if len(hand) != 3:
        raise ValueError("an envido hand has exactly three cards")
    by_suit: dict[Suit, list[int]] = defaultdict(list)
    for card in hand:
        by_suit[card_suit(card)].append(_envido_value(card))
    for values in by_suit.values():
        if len(values) >= 2:
            best_two = sorted(values, reverse=True)[:2]
            return 20 + sum(best_two)
    return max(_envido_value(card) for card in hand)


def random_percent(percent: int, rng: random.Random | None = None) -> bool:
    """Return True with roughly the given percent chance."""
    rng = rng or random
    return rng.randrange(100) + 1 < percent


def deal(rng: random.Random | None = None) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Deal six distinct cards alternately; return (ai_cards, human_cards).

    The AI's cards come back sorted from weakest to strongest.
    """
    rng = rng or random
    drawn = rng.sample(range(DECK_SIZE), 6)
    ai_cards = tuple(sorted(drawn[0::2], key=card_rank))
    human_cards = tuple(drawn[1::2])
    return ai_cards, human_cards


def card_lines(card: int) -> list[str]:
    """Return the ten text lines that draw a card."""
    number = str(card_number(card))
    return [
        " " + "_" * (CARD_WIDTH - 2) + " ",
        f"|{number:<{CARD_WIDTH - 2}}|",
        *_ART[card_suit(card)],
        f"|{number:_>{CARD_WIDTH - 2}}|",
    ]


def _join(blocks: Sequence[Sequence[str]]) -> list[str]:
    return ["".join(block[row] for block in blocks) for row in range(CARD_HEIGHT)]


def _highlight(lines: list[str], colour: str) -> list[str]:
    return [f"{colour}{line}{_RESET}" for line in lines]


def render_cards(cards: Iterable[int]) -> list[str]:
    """Draw cards side by side; return the ten joined lines."""
    return _join([card_lines(card) for card in cards])


def _tally_cell(score: int, row: int) -> str:
    base = row * 5
    if score <= base:
        return "       "
    if score >= base + 5:
        return "  [/]  "
    return {1: "  |    ", 2: "  |_   ", 3: "  |_|  ", 4: "  [ ]  "}[score - base]


def tally_lines(human_score: int, ai_score: int) -> list[str]:
    """Return the three rows of the tally marks for both players."""
    return [
        f"{_tally_cell(human_score, row)}|{_tally_cell(ai_score, row)}"
        for row in range(3)
    ]


def render_table(
    human_cards: Sequence[int],
    ai_played: Sequence[int | None],
    human_used: Sequence[bool],
    human_score: int,
    ai_score: int,
) -> str:
    """Return the whole table: scores, the human's hand and the AI's played cards."""
    lines = [" YO    |  IA   ", "-------|-------"]
    lines += tally_lines(human_score, ai_score)
    lines += ["", "TUS CARTAS", "1)                    2)                    3)"]
    blocks = []
    for card, used in zip(human_cards, human_used):
        block = card_lines(card)
        blocks.append(_highlight(block, _HIGHLIGHT_PLAYED) if used else block)
    lines += _join(blocks)
    lines += ["", ""]
    played = [card for card in ai_played if card is not None and card != -1]
    if played:
        lines.append(f"{_HIGHLIGHT_AI}CARTAS IA{_RESET}")
        lines += _join([_highlight(card_lines(card), _HIGHLIGHT_AI) for card in played])
    return "\n".join(lines)
"""Dodge-the-traffic driving game for the terminal."""

from __future__ import annotations

import argparse
import curses
import random
from enum import IntEnum
from typing import Optional, Sequence

VISIBLE_HEIGHT = 30
WIDTH = 8
SPAWN_ZONE = 4
TOTAL_HEIGHT = VISIBLE_HEIGHT + SPAWN_ZONE + 1
START_SPEED = 70


class Part(IntEnum):
    """Contents of a road cell: the player's car, a traffic car, or nothing."""

    FREE = 0
    MY_PART1 = 1
    MY_PART2 = 2
    MY_PART3 = 3
    AI_PART1 = 7
    AI_PART2 = 4
    AI_PART3 = 5
    AI_PART4 = 6


_PLAYER_PARTS = (Part.MY_PART1, Part.MY_PART2, Part.MY_PART3, Part.MY_PART2)
_TRAFFIC_PARTS = (Part.AI_PART1, Part.AI_PART2, Part.AI_PART3, Part.AI_PART4)
_PLAYER_TOP = TOTAL_HEIGHT - 4

_CELLS = {
    Part.FREE: "|       |",
    Part.AI_PART1: "|  |\u25c6|  |",
    Part.AI_PART2: "|  |\u25c6|  |",
    Part.AI_PART3: "|  \u253c \u253c  |",
    Part.AI_PART4: "|  |_|  |",
    Part.MY_PART1: "|  /\u2191\\  |",
    Part.MY_PART2: "| \u2588|\u25c6|\u2588 |",
    Part.MY_PART3: "|  |\u25c6|  |",
}

_SPEEDOMETER = {
    70: "\n 20       50         70\n  \\    \\    |    /    /\n                      \n"
    "    \\                \n     \\              \n      \\            \n"
    "       \\          \n       ----------",
    50: "\n 20       50         70\n  \\    \\    |    /    /\n                      \n"
    "            |        \n            |       \n            |      \n"
    "            |     \n       ----------",
    30: "\n 20       50         70\n  \\    \\    |    /    /\n                      \n"
    "                    /\n                   /\n                  /\n"
    "                 /\n       ----------",
}

_MENU = (
    " \n                Bienvenido al New CarDriver (Version 2) \n"
    "                  Iniciar (1) \n                  Instrucciones (2) \n"
    "                  Modo Extreme (4) \n"
)
_INSTRUCTIONS = (
    "\n INSTRUCCIONES:  \n -------------------  \n A --> Moverse Izquierda \n"
    " D --> Moverse Derecha \n  \n Iniciar el Juego? (1) \n Opciones (3) \n"
    " Volver al menu (Otra Tecla) \n"
)


class TaxiGame:
    """The road grid, the player's car and the oncoming traffic."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.grid: list[list[int]] = [[Part.FREE] * WIDTH for _ in range(TOTAL_HEIGHT)]
        self.crashed = False
        self.counter = 1
        self.score = 0
        self.speed = START_SPEED
        self._first_boost = True
        self._second_boost = True
        for offset, part in enumerate(_PLAYER_PARTS):
            self.grid[_PLAYER_TOP + offset][WIDTH // 2] = part

    def player_column(self) -> Optional[int]:
        """Return the lane holding the player's car nose, or None if it is gone."""
        row = self.grid[_PLAYER_TOP]
        return row.index(Part.MY_PART1) if Part.MY_PART1 in row else None

    def spawn_cars(self) -> None:
        """Every fourth tick drop a car into a random lane of the spawn zone."""
        lane = self.rng.randrange(WIDTH)
        if self.counter % 4 == 0:
            for offset, part in enumerate(_TRAFFIC_PARTS):
                self.grid[1 + offset][lane] = part
            self.score += 1

    def move_cars(self) -> None:
        """Shift the traffic down one row and check for a crash."""
        for y in range(TOTAL_HEIGHT - 1, 0, -1):
            for x in range(WIDTH):
                if self.grid[y][x] not in (Part.MY_PART1, Part.MY_PART2, Part.MY_PART3):
                    self.grid[y][x] = self.grid[y - 1][x]
        for y in range(1, TOTAL_HEIGHT):
            for x in range(WIDTH):
                if self.grid[y][x] in (Part.MY_PART1, Part.MY_PART2):
                    if self.grid[y - 1][x] == Part.AI_PART3:
                        self.crashed = True
        self.counter += 1

    def _shift_player(self, dx: int) -> None:
        column = self.player_column()
        if column is None or not 0 <= column + dx < WIDTH:
            return
        for offset, part in enumerate(_PLAYER_PARTS):
            row = self.grid[_PLAYER_TOP + offset]
            row[column] = Part.FREE
            row[column + dx] += part

    def move_left(self) -> None:
        """Steer one lane to the left if there is room."""
        self._shift_player(-1)

    def move_right(self) -> None:
        """Steer one lane to the right if there is room."""
        self._shift_player(1)

    def update_speed(self) -> None:
        """Speed up once at 50 points and once more at 100."""
        if self.score == 50 and self._first_boost:
            self.speed -= 20
            self._first_boost = False
        if self.score == 100 and self._second_boost:
            self.speed -= 20
            self._second_boost = False

    def render(self) -> str:
        """Return the visible road as text; overlapping cars count as a crash."""
        rows = []
        for y in range(SPAWN_ZONE + 1, TOTAL_HEIGHT):
            cells = []
            for value in self.grid[y]:
                cell = _CELLS.get(value)
                if cell is None:
                    cell = "  CHOQUE "
                    self.crashed = True
                cells.append(cell)
            rows.append("".join(cells) + "\n")
        text = "".join(rows) + "-" * 73
        self.update_speed()
        text += f"\n{' ' * 41}Puntaje: {self.score}"
        text += _SPEEDOMETER.get(self.speed, "")
        if 250 < self.score < 500:
            text += "\n\nTOO EZ FOR ME! MAKE IT HARDER!!"
        return text


def _draw(stdscr, text: str) -> None:
    stdscr.erase()
    try:
        stdscr.addstr(0, 0, text)
    except curses.error:
        pass
    stdscr.refresh()


def _pause(stdscr) -> None:
    stdscr.nodelay(False)
    while stdscr.getch() not in (ord("p"), ord("P")):
        pass
    stdscr.nodelay(True)


def _menu(stdscr) -> None:
    stdscr.nodelay(False)
    key = None
    while key != ord("1"):
        _draw(stdscr, _MENU + "\n" * 24 + "            |Ajuste su consola a esta medida|")
        key = stdscr.getch()
        if key == ord("2"):
            _draw(stdscr, _INSTRUCTIONS)
            key = stdscr.getch()


def _play(stdscr, game: TaxiGame) -> None:
    curses.noecho()
    stdscr.nodelay(True)
    while not game.crashed:
        game.spawn_cars()
        key = stdscr.getch()
        curses.napms(game.speed)
        if key in (ord("a"), ord("A")):
            game.move_left()
        elif key in (ord("d"), ord("D")):
            game.move_right()
        elif key in (ord("p"), ord("P")):
            _pause(stdscr)
        _draw(stdscr, game.render())
        game.move_cars()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the menu and play one game in the terminal."""
    parser = argparse.ArgumentParser(prog="taxi", description="Dodge the oncoming traffic.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the traffic")
    args = parser.parse_args(argv)
    game = TaxiGame(random.Random(args.seed))

    def session(stdscr) -> None:
        _menu(stdscr)
        _play(stdscr, game)

    try:
        curses.wrapper(session)
    except KeyboardInterrupt:
        pass
    print(f"Puntaje: {game.score}")
    return 0
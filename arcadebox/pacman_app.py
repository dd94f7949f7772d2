"""Terminal front end of the maze game: menu, levels, drawing, map editor and records."""

from __future__ import annotations

import argparse
import curses
import time
from itertools import groupby
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from arcadebox.pacman_board import FINAL_LEVEL, HEIGHT, WIDTH, Direction, PacmanBoard, Tile

RECORDS_FILE = "records"
RECORD_LIMIT = 30
NAME_LENGTH = 14
ENTER = 10

RED, GREEN, YELLOW, BLUE, CYAN, MAGENTA = 1, 2, 3, 4, 5, 6
DIAMOND = "\u25c6"

_TITLE = (
    " _____   ",
    "|  __ \\ ",
    "| |__) |_ _  ___ _ __ ___   __ _ _ __ ",
    "|  ___/ _` |/ __| '_ ` _ \\ / _` | '_ \\ ",
    "| |  | (_| | (__| | | | | | (_| | | | |",
    "|_|   \\__,_|\\___|_| |_| |_|\\__,_|_| |_|",
)
_MENU_OPTIONS = (
    "              Jugar",
    "              Records",
    "              Crea Tu Propio Mapa",
    "              Juega un mapa creado",
)
_RECORDS_TITLE = (
    "      ____                           __ ",
    "     / __ \\___  _________  _________/ /____",
    "    / /_/ / _ \\/ ___/ __ \\/ ___/ __  / ___/",
    "   / _, _/  __/ /__/ /_/ / /  / /_/ (__  ) ",
    "  /_/ |_|\\___/\\___/\\____/_/   \\__,_/____/  ",
)
_CUSTOM_BANNER = {
    7: "     _____   _    _    _____   _______    ____    __  __   ",
    8: "    / ____| | |  | |  / ____| |__   __|  / __ \\  |  \\/  |  ",
    9: "   | |      | |  | | | (___      | |    | |  | | | \\  / |  ",
    10: "   | |      | |  | |  \\___ \\     | |    | |  | | | |\\/| |  ",
    11: "   | |____  | |__| |  ____) |    | |    | |__| | | |  | |  ",
    12: "    \\_____|  \\____/  |_____/_    |_|     \\____/  |_|  |_|  ",
    15: "   |  \\/  |     /\\     |  __ \\      ",
    16: "   | \\  / |    /  \\    | |__) |   ",
    17: "   | |\\/| |   / /\\ \\   |  ___/    ",
    18: "   | |  | |  / ____ \\  | |         ",
    19: "   |_|  |_| /_/    \\_\\ |_|         ",
}
_LEVEL_BANNERS = {
    1: ("    __", "  /_  | er ", "    | |", "    | |", "    | |", "    |_|"),
    2: ("    ___", "   |__ \\   do", "      ) |", "     / / ", "    / /_ ", "   |____|"),
    3: ("    ____  ", "   |___ \\  r ", "     __) |", "    |__ < ", "    ___) |", "   |____/ "),
    4: ("    _  _ ", "   | || |  to", "   | || |_ ", "   |__   _|", "      | |  ", "      |_|  "),
    5: ("    _____ ", "   | ____|  to", "   | |__  ", "   |___ \\ ", "    ___) |", "   |____/ "),
    6: ("      __ ", "     / /   to", "    / /_  ", "   | '_ \\  ", "   | (_) |", "    \\___/ "),
}
_LEVEL_WORD = (
    "       __  _               _ ",
    "    /\\ \\ \\(_)__   __  ___ | |",
    "   /  \\/ /| |\\ \\ / / / _ \\| |",
    "  / /\\  / | | \\ V / |  __/| |",
    "  \\_\\ \\/  |_|  \\_/   \\___||_|",
)
_HEART = (",d88b.d88b,", "88888888888", "`Y8888888Y'", "  `Y888Y'  ", "    `Y'    ")
_GAME_OVER = (
    "    /\\  \\       /\\  \\       /\\__\\       /\\  \\             /\\  \\      /\\__\\       /\\  \\       /\\  \\   ",
    "   /::\\  \\     /::\\  \\     /::|  |     /::\\  \\           /::\\  \\    /:/  /      /::\\  \\     /::\\  \\   ",
    "  /:/\\:\\  \\   /:/\\:\\  \\   /:|:|  |    /:/\\:\\  \\         /:/\\:\\  \\  /:/  /      /:/\\:\\  \\   /:/\\:\\  \\  ",
    " /:/  \\:\\  \\ /::\\~\\:\\  \\ /:/|:|__|__ /::\\~\\:\\  \\       /:/  \\:\\  \\/:/__/  ___ /::\\~\\:\\  \\ /::\\~\\:\\  \\ ",
    "/:/__/_\\:\\__/:/\\:\\ \\:\\__/:/ |::::\\__/:/\\:\\ \\:\\__\\     /:/__/ \\:\\__|:|  | /\\__/:/\\:\\ \\:\\__/:/\\:\\ \\:\\__\\",
    "\\:\\  /\\ \\/__\\/__\\:\\/:/  \\/__/~~/:/  \\:\\~\\:\\ \\/__/     \\:\\  \\ /:/  |:|  |/:/  \\:\\~\\:\\ \\/__\\/_|::\\/:/  /",
    " \\:\\ \\:\\__\\      \\::/  /      /:/  / \\:\\ \\:\\__\\        \\:\\  /:/  /|:|__/:/  / \\:\\ \\:\\__\\    |:|::/  / ",
    "  \\:\\/:/  /      /:/  /      /:/  /   \\:\\ \\/__/         \\:\\/:/  /  \\::::/__/   \\:\\ \\/__/    |:|\\/__/  ",
    "   \\::/  /      /:/  /      /:/  /     \\:\\__\\            \\::/  /    ~~~~        \\:\\__\\      |:|  |    ",
    "    \\/__/       \\/__/       \\/__/       \\/__/             \\/__/                  \\/__/       \\|__|  ",
)
_EDITOR_HELP = (
    "(Z) Fantasma  (X) Pared  (C) Frutillas  (V) Pared Falsa  (A) Borrar  (Q) Salir",
    "(D) Horizontal de pared  (F) Vertical de pared  (L) Borrar Todo",
    "",
    " Nota: Si no detecta teclado verificar bloq mayus!",
)
_MAP_PROMPT = "Escriba el nombre del mapa (Sin espacios): "


def read_records(path: Union[str, Path] = RECORDS_FILE) -> list[str]:
    """Return the saved winners' names, at most RECORD_LIMIT; none if the file is missing."""
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        return []
    return text.split()[:RECORD_LIMIT]


def append_record(path: Union[str, Path], name: str) -> None:
    """Add a winner's name to the end of the records file."""
    with open(path, "a") as handle:
        handle.write(f"{name}\n")


def _colour(pair: int) -> int:
    try:
        return curses.color_pair(pair)
    except curses.error:
        return 0


def _set_echo(on: bool) -> None:
    try:
        curses.echo() if on else curses.noecho()
    except curses.error:
        pass


class PacmanApp:
    """Drives one game on a curses-like screen."""

    def __init__(self, screen) -> None:
        self.screen = screen
        self.board = PacmanBoard()
        self.editing = False
        self.records_path: Union[str, Path] = RECORDS_FILE
        self.sleep: Callable[[int], None] = lambda ms: time.sleep(ms / 1000)

    # -- screen helpers ------------------------------------------------

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        try:
            self.screen.addstr(y, x, text, attr)
        except curses.error:
            pass

    def _read_line(self, y: int, prompt: str) -> str:
        self._put(y, 0, prompt)
        self.screen.refresh()
        self.screen.nodelay(False)
        _set_echo(True)
        try:
            raw = self.screen.getstr(y, len(prompt), NAME_LENGTH)
        finally:
            _set_echo(False)
        if isinstance(raw, bytes):
            raw = raw.decode(errors="replace")
        return raw.strip()

    # -- menu and records ----------------------------------------------

    def _draw_menu(self, choice: int) -> None:
        self.screen.erase()
        for row, line in enumerate(_TITLE):
            self._put(row, 0, line, _colour(YELLOW))
        for row, line in enumerate(_MENU_OPTIONS, start=7):
            self._put(row, 0, line)
        self._put(7 + choice, 6, "--->")
        self.screen.refresh()

    def menu(self) -> int:
        """Show the main menu until a game starts, then play it and return its result."""
        self.screen.nodelay(False)
        choice = 0
        while True:
            self._draw_menu(choice)
            key = self.screen.getch()
            if key == curses.KEY_UP and choice > 0:
                choice -= 1
            elif key == curses.KEY_DOWN and choice < 3:
                choice += 1
            elif key in (ENTER, curses.KEY_ENTER):
                if choice == 0:
                    break
                if choice == 1:
                    self.show_records()
                elif choice == 2:
                    self.edit_map()
                else:
                    self.screen.erase()
                    name = self._read_line(0, _MAP_PROMPT)
                    try:
                        self.board.load(name)
                    except (OSError, ValueError) as exc:
                        self._put(2, 0, f"No se pudo abrir el mapa: {exc}")
                        self.screen.refresh()
                        self.sleep(2000)
                        continue
                    break
        return self.play()

    def show_records(self) -> None:
        """Show the names stored in the records file for a few seconds."""
        self.screen.erase()
        for row, line in enumerate(_RECORDS_TITLE):
            self._put(row, 0, line)
        for row, name in enumerate(read_records(self.records_path), start=len(_RECORDS_TITLE) + 1):
            self._put(row, 0, name)
        self.screen.refresh()
        self.sleep(5000)

    # -- playing -------------------------------------------------------

    def play(self) -> int:
        """Run the game loop; return 1 if the player lost, 0 if won, otherwise 2."""
        _set_echo(False)
        self.screen.nodelay(True)
        board = self.board
        if board.custom_map:
            board.level = 0
        headings = {
            curses.KEY_LEFT: Direction.LEFT,
            curses.KEY_RIGHT: Direction.RIGHT,
            curses.KEY_DOWN: Direction.DOWN,
            curses.KEY_UP: Direction.UP,
        }
        while not board.crashed and not board.won:
            if board.needs_level:
                self.show_level_banner()
            key = self.screen.getch()
            self.sleep(board.speed)
            self.screen.erase()
            if key in headings:
                board.direction = headings[key]
            elif key == ord("p"):
                self.pause()
            board.step()
            self.draw()
        if board.crashed:
            return 1
        return 0 if board.won else 2

    def draw(self) -> None:
        """Draw the board, the ghost, the player, the lives and the frame."""
        board = self.board
        glyphs = {
            Tile.EMPTY: (" ", 0),
            Tile.WALL: ("/", 0),
            Tile.FRUIT: ("X", _colour(YELLOW)),
            Tile.FAKE_WALL: ("/", _colour(CYAN) if self.editing else 0),
        }
        for y, row in enumerate(board.grid):
            x = 0
            for tile, run in groupby(row):
                count = len(list(run))
                glyph, attr = glyphs.get(tile, ("h", 0))
                self._put(y + 1, x, glyph * count, attr)
                x += count
        self._put(board.ghost_y + 1, board.ghost_x, DIAMOND, _colour(RED))
        self._put(board.player_y + 1, board.player_x, DIAMOND, _colour(GREEN))
        if not self.editing:
            self._put(HEIGHT + 3, 5, "          VIDAS:")
            for life in range(board.lives):
                for offset, line in enumerate(_HEART):
                    self._put(HEIGHT + 5 + offset, 5 + life * 15, line)
        if board.level == FINAL_LEVEL:
            self._put(2, WIDTH - 25, "I was just joking")
        self._put(0, 0, "-" * WIDTH)
        self._put(HEIGHT + 1, 0, "-" * WIDTH)
        self.screen.refresh()

    def _level_word(self) -> None:
        left = WIDTH // 2 - 14
        for row, line in enumerate(_LEVEL_WORD, start=17):
            self._put(row, left, line)
        self.screen.refresh()
        if self.board.level == FINAL_LEVEL:
            self._put(24, left, "Preparando el nivel mas dificil de todos...")
            self._put(26, left, "<")
            self._put(26, WIDTH // 2 + 13, ">")
            for i in range(0, 26, 2):
                self.sleep(1000)
                self._put(26, WIDTH // 2 - 13 + i, "--")
                self.screen.refresh()

    def show_level_banner(self) -> None:
        """Announce the current level, then set up its board."""
        level = self.board.level
        if level == 0:
            self.screen.erase()
            for row, line in _CUSTOM_BANNER.items():
                self._put(row, WIDTH // 2 - 20, line)
            self.screen.refresh()
            self.sleep(2000)
        elif level in _LEVEL_BANNERS:
            self.screen.erase()
            for row, line in enumerate(_LEVEL_BANNERS[level], start=10):
                self._put(row, WIDTH // 2 - 8, line)
            self._level_word()
            if level != FINAL_LEVEL:
                self.sleep(2000)
        self.board.start_level()

    def pause(self) -> None:
        """Show PAUSA and wait for the p key."""
        self._put(HEIGHT // 2, WIDTH // 2, "PAUSA")
        self.screen.refresh()
        self.screen.nodelay(False)
        while self.screen.getch() != ord("p"):
            self.sleep(500)
        self.screen.nodelay(True)

    # -- map editor ----------------------------------------------------

    def edit_map(self) -> None:
        """Edit the board with the player as cursor, then offer to save it."""
        board = self.board
        self.editing = True
        _set_echo(False)
        self.screen.nodelay(False)
        placing = {ord("x"): Tile.WALL, ord("c"): Tile.FRUIT, ord("v"): Tile.FAKE_WALL, ord("a"): Tile.EMPTY}
        help_row = HEIGHT + 3
        while True:
            self.screen.erase()
            self.draw()
            for offset, line in enumerate(_EDITOR_HELP):
                self._put(help_row + offset, 0, line)
            self.screen.refresh()
            key = self.screen.getch()
            if key == curses.KEY_LEFT and board.player_x > 0:
                board.player_x -= 1
            elif key == curses.KEY_RIGHT and board.player_x < WIDTH - 1:
                board.player_x += 1
            elif key == curses.KEY_DOWN and board.player_y < HEIGHT - 1:
                board.player_y += 1
            elif key == curses.KEY_UP and board.player_y > 0:
                board.player_y -= 1
            elif key == ord("z"):
                board.ghost_x, board.ghost_y = board.player_x, board.player_y
            elif key in placing:
                board.grid[board.player_y][board.player_x] = placing[key]
            elif key == ord("d"):
                board.fill_row(board.player_y)
            elif key == ord("f"):
                board.fill_column(board.player_x)
            elif key == ord("l"):
                self._put(help_row + 6, 0, "Seguro quiere borrar todo?")
                self._put(help_row + 7, 0, " (1) SI   (2) NO")
                self.screen.refresh()
                if self.screen.getch() == ord("1"):
                    board.clear()
            elif key == ord("q"):
                break
        self.screen.erase()
        self._put(0, 0, "Desea guardar el mapa?")
        self._put(1, 0, " (1) Si    (2) No")
        self.screen.refresh()
        if self.screen.getch() == ord("1"):
            name = self._read_line(3, _MAP_PROMPT)
            board.save(name)
        self.editing = False


def _game_over(app: PacmanApp) -> bool:
    """Show the game-over screen; return True to play again."""
    for row, line in enumerate(_GAME_OVER, start=10):
        app._put(row, 0, line, _colour(RED))
    app._put(22, WIDTH // 2 - 10, "(1) Jugar de Nuevo?", _colour(RED))
    app._put(23, WIDTH // 2 - 10, "(2) Salir", _colour(RED))
    app.screen.refresh()
    app.screen.nodelay(False)
    key = None
    while key not in (ord("1"), ord("2")):
        key = app.screen.getch()
    return key == ord("1")


def _victory(app: PacmanApp) -> bool:
    """Congratulate the player and offer to store the name; return True to go on."""
    app.screen.nodelay(False)
    app._put(HEIGHT // 2 - 5, WIDTH // 2 - 10, "Has ganado el juego!")
    app._put(HEIGHT // 2 - 3, WIDTH // 2 - 10, "Guardar Nombre?")
    app._put(HEIGHT // 2, WIDTH // 2 - 10, "(1) Si       (2) No")
    app.screen.refresh()
    if app.screen.getch() != ord("1"):
        return False
    app.screen.erase()
    name = app._read_line(HEIGHT // 2 - 2, "Ingrese su Nombre: ")
    if name:
        append_record(app.records_path, name)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the maze game in the terminal until the player quits."""
    parser = argparse.ArgumentParser(prog="pacman", description="Eat the fruit and dodge the ghost.")
    parser.add_argument("--records", default=RECORDS_FILE, help="file that keeps the winners' names")
    args = parser.parse_args(argv)

    def session(stdscr) -> None:
        curses.start_color()
        for pair, colour in enumerate(
            (curses.COLOR_RED, curses.COLOR_GREEN, curses.COLOR_YELLOW, curses.COLOR_BLUE,
             curses.COLOR_CYAN, curses.COLOR_MAGENTA, curses.COLOR_RED),
            start=1,
        ):
            curses.init_pair(pair, colour, curses.COLOR_BLACK)
        stdscr.keypad(True)
        while True:
            app = PacmanApp(stdscr)
            app.records_path = args.records
            result = app.menu()
            stdscr.erase()
            if result == 1:
                if not _game_over(app):
                    return
            else:
                if result == 0 and not _victory(app):
                    return
                app.sleep(1000)

    try:
        curses.wrapper(session)
    except KeyboardInterrupt:
        pass
    return 0
"""Board, levels and movement rules of the console maze game."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Union

HEIGHT = 30
WIDTH = 100
START_LIVES = 3
FINAL_LEVEL = 6


class Tile(IntEnum):
    """What a board square holds."""

    EMPTY = 0
    WALL = 1
    FRUIT = 2
    FAKE_WALL = 3


class Direction(IntEnum):
    """Player heading; opposite directions are negatives of each other."""

    NONE = 0
    LEFT = -1
    RIGHT = 1
    DOWN = -2
    UP = 2


class _Obstacle(IntEnum):
    NONE = 0
    BELOW = 1
    ABOVE = 2
    LEFT = 3
    RIGHT = 4


class PacmanBoard:
    """The maze, the player, the ghost and the level progression."""

    def __init__(self) -> None:
        self.grid: list[list[int]] = [[Tile.EMPTY] * WIDTH for _ in range(HEIGHT)]
        self.lives = START_LIVES
        self.crashed = False
        self.won = False
        self.needs_level = True
        self.custom_map = False
        self.level = 1
        self.speed = 70
        self.direction = Direction.NONE
        self.player_x = 5
        self.player_y = 5
        self.ghost_x = WIDTH // 2
        self.ghost_y = HEIGHT // 2
        self._obstacle = _Obstacle.NONE
        self._obstacle_fresh = False
        self._span_plus = 0
        self._span_minus = 0
        self._draw_initial_map()
        self.fruit = 0
        self.count_fruit()

    def _draw_initial_map(self) -> None:
        g = self.grid
        mid = HEIGHT // 2
        for i in range(8):
            g[mid - 1][i] = Tile.WALL
            g[mid + 1][i] = Tile.WALL
            g[mid - 1][WIDTH - 1 - i] = Tile.WALL
            g[mid + 1][WIDTH - 1 - i] = Tile.WALL
            g[mid - 4 - i][3] = Tile.WALL
            g[mid + 4 + i][3] = Tile.WALL
            g[mid - 4 - i][WIDTH - 4] = Tile.WALL
            g[mid + 4 + i][WIDTH - 4] = Tile.WALL
        for i in range(11):
            g[mid + 2 + i][0] = Tile.WALL
            g[mid - 2 - i][0] = Tile.WALL
            g[mid + 2 + i][WIDTH - 1] = Tile.WALL
            g[mid - 2 - i][WIDTH - 1] = Tile.WALL
        self._side_fruit()
        for i in range(41):
            g[HEIGHT - 1][i] = Tile.WALL
            g[0][i] = Tile.WALL
            g[HEIGHT - 1][WIDTH - 1 - i] = Tile.WALL
            g[0][WIDTH - 1 - i] = Tile.WALL
            for row in (mid + 2, mid - 2, mid + 6, mid - 6):
                g[row][WIDTH // 2 - 20 + i] = Tile.WALL

    def _side_fruit(self) -> None:
        mid = HEIGHT // 2
        for i in range(11):
            for row in (mid + 2 + i, mid - 2 - i):
                self.grid[row][1] = Tile.FRUIT
                self.grid[row][WIDTH - 2] = Tile.FRUIT

    def _middle_fruit(self) -> None:
        mid = HEIGHT // 2
        for i in range(0, 41, 2):
            for row in (mid, mid + 4, mid - 4):
                self.grid[row][WIDTH // 2 - 20 + i] = Tile.FRUIT

    # -- queries -------------------------------------------------------

    def count_fruit(self) -> int:
        """Recount the fruit on the board, store it and return it."""
        self.fruit = sum(row.count(Tile.FRUIT) for row in self.grid)
        return self.fruit

    def _flat(self, y: int, x: int) -> int:
        # The board is read as one row-major strip; anything outside is empty.
        index = y * WIDTH + x
        if 0 <= index < HEIGHT * WIDTH:
            return self.grid[index // WIDTH][index % WIDTH]
        return Tile.EMPTY

    @staticmethod
    def _inside(y: int, x: int) -> bool:
        return 0 <= y < HEIGHT and 0 <= x < WIDTH

    def _open(self, y: int, x: int) -> bool:
        return self._inside(y, x) and self.grid[y][x] != Tile.WALL

    def _wall_run(self, y: int, x: int, dy: int, dx: int) -> int:
        count = 0
        while self._flat(y, x) == Tile.WALL:
            y += dy
            x += dx
            count += 1
        return count

    # -- levels --------------------------------------------------------

    def start_level(self) -> None:
        """Place the pieces and build the map for the current level."""
        centre = (WIDTH // 2, HEIGHT // 2)
        if self.level == 1:
            self._place((5, 5), centre)
        elif self.level in (2, 3, 4, 6):
            self._place((5, 5), centre)
            self.apply_level_map()
        elif self.level == 5:
            self._place((WIDTH - 2, HEIGHT - 2), (2, HEIGHT - 2))
            self.apply_level_map()
        elif self.level > FINAL_LEVEL:
            self.won = True
        self.needs_level = False

    def _place(self, player: tuple[int, int], ghost: tuple[int, int]) -> None:
        self.player_x, self.player_y = player
        self.ghost_x, self.ghost_y = ghost
        self.direction = Direction.NONE

    def apply_level_map(self) -> None:
        """Rebuild the board for the current level and recount the fruit."""
        g = self.grid
        mid = HEIGHT // 2
        if 1 < self.level < 5:
            self._side_fruit()
            self._middle_fruit()
        if self.level in (3, 4):
            for i in range(11):
                g[mid - 5 + i][WIDTH // 4 - 2] = Tile.WALL
                g[mid - 5 + i][WIDTH // 4 * 3 + 2] = Tile.WALL
                if i % 2 == 0:
                    g[mid - 5 + i][WIDTH // 4] = Tile.FRUIT
                    g[mid - 5 + i][WIDTH // 4 * 3] = Tile.FRUIT
            self._middle_fruit()
        if self.level == 4:
            self._border()
            g[mid][0] = Tile.EMPTY
            g[mid][WIDTH - 1] = Tile.EMPTY
        if self.level == 5:
            self._level_five()
        if self.level == 6:
            self.clear()
            self._border()
            for i in range(6):
                g[mid - 3 + i][WIDTH // 2 - 3] = Tile.WALL
                g[mid - 3 + i][WIDTH // 2 + 3] = Tile.WALL
                g[mid - 3][WIDTH // 2 - 3 + i] = Tile.WALL
                g[mid + 3][WIDTH // 2 - 3 + i] = Tile.WALL
            g[25][70] = Tile.FRUIT
        self.count_fruit()

    def _border(self) -> None:
        for row in self.grid:
            row[0] = Tile.WALL
            row[WIDTH - 1] = Tile.WALL
        self.grid[0] = [Tile.WALL] * WIDTH
        self.grid[HEIGHT - 1] = [Tile.WALL] * WIDTH

    def _level_five(self) -> None:
        g = self.grid
        for y in range(HEIGHT):
            g[y] = [Tile.WALL] * WIDTH
        for x in range(WIDTH - 1):
            for y in (*range(HEIGHT - 8, HEIGHT), 1, 2, 3):
                g[y][x] = Tile.EMPTY
        for y in range(HEIGHT - 1):
            for x in (2, 3, 4):
                g[y][x] = Tile.EMPTY
        for y in range(1, HEIGHT - 8):
            g[y][WIDTH - 2] = Tile.FAKE_WALL
            g[y][WIDTH - 3] = Tile.FAKE_WALL
        step = 7
        for i in range(WIDTH // 2):
            g[HEIGHT - 1][i + step] = Tile.WALL
            g[HEIGHT - 2][i + step * 2] = Tile.WALL
            g[HEIGHT - 3][i + step * 3] = Tile.WALL
            for k in (4, 5, 6):
                g[HEIGHT - 4][i + step * k] = Tile.WALL
        g[2][2] = Tile.FRUIT

    # -- movement ------------------------------------------------------

    def _sidestep_horizontal(self) -> None:
        if self._span_plus > self._span_minus:
            if self._open(self.ghost_y, self.ghost_x - 1):
                self.ghost_x -= 1
            else:
                self._span_plus = 0
                if self._span_plus == 0 and self._span_minus == 0:
                    self._obstacle = _Obstacle.NONE
        elif self._open(self.ghost_y, self.ghost_x + 1):
            self.ghost_x += 1
        else:
            self._span_minus = 0
            if self._span_plus == 0 and self._span_minus == 0:
                self._obstacle = _Obstacle.NONE

    def _sidestep_vertical(self) -> None:
        if self._span_plus > self._span_minus:
            if self._open(self.ghost_y - 1, self.ghost_x):
                self.ghost_y -= 1
            else:
                self._span_plus = 0
                if self._span_plus == 0 and self._span_minus == 0:
                    self._obstacle = _Obstacle.NONE
        elif self._open(self.ghost_y + 1, self.ghost_x):
            self.ghost_y += 1
        else:
            self._span_minus = 0
            if self._span_plus == 0 and self._span_minus == 0:
                self._obstacle = _Obstacle.NONE

    def _follow_obstacle(self) -> None:
        kind = self._obstacle
        if kind in (_Obstacle.BELOW, _Obstacle.ABOVE):
            row = self.ghost_y + (1 if kind == _Obstacle.BELOW else -1)
            turn = True
            if self._flat(row, self.ghost_x) == Tile.EMPTY:
                self._obstacle = _Obstacle.NONE
                turn = False
            if self._obstacle_fresh:
                self._span_plus = self._wall_run(row, self.ghost_x, 0, 1)
                self._span_minus = self._wall_run(row, self.ghost_x, 0, -1)
                self._obstacle_fresh = False
            if turn:
                self._sidestep_horizontal()
            return
        dx = -1 if kind == _Obstacle.LEFT else 1
        turn = True
        if self._flat(self.ghost_y, self.ghost_x + dx) == Tile.EMPTY:
            self._obstacle = _Obstacle.NONE
            if self._inside(self.ghost_y, self.ghost_x + dx):
                self.ghost_x += dx
            turn = False
        if self._obstacle_fresh:
            column = self.ghost_x + dx
            self._span_plus = self._wall_run(self.ghost_y, column, 1, 0)
            self._span_minus = self._wall_run(self.ghost_y, column, -1, 0)
            self._obstacle_fresh = False
        if turn:
            self._sidestep_vertical()

    def _block(self, kind: _Obstacle) -> None:
        self._obstacle = kind
        self._obstacle_fresh = True

    def move_ghost(self) -> None:
        """Move the ghost one square towards the player, walking round walls."""
        if self._obstacle != _Obstacle.NONE:
            self._follow_obstacle()
            return
        x, y = self.ghost_x, self.ghost_y
        if y != self.player_y:
            if self.player_y > y:
                if self._flat(y + 1, x) != Tile.WALL:
                    self.ghost_y += 1
                    return
                if x == self.player_x:
                    self._block(_Obstacle.BELOW)
                    return
            else:
                if self._flat(y - 1, x) != Tile.WALL:
                    self.ghost_y -= 1
                    return
                if x == self.player_x:
                    self._block(_Obstacle.ABOVE)
                    return
        if self.player_x > x:
            if self._flat(y, x + 1) != Tile.WALL:
                self.ghost_x += 1
            else:
                self._block(_Obstacle.RIGHT)
        elif self.player_x < x:
            if self._flat(y, x - 1) != Tile.WALL:
                self.ghost_x -= 1
            else:
                self._block(_Obstacle.LEFT)

    def move_player(self) -> None:
        """Move the player one square in its direction, wrapping at the edges."""
        x, y = self.player_x, self.player_y
        if self.direction == Direction.LEFT:
            target = (y, WIDTH - 1) if x == 0 else (y, x - 1)
        elif self.direction == Direction.RIGHT:
            target = (y, 0) if x == WIDTH - 1 else (y, x + 1)
        elif self.direction == Direction.UP:
            target = (HEIGHT - 1, x) if y == 0 else (y - 1, x)
        elif self.direction == Direction.DOWN:
            target = (0, x) if y == HEIGHT - 1 else (y + 1, x)
        else:
            return
        ty, tx = target
        if self.grid[ty][tx] != Tile.WALL:
            self.player_y, self.player_x = ty, tx

    def step(self) -> None:
        """Advance one tick: ghost, catches, fruit, level progress, then player."""
        self.move_ghost()
        if (self.ghost_x, self.ghost_y) == (self.player_x, self.player_y):
            self.lives -= 1
            if self.lives == 0:
                self.crashed = True
            else:
                self.needs_level = True
        if self.grid[self.player_y][self.player_x] == Tile.FRUIT:
            self.grid[self.player_y][self.player_x] = Tile.EMPTY
            self.fruit -= 1
        if self.fruit == 0:
            if self.custom_map:
                self.won = True
            else:
                self.level += 1
                self.needs_level = True
        self.move_player()

    # -- editing -------------------------------------------------------

    def clear(self) -> None:
        """Empty every square."""
        self.grid = [[Tile.EMPTY] * WIDTH for _ in range(HEIGHT)]
        self.fruit = 0

    def fill_row(self, y: int) -> None:
        """Turn a whole row into wall."""
        self.grid[y] = [Tile.WALL] * WIDTH

    def fill_column(self, x: int) -> None:
        """Turn a whole column into wall."""
        for row in self.grid:
            row[x] = Tile.WALL

    def save(self, path: Union[str, Path]) -> None:
        """Write the map and the player and ghost positions to a file."""
        values = [str(int(v)) for row in self.grid for v in row]
        lines = values + [str(self.player_y), str(self.player_x), str(self.ghost_y)]
        Path(path).write_text("\n".join(lines) + "\n" + str(self.ghost_x))

    def load(self, path: Union[str, Path]) -> None:
        """Read a saved map and play it as a custom level."""
        tokens = Path(path).read_text().split()
        needed = HEIGHT * WIDTH + 4
        if len(tokens) < needed:
            raise ValueError(f"map file holds {len(tokens)} values, expected {needed}")
        numbers = [int(token) for token in tokens[:needed]]
        cells, tail = numbers[: HEIGHT * WIDTH], numbers[HEIGHT * WIDTH:]
        self.grid = [cells[y * WIDTH:(y + 1) * WIDTH] for y in range(HEIGHT)]
        self.player_y, self.player_x, self.ghost_y, self.ghost_x = tail
        self.custom_map = True
        self.level = 0
        self.needs_level = True
        self.count_fruit()
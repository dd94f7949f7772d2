"""Window that shows the grid search following the mouse pointer."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from arcadebox.bfs_grid import Area, Cell, Grid
from arcadebox.timer import Timer

DEFAULT_FONT = "data/8-BIT.ttf"
WINDOW_TITLE = "TBGYWES"
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
PATH_COLOR = (255, 0, 255)
WALL_COLOR = (0, 0, 0)
LINE_COLOR = (0, 0, 0)
FPS_LIMIT = 2_000_000


class FontCache:
    """Opens a font file once per size."""

    def __init__(self, path: Optional[str]) -> None:
        self.path = path
        self._fonts: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        """Return the font at the given size, opening it if needed."""
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(self.path, size)
            self._fonts[size] = font
        return font


class TextLabel:
    """A line of text rendered once and drawn many times."""

    def __init__(self, text: str, font: pygame.font.Font, color, smooth: bool = True) -> None:
        self.font = font
        self.color = color
        self._render(text, smooth)

    def _render(self, text: str, smooth: bool) -> None:
        self.text = text
        self.surface = self.font.render(text, smooth, self.color)
        self.width, self.height = self.surface.get_size()

    def set_text(self, text: str) -> None:
        """Replace the text, rendering it quickly without smoothing."""
        self._render(text, False)

    def render(self, surface: pygame.Surface, x: int, y: int) -> None:
        """Draw the label with its top-left corner at (x, y)."""
        surface.blit(self.surface, (x, y))


def _rect(area: Area) -> pygame.Rect:
    return pygame.Rect(area.x, area.y, area.width, area.height)


def draw_grid(surface: pygame.Surface, grid: Grid) -> None:
    """Draw the path, the end cell, the walls and the grid lines."""
    for x, y in grid.path:
        surface.fill(PATH_COLOR, _rect(grid.cell_rect(x, y)))
    surface.fill(PATH_COLOR, _rect(grid.cell_rect(*grid.end)))
    for x, y in grid.walls:
        surface.fill(WALL_COLOR, _rect(grid.cell_rect(x, y)))
    area = grid.area
    right = area.x + area.width
    bottom = area.y + area.height
    for x in range(area.x, right + 1, grid.cell_width):
        pygame.draw.line(surface, LINE_COLOR, (x, area.y), (x, bottom))
    for y in range(area.y, bottom + 1, grid.cell_height):
        pygame.draw.line(surface, LINE_COLOR, (area.x, y), (right, y))


def _window_size() -> tuple[int, int]:
    info = pygame.display.Info()
    if info.current_w > 0 and info.current_h > 0:
        return info.current_w // 2, info.current_h // 2
    return 800, 600


def run(rows: int, columns: int, font_path: Optional[str] = DEFAULT_FONT) -> None:
    """Open the window and run until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(_window_size(), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        fonts = FontCache(font_path)
        title = TextLabel("BFS TEST", fonts.get(50), BLACK, smooth=True)
        fps = TextLabel("0", fonts.get(20), BLACK, smooth=False)
        width, height = screen.get_size()
        top = title.height + 20
        grid = Grid(columns, rows, Area(0, top, width, height - top - 10))
        timer = Timer(pygame.time.get_ticks)
        timer.start()
        frames = 0
        running = True
        while running:
            elapsed = timer.ticks()
            average = frames / (elapsed / 1000) if elapsed else 0.0
            if average > FPS_LIMIT:
                average = 0.0
            fps.set_text(f"{average:f}")
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    grid.track_mouse(*event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:
                        grid.apply(Cell.WALL, *event.pos)
                    elif event.button == 3:
                        grid.apply(Cell.START, *event.pos)
            screen.fill(WHITE)
            title.render(screen, width // 2 - title.width // 2, 10)
            fps.render(screen, width - fps.width, 0)
            draw_grid(screen, grid)
            pygame.display.flip()
            frames += 1
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the search window for a grid of the given size."""
    parser = argparse.ArgumentParser(prog="bfs", description="Watch a breadth-first search.")
    parser.add_argument("rows", type=int, help="number of grid rows")
    parser.add_argument("columns", type=int, help="number of grid columns")
    parser.add_argument("--font", default=DEFAULT_FONT, help="TrueType font file")
    args = parser.parse_args(argv)
    run(args.rows, args.columns, args.font)
    return 0
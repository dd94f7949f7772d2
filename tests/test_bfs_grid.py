import pytest

from arcadebox.bfs_grid import Area, Cell, Grid


def _grid(columns=10, rows=5):
    return Grid(columns, rows, Area(0, 0, columns * 20, rows * 20))


def _centre(grid, node):
    rect = grid.cell_rect(*node)
    return rect.x + rect.width // 2, rect.y + rect.height // 2


def _adjacent(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def test_initial_start_and_end():
    grid = _grid()
    assert grid.start == (0, 0)
    assert grid.end == (grid.columns - 1, grid.rows - 1)
    assert grid.path == []


def test_neighbour_order_in_middle():
    grid = _grid()
    assert grid.neighbours((2, 2)) == [(1, 2), (3, 2), (2, 1), (2, 3)]


def test_corner_has_two_neighbours():
    grid = _grid()
    assert set(grid.neighbours((0, 0))) == {(1, 0), (0, 1)}


def test_neighbours_outside_raises():
    grid = _grid()
    with pytest.raises(ValueError):
        grid.neighbours((grid.columns, 0))


def test_open_grid_path_is_shortest_and_connected():
    grid = _grid()
    path = grid.search()
    ex, ey = grid.end
    assert len(path) == ex + ey
    assert path[-1] == grid.start
    assert _adjacent(path[0], grid.end)
    assert all(_adjacent(a, b) for a, b in zip(path, path[1:]))


def test_path_goes_round_walls():
    grid = _grid()
    for y in range(grid.rows - 1):
        grid.walls.add((4, y))
    path = grid.search((8, 0))
    assert path
    assert not set(path) & grid.walls
    assert path[-1] == grid.start
    assert all(_adjacent(a, b) for a, b in zip(path, path[1:]))
    assert (4, grid.rows - 1) in path


def test_unreachable_end_gives_empty_path():
    grid = _grid()
    for y in range(grid.rows):
        grid.walls.add((4, y))
    assert grid.search((8, 0)) == []
    assert grid.path == []


def test_wall_end_gives_empty_path():
    grid = _grid()
    grid.walls.add((3, 3))
    assert grid.search((3, 3)) == []


def test_end_on_start_gives_empty_path():
    grid = _grid()
    assert grid.search(grid.start) == []


def test_search_with_end_outside_raises():
    grid = _grid()
    with pytest.raises(ValueError):
        grid.search((0, grid.rows))


def test_area_is_snapped_to_whole_cells():
    grid = Grid(10, 5, Area(0, 0, 105, 53))
    assert grid.area.width == grid.cell_width * grid.columns
    assert grid.area.height == grid.cell_height * grid.rows
    assert grid.area.width <= 105 and grid.area.height <= 53


def test_invalid_sizes_raise():
    with pytest.raises(ValueError):
        Grid(0, 5, Area(0, 0, 100, 100))
    with pytest.raises(ValueError):
        Grid(50, 5, Area(0, 0, 10, 100))


def test_cell_at_matches_cell_rect():
    grid = _grid()
    for node in [(0, 1), (3, 2), (9, 4)]:
        px, py = _centre(grid, node)
        assert grid.cell_at(px, py) == node
        rect = grid.cell_rect(*node)
        assert rect.contains(px, py)


def test_cell_at_border_and_outside_is_none():
    grid = _grid()
    assert grid.cell_at(grid.area.x, grid.area.y) is None
    assert grid.cell_at(grid.area.x + grid.area.width + 5, 10) is None


def test_apply_wall_toggles():
    grid = _grid()
    px, py = _centre(grid, (2, 3))
    grid.apply(Cell.WALL, px, py)
    assert (2, 3) in grid.walls
    grid.apply(Cell.WALL, px, py)
    assert (2, 3) not in grid.walls


def test_apply_start_moves_start():
    grid = _grid()
    px, py = _centre(grid, (4, 1))
    grid.apply(Cell.START, px, py)
    assert grid.start == (4, 1)
    path = grid.search((8, 3))
    assert path[-1] == (4, 1)


def test_apply_outside_changes_nothing():
    grid = _grid()
    grid.apply(Cell.WALL, -5, -5)
    grid.apply(Cell.START, -5, -5)
    assert grid.walls == set()
    assert grid.start == (0, 0)


def test_track_mouse_moves_end_and_searches():
    grid = _grid()
    px, py = _centre(grid, (6, 2))
    assert grid.track_mouse(px, py) is True
    assert grid.end == (6, 2)
    assert grid.path[-1] == grid.start
    assert _adjacent(grid.path[0], (6, 2))


def test_track_mouse_over_start_or_end_does_nothing():
    grid = _grid()
    old_end = grid.end
    assert grid.track_mouse(*_centre(grid, grid.start)) is False
    assert grid.track_mouse(*_centre(grid, old_end)) is False
    assert grid.end == old_end
    assert grid.path == []
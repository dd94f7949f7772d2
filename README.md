# arcadebox

A handful of small games you play in a terminal or a window.

| Command            | Game                                                           |
|--------------------|----------------------------------------------------------------|
| `arcadebox-truco`  | Truco, the Argentine card game, against the computer           |
| `arcadebox-pacman` | A maze chase: eat every fruit while a ghost hunts you down     |
| `arcadebox-taxi`   | Steer a taxi across lanes and dodge the oncoming traffic       |
| `arcadebox-bfs`    | A grid where a breadth-first search follows the mouse pointer  |

The texts shown inside the games are in Spanish.

## Installing

```
pip install arcadebox
```

This pulls in `pygame`, which only the search visualiser uses. The maze and taxi
games use Python's own `curses` module; Truco prints to the terminal and reads
your answers line by line.

## Truco

```
arcadebox-truco
arcadebox-truco --seed 42
```

The menu offers `1` to play with dealt hands, `2` to pick the cards of both sides
(and who starts) yourself for every hand, and `3` to quit. `--seed` makes the deal
and the computer's choices repeatable.

On your turn you play card `1`, `2` or `3`, call `4` (*Truco*, then *Re Truco*,
then *Vale 4*), or, during the first round while no envido has been sung, `5`
(*Envido*, *Real Envido* or *Falta Envido*). A hand is worth 1 point, or 2, 3 or 4
after accepted calls; refusing a call gives the hand to the caller. The first side
to reach 15 points wins the match.

The card rules live in `arcadebox.truco_cards` (`card_rank`, `envido_points`,
`deal`, `render_table`) and the match in `arcadebox.truco_game.TrucoGame`. You can
drive a game from your own code by passing `ask`, `say`, `rng` and `pause`:

```python
import random
from arcadebox.truco_cards import envido_points
from arcadebox.truco_game import TrucoGame, hand_winner, Winner

envido_points([0, 6, 25])                       # 33: the 1 and 7 of ORO
hand_winner([Winner.AI, Winner.AI, None])       # Winner.AI
game = TrucoGame(ask=input, say=print, rng=random.Random(1), pause=lambda ms: None)
```

## Maze chase

```
arcadebox-pacman
arcadebox-pacman --records winners.txt
```

It needs a terminal of about 100 columns by 45 rows. In the menu, the arrow keys
and Enter choose between:

- **Jugar** – play the six levels. Arrow keys move, `p` pauses. A level ends when
  every fruit is eaten; the ghost costs you one of three lives each time it
  catches you. Clearing the last level wins the game and offers to save your name.
- **Records** – shows up to 30 saved names for a few seconds.
- **Crea Tu Propio Mapa** – a map editor: arrows move the cursor, `x` wall, `c`
  fruit, `v` fake wall, `a` erase, `z` puts the ghost on the cursor, `d` and `f`
  fill the row or column with wall, `l` clears everything, `q` leaves and offers
  to save the map to a file.
- **Juega un mapa creado** – loads a saved map by file name and plays it until
  its fruit is gone.

Winners' names go to the file `records` in the current directory unless
`--records` names another.

The board logic is in `arcadebox.pacman_board.PacmanBoard` (`step`,
`move_ghost`, `move_player`, `save`, `load`, ...), which can be stepped and
inspected without a terminal.

## Taxi

```
arcadebox-taxi
arcadebox-taxi --seed 7
```

Press `1` on the menu to start (`2` shows the instructions). In the game `a` and
`d` change lane and `p` pauses. A car enters the road every fourth tick and each
one adds a point; the traffic speeds up at 50 and at 100 points. The game ends
when a car hits you, and your score is printed. The rules are in
`arcadebox.taxi.TaxiGame`.

## Breadth-first search

```
arcadebox-bfs 20 30 --font path/to/font.ttf
```

The arguments are the number of rows and of columns. A window opens; move the
mouse and the path from the start cell to the cell under the pointer is drawn.
Left-click toggles a wall, right-click moves the start cell. The average frame
rate is shown in the top right corner.

The search works on its own through `arcadebox.bfs_grid.Grid`:

```python
from arcadebox.bfs_grid import Area, Grid

grid = Grid(10, 10, Area(0, 0, 100, 100))
path = grid.search((9, 9))   # from the cell before (9, 9) back to the start (0, 0)
```

`arcadebox.timer.Timer` is the pausable millisecond stopwatch used for the frame
rate.

## What it does not do

- No font is shipped. `arcadebox-bfs` looks for `data/8-BIT.ttf` relative to the
  current directory by default; pass `--font` with any TrueType file you have.
- The taxi menu lists *Modo Extreme (4)* and the instructions list *Opciones (3)*,
  but neither key does anything.
- The maze and taxi games need a working `curses` module, which the standard
  Python build for Windows does not include.

## Running the tests

```
pip install "arcadebox[test]"
pytest
```
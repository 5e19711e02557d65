# gribchik

A small tile-based puzzle game. You walk a character around a walled map,
pick up every item, and then reach the exit. Each move prints the running
step count, and when you reach the exit with every item collected it prints
how many steps you needed.

## Installing

```
pip install .
```

Add the `test` extra to install pytest as well:

```
pip install ".[test]"
```

## Playing

```
gribchik path/to/level.ber
```

If you give no map (or more than one argument), the game loads
`maps/default.ber` from the current directory. It loads the tile textures
from the `textures/` directory of the current directory, one file per
picture: `back.xpm`, `wall.xpm`, `door.xpm`, `item.xpm`, `char_back.xpm`,
`char_left.xpm`, `char_front.xpm`, `char_right.xpm`, `char_door.xpm`,
`char_item.xpm`, `door_open.xpm` and `exit.xpm`. Each tile is drawn 128
pixels square. If the map cannot be read, or a texture is missing or cannot
be loaded, the command prints an error and exits with status 1.

Controls:

- `W`, `A`, `S`, `D` move up, left, down and right
- `Esc`, or closing the window, quits

Once you have stepped onto the exit with every item collected, the next
move key ends the game.

## What is not included

The package ships no maps and no textures. You need to supply a map file
and a `textures/` directory with the pictures listed above before the
`gribchik` command can open a window.

## Map format

A map is a plain text file with one row of tiles per line:

| Character | Meaning            |
|-----------|--------------------|
| `1`       | wall               |
| `0`       | floor              |
| `C`       | item to collect    |
| `E`       | exit               |
| `P`       | player start       |

The first line sets the width; every row must have that length. Only the
first 30 lines are read. A map must have a player start and an exit; any
other character, an empty map or rows of different lengths raise
`gribchik.gamemap.MapError`.

```
11111
1P0C1
10001
1C0E1
11111
```

The exit opens once every `C` has been collected.

## Using it as a library

The game logic does not need a window. `gribchik.gamemap.parse_map` builds
a `GameMap` from lines of text (`load_map` does the same from a file), and
`gribchik.game.Game` drives it through any canvas that has a
`draw(asset, x, y)` method. `RecordingCanvas` is one such canvas: it keeps
every draw call in its `draws` list.

```python
import io
from gribchik.gamemap import parse_map
from gribchik.game import Game, Key, RecordingCanvas

game_map = parse_map(["1111\n", "1PE1\n", "1111\n"])
out = io.StringIO()
game = Game(game_map, RecordingCanvas(), out)
game.render_map()
game.handle_key(Key.D)
print(out.getvalue())
# 1
# 1 steps! CONGRATULATIONS, TASTY!
```

`Game.handle_key` raises `GameExit` when `Esc` is pressed, or when the
player, standing on the exit with every item collected, presses a move key;
its `won` attribute tells the two apart. `Game.try_move` only looks at the
neighbouring cell (collecting an item there) without moving the player.

The package also contains two general helpers:

- `gribchik.printf.format_printf` returns formatted text and
  `gribchik.printf.printf` writes it (to stdout by default) and returns its
  length. They support `%c %s %p %d %i %u %x %X %%`; `%d`/`%i` wrap to a
  32-bit signed value, `%u`/`%x`/`%X` to 32-bit unsigned, `%s` of `None`
  gives `(null)` and `%p` of `None` gives `(nil)`. An unknown conversion, a
  missing argument or a non-integer for a numeric conversion raises
  `FormatError`. A lone `%` at the end of the format produces nothing.
- `gribchik.linereader.LineReader` reads lines from a binary or text
  stream in fixed-size chunks (42 by default). `read_line` returns each line
  with its newline, and `None` once the stream is exhausted; the reader can
  also be used as an iterator.
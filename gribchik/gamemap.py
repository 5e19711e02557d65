"""Map loading: turn a text map into a grid of tiles."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from itertools import islice
from os import PathLike

from .linereader import LineReader

MAX_WIDTH = 60
MAX_HEIGHT = 30


class Tile(IntEnum):
    """What occupies one cell of the map."""

    WALL = 0
    FLOOR = 1
    ITEM = 2
    EXIT = 3


class MapError(ValueError):
    """Raised when a map cannot be read or is malformed."""


_SYMBOLS = {
    "1": Tile.WALL,
    "0": Tile.FLOOR,
    "C": Tile.ITEM,
    "E": Tile.EXIT,
    "P": Tile.FLOOR,
}


@dataclass
class GameMap:
    """A parsed map together with the player's progress on it."""

    tiles: list[list[Tile]]
    player_x: int
    player_y: int
    exit_x: int
    exit_y: int
    points_to_finish: int
    points: int = 0
    steps: int = 0

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def complete(self) -> bool:
        """True once every item has been collected."""
        return self.points == self.points_to_finish

    @property
    def on_exit(self) -> bool:
        return (self.player_x, self.player_y) == (self.exit_x, self.exit_y)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.tiles[y][x]

    def collect(self, x: int, y: int) -> bool:
        """Pick up the item at (x, y), if there is one; return whether one was taken."""
        if self.tile(x, y) is not Tile.ITEM:
            return False
        self.tiles[y][x] = Tile.FLOOR
        self.points += 1
        return True


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from its text lines; only the first MAX_HEIGHT lines are used."""
    tiles: list[list[Tile]] = []
    player: tuple[int, int] | None = None
    exit_pos: tuple[int, int] | None = None
    items = 0
    width = 0
    for y, raw in enumerate(islice(lines, MAX_HEIGHT)):
        line = raw.removesuffix("\n")
        if y == 0:
            width = len(line)
            if width == 0:
                raise MapError("the first row of the map is empty")
        if len(line) != width:
            raise MapError(f"row {y} has length {len(line)}, expected {width}")
        row: list[Tile] = []
        for x, symbol in enumerate(line):
            try:
                tile = _SYMBOLS[symbol]
            except KeyError:
                raise MapError(f"unknown symbol {symbol!r} at ({x}, {y})") from None
            if symbol == "C":
                items += 1
            elif symbol == "E":
                exit_pos = (x, y)
            elif symbol == "P":
                player = (x, y)
            row.append(tile)
        tiles.append(row)
    if not tiles:
        raise MapError("the map is empty")
    if player is None:
        raise MapError("the map has no starting position")
    if exit_pos is None:
        raise MapError("the map has no exit")
    return GameMap(
        tiles=tiles,
        player_x=player[0],
        player_y=player[1],
        exit_x=exit_pos[0],
        exit_y=exit_pos[1],
        points_to_finish=items,
    )


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read and parse the map stored in the file at ``path``."""
    try:
        with open(path, encoding="utf-8") as stream:
            return parse_map(LineReader(stream))
    except OSError as exc:
        raise MapError(f"cannot read map {path}: {exc}") from exc
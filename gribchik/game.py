"""Game rules: moving the player, collecting items and reaching the exit."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Protocol, TextIO

from .gamemap import GameMap, Tile
from .printf import printf


class Asset(IntEnum):
    """The pictures the game draws."""

    BACK = 0
    WALL = 1
    DOOR = 2
    ITEM = 3
    CHAR_BACK = 4
    CHAR_LEFT = 5
    CHAR_FRONT = 6
    CHAR_RIGHT = 7
    CHAR_DOOR = 8
    CHAR_ITEM = 9
    DOOR_OPEN = 10
    EXIT = 11


class Direction(Enum):
    """A step on the grid; ``index`` picks the character picture facing that way."""

    UP = (0, 0, -1)
    LEFT = (1, -1, 0)
    DOWN = (2, 0, 1)
    RIGHT = (3, 1, 0)

    def __init__(self, index: int, dx: int, dy: int) -> None:
        self.index = index
        self.dx = dx
        self.dy = dy

    @property
    def character(self) -> Asset:
        return Asset(Asset.CHAR_BACK + self.index)


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = 1731
    A = 1734
    S = 1753
    D = 1751
    ESC = 65307


_KEY_DIRECTIONS = {
    Key.W: Direction.UP,
    Key.A: Direction.LEFT,
    Key.S: Direction.DOWN,
    Key.D: Direction.RIGHT,
}


class GameExit(Exception):
    """Raised when the game ends, either by winning or by quitting."""

    def __init__(self, won: bool = False) -> None:
        super().__init__("level finished" if won else "game quit")
        self.won = won


class Canvas(Protocol):
    def draw(self, asset: Asset, x: int, y: int) -> None: ...


class RecordingCanvas:
    """A canvas that keeps a list of every (asset, x, y) drawn on it."""

    def __init__(self) -> None:
        self.draws: list[tuple[Asset, int, int]] = []

    def draw(self, asset: Asset, x: int, y: int) -> None:
        self.draws.append((asset, x, y))


def direction_for_key(keycode: int) -> Direction | None:
    """Return the direction a key moves in, or None for other keys."""
    try:
        return _KEY_DIRECTIONS.get(Key(keycode))
    except ValueError:
        return None


class Game:
    """Drives a map, drawing on ``canvas`` and reporting steps to ``out``."""

    def __init__(self, game_map: GameMap, canvas: Canvas, out: TextIO | None = None) -> None:
        self.map = game_map
        self.canvas = canvas
        self.out = out

    def _draw(self, asset: Asset, x: int, y: int) -> None:
        self.canvas.draw(asset, x, y)

    def render_map(self) -> None:
        """Draw the whole map, then the exit door and the player."""
        m = self.map
        for y, row in enumerate(m.tiles):
            for x, tile in enumerate(row):
                if tile is Tile.WALL:
                    self._draw(Asset.WALL, x, y)
                elif tile is Tile.ITEM:
                    self._draw(Asset.ITEM, x, y)
                else:
                    self._draw(Asset.BACK, x, y)
        self._draw(Asset.DOOR, m.exit_x, m.exit_y)
        self._draw(Asset.CHAR_FRONT, m.player_x, m.player_y)

    def try_move(self, direction: Direction) -> Tile | None:
        """Look at the cell in ``direction``; collect an item there.

        Returns the tile found (None outside the map) without moving the
        player. Raises GameExit when the player, standing on the exit with
        every item collected, tries to move on.
        """
        m = self.map
        x, y = m.player_x + direction.dx, m.player_y + direction.dy
        if not m.in_bounds(x, y):
            return None
        tile = m.tile(x, y)
        if not m.on_exit:
            self._draw(direction.character, m.player_x, m.player_y)
        if tile is Tile.ITEM:
            m.collect(x, y)
        elif m.complete and m.on_exit:
            raise GameExit(won=True)
        return tile

    def _advance(self, tile: Tile, direction: Direction) -> None:
        m = self.map
        self._draw(Asset.DOOR if m.on_exit else Asset.BACK, m.player_x, m.player_y)
        m.player_x += direction.dx
        m.player_y += direction.dy
        m.steps += 1
        printf("%i\n", m.steps, file=self.out)
        if m.complete and tile is Tile.ITEM:
            self._draw(Asset.DOOR_OPEN, m.exit_x, m.exit_y)
        if m.complete and tile is Tile.EXIT:
            printf("%i steps! CONGRATULATIONS, TASTY!\n", m.steps, file=self.out)
            self._draw(Asset.EXIT, m.exit_x, m.exit_y)
        elif tile is Tile.EXIT:
            self._draw(Asset.CHAR_DOOR, m.player_x, m.player_y)
        elif tile is Tile.FLOOR:
            self._draw(direction.character, m.player_x, m.player_y)
        elif tile is Tile.ITEM:
            self._draw(Asset.CHAR_ITEM, m.player_x, m.player_y)

    def handle_key(self, keycode: int) -> Tile | None:
        """React to a key press; return the tile stepped towards, if any."""
        if keycode == Key.ESC:
            raise GameExit(won=False)
        direction = direction_for_key(keycode)
        if direction is None:
            return None
        tile = self.try_move(direction)
        if tile is not None and tile is not Tile.WALL:
            self._advance(tile, direction)
        return tile
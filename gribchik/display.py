"""Window, textures and the event loop that runs the game."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from os import PathLike
from pathlib import Path

import pygame

from .game import Asset, Game, GameExit, Key
from .gamemap import MapError, load_map

TILE_SIZE = 128
TITLE = "GRIBCHIK_GAME"
DEFAULT_MAP = "maps/default.ber"
TEXTURE_DIR = "textures"

_TEXTURE_FILES = {
    Asset.BACK: "back.xpm",
    Asset.WALL: "wall.xpm",
    Asset.DOOR: "door.xpm",
    Asset.ITEM: "item.xpm",
    Asset.CHAR_BACK: "char_back.xpm",
    Asset.CHAR_LEFT: "char_left.xpm",
    Asset.CHAR_FRONT: "char_front.xpm",
    Asset.CHAR_RIGHT: "char_right.xpm",
    Asset.CHAR_DOOR: "char_door.xpm",
    Asset.CHAR_ITEM: "char_item.xpm",
    Asset.DOOR_OPEN: "door_open.xpm",
    Asset.EXIT: "exit.xpm",
}

_PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_ESCAPE: Key.ESC,
}


class PygameCanvas:
    """Draws assets onto a pygame surface, one tile per TILE_SIZE pixels."""

    def __init__(self, surface: pygame.Surface, textures: Mapping[Asset, pygame.Surface]) -> None:
        self.surface = surface
        self.textures = textures

    def draw(self, asset: Asset, x: int, y: int) -> None:
        self.surface.blit(self.textures[asset], (x * TILE_SIZE, y * TILE_SIZE))


def texture_paths(directory: str | PathLike[str] = TEXTURE_DIR) -> dict[Asset, Path]:
    """Return the texture file for every asset inside ``directory``."""
    base = Path(directory)
    return {asset: base / name for asset, name in _TEXTURE_FILES.items()}


def load_assets(directory: str | PathLike[str] = TEXTURE_DIR) -> dict[Asset, pygame.Surface]:
    """Load every asset's texture from ``directory``."""
    textures = {}
    for asset, path in texture_paths(directory).items():
        if not path.is_file():
            raise FileNotFoundError(f"missing texture {path}")
        textures[asset] = pygame.image.load(str(path))
    return textures


def _run(game: Game) -> int:
    game.render_map()
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return 0
        if event.type != pygame.KEYDOWN:
            continue
        keycode = _PYGAME_KEYS.get(event.key)
        if keycode is None:
            continue
        try:
            game.handle_key(keycode)
        except GameExit:
            return 0
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the map named in ``argv``, or on the default map."""
    args = list(sys.argv[1:] if argv is None else argv)
    map_path = args[0] if len(args) == 1 else DEFAULT_MAP
    try:
        game_map = load_map(map_path)
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game_map.width * TILE_SIZE, game_map.height * TILE_SIZE)
        )
        pygame.display.set_caption(TITLE)
        try:
            textures = load_assets(TEXTURE_DIR)
        except (FileNotFoundError, pygame.error) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        return _run(Game(game_map, PygameCanvas(screen, textures)))
    finally:
        pygame.quit()
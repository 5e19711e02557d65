import io

import pytest

from gribchik.game import (
    Asset,
    Direction,
    Game,
    GameExit,
    Key,
    RecordingCanvas,
    direction_for_key,
)
from gribchik.gamemap import Tile, parse_map

LEVEL = ["1111111\n", "1P0C0E1\n", "1111111\n"]


def make_game(lines=LEVEL):
    out = io.StringIO()
    canvas = RecordingCanvas()
    return Game(parse_map(lines), canvas, out), canvas, out


@pytest.mark.parametrize("key, direction", [
    (Key.W, Direction.UP), (Key.A, Direction.LEFT),
    (Key.S, Direction.DOWN), (Key.D, Direction.RIGHT),
])
def test_direction_for_key(key, direction):
    assert direction_for_key(key) is direction


def test_direction_for_other_keys():
    assert direction_for_key(Key.ESC) is None
    assert direction_for_key(12) is None


@pytest.mark.parametrize("key, character", [
    (Key.W, Asset.CHAR_BACK), (Key.A, Asset.CHAR_LEFT),
    (Key.S, Asset.CHAR_FRONT), (Key.D, Asset.CHAR_RIGHT),
])
def test_direction_characters(key, character):
    game, canvas, _ = make_game()
    game.handle_key(key)
    assert direction_for_key(key).character is character
    assert canvas.draws[0] == (character, 1, 1)


def test_render_map():
    game, canvas, _ = make_game()
    game.render_map()
    assert len(canvas.draws) == 7 * 3 + 2
    assert canvas.draws[0] == (Asset.WALL, 0, 0)
    assert (Asset.ITEM, 3, 1) in canvas.draws
    assert (Asset.BACK, 5, 1) in canvas.draws
    assert canvas.draws[-2:] == [(Asset.DOOR, 5, 1), (Asset.CHAR_FRONT, 1, 1)]


def test_escape_quits():
    game, _, _ = make_game()
    with pytest.raises(GameExit) as info:
        game.handle_key(Key.ESC)
    assert info.value.won is False


def test_unknown_key_does_nothing():
    game, canvas, out = make_game()
    assert game.handle_key(99) is None
    assert canvas.draws == []
    assert out.getvalue() == ""


def test_step_onto_floor():
    game, canvas, out = make_game()
    assert game.handle_key(Key.D) is Tile.FLOOR
    assert (game.map.player_x, game.map.player_y) == (2, 1)
    assert game.map.steps == 1
    assert out.getvalue() == "1\n"
    assert canvas.draws == [
        (Asset.CHAR_RIGHT, 1, 1),
        (Asset.BACK, 1, 1),
        (Asset.CHAR_RIGHT, 2, 1),
    ]


def test_wall_blocks_but_turns():
    game, canvas, out = make_game()
    assert game.handle_key(Key.W) is Tile.WALL
    assert (game.map.player_x, game.map.player_y) == (1, 1)
    assert game.map.steps == 0
    assert out.getvalue() == ""
    assert canvas.draws == [(Asset.CHAR_BACK, 1, 1)]


def test_outside_map_is_ignored():
    game, canvas, _ = make_game(["P0E\n"])
    assert game.handle_key(Key.A) is None
    assert canvas.draws == []
    assert game.map.steps == 0


def test_collect_last_item_opens_door():
    game, canvas, _ = make_game()
    game.handle_key(Key.D)
    assert game.handle_key(Key.D) is Tile.ITEM
    assert game.map.points == 1
    assert game.map.tile(3, 1) is Tile.FLOOR
    assert (Asset.DOOR_OPEN, 5, 1) in canvas.draws
    assert canvas.draws[-1] == (Asset.CHAR_ITEM, 3, 1)


def test_exit_before_collecting():
    game, canvas, out = make_game(["1111111\n", "1PE0C01\n", "1111111\n"])
    assert game.handle_key(Key.D) is Tile.EXIT
    assert canvas.draws[-1] == (Asset.CHAR_DOOR, 2, 1)
    assert "CONGRATULATIONS" not in out.getvalue()
    game.handle_key(Key.D)
    assert (Asset.DOOR, 2, 1) in canvas.draws
    assert canvas.draws[-1] == (Asset.CHAR_RIGHT, 3, 1)


def test_win_and_leave():
    game, canvas, out = make_game()
    for _ in range(4):
        game.handle_key(Key.D)
    assert out.getvalue().endswith("4 steps! CONGRATULATIONS, TASTY!\n")
    assert canvas.draws[-1] == (Asset.EXIT, 5, 1)
    with pytest.raises(GameExit) as info:
        game.handle_key(Key.A)
    assert info.value.won is True
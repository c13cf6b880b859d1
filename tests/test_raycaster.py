import math

import pytest

from cubray.config import CubError, SceneConfig
from cubray.raycaster import (
    PLANE_LENGTH,
    Controls,
    Key,
    Player,
    Renderer,
    cast_ray,
    sprite_positions,
    start_player,
)
from cubray.xpm import XpmImage

ROOM = [
    "11111",
    "10001",
    "10201",
    "10001",
    "10001",
    "11111",
]
EMPTY_ROOM = [row.replace("2", "0") for row in ROOM]

CEILING = 0x112233
FLOOR = 0x445566
WALL = 0x336699
SPRITE = 0xABCDEF


def _texture(color, size=2):
    return XpmImage(
        width=size,
        height=size,
        rows=tuple(tuple(color for _ in range(size)) for _ in range(size)),
    )


def _textures(sprite_color=SPRITE):
    return [_texture(WALL)] * 4 + [_texture(sprite_color)]


def _player(direction="N", row=4, col=2, grid=EMPTY_ROOM):
    config = SceneConfig(grid=grid, start_row=row, start_col=col, direction=direction)
    return start_player(config)


def test_start_player_north():
    player = _player("N")
    assert player.x == 4 + 0.5
    assert player.y == 2 + 0.5
    assert player.dir_x == -1
    assert player.plane_y == PLANE_LENGTH


@pytest.mark.parametrize("direction", ["N", "S", "E", "W"])
def test_start_directions_are_perpendicular(direction):
    player = _player(direction)
    assert player.dir_x * player.plane_x + player.dir_y * player.plane_y == 0
    assert math.hypot(player.dir_x, player.dir_y) == 1
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(PLANE_LENGTH)


def test_start_player_rejects_unknown_direction():
    with pytest.raises(CubError):
        _player("Q")


@pytest.mark.parametrize(
    "key, name",
    [
        (Key.FORWARD, "forward"),
        (Key.BACK, "back"),
        (Key.LEFT, "left"),
        (Key.RIGHT, "right"),
        (Key.ROTATE_LEFT, "rotate_left"),
        (Key.ROTATE_RIGHT, "rotate_right"),
    ],
)
def test_controls_press_and_release(key, name):
    controls = Controls()
    controls.press(int(key))
    assert getattr(controls, name) is True
    controls.release(int(key))
    assert getattr(controls, name) is False


def test_escape_requests_quit():
    controls = Controls()
    controls.press(Key.ESCAPE)
    assert controls.quit is True


def test_unknown_key_is_ignored():
    controls = Controls()
    controls.press(12345)
    assert controls == Controls()


def test_rotate_round_trip_keeps_lengths():
    player = _player("E")
    player.rotate(0.7)
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1)
    assert player.dir_x * player.plane_x + player.dir_y * player.plane_y == pytest.approx(0)
    player.rotate(-0.7)
    assert player.dir_x == pytest.approx(0, abs=1e-12)
    assert player.dir_y == pytest.approx(1)
    assert player.plane_x == pytest.approx(PLANE_LENGTH)


def test_step_without_keys_does_nothing():
    player = _player()
    before = Player(**vars(player))
    player.step(EMPTY_ROOM, Controls())
    assert player == before


def test_forward_moves_along_direction():
    player = _player("N")
    player.step(EMPTY_ROOM, Controls(forward=True))
    assert player.x < 4.5
    assert player.y == 2.5


def test_forward_blocked_by_wall():
    player = Player(x=1.15, y=2.5, dir_x=-1.0, dir_y=0.0, plane_x=0.0, plane_y=0.66)
    player.step(EMPTY_ROOM, Controls(forward=True))
    assert player.x == 1.15
    assert player.y == 2.5


def test_forward_then_back_returns():
    player = _player("N")
    player.step(EMPTY_ROOM, Controls(forward=True))
    player.step(EMPTY_ROOM, Controls(back=True))
    assert player.x == pytest.approx(4.5)
    assert player.y == pytest.approx(2.5)


def test_strafe_right_facing_north_increases_column():
    player = _player("N")
    player.step(EMPTY_ROOM, Controls(right=True))
    assert player.y > 2.5
    assert player.x == 4.5


def test_both_rotations_cancel():
    player = _player("N")
    player.step(EMPTY_ROOM, Controls(rotate_left=True, rotate_right=True))
    assert player.dir_x == pytest.approx(-1)
    assert player.dir_y == pytest.approx(0, abs=1e-12)


def test_sprite_cells_do_not_block_rays():
    player = _player("N", grid=ROOM)
    hit = cast_ray(ROOM, player, 0.0, 20)
    assert (hit.map_x, hit.map_y) == (0, 2)
    assert hit.side == 0
    assert hit.perp_dist == pytest.approx(3.5)
    assert hit.texture == 0


@pytest.mark.parametrize("camera_x", [-1.0, -0.5, -0.1, 0.3, 0.9])
@pytest.mark.parametrize("direction", ["N", "S", "E", "W"])
def test_ray_invariants(camera_x, direction):
    player = _player(direction, row=2, col=2)
    hit = cast_ray(EMPTY_ROOM, player, camera_x, 30)
    assert EMPTY_ROOM[hit.map_x][hit.map_y] == "1"
    assert 0 <= hit.draw_start <= hit.draw_end < 30
    assert 0 <= hit.wall_x < 1
    assert hit.perp_dist > 0


def test_sprite_positions():
    assert sprite_positions(ROOM) == [(2 + 0.5, 2 + 0.5)]
    assert sprite_positions(EMPTY_ROOM) == []


def test_render_without_sprites():
    renderer = Renderer(20, 20, EMPTY_ROOM, FLOOR, CEILING, _textures())
    frame = renderer.render(_player("N"))
    assert len(frame) == 20 * 20
    assert frame[0 * 20 + 10] == CEILING
    assert frame[19 * 20 + 10] == FLOOR
    assert frame[10 * 20 + 10] == WALL
    assert set(frame) <= {CEILING, FLOOR, WALL}


def test_render_draws_visible_sprite():
    renderer = Renderer(20, 20, ROOM, FLOOR, CEILING, _textures())
    frame = renderer.render(_player("N", grid=ROOM))
    assert frame[10 * 20 + 10] == SPRITE


@pytest.mark.parametrize("sprite_color", [0x000000, None])
def test_black_and_transparent_sprite_pixels_are_skipped(sprite_color):
    renderer = Renderer(20, 20, ROOM, FLOOR, CEILING, _textures(sprite_color))
    frame = renderer.render(_player("N", grid=ROOM))
    assert frame[10 * 20 + 10] == WALL


def test_sprite_behind_player_is_not_drawn():
    renderer = Renderer(20, 20, ROOM, FLOOR, CEILING, _textures())
    frame = renderer.render(_player("S", row=1, col=2, grid=ROOM))
    assert frame[10 * 20 + 10] == SPRITE
    frame = renderer.render(_player("N", row=1, col=2, grid=ROOM))
    assert SPRITE not in frame


def test_renderer_needs_five_textures():
    with pytest.raises(ValueError):
        Renderer(20, 20, ROOM, FLOOR, CEILING, [_texture(WALL)] * 4)
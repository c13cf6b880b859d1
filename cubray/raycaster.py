"""First-person raycasting: player movement, wall casting and sprite drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .config import CubError

MOVE_SPEED = 0.1
ROT_SPEED = 0.033 * 1.8
PLANE_LENGTH = 0.66
TEXTURE_ORDER = ("south", "north", "east", "west", "sprite")
SPRITE_TEXTURE = 4

_SPRITE_KEY_COLOR = 0x000000
_SPRITE_SCALE = 256
_MAX_LINE_HEIGHT = 2**31 - 1

_START_VECTORS = {
    "N": (-1.0, 0.0, 0.0, PLANE_LENGTH),
    "S": (1.0, 0.0, 0.0, -PLANE_LENGTH),
    "E": (0.0, 1.0, PLANE_LENGTH, 0.0),
    "W": (0.0, -1.0, -PLANE_LENGTH, 0.0),
}


class Key(IntEnum):
    """Key codes the game reacts to."""

    FORWARD = 119
    BACK = 115
    RIGHT = 100
    LEFT = 97
    ROTATE_LEFT = 65361
    ROTATE_RIGHT = 65363
    ESCAPE = 65307


_KEY_FLAGS = {
    Key.FORWARD: "forward",
    Key.BACK: "back",
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.ROTATE_LEFT: "rotate_left",
    Key.ROTATE_RIGHT: "rotate_right",
}


@dataclass
class Controls:
    """Which movement keys are currently held down."""

    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    rotate_left: bool = False
    rotate_right: bool = False
    quit: bool = False

    def press(self, key):
        """Record a key press; escape asks the game to quit."""
        if key == Key.ESCAPE:
            self.quit = True
            return
        name = _KEY_FLAGS.get(key)
        if name is not None:
            setattr(self, name, True)

    def release(self, key):
        """Record a key release."""
        name = _KEY_FLAGS.get(key)
        if name is not None:
            setattr(self, name, False)


def _cell(grid, row, col):
    r, c = int(row), int(col)
    if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
        return grid[r][c]
    return None


@dataclass
class Player:
    """Position (row, column), view direction and camera plane of the player."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    move_speed: float = MOVE_SPEED
    rot_speed: float = ROT_SPEED

    def rotate(self, angle):
        """Turn the view direction and camera plane by ``angle`` radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def _move(self, grid, move_x, move_y):
        if _cell(grid, self.x + move_x * self.move_speed * 2, self.y) == "0":
            self.x += move_x * self.move_speed
        if _cell(grid, self.x, self.y + move_y * self.move_speed * 2) == "0":
            self.y += move_y * self.move_speed

    def step(self, grid, controls):
        """Advance one frame: move and turn according to the held keys."""
        if controls.forward:
            self._move(grid, self.dir_x, self.dir_y)
        if controls.back:
            self._move(grid, -self.dir_x, -self.dir_y)
        if controls.right:
            self._move(grid, self.dir_y, -self.dir_x)
        if controls.left:
            self._move(grid, -self.dir_y, self.dir_x)
        if controls.rotate_right:
            self.rotate(-self.rot_speed / 2)
        if controls.rotate_left:
            self.rotate(self.rot_speed / 2)


def start_player(config):
    """Place a player at the scene's start cell, facing its start direction."""
    vectors = _START_VECTORS.get(config.direction)
    if vectors is None:
        raise CubError(f"invalid start direction {config.direction!r}")
    return Player(config.start_row + 0.5, config.start_col + 0.5, *vectors)


@dataclass(frozen=True)
class RayHit:
    """Where one ray met a wall and how tall that wall column is on screen."""

    map_x: int
    map_y: int
    side: int
    step_x: int
    step_y: int
    ray_dir_x: float
    ray_dir_y: float
    perp_dist: float
    line_height: int
    draw_start: int
    draw_end: int
    texture: int
    wall_x: float


def _delta(primary, other):
    if other == 0:
        return 0.0
    if primary == 0:
        return 1.0
    return math.sqrt(1 + (other * other) / (primary * primary))


def cast_ray(grid, player, camera_x, screen_height):
    """Walk a ray through the grid until it reaches a wall cell."""
    ray_x = player.dir_x + player.plane_x * camera_x
    ray_y = player.dir_y + player.plane_y * camera_x
    map_x, map_y = int(player.x), int(player.y)
    delta_x = _delta(ray_x, ray_y)
    delta_y = _delta(ray_y, ray_x)
    if ray_x < 0:
        step_x, side_x = -1, (player.x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - player.x) * delta_x
    if ray_y < 0:
        step_y, side_y = -1, (player.y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - player.y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        cell = _cell(grid, map_x, map_y)
        if cell is None:
            raise CubError("ray left the map without meeting a wall")
        if cell == "1":
            break

    if side == 0:
        distance, ray = map_x - player.x + (1 - step_x) / 2, ray_x
    else:
        distance, ray = map_y - player.y + (1 - step_y) / 2, ray_y
    perp = distance / ray if ray else math.inf

    if perp > 0:
        line_height = min(int(screen_height / perp), _MAX_LINE_HEIGHT)
    else:
        line_height = _MAX_LINE_HEIGHT
    draw_start = max(0, -(line_height // 2) + screen_height // 2)
    draw_end = line_height // 2 + screen_height // 2
    if draw_end >= screen_height or draw_end < 0:
        draw_end = screen_height - 1

    if side == 0:
        texture = 0 if ray_x < 0 else 1
        wall_x = player.y + perp * ray_y
    else:
        texture = 2 if ray_y < 0 else 3
        wall_x = player.x + perp * ray_x
    wall_x = wall_x - math.floor(wall_x) if math.isfinite(wall_x) else 0.0

    return RayHit(
        map_x=map_x,
        map_y=map_y,
        side=side,
        step_x=step_x,
        step_y=step_y,
        ray_dir_x=ray_x,
        ray_dir_y=ray_y,
        perp_dist=perp,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        texture=texture,
        wall_x=wall_x,
    )


def sprite_positions(grid):
    """Return the centres of all sprite cells, in row-major order."""
    return [
        (row + 0.5, col + 0.5)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "2"
    ]


def _tdiv(numerator, denominator):
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass
class Renderer:
    """Draws frames of a scene as row-major lists of 0xRRGGBB pixels.

    ``textures`` holds five images (``width``, ``height`` and ``pixel(x, y)``)
    in the order of ``TEXTURE_ORDER``.
    """

    width: int
    height: int
    grid: list
    floor: int
    ceiling: int
    textures: tuple
    sprites: list | None = None

    def __post_init__(self):
        self.textures = tuple(self.textures)
        if len(self.textures) != len(TEXTURE_ORDER):
            raise ValueError(
                f"expected {len(TEXTURE_ORDER)} textures, got {len(self.textures)}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame size must be positive")
        if self.sprites is None:
            self.sprites = sprite_positions(self.grid)

    def render(self, player):
        """Draw one frame seen by ``player`` and return its pixels."""
        frame = [0] * (self.width * self.height)
        zbuffer = []
        for column in range(self.width):
            camera_x = 2 * column / self.width - 1
            hit = cast_ray(self.grid, player, camera_x, self.height)
            self._draw_column(frame, column, hit)
            zbuffer.append(hit.perp_dist)
        self._draw_sprites(frame, zbuffer, player)
        return frame

    def _draw_column(self, frame, column, hit):
        width, height = self.width, self.height
        start = hit.draw_start
        end = height - start
        for y in range(start):
            frame[y * width + column] = self.ceiling
        self._draw_wall(frame, column, hit, start, end)
        for y in range(end + 1, height):
            frame[y * width + column] = self.floor

    def _draw_wall(self, frame, column, hit, start, end):
        texture = self.textures[hit.texture]
        step = self.textures[0].height / max(hit.line_height, 1)
        tex_x = min(int(hit.wall_x * texture.width), texture.width - 1)
        if (hit.side == 0 and hit.ray_dir_x > 0) or (
            hit.side == 1 and hit.ray_dir_y < 0
        ):
            tex_x = texture.width - tex_x - 1
        tex_pos = (start - self.height // 2 + hit.line_height // 2) * step
        for y in range(start, end + 1):
            tex_y = int(tex_pos) & (texture.height - 1)
            tex_pos += step
            if y < self.height:
                frame[y * self.width + column] = texture.pixel(tex_x, tex_y) or 0

    def _draw_sprites(self, frame, zbuffer, player):
        if not self.sprites:
            return
        determinant = player.plane_x * player.dir_y - player.dir_x * player.plane_y
        if determinant == 0:
            return
        inv_det = 1.0 / determinant
        distances = [
            (player.x - sx) * (player.x - sx) + (player.y - sy) * (player.y - sy)
            for sx, sy in self.sprites
        ]
        order = sorted(range(len(self.sprites)), key=distances.__getitem__, reverse=True)
        for index in order:
            sx, sy = self.sprites[index]
            rel_x, rel_y = sx - player.x, sy - player.y
            trans_x = inv_det * (player.dir_y * rel_x - player.dir_x * rel_y)
            trans_y = inv_det * (-player.plane_y * rel_x + player.plane_x * rel_y)
            if trans_y <= 0:
                continue
            self._draw_sprite(frame, zbuffer, trans_x, trans_y)

    def _draw_sprite(self, frame, zbuffer, trans_x, trans_y):
        width, height = self.width, self.height
        texture = self.textures[SPRITE_TEXTURE]
        screen_x = int((width // 2) * (1 + trans_x / trans_y))
        size = abs(int(height / trans_y))
        start_y = max(0, -(size // 2) + height // 2)
        end_y = min(size // 2 + height // 2, height)
        left = -(size // 2) + screen_x
        start_x = max(0, left)
        end_x = min(size // 2 + screen_x, width)
        for stripe in range(start_x, end_x):
            if not trans_y < zbuffer[stripe]:
                continue
            tex_x = (_SPRITE_SCALE * (stripe - left) * texture.width // size) // _SPRITE_SCALE
            for y in range(start_y, end_y):
                d = y * 256 - height * 128 + size * 128
                tex_y = _tdiv(_tdiv(d * texture.height, size), _SPRITE_SCALE)
                if not (0 <= tex_x < texture.width and 0 <= tex_y < texture.height):
                    continue
                color = texture.pixel(tex_x, tex_y)
                # Black is the sprite colour key; transparent pixels are skipped too.
                if color is None or color == _SPRITE_KEY_COLOR:
                    continue
                frame[y * width + stripe] = color
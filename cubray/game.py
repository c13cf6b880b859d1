"""Running a scene: loading textures, drawing frames, saving or showing them."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

from .bmp import is_save_flag, write_bmp
from .config import CubError
from .raycaster import TEXTURE_ORDER, Controls, Key, Renderer, start_player
from .scene import check_cub_name, parse_scene_file
from .xpm import XpmError, read_xpm

SCREENSHOT_NAME = "image.bmp"
WINDOW_TITLE = "cubray"
FRAME_RATE = 60

_TEXTURE_LABELS = {
    "south": "SO",
    "north": "NO",
    "east": "EA",
    "west": "WE",
    "sprite": "S",
}


def load_textures(config):
    """Read the five scene textures in the order the renderer expects."""
    textures = []
    for name in TEXTURE_ORDER:
        path = getattr(config, name)
        if path is None:
            raise CubError(f"Texture {_TEXTURE_LABELS[name]}")
        try:
            textures.append(read_xpm(path))
        except XpmError as exc:
            raise CubError(f"Texture {_TEXTURE_LABELS[name]}: {exc}") from exc
    return tuple(textures)


def _renderer(config, textures):
    return Renderer(
        width=config.width,
        height=config.height,
        grid=config.grid,
        floor=config.floor,
        ceiling=config.ceiling,
        textures=textures,
    )


def render_frame(config, textures, player):
    """Draw the scene as seen by ``player``; return row-major 0xRRGGBB pixels."""
    return _renderer(config, textures).render(player)


def _frame_surface(pygame, frame, width, height):
    data = bytearray(3 * len(frame))
    data[0::3] = bytes((value >> 16) & 0xFF for value in frame)
    data[1::3] = bytes((value >> 8) & 0xFF for value in frame)
    data[2::3] = bytes(value & 0xFF for value in frame)
    return pygame.image.frombuffer(bytes(data), (width, height), "RGB")


def _clamp_to_screen(pygame, config):
    info = pygame.display.Info()
    width, height = config.width, config.height
    if info.current_w > 0:
        width = min(width, info.current_w)
    if info.current_h > 0:
        height = min(height, info.current_h)
    return replace(config, width=width, height=height)


def _run_window(config, textures, player):
    import pygame

    keys = {
        pygame.K_w: Key.FORWARD,
        pygame.K_s: Key.BACK,
        pygame.K_a: Key.LEFT,
        pygame.K_d: Key.RIGHT,
        pygame.K_LEFT: Key.ROTATE_LEFT,
        pygame.K_RIGHT: Key.ROTATE_RIGHT,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    pygame.init()
    try:
        config = _clamp_to_screen(pygame, config)
        renderer = _renderer(config, textures)
        screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption(WINDOW_TITLE)
        controls = Controls()
        clock = pygame.time.Clock()
        while not controls.quit:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    controls.quit = True
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    controls.press(keys[event.key])
                elif event.type == pygame.KEYUP and event.key in keys:
                    controls.release(keys[event.key])
            if controls.quit:
                break
            frame = renderer.render(player)
            screen.blit(_frame_surface(pygame, frame, config.width, config.height), (0, 0))
            pygame.display.flip()
            player.step(config.grid, controls)
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def run(config, save):
    """Render the scene once to ``image.bmp`` when ``save`` is true, else open a window.

    Returns the screenshot path in save mode and None otherwise.
    """
    textures = load_textures(config)
    player = start_player(config)
    if save:
        frame = render_frame(config, textures, player)
        path = Path(SCREENSHOT_NAME)
        try:
            write_bmp(path, frame, config.width, config.height)
        except OSError as exc:
            raise CubError(f"cannot create {path}: {exc}") from exc
        return path
    _run_window(config, textures, player)
    return None


def _report(message):
    print("Error")
    print(message)


def main(argv=None):
    """Command entry point: ``cubray <scene.cub> [--save]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not (len(args) == 1 or (len(args) == 2 and is_save_flag(args[1]))):
        _report("Arguments invalides")
        return 1
    try:
        path = check_cub_name(args[0])
        config = parse_scene_file(path)
        run(config, save=len(args) == 2)
    except CubError as exc:
        _report(str(exc))
        return 1
    except Exception as exc:  # pygame.error and display failures
        if type(exc).__name__ != "error":
            raise
        _report(f"display initialisation failed: {exc}")
        return 1
    return 0
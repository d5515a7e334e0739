"""Software ray-casting renderer producing a frame of packed colours."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .game import FOV, MAP_SIZE, MAX_DEPTH, SCREEN_HEIGHT, SCREEN_WIDTH, Game
from .trig import PI, angle_index

TEXTURE_SIZE = 64
MAX_STEPS = 20
SIDE_SHADE = 0.7


def rgb(r: float, g: float, b: float) -> int:
    """Pack channels into a colour value with red in the low byte."""
    return (int(r) & 0xFF) | ((int(g) & 0xFF) << 8) | ((int(b) & 0xFF) << 16)


def red(color: int) -> int:
    return color & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return (color >> 16) & 0xFF


def shade(color: int, factor: float) -> int:
    """Scale every channel of ``color`` by ``factor``, truncating."""
    return rgb(red(color) * factor, green(color) * factor, blue(color) * factor)


SKY_COLOR = rgb(100, 150, 255)
MORTAR_COLOR = rgb(100, 100, 100)
BRICK_COLOR = rgb(180, 80, 60)
GAP_COLOR = rgb(80, 80, 100)
DARK_TILE_COLOR = rgb(100, 100, 150)
LIGHT_TILE_COLOR = rgb(120, 120, 170)


def _wall_texel(x: int, y: int) -> int:
    if x % 16 == 14 or y % 16 == 14:
        return MORTAR_COLOR
    if x % 16 < 14 and y % 16 < 14:
        return BRICK_COLOR
    return GAP_COLOR


def _floor_texel(x: int, y: int) -> int:
    return DARK_TILE_COLOR if (x // 16 % 2) ^ (y // 16 % 2) else LIGHT_TILE_COLOR


def generate_textures() -> tuple[list[int], list[int]]:
    """Return the brick wall and checkered floor textures, row-major."""
    coords = [(x, y) for y in range(TEXTURE_SIZE) for x in range(TEXTURE_SIZE)]
    wall = [_wall_texel(x, y) for x, y in coords]
    floor = [_floor_texel(x, y) for x, y in coords]
    return wall, floor


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1.0 / value)


@dataclass(frozen=True)
class Ray:
    """Direction and grid-stepping data for one screen column."""

    dir_x: float
    dir_y: float
    delta_dist_x: float
    delta_dist_y: float
    step_x: int
    step_y: int


class Renderer:
    """Draws the game's view into a row-major buffer of packed colours."""

    def __init__(self, game: Game, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self.game = game
        self.width = width
        self.height = height
        self.buffer: list[int] = [0] * (width * height)
        self.rays: list[Ray] = []
        self.wall_texture, self.floor_texture = generate_textures()

    def precompute_rays(self) -> list[Ray]:
        """Build one ray per column for the player's current angle."""
        tables = self.game.tables
        angle = self.game.player.angle
        rays = []
        for x in range(self.width):
            ray_angle = angle - FOV / 2.0 + (x / self.width) * FOV
            ray_angle = math.fmod(ray_angle + 10 * PI, 2 * PI)
            idx = angle_index(ray_angle)
            dir_x = tables.cos_table[idx]
            dir_y = tables.sin_table[idx]
            rays.append(
                Ray(
                    dir_x=dir_x,
                    dir_y=dir_y,
                    delta_dist_x=_inverse_abs(dir_x),
                    delta_dist_y=_inverse_abs(dir_y),
                    step_x=-1 if dir_x < 0 else 1,
                    step_y=-1 if dir_y < 0 else 1,
                )
            )
        self.rays = rays
        return rays

    def render(self) -> list[int]:
        """Draw sky, floor and walls; return the filled buffer."""
        self.precompute_rays()
        self._draw_sky()
        self._draw_floor()
        for x, ray in enumerate(self.rays):
            self._draw_wall_column(x, ray)
        return self.buffer

    def _draw_sky(self) -> None:
        half = self.height // 2
        self.buffer[: half * self.width] = [SKY_COLOR] * (half * self.width)

    def _draw_floor(self) -> None:
        width, height, buf = self.width, self.height, self.buffer
        tables = self.game.tables
        player = self.game.player
        floor = self.floor_texture
        size = TEXTURE_SIZE
        half = height // 2

        left = player.angle - FOV / 2
        right = player.angle + FOV / 2
        cos_left, sin_left = tables.cos(left), tables.sin(left)
        cos_span = tables.cos(right) - cos_left
        sin_span = tables.sin(right) - sin_left

        for y in range(half, height):
            row_dist = (0.5 * height) / (y - half + 0.1)
            step_x = row_dist * cos_span / width
            step_y = row_dist * sin_span / width
            floor_x = player.x + row_dist * cos_left
            floor_y = player.y + row_dist * sin_left
            dist_factor = 1.0 / (1.0 + row_dist * 0.1)
            base = y * width
            for x in range(width):
                tex_x = int(floor_x * size) % size
                tex_y = int(floor_y * size) % size
                buf[base + x] = shade(floor[tex_y * size + tex_x], dist_factor)
                floor_x += step_x
                floor_y += step_y

    def _cast(self, ray: Ray) -> tuple[float, int]:
        """Walk the grid along ``ray``; return wall distance and side hit."""
        player = self.game.player
        grid = self.game.map
        map_x, map_y = int(player.x), int(player.y)

        if ray.dir_x < 0:
            side_x = (player.x - map_x) * ray.delta_dist_x
        else:
            side_x = (map_x + 1.0 - player.x) * ray.delta_dist_x
        if ray.dir_y < 0:
            side_y = (player.y - map_y) * ray.delta_dist_y
        else:
            side_y = (map_y + 1.0 - player.y) * ray.delta_dist_y

        for _ in range(MAX_STEPS):
            if side_x < side_y:
                side_x += ray.delta_dist_x
                map_x += ray.step_x
                side = 0
            else:
                side_y += ray.delta_dist_y
                map_y += ray.step_y
                side = 1

            if not (0 <= map_x < MAP_SIZE and 0 <= map_y < MAP_SIZE):
                return MAX_DEPTH, side
            if grid[map_x][map_y] > 0:
                if side == 0:
                    dist = (map_x - player.x + (1 - ray.step_x) // 2) / ray.dir_x
                else:
                    dist = (map_y - player.y + (1 - ray.step_y) // 2) / ray.dir_y
                return dist, side
        return MAX_DEPTH, 0

    def _draw_wall_column(self, x: int, ray: Ray) -> None:
        dist, side = self._cast(ray)
        if dist >= MAX_DEPTH:
            return
        width, height = self.width, self.height
        player = self.game.player
        size = TEXTURE_SIZE
        half = height // 2

        line_height = max(1, int(height / max(dist, 1e-4)))
        draw_start = max(0, -(line_height // 2) + half)
        draw_end = min(height - 1, line_height // 2 + half)

        if side == 0:
            wall_x = player.y + dist * ray.dir_y
        else:
            wall_x = player.x + dist * ray.dir_x
        wall_x -= math.floor(wall_x)

        tex_x = int(wall_x * size)
        if (side == 0 and ray.dir_x > 0) or (side == 1 and ray.dir_y < 0):
            tex_x = size - tex_x - 1

        step = size / line_height
        tex_pos = (draw_start - half + line_height // 2) * step
        texture = self.wall_texture
        for y in range(draw_start, draw_end):
            tex_y = int(tex_pos) % size
            tex_pos += step
            color = texture[tex_y * size + tex_x]
            if side == 1:
                color = shade(color, SIDE_SHADE)
            self.buffer[y * width + x] = color
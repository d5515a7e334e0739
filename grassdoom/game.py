"""World map, player state and movement."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass

from .trig import PI, TrigTables

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
MAP_SIZE = 8
FOV = PI / 3.0
MAX_DEPTH = 16.0
PLAYER_SPEED = 2.0
ROTATION_SPEED = 2.5

MAP: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 0, 0, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 0, 0, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1),
)


class Control(enum.Enum):
    """Player inputs that drive an update."""

    FORWARD = enum.auto()
    BACKWARD = enum.auto()
    STRAFE_LEFT = enum.auto()
    STRAFE_RIGHT = enum.auto()
    TURN_LEFT = enum.auto()
    TURN_RIGHT = enum.auto()


@dataclass
class Player:
    """Player position on the map and view angle in radians."""

    x: float = 2.0
    y: float = 2.0
    angle: float = 0.0


class Game:
    """The world map and the player moving through it."""

    def __init__(self, tables: TrigTables) -> None:
        self.tables = tables
        self.map: list[list[int]] = [list(row) for row in MAP]
        self.player = Player()

    def reset(self) -> None:
        """Put the player back at the starting position."""
        self.player = Player()

    def can_move_to(self, x: float, y: float) -> bool:
        """Whether the cell containing (x, y) is on the map and open."""
        map_x, map_y = int(x), int(y)
        if not (0 <= map_x < MAP_SIZE and 0 <= map_y < MAP_SIZE):
            return False
        return self.map[map_x][map_y] == 0

    def update(self, delta_time: float, pressed: Iterable[Control]) -> None:
        """Advance the player by ``delta_time`` seconds given the held controls."""
        held = set(pressed)
        player = self.player
        look_x = self.tables.cos(player.angle)
        look_y = self.tables.sin(player.angle)
        perp_x, perp_y = look_y, -look_x
        step = PLAYER_SPEED * delta_time

        move_x = move_y = 0.0
        if Control.FORWARD in held:
            move_x += look_x * step
            move_y += look_y * step
        if Control.BACKWARD in held:
            move_x -= look_x * step
            move_y -= look_y * step
        if Control.STRAFE_RIGHT in held:
            move_x -= perp_x * step
            move_y -= perp_y * step
        if Control.STRAFE_LEFT in held:
            move_x += perp_x * step
            move_y += perp_y * step

        if Control.TURN_LEFT in held:
            player.angle -= ROTATION_SPEED * delta_time
        if Control.TURN_RIGHT in held:
            player.angle += ROTATION_SPEED * delta_time

        player.angle = math.fmod(player.angle, 2 * PI)
        if player.angle < 0:
            player.angle += 2 * PI

        if self.can_move_to(player.x + move_x, player.y):
            player.x += move_x
        if self.can_move_to(player.x, player.y + move_y):
            player.y += move_y
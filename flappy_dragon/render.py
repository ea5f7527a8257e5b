"""
render.py: Draw primitives handed to the shell, and builders for each entity.

The session never touches a display. It describes a frame as a list of
commands in screen cells; the shell executes them in order.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .constants import (
    SCREEN_HEIGHT, PLAYER_OFFSET, BLACK, WHITE, GREEN, RED, YELLOW,
    PLAYER_GLYPH, OBSTACLE_GLYPH, GRAVITY_GLYPH, GAP_GLYPH, SLOW_GLYPH,
    UNKNOWN_COIN_GLYPH
)
from .data_models import Player, Obstacle, Powerup, Coin, PowerKind

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class ClearScreen:
    bg: Optional[Color] = None


@dataclass(frozen=True)
class SetCell:
    x: int
    y: int
    fg: Color
    bg: Color
    glyph: str


@dataclass(frozen=True)
class PrintText:
    x: int
    y: int
    text: str
    fg: Color = WHITE
    bg: Color = BLACK


@dataclass(frozen=True)
class PrintCentered:
    y: int
    text: str
    fg: Color = WHITE
    bg: Color = BLACK


DrawCommand = Union[ClearScreen, SetCell, PrintText, PrintCentered]


def screen_x(world_x: int, player_x: int) -> int:
    """World column to screen column; the player is pinned at PLAYER_OFFSET."""
    return world_x - player_x + PLAYER_OFFSET


def draw_player(player: Player) -> List[DrawCommand]:
    return [SetCell(PLAYER_OFFSET, player.y, GREEN, BLACK, PLAYER_GLYPH)]


def draw_obstacle(obstacle: Obstacle, player_x: int) -> List[DrawCommand]:
    column = screen_x(obstacle.x, player_x)
    commands: List[DrawCommand] = []

    # Top half
    for y in range(0, obstacle.gap_top):
        commands.append(SetCell(column, y, RED, BLACK, OBSTACLE_GLYPH))
    # Bottom half
    for y in range(obstacle.gap_bottom, SCREEN_HEIGHT):
        commands.append(SetCell(column, y, RED, BLACK, OBSTACLE_GLYPH))
    return commands


def powerup_glyph(powerup: Powerup) -> str:
    power = powerup.power
    if isinstance(power, Coin):
        # Single digit values only
        return str(power.value) if 0 <= power.value <= 9 else UNKNOWN_COIN_GLYPH
    if power is PowerKind.GRAVITY:
        return GRAVITY_GLYPH
    if power is PowerKind.GAP:
        return GAP_GLYPH
    return SLOW_GLYPH


def draw_powerup(powerup: Powerup, player_x: int) -> List[DrawCommand]:
    column = screen_x(powerup.x, player_x)
    return [SetCell(column, powerup.y, YELLOW, BLACK, powerup_glyph(powerup))]

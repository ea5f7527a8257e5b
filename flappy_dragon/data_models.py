"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from .constants import PLAYER_SPAWN_X, PLAYER_SPAWN_Y


@dataclass
class Player:
    """The avatar. x doubles as the world scroll position."""
    x: int = PLAYER_SPAWN_X
    y: int = PLAYER_SPAWN_Y
    velocity: float = 0.0


@dataclass
class Obstacle:
    """A single column with a passable gap centred on gap_y."""
    x: int
    gap_y: int
    size: int

    @property
    def half_size(self) -> int:
        return self.size // 2

    @property
    def gap_top(self) -> int:
        return self.gap_y - self.half_size

    @property
    def gap_bottom(self) -> int:
        return self.gap_y + self.half_size


class PowerKind(Enum):
    """Effect-free powerup types. They render but do nothing when picked up."""
    SLOW = auto()
    GAP = auto()
    GRAVITY = auto()


@dataclass(frozen=True)
class Coin:
    """Score bonus carrying its reward."""
    value: int


PowerType = Union[Coin, PowerKind]


@dataclass
class Powerup:
    x: int
    y: int
    power: PowerType

    @property
    def is_coin(self) -> bool:
        return isinstance(self.power, Coin)

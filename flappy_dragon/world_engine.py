"""
world_engine.py: Procedural generation of obstacles and the powerup pool.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import (
    OBSTACLE_GAP_Y_RANGE, OBSTACLE_MAX_GAP, OBSTACLE_MIN_GAP,
    POWERUP_Y_RANGE, COIN_VALUE_RANGE, POWERUP_SPAWN_ONE_IN, PLAYER_OFFSET
)
from .data_models import Player, Obstacle, Powerup, PowerType, Coin, PowerKind
from .physics_core import PhysicsCore
from .rng import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class WorldEngine(PhysicsCore):
    """
    Builds the world ahead of the player.
    Inherits core physics and collision from PhysicsCore.
    """
    rng: RandomSource = field(default_factory=RandomSource)

    def new_obstacle(self, world_x: int, score: int) -> Obstacle:
        """The gap narrows by one cell per point, down to OBSTACLE_MIN_GAP."""
        gap_y = self.rng.range(*OBSTACLE_GAP_Y_RANGE)
        size = max(OBSTACLE_MIN_GAP, OBSTACLE_MAX_GAP - score)
        return Obstacle(x=world_x, gap_y=gap_y, size=size)

    def new_powerup(self, world_x: int) -> Powerup:
        y = self.rng.range(*POWERUP_Y_RANGE)
        return Powerup(x=world_x, y=y, power=self._roll_power())

    def _roll_power(self) -> PowerType:
        selector = self.rng.range(0, 4)
        if selector == 0:
            return Coin(value=self.rng.range(*COIN_VALUE_RANGE))
        if selector == 1:
            return PowerKind.SLOW
        if selector == 2:
            return PowerKind.GAP
        return PowerKind.GRAVITY

    def should_spawn_powerup(self) -> bool:
        return self.rng.range(0, POWERUP_SPAWN_ONE_IN) == 0

    def take_activated_powerup(
        self, powerups: List[Powerup], player: Player
    ) -> Optional[Powerup]:
        """
        Removes and returns the first powerup the player activates.
        At most one per call; list order decides ties.
        """
        for index, powerup in enumerate(powerups):
            if self.check_activation(player, powerup):
                return powerups.pop(index)
        return None

    def prune_powerups(self, powerups: List[Powerup], player: Player) -> List[Powerup]:
        """Drops everything that scrolled behind the visible window."""
        trailing_edge = player.x - PLAYER_OFFSET
        kept = [p for p in powerups if p.x > trailing_edge]
        dropped = len(powerups) - len(kept)
        if dropped:
            logger.debug(f"Pruned {dropped} powerup(s) behind x={trailing_edge}")
        return kept

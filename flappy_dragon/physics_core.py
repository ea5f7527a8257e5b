"""
physics_core.py: The deterministic kinematic step and collision logic.
"""

from .constants import (
    GRAVITY_STEP, TERMINAL_VELOCITY, FLAP_VELOCITY, POWERUP_REACH
)
from .data_models import Player, Obstacle, Powerup


class PhysicsCore:
    """
    Fixed-step physics shared by the world engine and the session.
    Positions are integer cells; velocity is fractional and truncated on use.
    """

    GRAVITY_STEP = GRAVITY_STEP
    TERMINAL_VELOCITY = TERMINAL_VELOCITY
    FLAP_VELOCITY = FLAP_VELOCITY

    def apply_gravity_and_movement(self, player: Player) -> None:
        """
        Advances the player by one physics step.
        Mutates velocity, y and x.
        """
        if player.velocity < self.TERMINAL_VELOCITY:
            velocity = round(player.velocity + self.GRAVITY_STEP, 4)
            player.velocity = min(velocity, self.TERMINAL_VELOCITY)

        player.y += int(player.velocity)
        player.x += 1

        # No ceiling, only a floor at altitude zero
        if player.y < 0:
            player.y = 0

    def flap(self, player: Player) -> None:
        """Instantaneous upward impulse, regardless of current velocity."""
        player.velocity = self.FLAP_VELOCITY

    def check_collision(self, player: Player, obstacle: Obstacle) -> bool:
        """
        True when the player sits on the obstacle column outside the gap.
        Requires exact x equality, so x must advance by exactly 1 per step.
        """
        does_x_match = player.x == obstacle.x
        player_above_gap = player.y < obstacle.gap_top
        player_below_gap = player.y > obstacle.gap_bottom
        return does_x_match and (player_above_gap or player_below_gap)

    def check_activation(self, player: Player, powerup: Powerup) -> bool:
        """True when the player reaches the powerup column within reach."""
        x_does_match = player.x == powerup.x
        y_does_match = abs(player.y - powerup.y) <= POWERUP_REACH
        return x_does_match and y_does_match

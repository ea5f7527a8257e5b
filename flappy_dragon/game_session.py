"""
game_session.py: The per-tick game loop and its mode state machine.

Modes:
    MENU: Title screen, waiting for play or quit
    PLAYING: A run in progress
    END: Run over, final score shown with play again / menu / quit
"""

import logging
from enum import Enum, auto
from typing import List, Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, BLACK, NAVY, GAME_TITLE
)
from .data_models import Player, Obstacle, Powerup, Coin
from .render import (
    DrawCommand, ClearScreen, PrintText, PrintCentered,
    draw_player, draw_obstacle, draw_powerup
)
from .rng import RandomSource
from .world_engine import WorldEngine

logger = logging.getLogger(__name__)


class GameMode(Enum):
    MENU = auto()
    PLAYING = auto()
    END = auto()


class Key(Enum):
    """The only inputs the session understands."""
    FLAP = auto()
    ESCAPE = auto()
    PLAY = auto()
    MAIN_MENU = auto()
    QUIT = auto()


class GameSession:
    """
    Owns the player, the single obstacle, the powerup pool and the score.

    The shell calls tick() once per rendered frame with the elapsed time and
    the key pressed during that frame, and draws whatever comes back.
    """

    VALID_TRANSITIONS = {
        (GameMode.MENU, GameMode.PLAYING),
        (GameMode.PLAYING, GameMode.END),
        (GameMode.END, GameMode.MENU),
        (GameMode.END, GameMode.PLAYING),
    }

    def __init__(self, engine: Optional[WorldEngine] = None, seed: Optional[int] = None):
        self.engine = engine or WorldEngine(rng=RandomSource(seed))
        self.mode = GameMode.MENU
        self.player = Player()
        self.frame_time = 0.0
        self.obstacle: Obstacle = self.engine.new_obstacle(SCREEN_WIDTH, 0)
        self.score = 0
        self.powerups: List[Powerup] = []
        self.quitting = False

    # ----------------- Mode transitions -----------------

    def can_transition(self, to_mode: GameMode) -> bool:
        return (self.mode, to_mode) in self.VALID_TRANSITIONS

    def transition(self, to_mode: GameMode) -> bool:
        """Moves to to_mode if the table allows it. Returns False otherwise."""
        if not self.can_transition(to_mode):
            logger.warning(f"Invalid transition: {self.mode.name} -> {to_mode.name}")
            return False

        old_mode = self.mode
        self.mode = to_mode
        logger.info(f"Mode transition: {old_mode.name} -> {to_mode.name}")
        return True

    def restart(self) -> None:
        """Fresh run. The powerup pool is cleared along with everything else."""
        if not self.transition(GameMode.PLAYING):
            return
        self.player = Player()
        self.frame_time = 0.0
        self.obstacle = self.engine.new_obstacle(SCREEN_WIDTH, 0)
        self.score = 0
        self.powerups = []

    def quit(self) -> None:
        logger.info(f"Quit requested from {self.mode.name}")
        self.quitting = True

    # ----------------- Tick dispatch -----------------

    def tick(self, frame_time_ms: float, key: Optional[Key] = None) -> List[DrawCommand]:
        """Runs one frame in the current mode and returns its draw commands."""
        if self.mode is GameMode.MENU:
            return self.main_menu(key)
        if self.mode is GameMode.END:
            return self.dead(key)
        return self.play(frame_time_ms, key)

    def main_menu(self, key: Optional[Key]) -> List[DrawCommand]:
        commands: List[DrawCommand] = [
            ClearScreen(BLACK),
            PrintCentered(5, f"Welcome to {GAME_TITLE}"),
            PrintCentered(8, "(P)lay Game"),
            PrintCentered(9, "(Q)uit the Game"),
        ]

        if key is Key.PLAY:
            self.restart()
        elif key is Key.QUIT:
            self.quit()
        return commands

    def dead(self, key: Optional[Key]) -> List[DrawCommand]:
        commands: List[DrawCommand] = [
            ClearScreen(BLACK),
            PrintCentered(5, "You are dead"),
            PrintCentered(6, f"You earned {self.score} points!"),
            PrintCentered(8, "(M)ain Menu"),
            PrintCentered(9, "(P)lay Again"),
            PrintCentered(10, "(Q)uit Game"),
        ]

        if key is Key.MAIN_MENU:
            self.transition(GameMode.MENU)
        elif key is Key.PLAY:
            self.restart()
        elif key is Key.QUIT:
            self.quit()
        return commands

    def play(self, frame_time_ms: float, key: Optional[Key]) -> List[DrawCommand]:
        # 1. Physics, once per fixed quantum rather than once per frame
        self.frame_time += frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.engine.apply_gravity_and_movement(self.player)

        # 2. Input
        if key is Key.FLAP:
            self.engine.flap(self.player)

        # 3. Events
        self.pass_obstacle()
        self.end_game(key)
        self.activate_powerup()

        # 4. Pool maintenance
        self.powerups = self.engine.prune_powerups(self.powerups, self.player)
        if self.engine.should_spawn_powerup():
            powerup = self.engine.new_powerup(self.player.x + SCREEN_WIDTH)
            self.powerups.append(powerup)
            logger.debug(f"Spawned {powerup}")

        return self.render_all()

    # ----------------- Events -----------------

    def pass_obstacle(self) -> None:
        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = self.engine.new_obstacle(
                self.player.x + SCREEN_WIDTH, self.score)
            logger.debug(f"Obstacle passed, score={self.score}, next gap={self.obstacle.size}")

    def end_game(self, key: Optional[Key]) -> None:
        off_screen = self.player.y > SCREEN_HEIGHT
        hit_obstacle = self.engine.check_collision(self.player, self.obstacle)
        press_escape = key is Key.ESCAPE

        if off_screen or hit_obstacle or press_escape:
            logger.info(
                f"Run over with score {self.score} "
                f"(off_screen={off_screen}, hit={hit_obstacle}, escape={press_escape})")
            self.transition(GameMode.END)

    def activate_powerup(self) -> Optional[Powerup]:
        powerup = self.engine.take_activated_powerup(self.powerups, self.player)
        if powerup is None:
            return None

        if isinstance(powerup.power, Coin):
            self.score += powerup.power.value
            logger.debug(f"Coin collected: +{powerup.power.value}, score={self.score}")
        else:
            # Slow, Gap and Gravity have no gameplay effect yet
            logger.debug(f"{powerup.power.name} powerup collected; effect not implemented")
        return powerup

    # ----------------- Rendering -----------------

    def render_all(self) -> List[DrawCommand]:
        commands: List[DrawCommand] = [
            ClearScreen(NAVY),
            PrintText(0, 0, "Press SPACE to flap!"),
            PrintText(0, 1, f"Score: {self.score}"),
        ]
        commands.extend(draw_player(self.player))
        commands.extend(draw_obstacle(self.obstacle, self.player.x))
        for powerup in self.powerups:
            commands.extend(draw_powerup(powerup, self.player.x))
        return commands

"""
flappy_client.py

pygame shell: frame clock, keyboard translation and glyph-grid rendering.
Holds no game rules; everything is delegated to GameSession.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE, RENDER_FPS, BLACK, GAME_TITLE
)
from .game_session import GameSession, Key
from .render import DrawCommand, ClearScreen, SetCell, PrintText, PrintCentered, Color

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[int, Key] = {
    pygame.K_SPACE: Key.FLAP,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_p: Key.PLAY,
    pygame.K_m: Key.MAIN_MENU,
    pygame.K_q: Key.QUIT,
}


def translate_events(events: Iterable[pygame.event.Event]) -> Tuple[Optional[Key], bool]:
    """
    Reduces one frame of pygame events to (key, window_closed).
    Only one key per frame reaches the session; the last bound press wins.
    """
    key = None
    window_closed = False
    for event in events:
        if event.type == pygame.QUIT:
            window_closed = True
        elif event.type == pygame.KEYDOWN and event.key in KEY_BINDINGS:
            key = KEY_BINDINGS[event.key]
    return key, window_closed


class GlyphGrid:
    """Draws cell-addressed glyphs and text onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, cell_size: int = CELL_SIZE):
        self.surface = surface
        self.cell_size = cell_size
        self.columns = surface.get_width() // cell_size
        self.font = pygame.font.SysFont("dejavusansmono,couriernew,monospace", cell_size)
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        cache_key = (glyph, fg)
        if cache_key not in self._glyph_cache:
            self._glyph_cache[cache_key] = self.font.render(glyph, True, fg)
        return self._glyph_cache[cache_key]

    def set_cell(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        # Off-grid cells are skipped, powerups may sit below the last row
        if not (0 <= x < self.columns and 0 <= y < SCREEN_HEIGHT):
            return
        rect = pygame.Rect(x * self.cell_size, y * self.cell_size,
                           self.cell_size, self.cell_size)
        self.surface.fill(bg, rect)
        image = self._glyph(glyph, fg)
        self.surface.blit(image, image.get_rect(center=rect.center))

    def print_text(self, x: int, y: int, text: str, fg: Color, bg: Color):
        for offset, glyph in enumerate(text):
            self.set_cell(x + offset, y, fg, bg, glyph)

    def execute(self, commands: List[DrawCommand]):
        for command in commands:
            if isinstance(command, ClearScreen):
                self.surface.fill(command.bg or BLACK)
            elif isinstance(command, SetCell):
                self.set_cell(command.x, command.y, command.fg, command.bg, command.glyph)
            elif isinstance(command, PrintText):
                self.print_text(command.x, command.y, command.text, command.fg, command.bg)
            elif isinstance(command, PrintCentered):
                x = (self.columns - len(command.text)) // 2
                self.print_text(x, command.y, command.text, command.fg, command.bg)


class FlappyClient:
    def __init__(self, session: GameSession, fps: int = RENDER_FPS, cell_size: int = CELL_SIZE):
        pygame.init()
        self.session = session
        self.fps = fps
        self.screen = pygame.display.set_mode(
            (SCREEN_WIDTH * cell_size, SCREEN_HEIGHT * cell_size))
        pygame.display.set_caption(GAME_TITLE)
        self.grid = GlyphGrid(self.screen, cell_size)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop. Returns when the session quits."""
        logger.info(f"Starting {GAME_TITLE} at {self.fps} FPS")
        try:
            while not self.session.quitting:
                frame_time_ms = self.clock.tick(self.fps)
                key, window_closed = translate_events(pygame.event.get())
                if window_closed:
                    logger.info("Window closed")
                    break

                commands = self.session.tick(float(frame_time_ms), key)
                self.grid.execute(commands)
                pygame.display.flip()
        finally:
            pygame.quit()

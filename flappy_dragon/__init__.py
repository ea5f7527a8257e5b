"""Flappy Dragon: a side-scrolling reflex game on a glyph grid."""

from .game_session import GameSession, GameMode, Key

__all__ = ["GameSession", "GameMode", "Key"]

"""Root conftest for all tests - shared fixtures and configuration."""
import os
import sys
from collections import deque
from pathlib import Path
from typing import Iterable

import pytest

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless pygame for the shell tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_dragon.game_session import GameSession
from flappy_dragon.rng import RandomSource
from flappy_dragon.world_engine import WorldEngine


class ScriptedRandom(RandomSource):
    """
    Returns queued values in order; once the queue is empty every draw
    returns stop - 1, which never triggers a powerup spawn.
    """

    def __init__(self, values: Iterable[int] = ()):
        super().__init__(seed=0)
        self.values = deque(values)
        self.calls = []

    def queue(self, *values: int) -> None:
        self.values.extend(values)

    def range(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        if self.values:
            value = self.values.popleft()
            assert start <= value < stop, f"{value} outside [{start}, {stop})"
            return value
        return stop - 1


@pytest.fixture
def scripted_rng():
    return ScriptedRandom()


@pytest.fixture
def engine(scripted_rng):
    return WorldEngine(rng=scripted_rng)


@pytest.fixture
def session(engine):
    """A session in MENU mode whose randomness is scripted."""
    return GameSession(engine=engine)


@pytest.fixture
def playing_session(session):
    """A session that has just started a run."""
    session.restart()
    return session

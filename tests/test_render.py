"""Tests for flappy_dragon/render.py - entity draw command builders."""
import pytest

from flappy_dragon.constants import RED, YELLOW, BLACK
from flappy_dragon.data_models import Player, Obstacle, Powerup, Coin, PowerKind
from flappy_dragon.render import (
    SetCell, screen_x, draw_player, draw_obstacle, draw_powerup, powerup_glyph
)


@pytest.mark.unit
class TestScreenX:

    def test_player_column_is_fixed(self):
        """Test the player's own world x maps to column 10."""
        assert screen_x(123, 123) == 10

    def test_objects_ahead_map_right(self):
        """Test spawn distance lands one screen to the right."""
        assert screen_x(85, 5) == 90


@pytest.mark.unit
class TestDrawObstacle:

    def test_gap_rows_are_empty(self):
        """Test cells cover [0, gap_top) and [gap_bottom, 50)."""
        commands = draw_obstacle(Obstacle(x=20, gap_y=20, size=20), player_x=15)
        rows = [c.y for c in commands]

        assert rows == list(range(0, 10)) + list(range(30, 50))
        assert all(c.x == 15 for c in commands)
        assert commands[0] == SetCell(15, 0, RED, BLACK, "|")

    def test_minimum_gap(self):
        """Test a size 2 gap leaves two open rows."""
        commands = draw_obstacle(Obstacle(x=0, gap_y=30, size=2), player_x=0)
        rows = {c.y for c in commands}
        assert 29 not in rows and 30 not in rows
        assert 28 in rows and 31 in rows


@pytest.mark.unit
class TestDrawPowerup:

    @pytest.mark.parametrize("power,glyph", [
        (Coin(2), "2"),
        (Coin(6), "6"),
        (Coin(12), "#"),
        (PowerKind.GRAVITY, "*"),
        (PowerKind.GAP, "↨"),
        (PowerKind.SLOW, ">"),
    ])
    def test_glyphs(self, power, glyph):
        """Test each type's glyph."""
        assert powerup_glyph(Powerup(x=0, y=0, power=power)) == glyph

    def test_powerup_cell(self):
        """Test position and colour."""
        commands = draw_powerup(Powerup(x=30, y=44, power=Coin(3)), player_x=25)
        assert commands == [SetCell(15, 44, YELLOW, BLACK, "3")]

    def test_player_cell(self):
        """Test the player is drawn at its row on the fixed column."""
        [cell] = draw_player(Player(x=99, y=7))
        assert (cell.x, cell.y, cell.glyph) == (10, 7, "@")

"""
Tests for the headless players and the player registry.
"""

import random
import sys
import os

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import UP, DOWN, LEFT, RIGHT, Direction, Grid, Snake, GameState
from players import (
    Player,
    RandomPlayer,
    GreedyPlayer,
    get_player_class,
    list_players,
    AVAILABLE_PLAYERS,
)


def snapshot_of(positions, direction=RIGHT, food=(4, 4), rows=5, cols=5):
    return GameState(Grid(rows, cols), Snake(positions), food=food, current_direction=direction).snapshot()


class TestBasePlayer:

    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(snapshot_of([(0, 0)]))

    def test_safe_moves_in_corner(self):
        moves = Player.safe_moves(snapshot_of([(0, 0)]))
        assert set(moves) == {DOWN, RIGHT}

    def test_safe_moves_exclude_reversal_and_body(self):
        snapshot = snapshot_of([(2, 2), (2, 1), (1, 1), (1, 2)], direction=RIGHT)
        # UP hits (1,2) which is the tail; tail is treated as vacating
        assert set(Player.safe_moves(snapshot)) == {UP, DOWN, RIGHT}

    def test_no_safe_moves(self):
        snapshot = snapshot_of([(0, 0), (0, 1)], direction=LEFT, food=(0, 0), rows=1, cols=2)
        assert Player.safe_moves(snapshot) == []


class TestRandomPlayer:

    def test_returns_safe_move(self):
        player = RandomPlayer(random.Random(0))
        snapshot = snapshot_of([(0, 0)])
        for _ in range(20):
            assert player.get_move(snapshot) in (DOWN, RIGHT)

    def test_fallback_when_trapped(self):
        player = RandomPlayer(random.Random(0))
        snapshot = snapshot_of([(0, 0), (0, 1)], direction=LEFT, food=(0, 0), rows=1, cols=2)
        assert isinstance(player.get_move(snapshot), Direction)


class TestGreedyPlayer:

    def test_heads_toward_food(self):
        player = GreedyPlayer(random.Random(0))
        assert player.get_move(snapshot_of([(0, 0)], food=(3, 0))) is DOWN
        assert player.get_move(snapshot_of([(2, 2)], food=(2, 0), direction=UP)) is LEFT

    def test_prefers_current_heading_on_ties(self):
        player = GreedyPlayer(random.Random(0))
        snapshot = snapshot_of([(0, 0)], food=(3, 3), direction=DOWN)
        assert player.get_move(snapshot) is DOWN

    def test_avoids_body_when_food_is_behind(self):
        player = GreedyPlayer(random.Random(0))
        snapshot = snapshot_of([(2, 2), (2, 1), (2, 0)], food=(1, 0), direction=RIGHT)
        assert player.get_move(snapshot) is UP


class TestRegistry:

    def test_available_players(self):
        assert AVAILABLE_PLAYERS == ["random", "greedy"]
        assert [p["key"] for p in list_players()] == AVAILABLE_PLAYERS

    def test_lookup(self):
        assert get_player_class("random") is RandomPlayer
        assert get_player_class(" Greedy ") is GreedyPlayer

    def test_default(self):
        assert get_player_class(None) is GreedyPlayer
        assert get_player_class("") is GreedyPlayer

    def test_unknown_player(self):
        with pytest.raises(ValueError, match="Unknown player"):
            get_player_class("perfect")

"""Tests for the configuration surface."""

import pytest

from board_engine import Difficulty, GameConfig, GameMode


@pytest.mark.parametrize("name, expected", [
    ("easy", Difficulty.EASY),
    ("Medium", Difficulty.MEDIUM),
    (" HARD ", Difficulty.HARD),
])
def test_difficulty_from_name(name, expected):
    assert Difficulty.from_name(name) == expected


def test_unknown_difficulty():
    with pytest.raises(ValueError, match="easy, medium, hard"):
        Difficulty.from_name("expert")


@pytest.mark.parametrize("name, expected", [
    ("two-player", GameMode.TWO_PLAYER),
    ("single_player", GameMode.SINGLE_PLAYER),
])
def test_mode_from_name(name, expected):
    assert GameMode.from_name(name) == expected


def test_unknown_mode():
    with pytest.raises(ValueError):
        GameMode.from_name("online")


def test_defaults_match_original_game():
    assert GameConfig.BOARD_CELLS == 9
    assert GameConfig.MAX_PIECES == 3
    assert GameConfig.DEFAULT_MODE == GameMode.TWO_PLAYER
    assert GameConfig.DEFAULT_DIFFICULTY == Difficulty.EASY

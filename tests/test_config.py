"""Tests for GameConfig validation and derived values."""

import pytest

from console_snake.config import MAX_SPEED, GameConfig
from console_snake.geometry import Point


class TestConfigDefaults:
    def test_defaults(self):
        config = GameConfig()
        assert config.width == 10
        assert config.height == 10
        assert config.initial_length == 3
        assert config.max_speed == MAX_SPEED == 20

    def test_start_point_is_centre(self):
        assert GameConfig().start_point == Point(5, 5)
        assert GameConfig(width=7, height=9).start_point == Point(3, 4)


class TestConfigValidation:
    def test_zero_dimensions(self):
        with pytest.raises(ValueError, match="at least 1"):
            GameConfig(width=0, height=10)
        with pytest.raises(ValueError, match="at least 1"):
            GameConfig(width=10, height=0)

    def test_snake_must_fit_every_heading(self):
        with pytest.raises(ValueError, match="cannot fit"):
            GameConfig(width=4, height=10)
        with pytest.raises(ValueError, match="cannot fit"):
            GameConfig(width=10, height=3)

    def test_smallest_board_for_default_snake(self):
        config = GameConfig(width=5, height=5)
        assert config.speed_threshold == 1

    def test_zero_speed_threshold_rejected(self):
        with pytest.raises(ValueError, match="max_speed"):
            GameConfig(width=5, height=3, initial_length=1)

    def test_invalid_initial_length(self):
        with pytest.raises(ValueError, match="initial_length"):
            GameConfig(initial_length=0)

    def test_invalid_max_speed(self):
        with pytest.raises(ValueError, match="max_speed"):
            GameConfig(max_speed=0)

    def test_invalid_intervals(self):
        with pytest.raises(ValueError, match="interval"):
            GameConfig(min_interval_ms=800, max_interval_ms=700)
        with pytest.raises(ValueError, match="interval"):
            GameConfig(min_interval_ms=-1)


class TestConfigDerived:
    def test_speed_threshold(self):
        assert GameConfig(width=10, height=10).speed_threshold == 5
        assert GameConfig(width=20, height=20).speed_threshold == 20

    def test_interval_ramp(self):
        config = GameConfig()
        assert config.interval_ms(0) == 700
        assert config.interval_ms(10) == 450
        assert config.interval_ms(20) == 200

    def test_interval_decreases_with_speed(self):
        config = GameConfig()
        intervals = [config.interval_ms(s) for s in range(config.max_speed + 1)]
        assert intervals == sorted(intervals, reverse=True)

"""Tests for aspect module."""

import pytest
from ascii_raster.aspect import resolve_dimensions, round_half_up
from ascii_raster.config import Config


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.0, 0), (0.49, 0), (0.5, 1), (1.5, 2), (2.5, 3), (-0.5, -1), (-1.4, -1)],
    )
    def test_ties_away_from_zero(self, value, expected):
        assert round_half_up(value) == expected


class TestResolveDimensions:
    def test_auto_height_from_width(self):
        cfg = resolve_dimensions(Config.from_options(width=4), 4, 2)
        assert (cfg.width, cfg.height) == (4, 1)
        assert cfg.resolved

    def test_default_width_square_source(self):
        cfg = resolve_dimensions(Config.from_options(), 100, 100)
        assert (cfg.width, cfg.height) == (78, 39)

    def test_auto_width_from_height(self):
        cfg = resolve_dimensions(Config.from_options(height=10), 100, 50)
        assert (cfg.width, cfg.height) == (40, 10)

    def test_explicit_size_is_untouched(self):
        cfg = Config.from_options(size=(7, 3))
        assert resolve_dimensions(cfg, 640, 480) is cfg

    def test_degenerate_height_grows_width(self):
        """Very wide source: height rounds to 0 until width reaches 50."""
        cfg = resolve_dimensions(Config.from_options(width=1), 100, 2)
        assert (cfg.width, cfg.height) == (50, 1)

    def test_degenerate_width_grows_height(self):
        cfg = resolve_dimensions(Config.from_options(height=1), 2, 100)
        assert (cfg.width, cfg.height) == (1, 13)

    def test_input_config_not_mutated(self):
        cfg = Config.from_options(width=10)
        resolve_dimensions(cfg, 20, 20)
        assert cfg.auto_height and cfg.height == 0

    @pytest.mark.parametrize("src", [(2, 2), (2, 5000), (5000, 2), (640, 480)])
    @pytest.mark.parametrize("fixed", [1, 3, 80])
    def test_always_terminates_with_positive_sizes(self, src, fixed):
        for cfg in (Config.from_options(width=fixed), Config.from_options(height=fixed)):
            out = resolve_dimensions(cfg, *src)
            assert out.width >= 1 and out.height >= 1

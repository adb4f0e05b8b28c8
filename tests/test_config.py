"""Tests for config module."""

import dataclasses

import pytest
from ascii_raster.config import DEFAULT_PALETTE, DEFAULT_WIDTH, Config, parse_size
from ascii_raster.errors import InvalidConfiguration


class TestConfig:
    def test_defaults(self):
        cfg = Config()
        assert cfg.width == DEFAULT_WIDTH
        assert cfg.auto_height and not cfg.auto_width
        assert cfg.palette == DEFAULT_PALETTE

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Config().invert = True

    @pytest.mark.parametrize("palette", ["", "#"])
    def test_short_palette_rejected(self, palette):
        with pytest.raises(InvalidConfiguration):
            Config(palette=palette)

    def test_error_is_also_value_error(self):
        with pytest.raises(ValueError):
            Config(palette="#")

    @pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_explicit_size_rejected(self, size):
        with pytest.raises(InvalidConfiguration):
            Config.from_options(size=size)

    def test_both_auto_rejected(self):
        with pytest.raises(InvalidConfiguration):
            Config(auto_width=True, auto_height=True)

    def test_bad_font_size_rejected(self):
        with pytest.raises(InvalidConfiguration):
            Config(html_font_size=0)


class TestFromOptions:
    def test_neither_defaults_width(self):
        cfg = Config.from_options()
        assert (cfg.width, cfg.auto_width, cfg.auto_height) == (DEFAULT_WIDTH, False, True)

    def test_width_only(self):
        cfg = Config.from_options(width=40)
        assert cfg.width == 40 and cfg.auto_height

    def test_height_only(self):
        cfg = Config.from_options(height=12)
        assert cfg.height == 12 and cfg.auto_width and not cfg.auto_height

    def test_width_and_height(self):
        cfg = Config.from_options(width=10, height=5)
        assert cfg.resolved and (cfg.width, cfg.height) == (10, 5)

    def test_size_wins(self):
        cfg = Config.from_options(width=10, size=(3, 2))
        assert (cfg.width, cfg.height) == (3, 2)

    def test_flags_pass_through(self):
        cfg = Config.from_options(width=5, invert=True, flip_x=True, palette="ab")
        assert cfg.invert and cfg.flip_x and cfg.palette == "ab"


class TestParseSize:
    def test_valid(self):
        assert parse_size("80x25") == (80, 25)
        assert parse_size("3X2") == (3, 2)

    @pytest.mark.parametrize("text", ["80", "80x", "axb", "1x2x3"])
    def test_invalid(self, text):
        with pytest.raises(InvalidConfiguration):
            parse_size(text)

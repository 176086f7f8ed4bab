"""Tests for runtime parameter validation."""

import pytest

from wavspec import config
from wavspec.config import SpectrogramConfig
from wavspec.errors import ConfigError


class TestSpectrogramConfig:
    def test_defaults(self):
        cfg = SpectrogramConfig("in.wav", "out.png")
        assert cfg.window_size == 1024
        assert cfg.hop_size == 512
        assert cfg.physical_units is False

    def test_hop_equal_to_window_is_allowed(self):
        cfg = SpectrogramConfig("in.wav", "out.png", window_size=256, hop_size=256)
        assert cfg.hop_size == 256

    @pytest.mark.parametrize("window, hop", [(0, 1), (-1, 1), (1024, 0), (1024, -512), (256, 512)])
    def test_invalid_sizes(self, window, hop):
        with pytest.raises(ConfigError):
            SpectrogramConfig("in.wav", "out.png", window_size=window, hop_size=hop)

    @pytest.mark.parametrize("inp, out", [("", "out.png"), ("in.wav", "")])
    def test_empty_paths(self, inp, out):
        with pytest.raises(ConfigError):
            SpectrogramConfig(inp, out)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            SpectrogramConfig("in.wav", "out.png", window_size=0)

    def test_from_defaults(self, monkeypatch):
        monkeypatch.setattr(config, "INPUT_PATH", "a.wav")
        cfg = SpectrogramConfig.from_defaults(hop_size=256)
        assert cfg.input_path == "a.wav"
        assert cfg.output_path == config.OUTPUT_PATH
        assert cfg.hop_size == 256

    def test_marker_is_about_three_pixels_wide(self):
        # scatter size is an area in points^2; one point is DPI / 72 pixels
        diameter_px = config.MARKER_SIZE ** 0.5 * config.DPI / 72
        assert 2.5 <= diameter_px <= 3.5

"""Tests for codec configuration."""

import pytest

from pgnumeric.config import DEFAULT_CODEC_CONFIG, CodecConfig


class TestCodecConfig:
    """Tests for CodecConfig."""

    def test_defaults(self):
        assert DEFAULT_CODEC_CONFIG.encode_nan is True
        assert DEFAULT_CODEC_CONFIG.max_scale == 65535

    def test_max_scale_out_of_range_raises(self):
        with pytest.raises(ValueError):
            CodecConfig(max_scale=65536)
        with pytest.raises(ValueError):
            CodecConfig(max_scale=-1)

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("PGNUMERIC_ENCODE_NAN", raising=False)
        monkeypatch.delenv("PGNUMERIC_MAX_SCALE", raising=False)
        assert CodecConfig.from_env() == DEFAULT_CODEC_CONFIG

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PGNUMERIC_ENCODE_NAN", "no")
        monkeypatch.setenv("PGNUMERIC_MAX_SCALE", "16383")
        config = CodecConfig.from_env()
        assert config.encode_nan is False
        assert config.max_scale == 16383

    @pytest.mark.parametrize("raw", ["true", "1", "YES"])
    def test_from_env_truthy(self, monkeypatch, raw):
        monkeypatch.setenv("PGNUMERIC_ENCODE_NAN", raw)
        assert CodecConfig.from_env().encode_nan is True

"""Tests for config.py - JSON config loading."""

from __future__ import annotations

import json
import logging

import pytest

from colorkit.config import CONFIG_ENV_VAR, ColorKitConfig, load_config
from colorkit.gradient import GradientInterpolation


@pytest.fixture
def write_config(tmp_path):
    def _write(content):
        path = tmp_path / "config.json"
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return path

    return _write


class TestLoadConfig:
    """Tests for load_config() function."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.json") == ColorKitConfig()

    def test_values_loaded(self, write_config):
        path = write_config({"default_steps": 12, "interpolation": "hsl", "uppercase": False})
        config = load_config(path)
        assert config.default_steps == 12
        assert config.interpolation_mode is GradientInterpolation.HSL
        assert config.uppercase is False
        assert config.include_alpha is False

    def test_unknown_keys_ignored(self, write_config):
        config = load_config(write_config({"theme": "dark", "default_steps": 3}))
        assert config.default_steps == 3

    def test_env_var(self, write_config, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(write_config({"include_alpha": True})))
        assert load_config().include_alpha is True

    def test_explicit_path_beats_env(self, write_config, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(write_config({"default_steps": 4})))
        assert load_config(tmp_path / "missing.json").default_steps == 8

    def test_broken_json(self, write_config, caplog):
        with caplog.at_level(logging.WARNING, logger="colorkit"):
            config = load_config(write_config("{not json"))
        assert config == ColorKitConfig()
        assert "unreadable config" in caplog.text

    def test_not_an_object(self, write_config, caplog):
        with caplog.at_level(logging.WARNING, logger="colorkit"):
            assert load_config(write_config("[1, 2]")) == ColorKitConfig()
        assert "expected a JSON object" in caplog.text

    def test_bad_interpolation_reset(self, write_config):
        config = load_config(write_config({"interpolation": "cubic", "default_steps": 5}))
        assert config.interpolation == "perceptual"
        assert config.default_steps == 5

    @pytest.mark.parametrize("steps", [0, -1, "ten"])
    def test_bad_steps_reset(self, write_config, steps):
        assert load_config(write_config({"default_steps": steps})).default_steps == 8

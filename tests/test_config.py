"""Tests for server configuration."""

import pytest

from snake_session.config import ServerConfig
from snake_session.engine import GameConfig


class TestServerConfig:
    def test_defaults(self):
        config = ServerConfig()
        assert config.board_width == 30
        assert config.board_height == 20
        assert config.initial_length == 3
        assert config.tick_interval_ms == 120
        assert config.tick_interval == pytest.approx(0.12)
        assert config.port == 8080

    def test_frozen(self):
        config = ServerConfig()
        with pytest.raises(AttributeError):
            config.port = 1  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"tick_interval_ms": 0},
            {"port": 70000},
            {"board_width": 0},
            {"initial_length": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ServerConfig(**kwargs)

    def test_game_config(self):
        config = ServerConfig(board_width=12, board_height=9, initial_length=4)
        assert config.game_config(seed=7) == GameConfig(12, 9, 4, seed=7)


class TestServerConfigSerialization:
    def test_save_load_roundtrip(self, tmp_path):
        config = ServerConfig(board_width=16, tick_interval_ms=80, port=9000)
        path = tmp_path / "sub" / "config.json"
        config.save(path)
        assert ServerConfig.load(path) == config

    def test_to_dict(self):
        d = ServerConfig().to_dict()
        assert d["tick_interval_ms"] == 120
        assert d["host"] == "0.0.0.0"

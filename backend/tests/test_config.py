from __future__ import annotations

from span import config


def test_world_size_defaults(monkeypatch):
    monkeypatch.delenv("ZOOMSPAN_WORLD_SIZE", raising=False)
    assert config.world_size() == 512


def test_world_size_env(monkeypatch):
    monkeypatch.setenv("ZOOMSPAN_WORLD_SIZE", "256")
    assert config.world_size() == 256


def test_world_size_ignores_garbage(monkeypatch):
    for raw in ["abc", "-1", "0", "  "]:
        monkeypatch.setenv("ZOOMSPAN_WORLD_SIZE", raw)
        assert config.world_size() == 512


def test_debug_flag(monkeypatch):
    monkeypatch.setenv("ZOOMSPAN_DEBUG", "yes")
    assert config.debug_enabled() is True
    monkeypatch.setenv("ZOOMSPAN_DEBUG", "0")
    assert config.debug_enabled() is False

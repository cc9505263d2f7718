"""Shared fixtures for unit tests."""
import importlib

import pytest

from poker_hands import config as poker_config


@pytest.fixture
def env_config(monkeypatch):
    """Reload the config module with the given environment variables set."""
    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(poker_config)

    yield _reload

    monkeypatch.undo()
    importlib.reload(poker_config)

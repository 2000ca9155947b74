"""
Tests for config.py - environment-driven settings.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake.config import Settings, load_settings

SNAKE_VARS = ("SNAKE_LOG_LEVEL", "SNAKE_START_LEVEL", "SNAKE_MAX_TICKS", "SNAKE_PLAYER", "SNAKE_REALTIME")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SNAKE_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_settings() == Settings()


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SNAKE_START_LEVEL", "4")
    monkeypatch.setenv("SNAKE_MAX_TICKS", "50")
    monkeypatch.setenv("SNAKE_PLAYER", "random")
    monkeypatch.setenv("SNAKE_REALTIME", "yes")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.start_level == 4
    assert settings.max_ticks == 50
    assert settings.player == "random"
    assert settings.realtime is True


def test_blank_integer_uses_default(monkeypatch):
    monkeypatch.setenv("SNAKE_MAX_TICKS", " ")
    assert load_settings().max_ticks == 500


@pytest.mark.parametrize("name,value", [
    ("SNAKE_MAX_TICKS", "many"),
    ("SNAKE_START_LEVEL", "0"),
    ("SNAKE_MAX_TICKS", "-1"),
])
def test_rejects_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()

# tests/test_config.py
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings."""

from __future__ import annotations

import importlib

import pytest

import core.config as config


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 60),
        ("", 60),
        ("  ", 60),
        ("soon", 60),
        ("1.5", 60),
        ("0", 10),
        ("-30", 10),
        ("9", 10),
        ("10", 10),
        (" 45 ", 45),
        ("3600", 3600),
        (120, 120),
    ],
)
def test_clamp_refresh_interval(raw, expected):
    assert config.clamp_refresh_interval(raw) == expected


@pytest.fixture
def reload_config(monkeypatch):
    """Reload `core.config` under a patched environment, then restore it."""

    def _reload(**env):
        for name in (
            "LEADERBOARD_JSON_URL",
            "NETWORK_LABEL",
            "REFRESH_INTERVAL_SECONDS",
            "HTTP_TIMEOUT",
            "EXPLORER_ACCOUNT_URL",
            "LEADERBOARD_THEME",
            "LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        # Keep a developer's local .env out of the picture.
        monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **k: False)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    cfg = reload_config()
    s = cfg.settings

    assert s.LEADERBOARD_JSON_URL == ""
    assert s.NETWORK_LABEL == "testnet"
    assert s.REFRESH_INTERVAL_SECONDS == 60
    assert s.HTTP_TIMEOUT == 20
    assert s.EXPLORER_ACCOUNT_URL == "https://testnet.cspr.live/account/{public_key}"
    assert s.LEADERBOARD_THEME == "retro"
    assert s.LOG_LEVEL == "INFO"


def test_overrides(reload_config):
    cfg = reload_config(
        LEADERBOARD_JSON_URL="  https://example.test/lb.json ",
        NETWORK_LABEL="mainnet",
        REFRESH_INTERVAL_SECONDS="5",
        HTTP_TIMEOUT="3",
        LEADERBOARD_THEME="Classic",
        LOG_LEVEL="debug",
    )
    s = cfg.settings

    assert s.LEADERBOARD_JSON_URL == "https://example.test/lb.json"
    assert s.NETWORK_LABEL == "mainnet"
    assert s.REFRESH_INTERVAL_SECONDS == 10
    assert s.HTTP_TIMEOUT == 3
    assert s.LEADERBOARD_THEME == "classic"
    assert s.LOG_LEVEL == "DEBUG"


def test_bad_values_fall_back(reload_config):
    cfg = reload_config(HTTP_TIMEOUT="-1", LEADERBOARD_THEME="neon", LOG_LEVEL="chatty")
    s = cfg.settings

    assert s.HTTP_TIMEOUT == 20
    assert s.LEADERBOARD_THEME == "retro"
    assert s.LOG_LEVEL == "INFO"


def test_settings_are_frozen():
    with pytest.raises(Exception):
        config.settings.NETWORK_LABEL = "mainnet"  # type: ignore[misc]

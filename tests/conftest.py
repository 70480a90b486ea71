"""
Shared fixtures: every test runs against an empty, throwaway config directory
and with no PRETTYTERM_* environment overrides.
"""

import os

import pytest

from prettyterm import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    for key in list(os.environ):
        if key.startswith(config.ENV_PREFIX):
            monkeypatch.delenv(key)
    config_dir = tmp_path / "prettyterm"
    monkeypatch.setattr(config, "PRETTYTERM_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.json")
    return config_dir

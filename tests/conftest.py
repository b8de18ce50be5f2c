"""Shared fixtures: keep config reads away from the real home directory."""

import pytest

from peselkit import config as config_module
from peselkit.cli.commands import config_cmd

_ENV_VARS = (
    "PESELKIT_USE_COMMON_SYMBOLS",
    "PESELKIT_BLACKLIST_FILE",
    "PESELKIT_FROM_YEAR",
    "PESELKIT_TO_YEAR",
    "PESELKIT_CLI_MODE",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    yield config_file
    config_module.reset_config()

"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest
from unittest.mock import patch

from hours_hook.config import (
    ConfigError,
    HookConfig,
    load_config,
    resolve_log_file,
)


class TestResolveLogFile:
    def test_uses_home_from_env(self):
        path = resolve_log_file({"HOME": "/home/alice"})
        assert path == Path("/home/alice/.local/state/hours.log.json")

    def test_falls_back_to_path_home(self):
        with patch("hours_hook.config.Path.home", return_value=Path("/srv/user")):
            path = resolve_log_file({})
        assert path == Path("/srv/user/.local/state/hours.log.json")

    def test_missing_home_raises_config_error(self):
        with patch("hours_hook.config.Path.home", side_effect=RuntimeError("no home")):
            with pytest.raises(ConfigError):
                resolve_log_file({})


class TestLoadConfig:
    def test_defaults(self):
        config = load_config(env={"HOME": "/home/bob"})
        assert config.interval == 2.0
        assert config.command == "record-hours"
        assert config.project is None
        assert config.debug is False
        assert config.log_file == Path("/home/bob/.local/state/hours.log.json")

    def test_environment_values(self):
        env = {
            "HOME": "/home/bob",
            "HOURS_HOOK_INTERVAL": "5",
            "HOURS_HOOK_FILE": "/tmp/hours.json",
            "HOURS_HOOK_COMMAND": "my-recorder",
            "HOURS_HOOK_PROJECT": "thesis",
            "HOURS_HOOK_DEBUG": "yes",
        }
        config = load_config(env=env)
        assert config.interval == 5.0
        assert config.log_file == Path("/tmp/hours.json")
        assert config.command == "my-recorder"
        assert config.project == "thesis"
        assert config.debug is True

    def test_overrides_win_over_environment(self):
        env = {"HOME": "/home/bob", "HOURS_HOOK_INTERVAL": "5", "HOURS_HOOK_PROJECT": "a"}
        config = load_config({"interval": "10", "project": "b"}, env=env)
        assert config.interval == 10.0
        assert config.project == "b"

    def test_none_overrides_are_ignored(self):
        env = {"HOME": "/home/bob", "HOURS_HOOK_PROJECT": "a"}
        config = load_config({"project": None, "debug": None}, env=env)
        assert config.project == "a"
        assert config.debug is False

    @pytest.mark.parametrize("value", ["0", "-2", "abc", "nan"])
    def test_invalid_interval(self, value):
        with pytest.raises(ConfigError):
            load_config({"interval": value}, env={"HOME": "/home/bob"})

    def test_unknown_override_key(self):
        with pytest.raises(ConfigError):
            load_config({"colour": "blue"}, env={"HOME": "/home/bob"})

    def test_config_is_immutable(self):
        config = HookConfig(log_file=Path("/tmp/x.json"))
        with pytest.raises(AttributeError):
            config.interval = 3

# data class for hook configuration
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .throttle import DEFAULT_INTERVAL

DEFAULT_COMMAND = "record-hours"
LOG_FILE_RELATIVE = Path(".local") / "state" / "hours.log.json"

ENV_INTERVAL = "HOURS_HOOK_INTERVAL"
ENV_FILE = "HOURS_HOOK_FILE"
ENV_COMMAND = "HOURS_HOOK_COMMAND"
ENV_PROJECT = "HOURS_HOOK_PROJECT"
ENV_DEBUG = "HOURS_HOOK_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when the hook configuration cannot be resolved."""


def resolve_log_file(env: Optional[Mapping[str, str]] = None) -> Path:
    """Default log file under the user's home directory."""
    env = os.environ if env is None else env
    home = env.get("HOME")
    if home:
        return Path(home) / LOG_FILE_RELATIVE
    try:
        return Path.home() / LOG_FILE_RELATIVE
    except RuntimeError as e:
        raise ConfigError(f"Cannot determine home directory: {e}")


@dataclass(frozen=True)
class HookConfig:
    interval: float = DEFAULT_INTERVAL
    log_file: Path = field(default_factory=resolve_log_file)
    command: str = DEFAULT_COMMAND
    project: Optional[str] = None
    debug: bool = False


def _parse_interval(value) -> float:
    try:
        interval = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid interval: {value!r}")
    if not interval > 0:
        raise ConfigError(f"Interval must be positive, got {value!r}")
    return interval


def load_config(
    overrides: Optional[Mapping[str, object]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> HookConfig:
    """
    Build a HookConfig from environment variables, then explicit overrides.

    Overrides whose value is None are ignored so argparse namespaces can be passed
    straight through.
    """
    env = os.environ if env is None else env
    values = {}

    if env.get(ENV_INTERVAL):
        values["interval"] = env[ENV_INTERVAL]
    if env.get(ENV_FILE):
        values["log_file"] = env[ENV_FILE]
    if env.get(ENV_COMMAND):
        values["command"] = env[ENV_COMMAND]
    if env.get(ENV_PROJECT):
        values["project"] = env[ENV_PROJECT]
    if env.get(ENV_DEBUG):
        values["debug"] = env[ENV_DEBUG].strip().lower() in _TRUTHY

    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    unknown = set(values) - set(HookConfig.__dataclass_fields__)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    if "log_file" in values:
        values["log_file"] = Path(os.path.expanduser(str(values["log_file"])))
    else:
        values["log_file"] = resolve_log_file(env)

    if "interval" in values:
        values["interval"] = _parse_interval(values["interval"])

    return HookConfig(**values)

"""
hours-hook - throttled activity recording for record-hours.
"""

from .throttle import ThrottleGate
from .config import HookConfig, ConfigError, load_config
from .emitter import ActivityEmitter
from .hook import ActivityHook


__all__ = [
    "ThrottleGate",
    "HookConfig",
    "ConfigError",
    "load_config",
    "ActivityEmitter",
    "ActivityHook",
]

"""
Observer module for hours-hook.

Host event sources that feed raw input events into an activity hook.
"""

from .input import InputListener


__all__ = ["InputListener"]

"""
Activity hook: the component that owns the throttle gate.

The hook is registered with a host event source. Every raw event is run through the
gate, and events that pass trigger exactly one emission. All context the emitter
needs (log file, project) is resolved when the hook is built, not per event.
"""

import logging
import threading
import time
from typing import Callable, Optional

from .config import HookConfig
from .emitter import ActivityEmitter
from .observers import InputListener
from .throttle import ThrottleGate

logger = logging.getLogger("ActivityHook")
logger.addHandler(logging.NullHandler())


class ActivityHook:
    def __init__(
        self,
        config: HookConfig,
        emitter: Optional[ActivityEmitter] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.emitter = emitter or ActivityEmitter(
            log_file=config.log_file, command=config.command, project=config.project
        )
        self._clock = clock
        self._gate = ThrottleGate(interval=config.interval, clock=clock)
        # pynput delivers mouse and keyboard events on separate threads
        self._lock = threading.Lock()
        self._listener = None

        self.emitted = 0
        self.suppressed = 0

    @property
    def gate(self) -> ThrottleGate:
        return self._gate

    @property
    def registered(self) -> bool:
        return self._listener is not None

    def on_event(self, *args) -> bool:
        """
        Host callback for a single raw input event.

        Event payloads are ignored; only the time of the call matters. Returns
        whether an emission was triggered.
        """
        with self._lock:
            passed = self._gate.evaluate(self._clock())
            if not passed:
                self.suppressed += 1
                return False
            self.emitted += 1

        try:
            self.emitter.emit()
        except Exception as e:
            logger.error(f"Emission failed: {e}")
        return True

    def _prepare_log_dir(self) -> None:
        try:
            self.config.log_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Cannot create {self.config.log_file.parent}: {e}")

    def register(self, listener_factory: Callable[..., InputListener] = InputListener) -> bool:
        """
        Attach the hook to a host event source.

        Returns False if the source could not be started; the hook is then left
        unregistered.
        """
        if self._listener is not None:
            logger.warning("Hook already registered")
            return True

        self._prepare_log_dir()
        self.emitter.locate()

        listener = listener_factory(on_event=self.on_event)
        if not listener.start():
            logger.warning("Input source unavailable, activity will not be recorded")
            return False

        self._listener = listener
        logger.info(
            f"Recording activity to {self.config.log_file} "
            f"(interval {self.config.interval:g}s)"
        )
        return True

    def unregister(self) -> None:
        if self._listener is None:
            return
        self._listener.stop()
        self._listener = None
        logger.info(f"Hook stopped: {self.emitted} emitted, {self.suppressed} suppressed")

import logging
from typing import Callable

logger = logging.getLogger("InputObserver")


class InputListener:
    """
    Forwards every raw mouse and keyboard event to a single callback.

    Abstracts pynput so a missing library or denied input permissions only disable
    the listener instead of failing the caller.
    """

    def __init__(
        self,
        on_event: Callable[..., object],
        track_mouse: bool = True,
        track_keyboard: bool = True,
        track_moves: bool = False,
    ):
        self.on_event = on_event
        self.track_mouse = track_mouse
        self.track_keyboard = track_keyboard
        self.track_moves = track_moves

        self._mouse_listener = None
        self._keyboard_listener = None
        self._available = False

        try:
            from pynput import mouse, keyboard

            self._mouse_cls = mouse.Listener
            self._keyboard_cls = keyboard.Listener
            self._available = True
        except ImportError:
            logger.warning("pynput not found. Input monitoring disabled.")
            self._available = False
        except Exception as e:
            logger.warning(f"Failed to initialize input libraries: {e}")
            self._available = False

    @property
    def available(self) -> bool:
        return self._available

    @property
    def running(self) -> bool:
        return self._mouse_listener is not None or self._keyboard_listener is not None

    def _forward(self, *args) -> None:
        # pynput stops a listener when its callback raises; never let that happen
        try:
            self.on_event(*args)
        except Exception as e:
            logger.error(f"Input callback failed: {e}")

    def start(self) -> bool:
        if not self._available:
            return False

        try:
            if self.track_mouse:
                self._mouse_listener = self._mouse_cls(
                    on_click=self._forward,
                    on_scroll=self._forward,
                    on_move=self._forward if self.track_moves else None,
                )
                self._mouse_listener.start()

            if self.track_keyboard:
                self._keyboard_listener = self._keyboard_cls(on_press=self._forward)
                self._keyboard_listener.start()

            logger.info("Input listeners started")
            return True

        except Exception as e:
            logger.error(f"Failed to start input listeners: {e}")
            self.stop()
            return False

    def stop(self) -> None:
        if self._mouse_listener:
            self._mouse_listener.stop()
            self._mouse_listener = None

        if self._keyboard_listener:
            self._keyboard_listener.stop()
            self._keyboard_listener = None

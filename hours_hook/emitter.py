"""
Fire-and-forget launcher for the external ``record-hours`` recorder.

Each emission spawns one recorder process that appends an activity record to the
log file. The process is never waited on and its exit status is never inspected.
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Union

from .config import DEFAULT_COMMAND

logger = logging.getLogger("ActivityEmitter")


def build_command(
    executable: str, log_file: Union[str, Path], project: Optional[str] = None
) -> List[str]:
    """Argument vector for one ``record`` invocation."""
    argv = [executable, "--file", str(log_file), "record"]
    if project:
        argv += ["--project", project]
    return argv


class ActivityEmitter:
    """Launches the recorder for each emission without tracking it."""

    def __init__(
        self,
        log_file: Union[str, Path],
        command: str = DEFAULT_COMMAND,
        project: Optional[str] = None,
        spawn: Callable[..., object] = subprocess.Popen,
    ):
        self.log_file = Path(log_file)
        self.command = command
        self.project = project
        self._spawn = spawn
        self._executable: Optional[str] = None
        self._warned_missing = False

    def locate(self) -> Optional[str]:
        """
        Resolve the recorder executable; None if it is not on PATH.

        Only a successful lookup is cached, so a recorder installed mid-session is
        picked up by the next emission.
        """
        if self._executable is not None:
            return self._executable

        self._executable = shutil.which(self.command)
        if self._executable is None:
            if not self._warned_missing:
                logger.warning(f"{self.command} not found on PATH. Skipping emissions until it is.")
                self._warned_missing = True
        else:
            logger.info(f"Using recorder at {self._executable}")
        return self._executable

    @property
    def available(self) -> bool:
        return self.locate() is not None

    def emit(self) -> bool:
        """
        Spawn the recorder. Returns True if the process was launched.

        Launch failures are logged and swallowed so they never reach the caller's
        event dispatch.
        """
        executable = self.locate()
        if executable is None:
            return False

        argv = build_command(executable, self.log_file, self.project)
        try:
            self._spawn(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except (OSError, ValueError) as e:
            logger.error(f"Failed to launch {executable}: {e}")
            return False

        logger.debug(f"Emitted activity: {' '.join(argv)}")
        return True

"""Thin wrapper around the ``mpc`` command line client for MPD."""

import logging
import subprocess
from typing import List

from .exceptions import PlayerError

logger = logging.getLogger(__name__)


class MpcPlayer:
    """Controls an MPD instance through ``mpc``.

    Only accepts ready-made stream URLs; credentials must already be
    embedded in them since mpd cannot send an Authorization header.

    Attributes:
        dry_run: Log commands instead of running them
    """

    def __init__(self, dry_run: bool = False, executable: str = "mpc"):
        self.dry_run = dry_run
        self.executable = executable

    def _run(self, *args: str) -> str:
        command: List[str] = [self.executable, *args]
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise PlayerError(f"{self.executable} not found") from e

        if result.returncode != 0:
            raise PlayerError(
                f"MPC call error: {' '.join(args)} exited with {result.returncode}: "
                f"{result.stderr.strip()}"
            )
        return result.stdout

    def add(self, url: str) -> None:
        if self.dry_run:
            logger.info(f"would add {url}")
            return
        self._run("add", url)

    def play(self) -> None:
        if self.dry_run:
            logger.info("would play")
            return
        self._run("play")

    def clear(self) -> None:
        """Stop playback and empty the play queue."""
        if self.dry_run:
            logger.info("would clear")
            return
        self._run("stop")
        self._run("clear")

    def current(self) -> str:
        """Stream URL of the track currently playing, or "" if none.

        Read-only query, so it runs mpc even in dry-run mode.
        """
        return self._run("--format", "%file%", "current").strip()

"""Run a listed program synchronously and report how it ended."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import LaunchFailure

logger = logging.getLogger(__name__)


def launch_program(path: str) -> int:
    """Run the executable at ``path`` from its own directory; return its exit status.

    Raises ``LaunchFailure`` when the process cannot be spawned.
    """
    target = Path(path).expanduser()
    logger.info("launching %s", target)
    try:
        proc = subprocess.run([str(target)], cwd=target.parent, check=False)
    except OSError as exc:
        logger.warning("failed to launch %s: %s", target, exc)
        raise LaunchFailure(f"Failed to launch {target.name}: {exc.strerror or exc}") from exc
    logger.info("%s exited with status %s", target, proc.returncode)
    return proc.returncode


def describe_exit(status: int) -> str | None:
    """Hint text for an unsuccessful exit status, ``None`` on success."""
    if status == 0:
        return None
    if status < 0:
        return f"terminated by signal {-status}"
    return f"error code: {status}"

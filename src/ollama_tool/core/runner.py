"""Invoke the ``ollama`` executable for local model management."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from ollama_tool.client.exceptions import IOFailure, NonZeroExit

logger = logging.getLogger(__name__)

OLLAMA_EXECUTABLE = "ollama"


def run_ollama_command(args: Sequence[str], *, executable: str = OLLAMA_EXECUTABLE) -> None:
    """Run ``executable`` with ``args``, inheriting stdio, and wait for it to exit.

    Arguments are passed through unchanged. A spawn failure raises
    :class:`IOFailure`; a failing exit status raises :class:`NonZeroExit` with
    the observed code, or ``-1`` when the child was killed by a signal.
    """
    cmd = [executable, *args]
    action = f"{executable} {' '.join(args)}".strip()
    logger.debug("spawning %s", cmd)
    try:
        result = subprocess.run(cmd, check=False)
    except OSError as exc:
        raise IOFailure(
            action=action,
            detail=str(exc),
            hint=f"make sure {executable!r} is installed and on PATH",
        ) from exc

    returncode = result.returncode
    logger.debug("%s exited with status %d", executable, returncode)
    if returncode == 0:
        return
    # Negative return codes mean the child was terminated by a signal.
    code = returncode if returncode > 0 else -1
    raise NonZeroExit(action=action, code=code)

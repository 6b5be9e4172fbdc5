"""Bounded invocation of the filesystem-usage command."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence

from .errors import CommandFailure

log = logging.getLogger(__name__)

DEFAULT_DF_COMMAND: tuple[str, ...] = ("df", "-PT")
DEFAULT_TIMEOUT_SECONDS = 5.0


def run_df(
    command: Sequence[str] = DEFAULT_DF_COMMAND,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> str:
    """Run *command* and return its stdout.

    Raises CommandFailure on a missing binary, timeout, OS error or
    non-zero exit status.
    """
    cmd = list(command)
    cmd_str = shlex.join(cmd)
    if not cmd:
        raise CommandFailure(message="no filesystem usage command configured", command=cmd_str)

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise CommandFailure(message=f"{cmd[0]} command not found", command=cmd_str) from exc
    except subprocess.TimeoutExpired as exc:
        raise CommandFailure(
            message=f"{cmd[0]} timed out after {timeout:g}s", command=cmd_str
        ) from exc
    except OSError as exc:
        raise CommandFailure(message=f"{cmd[0]} error: {exc}", command=cmd_str) from exc

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        message = f"{cmd[0]} exited with code {result.returncode}"
        if stderr:
            message = f"{message}: {stderr}"
        raise CommandFailure(message=message, command=cmd_str)

    log.debug("command_ok", extra={"command": cmd_str})
    return result.stdout

"""
Shell command adapter — run external programs for the packaging step.

This is the SINGLE PLACE where ``subprocess.run`` is called. Every
failure mode (missing binary, permission problem, non-zero exit,
timeout) is collapsed into ``InvalidExitValue`` here, and availability
probes collapse that again into ``CommandUnavailable``.

Calls block until the child exits. With the default ``timeout=None``
a hung child blocks the caller forever.
"""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import ValidationError

from checkcites_build.core.errors import CommandUnavailable, InvalidExitValue
from checkcites_build.core.models.invocation import CommandInvocation, CommandOutput

logger = logging.getLogger(__name__)


def execute(
    directory: str | Path,
    call: Sequence[str],
    *,
    timeout: float | None = None,
) -> CommandOutput:
    """Execute the command and arguments in the provided directory.

    Args:
        directory: Working directory. Not checked beforehand.
        call: The command followed by its arguments.
        timeout: Seconds before giving up. ``None`` waits forever.

    Returns:
        Captured output of the call when it exits with status 0.

    Raises:
        InvalidExitValue: The call could not be spawned, timed out,
            or exited with a non-zero status.
    """
    try:
        invocation = CommandInvocation(
            argv=list(call), cwd=str(directory), timeout=timeout,
        )
    except ValidationError as e:
        raise InvalidExitValue(list(call), detail=str(e)) from e

    logger.debug("Executing: %s (cwd=%s)", invocation.display(), invocation.cwd)
    start = time.monotonic()

    try:
        result = subprocess.run(
            invocation.argv,
            cwd=invocation.cwd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=invocation.timeout,
        )
    except subprocess.TimeoutExpired as e:
        logger.debug("Timed out after %ss: %s", invocation.timeout, invocation.display())
        raise InvalidExitValue(
            invocation.argv, detail=f"timed out after {invocation.timeout}s",
        ) from e
    except (OSError, ValueError) as e:
        logger.debug("Spawn failed: %s (%s)", invocation.display(), e)
        raise InvalidExitValue(invocation.argv, detail=str(e)) from e

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = result.stdout.strip()
    stderr = result.stderr.strip()

    if stdout:
        logger.debug("stdout: %s", stdout)
    if stderr:
        logger.debug("stderr: %s", stderr)

    if result.returncode != 0:
        logger.debug(
            "Exit %d after %dms: %s",
            result.returncode, elapsed_ms, invocation.display(),
        )
        raise InvalidExitValue(
            invocation.argv,
            returncode=result.returncode,
            stderr=stderr,
            detail=f"exit {result.returncode}",
        )

    logger.info("Ran %s in %dms", invocation.display(), elapsed_ms)
    return CommandOutput(
        argv=invocation.argv,
        returncode=result.returncode,
        stdout=stdout,
        stderr=stderr,
        duration_ms=elapsed_ms,
    )


def assert_availability(commands: Sequence[str]) -> None:
    """Check whether a command is available in the system path.

    The sequence is run as one probe call in the current directory:
    the command name first, then whatever arguments make it exit
    cleanly (``["kpsewhich", "--version"]``).

    Raises:
        CommandUnavailable: The probe failed for any reason.
    """
    command = commands[0] if commands else ""
    try:
        execute(Path("."), commands)
    except InvalidExitValue as e:
        raise CommandUnavailable(command, detail=e.detail) from e
    logger.debug("Available: %s", command)


def assert_all_available(probes: Iterable[Sequence[str]]) -> None:
    """Run ``assert_availability`` for each probe, stopping at the first failure."""
    for probe in probes:
        assert_availability(probe)

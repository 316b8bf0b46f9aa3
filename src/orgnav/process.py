"""Synchronous execution of external programs."""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from typing import Sequence

from orgnav.errors import ProcessTimeoutError, ToolNotFoundError

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ProcessResult:
    exit_code: int
    output: str


def run_process(
    command: str,
    args: Sequence[str],
    *,
    merge_stderr: bool = False,
    timeout: float | None = None,
) -> ProcessResult:
    """Run ``command`` with ``args`` and capture its output.

    Stdout (and stderr when ``merge_stderr`` is set) is spooled into a
    temporary file which is always closed before returning. A non-zero exit
    status is returned to the caller, not raised.
    """
    executable = shutil.which(command)
    if executable is None:
        raise ToolNotFoundError(command)

    argv = [executable, *args]
    LOGGER.debug("Running %s", " ".join(argv))
    stderr = subprocess.STDOUT if merge_stderr else subprocess.DEVNULL

    with tempfile.TemporaryFile() as scratch:
        try:
            completed = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=scratch,
                stderr=stderr,
                timeout=timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolNotFoundError(command) from exc
        except subprocess.TimeoutExpired as exc:
            raise ProcessTimeoutError(command, timeout or 0) from exc

        scratch.seek(0)
        output = scratch.read().decode("utf-8", errors="replace")

    LOGGER.debug("%s exited with status %s (%d bytes)", command, completed.returncode, len(output))
    return ProcessResult(exit_code=completed.returncode, output=output)

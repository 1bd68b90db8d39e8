#!/usr/bin/env python3
"""
tridinspect Process Runner - bounded execution of the TrID binary

Runs one child process per call, captures stdout and stderr as a single
stream and reports how the run ended. When the time budget is exceeded the
whole process tree is killed before the call returns.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import os
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import psutil

from ..utils.logger import get_logger
from .constants import KILL_GRACE_SECONDS, OUTPUT_ENCODING

logger = get_logger(__name__)


class ProcessStatus(Enum):
    """Terminal condition of a process run"""

    OK = "ok"
    NONZERO_EXIT = "nonzero_exit"
    TIMEOUT = "timeout"
    FAILED_TO_START = "failed_to_start"


@dataclass(frozen=True)
class ProcessOutcome:
    """
    Result of one process run.

    Attributes:
        status: How the run ended
        output: Combined stdout/stderr text (best effort on timeout)
        returncode: Exit code, None when the process never started
        error: Low-level exception behind a non-OK status
    """

    status: ProcessStatus
    output: str = ""
    returncode: int | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.status is ProcessStatus.OK


def _decode(raw: bytes | str | None) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    return raw.decode(OUTPUT_ENCODING, errors="replace")


class ProcessRunner:
    """
    Execute a command with a wall-clock timeout.

    The launch mechanism is injectable: ``popen_factory`` receives the command
    list and keyword arguments of ``subprocess.Popen`` and must return an
    object with ``pid``, ``returncode``, ``communicate()`` and ``kill()``.

    Example:
        >>> runner = ProcessRunner()
        >>> outcome = runner.run("trid", ["-v", "sample.pdf"], timeout=30)
        >>> outcome.status
        <ProcessStatus.OK: 'ok'>
    """

    def __init__(
        self,
        popen_factory: Callable[..., Any] = subprocess.Popen,
        kill_grace: float = KILL_GRACE_SECONDS,
    ):
        self._popen_factory = popen_factory
        self._kill_grace = kill_grace

    def run(self, cmd: str, args: Sequence[str], timeout: float) -> ProcessOutcome:
        """
        Run ``cmd`` with ``args`` and wait at most ``timeout`` seconds.

        Args:
            cmd: Executable name (resolved through PATH) or path
            args: Arguments passed after the executable
            timeout: Time budget in seconds, must be positive

        Returns:
            ProcessOutcome describing the run

        Raises:
            ValueError: If timeout is not positive
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        command = [cmd, *args]
        logger.debug(f"Executing: {' '.join(command)} (timeout {timeout:.1f}s)")

        try:
            process = self._popen_factory(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                **self._session_kwargs(),
            )
        except OSError as exc:
            logger.error(f"Failed to start {cmd}: {exc}")
            return ProcessOutcome(ProcessStatus.FAILED_TO_START, error=exc)

        try:
            raw, _ = process.communicate(timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            logger.warning(f"{cmd} timed out after {timeout:.1f}s, terminating process tree")
            self._terminate_tree(process)
            output = self._drain(process, exc)
            return ProcessOutcome(
                ProcessStatus.TIMEOUT,
                output=output,
                returncode=process.returncode,
                error=exc,
            )
        except BaseException:
            # Interrupted wait: never leave the child behind
            self._terminate_tree(process)
            raise

        output = _decode(raw)
        returncode = process.returncode
        if returncode != 0:
            logger.debug(f"{cmd} exited with status {returncode}")
            error = subprocess.CalledProcessError(returncode, command, output=output)
            return ProcessOutcome(
                ProcessStatus.NONZERO_EXIT,
                output=output,
                returncode=returncode,
                error=error,
            )

        return ProcessOutcome(ProcessStatus.OK, output=output, returncode=returncode)

    @staticmethod
    def _session_kwargs() -> dict[str, Any]:
        if os.name == "posix":
            return {"start_new_session": True}
        return {}

    def _terminate_tree(self, process: Any) -> None:
        """Kill the child and every descendant it spawned."""
        try:
            children = psutil.Process(process.pid).children(recursive=True)
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            children = []

        for child in children:
            try:
                child.kill()
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                continue

        try:
            process.kill()
        except ProcessLookupError:
            pass

        if children:
            _, alive = psutil.wait_procs(children, timeout=self._kill_grace)
            for proc in alive:
                logger.warning(f"Process {proc.pid} survived termination")

    def _drain(self, process: Any, timeout_exc: subprocess.TimeoutExpired) -> str:
        """Collect whatever output is left after the process tree was killed."""
        try:
            raw, _ = process.communicate(timeout=self._kill_grace)
        except subprocess.TimeoutExpired as exc:
            logger.warning("Output pipe still open after kill, returning partial output")
            raw = exc.output or timeout_exc.output
            if getattr(process, "stdout", None) is not None:
                process.stdout.close()
        return _decode(raw)

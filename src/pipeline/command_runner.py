"""External command execution seam.

This module wraps kubectl invocation behind a narrow runner protocol
so the pipeline driver can be exercised with fake command output.
"""

from __future__ import annotations

import subprocess
from typing import Protocol, Sequence

from core.errors import KubectlDecodeInputError
from core.logging_config import get_logger
from core.types import CommandResult

_LOGGER = get_logger(__name__)


class CommandRunner(Protocol):
    """Runs a command and returns its combined output."""

    def run(self, command: Sequence[str]) -> CommandResult:
        """Execute command and capture stdout+stderr."""


class SubprocessCommandRunner:
    """Command runner backed by ``subprocess.run``."""

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    def run(self, command: Sequence[str]) -> CommandResult:
        """Execute command with stderr merged into stdout.

        Args:
            command: Executable followed by its arguments.

        Returns:
            Captured output and exit status.

        Raises:
            KubectlDecodeInputError: If the executable is missing or times out.
        """
        _LOGGER.debug("command_started", command=list(command), timeout=self._timeout)
        try:
            completed = subprocess.run(
                list(command),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
                timeout=self._timeout,
            )
        except FileNotFoundError as error:
            raise KubectlDecodeInputError(
                f"Failed to execute {command[0]}: executable not found. "
                "Install kubectl or set KUBECTL_DECODE_KUBECTL to its path."
            ) from error
        except subprocess.TimeoutExpired as error:
            raise KubectlDecodeInputError(
                f"Failed to execute {command[0]}: timed out after {self._timeout} seconds."
            ) from error
        _LOGGER.debug("command_finished", returncode=completed.returncode)
        return CommandResult(output=completed.stdout or b"", returncode=completed.returncode)

"""Runtime configuration model for kubectl-decode.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    COMMAND_TIMEOUT_ENV_VAR,
    DEBUG_ENV_VAR,
    DEFAULT_KUBECTL_BINARY,
    FALSE_FLAG_VALUES,
    KUBECTL_BINARY_ENV_VAR,
)
from core.errors import KubectlDecodeConfigError


@dataclass(frozen=True)
class DecodeConfig:
    """Validated runtime configuration.

    Attributes:
        debug: Enables verbose diagnostic tracing on stderr.
        kubectl_binary: Executable invoked by the ``get`` subcommand.
        command_timeout: Optional kubectl timeout in seconds.
    """

    debug: bool
    kubectl_binary: str
    command_timeout: float | None

    @classmethod
    def from_env(cls) -> "DecodeConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            KubectlDecodeConfigError: If environment values are invalid.
        """
        debug = parse_debug_flag(os.getenv(DEBUG_ENV_VAR))
        kubectl_binary = os.getenv(KUBECTL_BINARY_ENV_VAR) or DEFAULT_KUBECTL_BINARY
        timeout_value = os.getenv(COMMAND_TIMEOUT_ENV_VAR)
        command_timeout = parse_command_timeout(timeout_value) if timeout_value else None
        return cls(debug=debug, kubectl_binary=kubectl_binary, command_timeout=command_timeout)


def parse_debug_flag(raw_value: str | None) -> bool:
    """Interpret the debug environment value as a boolean."""
    if raw_value is None:
        return False
    return raw_value.strip().lower() not in FALSE_FLAG_VALUES


def parse_command_timeout(raw_value: str) -> float:
    """Parse a kubectl timeout value.

    Args:
        raw_value: Raw string from environment or CLI.

    Returns:
        Positive timeout in seconds.

    Raises:
        KubectlDecodeConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise KubectlDecodeConfigError(
            "Invalid command timeout value: "
            f"expected number of seconds, got '{raw_value}'. "
            f"Set {COMMAND_TIMEOUT_ENV_VAR} or --timeout to a numeric value."
        ) from error
    if timeout <= 0:
        raise KubectlDecodeConfigError(
            f"Invalid command timeout value: expected a positive number, got '{raw_value}'."
        )
    return timeout

"""kubectl-decode exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class KubectlDecodeError(Exception):
    """Base exception for all kubectl-decode failures."""


class KubectlDecodeConfigError(KubectlDecodeError):
    """Raised for invalid runtime configuration."""


class KubectlDecodeInputError(KubectlDecodeError):
    """Raised when stdin or the external kubectl command cannot supply input."""


class KubectlDecodeParseError(KubectlDecodeError):
    """Raised when input is neither JSON nor YAML.

    Attributes:
        raw_input: Original bytes, kept so callers can pass them through.
    """

    def __init__(self, message: str, raw_input: bytes) -> None:
        super().__init__(message)
        self.raw_input = raw_input


class KubectlDecodeTransformError(KubectlDecodeError):
    """Raised when an encoded ``data`` entry cannot be decoded.

    Attributes:
        key: Offending field key.
        item_index: Position in ``items`` when raised on the list path.
    """

    def __init__(self, message: str, key: str | None, item_index: int | None = None) -> None:
        super().__init__(message)
        self.key = key
        self.item_index = item_index

    def for_item(self, item_index: int) -> "KubectlDecodeTransformError":
        """Return a copy annotated with the list item index."""
        return KubectlDecodeTransformError(
            f"Error processing resource in items[{item_index}]: {self}",
            key=self.key,
            item_index=item_index,
        )


class KubectlDecodeSerializationError(KubectlDecodeError):
    """Raised when a document cannot be written back out."""

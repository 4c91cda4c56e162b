"""Shared typed models.

This module defines the document aliases and immutable result models
passed between the codec, transform, and pipeline layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

DocumentFormat = Literal["json", "yaml"]
Document = dict[str, Any]


@dataclass(frozen=True)
class ParsedDocument:
    """Parsed resource together with the format it was read from.

    Attributes:
        document: String-keyed resource mapping.
        format: Serialization detected on input, reused on output.
    """

    document: Document
    format: DocumentFormat


@dataclass(frozen=True)
class CommandResult:
    """Captured result of an external command.

    Attributes:
        output: Combined stdout and stderr bytes.
        returncode: Process exit status.
    """

    output: bytes
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

"""Public SDK surface for kubectl-decode.

This module provides a stable import path for library users.
It re-exports the pipeline entry points, codec, and typed models.
"""

from __future__ import annotations

from codec.document_format import detect_format, parse_document, serialize_document
from core.config import DecodeConfig
from core.errors import (
    KubectlDecodeError,
    KubectlDecodeInputError,
    KubectlDecodeParseError,
    KubectlDecodeSerializationError,
    KubectlDecodeTransformError,
)
from core.types import CommandResult, ParsedDocument
from pipeline.command_runner import CommandRunner, SubprocessCommandRunner
from pipeline.decode_pipeline import run_get, run_stdin
from transforms.secret_decoding import decode_list_items, decode_secret_data

__all__ = [
    "CommandResult",
    "CommandRunner",
    "DecodeConfig",
    "KubectlDecodeError",
    "KubectlDecodeInputError",
    "KubectlDecodeParseError",
    "KubectlDecodeSerializationError",
    "KubectlDecodeTransformError",
    "ParsedDocument",
    "SubprocessCommandRunner",
    "decode_list_items",
    "decode_secret_data",
    "detect_format",
    "parse_document",
    "run_get",
    "run_stdin",
    "serialize_document",
]

"""Stdin and kubectl-get decode pipelines.

This module reads a resource document, decodes its secret data,
and renders it back in the format it was read from. The detected
format travels with the parsed document; nothing is kept between runs.
"""

from __future__ import annotations

from typing import BinaryIO, Sequence

from codec.document_format import parse_document, resolve_format, serialize_document
from core.constants import DEFAULT_KUBECTL_BINARY, GET_SUBCOMMAND
from core.errors import KubectlDecodeInputError, KubectlDecodeParseError
from core.logging_config import get_logger
from core.types import Document, DocumentFormat
from pipeline.command_runner import CommandRunner
from transforms.secret_decoding import decode_list_items, decode_secret_data, is_list_resource

_LOGGER = get_logger(__name__)


def read_stdin(stream: BinaryIO) -> bytes:
    """Read the whole input stream.

    Raises:
        KubectlDecodeInputError: If the stream cannot be read.
    """
    try:
        return stream.read()
    except OSError as error:
        raise KubectlDecodeInputError(f"Error reading input: {error}") from error


def run_stdin(raw: bytes) -> bytes:
    """Decode a single resource piped on stdin.

    List resources are not expanded on this path.

    Args:
        raw: Full stdin contents.

    Returns:
        Rendered document bytes.

    Raises:
        KubectlDecodeParseError: If input is neither JSON nor YAML.
        KubectlDecodeTransformError: If a data entry cannot be decoded.
        KubectlDecodeSerializationError: If output cannot be encoded.
    """
    parsed = parse_document(raw)
    _LOGGER.debug("processing_resource", kind=parsed.document.get("kind"))
    decode_secret_data(parsed.document)
    return _render(parsed.document, parsed.format, raw)


def run_get(
    args: Sequence[str],
    runner: CommandRunner,
    kubectl_binary: str = DEFAULT_KUBECTL_BINARY,
) -> bytes:
    """Fetch resources with ``kubectl get`` and decode them.

    Args:
        args: Arguments forwarded verbatim after ``get``.
        runner: Command runner used to invoke kubectl.
        kubectl_binary: kubectl executable name or path.

    Returns:
        Rendered document bytes.

    Raises:
        KubectlDecodeInputError: If no resource is given or kubectl fails.
        KubectlDecodeParseError: If kubectl output is neither JSON nor YAML.
        KubectlDecodeTransformError: If a data entry cannot be decoded.
        KubectlDecodeSerializationError: If output cannot be encoded.
    """
    if not args:
        raise KubectlDecodeInputError("Resource type must be specified.")
    result = runner.run([kubectl_binary, GET_SUBCOMMAND, *args])
    if not result.succeeded:
        raise KubectlDecodeInputError(
            f"Failed to execute kubectl command: exit status {result.returncode}\n"
            f"Output: {result.output.decode('utf-8', errors='replace')}"
        )
    try:
        parsed = parse_document(result.output)
    except KubectlDecodeParseError as error:
        raise KubectlDecodeParseError(
            f"Input appeared to be neither json nor yaml: {error}",
            raw_input=result.output,
        ) from error
    document = parsed.document
    _LOGGER.debug("parsed_get_output", kind=document.get("kind"), format=parsed.format)
    if is_list_resource(document):
        decode_list_items(document)
    else:
        decode_secret_data(document)
    return _render(document, parsed.format, result.output)


def _render(document: Document, document_format: DocumentFormat | None, raw: bytes) -> bytes:
    # Second pass is a no-op once data has been migrated.
    decode_secret_data(document)
    return serialize_document(document, resolve_format(document_format, raw))

"""JSON/YAML detection and round-trip serialization.

This module parses piped or kubectl-produced resource text into one
string-keyed mapping representation and writes it back in the format
it was read from, so output stays diff-friendly against the source.
"""

from __future__ import annotations

import json
from typing import Any, cast

import yaml

from core.constants import JSON_FORMAT, JSON_INDENT, YAML_FORMAT
from core.errors import KubectlDecodeParseError, KubectlDecodeSerializationError
from core.logging_config import get_logger
from core.types import Document, DocumentFormat, ParsedDocument

_LOGGER = get_logger(__name__)


def parse_document(raw: bytes) -> ParsedDocument:
    """Parse resource bytes as JSON, falling back to YAML.

    JSON is always tried first. The YAML parser also accepts most JSON
    syntax, so a buffer that parses as JSON is never retried as YAML.

    Args:
        raw: Raw input bytes.

    Returns:
        Parsed mapping and the detected format.

    Raises:
        KubectlDecodeParseError: If neither format yields a mapping.
    """
    json_document = _parse_json(raw)
    if json_document is not None:
        _LOGGER.debug("input_format_detected", format=JSON_FORMAT)
        return ParsedDocument(document=json_document, format=JSON_FORMAT)
    yaml_document = _parse_yaml(raw)
    if yaml_document is not None:
        _LOGGER.debug("input_format_detected", format=YAML_FORMAT)
        return ParsedDocument(document=yaml_document, format=YAML_FORMAT)
    raise KubectlDecodeParseError(
        "Failed to parse input as JSON or YAML. "
        "Use --output yaml|json to decode data.",
        raw_input=raw,
    )


def serialize_document(document: Document, document_format: DocumentFormat) -> bytes:
    """Encode a document in the given format.

    Args:
        document: String-keyed resource mapping.
        document_format: Target serialization.

    Returns:
        UTF-8 encoded output ending with a newline.

    Raises:
        KubectlDecodeSerializationError: If a value cannot be represented.
    """
    if document_format == JSON_FORMAT:
        return _serialize_json(document)
    if document_format == YAML_FORMAT:
        return _serialize_yaml(document)
    raise KubectlDecodeSerializationError(f"Unknown output format: {document_format}")


def detect_format(raw: bytes) -> DocumentFormat | None:
    """Guess the format from the first non-whitespace character.

    Args:
        raw: Raw input bytes.

    Returns:
        ``json`` for ``{`` or ``[``, ``yaml`` otherwise, None for blank input.
    """
    stripped = raw.strip()
    if not stripped:
        return None
    if stripped[:1] in (b"{", b"["):
        return JSON_FORMAT
    return YAML_FORMAT


def resolve_format(document_format: DocumentFormat | None, raw: bytes) -> DocumentFormat:
    """Return the remembered format, or detect one from the raw input.

    Raises:
        KubectlDecodeSerializationError: If no format can be determined.
    """
    if document_format is not None:
        return document_format
    detected = detect_format(raw)
    if detected is None:
        raise KubectlDecodeSerializationError(
            "Unknown output format: input was empty and no format was detected."
        )
    _LOGGER.debug("output_format_guessed", format=detected)
    return detected


def normalize_keys(value: Any) -> Any:
    """Recursively convert mapping keys to strings.

    YAML allows integer, boolean, and null keys; downstream code only
    ever sees string-keyed mappings.
    """
    if isinstance(value, dict):
        return {_format_key(key): normalize_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]
    return value


def _format_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def _parse_json(raw: bytes) -> Document | None:
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as error:
        _LOGGER.debug("json_parse_failed", error=str(error))
        return None
    if not isinstance(payload, dict):
        _LOGGER.debug("json_parse_failed", error="top-level value is not an object")
        return None
    return cast(Document, payload)


def _parse_yaml(raw: bytes) -> Document | None:
    try:
        text = raw.decode("utf-8")
        payload = yaml.safe_load(text)
    except (UnicodeDecodeError, yaml.YAMLError) as error:
        _LOGGER.debug("yaml_parse_failed", error=str(error))
        return None
    if not isinstance(payload, dict):
        _LOGGER.debug("yaml_parse_failed", error="top-level value is not a mapping")
        return None
    return cast(Document, normalize_keys(payload))


def _serialize_json(document: Document) -> bytes:
    try:
        output = json.dumps(
            document, indent=JSON_INDENT, ensure_ascii=False, default=_encode_json_value
        )
    except (TypeError, ValueError) as error:
        raise KubectlDecodeSerializationError(f"Error encoding JSON: {error}") from error
    return f"{output}\n".encode("utf-8")


def _serialize_yaml(document: Document) -> bytes:
    try:
        output = yaml.safe_dump(
            document,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as error:
        raise KubectlDecodeSerializationError(f"Error encoding YAML: {error}") from error
    return output.encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _encode_json_value(value: Any) -> Any:
    """Render values JSON has no type for.

    Binary secret payloads are written as text with invalid UTF-8
    sequences replaced by U+FFFD.
    """
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

"""Base64 secret data decoding transform.

This module migrates a resource's encoded ``data`` bag into its
plaintext ``stringData`` bag, in place, one resource or list at a time.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Mapping

from core.constants import (
    DECODED_FIELD_NAME,
    ENCODED_FIELD_NAME,
    ITEMS_FIELD_NAME,
    KIND_FIELD_NAME,
    LIST_KIND,
)
from core.errors import KubectlDecodeTransformError
from core.logging_config import get_logger
from core.types import Document

_LOGGER = get_logger(__name__)


def decode_secret_data(document: Document) -> Document:
    """Decode ``data`` entries and merge them into ``stringData``.

    Every entry is decoded before anything is written, so a failing
    entry leaves the document untouched. Keys already present in
    ``stringData`` keep their existing value.

    Args:
        document: Resource mapping, mutated in place.

    Returns:
        The same document instance.

    Raises:
        KubectlDecodeTransformError: If an entry is not text or is not valid base64.
    """
    encoded_values = document.get(ENCODED_FIELD_NAME)
    if not isinstance(encoded_values, Mapping):
        _LOGGER.debug("encoded_field_missing", field=ENCODED_FIELD_NAME)
        return document
    decoded_values = _ensure_decoded_bag(document)
    staged_values = {
        str(key): _decode_entry(str(key), value) for key, value in encoded_values.items()
    }
    for key, value in staged_values.items():
        if key not in decoded_values:
            decoded_values[key] = value
    document[DECODED_FIELD_NAME] = decoded_values
    del document[ENCODED_FIELD_NAME]
    _LOGGER.debug(
        "encoded_field_migrated",
        decoded_keys=sorted(staged_values),
        total_keys=len(decoded_values),
    )
    return document


def is_list_resource(document: Document) -> bool:
    """Return whether the document is a ``kind: List`` collection."""
    return document.get(KIND_FIELD_NAME) == LIST_KIND


def decode_list_items(document: Document) -> Document:
    """Decode every item of a ``kind: List`` document independently.

    Args:
        document: List resource, mutated in place.

    Returns:
        The same document instance.

    Raises:
        KubectlDecodeTransformError: For the first failing item, annotated
            with its index.
    """
    items = document.get(ITEMS_FIELD_NAME)
    if not isinstance(items, list):
        _LOGGER.debug("list_items_missing", field=ITEMS_FIELD_NAME)
        return document
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            _LOGGER.debug("list_item_skipped", index=index, item_type=type(item).__name__)
            continue
        try:
            decode_secret_data(item)
        except KubectlDecodeTransformError as error:
            raise error.for_item(index) from error
    return document


def _ensure_decoded_bag(document: Document) -> dict[str, Any]:
    decoded_values = document.get(DECODED_FIELD_NAME)
    if decoded_values is None:
        return {}
    if not isinstance(decoded_values, dict):
        raise KubectlDecodeTransformError(
            f"Field {DECODED_FIELD_NAME} must be a mapping, "
            f"got {type(decoded_values).__name__}.",
            key=DECODED_FIELD_NAME,
        )
    return decoded_values


def _decode_entry(key: str, value: object) -> str | bytes:
    """Decode one base64 ``data`` value.

    Args:
        key: Entry key, used in error messages.
        value: Raw entry value.

    Returns:
        Decoded text, or the raw bytes when the payload is not UTF-8.

    Raises:
        KubectlDecodeTransformError: If the value cannot be decoded.
    """
    if not isinstance(value, str):
        raise KubectlDecodeTransformError(
            f"Data field contains a non-string value for key {key} "
            f"({type(value).__name__}).",
            key=key,
        )
    # Standard encoding ignores line breaks but nothing else.
    compact = value.replace("\r", "").replace("\n", "")
    try:
        payload = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as error:
        raise KubectlDecodeTransformError(
            f"Failed to decode base64 value for key {key}: {error}",
            key=key,
        ) from error
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError:
        _LOGGER.debug("binary_value_kept", key=key, size=len(payload))
        return payload

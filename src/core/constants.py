"""Core constants used across kubectl-decode modules.

This module centralizes field names, environment keys, and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

JSON_FORMAT = "json"
YAML_FORMAT = "yaml"
JSON_INDENT = 2
ENCODED_FIELD_NAME = "data"
DECODED_FIELD_NAME = "stringData"
KIND_FIELD_NAME = "kind"
ITEMS_FIELD_NAME = "items"
LIST_KIND = "List"
GET_SUBCOMMAND = "get"
DEFAULT_KUBECTL_BINARY = "kubectl"
DEBUG_ENV_VAR = "DEBUG"
KUBECTL_BINARY_ENV_VAR = "KUBECTL_DECODE_KUBECTL"
COMMAND_TIMEOUT_ENV_VAR = "KUBECTL_DECODE_TIMEOUT"
FALSE_FLAG_VALUES = ("", "0", "false", "no", "off")
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

"""kubectl-decode CLI entry points.

This module reads a resource from stdin or ``kubectl get`` and prints
it with base64 ``data`` decoded into ``stringData``. It maps argparse
commands onto pipeline calls and errors onto exit codes.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from typing import Sequence

from cli.get_command import add_get_command, run_get_command
from core.config import DecodeConfig, parse_command_timeout
from core.constants import EXIT_FAILURE, EXIT_SUCCESS, GET_SUBCOMMAND
from core.errors import KubectlDecodeError, KubectlDecodeParseError
from core.logging_config import configure_logging, get_logger
from pipeline.decode_pipeline import read_stdin, run_stdin

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="kubectl-decode",
        description="Decode base64 Kubernetes secret data into stringData",
        epilog="With no subcommand, a JSON or YAML resource is read from stdin.",
    )
    parser.add_argument("--kubectl", help="Override KUBECTL_DECODE_KUBECTL for this command")
    parser.add_argument("--timeout", help="Override KUBECTL_DECODE_TIMEOUT (seconds)")
    subparsers = parser.add_subparsers(dest="command")
    add_get_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the kubectl-decode CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exit_request:
        # argparse exits 2 on usage errors.
        return EXIT_SUCCESS if exit_request.code in (0, None) else EXIT_FAILURE
    try:
        config = _build_config(args)
        configure_logging(config.debug)
        if args.command == GET_SUBCOMMAND:
            output = run_get_command(config, args)
        else:
            output = run_stdin(read_stdin(sys.stdin.buffer))
    except KubectlDecodeParseError as error:
        _write_stdout(error.raw_input)
        if args.command == GET_SUBCOMMAND:
            print(f"Error: {error}", file=sys.stderr)
        return EXIT_FAILURE
    except KubectlDecodeError as error:
        _LOGGER.debug("command_failed", error_type=type(error).__name__)
        print(f"Error: {error}", file=sys.stderr)
        return EXIT_FAILURE
    _write_stdout(output)
    return EXIT_SUCCESS


def _build_config(args: argparse.Namespace) -> DecodeConfig:
    """Build config from the environment with CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Effective runtime config.
    """
    config = DecodeConfig.from_env()
    if args.kubectl:
        config = replace(config, kubectl_binary=args.kubectl)
    if args.timeout:
        config = replace(config, command_timeout=parse_command_timeout(args.timeout))
    return config


def _write_stdout(payload: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.flush()

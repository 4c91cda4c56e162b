"""Get subcommand wiring.

This module registers the ``get`` subcommand and forwards its arguments
verbatim to ``kubectl get`` through the decode pipeline.
"""

from __future__ import annotations

import argparse
from typing import Any

from core.config import DecodeConfig
from pipeline.command_runner import CommandRunner, SubprocessCommandRunner
from pipeline.decode_pipeline import run_get


def add_get_command(subparsers: Any) -> None:
    """Register get subcommand."""
    # Only "+" marks an option here so kubectl flags like -n pass through untouched.
    parser = subparsers.add_parser(
        "get",
        help="Run kubectl get and decode the returned secret data",
        add_help=False,
        prefix_chars="+",
    )
    parser.add_argument(
        "kubectl_args",
        nargs=argparse.REMAINDER,
        metavar="ARGS",
        help="Resource type, names, and flags passed to kubectl get",
    )


def run_get_command(
    config: DecodeConfig,
    args: argparse.Namespace,
    runner: CommandRunner | None = None,
) -> bytes:
    """Handle get command invocation."""
    command_runner = runner or SubprocessCommandRunner(timeout=config.command_timeout)
    return run_get(args.kubectl_args, command_runner, kubectl_binary=config.kubectl_binary)

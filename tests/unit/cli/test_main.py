"""Unit tests for CLI command handling."""

from __future__ import annotations

import io
import json

import pytest

from cli.main import build_parser, main


def _set_stdin(monkeypatch: pytest.MonkeyPatch, payload: bytes) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(payload)))


def test_cli_filter_mode_decodes_stdin(monkeypatch, capsys) -> None:
    """Filter mode should print decoded JSON and exit zero."""
    monkeypatch.delenv("DEBUG", raising=False)
    _set_stdin(monkeypatch, b'{"kind":"Secret","data":{"k1":"dmFsdWUx"}}')

    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert json.loads(captured.out) == {"kind": "Secret", "stringData": {"k1": "value1"}}
    assert captured.err == ""


def test_cli_filter_mode_echoes_unparsable_input(monkeypatch, capsys) -> None:
    """Unparsable stdin should be echoed back with a failing exit code."""
    _set_stdin(monkeypatch, b"NAME   TYPE\nfoo    Opaque\n")

    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 1 and captured.out == "NAME   TYPE\nfoo    Opaque\n"


def test_cli_filter_mode_reports_transform_error(monkeypatch, capsys) -> None:
    """Malformed data should print an error naming the key and no document."""
    _set_stdin(monkeypatch, b'{"kind":"Secret","data":{"k1":"not-base64!!"}}')

    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 1 and captured.out == "" and "k1" in captured.err


def test_cli_reports_invalid_timeout(monkeypatch, capsys) -> None:
    """An invalid --timeout value should fail with a config error."""
    _set_stdin(monkeypatch, b"kind: Secret\n")

    exit_code = main(["--timeout", "later"])

    assert exit_code == 1 and "timeout" in capsys.readouterr().err


def test_cli_debug_traces_go_to_stderr(monkeypatch, capsys) -> None:
    """Debug tracing should not change stdout output."""
    monkeypatch.setenv("DEBUG", "1")
    _set_stdin(monkeypatch, b"kind: Secret\ndata:\n  k1: dmFsdWUx\n")

    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "kind: Secret\nstringData:\n  k1: value1\n"
    assert "encoded_field_migrated" in captured.err


def test_parser_keeps_get_flags_verbatim() -> None:
    """Arguments after get should not be interpreted by the CLI."""
    args = build_parser().parse_args(
        ["--kubectl", "kubectl.exe", "get", "-n", "prod", "secret", "x", "-o", "yaml", "--help"]
    )

    assert args.command == "get" and args.kubectl == "kubectl.exe"
    assert args.kubectl_args == ["-n", "prod", "secret", "x", "-o", "yaml", "--help"]


def test_parser_keeps_double_dash_after_get() -> None:
    """A literal -- after get should reach kubectl unchanged."""
    args = build_parser().parse_args(["get", "pods", "--", "x"])

    assert args.kubectl_args == ["pods", "--", "x"]


def test_parser_without_subcommand_selects_filter_mode() -> None:
    """No subcommand should leave command unset."""
    assert build_parser().parse_args([]).command is None


def test_cli_unknown_subcommand_exits_with_failure(capsys) -> None:
    """Usage errors should map to exit code 1 rather than argparse's 2."""
    exit_code = main(["describe"])

    assert exit_code == 1 and "describe" in capsys.readouterr().err


def test_cli_help_exits_with_success(capsys) -> None:
    """--help should print usage and exit zero."""
    exit_code = main(["--help"])

    assert exit_code == 0 and "kubectl-decode" in capsys.readouterr().out


def test_cli_filter_mode_keeps_binary_payload(monkeypatch, capsys) -> None:
    """Non-UTF-8 secret values should not abort the run."""
    _set_stdin(monkeypatch, b'{"kind":"Secret","data":{"ks":"//4="}}')

    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert json.loads(captured.out) == {"kind": "Secret", "stringData": {"ks": "\ufffd\ufffd"}}

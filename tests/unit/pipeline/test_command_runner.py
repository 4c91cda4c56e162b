"""Unit tests for subprocess command runner."""

from __future__ import annotations

import sys

import pytest

from core.errors import KubectlDecodeInputError
from pipeline.command_runner import SubprocessCommandRunner


def test_run_merges_stdout_and_stderr() -> None:
    """Runner should capture both output streams in one buffer."""
    script = "import sys; print('out'); sys.stdout.flush(); print('err', file=sys.stderr)"

    result = SubprocessCommandRunner().run([sys.executable, "-c", script])

    assert result.succeeded and b"out" in result.output and b"err" in result.output


def test_run_reports_non_zero_exit() -> None:
    """Runner should return failures as a result, not raise."""
    result = SubprocessCommandRunner().run([sys.executable, "-c", "raise SystemExit(3)"])

    assert result.returncode == 3 and result.succeeded is False


def test_run_raises_for_missing_executable() -> None:
    """Missing executables should raise an input error."""
    with pytest.raises(KubectlDecodeInputError) as excinfo:
        SubprocessCommandRunner().run(["kubectl-decode-missing-binary", "get", "secrets"])

    assert "kubectl-decode-missing-binary" in str(excinfo.value)


def test_run_raises_on_timeout() -> None:
    """Commands exceeding the timeout should raise an input error."""
    runner = SubprocessCommandRunner(timeout=0.2)

    with pytest.raises(KubectlDecodeInputError):
        runner.run([sys.executable, "-c", "import time; time.sleep(5)"])

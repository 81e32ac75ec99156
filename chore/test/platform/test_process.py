"""Tests for chore.platform.process module."""

from __future__ import annotations

import shutil
import signal
from pathlib import Path

import pytest

from chore.core.result import Err, Ok
from chore.platform.process import CommandFailed, run_line

pytestmark = pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX sh")


class TestCommandFailed:
    def test_str(self) -> None:
        error = CommandFailed(line="cargo fmt --all -- --check", returncode=1)
        assert str(error) == "cargo fmt --all -- --check failed (exit 1)"

    def test_str_with_reason(self) -> None:
        error = CommandFailed(line="cargo fmt", returncode=127, reason="No such file")
        assert str(error) == "cargo fmt: No such file"

    def test_frozen(self) -> None:
        error = CommandFailed(line="x", returncode=1)
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRunLine:
    def test_success(self, tmp_path: Path) -> None:
        assert run_line("true", cwd=tmp_path) == Ok(None)

    def test_failure_forwards_status(self, tmp_path: Path) -> None:
        result = run_line("exit 42", cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error == CommandFailed(line="exit 42", returncode=42)

    def test_missing_tool_is_plain_failure(self, tmp_path: Path) -> None:
        result = run_line("nonexistent_command_12345 --check", cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 127
        assert result.error.reason == ""

    def test_line_is_interpreted_by_shell(self, tmp_path: Path) -> None:
        result = run_line("printf ok > out.txt && test -s out.txt", cwd=tmp_path)

        assert isinstance(result, Ok)
        assert (tmp_path / "out.txt").read_text() == "ok"

    def test_uses_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text("")
        assert isinstance(run_line("test -f Cargo.toml", cwd=tmp_path), Ok)

    def test_unset_variable_is_fatal_with_default_shell(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("CHORE_SURELY_UNSET_VAR", raising=False)
        result = run_line('echo "$CHORE_SURELY_UNSET_VAR"', cwd=tmp_path)
        assert isinstance(result, Err)

    def test_custom_shell(self, tmp_path: Path) -> None:
        result = run_line('echo "$CHORE_SURELY_UNSET_VAR"', cwd=tmp_path, shell=("sh", "-c"))
        assert isinstance(result, Ok)

    def test_killed_by_signal(self, tmp_path: Path) -> None:
        result = run_line("kill -TERM $$", cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 128 + 15

    def test_interrupt_status_forwarded_and_handler_restored(self, tmp_path: Path) -> None:
        before = signal.getsignal(signal.SIGINT)

        result = run_line("kill -INT $$", cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 130
        assert signal.getsignal(signal.SIGINT) is before

    def test_shell_cannot_start(self, tmp_path: Path) -> None:
        result = run_line("true", cwd=tmp_path, shell=("nonexistent_shell_12345", "-c"))

        assert isinstance(result, Err)
        assert result.error.returncode == 127
        assert len(result.error.reason) > 0

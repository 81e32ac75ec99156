"""Tests for chore.output.console module."""

from __future__ import annotations

import pytest

from chore.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.ERROR) == "error"
        assert str(Style.COMMAND) == "command"
        assert str(Style.DEFAULT) == "default"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_error(self) -> None:
        console = MockConsole()
        console.error("Unknown recipe: deploy")
        assert console.messages == ["error: Unknown recipe: deploy"]
        assert console.has_error()

    def test_commands_in_order(self) -> None:
        console = MockConsole()
        console.command("cargo fmt")
        console.print("noise", Style.DIM)
        console.command("taplo format")
        assert console.commands == ["cargo fmt", "taplo format"]

    def test_text_and_find(self) -> None:
        console = MockConsole()
        console.print("a")
        console.print("b")
        assert console.text == "a\nb"
        assert len(console.find("b")) == 1

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.command("true")


class TestRichConsole:
    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("boom")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: boom" in captured.err

    def test_command_is_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.command("ls [abc]*")

        assert "ls [abc]*" in capsys.readouterr().err

    def test_stdout_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole(stderr=False)
        console.print("Available recipes:")

        captured = capsys.readouterr()
        assert "Available recipes:" in captured.out
        assert captured.err == ""

    def test_command_echo_is_dim(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("TERM", "xterm-256color")
        monkeypatch.delenv("NO_COLOR", raising=False)
        console = RichConsole()
        console.command("cargo fmt")

        err = capsys.readouterr().err
        assert "\x1b[2mcargo fmt" in err
        assert "\x1b[1m" not in err

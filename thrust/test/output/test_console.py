"""Tests for thrust.output.console."""

from __future__ import annotations

import pytest

from thrust.output.console import MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.WARNING) == "warning"
        assert str(Style.DEFAULT) == "default"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_shorthands_set_style(self) -> None:
        console = MockConsole()
        console.success("done")
        console.error("failed")
        console.warning("careful")
        console.info("fyi")
        console.header("Upload")

        assert [o.style for o in console.outputs] == [
            Style.SUCCESS,
            Style.ERROR,
            Style.WARNING,
            Style.INFO,
            Style.HEADER,
        ]
        assert console.messages == ["done", "failed", "careful", "fyi", "Upload"]

    def test_predicates(self) -> None:
        console = MockConsole()
        assert not console.has_error()
        console.warning("w")
        assert console.has_warning()
        assert not console.has_success()

    def test_text_and_find(self) -> None:
        console = MockConsole()
        console.print("one")
        console.print("two")
        assert console.text == "one\ntwo"
        assert [o.message for o in console.find("tw")] == ["two"]


class TestRichConsole:
    def test_brackets_are_printed_literally(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("******** Upload Failed: [bold]nope ********")

        out = capsys.readouterr().out
        assert "[bold]nope" in out

    def test_plain_print(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("abc123 Fix login", Style.DIM)
        assert "abc123 Fix login" in capsys.readouterr().out

"""Tests for output/console.py."""

from __future__ import annotations

import pytest

from npmrel.output.console import RichConsole, Style


def test_plain_output_is_not_reformatted(capsys: pytest.CaptureFixture[str]) -> None:
    console = RichConsole()

    console.print('{"version": "0.72.3", "tag": "[latest]"}')

    assert capsys.readouterr().out == '{"version": "0.72.3", "tag": "[latest]"}\n'


def test_dim_output_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    console = RichConsole()

    console.print("npm ERR! code E403", Style.DIM)

    captured = capsys.readouterr()
    assert "npm ERR! code E403" in captured.err
    assert captured.out == ""


def test_success_and_error_streams(capsys: pytest.CaptureFixture[str]) -> None:
    console = RichConsole()

    console.success("packed")
    console.error("boom")

    captured = capsys.readouterr()
    assert "OK packed" in captured.out
    assert "error: boom" in captured.err

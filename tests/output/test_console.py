"""Tests for the Rich Console factory and theme."""

from io import StringIO

import pytest

from fqdncheck.output.console import CHECK_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_plain_by_default(self) -> None:
        console = create_console()
        console.print("[check.error]bad[/check.error]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "bad" in output

    def test_plain_even_when_color_forced_by_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        console = create_console()
        console.print("ok", style="check.ok")
        assert get_output(console) == "ok\n"

    def test_color_applies_theme(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERM", "xterm-256color")
        console = create_console(color=True)
        console.print("ok", style="check.ok")
        output = get_output(console)
        assert "\x1b[" in output
        assert "ok" in output

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_long_lines_do_not_wrap(self) -> None:
        console = create_console(width=20)
        console.print("x" * 50)
        assert get_output(console) == "x" * 50 + "\n"


class TestTheme:
    def test_styles_defined(self) -> None:
        for name in ("check.ok", "check.error", "check.detail"):
            assert name in CHECK_THEME.styles

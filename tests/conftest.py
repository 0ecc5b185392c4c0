import io
import locale

import pytest

from consolekit.console import Console
from consolekit.symbols import SymbolResolver, SymbolSet


class FakeTerminal:
    """StringIO-backed streams for a Console."""

    def __init__(self, lines=(), symbols=SymbolSet.UNICODE, max_eof=None):
        self.stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        self.stdout = io.StringIO()
        self.console = Console(
            stdout=self.stdout,
            stdin=self.stdin,
            symbols=SymbolResolver(symbols),
            max_eof=max_eof,
        )

    @property
    def output(self) -> str:
        return self.stdout.getvalue()

    @property
    def plain(self) -> str:
        from consolekit.ansi import strip_ansi
        return strip_ansi(self.output)


@pytest.fixture(autouse=True)
def keep_c_numeric_locale(monkeypatch):
    """initialize() adopts the user locale; keep the test process on "C"."""
    monkeypatch.setattr(locale, "setlocale", lambda category, value=None: "C")


@pytest.fixture
def comma_decimal_locale(monkeypatch):
    """LC_NUMERIC conventions of e.g. de_DE: '.' groups, ',' decimal point."""
    conv = dict(locale.localeconv(), decimal_point=",", thousands_sep=".")
    monkeypatch.setattr(locale, "localeconv", lambda: conv)


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def make_terminal():
    return FakeTerminal

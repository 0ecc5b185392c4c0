from consolekit import ansi
from consolekit.colors import Rgb


def test_sequences():
    assert ansi.fg(Rgb(1, 2, 3)) == "\x1b[38;2;1;2;3m"
    assert ansi.bg(Rgb(4, 5, 6)) == "\x1b[48;2;4;5;6m"
    assert ansi.BOLD == "\x1b[1m"
    assert ansi.RESET == "\x1b[0m"


def test_render_order():
    out = ansi.render("hi", Rgb(1, 2, 3), Rgb(4, 5, 6), bold=True)
    assert out == "\x1b[1m\x1b[38;2;1;2;3m\x1b[48;2;4;5;6mhi\n\x1b[0m"


def test_render_always_resets():
    assert ansi.render("plain", newline=False) == "plain\x1b[0m"


def test_strip_ansi():
    assert ansi.strip_ansi(ansi.styled("x", Rgb(0, 0, 0), bold=True)) == "x"

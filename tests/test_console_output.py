import io

import click

from consolekit import ansi
from consolekit.colors import Rgb
from consolekit.symbols import SymbolSet
from consolekit.theme import DEFAULT_ERROR_COLOR, DEFAULT_THEME, Theme

PRIMARY = ansi.fg(DEFAULT_THEME.primary)
SECONDARY = ansi.fg(DEFAULT_THEME.secondary)
ACCENT = ansi.fg(DEFAULT_THEME.accent)


class TestPrintApi:
    def test_success(self, terminal):
        terminal.console.print_success("saved")
        assert terminal.output == f"{ansi.BOLD}{PRIMARY}✔ saved\n{ansi.RESET}"

    def test_info_not_bold(self, terminal):
        terminal.console.print_info("note")
        assert terminal.output == f"{SECONDARY}note\n{ansi.RESET}"

    def test_warning(self, terminal):
        terminal.console.print_warning("careful")
        assert terminal.output == f"{ansi.BOLD}{ACCENT}careful\n{ansi.RESET}"

    def test_error_uses_error_color(self, terminal):
        terminal.console.print_error("boom")
        assert terminal.output == f"{ansi.BOLD}{ansi.fg(DEFAULT_ERROR_COLOR)}✖ boom\n{ansi.RESET}"

    def test_overrides(self, terminal):
        terminal.console.print_success("x", fg="#000", bg="255,255,255", bold=False)
        assert terminal.output == f"{ansi.fg(Rgb(0, 0, 0))}{ansi.bg(Rgb(255, 255, 255))}✔ x\n{ansi.RESET}"

    def test_bad_override_falls_back_silently(self, terminal):
        terminal.console.print_info("x", fg="not-a-color", bg="nope")
        assert terminal.output == f"{SECONDARY}x\n{ansi.RESET}"

    def test_aliases(self, terminal):
        c = terminal.console
        c.ok("a")
        c.info("b")
        c.warn("c")
        c.fail("d")
        assert terminal.plain == "✔ a\nb\nc\n✖ d\n"

    def test_ascii_symbols(self, make_terminal):
        t = make_terminal(symbols=SymbolSet.ASCII)
        t.console.print_success("done")
        t.console.print_error("nope")
        assert t.plain == "[OK] done\n[X] nope\n"

    def test_set_symbol_set_on_console(self, make_terminal):
        t = make_terminal(symbols=SymbolSet.AUTO)
        t.console.set_symbol_set(SymbolSet.ASCII)
        t.console.ok("done")
        assert t.plain.startswith("[OK] ")

    def test_theme_change_applies(self, terminal):
        terminal.console.set_theme(primary="#010203")
        terminal.console.ok("x")
        assert ansi.fg(Rgb(1, 2, 3)) in terminal.output

    def test_apply_theme_by_name(self, terminal):
        applied = terminal.console.apply_theme("nord")
        assert applied == Theme.nord()
        assert terminal.console.theme == Theme.nord()

    def test_write_and_write_line(self, terminal):
        terminal.console.write("a", fg="#fff", bold=True)
        terminal.console.write_line("b", fg="bogus")
        assert terminal.output == f"{ansi.BOLD}{ansi.fg(Rgb(255, 255, 255))}a{ansi.RESET}b\n{ansi.RESET}"


class TestUiHelpers:
    def test_section(self, terminal):
        terminal.console.section("Menu")
        line = "─" * 32
        assert terminal.output == (
            f"{ACCENT}{line} {ansi.RESET}"
            f"{ansi.BOLD}{ACCENT}Menu{ansi.RESET}"
            f"{ACCENT} {line}{ansi.RESET}\n"
        )

    def test_section_not_bold(self, terminal):
        terminal.console.section("Menu", bold=False)
        assert ansi.BOLD not in terminal.output

    def test_divider(self, make_terminal):
        t = make_terminal(symbols=SymbolSet.ASCII)
        t.console.divider(fg="#000")
        assert t.output == f"{ansi.fg(Rgb(0, 0, 0))}{'-' * 30}{ansi.RESET}\n"

    def test_menu_item(self, terminal):
        terminal.console.menu_item(3, "Settings", pad_width=3)
        assert terminal.output == f"{PRIMARY}+[  3]{ansi.RESET} {SECONDARY}Settings{ansi.RESET}\n"

    def test_menu_item_string_label(self, terminal):
        terminal.console.menu_item("q", "Quit")
        assert terminal.plain == "+[q] Quit\n"

    def test_print_result(self, terminal):
        terminal.console.print_result("Total", "42")
        assert terminal.plain == "+ Total --> 42\n"
        assert f"{ansi.BOLD}{PRIMARY}42{ansi.RESET}" in terminal.output
        assert f"{SECONDARY}Total{ansi.RESET}" in terminal.output

    def test_show_item(self, terminal):
        terminal.console.show_item(7, "leaf-1")
        assert terminal.plain == "+ 7 --> leaf-1\n"
        assert f"{ansi.BOLD}{PRIMARY}7{ansi.RESET}" in terminal.output
        assert f"{SECONDARY}leaf-1{ansi.RESET}" in terminal.output

    def test_wait_for_user(self, make_terminal):
        t = make_terminal([""])
        t.console.wait_for_user()
        assert t.plain == "Press Enter to continue..."
        assert t.stdin.read() == ""


class _TtyInput(io.StringIO):
    def isatty(self):
        return True


def test_wait_for_user_any_key_on_tty(monkeypatch, make_terminal):
    keys = []
    monkeypatch.setattr(click, "getchar", lambda: keys.append("x") or "x")

    t = make_terminal()
    t.console._stdin = _TtyInput("")
    t.console.wait_for_user()

    assert keys == ["x"]
    assert t.plain == "Press any key to continue...\n"

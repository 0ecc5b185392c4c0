"""
Console: themed printing, UI helpers and validated input prompts.

A Console owns its theme state, symbol resolver and streams. Applications
create one at their composition point (or use get_console() for a shared
default) and pass it to whatever prints.

Usage:
    console = Console()
    console.set_theme(primary="#00ff88")
    console.section("Main menu")
    console.menu_item(1, "List devices")
    choice = console.get_int_input("Choice", min_value=1, max_value=3)
"""

from __future__ import annotations
import locale
import logging
import re
import sys
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, TextIO, Union

import click

from . import ansi
from .colors import Rgb, resolve_color, try_parse_color
from .config import ConsoleSettings
from .symbols import Glyphs, SymbolResolver, SymbolSet
from .theme import Theme, ThemeState, registry

logger = logging.getLogger(__name__)

CANCEL_TOKEN = "Exit()"
DEFAULT_EXIT_QUESTION = "Are you sure you want to exit? (yes/no)"

_INVARIANT_INT = re.compile(r"^[+-]?[0-9]+$")
# Thousands separators are accepted anywhere in the integer part
_INVARIANT_DECIMAL = re.compile(r"^[+-]?(?:[0-9][0-9,]*)?(?:\.[0-9]*)?$")
_PLAIN_DECIMAL = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)$")


class InputCancelled(Exception):
    """User typed the cancellation token and confirmed."""

    def __init__(self, message: str = "User cancelled via Exit()."):
        super().__init__(message)


@dataclass(frozen=True)
class InputResult:
    """Outcome of a free-text prompt: a value, or a confirmed cancellation."""
    value: Optional[str] = None
    cancelled: bool = False

    def unwrap(self) -> str:
        """The value; raises InputCancelled if the prompt was cancelled."""
        if self.cancelled:
            raise InputCancelled()
        return self.value


def parse_int(text: str) -> Optional[int]:
    """Base-10 integer, invariant form first, then the LC_NUMERIC locale (ASCII digits only)."""
    if _INVARIANT_INT.match(text):
        return int(text)
    delocalized = locale.delocalize(text)
    if _INVARIANT_INT.match(delocalized):
        return int(delocalized)
    return None


def parse_decimal(text: str) -> Optional[Decimal]:
    """Decimal number, invariant form (',' groups, '.' point) first, then the LC_NUMERIC locale."""
    if _INVARIANT_DECIMAL.match(text) and any(c.isdigit() for c in text):
        return Decimal(text.replace(",", ""))

    delocalized = locale.delocalize(text)
    if _PLAIN_DECIMAL.match(delocalized):
        try:
            return Decimal(delocalized)
        except InvalidOperation:
            return None
    return None


class Console:
    """
    Themed console bound to an output and an input stream.

    Args:
        stdout: Output stream (defaults to sys.stdout at write time)
        stdin: Input stream (defaults to sys.stdin at read time)
        theme_state: Shared ThemeState (a fresh default one if None)
        symbols: Symbol resolver (auto-detecting if None)
        max_eof: Raise EOFError after this many consecutive end-of-input
            reads; None retries forever
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stdin: Optional[TextIO] = None,
        theme_state: Optional[ThemeState] = None,
        symbols: Optional[SymbolResolver] = None,
        max_eof: Optional[int] = None,
    ):
        self._stdout = stdout
        self._stdin = stdin
        self.theme_state = theme_state or ThemeState()
        self.symbols = symbols or SymbolResolver()
        self.max_eof = max_eof
        self._eof_count = 0

    @classmethod
    def from_settings(cls, settings: ConsoleSettings, **kwargs) -> Console:
        """Build a console with the symbol set and theme named in `settings`."""
        console = cls(**kwargs)
        if settings.symbols is not SymbolSet.AUTO:
            console.set_symbol_set(settings.symbols)
        console.apply_theme(settings.theme_name)
        return console

    # ===== Streams =====

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def _out(self, text: str) -> None:
        self.stdout.write(text)

    def _read_line(self) -> Optional[str]:
        """One line without its terminator, or None at end of input."""
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            self._eof_count += 1
            if self.max_eof is not None and self._eof_count >= self.max_eof:
                raise EOFError("Input stream closed")
            return None
        self._eof_count = 0
        return line.rstrip("\r\n")

    # ===== Theme =====

    @property
    def theme(self) -> Theme:
        """Current theme used for printing."""
        return self.theme_state.theme

    @property
    def error_color(self) -> Rgb:
        """Current error color for error messages."""
        return self.theme_state.error_color

    def set_theme(
        self,
        primary: Optional[str] = None,
        secondary: Optional[str] = None,
        accent: Optional[str] = None,
    ) -> Theme:
        """Set theme colors; None keeps the previous value. Raises InvalidColorError."""
        return self.theme_state.set_theme(primary, secondary, accent)

    def set_error_color(self, color: str) -> Rgb:
        """Set error color. Raises InvalidColorError if invalid."""
        return self.theme_state.set_error_color(color)

    def apply_theme(self, theme: Union[Theme, str]) -> Theme:
        """Replace the theme with a Theme or a registered preset name."""
        resolved = registry.resolve(theme)
        self.theme_state.apply(resolved)
        return resolved

    def reset_theme(self) -> None:
        self.theme_state.reset_theme()

    def reset_error_color(self) -> None:
        self.theme_state.reset_error_color()

    # ===== Symbols =====

    def set_symbol_set(self, mode: SymbolSet) -> None:
        """Override automatic symbol detection."""
        self.symbols.set_symbol_set(mode)

    @property
    def glyphs(self) -> Glyphs:
        return self.symbols.glyphs

    # ===== Printing =====

    def write(self, message: str, fg: Optional[str] = None, bg: Optional[str] = None, bold: bool = False) -> None:
        """Writes a message with optional colors and bold, without newline."""
        self._out(ansi.render(message, try_parse_color(fg), try_parse_color(bg), bold, newline=False))

    def write_line(self, message: str, fg: Optional[str] = None, bg: Optional[str] = None,
                   bold: bool = False) -> None:
        """Writes a message with optional colors and bold, with newline."""
        self._out(ansi.render(message, try_parse_color(fg), try_parse_color(bg), bold, newline=True))

    def _print(self, message: str, default_fg: Rgb, fg: Optional[str], bg: Optional[str],
               bold: Optional[bool], default_bold: bool) -> None:
        self._out(ansi.render(
            message,
            resolve_color(fg, default_fg),
            try_parse_color(bg),
            default_bold if bold is None else bold,
        ))

    def print_success(self, message: str, fg: Optional[str] = None, bg: Optional[str] = None,
                      bold: Optional[bool] = None) -> None:
        """Success message: check glyph, primary color, bold."""
        self._print(f"{self.glyphs.check} {message}", self.theme.primary, fg, bg, bold, True)

    def print_info(self, message: str, fg: Optional[str] = None, bg: Optional[str] = None,
                   bold: Optional[bool] = None) -> None:
        """Info message: secondary color, not bold."""
        self._print(message, self.theme.secondary, fg, bg, bold, False)

    def print_warning(self, message: str, fg: Optional[str] = None, bg: Optional[str] = None,
                      bold: Optional[bool] = None) -> None:
        """Warning message: accent color, bold."""
        self._print(message, self.theme.accent, fg, bg, bold, True)

    def print_error(self, message: str, fg: Optional[str] = None, bg: Optional[str] = None,
                    bold: Optional[bool] = None) -> None:
        """Error message: cross glyph, error color, bold."""
        self._print(f"{self.glyphs.cross} {message}", self.error_color, fg, bg, bold, True)

    # Short aliases
    ok = print_success
    info = print_info
    warn = print_warning
    fail = print_error

    # ===== UI helpers =====

    def section(self, title: str, line_fg: Optional[str] = None, title_fg: Optional[str] = None,
                bold: Optional[bool] = None) -> None:
        """Section header: accent title between two divider lines."""
        theme = self.theme
        line_color = resolve_color(line_fg, theme.accent)
        title_color = resolve_color(title_fg, theme.accent)
        line = self.glyphs.line

        self._out(f"{ansi.fg(line_color)}{line} {ansi.RESET}")
        self._out(ansi.styled(title, title_color, bold=True if bold is None else bold))
        self._out(f"{ansi.fg(line_color)} {line}{ansi.RESET}\n")

    def divider(self, fg: Optional[str] = None) -> None:
        """Divider line (accent color by default)."""
        line_color = resolve_color(fg, self.theme.accent)
        self._out(f"{ansi.fg(line_color)}{self.glyphs.line}{ansi.RESET}\n")

    def menu_item(self, number: Union[int, str], text: str, pad_width: int = 0,
                  number_fg: Optional[str] = None, text_fg: Optional[str] = None) -> None:
        """Menu entry `+[number] text`; number in primary, text in secondary."""
        label = str(number)
        if pad_width > 0:
            label = label.rjust(pad_width)
        theme = self.theme
        nf = resolve_color(number_fg, theme.primary)
        tf = resolve_color(text_fg, theme.secondary)
        self._out(f"{ansi.fg(nf)}+[{label}]{ansi.RESET} {ansi.fg(tf)}{text}{ansi.RESET}\n")

    def print_result(self, label: str, result: str, label_fg: Optional[str] = None,
                     value_fg: Optional[str] = None) -> None:
        """`+ label --> result`; label in secondary, result bold in primary."""
        theme = self.theme
        lf = resolve_color(label_fg, theme.secondary)
        vf = resolve_color(value_fg, theme.primary)
        self._out(
            f"{ansi.fg(vf)}+{ansi.RESET} "
            f"{ansi.fg(lf)}{label}{ansi.RESET} "
            f"{ansi.fg(vf)}--> {ansi.RESET}"
            f"{ansi.styled(str(result), vf, bold=True)}\n"
        )

    def show_item(self, item_id: Union[int, str], item: str, id_fg: Optional[str] = None,
                  item_fg: Optional[str] = None) -> None:
        """`+ id --> item`; id bold in primary, item in secondary."""
        theme = self.theme
        idc = resolve_color(id_fg, theme.primary)
        itc = resolve_color(item_fg, theme.secondary)
        self._out(
            f"{ansi.fg(idc)}+{ansi.RESET} "
            f"{ansi.styled(str(item_id), idc, bold=True)} "
            f"{ansi.fg(idc)}--> {ansi.RESET}"
            f"{ansi.fg(itc)}{item}{ansi.RESET}\n"
        )

    def wait_for_user(self, fg: Optional[str] = None) -> None:
        """
        Block until the user continues.

        On an interactive terminal any key continues; injected or
        redirected input needs a line (Enter).
        """
        use_fg = resolve_color(fg, self.theme.secondary)
        if self.stdin.isatty():
            self._out(ansi.render("Press any key to continue...", use_fg, newline=False))
            self.stdout.flush()
            click.getchar()
            self._out("\n")
            return

        self._out(ansi.render("Press Enter to continue...", use_fg, newline=False))
        self._read_line()

    # ===== Input =====

    def _write_prompt(self, prompt: str, label_fg: Optional[str], cursor_fg: Optional[str]) -> None:
        theme = self.theme
        lf = resolve_color(label_fg, theme.secondary)
        cf = resolve_color(cursor_fg, theme.primary)
        self._out(f"{ansi.fg(lf)}{prompt} {ansi.RESET}")
        self._out(ansi.styled(f"{self.glyphs.arrow} ", cf, bold=True))

    def read_input(self, prompt: str, label_fg: Optional[str] = None,
                   cursor_fg: Optional[str] = None) -> InputResult:
        """
        Read a non-empty line, re-prompting until one is given.

        Typing Exit() asks for confirmation; if confirmed the result is
        cancelled instead of carrying a value.
        """
        while True:
            self._write_prompt(prompt, label_fg, cursor_fg)
            text = (self._read_line() or "").strip()

            if not text:
                self.print_error("Invalid input. Please enter a non-empty input.")
                continue

            if text.lower() == CANCEL_TOKEN.lower():
                if self.confirm("Are you sure you want to cancel? (yes/no)"):
                    logger.debug(f"Prompt {prompt!r} cancelled by user")
                    return InputResult(cancelled=True)
                continue

            return InputResult(value=text)

    def get_input(self, prompt: str, label_fg: Optional[str] = None, cursor_fg: Optional[str] = None) -> str:
        """Reads a non-empty input; typing Exit() and confirming raises InputCancelled."""
        return self.read_input(prompt, label_fg, cursor_fg).unwrap()

    def get_int_input(self, prompt: str, min_value: Optional[int] = None, max_value: Optional[int] = None,
                      label_fg: Optional[str] = None, cursor_fg: Optional[str] = None) -> int:
        """
        Read an integer, optionally within inclusive bounds.

        Args:
            prompt: Prompt label
            min_value: Lowest accepted value, or None
            max_value: Highest accepted value, or None
            label_fg: Prompt label color override
            cursor_fg: Arrow color override

        Returns:
            The first valid integer entered

        Raises:
            InputCancelled: The user cancelled with Exit()
        """
        while True:
            n = parse_int(self.get_input(prompt, label_fg, cursor_fg))
            if n is not None \
                    and (min_value is None or n >= min_value) \
                    and (max_value is None or n <= max_value):
                return n

            self.print_error("Invalid number.")
            if min_value is not None or max_value is not None:
                low = "-∞" if min_value is None else min_value
                high = "∞" if max_value is None else max_value
                self.print_info(f"Allowed range: {low} to {high}")

    def get_decimal_input(self, prompt: str, label_fg: Optional[str] = None,
                          cursor_fg: Optional[str] = None) -> Decimal:
        """Reads a decimal number (invariant form, then current locale)."""
        while True:
            result = parse_decimal(self.get_input(prompt, label_fg, cursor_fg))
            if result is not None:
                return result
            self.print_error("Invalid input! Please enter a valid decimal number.")

    def _ask_yes_no(self, question: str, question_fg: Optional[str]) -> bool:
        while True:
            qf = resolve_color(question_fg, self.theme.accent)
            self._out(f"{ansi.styled(question, qf, bold=True)}\n")
            answer = (self._read_line() or "").strip().lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self.print_error("Enter a valid confirmation (yes/no)")

    def confirm(self, question: str = DEFAULT_EXIT_QUESTION, question_fg: Optional[str] = None) -> bool:
        """Asks a yes/no question and returns True for yes."""
        if self._ask_yes_no(question, question_fg):
            self.ok("Confirmed.")
            return True
        self.info("Cancelled.")
        return False

    def exit_option(self, question: str = DEFAULT_EXIT_QUESTION, question_fg: Optional[str] = None,
                    show_farewell: bool = True) -> bool:
        """Exit confirmation prompt; returns True if the user confirmed exit."""
        if self._ask_yes_no(question, question_fg):
            if show_farewell:
                self.ok("Goodbye!")
            return True
        self.info("Exit cancelled.")
        return False


# Global instance for convenience
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the shared default console, configured from the environment."""
    global _console
    if _console is None:
        _console = Console.from_settings(ConsoleSettings.from_env())
    return _console


def reset_console() -> None:
    """Drop the shared console; the next get_console() builds a new one."""
    global _console
    _console = None

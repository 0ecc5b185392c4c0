"""
ANSI escape sequences (24-bit color, bold, reset).
"""

from __future__ import annotations
from typing import Optional
import re

from .colors import Rgb

RESET = "\x1b[0m"
BOLD = "\x1b[1m"

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def fg(color: Rgb) -> str:
    """Foreground color sequence."""
    return f"\x1b[38;2;{color.r};{color.g};{color.b}m"


def bg(color: Rgb) -> str:
    """Background color sequence."""
    return f"\x1b[48;2;{color.r};{color.g};{color.b}m"


def render(
        message: str,
        fg_color: Optional[Rgb] = None,
        bg_color: Optional[Rgb] = None,
        bold: bool = False,
        newline: bool = True,
) -> str:
    """
    Wrap a message in style sequences.

    The reset is always appended, even with no styling, so style never
    leaks into later output.
    """
    parts = []
    if bold:
        parts.append(BOLD)
    if fg_color is not None:
        parts.append(fg(fg_color))
    if bg_color is not None:
        parts.append(bg(bg_color))
    parts.append(message)
    if newline:
        parts.append("\n")
    parts.append(RESET)
    return "".join(parts)


def styled(text: str, color: Rgb, bold: bool = False) -> str:
    """Single inline segment: optional bold, foreground, text, reset."""
    return f"{BOLD if bold else ''}{fg(color)}{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences."""
    return _ANSI_RE.sub("", text)

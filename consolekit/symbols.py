"""
Status glyphs with Unicode/ASCII fallback.

Legacy Windows consoles (conhost outside Windows Terminal) mangle the
Unicode glyphs, so ASCII is picked there unless overridden.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional
import logging
import os
import sys
import threading

logger = logging.getLogger(__name__)

# Platform detection
IS_WINDOWS = sys.platform == 'win32'


class SymbolSet(Enum):
    """Glyph rendering mode."""
    AUTO = "auto"
    UNICODE = "unicode"
    ASCII = "ascii"


@dataclass(frozen=True)
class Glyphs:
    check: str
    cross: str
    arrow: str
    line: str


UNICODE_GLYPHS = Glyphs(check="✔", cross="✖", arrow="➜", line="─" * 32)
ASCII_GLYPHS = Glyphs(check="[OK]", cross="[X]", arrow="->", line="-" * 30)


def detect_symbol_set(
    is_windows: bool = IS_WINDOWS,
    environ: Optional[Mapping[str, str]] = None,
) -> SymbolSet:
    """
    Pick a concrete symbol set for the current terminal.

    Args:
        is_windows: Whether the host platform is Windows
        environ: Environment mapping (defaults to os.environ)

    Returns:
        SymbolSet.ASCII on Windows outside Windows Terminal, else SymbolSet.UNICODE
    """
    env = os.environ if environ is None else environ
    is_windows_terminal = bool(env.get("WT_SESSION"))
    if is_windows and not is_windows_terminal:
        return SymbolSet.ASCII
    return SymbolSet.UNICODE


class SymbolResolver:
    """Resolves the active symbol set once and caches it."""

    def __init__(
        self,
        mode: SymbolSet = SymbolSet.AUTO,
        is_windows: bool = IS_WINDOWS,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self._lock = threading.Lock()
        self._mode = mode
        self._is_windows = is_windows
        self._environ = environ

    def set_symbol_set(self, mode: SymbolSet) -> None:
        """Override automatic detection. AUTO after resolution is ignored."""
        with self._lock:
            if mode is SymbolSet.AUTO and self._mode is not SymbolSet.AUTO:
                logger.debug(f"Symbol set already fixed to {self._mode.value}; keeping it")
                return
            self._mode = mode

    @property
    def mode(self) -> SymbolSet:
        """Concrete symbol set, auto-detecting on first access."""
        with self._lock:
            if self._mode is SymbolSet.AUTO:
                self._mode = detect_symbol_set(self._is_windows, self._environ)
                logger.debug(f"Auto-detected symbol set: {self._mode.value}")
            return self._mode

    @property
    def glyphs(self) -> Glyphs:
        return ASCII_GLYPHS if self.mode is SymbolSet.ASCII else UNICODE_GLYPHS

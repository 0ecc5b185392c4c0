"""
Best-effort terminal preparation.

Switches the standard streams to UTF-8, adopts the user's LC_NUMERIC locale
for the numeric prompts and, on Windows, enables virtual terminal processing
so ANSI sequences are interpreted. Failures are logged and swallowed; the
library keeps working without the enhancement.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import locale
import logging
import sys
import threading

from .symbols import IS_WINDOWS

logger = logging.getLogger(__name__)

STD_OUTPUT_HANDLE = -11
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


@dataclass(frozen=True)
class InitStatus:
    """What initialize() managed to set up."""
    encoding_configured: bool
    ansi_enabled: Optional[bool]  # None when not on Windows (nothing to enable)
    numeric_locale: Optional[str] = None  # None if the user locale could not be adopted

    @property
    def ok(self) -> bool:
        return self.encoding_configured and self.ansi_enabled is not False


_lock = threading.Lock()
_status: Optional[InitStatus] = None


def _configure_encoding() -> bool:
    configured = True
    for stream in (sys.stdout, sys.stdin):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is None:
            configured = False
            continue
        try:
            reconfigure(encoding="utf-8")
        except (OSError, ValueError) as e:
            logger.debug(f"Could not switch {stream!r} to UTF-8: {e}")
            configured = False
    return configured


def _adopt_numeric_locale() -> str:
    return locale.setlocale(locale.LC_NUMERIC, "")


def _enable_windows_ansi() -> bool:
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.windll.kernel32
    handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
    if not handle:
        return False

    mode = wintypes.DWORD()
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        return False

    return bool(kernel32.SetConsoleMode(handle, mode.value | ENABLE_VIRTUAL_TERMINAL_PROCESSING))


def initialize() -> InitStatus:
    """
    Prepare the console for styled output. Idempotent and thread-safe.

    Returns:
        InitStatus of the first call
    """
    global _status
    if _status is not None:
        return _status

    with _lock:
        if _status is not None:
            return _status

        try:
            encoding_configured = _configure_encoding()
        except Exception as e:
            logger.debug(f"Console encoding setup failed: {e}")
            encoding_configured = False

        ansi_enabled = None
        if IS_WINDOWS:
            try:
                ansi_enabled = _enable_windows_ansi()
            except Exception as e:
                logger.debug(f"Enabling virtual terminal processing failed: {e}")
                ansi_enabled = False

        try:
            numeric_locale = _adopt_numeric_locale()
        except (locale.Error, ValueError) as e:
            logger.debug(f"Could not adopt the user numeric locale: {e}")
            numeric_locale = None

        _status = InitStatus(encoding_configured=encoding_configured, ansi_enabled=ansi_enabled,
                             numeric_locale=numeric_locale)
        logger.debug(f"Console initialized: {_status}")
        return _status

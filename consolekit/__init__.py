"""
consolekit - Themeable console output and validated prompts.

- True-color (24-bit) themed messages: success, info, warning, error
- Section headers, dividers, menu items, result lines
- Prompts for text, integers and decimals that re-ask until valid
- Unicode glyphs with ASCII fallback for legacy Windows consoles
"""

__version__ = "0.1.0"

from .colors import Rgb, InvalidColorError, try_parse_color, parse_color, resolve_color
from .theme import Theme, ThemeState, ThemeRegistry, DEFAULT_THEME, DEFAULT_ERROR_COLOR, registry
from .symbols import SymbolSet, SymbolResolver, detect_symbol_set, IS_WINDOWS
from .config import ConsoleSettings
from .console import Console, InputCancelled, InputResult, get_console, reset_console
from .terminal import InitStatus, initialize

__all__ = [
    # Colors
    "Rgb",
    "InvalidColorError",
    "try_parse_color",
    "parse_color",
    "resolve_color",
    # Themes
    "Theme",
    "ThemeState",
    "ThemeRegistry",
    "DEFAULT_THEME",
    "DEFAULT_ERROR_COLOR",
    "registry",
    # Symbols
    "SymbolSet",
    "SymbolResolver",
    "detect_symbol_set",
    "IS_WINDOWS",
    # Console
    "ConsoleSettings",
    "Console",
    "InputCancelled",
    "InputResult",
    "get_console",
    "reset_console",
    # Setup
    "InitStatus",
    "initialize",
]

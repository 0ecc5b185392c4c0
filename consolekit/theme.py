"""
Theme system.

A Theme is an immutable three-color palette (primary, secondary, accent).
ThemeState holds the active theme and error color behind a single lock;
ThemeRegistry keeps named in-memory presets.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Union
import logging
import threading

from .colors import Rgb, parse_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """Console theme definition."""
    primary: Rgb
    secondary: Rgb
    accent: Rgb
    name: str = "custom"

    def with_(
        self,
        primary: Optional[Rgb] = None,
        secondary: Optional[Rgb] = None,
        accent: Optional[Rgb] = None,
    ) -> Theme:
        """Copy of this theme with the given colors replaced."""
        return replace(
            self,
            primary=primary if primary is not None else self.primary,
            secondary=secondary if secondary is not None else self.secondary,
            accent=accent if accent is not None else self.accent,
        )

    def to_dict(self) -> dict:
        """Serialize to dict (hex strings)."""
        return {
            'name': self.name,
            'primary': self.primary.to_hex(),
            'secondary': self.secondary.to_hex(),
            'accent': self.accent.to_hex(),
        }

    @classmethod
    def from_strings(cls, name: str, primary: str, secondary: str, accent: str) -> Theme:
        return cls(
            primary=parse_color(primary, "primary color"),
            secondary=parse_color(secondary, "secondary color"),
            accent=parse_color(accent, "accent color"),
            name=name,
        )

    @classmethod
    def default(cls) -> Theme:
        """Default green/grey/amber palette."""
        return cls(
            primary=Rgb(2, 219, 111),
            secondary=Rgb(180, 180, 180),
            accent=Rgb(255, 208, 71),
            name="default",
        )

    @classmethod
    def dracula(cls) -> Theme:
        """Dracula theme."""
        return cls.from_strings("dracula", "#50fa7b", "#f8f8f2", "#bd93f9")

    @classmethod
    def nord(cls) -> Theme:
        """Nord theme."""
        return cls.from_strings("nord", "#a3be8c", "#d8dee9", "#88c0d0")

    @classmethod
    def solarized_dark(cls) -> Theme:
        """Solarized Dark theme."""
        return cls.from_strings("solarized_dark", "#859900", "#93a1a1", "#b58900")

    @classmethod
    def gruvbox_dark(cls) -> Theme:
        """Gruvbox Dark theme."""
        return cls.from_strings("gruvbox_dark", "#b8bb26", "#ebdbb2", "#fabd2f")


DEFAULT_THEME = Theme.default()
DEFAULT_ERROR_COLOR = Rgb(219, 0, 0)


class ThemeState:
    """
    Active theme and error color.

    Every read and write goes through one lock, so concurrent callers
    never observe a partially updated theme.
    """

    def __init__(self, theme: Theme = DEFAULT_THEME, error_color: Rgb = DEFAULT_ERROR_COLOR):
        self._lock = threading.Lock()
        self._theme = theme
        self._error_color = error_color

    @property
    def theme(self) -> Theme:
        """Current theme."""
        with self._lock:
            return self._theme

    @property
    def error_color(self) -> Rgb:
        """Current error color."""
        with self._lock:
            return self._error_color

    def set_theme(
        self,
        primary: Optional[str] = None,
        secondary: Optional[str] = None,
        accent: Optional[str] = None,
    ) -> Theme:
        """
        Set theme colors from color strings.

        Args:
            primary: New primary color, or None to keep the current one
            secondary: New secondary color, or None to keep the current one
            accent: New accent color, or None to keep the current one

        Returns:
            The new theme

        Raises:
            InvalidColorError: A given color string does not parse; the
                current theme is left unchanged
        """
        p = parse_color(primary, "primary color") if primary is not None else None
        s = parse_color(secondary, "secondary color") if secondary is not None else None
        a = parse_color(accent, "accent color") if accent is not None else None

        with self._lock:
            self._theme = self._theme.with_(primary=p, secondary=s, accent=a)
            theme = self._theme
        logger.debug(f"Theme set: {theme.to_dict()}")
        return theme

    def apply(self, theme: Theme) -> None:
        """Replace the whole theme."""
        with self._lock:
            self._theme = theme
        logger.debug(f"Theme applied: {theme.name}")

    def set_error_color(self, color: str) -> Rgb:
        """Set error color. Raises InvalidColorError if invalid."""
        error_color = parse_color(color, "error color")
        with self._lock:
            self._error_color = error_color
        return error_color

    def reset_theme(self) -> None:
        """Reset theme to default."""
        self.apply(DEFAULT_THEME)

    def reset_error_color(self) -> None:
        """Reset error color to default."""
        with self._lock:
            self._error_color = DEFAULT_ERROR_COLOR


class ThemeRegistry:
    """Named in-memory theme presets."""

    def __init__(self):
        self._themes: dict[str, Theme] = {}

        # Register built-in themes
        for theme in (
                Theme.default(),
                Theme.dracula(),
                Theme.nord(),
                Theme.solarized_dark(),
                Theme.gruvbox_dark(),
        ):
            self._themes[theme.name] = theme

    def get(self, name: str) -> Optional[Theme]:
        """
        Get theme by name.

        Args:
            name: Theme name

        Returns:
            Theme if found, None otherwise
        """
        return self._themes.get(name)

    def list_themes(self) -> list[str]:
        """Sorted list of registered theme names."""
        return sorted(self._themes.keys())

    def register_theme(self, theme: Theme) -> None:
        """Register (or replace) a theme under its name."""
        self._themes[theme.name] = theme

    def resolve(self, theme: Union[Theme, str]) -> Theme:
        """Theme instance for a Theme or registered name. Raises KeyError if unknown."""
        if isinstance(theme, Theme):
            return theme
        found = self.get(theme)
        if found is None:
            raise KeyError(f"Unknown theme: {theme}")
        return found


# Global registry for convenience
registry = ThemeRegistry()

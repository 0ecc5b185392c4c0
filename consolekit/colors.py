"""
Color model and color string parsing.

Accepted formats: "#RRGGBB", "RRGGBB", "#RGB", "RGB" (case-insensitive hex)
and "r,g,b" (base-10, whitespace around commas allowed).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import re

logger = logging.getLogger(__name__)

_DECIMAL_CHANNEL = re.compile(r"^[+-]?[0-9]+$")
_HEX_DIGITS = "0123456789abcdef"


class InvalidColorError(ValueError):
    """Raised when a color string required by a setter does not parse."""


def _in_byte(value: int) -> bool:
    return 0 <= value <= 255


@dataclass(frozen=True)
class Rgb:
    """Immutable RGB color (0..255)."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not _in_byte(channel):
                raise ValueError("RGB components must be between 0 and 255.")

    def __str__(self) -> str:
        return f"{self.r},{self.g},{self.b}"

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


def _parse_csv(text: str) -> Optional[Rgb]:
    parts = [p.strip() for p in text.split(",") if p]
    if len(parts) != 3:
        return None
    values = []
    for part in parts:
        if not _DECIMAL_CHANNEL.match(part):
            return None
        value = int(part)
        if not _in_byte(value):
            return None
        values.append(value)
    return Rgb(*values)


def _hex_digit(char: str) -> Optional[int]:
    index = _HEX_DIGITS.find(char.lower())
    return index if index >= 0 else None


def _parse_hex(text: str) -> Optional[Rgb]:
    hex_part = text[1:] if text.startswith("#") else text

    if len(hex_part) == 3:
        digits = [_hex_digit(c) for c in hex_part]
        if any(d is None for d in digits):
            return None
        return Rgb(*(d * 17 for d in digits))

    if len(hex_part) == 6:
        channels = []
        for i in range(0, 6, 2):
            high, low = _hex_digit(hex_part[i]), _hex_digit(hex_part[i + 1])
            if high is None or low is None:
                return None
            channels.append(high * 16 + low)
        return Rgb(*channels)

    return None


def try_parse_color(text) -> Optional[Rgb]:
    """
    Parse a color string without raising.

    Args:
        text: Color string, or None

    Returns:
        Rgb if the string is a valid color, None otherwise
    """
    if not isinstance(text, str) or not text.strip():
        return None
    text = text.strip()

    if "," in text:
        return _parse_csv(text)
    return _parse_hex(text)


def parse_color(text, what: str = "color") -> Rgb:
    """Parse a color string, raising InvalidColorError naming `what` on failure."""
    color = try_parse_color(text)
    if color is None:
        raise InvalidColorError(f"Invalid {what}: {text!r}")
    return color


def resolve_color(text, fallback: Optional[Rgb]) -> Optional[Rgb]:
    """Parsed color if `text` is valid, otherwise `fallback`."""
    color = try_parse_color(text)
    if color is None:
        if text is not None:
            logger.debug(f"Ignoring unparsable color override {text!r}")
        return fallback
    return color

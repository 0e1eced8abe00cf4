"""Color conversion utilities (hex <-> RGB <-> HSL)."""

import math
from typing import NamedTuple

from colorlerp.errors import InvalidColorFormat

HEX_DIGITS = "0123456789abcdefABCDEF"


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""

    h: float
    s: float
    l: float


def normalize_hex(hex_str: str) -> str:
    """'#RGB' or '#RRGGBB' -> '#rrggbb'. Raises InvalidColorFormat otherwise."""
    if not isinstance(hex_str, str):
        raise InvalidColorFormat(f"Hex color must be a string, got {type(hex_str).__name__}.")
    if len(hex_str) not in (4, 7) or not hex_str.startswith("#"):
        raise InvalidColorFormat(f"Hex color must be '#RGB' or '#RRGGBB', got {hex_str!r}.")
    digits = hex_str[1:]
    if not all(ch in HEX_DIGITS for ch in digits):
        raise InvalidColorFormat(f"Hex color contains non-hex characters: {hex_str!r}.")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return "#" + digits.lower()


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """'#RRGGBB' (or '#RGB') -> (R, G, B)."""
    h = normalize_hex(hex_str)[1:]
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """(R, G, B) -> '#rrggbb'."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_hsl(hex_str: str) -> HSL:
    """Convert a hex color to HSL (degrees, percent, percent)."""
    r, g, b = (c / 255 for c in hex_to_rgb(hex_str))
    high, low = max(r, g, b), min(r, g, b)
    l = (high + low) / 2

    if high == low:
        return HSL(0.0, 0.0, l * 100)

    d = high - low
    s = d / (2 - high - low) if l > 0.5 else d / (high + low)
    if high == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif high == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    h /= 6
    return HSL(h * 360, s * 100, l * 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _channel_hex(x: float) -> str:
    # half-up rounding, not Python's round-half-even
    return f"{max(0, min(255, math.floor(x * 255 + 0.5))):02x}"


def hsl_to_hex(hsl) -> str:
    """Convert an (h, s, l) triple to a lowercase '#rrggbb' string."""
    h, s, l = hsl
    h /= 360
    s /= 100
    l /= 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return f"#{_channel_hex(r)}{_channel_hex(g)}{_channel_hex(b)}"


def readable_text_color(hex_str: str) -> str:
    """Black or white, whichever reads better on top of *hex_str*."""
    return "#000000" if hex_to_hsl(hex_str).l > 55 else "#ffffff"


def color_swatch_html(hex_str: str, size: int = 30) -> str:
    """Return an HTML span showing a color swatch."""
    return (
        f'<span style="display:inline-block;width:{size}px;height:{size}px;'
        f'background:{hex_str};border:1px solid #888;border-radius:4px;'
        f'vertical-align:middle;margin-right:6px;"></span>'
    )

"""Same-hue color shades for breakdown slices.

A seed color is converted to HSL; hue and saturation are held fixed while
lightness is spread linearly across a theme-dependent range:

- light theme: ``10 + progress * 85`` (10% .. 95%)
- dark theme: ``40 + progress * 200``, clamped to 100%. The formula passes
  100% at ``progress == 0.3``, so every later shade in a dark palette is
  white. Kept as-is pending a decision on the intended dark range.

Malformed seeds fall back to the theme's seed color. NaN never reaches the
encoder: every channel is coerced to 0 and clamped to ``[0, 255]``.
"""

from __future__ import annotations

import colorsys
import math
import re

from .config import theme_colors
from .logging_setup import get_logger

_logger = get_logger("spending_analytics.colors")

_HEX6_RE = re.compile(r"^[0-9A-Fa-f]{6}$")

LIGHT_LIGHTNESS: tuple[float, float] = (10.0, 85.0)
DARK_LIGHTNESS: tuple[float, float] = (40.0, 200.0)


def _finite(value: float, default: float = 0.0) -> float:
    return default if value is None or math.isnan(value) else value


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def normalize_hex(color: str, *, dark: bool = False) -> str:
    """Return ``color`` as six lowercase hex digits without ``#``.

    Accepts 3- or 6-digit forms with or without a leading ``#``. Anything
    else is replaced by the theme fallback seed.
    """

    hex_ = (color or "").strip().lstrip("#").strip()
    if len(hex_) == 3:
        hex_ = "".join(ch * 2 for ch in hex_)
    if not _HEX6_RE.fullmatch(hex_):
        fallback = theme_colors("dark" if dark else "light").fallback_seed.lstrip("#")
        _logger.debug("malformed seed color %r; using %s", color, fallback)
        return fallback.lower()
    return hex_.lower()


def hex_to_rgb(color: str, *, dark: bool = False) -> tuple[int, int, int]:
    hex_ = normalize_hex(color, dark=dark)
    return int(hex_[0:2], 16), int(hex_[2:4], 16), int(hex_[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    channels = [int(_clamp(_round_half_up(_finite(c)), 0, 255)) for c in (r, g, b)]
    return "#" + "".join(f"{c:02x}" for c in channels)


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """RGB (0-255 per channel) to HSL (degrees, percent, percent)."""

    r, g, b = (_clamp(_finite(c), 0, 255) / 255 for c in (r, g, b))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return _finite(h) * 360, _finite(s) * 100, _finite(l, 0.5) * 100


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:  # noqa: E741
    """HSL (degrees, percent, percent) to RGB (0-255 per channel).

    Hue wraps into ``[0, 360)``; saturation and lightness are clamped to
    ``[0, 100]``.
    """

    h = _finite(h) % 360
    s = _clamp(_finite(s), 0, 100)
    l = _clamp(_finite(l, 50.0), 0, 100)  # noqa: E741
    r, g, b = colorsys.hls_to_rgb(h / 360, l / 100, s / 100)
    return tuple(  # type: ignore[return-value]
        _round_half_up(_clamp(_finite(c), 0, 1) * 255) for c in (r, g, b)
    )


def shade_lightness(progress: float, *, dark: bool) -> float:
    base, span = DARK_LIGHTNESS if dark else LIGHT_LIGHTNESS
    return _clamp(base + progress * span, 0, 100)


def generate_color_shades(base_color: str, count: int, dark: bool = False) -> list[str]:
    """Return ``count`` ``#rrggbb`` shades of ``base_color``.

    ``count == 1`` yields the seed itself re-encoded (its own lightness);
    ``count == 0`` yields an empty list.
    """

    if count < 0:
        raise ValueError(f"count must be non-negative, got {count!r}")
    if count == 0:
        return []

    h, s, l = rgb_to_hsl(*hex_to_rgb(base_color, dark=dark))  # noqa: E741
    if count == 1:
        return [rgb_to_hex(*hsl_to_rgb(h, s, l))]

    return [
        rgb_to_hex(*hsl_to_rgb(h, s, shade_lightness(i / (count - 1), dark=dark)))
        for i in range(count)
    ]


__all__ = [
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "shade_lightness",
    "generate_color_shades",
]

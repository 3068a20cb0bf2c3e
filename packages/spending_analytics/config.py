"""Runtime settings and theme palettes.

Settings are plain values read from the environment. Entry points load a local
``.env`` (``python-dotenv``) before calling :meth:`Settings.from_env`; library
callers may construct :class:`Settings` directly.

Environment variables
---------------------
- ``SPENDING_ANALYTICS_THEME``: ``light`` (default) or ``dark``.
- ``SPENDING_ANALYTICS_LANGUAGE``: ``eng`` (default) or ``vie``.
- ``SPENDING_ANALYTICS_LOG_LEVEL``: read by :mod:`.logging_setup`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

type Theme = Literal["light", "dark"]
type Language = Literal["eng", "vie"]

_THEMES: tuple[str, ...] = ("light", "dark")
_LANGUAGES: tuple[str, ...] = ("eng", "vie")

LEGEND_FONT_SIZE: int = 12


@dataclass(frozen=True, slots=True)
class ThemeColors:
    """Colors the engine needs from the theme provider."""

    chart_text: str
    income: str
    spent: str
    # Seed used when a caller-supplied shade seed is malformed.
    fallback_seed: str


LIGHT_THEME = ThemeColors(
    chart_text="#6B7280",
    income="#C1E59F",
    spent="#FA5C5C",
    fallback_seed="#2f95dc",
)

DARK_THEME = ThemeColors(
    chart_text="#9ca3af",
    income="#C1E59F",
    spent="#FA5C5C",
    fallback_seed="#ffffff",
)


def theme_colors(theme: Theme) -> ThemeColors:
    if theme == "dark":
        return DARK_THEME
    if theme == "light":
        return LIGHT_THEME
    raise ValueError(f"Unsupported theme: {theme!r}. Allowed: {list(_THEMES)}")


def _env_choice(name: str, default: str, allowed: tuple[str, ...]) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value not in allowed:
        raise ValueError(f"{name} must be one of {list(allowed)}, got {raw!r}")
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    theme: Theme = "light"
    language: Language = "eng"
    legend_font_size: int = LEGEND_FONT_SIZE

    def __post_init__(self) -> None:
        if self.theme not in _THEMES:
            raise ValueError(f"Unsupported theme: {self.theme!r}. Allowed: {list(_THEMES)}")
        if self.language not in _LANGUAGES:
            raise ValueError(
                f"Unsupported language: {self.language!r}. Allowed: {list(_LANGUAGES)}"
            )

    @property
    def is_dark(self) -> bool:
        return self.theme == "dark"

    @property
    def colors(self) -> ThemeColors:
        return theme_colors(self.theme)

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            theme=_env_choice("SPENDING_ANALYTICS_THEME", "light", _THEMES),  # type: ignore[arg-type]
            language=_env_choice("SPENDING_ANALYTICS_LANGUAGE", "eng", _LANGUAGES),  # type: ignore[arg-type]
        )


__all__ = [
    "Theme",
    "Language",
    "ThemeColors",
    "LIGHT_THEME",
    "DARK_THEME",
    "LEGEND_FONT_SIZE",
    "Settings",
    "theme_colors",
]

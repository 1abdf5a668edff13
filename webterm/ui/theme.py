from __future__ import annotations

import os
from typing import Literal

from rich.theme import Theme

ThemeName = Literal["dark", "light"]

_THEMES: dict[str, dict[str, str]] = {
    "dark": {
        "ansi.green": "bold bright_green",
        "ansi.gray": "dim white",
        "ansi.red": "bold bright_red",
        "entity.control": "bold cyan underline",
        "prompt": "bold bright_blue",
        "header": "bold white on grey23",
    },
    "light": {
        "ansi.green": "bold green4",
        "ansi.gray": "grey42",
        "ansi.red": "bold red3",
        "entity.control": "bold blue underline",
        "prompt": "bold dark_blue",
        "header": "bold black on grey85",
    },
}


def available_themes() -> list[ThemeName]:
    return ["dark", "light"]


def resolve_theme_name(theme: str | None = None) -> ThemeName:
    """Normalize a theme name, falling back to WEBTERM_THEME then dark."""
    name = (theme or os.getenv("WEBTERM_THEME", "dark")).lower()
    if name not in available_themes():
        name = "dark"
    return name  # type: ignore[return-value]


def build_theme(theme: str | None = None) -> Theme:
    return Theme(_THEMES[resolve_theme_name(theme)])


def toggle_theme(current: ThemeName) -> ThemeName:
    return "light" if current == "dark" else "dark"

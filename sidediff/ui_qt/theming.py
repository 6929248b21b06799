from __future__ import annotations
from typing import List
import logging

from PySide6.QtGui import QColor
from qfluentwidgets import Theme, setTheme, setThemeColor

from sidediff import config

log = logging.getLogger("theming")

THEMES = {
    "System": Theme.AUTO,
    "Light": Theme.LIGHT,
    "Dark": Theme.DARK,
}
AVAILABLE_THEMES: List[str] = list(THEMES)
ACCENT = "#2563EB"


def theme_pref(prefs: dict) -> str:
    """Saved theme name, or the default when missing or unknown."""
    name = prefs.get("theme_mode", config.DEFAULT_THEME)
    return name if name in THEMES else config.DEFAULT_THEME


def apply_theme_by_name(name: str) -> None:
    log.info("Applying theme '%s'", name)
    setTheme(THEMES.get(name, THEMES[config.DEFAULT_THEME]))
    setThemeColor(QColor(ACCENT))

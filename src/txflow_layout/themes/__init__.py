"""Theme definitions for layout previews."""

from txflow_layout.themes.dark import DARK_THEME
from txflow_layout.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]

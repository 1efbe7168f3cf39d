"""Colour themes for episodeguide terminal output.

The theme is chosen once per run from the ``theme`` config value. In
``auto`` mode the terminal background is guessed from the environment.

Usage:
    from episodeguide.ui import get_theme

    theme = get_theme()
    console.print(theme.error_text("Could not reach the catalog"))
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Literal

Background = Literal["light", "dark"]

THEME_ENV_VAR = "EPISODEGUIDE_THEME"

# Terminals known to default to a light background
LIGHT_TERMINALS = frozenset({"apple_terminal"})


class ThemeMode(str, Enum):
    """Values accepted by the ``theme`` setting."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


@dataclass(frozen=True)
class Theme:
    """Styles used when drawing pages and messages.

    Every value is a rich style string.
    """

    mode: Background

    error: str
    warning: str
    info: str
    muted: str  # status line, hints, attribution

    primary: str  # show titles, card headings
    card_border: str
    episode_code: str
    link: str
    option_selected: str

    def error_text(self, text: str) -> str:
        return f"[{self.error}]✗[/{self.error}] {text}"

    def warning_text(self, text: str) -> str:
        return f"[{self.warning}]⚠[/{self.warning}] {text}"

    def info_text(self, text: str) -> str:
        return f"[{self.info}]→[/{self.info}] {text}"

    def muted_text(self, text: str) -> str:
        return f"[{self.muted}]{text}[/{self.muted}]"


DARK_THEME = Theme(
    mode="dark",
    error="red",
    warning="yellow",
    info="cyan",
    muted="dim",
    primary="cyan",
    card_border="blue",
    episode_code="bold magenta",
    link="steel_blue1",
    option_selected="bold green",
)

LIGHT_THEME = Theme(
    mode="light",
    error="red",
    warning="dark_orange",
    info="dark_cyan",
    muted="grey50",
    primary="dark_cyan",
    card_border="blue",
    episode_code="bold dark_magenta",
    link="blue",
    option_selected="bold dark_green",
)

THEMES: dict[Background, Theme] = {"dark": DARK_THEME, "light": LIGHT_THEME}


def _background_from_colorfgbg(value: str) -> Background | None:
    # "fg;bg" or "fg;default;bg"; ANSI colours 7 and up are light
    background = value.rsplit(";", 1)[-1] if ";" in value else ""
    if not background.isdigit():
        return None
    return "light" if int(background) >= 7 else "dark"


def detect_terminal_theme() -> Background:
    """Guess the terminal background, falling back to dark.

    EPISODEGUIDE_THEME wins when set to "light" or "dark"; otherwise
    COLORFGBG and TERM_PROGRAM are consulted.
    """
    hint = os.environ.get(THEME_ENV_VAR, "").lower()
    if hint in THEMES:
        return hint  # type: ignore[return-value]

    background = _background_from_colorfgbg(os.environ.get("COLORFGBG", ""))
    if background is not None:
        return background

    if os.environ.get("TERM_PROGRAM", "").lower() in LIGHT_TERMINALS:
        return "light"
    return "dark"


_current_theme: Theme | None = None


def set_theme(mode: ThemeMode | str) -> Theme:
    """Choose the theme for the rest of the run.

    Args:
        mode: "light", "dark" or "auto"

    Returns:
        The active theme
    """
    global _current_theme

    mode = ThemeMode(mode.lower()) if isinstance(mode, str) else mode
    if mode == ThemeMode.AUTO:
        _current_theme = THEMES[detect_terminal_theme()]
    else:
        _current_theme = THEMES[mode.value]
    return _current_theme


def get_theme() -> Theme:
    """Return the active theme, detecting one if none was set."""
    if _current_theme is None:
        return set_theme(ThemeMode.AUTO)
    return _current_theme


def reset_theme() -> None:
    global _current_theme
    _current_theme = None

"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the scanner screens (banner, prompt, spinner,
result and error rows).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    banner_title: str
    banner_dim: str
    prompt_label: str
    prompt_text: str
    cursor: str
    spinner: str
    result_count: str
    result_name: str
    error: str
    hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    banner_title="\033[1;38;5;81m",
    banner_dim="\033[2;38;5;250m",
    prompt_label="\033[1m",
    prompt_text="\033[38;5;252m",
    cursor="\033[7m",
    spinner="\033[38;5;205m",
    result_count="\033[1;38;5;42m",
    result_name="\033[38;5;110m",
    error="\033[1;38;5;203m",
    hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    banner_title="\033[1;38;5;45m",
    banner_dim="\033[2;38;5;110m",
    prompt_label="\033[1;38;5;39m",
    prompt_text="\033[38;5;153m",
    cursor="\033[7m",
    spinner="\033[38;5;45m",
    result_count="\033[1;38;5;84m",
    result_name="\033[38;5;117m",
    error="\033[1;38;5;215m",
    hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    banner_title="",
    banner_dim="",
    prompt_label="",
    prompt_text="",
    cursor="\033[7m",
    spinner="",
    result_count="",
    result_name="",
    error="",
    hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]

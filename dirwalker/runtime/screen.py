"""Screen composition for each scanner phase.

``build_screen_lines`` is pure (state + theme + size in, styled rows out) so
views can be tested without a terminal; ``render_screen`` paints the rows.
"""

from __future__ import annotations

import shutil
import unicodedata

from .. import __version__
from ..ui_theme import UITheme
from .state import AppPhase, AppState
from .terminal import TerminalController

DOT_SPINNER_FRAMES: tuple[str, ...] = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")
BANNER_TITLE = "Strings!"
BANNER_GREETING = "👋 Please grab the location where you find the strings."
BIG_TITLE_WORD = "Strings"
_BIG_LETTER_GAP = " "
_BIG_LETTERS: dict[str, tuple[str, ...]] = {
    "S": (" ████", "█    ", " ███ ", "    █", "████ "),
    "T": ("█████", "  █  ", "  █  ", "  █  ", "  █  "),
    "R": ("████ ", "█   █", "████ ", "█  █ ", "█   █"),
    "I": ("███", " █ ", " █ ", " █ ", "███"),
    "N": ("█   █", "██  █", "█ █ █", "█  ██", "█   █"),
    "G": (" ████", "█    ", "█  ██", "█   █", " ████"),
}
PROMPT_LABEL = "Enter Directory Path :"
PROMPT_MARKER = "> "
SCANNING_MESSAGE = "Please wait while the 🧝 sort .."
DONE_HINTS: tuple[str, ...] = (
    "Please check the log file for more details.",
    "Press CTRL+C to exit.",
    "Press ESC to start again.",
)


def display_width(text: str) -> int:
    """Return terminal cell width of unstyled ``text``."""
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1
    return width


def clip(text: str, max_cols: int) -> str:
    """Trim unstyled ``text`` to at most ``max_cols`` cells."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    out: list[str] = []
    used = 0
    for ch in text:
        w = display_width(ch)
        if used + w > max_cols - 1:
            break
        out.append(ch)
        used += w
    return "".join(out) + "…"


def _styled(style: str, text: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def _centered(text: str, width: int, style: str, theme: UITheme) -> str:
    clipped = clip(text, width)
    pad = max(0, (width - display_width(clipped)) // 2)
    return " " * pad + _styled(style, clipped, theme)


def spinner_glyph(frame: int) -> str:
    return DOT_SPINNER_FRAMES[frame % len(DOT_SPINNER_FRAMES)]


def big_text(word: str) -> list[str]:
    """Render ``word`` in block letters, one string per row.

    Characters without a glyph are dropped.
    """
    glyphs = [_BIG_LETTERS[char] for char in word.upper() if char in _BIG_LETTERS]
    if not glyphs:
        return []
    return [_BIG_LETTER_GAP.join(glyph[row] for glyph in glyphs) for row in range(len(glyphs[0]))]


def banner_lines(width: int, theme: UITheme) -> list[str]:
    lines = [
        _centered(BANNER_TITLE, width, theme.banner_title, theme),
        _centered(__version__, width, theme.banner_dim, theme),
        "",
    ]
    art = big_text(BIG_TITLE_WORD)
    if art and display_width(art[0]) <= width:
        lines.extend(_centered(row, width, theme.banner_title, theme) for row in art)
        lines.append("")
    lines.extend([_centered(BANNER_GREETING, width, theme.banner_dim, theme), ""])
    return lines


def _prompt_line(state: AppState, width: int, theme: UITheme) -> str:
    text = state.prompt.text
    cursor = state.prompt.cursor
    visible_cols = max(1, width - display_width(PROMPT_MARKER) - 1)
    start = max(0, cursor - visible_cols + 1)
    before = text[start:cursor]
    at_cursor = text[cursor : cursor + 1] or " "
    after = clip(text[cursor + 1 :], max(0, visible_cols - display_width(before) - 1))
    return (
        PROMPT_MARKER
        + _styled(theme.prompt_text, before, theme)
        + f"{theme.cursor}{at_cursor}\033[0m"
        + _styled(theme.prompt_text, after, theme)
    )


def _done_lines(state: AppState, width: int, height: int, used: int, theme: UITheme) -> list[str]:
    result = state.result
    count = result.count if result is not None else 0
    lines = [_styled(theme.result_count, clip(f"{count} files found with translation content.", width), theme)]
    lines.extend(_styled(theme.hint, clip(hint, width), theme) for hint in DONE_HINTS)
    if result is None or not result.names:
        return lines

    room = height - used - len(lines) - 1
    if room <= 0:
        return lines
    lines.append("")
    names = list(result.names)
    if len(names) > room:
        shown = names[: max(0, room - 1)]
        hidden = len(names) - len(shown)
        lines.extend(_styled(theme.result_name, clip(f"  {name}", width), theme) for name in shown)
        lines.append(_styled(theme.hint, clip(f"  … and {hidden} more", width), theme))
    else:
        lines.extend(_styled(theme.result_name, clip(f"  {name}", width), theme) for name in names)
    return lines


def build_screen_lines(state: AppState, theme: UITheme, width: int, height: int) -> list[str]:
    """Return styled rows for the current phase, at most ``height`` of them."""
    width = max(1, width)
    lines = banner_lines(width, theme)

    if state.phase is AppPhase.AWAITING_INPUT:
        lines.append(_styled(theme.prompt_label, clip(PROMPT_LABEL, width), theme))
        lines.append(_prompt_line(state, width, theme))
    elif state.phase is AppPhase.SCANNING:
        glyph = _styled(theme.spinner, spinner_glyph(state.spinner_frame), theme)
        lines.append(f"{glyph} {clip(SCANNING_MESSAGE, max(0, width - 2))}")
        if state.scan_root is not None:
            lines.append(_styled(theme.hint, clip(f"  {state.scan_root}", width), theme))
    elif state.phase is AppPhase.DONE:
        lines.extend(_done_lines(state, width, height, len(lines), theme))
    else:
        message = f"An error was encountered: {state.error}"
        lines.append(_styled(theme.error, clip(message, width), theme))
        lines.append("")
        lines.append(_styled(theme.hint, clip("Press ESC to start again.", width), theme))
        lines.append(_styled(theme.hint, clip("Press CTRL+C to exit.", width), theme))

    return lines[: max(1, height)]


def render_screen(terminal: TerminalController, state: AppState, theme: UITheme) -> None:
    """Clear the screen and paint the current phase."""
    term = shutil.get_terminal_size((80, 24))
    rows = build_screen_lines(state, theme, term.columns, term.lines)
    terminal.write("\033[H\033[J" + "\r\n".join(rows))


__all__ = [
    "DOT_SPINNER_FRAMES",
    "display_width",
    "clip",
    "spinner_glyph",
    "big_text",
    "banner_lines",
    "build_screen_lines",
    "render_screen",
]

"""Contents and placement of the keyboard-shortcut help overlay."""

from __future__ import annotations

from dbglance.geometry import Rect

TITLE = " Help (? to close) "

_MAX_WIDTH = 50
_MAX_HEIGHT = 22
_KEY_COLUMN = 12

_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Normal Mode",
        (
            ("i", "Enter Insert mode"),
            ("Esc", "Exit to Normal mode"),
            ("y", "Copy last SQL to clipboard"),
            ("e", "Edit last SQL"),
            ("r", "Re-run last SQL"),
            ("j/k", "Scroll chat down/up"),
            ("g/G", "Go to top/bottom"),
            ("Ctrl+d/u", "Half page down/up"),
            ("?", "Toggle this help"),
        ),
    ),
    (
        "Insert Mode",
        (
            ("/", "Open command palette"),
            ("↑/↓", "Navigate input history"),
            ("Enter", "Submit input"),
            ("Ctrl+U", "Clear input"),
        ),
    ),
    (
        "General",
        (
            ("Tab", "Cycle focus"),
            ("Ctrl+C/Q", "Quit"),
        ),
    ),
)


def help_area(parent: Rect) -> Rect:
    """Centered area for the help overlay inside ``parent``."""
    width = min(_MAX_WIDTH, max(parent.width - 4, 0))
    height = min(_MAX_HEIGHT, max(parent.height - 4, 0))
    x = parent.x + (parent.width - width) // 2
    y = parent.y + (parent.height - height) // 2
    return Rect(x, y, width, height)


def help_lines() -> list[str]:
    """The overlay's text: section headings, shortcut lines and blank separators."""
    lines: list[str] = []
    for heading, shortcuts in _SECTIONS:
        if lines:
            lines.append("")
        lines.append(heading)
        lines.extend(f"  {key:<{_KEY_COLUMN}}{desc}" for key, desc in shortcuts)
    return lines
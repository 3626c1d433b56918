"""Layout of the confirmation dialog shown before running a modifying query."""

from __future__ import annotations

from dbglance.geometry import Rect, center_rect

_MAX_DIALOG_WIDTH = 80
_MAX_DIALOG_HEIGHT = 15
_WIDTH_FRACTION = 0.6
_MAX_SQL_LINES_COUNTED = 6
_HORIZONTAL_PADDING = 4
# Header (2) + spacing after SQL (2) + prompt (1) + borders (2).
_FIXED_ROWS = 2 + 2 + 1 + 2


def _wrap_line(line: str, max_width: int) -> list[str]:
    """Greedy word wrap of a single line to ``max_width`` characters."""
    wrapped: list[str] = []
    current = ""
    for word in line.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= max_width:
            current = f"{current} {word}"
        else:
            wrapped.append(current)
            current = word
    if current:
        wrapped.append(current)
    return wrapped


def wrap_sql(sql: str, max_width: int) -> list[str]:
    """Wrap SQL text into lines no wider than ``max_width`` where words allow.

    Existing line breaks are kept; lines that already fit are left untouched.
    A single word longer than the width stays on a line of its own.
    """
    sql = sql.strip()
    lines: list[str] = []
    for line in sql.split("\n"):
        line = line.removesuffix("\r")
        if len(line) <= max_width:
            lines.append(line)
        else:
            lines.extend(_wrap_line(line, max_width))
    if not lines:
        lines.append(sql)
    return lines


def dialog_height(sql: str, width: int) -> int:
    """Rows a dialog of the given width needs to show ``sql``."""
    content_width = max(width - _HORIZONTAL_PADDING, 0)
    sql_rows = min(len(wrap_sql(sql, content_width)), _MAX_SQL_LINES_COUNTED)
    return _FIXED_ROWS + sql_rows


def dialog_area(screen: Rect, sql: str) -> Rect:
    """Centered area of the confirmation dialog for ``sql`` on ``screen``."""
    width = int(min(screen.width * _WIDTH_FRACTION, float(_MAX_DIALOG_WIDTH)))
    height = min(dialog_height(sql, width), _MAX_DIALOG_HEIGHT)
    return center_rect(width, height, screen)
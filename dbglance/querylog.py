"""Formatting and placement helpers for the query log and its detail view."""

from __future__ import annotations

from datetime import timedelta

from dbglance.geometry import Rect

_ONE_MS = timedelta(milliseconds=1)


def _millis(elapsed: timedelta) -> int:
    return elapsed // _ONE_MS


def format_elapsed_short(elapsed: timedelta) -> str:
    """Compact duration for the sidebar: ``23ms`` or ``1.5s``."""
    millis = _millis(elapsed)
    if millis < 1000:
        return f"{millis}ms"
    return f"{elapsed.total_seconds():.1f}s"


def format_elapsed_detail(elapsed: timedelta) -> str:
    """Duration for the detail view: ``42ms`` or ``2.50s``."""
    millis = _millis(elapsed)
    if millis < 1000:
        return f"{millis}ms"
    return f"{elapsed.total_seconds():.2f}s"


def modal_area(area: Rect) -> Rect:
    """Centered area of the query detail modal within ``area``."""
    width = min(max(area.width * 80 // 100, 40), 80)
    height = min(max(area.height * 60 // 100, 10), 20)
    x = area.x + max(area.width - width, 0) // 2
    y = area.y + max(area.height - height, 0) // 2
    return Rect(x, y, width, height)
"""Screen rectangles and placement of overlays."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned area of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError("rectangle coordinates and sizes must be non-negative")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


def center_rect(width: int, height: int, area: Rect) -> Rect:
    """Center a rectangle of the given size inside ``area``, shrinking it to fit."""
    width = min(width, area.width)
    height = min(height, area.height)
    x = area.x + (area.width - width) // 2
    y = area.y + (area.height - height) // 2
    return Rect(x, y, width, height)


def toast_area(screen: Rect) -> Rect:
    """Area for a toast notification in the bottom-right corner of the screen."""
    width = min(40, max(screen.width - 4, 0))
    height = 3
    x = max(screen.width - (width + 2), 0)
    y = max(screen.height - (height + 1), 0)
    return Rect(x, y, width, height)
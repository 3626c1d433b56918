"""Animated progress indicators for queries and model requests."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

BRAILLE_FRAMES: tuple[str, ...] = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
DOT_FRAMES: tuple[str, ...] = ("", ".", "..", "...")
FRAME_DURATION_MS = 100


class SpinnerType(Enum):
    """Style of animation."""

    BRAILLE = "braille"
    DOTS = "dots"


@dataclass
class Spinner:
    """A labelled animation whose frame depends on time since it started."""

    spinner_type: SpinnerType
    label: str
    start_time: float = field(default_factory=time.monotonic)

    @classmethod
    def thinking(cls) -> Spinner:
        """Dots spinner shown while the model is working."""
        return cls(SpinnerType.DOTS, "Thinking")

    @classmethod
    def executing(cls) -> Spinner:
        """Braille spinner shown while a query runs."""
        return cls(SpinnerType.BRAILLE, "Executing")

    def frame(self) -> str:
        """The current animation frame."""
        elapsed_ms = int((time.monotonic() - self.start_time) * 1000)
        index = max(elapsed_ms, 0) // FRAME_DURATION_MS
        frames = BRAILLE_FRAMES if self.spinner_type is SpinnerType.BRAILLE else DOT_FRAMES
        return frames[index % len(frames)]

    def display(self) -> str:
        """The frame combined with the label."""
        if self.spinner_type is SpinnerType.BRAILLE:
            return f"{self.frame()} {self.label}"
        return f"{self.label}{self.frame()}"
"""Slash-command palette: the command list, fuzzy filtering and selection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from dbglance.geometry import Rect

_MAX_WIDTH = 50
_MAX_HEIGHT = 10


@dataclass(frozen=True)
class Command:
    """A slash command: its name (without the slash) and a short description."""

    name: str
    description: str


COMMANDS: tuple[Command, ...] = (
    Command("sql", "Execute raw SQL directly"),
    Command("schema", "Display database schema"),
    Command("clear", "Clear chat history and LLM context"),
    Command("vim", "Toggle vim-style navigation mode"),
    Command("help", "Show help message"),
    Command("quit", "Exit the application"),
    Command("exit", "Exit the application"),
)


def fuzzy_match(text: str, pattern: str) -> bool:
    """True if every character of ``pattern`` appears in ``text`` in order."""
    remaining = iter(text)
    return all(char in remaining for char in pattern)


def match_score(command: Command, filter_text: str) -> int:
    """Score how well a command matches the filter; 0 means no match."""
    needle = filter_text.lower()
    name = command.name.lower()
    description = command.description.lower()

    if name.startswith(needle):
        return 100
    if any(word.startswith(needle) for word in description.split()):
        return 50
    if needle in name:
        return 30
    if needle in description:
        return 20
    if fuzzy_match(name, needle):
        return 10
    return 0


def popup_area(input_area: Rect) -> Rect:
    """Area for the palette popup, placed just above the input bar."""
    width = min(input_area.width, _MAX_WIDTH)
    height = min(len(COMMANDS) + 2, _MAX_HEIGHT)
    x = input_area.x + 1
    y = max(input_area.y - height, 0)
    return Rect(x, y, width, height)


@dataclass
class CommandPaletteState:
    """Visibility, filter text and selection of the command palette."""

    visible: bool = False
    filter: str = ""
    selected: int = 0
    submit_on_close: bool = False
    _matches: list[Command] = field(default_factory=list, init=False, repr=False)

    def open(self) -> None:
        """Show the palette with an empty filter and every command listed."""
        self.visible = True
        self.filter = ""
        self.selected = 0
        self._refresh()

    def close(self) -> None:
        """Hide the palette; a pending submit request is left for the caller."""
        self.visible = False
        self.filter = ""
        self.selected = 0
        self._matches.clear()

    def close_and_submit(self) -> None:
        """Hide the palette and ask for the input to be submitted."""
        self.submit_on_close = True
        self.close()

    def take_submit_request(self) -> bool:
        """Return whether a submit was requested, clearing the request."""
        requested = self.submit_on_close
        self.submit_on_close = False
        return requested

    def set_filter(self, filter_text: str) -> None:
        """Replace the filter text, refresh matches and keep selection in range."""
        self.filter = filter_text
        self._refresh()
        if self._matches:
            self.selected = min(self.selected, len(self._matches) - 1)
        else:
            self.selected = 0

    def select_previous(self) -> None:
        """Move the selection up, stopping at the first entry."""
        if self._matches:
            self.selected = max(self.selected - 1, 0)

    def select_next(self) -> None:
        """Move the selection down, stopping at the last entry."""
        if self._matches:
            self.selected = min(self.selected + 1, len(self._matches) - 1)

    def selected_command(self) -> Command | None:
        """The command under the selection, or None when nothing matches."""
        if 0 <= self.selected < len(self._matches):
            return self._matches[self.selected]
        return None

    def filtered(self) -> Iterator[tuple[int, Command]]:
        """Yield (display index, command) for each matching command in order."""
        yield from enumerate(self._matches)

    def _refresh(self) -> None:
        if not self.filter:
            self._matches = list(COMMANDS)
            return
        scored = [(match_score(cmd, self.filter), cmd) for cmd in COMMANDS]
        ranked = sorted(
            (pair for pair in scored if pair[0] > 0),
            key=lambda pair: -pair[0],
        )
        self._matches = [cmd for _, cmd in ranked]
import pytest

from dbglance.command_palette import (
    COMMANDS,
    Command,
    CommandPaletteState,
    fuzzy_match,
    match_score,
    popup_area,
)
from dbglance.geometry import Rect


def _names(state):
    return [cmd.name for _, cmd in state.filtered()]


def _command(name):
    return next(cmd for cmd in COMMANDS if cmd.name == name)


def test_command_palette_open_close():
    state = CommandPaletteState()
    assert not state.visible

    state.open()
    assert state.visible
    assert state.filter == ""

    state.close()
    assert not state.visible


def test_filter_empty_shows_all():
    state = CommandPaletteState()
    state.open()
    assert len(list(state.filtered())) == len(COMMANDS)
    assert _names(state) == [cmd.name for cmd in COMMANDS]


def test_filter_prefix_match():
    state = CommandPaletteState()
    state.open()
    state.set_filter("sq")
    assert _names(state)
    assert state.selected_command().name == "sql"


def test_filter_is_case_insensitive():
    state = CommandPaletteState()
    state.open()
    state.set_filter("SQ")
    assert state.selected_command().name == "sql"


def test_filter_no_match():
    state = CommandPaletteState()
    state.open()
    state.set_filter("xyz")
    assert _names(state) == []
    assert state.selected_command() is None
    assert state.selected == 0


def test_navigation():
    state = CommandPaletteState()
    state.open()
    assert state.selected == 0

    state.select_next()
    assert state.selected == 1

    state.select_previous()
    assert state.selected == 0

    state.select_previous()
    assert state.selected == 0


def test_navigation_stops_at_last():
    state = CommandPaletteState()
    state.open()
    for _ in range(len(COMMANDS) + 3):
        state.select_next()
    assert state.selected == len(COMMANDS) - 1
    assert state.selected_command().name == "exit"


def test_set_filter_clamps_selection():
    state = CommandPaletteState()
    state.open()
    for _ in range(len(COMMANDS)):
        state.select_next()
    state.set_filter("exit")
    assert _names(state) == ["exit", "quit"]
    assert state.selected == 1


def test_fuzzy_match():
    assert fuzzy_match("schema", "scm")
    assert fuzzy_match("clear", "clr")
    assert not fuzzy_match("sql", "xyz")


def test_fuzzy_match_requires_order():
    assert not fuzzy_match("schema", "mcs")
    assert fuzzy_match("anything", "")


@pytest.mark.parametrize(
    "name, filter_text, expected",
    [
        ("sql", "sq", 100),
        ("schema", "data", 50),
        ("clear", "ear", 30),
        ("clear", "tory", 20),
        ("schema", "scm", 10),
        ("sql", "xyz", 0),
    ],
)
def test_match_score(name, filter_text, expected):
    assert match_score(_command(name), filter_text) == expected


def test_match_score_custom_command():
    command = Command("deploy", "Push changes live")
    assert match_score(command, "chan") == 50
    assert match_score(command, "zz") == 0


def test_ranking_by_score():
    state = CommandPaletteState()
    state.open()
    state.set_filter("quit")
    assert _names(state) == ["quit"]


def test_close_and_submit():
    state = CommandPaletteState()
    state.open()
    state.close_and_submit()
    assert not state.visible
    assert state.take_submit_request() is True
    assert state.take_submit_request() is False


def test_close_keeps_submit_request():
    state = CommandPaletteState()
    state.submit_on_close = True
    state.close()
    assert state.take_submit_request() is True


def test_close_clears_matches():
    state = CommandPaletteState()
    state.open()
    state.close()
    assert _names(state) == []
    assert state.selected_command() is None


def test_popup_area_above_input():
    area = popup_area(Rect(0, 20, 80, 3))
    assert area == Rect(1, 11, 50, 9)


def test_popup_area_narrow_and_top():
    area = popup_area(Rect(2, 4, 30, 3))
    assert area == Rect(3, 0, 30, 9)
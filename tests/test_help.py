from dbglance.geometry import Rect
from dbglance.help import help_area, help_lines


def test_help_area():
    parent = Rect(0, 0, 100, 50)
    area = help_area(parent)
    assert area.width <= 50
    assert area.height <= 22
    assert area.x > 0
    assert area.y > 0


def test_help_area_exact_values():
    assert help_area(Rect(0, 0, 100, 50)) == Rect(25, 14, 50, 22)


def test_help_area_small_parent():
    assert help_area(Rect(2, 3, 20, 10)) == Rect(4, 5, 16, 6)


def test_help_area_tiny_parent():
    area = help_area(Rect(0, 0, 3, 2))
    assert area.width == 0
    assert area.height == 0


def test_help_content():
    content = help_lines()
    assert content
    assert len(content) == 20


def test_help_sections_and_separators():
    content = help_lines()
    assert content[0] == "Normal Mode"
    assert content[10] == ""
    assert content[11] == "Insert Mode"
    assert content[16] == ""
    assert content[17] == "General"


def test_help_shortcut_formatting():
    content = help_lines()
    assert content[1] == "  i           Enter Insert mode"
    assert content[-1] == "  Ctrl+C/Q    Quit"
from datetime import timedelta

import pytest

from dbglance.geometry import Rect
from dbglance.querylog import format_elapsed_detail, format_elapsed_short, modal_area


def test_format_time_milliseconds_short():
    assert format_elapsed_short(timedelta(milliseconds=23)) == "23ms"


def test_format_time_seconds_short():
    assert format_elapsed_short(timedelta(milliseconds=1500)) == "1.5s"


def test_format_time_ms_detail():
    assert format_elapsed_detail(timedelta(milliseconds=42)) == "42ms"


def test_format_time_seconds_detail():
    assert format_elapsed_detail(timedelta(milliseconds=2500)) == "2.50s"


@pytest.mark.parametrize(
    "formatter", [format_elapsed_short, format_elapsed_detail]
)
def test_sub_millisecond_is_truncated(formatter):
    assert formatter(timedelta(microseconds=999)) == "0ms"


@pytest.mark.parametrize(
    "formatter", [format_elapsed_short, format_elapsed_detail]
)
def test_boundary_just_below_one_second(formatter):
    assert formatter(timedelta(milliseconds=999)) == "999ms"


def test_modal_area_calculation():
    area = Rect(0, 0, 100, 50)
    modal = modal_area(area)
    assert modal.x > 0
    assert modal.y > 0
    assert modal.x + modal.width <= area.width
    assert modal.y + modal.height <= area.height


def test_modal_area_respects_maximum_size():
    modal = modal_area(Rect(0, 0, 200, 100))
    assert modal.width == 80
    assert modal.height == 20


def test_modal_area_respects_minimum_size():
    modal = modal_area(Rect(0, 0, 30, 10))
    assert modal.width == 40
    assert modal.height == 10
    assert modal.x == 0
    assert modal.y == 0


def test_modal_area_offsets_by_parent_origin():
    plain = modal_area(Rect(0, 0, 100, 50))
    shifted = modal_area(Rect(5, 7, 100, 50))
    assert shifted.x == plain.x + 5
    assert shifted.y == plain.y + 7
    assert (shifted.width, shifted.height) == (plain.width, plain.height)
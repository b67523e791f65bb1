import pytest

from controls import direction_from_key, swipe_direction


@pytest.mark.parametrize("key, expected", [
    ("ArrowUp", "up"),
    ("ArrowDown", "down"),
    ("ArrowLeft", "left"),
    ("ArrowRight", "right"),
    ("Enter", None),
    ("w", None),
])
def test_direction_from_key(key, expected):
    assert direction_from_key(key) == expected


@pytest.mark.parametrize("start, end, expected", [
    ((100, 100), (40, 110), "left"),
    ((40, 100), (100, 90), "right"),
    ((100, 100), (95, 20), "up"),
    ((100, 20), (110, 100), "down"),
    # 水平和垂直位移相等时按垂直处理
    ((0, 0), (10, 10), "down"),
    ((10, 10), (0, 0), "up"),
])
def test_swipe_direction(start, end, expected):
    assert swipe_direction(start, end) == expected


def test_swipe_without_movement():
    assert swipe_direction((5, 5), (5, 5)) is None

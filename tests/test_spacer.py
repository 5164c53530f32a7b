from panekit.geometry import Position, Size
from panekit.layout.spacer import Spacer


def test_expands_both_ways_by_default():
    spacer = Spacer()
    assert spacer.expand_horizontal() is True
    assert spacer.expand_vertical() is True


def test_fixed_horizontal_does_not_expand_horizontally():
    spacer = Spacer(fix_horizontal=True)
    assert spacer.expand_horizontal() is False
    assert spacer.expand_vertical() is True


def test_fixed_vertical_does_not_expand_vertically():
    spacer = Spacer(fix_vertical=True)
    assert spacer.expand_vertical() is False
    assert spacer.expand_horizontal() is True


def test_min_size_is_zero_even_after_resize():
    spacer = Spacer()
    spacer.resize(Size(30, 40))
    assert spacer.min_size() == Size(0, 0)
    assert spacer.size == Size(30, 40)


def test_move_sets_position():
    spacer = Spacer()
    spacer.move(Position(7, 9))
    assert spacer.position == Position(7, 9)


def test_hide_and_show_toggle_visibility():
    spacer = Spacer()
    assert spacer.visible is True
    spacer.hide()
    assert spacer.visible is False
    spacer.show()
    assert spacer.visible is True
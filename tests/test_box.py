from panekit.geometry import CanvasObject, Position, Size
from panekit.layout.box import new_hbox_layout, new_vbox_layout
from panekit.layout.spacer import Spacer

PADDING = 4


def rect(min_size):
    return CanvasObject(min_size)


def lay_out_at_min(layout, objects):
    size = layout.min_size(objects)
    layout.layout(objects, size)
    return size


def test_hbox_simple():
    cell = Size(50, 50)
    obj1, obj2, obj3 = rect(cell), rect(cell), rect(cell)
    layout = new_hbox_layout()
    min_size = lay_out_at_min(layout, [obj1, obj2, obj3])
    assert min_size == Size(150 + PADDING * 2, 50)
    assert obj1.size == cell
    assert obj2.position == Position(50 + PADDING, 0)
    assert obj3.position == Position(100 + PADDING * 2, 0)


def test_hbox_hidden_item():
    cell = Size(50, 50)
    obj1, obj2, obj3 = rect(cell), rect(cell), rect(cell)
    obj2.hide()
    layout = new_hbox_layout()
    min_size = lay_out_at_min(layout, [obj1, obj2, obj3])
    assert min_size == Size(100 + PADDING, 50)
    assert obj1.size == cell
    assert obj3.position == Position(50 + PADDING, 0)


def test_hbox_wide():
    cell = Size(50, 100)
    obj1 = rect(cell)
    obj2 = rect(cell.subtract(Size(0, 25)))
    obj3 = rect(cell)
    objects = [obj1, obj2, obj3]
    layout = new_hbox_layout()
    layout.layout(objects, Size(308, 100))
    assert layout.min_size(objects) == Size(150 + PADDING * 2, 100)
    assert obj1.size.width == 50
    assert obj2.size.width == 50
    assert obj2.position == Position(50 + PADDING, 0)
    assert obj3.position == Position(100 + PADDING * 2, 0)


def test_hbox_tall():
    cell = Size(50, 100)
    obj1 = rect(cell)
    obj2 = rect(cell.subtract(Size(0, 25)))
    obj3 = rect(cell)
    layout = new_hbox_layout()
    min_size = lay_out_at_min(layout, [obj1, obj2, obj3])
    assert min_size == Size(150 + PADDING * 2, 100)
    assert obj1.size == cell
    assert obj2.size == cell
    assert obj2.position == Position(50 + PADDING, 0)
    assert obj3.position == Position(100 + PADDING * 2, 0)


def test_hbox_spacer():
    cell = Size(50, 100)
    obj1 = rect(cell)
    obj2 = rect(cell.subtract(Size(0, 25)))
    obj3 = rect(cell)
    objects = [Spacer(), obj1, obj2, obj3]
    layout = new_hbox_layout()
    layout.layout(objects, Size(300, 100))
    assert layout.min_size(objects) == Size(150 + PADDING * 2, 100)
    assert obj1.size.width == 50
    assert obj2.size.width == 50
    assert obj2.position == Position(200 - PADDING, 0)
    assert obj3.position == Position(250, 0)


def test_hbox_middle_spacer():
    cell = Size(50, 100)
    obj1 = rect(cell)
    obj2 = rect(cell.subtract(Size(0, 25)))
    obj3 = rect(cell)
    objects = [obj1, obj2, Spacer(), obj3]
    layout = new_hbox_layout()
    layout.layout(objects, Size(300, 100))
    assert layout.min_size(objects) == Size(150 + PADDING * 2, 100)
    assert obj1.size.width == 50
    assert obj2.size.width == 50
    assert obj2.position == Position(50 + PADDING, 0)
    assert obj3.position == Position(250, 0)


def test_new_hbox_layout_is_horizontal():
    assert new_hbox_layout().horizontal is True


def test_vbox_simple():
    cell = Size(50, 50)
    obj1, obj2, obj3 = rect(cell), rect(cell), rect(cell)
    layout = new_vbox_layout()
    min_size = lay_out_at_min(layout, [obj1, obj2, obj3])
    assert min_size == Size(50, 150 + PADDING * 2)
    assert obj1.size == cell
    assert obj2.position == Position(0, 50 + PADDING)
    assert obj3.position == Position(0, 100 + PADDING * 2)


def test_vbox_hidden_item():
    cell = Size(50, 50)
    obj1, obj2, obj3 = rect(cell), rect(cell), rect(cell)
    obj2.hide()
    layout = new_vbox_layout()
    min_size = lay_out_at_min(layout, [obj1, obj2, obj3])
    assert min_size == Size(50, 100 + PADDING)
    assert obj1.size == cell
    assert obj3.position == Position(0, 50 + PADDING)


def test_vbox_wide():
    cell = Size(100, 50)
    obj1 = rect(cell)
    obj2 = rect(cell.subtract(Size(25, 0)))
    obj3 = rect(cell)
    layout = new_vbox_layout()
    min_size = lay_out_at_min(layout, [obj1, obj2, obj3])
    assert min_size == Size(100, 150 + PADDING * 2)
    assert obj1.size == cell
    assert obj2.size == cell
    assert obj2.position == Position(0, 50 + PADDING)
    assert obj3.position == Position(0, 100 + PADDING * 2)


def test_vbox_tall():
    cell = Size(100, 50)
    obj1 = rect(cell)
    obj2 = rect(cell.subtract(Size(25, 0)))
    obj3 = rect(cell)
    objects = [obj1, obj2, obj3]
    layout = new_vbox_layout()
    layout.layout(objects, Size(100, 308))
    assert layout.min_size(objects) == Size(100, 150 + PADDING * 2)
    assert obj1.size.height == 50
    assert obj2.size.height == 50
    assert obj2.position == Position(0, 50 + PADDING)
    assert obj3.position == Position(0, 100 + PADDING * 2)


def test_vbox_spacer():
    cell = Size(100, 50)
    obj1 = rect(cell)
    obj2 = rect(cell.subtract(Size(25, 0)))
    obj3 = rect(cell)
    objects = [Spacer(), obj1, obj2, obj3]
    layout = new_vbox_layout()
    layout.layout(objects, Size(100, 300))
    assert layout.min_size(objects) == Size(100, 150 + PADDING * 2)
    assert obj1.size.height == 50
    assert obj2.size.height == 50
    assert obj2.position == Position(0, 200 - PADDING)
    assert obj3.position == Position(0, 250)


def test_vbox_middle_spacer():
    cell = Size(100, 50)
    obj1 = rect(cell)
    obj2 = rect(cell.subtract(Size(25, 0)))
    obj3 = rect(cell)
    objects = [obj1, obj2, Spacer(), obj3]
    layout = new_vbox_layout()
    layout.layout(objects, Size(100, 300))
    assert layout.min_size(objects) == Size(100, 150 + PADDING * 2)
    assert obj1.size.height == 50
    assert obj2.size.height == 50
    assert obj2.position == Position(0, 50 + PADDING)
    assert obj3.position == Position(0, 250)


def test_new_vbox_layout_is_vertical():
    assert new_vbox_layout().horizontal is False


def test_vbox_fixed_vertical_spacer_is_a_plain_object():
    obj = rect(Size(50, 50))
    layout = new_vbox_layout()
    layout.layout([Spacer(fix_vertical=True), obj], Size(100, 300))
    assert obj.position == Position(0, PADDING)
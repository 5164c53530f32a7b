# panekit

Building blocks a widget toolkit needs to arrange things on screen. Pure
Python, no runtime dependencies.

## What is in it

- `panekit.geometry`: the frozen dataclasses `Size` (`width`, `height`) and
  `Position` (`x`, `y`) with `add`, `subtract` and, for sizes, `union`. It
  also holds `CanvasObject`, a base class with a minimum size, a current size
  and position, and `show()`/`hide()`, and `Layout`, the abstract base every
  layout implements.
- `panekit.layout`: the layouts.
  - `box.BoxLayout`, made with `new_hbox_layout()` or `new_vbox_layout()`
  - `border.BorderLayout(top, bottom, left, right)`
  - `center.CenterLayout`
  - `maximise.MaxLayout`
  - `fixedgrid.FixedGridLayout(cell_size)`
  - `form.FormLayout`
  - `grid.GridLayout(cols)`
  - `spacer.Spacer`, which takes up spare room in a box layout
- `panekit.tree`: `walk_visible_object_tree` and `walk_complete_object_tree`.
- `panekit.focus`: `FocusManager`, which moves keyboard focus through a canvas.
- `panekit.menu`: `MenuItem`, `Menu`, `MainMenu`, `new_menu` and `new_main_menu`.
- `panekit.resource`: `StaticResource`, a named block of bytes.
- `panekit.fill`: `ImageFill` and `rect_inner_coords`.
- `panekit.keys`: `KeyName`, the names of keys.
- `panekit.log`: `log_error` and `log_hint`.
- `panekit.modvendor`: the `panekit-modvendor` command.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Laying out children

Every layout has two methods:

- `layout(objects, size)` moves and resizes the objects to fit in `size`.
- `min_size(objects)` returns the smallest `Size` that holds them.

Hidden objects are left out. The padding between cells is 4 units.

```python
from panekit.geometry import CanvasObject, Size
from panekit.layout.box import new_hbox_layout
from panekit.layout.spacer import Spacer

buttons = [CanvasObject(Size(50, 50)), CanvasObject(Size(50, 50))]
row = new_hbox_layout()
children = [Spacer(), *buttons]
print(row.min_size(children))          # Size(width=104, height=50)
row.layout(children, Size(300, 100))   # the buttons are pushed to the right
```

`FormLayout` takes objects in label and content pairs and raises
`ValueError` when their number is odd. `FixedGridLayout.min_size` reports the
number of rows found by the last call to `layout`.

## Walking an object tree

An object counts as a container when it has an `objects` sequence. Each walk
calls `before_children(obj, pos, clip_pos, clip_size)` with the absolute
position, and then `after_children(obj, parent)`. When `before_children`
returns true, the walk stops and the walk function returns `True`. An object
with a true `clips_children` attribute narrows the clip area to itself, as a
scroll container does.

```python
from panekit.tree import walk_visible_object_tree

seen = []
walk_visible_object_tree(root, lambda o, pos, cp, cs: seen.append(o) or False, None)
```

## Focus

`FocusManager(canvas)` needs a canvas with a `content` attribute and a
`focus(obj)` method. An object is focusable when it has `focus_gained()` and
`focus_lost()`. `next_in_chain` and `previous_in_chain` wrap around at the
ends and skip hidden objects and objects whose `disabled()` returns true.
Moving forward also skips objects with a true `read_only` attribute.
`focus_next` and `focus_previous` pass their result to `canvas.focus`.

## Menus

```python
from panekit.menu import MenuItem, new_main_menu, new_menu

file_menu = new_menu("File", MenuItem("Open", lambda: None), MenuItem("Quit"))
main = new_main_menu(file_menu)
```

## Resources

```python
from panekit.resource import StaticResource

icon = StaticResource("dot.png", b"\x89PNG")
print(icon.to_source())
```

`to_source()` returns Python source that recreates the resource.

## Fitting images

`rect_inner_coords(size, pos, fill, aspect)` returns the size and position an
image takes inside an area. With `ImageFill.STRETCH`, the image fills the
whole area. `ImageFill.CONTAIN` and `ImageFill.ORIGINAL` keep the aspect
ratio and centre the image.

## Logging

`log_error(reason, err)` logs to the `panekit` logger. It logs the reason,
then the cause if `err` is not `None`, then the file and line it was called
from. `log_hint(reason)` logs only when the `PANEKIT_HINTS` environment
variable is set to something other than empty, `0`, `false` or `no`.

## Vendoring helper

```
panekit-modvendor
```

Run it from the root of a module checkout, where a `go.mod` file is. It
refreshes the `vendor` directory with the module tool. It then reads
`vendor/modules.txt` to find the cached GLFW module and copies its C sources
into the vendor tree. It exits with status 1 on any failure. The parts can
be used on their own: `cache_mod_path`, `recursive_copy` and `copy_file`.

## What it does not do

panekit arranges and walks objects. It does not draw them. It has no
renderer, no windows, no event loop, no widgets and no clipboard. Mouse and
keyboard events are not passed to objects either: a program that uses
panekit supplies those parts itself.
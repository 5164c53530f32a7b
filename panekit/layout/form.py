"""A two column layout of labels and their content."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from panekit.geometry import CanvasObject, Layout, Position, Size

_PADDING = 4

_Row = Tuple[CanvasObject, CanvasObject]
_Cells = Tuple[Size, Size]


def _visible_rows(objects: Sequence[CanvasObject]) -> List[_Row]:
    if len(objects) % 2:
        raise ValueError("a form layout needs objects in label and content pairs")
    pairs = zip(objects[0::2], objects[1::2])
    return [(label, content) for label, content in pairs if label.visible or content.visible]


def _cell_sizes(rows: Sequence[_Row], container_width: int) -> List[_Cells]:
    """Size every cell of the table.

    Each row is as tall as its taller cell. The label column is as wide as
    the widest label; the content column as wide as the widest content or
    the rest of the container, whichever is larger.
    """
    label_width = content_width = 0
    heights = []
    for label, content in rows:
        label_min = label.min_size()
        content_min = content.min_size()
        label_width = max(label_width, label_min.width)
        content_width = max(content_width, content_min.width)
        heights.append(max(label_min.height, content_min.height))

    content_width = max(content_width, container_width - label_width - _PADDING)
    return [(Size(label_width, height), Size(content_width, height)) for height in heights]


class FormLayout(Layout):
    """A two column grid where each row holds a label and its content."""

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Pack the label and content pairs into table rows."""
        rows = _visible_rows(objects)
        y = 0
        for (label, content), (label_cell, content_cell) in zip(rows, _cell_sizes(rows, size.width)):
            label.move(Position(0, y))
            label.resize(Size(label_cell.width, label_cell.height))
            content.move(Position(_PADDING + label_cell.width, y))
            content.resize(Size(content_cell.width, label_cell.height))
            y += label_cell.height + _PADDING

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """The widest label and content side by side, with all rows stacked."""
        cells = _cell_sizes(_visible_rows(objects), 0)
        if not cells:
            return Size(0, 0)

        label_cell, content_cell = cells[0]
        width = label_cell.width + content_cell.width + _PADDING
        height = sum(label.height for label, _ in cells) + _PADDING * (len(cells) - 1)
        return Size(width, height)
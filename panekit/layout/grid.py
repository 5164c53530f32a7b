"""A grid of equal cells with a fixed number of columns."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from panekit.geometry import CanvasObject, Layout, Position, Size

_PADDING = 4


def _round_half_away(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def _leading(size: float, offset: int) -> int:
    """The top or left edge of the cell at offset, for an ideal cell size."""
    return _round_half_away((size + _PADDING) * offset)


def _trailing(size: float, offset: int) -> int:
    """The bottom or right edge of the cell at offset, for an ideal cell size."""
    return _leading(size, offset + 1) - _PADDING


@dataclass
class GridLayout(Layout):
    """Packs objects into a table with the given number of columns."""

    cols: int

    def _count_rows(self, objects: Sequence[CanvasObject]) -> int:
        count = sum(1 for child in objects if child.visible)
        return math.ceil(count / self.cols)

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Share the space equally among cells and fill them in row order."""
        rows = self._count_rows(objects)
        if rows == 0:
            return

        cell_width = (size.width - (self.cols - 1) * _PADDING) / self.cols
        cell_height = (size.height - (rows - 1) * _PADDING) / rows

        visible = (child for child in objects if child.visible)
        for index, child in enumerate(visible):
            row, col = divmod(index, self.cols)
            x1 = _leading(cell_width, col)
            y1 = _leading(cell_height, row)
            x2 = _trailing(cell_width, col)
            y2 = _trailing(cell_height, row)

            child.move(Position(x1, y1))
            child.resize(Size(x2 - x1, y2 - y1))

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """The largest child times the columns and rows, plus padding."""
        rows = self._count_rows(objects)
        largest = Size(0, 0)
        for child in objects:
            if child.visible:
                largest = largest.union(child.min_size())

        content = Size(largest.width * self.cols, largest.height * rows)
        return content.add(Size(_PADDING * (self.cols - 1), _PADDING * (rows - 1)))
"""A grid of fixed-size cells that wraps to new rows as needed."""

from __future__ import annotations

import math
from typing import Sequence

from panekit.geometry import CanvasObject, Layout, Position, Size

_PADDING = 4


class FixedGridLayout(Layout):
    """Lays objects out in rows of equal cells, wrapping when a row is full.

    The number of columns and rows is recalculated on every layout.
    """

    def __init__(self, cell_size: Size) -> None:
        self.cell_size = cell_size
        self.col_count = 1
        self.row_count = 1

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Place the visible objects in cells, left to right then down."""
        self.col_count = 1
        self.row_count = 1

        if size.width > self.cell_size.width:
            self.col_count = int(
                math.floor(size.width / (self.cell_size.width + _PADDING))
            )

        x = y = 0
        for index, child in enumerate(objects):
            if not child.visible:
                continue

            child.move(Position(x, y))
            child.resize(self.cell_size)

            if (index + 1) % self.col_count == 0:
                x = 0
                y += self.cell_size.height + _PADDING
                self.row_count += 1
            else:
                x += self.cell_size.width + _PADDING

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """One cell wide and as tall as the rows of the last layout."""
        return Size(
            self.cell_size.width,
            self.cell_size.height * self.row_count + (self.row_count - 1) * _PADDING,
        )
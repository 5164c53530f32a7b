"""A layout stretching every object to the full space."""

from __future__ import annotations

from typing import Sequence

from panekit.geometry import CanvasObject, Layout, Size


class MaxLayout(Layout):
    """Sets every object to the full size given."""

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Resize every object to size."""
        for child in objects:
            child.resize(size)

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """The union of the minimum sizes of the visible objects."""
        min_size = Size(0, 0)
        for child in objects:
            if child.visible:
                min_size = min_size.union(child.min_size())
        return min_size
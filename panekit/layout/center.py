"""A layout centring objects at their minimum size."""

from __future__ import annotations

from typing import Sequence

from panekit.geometry import CanvasObject, Layout, Position, Size


class CenterLayout(Layout):
    """Sets every object to its minimum size, centred in the space."""

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Resize each object to its minimum and centre it."""
        for child in objects:
            child_min = child.min_size()
            child.resize(child_min)
            child.move(
                Position(
                    int((size.width - child_min.width) / 2),
                    int((size.height - child_min.height) / 2),
                )
            )

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """The union of the minimum sizes of the visible objects."""
        min_size = Size(0, 0)
        for child in objects:
            if child.visible:
                min_size = min_size.union(child.min_size())
        return min_size
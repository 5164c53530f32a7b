"""Horizontal and vertical box layouts with spacer support."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from panekit.geometry import CanvasObject, Layout, Position, Size

_PADDING = 4


@runtime_checkable
class _SpacerObject(Protocol):
    def expand_vertical(self) -> bool: ...

    def expand_horizontal(self) -> bool: ...


@dataclass
class BoxLayout(Layout):
    """Stacks objects in a single row or column.

    Objects get their minimum size along the stacking axis and the full
    size across it; spacers share any remaining space.
    """

    horizontal: bool = False

    def _is_spacer(self, obj: CanvasObject) -> bool:
        # invisible spacers don't impact layout
        if not obj.visible or not isinstance(obj, _SpacerObject):
            return False
        if self.horizontal:
            return obj.expand_horizontal()
        return obj.expand_vertical()

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Pack the visible objects along the axis, spreading spacers."""
        visible = [child for child in objects if child.visible]
        spacers = [child for child in visible if self._is_spacer(child)]
        total = sum(
            child.min_size().width if self.horizontal else child.min_size().height
            for child in visible
            if not self._is_spacer(child)
        )

        padding_total = _PADDING * (len(objects) - len(spacers) - 1)
        available = size.width if self.horizontal else size.height
        extra = available - total - padding_total
        extra_cell = int(extra / len(spacers)) if spacers else 0

        x = y = 0
        for child in visible:
            child_min = child.min_size()
            if self._is_spacer(child):
                if self.horizontal:
                    x += extra_cell
                else:
                    y += extra_cell
                continue

            child.move(Position(x, y))
            if self.horizontal:
                x += _PADDING + child_min.width
                child.resize(Size(child_min.width, size.height))
            else:
                y += _PADDING + child_min.height
                child.resize(Size(size.width, child_min.height))

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Sum of the children along the axis with padding between them,
        and the largest child across it."""
        width = height = 0
        added = False
        for child in objects:
            if not child.visible or self._is_spacer(child):
                continue
            child_min = child.min_size()
            if self.horizontal:
                width += child_min.width
                height = max(child_min.height, height)
                if added:
                    width += _PADDING
            else:
                height += child_min.height
                width = max(child_min.width, width)
                if added:
                    height += _PADDING
            added = True
        return Size(width, height)


def new_hbox_layout() -> BoxLayout:
    """Return a layout stacking objects left to right."""
    return BoxLayout(horizontal=True)


def new_vbox_layout() -> BoxLayout:
    """Return a layout stacking objects top to bottom."""
    return BoxLayout(horizontal=False)
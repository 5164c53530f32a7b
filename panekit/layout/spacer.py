"""An invisible object that takes up spare space in box layouts."""

from __future__ import annotations

from panekit.geometry import CanvasObject, Position, Size


class Spacer(CanvasObject):
    """A zero-sized object that expands to fill free space in a box layout.

    A spacer expands along both axes unless fixed on one of them.
    """

    def __init__(self, fix_horizontal: bool = False, fix_vertical: bool = False) -> None:
        super().__init__()
        self.fix_horizontal = fix_horizontal
        self.fix_vertical = fix_vertical

    def expand_vertical(self) -> bool:
        """Whether this spacer expands on the vertical axis."""
        return not self.fix_vertical

    def expand_horizontal(self) -> bool:
        """Whether this spacer expands on the horizontal axis."""
        return not self.fix_horizontal

    def min_size(self) -> Size:
        """A spacer can shrink to nothing, so its minimum is always zero."""
        return Size(0, 0)

    def resize(self, size: Size) -> None:
        """Set the size of the spacer; called by the layout."""
        self.size = size

    def move(self, pos: Position) -> None:
        """Set the position of the spacer; called by the layout."""
        self.position = pos

    def show(self) -> None:
        """Include the spacer in layout calculations."""
        self.hidden = False

    def hide(self) -> None:
        """Leave the spacer out of layout calculations."""
        self.hidden = True
"""Sizes, positions, the base canvas object and the layout interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class Size:
    """A width and height in canvas units."""

    width: int = 0
    height: int = 0

    def add(self, other: Size) -> Size:
        """Return the component-wise sum of two sizes."""
        return Size(self.width + other.width, self.height + other.height)

    def subtract(self, other: Size) -> Size:
        """Return the component-wise difference of two sizes."""
        return Size(self.width - other.width, self.height - other.height)

    def union(self, other: Size) -> Size:
        """Return the smallest size that contains both sizes."""
        return Size(max(self.width, other.width), max(self.height, other.height))


@dataclass(frozen=True)
class Position:
    """A point relative to the top left of a parent."""

    x: int = 0
    y: int = 0

    def add(self, other: Position) -> Position:
        """Return the component-wise sum of two positions."""
        return Position(self.x + other.x, self.y + other.y)

    def subtract(self, other: Position) -> Position:
        """Return the component-wise difference of two positions."""
        return Position(self.x - other.x, self.y - other.y)


class CanvasObject:
    """An object that occupies an area of a canvas.

    Objects compare by identity, so the same object can be looked up in a
    layout or a tree walk regardless of its current geometry.
    """

    def __init__(self, minimum: Optional[Size] = None) -> None:
        self.minimum = minimum if minimum is not None else Size()
        self.size = Size()
        self.position = Position()
        self.hidden = False

    @property
    def visible(self) -> bool:
        """Whether the object takes part in drawing and layout."""
        return not self.hidden

    def min_size(self) -> Size:
        """Return the smallest size this object can be drawn at."""
        return self.minimum

    def resize(self, size: Size) -> None:
        """Set the current size of the object."""
        self.size = size

    def move(self, pos: Position) -> None:
        """Set the position of the object relative to its parent."""
        self.position = pos

    def show(self) -> None:
        """Make the object visible."""
        self.hidden = False

    def hide(self) -> None:
        """Hide the object from drawing and layout."""
        self.hidden = True


class Layout(ABC):
    """Arranges canvas objects within a given size."""

    @abstractmethod
    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Resize and move the objects to fit within size."""

    @abstractmethod
    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return the smallest size that fits the objects with this layout."""
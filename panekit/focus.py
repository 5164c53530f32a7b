"""Moving keyboard focus between the focusable objects of a canvas."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from panekit.geometry import CanvasObject, Position, Size
from panekit.tree import walk_visible_object_tree


@runtime_checkable
class _Focusable(Protocol):
    def focus_gained(self) -> None: ...

    def focus_lost(self) -> None: ...


@runtime_checkable
class _Disableable(Protocol):
    def disabled(self) -> bool: ...


class _Canvas(Protocol):
    content: CanvasObject

    def focus(self, obj: Optional[CanvasObject]) -> None: ...


def _is_disabled(obj: CanvasObject) -> bool:
    return isinstance(obj, _Disableable) and obj.disabled()


class FocusManager:
    """Finds the next or previous focusable object in a canvas.

    Focusable objects provide focus_gained and focus_lost. Objects whose
    disabled() is true never take focus; nor does an object with a true
    read_only attribute when moving forward.
    """

    def __init__(self, canvas: _Canvas) -> None:
        self.canvas = canvas

    def next_in_chain(self, current: Optional[CanvasObject]) -> Optional[CanvasObject]:
        """Return the focusable object after current, wrapping to the first."""
        first: Optional[CanvasObject] = None
        following: Optional[CanvasObject] = None
        # with no starting point, behave as if it was already matched
        found = current is None

        def visit(obj: CanvasObject, _pos: Position, _clip_pos: Position, _clip_size: Size) -> bool:
            nonlocal first, following, found
            if _is_disabled(obj) or getattr(obj, "read_only", False):
                return False
            if not isinstance(obj, _Focusable):
                return False
            if found:
                following = obj
                return True
            if obj is current:
                found = True
            if first is None:
                first = obj
            return False

        walk_visible_object_tree(self.canvas.content, visit, None)
        return following if following is not None else first

    def previous_in_chain(self, current: Optional[CanvasObject]) -> Optional[CanvasObject]:
        """Return the focusable object before current, wrapping to the last."""
        last: Optional[CanvasObject] = None
        previous: Optional[CanvasObject] = None
        found = False

        def visit(obj: CanvasObject, _pos: Position, _clip_pos: Position, _clip_size: Size) -> bool:
            nonlocal last, previous, found
            if _is_disabled(obj) or not isinstance(obj, _Focusable):
                return False
            if current is not None and obj is current:
                found = True
            last = obj
            if not found:
                previous = obj
            return False

        walk_visible_object_tree(self.canvas.content, visit, None)
        return previous if previous is not None else last

    def focus_next(self, current: Optional[CanvasObject]) -> None:
        """Focus the object after current, or the first one if current is None."""
        self.canvas.focus(self.next_in_chain(current))

    def focus_previous(self, current: Optional[CanvasObject]) -> None:
        """Focus the object before current, or the last one if current is None."""
        self.canvas.focus(self.previous_in_chain(current))
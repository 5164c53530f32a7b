"""Depth-first walks over a tree of canvas objects.

An object has children when it carries an ``objects`` sequence. An object
whose ``clips_children`` attribute is true, such as a scroll container,
narrows the clip area passed on to itself and its descendants.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from panekit.geometry import CanvasObject, Position, Size

BeforeChildren = Callable[[CanvasObject, Position, Position, Size], bool]
AfterChildren = Callable[[CanvasObject, Optional[CanvasObject]], None]

_MAX_CLIP = 2**31 - 1


def _children(obj: CanvasObject) -> Sequence[CanvasObject]:
    return getattr(obj, "objects", None) or ()


def _walk(
    obj: CanvasObject,
    parent: Optional[CanvasObject],
    offset: Position,
    clip_pos: Position,
    clip_size: Size,
    before_children: Optional[BeforeChildren],
    after_children: Optional[AfterChildren],
    require_visible: bool,
) -> bool:
    if require_visible and not obj.visible:
        return False
    pos = obj.position.add(offset)

    if getattr(obj, "clips_children", False):
        clip_pos = pos
        clip_size = obj.size

    if before_children is not None and before_children(obj, pos, clip_pos, clip_size):
        return True

    cancelled = any(
        _walk(child, obj, pos, clip_pos, clip_size, before_children, after_children, require_visible)
        for child in _children(obj)
    )

    if after_children is not None:
        after_children(obj, parent)
    return cancelled


def _start(
    obj: CanvasObject,
    before_children: Optional[BeforeChildren],
    after_children: Optional[AfterChildren],
    require_visible: bool,
) -> bool:
    clip_size = Size(_MAX_CLIP, _MAX_CLIP)
    return _walk(
        obj, None, Position(0, 0), Position(0, 0), clip_size,
        before_children, after_children, require_visible,
    )


def walk_visible_object_tree(
    obj: CanvasObject,
    before_children: Optional[BeforeChildren],
    after_children: Optional[AfterChildren],
) -> bool:
    """Walk the visible objects under obj, including obj itself.

    before_children gets each object with its absolute position and the
    current clip position and size; returning true stops the walk. The
    object where the walk stopped does not get after_children, but its
    ancestors do. after_children gets each object and its parent. Returns
    whether the walk was stopped.
    """
    return _start(obj, before_children, after_children, True)


def walk_complete_object_tree(
    obj: CanvasObject,
    before_children: Optional[BeforeChildren],
    after_children: Optional[AfterChildren],
) -> bool:
    """Walk every object under obj whether visible or not.

    The callbacks behave as in walk_visible_object_tree.
    """
    return _start(obj, before_children, after_children, False)
"""How an image fills the area it is drawn in."""

from __future__ import annotations

import math
from enum import Enum
from typing import Tuple

from panekit.geometry import Position, Size


class ImageFill(Enum):
    """The ways an image can be fitted into its area."""

    STRETCH = "stretch"
    CONTAIN = "contain"
    ORIGINAL = "original"


def _view_aspect(size: Size) -> float:
    if size.height == 0:
        if size.width == 0:
            return math.nan
        return math.copysign(math.inf, size.width)
    return size.width / size.height


def rect_inner_coords(
    size: Size, pos: Position, fill: ImageFill, aspect: float
) -> Tuple[Size, Position]:
    """Return the size and position an image occupies within an area.

    Stretched images take the whole area. Contained and original-size
    images keep their aspect ratio and are centred, leaving bands on two
    sides where the area's ratio differs from the image's.
    """
    if fill not in (ImageFill.CONTAIN, ImageFill.ORIGINAL):
        return size, pos

    view_aspect = _view_aspect(size)
    new_width, new_height = size.width, size.height
    width_pad = height_pad = 0
    if view_aspect > aspect:
        new_width = int(size.height * aspect)
        width_pad = int((size.width - new_width) / 2)
    elif view_aspect < aspect:
        new_height = int(size.width / aspect)
        height_pad = int((size.height - new_height) / 2)

    return Size(new_width, new_height), Position(pos.x + width_pad, pos.y + height_pad)
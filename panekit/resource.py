"""Named binary resources that can be bundled into source code."""

from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class StaticResource:
    """A named block of bytes, such as an image or a font."""

    name: str
    content: bytes

    def to_source(self) -> str:
        """Return Python source that recreates this resource."""
        data = ", ".join(str(b) for b in self.content)
        return (
            "StaticResource(\n"
            f"    name={json.dumps(self.name)},\n"
            "    content=bytes([\n"
            f"        {data}]))"
        )
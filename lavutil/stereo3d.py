"""Description of how two views are packed in one stereoscopic video frame."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

FLAG_INVERT = 1 << 0


class Stereo3DType(IntEnum):
    """How the left and right views are packed within the video."""

    TWO_D = 0
    SIDEBYSIDE = 1
    TOPBOTTOM = 2
    FRAMESEQUENCE = 3
    CHECKERBOARD = 4
    SIDEBYSIDE_QUINCUNX = 5
    LINES = 6
    COLUMNS = 7


@dataclass
class Stereo3D:
    """Stereo packing type plus extra flags such as :data:`FLAG_INVERT`."""

    type: Stereo3DType = Stereo3DType.TWO_D
    flags: int = 0

    def __post_init__(self) -> None:
        self.type = Stereo3DType(self.type)
        if not isinstance(self.flags, int):
            raise TypeError("flags must be an integer")

    def is_inverted(self) -> bool:
        """Return True if right/bottom holds the left view."""
        return bool(self.flags & FLAG_INVERT)
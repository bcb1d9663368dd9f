"""Colour description enumerations: primaries, transfer, space, range, siting."""

from __future__ import annotations

from enum import IntEnum


class ColorPrimaries(IntEnum):
    """Chromaticity coordinates of the source primaries."""

    RESERVED0 = 0
    BT709 = 1
    UNSPECIFIED = 2
    RESERVED = 3
    BT470M = 4
    BT470BG = 5
    SMPTE170M = 6
    SMPTE240M = 7
    FILM = 8
    BT2020 = 9
    NB = 10


class ColorTransferCharacteristic(IntEnum):
    """Colour transfer characteristic."""

    RESERVED0 = 0
    BT709 = 1
    UNSPECIFIED = 2
    RESERVED = 3
    GAMMA22 = 4
    GAMMA28 = 5
    SMPTE170M = 6
    SMPTE240M = 7
    LINEAR = 8
    LOG = 9
    LOG_SQRT = 10
    IEC61966_2_4 = 11
    BT1361_ECG = 12
    IEC61966_2_1 = 13
    BT2020_10 = 14
    BT2020_12 = 15
    NB = 16


class ColorSpace(IntEnum):
    """YUV colour space type; ``YCGCO`` is an alias of ``YCOCG``."""

    RGB = 0
    BT709 = 1
    UNSPECIFIED = 2
    RESERVED = 3
    FCC = 4
    BT470BG = 5
    SMPTE170M = 6
    SMPTE240M = 7
    YCOCG = 8
    YCGCO = 8
    BT2020_NCL = 9
    BT2020_CL = 10
    NB = 11


class ColorRange(IntEnum):
    """MPEG (limited) versus JPEG (full) YUV range."""

    UNSPECIFIED = 0
    MPEG = 1
    JPEG = 2
    NB = 3


class ChromaLocation(IntEnum):
    """Location of chroma samples relative to the luma samples."""

    UNSPECIFIED = 0
    LEFT = 1
    CENTER = 2
    TOPLEFT = 3
    TOP = 4
    BOTTOMLEFT = 5
    BOTTOM = 6
    NB = 7
"""Pixel format identifiers and helpers for native-endian aliases."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Optional, Union

PALETTE_SIZE = 1024
PALETTE_COUNT = 256

HOST_IS_BIG_ENDIAN = sys.byteorder == "big"


class PixelFormat(IntEnum):
    """Pixel format numbers.

    Names that would begin with a digit (``0RGB``, ``0BGR``) are spelled
    with a ``ZERO_`` prefix.
    """

    NONE = -1
    YUV420P = 0
    YUYV422 = 1
    RGB24 = 2
    BGR24 = 3
    YUV422P = 4
    YUV444P = 5
    YUV410P = 6
    YUV411P = 7
    GRAY8 = 8
    MONOWHITE = 9
    MONOBLACK = 10
    PAL8 = 11
    YUVJ420P = 12
    YUVJ422P = 13
    YUVJ444P = 14
    XVMC_MPEG2_MC = 15
    XVMC_MPEG2_IDCT = 16
    XVMC = 16
    UYVY422 = 17
    UYYVYY411 = 18
    BGR8 = 19
    BGR4 = 20
    BGR4_BYTE = 21
    RGB8 = 22
    RGB4 = 23
    RGB4_BYTE = 24
    NV12 = 25
    NV21 = 26
    ARGB = 27
    RGBA = 28
    ABGR = 29
    BGRA = 30
    GRAY16BE = 31
    GRAY16LE = 32
    YUV440P = 33
    YUVJ440P = 34
    YUVA420P = 35
    VDPAU_H264 = 36
    VDPAU_MPEG1 = 37
    VDPAU_MPEG2 = 38
    VDPAU_WMV3 = 39
    VDPAU_VC1 = 40
    RGB48BE = 41
    RGB48LE = 42
    RGB565BE = 43
    RGB565LE = 44
    RGB555BE = 45
    RGB555LE = 46
    BGR565BE = 47
    BGR565LE = 48
    BGR555BE = 49
    BGR555LE = 50
    VAAPI_MOCO = 51
    VAAPI_IDCT = 52
    VAAPI_VLD = 53
    YUV420P16LE = 54
    YUV420P16BE = 55
    YUV422P16LE = 56
    YUV422P16BE = 57
    YUV444P16LE = 58
    YUV444P16BE = 59
    VDPAU_MPEG4 = 60
    DXVA2_VLD = 61
    RGB444LE = 62
    RGB444BE = 63
    BGR444LE = 64
    BGR444BE = 65
    YA8 = 66
    Y400A = 66
    GRAY8A = 66
    BGR48BE = 67
    BGR48LE = 68
    YUV420P9BE = 69
    YUV420P9LE = 70
    YUV420P10BE = 71
    YUV420P10LE = 72
    YUV422P10BE = 73
    YUV422P10LE = 74
    YUV444P9BE = 75
    YUV444P9LE = 76
    YUV444P10BE = 77
    YUV444P10LE = 78
    YUV422P9BE = 79
    YUV422P9LE = 80
    VDA_VLD = 81
    GBRP = 82
    GBR24P = 82
    GBRP9BE = 83
    GBRP9LE = 84
    GBRP10BE = 85
    GBRP10LE = 86
    GBRP16BE = 87
    GBRP16LE = 88
    YUVA422P_LIBAV = 89
    YUVA444P_LIBAV = 90
    YUVA420P9BE = 91
    YUVA420P9LE = 92
    YUVA422P9BE = 93
    YUVA422P9LE = 94
    YUVA444P9BE = 95
    YUVA444P9LE = 96
    YUVA420P10BE = 97
    YUVA420P10LE = 98
    YUVA422P10BE = 99
    YUVA422P10LE = 100
    YUVA444P10BE = 101
    YUVA444P10LE = 102
    YUVA420P16BE = 103
    YUVA420P16LE = 104
    YUVA422P16BE = 105
    YUVA422P16LE = 106
    YUVA444P16BE = 107
    YUVA444P16LE = 108
    VDPAU = 109
    XYZ12LE = 110
    XYZ12BE = 111
    NV16 = 112
    NV20LE = 113
    NV20BE = 114
    RGBA64BE_LIBAV = 115
    RGBA64LE_LIBAV = 116
    BGRA64BE_LIBAV = 117
    BGRA64LE_LIBAV = 118
    YVYU422 = 119
    VDA = 120
    YA16BE = 121
    YA16LE = 122
    RGBA64BE = 0x123
    RGBA64LE = 0x123 + 1
    BGRA64BE = 0x123 + 2
    BGRA64LE = 0x123 + 3
    ZERO_RGB = 0x123 + 4
    RGB0 = 0x123 + 5
    ZERO_BGR = 0x123 + 6
    BGR0 = 0x123 + 7
    YUVA444P = 0x123 + 8
    YUVA422P = 0x123 + 9
    YUV420P12BE = 0x123 + 10
    YUV420P12LE = 0x123 + 11
    YUV420P14BE = 0x123 + 12
    YUV420P14LE = 0x123 + 13
    YUV422P12BE = 0x123 + 14
    YUV422P12LE = 0x123 + 15
    YUV422P14BE = 0x123 + 16
    YUV422P14LE = 0x123 + 17
    YUV444P12BE = 0x123 + 18
    YUV444P12LE = 0x123 + 19
    YUV444P14BE = 0x123 + 20
    YUV444P14LE = 0x123 + 21
    GBRP12BE = 0x123 + 22
    GBRP12LE = 0x123 + 23
    GBRP14BE = 0x123 + 24
    GBRP14LE = 0x123 + 25
    GBRAP = 0x123 + 26
    GBRAP16BE = 0x123 + 27
    GBRAP16LE = 0x123 + 28
    YUVJ411P = 0x123 + 29
    BAYER_BGGR8 = 0x123 + 30
    BAYER_RGGB8 = 0x123 + 31
    BAYER_GBRG8 = 0x123 + 32
    BAYER_GRBG8 = 0x123 + 33
    BAYER_BGGR16LE = 0x123 + 34
    BAYER_BGGR16BE = 0x123 + 35
    BAYER_RGGB16LE = 0x123 + 36
    BAYER_RGGB16BE = 0x123 + 37
    BAYER_GBRG16LE = 0x123 + 38
    BAYER_GBRG16BE = 0x123 + 39
    BAYER_GRBG16LE = 0x123 + 40
    BAYER_GRBG16BE = 0x123 + 41
    NB = 0x123 + 42


FormatRef = Union[PixelFormat, str]


def _resolve(ref: FormatRef) -> PixelFormat:
    if isinstance(ref, PixelFormat):
        return ref
    if not isinstance(ref, str):
        raise TypeError(f"expected a PixelFormat or a name, got {type(ref).__name__}")
    name = ref.upper()
    if name.startswith("0"):
        name = "ZERO_" + name[1:]
    try:
        return PixelFormat[name]
    except KeyError:
        raise ValueError(f"unknown pixel format: {ref!r}") from None


def native_endian(
    be: FormatRef, le: FormatRef, big_endian: Optional[bool] = None
) -> PixelFormat:
    """Pick the big- or little-endian variant of a format.

    ``big_endian`` defaults to the byte order of the running host.
    """
    if big_endian is None:
        big_endian = HOST_IS_BIG_ENDIAN
    be_fmt = _resolve(be)
    le_fmt = _resolve(le)
    return be_fmt if big_endian else le_fmt


RGB32 = native_endian("ARGB", "BGRA")
RGB32_1 = native_endian("RGBA", "ABGR")
BGR32 = native_endian("ABGR", "RGBA")
BGR32_1 = native_endian("BGRA", "ARGB")
ZERO_RGB32 = native_endian("0RGB", "BGR0")
ZERO_BGR32 = native_endian("0BGR", "RGB0")

GRAY16 = native_endian("GRAY16BE", "GRAY16LE")
YA16 = native_endian("YA16BE", "YA16LE")
RGB48 = native_endian("RGB48BE", "RGB48LE")
RGB565 = native_endian("RGB565BE", "RGB565LE")
RGB555 = native_endian("RGB555BE", "RGB555LE")
RGB444 = native_endian("RGB444BE", "RGB444LE")
RGBA64 = native_endian("RGBA64BE", "RGBA64LE")
BGR48 = native_endian("BGR48BE", "BGR48LE")
BGR565 = native_endian("BGR565BE", "BGR565LE")
BGR555 = native_endian("BGR555BE", "BGR555LE")
BGR444 = native_endian("BGR444BE", "BGR444LE")
BGRA64 = native_endian("BGRA64BE", "BGRA64LE")

YUV420P9 = native_endian("YUV420P9BE", "YUV420P9LE")
YUV422P9 = native_endian("YUV422P9BE", "YUV422P9LE")
YUV444P9 = native_endian("YUV444P9BE", "YUV444P9LE")
YUV420P10 = native_endian("YUV420P10BE", "YUV420P10LE")
YUV422P10 = native_endian("YUV422P10BE", "YUV422P10LE")
YUV444P10 = native_endian("YUV444P10BE", "YUV444P10LE")
YUV420P12 = native_endian("YUV420P12BE", "YUV420P12LE")
YUV422P12 = native_endian("YUV422P12BE", "YUV422P12LE")
YUV444P12 = native_endian("YUV444P12BE", "YUV444P12LE")
YUV420P14 = native_endian("YUV420P14BE", "YUV420P14LE")
YUV422P14 = native_endian("YUV422P14BE", "YUV422P14LE")
YUV444P14 = native_endian("YUV444P14BE", "YUV444P14LE")
YUV420P16 = native_endian("YUV420P16BE", "YUV420P16LE")
YUV422P16 = native_endian("YUV422P16BE", "YUV422P16LE")
YUV444P16 = native_endian("YUV444P16BE", "YUV444P16LE")

GBRP9 = native_endian("GBRP9BE", "GBRP9LE")
GBRP10 = native_endian("GBRP10BE", "GBRP10LE")
GBRP12 = native_endian("GBRP12BE", "GBRP12LE")
GBRP14 = native_endian("GBRP14BE", "GBRP14LE")
GBRP16 = native_endian("GBRP16BE", "GBRP16LE")
GBRAP16 = native_endian("GBRAP16BE", "GBRAP16LE")

BAYER_BGGR16 = native_endian("BAYER_BGGR16BE", "BAYER_BGGR16LE")
BAYER_RGGB16 = native_endian("BAYER_RGGB16BE", "BAYER_RGGB16LE")
BAYER_GBRG16 = native_endian("BAYER_GBRG16BE", "BAYER_GBRG16LE")
BAYER_GRBG16 = native_endian("BAYER_GRBG16BE", "BAYER_GRBG16LE")

YUVA420P9 = native_endian("YUVA420P9BE", "YUVA420P9LE")
YUVA422P9 = native_endian("YUVA422P9BE", "YUVA422P9LE")
YUVA444P9 = native_endian("YUVA444P9BE", "YUVA444P9LE")
YUVA420P10 = native_endian("YUVA420P10BE", "YUVA420P10LE")
YUVA422P10 = native_endian("YUVA422P10BE", "YUVA422P10LE")
YUVA444P10 = native_endian("YUVA444P10BE", "YUVA444P10LE")
YUVA420P16 = native_endian("YUVA420P16BE", "YUVA420P16LE")
YUVA422P16 = native_endian("YUVA422P16BE", "YUVA422P16LE")
YUVA444P16 = native_endian("YUVA444P16BE", "YUVA444P16LE")

XYZ12 = native_endian("XYZ12BE", "XYZ12LE")
NV20 = native_endian("NV20BE", "NV20LE")
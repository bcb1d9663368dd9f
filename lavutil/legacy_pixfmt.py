"""Deprecated ``PIX_FMT_*`` pixel format names and the formats they denote.

The legacy list is frozen. Each name refers to the :class:`PixelFormat`
member of the same name. The exception is the legacy ``NB`` count, which is
a plain integer and is not a format.
"""

from __future__ import annotations

from typing import Dict, Tuple, Union

from lavutil.pixfmt import PixelFormat

LEGACY_PREFIX = "PIX_FMT_"

#: Number of formats in the legacy list; differs from ``PixelFormat.NB``.
LEGACY_NB = 0x123 + 26

LEGACY_NAMES: Tuple[str, ...] = (
    "NONE",
    "YUV420P",
    "YUYV422",
    "RGB24",
    "BGR24",
    "YUV422P",
    "YUV444P",
    "YUV410P",
    "YUV411P",
    "GRAY8",
    "MONOWHITE",
    "MONOBLACK",
    "PAL8",
    "YUVJ420P",
    "YUVJ422P",
    "YUVJ444P",
    "XVMC_MPEG2_MC",
    "XVMC_MPEG2_IDCT",
    "UYVY422",
    "UYYVYY411",
    "BGR8",
    "BGR4",
    "BGR4_BYTE",
    "RGB8",
    "RGB4",
    "RGB4_BYTE",
    "NV12",
    "NV21",
    "ARGB",
    "RGBA",
    "ABGR",
    "BGRA",
    "GRAY16BE",
    "GRAY16LE",
    "YUV440P",
    "YUVJ440P",
    "YUVA420P",
    "VDPAU_H264",
    "VDPAU_MPEG1",
    "VDPAU_MPEG2",
    "VDPAU_WMV3",
    "VDPAU_VC1",
    "RGB48BE",
    "RGB48LE",
    "RGB565BE",
    "RGB565LE",
    "RGB555BE",
    "RGB555LE",
    "BGR565BE",
    "BGR565LE",
    "BGR555BE",
    "BGR555LE",
    "VAAPI_MOCO",
    "VAAPI_IDCT",
    "VAAPI_VLD",
    "YUV420P16LE",
    "YUV420P16BE",
    "YUV422P16LE",
    "YUV422P16BE",
    "YUV444P16LE",
    "YUV444P16BE",
    "VDPAU_MPEG4",
    "DXVA2_VLD",
    "RGB444LE",
    "RGB444BE",
    "BGR444LE",
    "BGR444BE",
    "GRAY8A",
    "BGR48BE",
    "BGR48LE",
    "YUV420P9BE",
    "YUV420P9LE",
    "YUV420P10BE",
    "YUV420P10LE",
    "YUV422P10BE",
    "YUV422P10LE",
    "YUV444P9BE",
    "YUV444P9LE",
    "YUV444P10BE",
    "YUV444P10LE",
    "YUV422P9BE",
    "YUV422P9LE",
    "VDA_VLD",
    "GBRP",
    "GBRP9BE",
    "GBRP9LE",
    "GBRP10BE",
    "GBRP10LE",
    "GBRP16BE",
    "GBRP16LE",
    "RGBA64BE",
    "RGBA64LE",
    "BGRA64BE",
    "BGRA64LE",
    "0RGB",
    "RGB0",
    "0BGR",
    "BGR0",
    "YUVA444P",
    "YUVA422P",
    "YUV420P12BE",
    "YUV420P12LE",
    "YUV420P14BE",
    "YUV420P14LE",
    "YUV422P12BE",
    "YUV422P12LE",
    "YUV422P14BE",
    "YUV422P14LE",
    "YUV444P12BE",
    "YUV444P12LE",
    "YUV444P14BE",
    "YUV444P14LE",
    "GBRP12BE",
    "GBRP12LE",
    "GBRP14BE",
    "GBRP14LE",
)


def _member_name(name: str) -> str:
    return "ZERO_" + name[1:] if name.startswith("0") else name


_LEGACY_FORMATS: Dict[str, PixelFormat] = {
    name: PixelFormat[_member_name(name)] for name in LEGACY_NAMES
}


def legacy_pixel_format(name: str) -> Union[PixelFormat, int]:
    """Return the format a legacy name denotes.

    ``name`` may carry the ``PIX_FMT_`` prefix or not and is matched without
    regard to case. ``"NB"`` yields the legacy format count as an integer.
    Names outside the legacy list raise ValueError.
    """
    if not isinstance(name, str):
        raise TypeError(f"expected a format name, got {type(name).__name__}")
    key = name.strip().upper()
    if key.startswith(LEGACY_PREFIX):
        key = key[len(LEGACY_PREFIX):]
    if key == "NB":
        return LEGACY_NB
    try:
        return _LEGACY_FORMATS[key]
    except KeyError:
        raise ValueError(f"not a legacy pixel format name: {name!r}") from None
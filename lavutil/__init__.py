"""Utility toolkit: size-checked buffers, overlapping copies, rationals, soft floats, sorting and pixel format tables."""

__version__ = "0.1.0"

__all__ = [
    "backptr",
    "colorspace",
    "legacy_pixfmt",
    "memory",
    "pixfmt",
    "rational",
    "softfloat",
    "sorting",
    "stereo3d",
]
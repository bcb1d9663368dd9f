import pytest

from lavutil.legacy_pixfmt import LEGACY_NAMES, LEGACY_NB, legacy_pixel_format
from lavutil.pixfmt import PixelFormat


def test_prefixed_name_maps_to_same_format():
    assert legacy_pixel_format("PIX_FMT_RGB24") is PixelFormat.RGB24


def test_unprefixed_and_lowercase_names():
    assert legacy_pixel_format("yuv420p") is PixelFormat.YUV420P
    assert legacy_pixel_format("pix_fmt_bgra") is PixelFormat.BGRA


def test_none_is_minus_one():
    assert legacy_pixel_format("PIX_FMT_NONE") == PixelFormat.NONE
    assert int(legacy_pixel_format("NONE")) == -1


def test_gray8a_alias_value():
    assert legacy_pixel_format("PIX_FMT_GRAY8A") == PixelFormat.YA8


def test_digit_leading_names():
    assert legacy_pixel_format("PIX_FMT_0RGB") is PixelFormat.ZERO_RGB
    assert legacy_pixel_format("0BGR") is PixelFormat.ZERO_BGR
    assert int(legacy_pixel_format("0RGB")) == 0x123 + 4


def test_rgba64_uses_fixed_value():
    assert int(legacy_pixel_format("PIX_FMT_RGBA64BE")) == 0x123


def test_nb_is_legacy_count_not_new_count():
    nb = legacy_pixel_format("PIX_FMT_NB")
    assert nb == LEGACY_NB
    assert nb == int(legacy_pixel_format("GBRP14LE")) + 1
    assert nb != int(PixelFormat.NB)


def test_every_legacy_name_resolves_to_distinct_format():
    formats = [legacy_pixel_format(name) for name in LEGACY_NAMES]
    assert all(isinstance(f, PixelFormat) for f in formats)
    assert len({int(f) for f in formats}) == len(LEGACY_NAMES)


def test_legacy_list_is_sequential_before_gap():
    head = [int(legacy_pixel_format(n)) for n in LEGACY_NAMES[: LEGACY_NAMES.index("GBRP16LE") + 1]]
    assert head == list(range(-1, len(head) - 1))


@pytest.mark.parametrize("name", ["YA8", "PIX_FMT_NV16", "GBRAP", "bogus", ""])
def test_names_outside_legacy_list_rejected(name):
    with pytest.raises(ValueError):
        legacy_pixel_format(name)


def test_non_string_rejected():
    with pytest.raises(TypeError):
        legacy_pixel_format(3)
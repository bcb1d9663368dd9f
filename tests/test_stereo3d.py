import pytest

from lavutil.stereo3d import FLAG_INVERT, Stereo3D, Stereo3DType


def test_defaults_describe_flat_video():
    s = Stereo3D()
    assert s.type is Stereo3DType.TWO_D
    assert s.flags == 0
    assert s.is_inverted() is False


def test_inverted_flag():
    s = Stereo3D(Stereo3DType.SIDEBYSIDE, FLAG_INVERT)
    assert s.is_inverted() is True


def test_other_flags_do_not_invert():
    s = Stereo3D(Stereo3DType.TOPBOTTOM, FLAG_INVERT << 1)
    assert s.is_inverted() is False


def test_integer_type_is_coerced():
    s = Stereo3D(int(Stereo3DType.LINES))
    assert s.type is Stereo3DType.LINES


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        Stereo3D(len(Stereo3DType))


def test_non_integer_flags_rejected():
    with pytest.raises(TypeError):
        Stereo3D(Stereo3DType.COLUMNS, "invert")


def test_types_are_contiguous():
    members = [Stereo3DType(i) for i in range(len(Stereo3DType))]
    assert members == list(Stereo3DType)


def test_documented_values():
    assert Stereo3DType(7) is Stereo3DType.COLUMNS
    s = Stereo3D(7, 1)
    assert s.type is Stereo3DType.COLUMNS
    assert s.flags == FLAG_INVERT
    assert s.is_inverted() is True
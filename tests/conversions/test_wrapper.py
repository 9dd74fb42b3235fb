import math

import pytest

from chromahub.conversions import convert, conversion_path, color_key, get_converter, FormatType
from chromahub.conversions.wrapper import (
    COLOR_KEYS, CONVERSIONS, DIRECT, ROUTES,
    RGB, UNIT_RGB, RGBA, UNIT_RGBA, YCBCR, UNIT_YCBCR, GRAY, UNIT_GRAY, LAB, XYZ,
)
from ..samples import samples_any_input, samples_rgb_lab

CIE = {"lab", "xyz"}


def test_convert_returns_tuple():
    result = convert((255, 128, 64), "rgb", "lab")
    assert isinstance(result, tuple)
    assert len(result) == 3


def test_every_pair_is_covered():
    assert len(COLOR_KEYS) == 10
    assert len(CONVERSIONS) == 100
    for src in COLOR_KEYS:
        for dst in COLOR_KEYS:
            assert (src, dst) in CONVERSIONS


def test_direct_and_routed_pairs_are_disjoint():
    assert not set(DIRECT) & set(ROUTES)
    for src in COLOR_KEYS:
        for dst in COLOR_KEYS:
            if src != dst:
                assert ((src, dst) in DIRECT) != ((src, dst) in ROUTES)


def test_identity_path():
    for key in COLOR_KEYS:
        assert conversion_path(key, key) == [key]
        assert CONVERSIONS[(key, key)]((1, 2, 3)) == (1, 2, 3)


def test_routed_paths_pass_through_an_intermediate():
    for (src, dst) in ROUTES:
        path = conversion_path(src, dst)
        assert path[0] == src
        assert path[-1] == dst
        assert len(path) >= 3
        assert len(set(path)) == len(path)


def test_paths_cross_into_cie_through_hub_or_lightness():
    crossings = {(RGB, XYZ), (XYZ, RGB), (GRAY, LAB), (UNIT_GRAY, LAB), (LAB, GRAY), (LAB, UNIT_GRAY)}
    for (src, dst) in ROUTES:
        path = conversion_path(src, dst)
        for step in zip(path, path[1:]):
            assert step in DIRECT
            if (step[0][0] in CIE) != (step[1][0] in CIE):
                assert step in crossings


def test_known_paths():
    assert conversion_path(YCBCR, RGB) == [YCBCR, UNIT_YCBCR, UNIT_RGB, RGB]
    assert conversion_path(RGB, LAB) == [RGB, XYZ, LAB]
    assert conversion_path(UNIT_RGB, LAB) == [UNIT_RGB, RGB, XYZ, LAB]
    assert conversion_path(LAB, RGB) == [LAB, XYZ, RGB]
    assert conversion_path(GRAY, XYZ) == [GRAY, LAB, XYZ]
    assert conversion_path(XYZ, GRAY) == [XYZ, LAB, GRAY]
    assert conversion_path(UNIT_RGBA, YCBCR) == [UNIT_RGBA, UNIT_RGB, RGB, YCBCR]


@pytest.mark.parametrize("src", COLOR_KEYS)
@pytest.mark.parametrize("dst", COLOR_KEYS)
def test_all_pairs_never_raise(src, dst):
    space, fmt = src
    converter = get_converter(src, dst)
    expected_len = 4 if dst[0] == "rgba" else (1 if dst[0] == "gray" else 3)
    for value in samples_any_input[(space, fmt.value)]:
        result = converter(value)
        assert len(result) == expected_len
        if dst[1] == FormatType.INT:
            assert all(isinstance(c, int) and 0 <= c <= 255 for c in result)


def test_convert_rgb_to_lab():
    l, a, b = convert((127, 0, 0), "rgb", "lab")
    l_exp, a_exp, b_exp = samples_rgb_lab[(127, 0, 0)]
    assert abs(l - l_exp) < 1e-3
    assert abs(a - a_exp) < 1e-3
    assert abs(b - b_exp) < 1e-3


def test_convert_formats():
    assert convert((1.0, 0.0, 0.5), "rgb", "rgb", FormatType.FLOAT, FormatType.INT) == (255, 0, 127)
    assert convert((255, 0, 0), "ycbcr", "rgb") == (76, 255, 29)
    assert convert((1.0, -0.5, -0.5), "ycbcr", "rgb", input_type=FormatType.FLOAT) == (76, 255, 29)


def test_adds_alpha():
    assert convert((255, 128, 64), "rgb", "rgba") == (255, 128, 64, 255)
    assert convert((1.0, 0.5, 0.25), "rgb", "rgba", FormatType.FLOAT, FormatType.FLOAT) == (1.0, 0.5, 0.25, 1.0)
    assert convert((10,), "gray", "rgba") == (10, 10, 10, 255)


def test_cie_ignores_format():
    assert color_key("lab", FormatType.INT) == LAB
    assert color_key("XYZ") == XYZ
    assert color_key("rgb", FormatType.FLOAT) == UNIT_RGB


def test_unknown_space_raises():
    with pytest.raises(ValueError):
        convert((0, 0, 0), "hsv", "rgb")


def test_rounding_depends_on_path():
    # Lab -> gray floors the lightness directly
    assert convert((50.0, 0.0, 0.0), "lab", "gray") == (127,)
    # Lab -> RGB rounds after sRGB encoding, then RGB -> gray truncates luma
    r, g, b = convert((50.0, 0.0, 0.0), "lab", "rgb")
    assert r == g == b == 119
    (via_rgb,) = convert((r, g, b), "rgb", "gray")
    assert via_rgb in (118, 119)


def test_nan_digital_outputs_are_zero():
    assert convert((math.nan, 0.0, 0.0), "lab", "rgb") == (0, 0, 0)
    assert convert((math.nan,), "gray", "gray", FormatType.FLOAT, FormatType.INT) == (0,)


@pytest.mark.filterwarnings("error")
def test_infinite_cie_input_converts_silently():
    inf = float("inf")
    assert convert((inf, 0.0, -inf), "xyz", "rgb") == (255, 0, 0)
    assert convert((50.0, 1e106, -1e106), "lab", "rgb") == (0, 0, 255)
    assert convert((50.0, 1e106, -1e106), "lab", "gray") == (127,)
    l, a, b = convert((inf, 0.0, -inf), "xyz", "lab")
    assert a == inf
    assert b == inf

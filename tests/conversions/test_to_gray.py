from chromahub.conversions.to_gray import (
    luma,
    rgb_to_gray,
    rgb_to_unit_gray,
    unit_rgb_to_gray,
    unit_rgb_to_unit_gray,
    ycbcr_to_gray,
    ycbcr_to_unit_gray,
    unit_ycbcr_to_gray,
    unit_ycbcr_to_unit_gray,
    gray_to_unit_gray,
    unit_gray_to_gray,
    lab_to_gray,
    lab_to_unit_gray,
)
from ..samples import samples_rgb_gray


def test_rgb_to_gray_samples():
    for rgb, v in samples_rgb_gray.items():
        assert rgb_to_gray(*rgb) == (v,)


def test_luma_is_computed_in_output_normalization():
    (digital,) = rgb_to_unit_gray(100, 150, 200)
    (normalized,) = unit_rgb_to_unit_gray(100 / 255, 150 / 255, 200 / 255)
    assert abs(digital - normalized) < 1e-12
    assert abs(digital - luma(100, 150, 200) / 255) < 1e-12
    assert 0.0 <= digital <= 1.0


def test_unit_rgb_to_gray_truncates():
    assert unit_rgb_to_gray(0.5, 0.5, 0.5) == (127,)


def test_grayscale_round_trip():
    assert gray_to_unit_gray(255) == (1.0,)
    assert unit_gray_to_gray(1.0) == (255,)
    assert gray_to_unit_gray(0) == (0.0,)
    assert unit_gray_to_gray(0.0) == (0,)


def test_ycbcr_to_gray_uses_y():
    assert ycbcr_to_gray(255, 0, 0) == (255,)
    assert ycbcr_to_unit_gray(255, 0, 0) == (1.0,)
    assert unit_ycbcr_to_gray(1.0, -0.5, -0.5) == (255,)
    assert unit_ycbcr_to_unit_gray(1.0, -0.5, -0.5) == (1.0,)


def test_lab_to_gray_floors():
    # 50 / 100 * 255 = 127.5
    assert lab_to_gray(50.0, 10.0, -10.0) == (127,)
    assert lab_to_gray(99.9, 0.0, 0.0) == (254,)
    assert lab_to_gray(100.0, 0.0, 0.0) == (255,)
    assert lab_to_gray(-20.0, 0.0, 0.0) == (0,)
    assert lab_to_gray(float("nan"), 0.0, 0.0) == (0,)


def test_lab_to_unit_gray():
    assert lab_to_unit_gray(50.0, 3.0, 4.0) == (0.5,)

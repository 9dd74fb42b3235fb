from chromahub.conversions.to_rgb import (
    unit_rgb_to_rgb,
    rgb_to_unit_rgb,
    rgba_to_rgb,
    rgba_to_unit_rgb,
    unit_rgba_to_rgb,
    unit_rgba_to_unit_rgb,
    unit_ycbcr_to_unit_rgb,
    gray_to_rgb,
    linear_to_srgb,
    xyz_to_rgb,
)
from chromahub.conversions.to_cie import lab_to_xyz
import numpy as np
from ..samples import samples_rgb_lab


def test_rgb_to_unit_rgb():
    r, g, b = rgb_to_unit_rgb(255, 0, 127)
    assert r == 1.0
    assert g == 0.0
    assert abs(b - 0.49803922) < 1e-6


def test_unit_rgb_to_rgb_truncates():
    assert unit_rgb_to_rgb(1.0, 0.0, 0.5) == (255, 0, 127)
    assert unit_rgb_to_rgb(0.999, 0.0039, 0.0) == (254, 0, 0)


def test_unit_rgb_to_rgb_saturates():
    assert unit_rgb_to_rgb(1.5, -0.3, 100.0) == (255, 0, 255)
    assert unit_rgb_to_rgb(float("nan"), float("inf"), float("-inf")) == (0, 255, 0)


def test_rgba_drops_alpha():
    assert rgba_to_rgb(255, 128, 64, 128) == (255, 128, 64)
    assert unit_rgba_to_unit_rgb(1.0, 0.5, 0.2, 0.5) == (1.0, 0.5, 0.2)
    assert unit_rgba_to_rgb(1.0, 0.5, 0.25, 0.5) == (255, 127, 63)

    r, g, b = rgba_to_unit_rgb(255, 127, 63, 128)
    assert np.allclose((r, g, b), (1.0, 0.49803922, 0.24705882), atol=1e-6)


def test_unit_ycbcr_to_unit_rgb():
    r, g, b = unit_ycbcr_to_unit_rgb(1.0, -0.5, -0.5)
    assert abs(r - 0.299) < 1e-6
    assert g == 1.0
    assert abs(b - 0.114) < 1e-6


def test_unit_ycbcr_to_unit_rgb_caps_at_one_only():
    r, g, b = unit_ycbcr_to_unit_rgb(1.0, 0.5, 0.5)
    assert r == 1.0
    assert b == 1.0
    # no lower bound on the normalized result
    r, g, b = unit_ycbcr_to_unit_rgb(0.0, 0.5, -0.5)
    assert r < 0.0
    assert b > 0.0


def test_gray_to_rgb_replicates():
    for v in (0, 1, 127, 255):
        assert gray_to_rgb(v) == (v, v, v)


def test_linear_to_srgb_branches():
    assert linear_to_srgb(0.0) == 0.0
    assert abs(linear_to_srgb(0.003) - 0.003 * 12.92) < 1e-12
    assert abs(linear_to_srgb(1.0) - 1.0) < 1e-12
    assert abs(linear_to_srgb(0.5) - 0.735356983) < 1e-6


def test_xyz_to_rgb_white_and_black():
    assert xyz_to_rgb(0.95047, 1.0, 1.08883) == (255, 255, 255)
    assert xyz_to_rgb(0.0, 0.0, 0.0) == (0, 0, 0)


def test_xyz_to_rgb_saturates_out_of_gamut():
    r, g, b = xyz_to_rgb(-0.5, 3.0, 2.0)
    assert all(0 <= c <= 255 for c in (r, g, b))
    assert xyz_to_rgb(float("nan"), float("nan"), float("nan")) == (0, 0, 0)


def test_lab_to_rgb_inverts_fixture():
    for rgb, lab in samples_rgb_lab.items():
        assert xyz_to_rgb(*lab_to_xyz(*lab)) == rgb

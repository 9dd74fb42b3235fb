import pytest

from chromahub import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorYCbCrINT,
    ColorUnitYCbCr,
    ColorGrayINT,
    ColorUnitGray,
    ColorLab,
    ColorXYZ,
    LazyConversion,
)
from chromahub.colors.capabilities import ALL_CAPABILITIES
from chromahub.colors.color import unified_tuple_to_class
from ..samples import samples_rgb_lab


SOURCES = [
    ColorRGBINT((255, 0, 0)),
    ColorRGBINT((0, 127, 127)),
    ColorRGBINT((64, 64, 64)),
    ColorRGBINT((12, 250, 99)),
]


def test_every_type_declares_every_capability():
    for cls in unified_tuple_to_class.values():
        for capability in ALL_CAPABILITIES:
            assert issubclass(cls, capability)


def test_convert_list_matches_single_conversion():
    pairs = [
        (ColorRGBINT.convert_list_rgb, ColorRGBINT),
        (ColorRGBINT.convert_list_rgba, ColorRGBAINT),
        (ColorRGBINT.convert_list_ycbcr, ColorYCbCrINT),
        (ColorRGBINT.convert_list_grayscale, ColorGrayINT),
        (ColorRGBINT.convert_list_lab, ColorLab),
        (ColorRGBINT.convert_list_xyz, ColorXYZ),
    ]
    for bulk, target in pairs:
        result = bulk(SOURCES)
        assert len(result) == len(SOURCES)
        for item, source in zip(result, SOURCES):
            assert item == target(source)


def test_convert_list_from_normalized_ycbcr():
    assert ColorUnitYCbCr.convert_list_rgb([ColorUnitYCbCr((1.0, -0.5, -0.5))]) == [
        ColorRGBINT((76, 255, 29))
    ]


def test_convert_list_keeps_order_of_lab_fixture():
    sources = [ColorLab(lab) for lab in samples_rgb_lab.values()]
    result = ColorLab.convert_list_rgb(sources)
    assert result == [ColorRGBINT(rgb) for rgb in samples_rgb_lab]


def test_convert_list_empty():
    assert ColorUnitGray.convert_list_grayscale([]) == []


def test_convert_iter_rgb_is_lazy():
    seen = []

    def source():
        for color in SOURCES:
            seen.append(color)
            yield color

    lazy = ColorUnitRGB.convert_iter_rgb(source())
    assert isinstance(lazy, LazyConversion)
    assert lazy.target is ColorRGBINT
    assert seen == []

    iterator = iter(lazy)
    first = next(iterator)
    assert first == ColorRGBINT(SOURCES[0])
    assert len(seen) == 1


def test_convert_iter_grayscale_is_restartable():
    lazy = ColorRGBINT.convert_iter_grayscale(SOURCES)
    assert len(lazy) == len(SOURCES)
    first_pass = list(lazy)
    second_pass = list(lazy)
    assert first_pass == second_pass
    assert first_pass == [ColorGrayINT(source) for source in SOURCES]


def test_lazy_len_needs_sized_source():
    lazy = ColorRGBINT.convert_iter_rgb(color for color in SOURCES)
    with pytest.raises(TypeError):
        len(lazy)


def test_lazy_repr():
    assert repr(ColorRGBINT.convert_iter_grayscale([])) == "LazyConversion(target=ColorGrayINT)"

import pytest

from chromahub.conversions.numbers import truncate_to_byte, round_to_byte, floor_to_byte


@pytest.mark.parametrize("cast", [truncate_to_byte, round_to_byte, floor_to_byte])
def test_byte_casts_saturate(cast):
    assert cast(-12.0) == 0
    assert cast(300.0) == 255
    assert cast(float("inf")) == 255
    assert cast(1e300) == 255
    assert cast(-1e300) == 0
    assert cast(float("-inf")) == 0
    assert cast(float("nan")) == 0
    assert isinstance(cast(12.3), int)


def test_policies_differ():
    assert truncate_to_byte(127.7) == 127
    assert round_to_byte(127.7) == 128
    assert floor_to_byte(127.7) == 127

    assert truncate_to_byte(-0.7) == 0
    assert round_to_byte(-0.7) == 0
    assert floor_to_byte(-0.7) == 0


def test_round_half_away_from_zero():
    assert round_to_byte(0.5) == 1
    assert round_to_byte(2.5) == 3
    assert round_to_byte(254.5) == 255

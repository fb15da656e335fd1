import math
import pytest
import numpy as np
from chromascale.colors import ColorRGBAINT, ColorUnitRGB
from chromascale.errors import OutOfRangeError
from chromascale.gradients.color_key import ColorKey, sort_key


def test_rgb_tuple_gets_opaque_alpha():
    key = ColorKey(0.25, (255, 0, 0))
    assert float(key.position) == 0.25
    assert key.color == ColorRGBAINT((255, 0, 0, 255))


def test_rgba_tuple_keeps_alpha():
    assert ColorKey(0.0, (10, 20, 30, 40)).color.value == (10, 20, 30, 40)


def test_color_instances_are_converted():
    assert ColorKey(1.0, ColorUnitRGB((1.0, 0.0, 0.0))).color.value == (255, 0, 0, 255)
    color = ColorRGBAINT.from_argb(0, 1, 2, 3)
    assert ColorKey(0.5, color).color is color


@pytest.mark.parametrize("position", [-0.01, 1.01, math.nan])
def test_position_out_of_range(position):
    with pytest.raises(OutOfRangeError, match="position"):
        ColorKey(position, (0, 0, 0))


@pytest.mark.parametrize("position", ["0.5", None, True])
def test_position_must_be_a_number(position):
    with pytest.raises(TypeError):
        ColorKey(position, (0, 0, 0))


def test_invalid_color():
    with pytest.raises(OutOfRangeError):
        ColorKey(0.5, (256, 0, 0))


def test_keys_are_immutable():
    key = ColorKey(0.5, (0, 0, 0))
    with pytest.raises(AttributeError):
        key.position = 0.3
    with pytest.raises(AttributeError):
        key.color = ColorRGBAINT((1, 1, 1, 1))


def test_with_position_and_color():
    key = ColorKey(0.5, (0, 0, 0))
    moved = key.with_position(0.75)
    recolored = key.with_color((1, 2, 3))
    assert float(moved.position) == 0.75
    assert moved.color == key.color
    assert recolored.color.value == (1, 2, 3, 255)
    assert float(recolored.position) == 0.5
    assert float(key.position) == 0.5
    with pytest.raises(OutOfRangeError):
        key.with_position(2.0)


def test_compare():
    low = ColorKey(0.2, (0, 0, 0))
    high = ColorKey(0.8, (0, 0, 0))
    assert ColorKey.compare(low, high) == -1
    assert ColorKey.compare(high, low) == 1
    assert ColorKey.compare(low, ColorKey(0.2, (255, 255, 255))) == 0


def test_equality_uses_position_and_color():
    a = ColorKey(0.5, (1, 2, 3))
    assert a == ColorKey(0.5, (1, 2, 3, 255))
    assert hash(a) == hash(ColorKey(0.5, (1, 2, 3)))
    assert a != ColorKey(0.5, (1, 2, 4))
    assert a != ColorKey(0.6, (1, 2, 3))


def test_sort_is_stable_on_equal_positions():
    first = ColorKey(0.5, (1, 1, 1))
    second = ColorKey(0.5, (2, 2, 2))
    keys = sorted([ColorKey(1.0, (0, 0, 0)), first, ColorKey(0.0, (0, 0, 0)), second], key=sort_key)
    assert [float(k.position) for k in keys] == [0.0, 0.5, 0.5, 1.0]
    assert keys[1] is first and keys[2] is second


def test_repr():
    assert repr(ColorKey(0.25, (255, 0, 0))) == "ColorKey(0.25, (255, 0, 0, 255))"


def test_numpy_color_becomes_a_single_color():
    key = ColorKey(0.0, np.array([255, 0, 0, 255], dtype=np.uint8))
    assert key.color.value == (255, 0, 0, 255)
    assert not key.color.is_array
    assert ColorKey(0.0, np.array([1, 2, 3])).color.value == (1, 2, 3, 255)


def test_numpy_color_key_in_collection():
    from chromascale import ColorsCollection

    colors = ColorsCollection(3, [
        ColorKey(0.0, np.array([255, 0, 0, 255], dtype=np.uint8)),
        ColorKey(1.0, (0, 0, 0)),
    ])
    assert [c.value for c in colors.palette] == [(255, 0, 0, 255), (128, 0, 0, 255), (0, 0, 0, 255)]


def test_array_valued_colors_are_rejected():
    rows = np.array([[1, 2, 3, 4], [5, 6, 7, 8]], dtype=np.uint8)
    with pytest.raises(TypeError):
        ColorKey(0.5, ColorRGBAINT(rows))
    with pytest.raises(TypeError):
        ColorKey(0.5, ColorUnitRGB(np.array([[0.0, 0.5, 1.0]])))
    with pytest.raises(TypeError):
        ColorKey(0.5, rows)


def test_fractional_channels_are_rejected():
    with pytest.raises(TypeError):
        ColorKey(0.5, (0.2, 0.4, 0.6))
    with pytest.raises(TypeError):
        ColorKey(0.5, np.array([0.2, 0.4, 0.6]))

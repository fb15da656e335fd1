import warnings
import pytest
import numpy as np
from chromascale import ColorKey, ColorsCollection, SparseGradient, Palette, TRANSPARENT
from chromascale.colors import ColorRGBAINT, PixelLayout
from chromascale.config import PaletteConfig
from chromascale.errors import ErrorCode, OutOfRangeError

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0)


def values(palette):
    return [color.value for color in palette]


def test_no_keys_gives_transparent_palette():
    colors = ColorsCollection(8)
    assert len(colors) == 0
    assert list(colors.palette) == [TRANSPARENT] * 8
    assert colors.query_palette(0.3) == TRANSPARENT


def test_default_palette_size():
    assert ColorsCollection().palette_size == 256
    assert ColorsCollection(config=PaletteConfig(DEFAULT_PALETTE_SIZE=16)).palette_size == 16


def test_single_key():
    color = ColorRGBAINT((10, 20, 30, 255))
    colors = ColorsCollection(11, [ColorKey(0.5, color)])
    palette = colors.palette
    assert list(palette[:5]) == [TRANSPARENT] * 5
    assert list(palette[5:]) == [color] * 6


def test_black_to_white(black_to_white):
    palette = black_to_white.palette
    assert palette[0].value == BLACK
    assert palette[5].value == (128, 128, 128, 255)
    assert palette[10].value == WHITE
    assert black_to_white.query_palette(0.5).value == (128, 128, 128, 255)


def test_query_palette_inverse(black_to_white):
    palette = black_to_white.palette
    assert black_to_white.query_palette(0.2, inverse=True) == palette[8]
    assert black_to_white.query_palette(0.0, inverse=True).value == WHITE


@pytest.mark.parametrize("scale", [-0.01, 1.01])
def test_query_palette_out_of_range(black_to_white, scale):
    with pytest.raises(OutOfRangeError, match="scale"):
        black_to_white.query_palette(scale)


def test_middle_key_is_respected():
    colors = ColorsCollection(5, [
        ColorKey(1.0, (255, 255, 255)),
        ColorKey(0.0, (0, 0, 0)),
        ColorKey(0.5, RED),
    ])
    assert values(colors.palette) == [
        BLACK,
        (128, 0, 0, 255),
        (255, 0, 0, 255),
        (255, 128, 128, 255),
        WHITE,
    ]


def test_exact_hit_keeps_key_alpha():
    colors = ColorsCollection(11, [ColorKey(0.0, (10, 20, 30, 40)), ColorKey(1.0, (255, 255, 255))])
    assert colors.palette[0].value == (10, 20, 30, 40)
    assert colors.palette[1].alpha == 255


def test_keys_are_sorted_after_mutation(black_to_white):
    black_to_white.append(ColorKey(0.8, RED))
    black_to_white.append(ColorKey(0.2, RED))
    assert [float(k.position) for k in black_to_white] == [0.0, 0.2, 0.8, 1.0]
    assert ColorKey(0.2, RED) in black_to_white


def test_insert_then_remove_restores_palette(black_to_white):
    before = black_to_white.palette
    key = ColorKey(0.3, RED)
    black_to_white.append(key)
    assert black_to_white.palette != before
    black_to_white.remove(key)
    assert black_to_white.palette == before


def test_setitem_and_delitem(black_to_white):
    black_to_white[0] = ColorKey(0.0, RED)
    assert black_to_white.palette[0].value == (255, 0, 0, 255)
    del black_to_white[0]
    assert black_to_white.palette[0] == TRANSPARENT
    assert black_to_white.palette[10].value == WHITE


def test_clear(black_to_white):
    black_to_white.clear()
    assert list(black_to_white.palette) == [TRANSPARENT] * 11


def test_only_color_keys_are_accepted(black_to_white):
    with pytest.raises(TypeError):
        black_to_white.append((0.5, RED))
    with pytest.raises(TypeError):
        ColorsCollection(4, [0.5])


def test_palette_size_is_idempotent(black_to_white):
    before = black_to_white.palette
    black_to_white.palette_size = 11
    black_to_white.palette_size = 11
    assert black_to_white.palette == before


def test_palette_size_resizes(black_to_white):
    black_to_white.palette_size = 3
    assert values(black_to_white.palette) == [BLACK, (128, 128, 128, 255), WHITE]


@pytest.mark.parametrize("size", [1, 0, -4])
def test_palette_size_must_exceed_one(black_to_white, size):
    with pytest.raises(OutOfRangeError) as exc_info:
        black_to_white.palette_size = size
    assert exc_info.value.code is ErrorCode.VALUE_NOT_STRICTLY_POSITIVE
    assert black_to_white.palette_size == 11


def test_palette_size_must_be_an_integer(black_to_white):
    with pytest.raises(TypeError):
        black_to_white.palette_size = 2.5


def test_inverted_reverses_palette():
    colors = ColorsCollection(5, [ColorKey(0.0, (0, 0, 0)), ColorKey(1.0, (255, 255, 255))])
    before = values(colors.palette)
    assert before == [BLACK, (64, 64, 64, 255), (128, 128, 128, 255), (191, 191, 191, 255), WHITE]
    colors.inverted = True
    assert values(colors.palette) == before[::-1]
    assert ColorsCollection(5, list(colors), inverted=True).palette == colors.palette


def test_notifications(black_to_white):
    events = []
    black_to_white.subscribe(events.append)

    black_to_white.inverted = True
    assert events == ["palette", "inverted"]

    events.clear()
    black_to_white.inverted = True
    assert events == []

    black_to_white.palette_size = 5
    assert events == ["palette", "palette_size"]

    events.clear()
    black_to_white.palette_size = 5
    assert events == ["palette"]

    events.clear()
    black_to_white.extend([ColorKey(0.2, RED), ColorKey(0.4, RED)])
    assert events == ["palette"]


def test_on_change_is_not_called_during_construction():
    events = []
    colors = ColorsCollection(4, [ColorKey(0.0, RED)], on_change=events.append)
    assert events == []
    colors.append(ColorKey(1.0, RED))
    assert events == ["palette"]
    colors.unsubscribe(events.append)
    colors.clear()
    assert events == ["palette"]


def test_palette_is_a_snapshot(black_to_white):
    palette = black_to_white.palette
    assert isinstance(palette, Palette)
    black_to_white.inverted = True
    assert palette[0].value == BLACK
    with pytest.raises(TypeError):
        palette[0] = TRANSPARENT


def test_palette_export(black_to_white):
    palette = black_to_white.palette
    arr = palette.to_array()
    assert arr.shape == (11, 4)
    assert arr.dtype == np.uint8
    data = palette.to_bytes(PixelLayout.BGRA)
    assert len(data) == 44
    assert data[:4] == bytes([0, 0, 0, 255])
    assert data[-4:] == bytes([255, 255, 255, 255])
    assert np.array_equal(palette.to_color().value, arr)


def test_interpolate_is_not_snapped(black_to_white):
    assert black_to_white.interpolate(0.25).value == (64, 64, 64, 255)
    black_to_white.inverted = True
    assert black_to_white.interpolate(0.25).value == (191, 191, 191, 255)
    with pytest.raises(OutOfRangeError):
        black_to_white.interpolate(1.5)


def test_shared_position_warns(black_to_white):
    with pytest.warns(UserWarning, match="shares its position"):
        black_to_white.append(ColorKey(1.0, RED))


def test_duplicate_key_does_not_warn(black_to_white):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        black_to_white.append(ColorKey(1.0, (255, 255, 255)))
    assert len(black_to_white) == 3


def test_sparse_gradient_alias():
    assert SparseGradient is ColorsCollection


def test_reverse_is_not_supported(black_to_white):
    events = []
    black_to_white.subscribe(events.append)
    before = black_to_white.palette
    with pytest.raises(TypeError, match="inverted"):
        black_to_white.reverse()
    assert black_to_white.palette == before
    assert [float(k.position) for k in black_to_white] == [0.0, 1.0]
    assert events == []

from chromascale.utils import get_dimension, value_or_default

def test_none_dimension():
    assert get_dimension(None) == 0

def test_sized_dimension():
    assert get_dimension([1, 2, 3]) == 3
    assert get_dimension((1, 2, 3, 4)) == 4
    assert get_dimension("rgb") == 3

def test_non_sized_dimension():
    assert get_dimension(42) == 1
    assert get_dimension(0.5) == 1

def test_value_or_default():
    assert value_or_default(None, 256) == 256
    assert value_or_default(11, 256) == 11
    # Falsy values are kept
    assert value_or_default(0, 256) == 0

import pytest

from chromascale import ColorKey, ColorsCollection
from chromascale.errors import set_message_provider


@pytest.fixture(autouse=True)
def default_messages():
    """Every test starts and ends with the built-in error messages."""
    set_message_provider(None)
    yield
    set_message_provider(None)


@pytest.fixture
def gray_ramp():
    """256 gray samples, sample i == i / 255."""
    return [(i / 255, i / 255, i / 255) for i in range(256)]


@pytest.fixture
def rgb_ramp():
    """256 samples with independent channel ramps."""
    return [(i / 255, 1 - i / 255, (i % 16) / 15) for i in range(256)]


@pytest.fixture
def black_to_white():
    return ColorsCollection(11, [ColorKey(0.0, (0, 0, 0)), ColorKey(1.0, (255, 255, 255))])

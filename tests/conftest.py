import numpy as np
import pytest

from relight import Light


FLAT_NORMAL = (128, 128, 255, 255)


def make_buffer(height: int, width: int, pixel) -> np.ndarray:
    buffer = np.empty((height, width, 4), dtype=np.uint8)
    buffer[...] = pixel
    return buffer


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_image(rng) -> np.ndarray:
    return rng.integers(0, 256, size=(17, 23, 4), dtype=np.uint8)


@pytest.fixture
def random_normal_map(rng) -> np.ndarray:
    return rng.integers(0, 256, size=(17, 23, 4), dtype=np.uint8)


@pytest.fixture
def flat_normal_map() -> np.ndarray:
    return make_buffer(4, 5, FLAT_NORMAL)


@pytest.fixture
def white_light() -> Light:
    return Light(direction=(0, 0, 1), color=(255, 255, 255))


@pytest.fixture
def two_lights():
    return [
        Light(direction=(-1, 1, 1), color=(255, 200, 150), brightness=0.8, softness=0.3),
        Light(direction=(1, 0, 0.5), color=(80, 120, 255), brightness=1.4),
    ]

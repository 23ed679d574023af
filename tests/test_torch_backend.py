import numpy as np
import pytest

from relight import relight_image

torch = pytest.importorskip("torch")


def test_torch_matches_numpy(random_image, random_normal_map, two_lights):
    expected = relight_image(random_image, random_normal_map, two_lights, intensity=0.65)
    out = relight_image(random_image, random_normal_map, two_lights, intensity=0.65,
                        backend="torch", device="cpu")
    assert out.dtype == np.uint8
    np.testing.assert_array_equal(out, expected)


def test_torch_zero_intensity_keeps_image(random_image, random_normal_map, white_light):
    out = relight_image(random_image, random_normal_map, [white_light], intensity=0.0,
                        backend="torch", device="cpu")
    np.testing.assert_array_equal(out, random_image)

import numpy as np
import pytest

from relight import Light, compute_light_factor
from relight.shading.models import (
    accumulate_lights,
    accumulate_lights_at,
    compute_dot_term,
    compute_light_contribution,
)
from relight.shading.normals import decode_normal, decode_normal_map


def _random_unit_vectors(rng, n):
    v = rng.normal(size=(n, 3))
    return v / np.linalg.norm(v, axis=-1, keepdims=True)


def test_zero_softness_reduces_to_dot():
    dots = np.linspace(-1.0, 1.0, 41)
    factors = compute_light_factor(dots, 0.0, 1.0)
    np.testing.assert_array_equal(factors, np.maximum(dots, 0.0))


def test_fully_lit_normal_maps_to_one_for_any_softness():
    for softness in (0.0, 0.3, 1.0, 5.0):
        assert compute_light_factor(1.0, softness, 1.0) == 1.0


def test_softness_lights_grazing_normals():
    assert compute_light_factor(0.0, 0.0, 1.0) == 0.0
    assert compute_light_factor(0.0, 1.0, 1.0) == 0.5
    assert compute_light_factor(-0.5, 1.0, 1.0) == 0.25


def test_brightness_scales_after_clamp():
    assert compute_light_factor(0.5, 0.0, 2.0) == 1.0
    assert compute_light_factor(-0.5, 0.0, 2.0) == 0.0


def test_scalar_and_array_factor_agree():
    dots = np.array([-0.7, -0.1, 0.0, 0.33, 0.9])
    array_factors = compute_light_factor(dots, 0.4, 1.3)
    scalar_factors = [compute_light_factor(float(d), 0.4, 1.3) for d in dots]
    assert array_factors.tolist() == scalar_factors


@pytest.mark.parametrize("softness", [0.0, 0.2, 0.75])
def test_contribution_zero_when_dot_below_negative_softness(rng, softness):
    normals = _random_unit_vectors(rng, 500)
    light = Light(direction=tuple(rng.normal(size=3)), color=(255, 128, 64), softness=softness)

    dots = compute_dot_term(normals, light.direction)
    contribution = compute_light_contribution(normals, light)

    shadowed = dots <= -softness
    assert shadowed.any()
    assert (contribution[shadowed] == 0.0).all()
    assert (contribution[~shadowed][:, 0] > 0.0).all()


def test_contribution_is_tinted_by_color():
    normals = np.array([[0.0, 0.0, 1.0]])
    light = Light(direction=(0, 0, 1), color=(255, 0, 51), brightness=1.0)
    contribution = compute_light_contribution(normals, light)
    assert contribution[0].tolist() == pytest.approx([1.0, 0.0, 0.2])


def test_accumulation_sums_lights(two_lights):
    normals = np.array([[0.0, 0.0, 1.0], [0.6, 0.0, 0.8]])
    acc = accumulate_lights(normals, two_lights)
    expected = sum(compute_light_contribution(normals, light) for light in two_lights)
    np.testing.assert_allclose(acc, expected, rtol=1e-15)


def test_accumulation_scalar_matches_array(random_normal_map, two_lights):
    normals = decode_normal_map(random_normal_map)
    acc = accumulate_lights(normals, two_lights)
    for y, x in [(0, 0), (3, 11), (16, 22)]:
        r, g, b = (int(c) for c in random_normal_map[y, x, :3])
        assert acc[y, x].tolist() == accumulate_lights_at(decode_normal(r, g, b), two_lights)


def test_no_lights_gives_zero_accumulator():
    normals = np.zeros((2, 2, 3))
    assert (accumulate_lights(normals, []) == 0.0).all()


def test_canonical_order_ignores_input_order(two_lights):
    from relight.shading.models import canonical_order

    extra = Light(direction=(0, -1, 1), color=(1, 2, 3))
    rig = two_lights + [extra]
    assert canonical_order(rig) == canonical_order(rig[::-1])
    assert canonical_order(rig) == canonical_order([rig[1], rig[2], rig[0]])

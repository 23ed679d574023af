import numpy as np
import pytest

from relight import relight_image, Light
from relight.cli import build_parser, lights_from_args, main
from relight.utils.image_io import load_image, save_image


@pytest.fixture
def inputs(tmp_path, random_image, random_normal_map):
    image_path = save_image(tmp_path / "image.png", random_image)
    normal_path = save_image(tmp_path / "normals.png", random_normal_map)
    return image_path, normal_path, tmp_path / "out.png"


def _base_args(inputs):
    image_path, normal_path, output_path = inputs
    return ["--image", str(image_path), "--normal-map", str(normal_path), "--output", str(output_path)]


def test_single_light(inputs, random_image, random_normal_map, capsys):
    argv = _base_args(inputs) + ["--light-dir=-1,1,1", "--light-color", "255,200,150",
                                 "--brightness", "0.9", "--softness", "0.2", "--intensity", "0.75"]
    assert main(argv) == 0

    light = Light(direction=(-1, 1, 1), color=(255, 200, 150), brightness=0.9, softness=0.2)
    expected = relight_image(random_image, random_normal_map, [light], intensity=0.75)
    np.testing.assert_array_equal(load_image(inputs[2]), expected)

    stdout = capsys.readouterr().out
    assert "Processing image with light 1" in stdout
    assert "Output saved to" in stdout


def test_multiple_lights_with_per_light_brightness(inputs, random_image, random_normal_map):
    argv = _base_args(inputs) + [
        "--light-dir", "0,0,1", "--light-color", "255,0,0",
        "--light-dir", "1,0,1", "--light-color", "0,0,255",
        "--brightness", "0.5", "--brightness", "1.5", "--workers", "2",
    ]
    assert main(argv) == 0

    lights = [
        Light(direction=(0, 0, 1), color=(255, 0, 0), brightness=0.5),
        Light(direction=(1, 0, 1), color=(0, 0, 255), brightness=1.5),
    ]
    expected = relight_image(random_image, random_normal_map, lights)
    np.testing.assert_array_equal(load_image(inputs[2]), expected)


def test_intensity_is_clamped(inputs, random_image):
    argv = _base_args(inputs) + ["--light-dir", "0,0,1", "--light-color", "0,0,0",
                                 "--intensity", "-4"]
    assert main(argv) == 0
    np.testing.assert_array_equal(load_image(inputs[2]), random_image)


def test_lights_from_config_file(inputs, tmp_path, random_image, random_normal_map):
    rig = tmp_path / "rig.yaml"
    rig.write_text(
        "relight:\n  intensity: 0.3\n"
        "lights:\n  - direction: [0, 1, 1]\n    color: [10, 250, 90]\n    softness: 0.4\n"
    )
    assert main(_base_args(inputs) + ["--config", str(rig)]) == 0

    light = Light(direction=(0, 1, 1), color=(10, 250, 90), softness=0.4)
    expected = relight_image(random_image, random_normal_map, [light], intensity=0.3)
    np.testing.assert_array_equal(load_image(inputs[2]), expected)


def test_dimension_mismatch_fails(tmp_path, random_image, capsys):
    save_image(tmp_path / "image.png", random_image)
    save_image(tmp_path / "normals.png", random_image[:, :-2])
    argv = ["--image", str(tmp_path / "image.png"), "--normal-map", str(tmp_path / "normals.png"),
            "--output", str(tmp_path / "out.png"), "--light-dir", "0,0,1", "--light-color", "1,2,3"]

    assert main(argv) == 1
    assert "Error: Image and normal map dimensions must match" in capsys.readouterr().out
    assert not (tmp_path / "out.png").exists()


def test_missing_image_fails(tmp_path, capsys):
    argv = ["--image", str(tmp_path / "nope.png"), "--normal-map", str(tmp_path / "nope.png"),
            "--output", str(tmp_path / "out.png"), "--light-dir", "0,0,1", "--light-color", "1,2,3"]
    assert main(argv) == 1
    assert "Input image file not found." in capsys.readouterr().out


def test_no_lights_fails(inputs, capsys):
    assert main(_base_args(inputs)) == 1
    assert "At least one light is required" in capsys.readouterr().out


def test_bad_color_fails(inputs, capsys):
    argv = _base_args(inputs) + ["--light-dir", "0,0,1", "--light-color", "300,0,0"]
    assert main(argv) == 1
    assert "Error:" in capsys.readouterr().out


def test_unpaired_light_options():
    args = build_parser().parse_args(
        ["--image", "a", "--normal-map", "b", "--output", "c",
         "--light-dir", "0,0,1", "--light-dir", "1,0,0", "--light-color", "1,2,3"]
    )
    with pytest.raises(ValueError, match="matching --light-color"):
        lights_from_args(args)


def test_per_light_value_count_must_match():
    args = build_parser().parse_args(
        ["--image", "a", "--normal-map", "b", "--output", "c",
         "--light-dir", "0,0,1", "--light-color", "1,2,3",
         "--softness", "0.1", "--softness", "0.2"]
    )
    with pytest.raises(ValueError, match="--softness"):
        lights_from_args(args)


def test_single_value_applies_to_all_lights():
    args = build_parser().parse_args(
        ["--image", "a", "--normal-map", "b", "--output", "c",
         "--light-dir", "0,0,1", "--light-color", "1,2,3",
         "--light-dir", "0,1,0", "--light-color", "4,5,6", "--softness=-0.5"]
    )
    lights = lights_from_args(args)
    assert [light.softness for light in lights] == [0.0, 0.0]
    assert [light.brightness for light in lights] == [1.0, 1.0]

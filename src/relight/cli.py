"""
Command line interface for normal-map relighting.

Usage:
    relight --image photo.png --normal-map normals.png --output lit.png \
        --light-dir 1,1,1 --light-color 255,240,220
    relight --image photo.png --normal-map normals.png --output lit.png \
        --config configs/relight_config.yaml --intensity 0.5
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Sequence
import argparse
import time

from .core.config import (
    RelightConfig,
    default_config,
    load_config,
    lights_from_config,
    relight_config_from,
)
from .core.relighter import Relighter
from .errors import RelightError
from .shading.config import Light, clamp_intensity
from .utils.parsing import parse_vector, parse_color


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="relight",
        description="Apply directional lighting to an image using a normal map",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  relight --image in.png --normal-map n.png --output out.png --light-dir 0,0,1 --light-color 255,255,255
  relight --image in.png --normal-map n.png --output out.png \\
      --light-dir=-1,1,1 --light-color 255,200,150 --light-dir 1,0,0.5 --light-color 80,120,255
  relight --image in.png --normal-map n.png --output out.png --config configs/relight_config.yaml
        """
    )

    parser.add_argument("--image", type=str, required=True,
                        help="The input image file (JPG or PNG)")
    parser.add_argument("--normal-map", type=str, required=True,
                        help="The normal map image file (RGB values map to XYZ normal vector)")
    parser.add_argument("--output", "-o", type=str, required=True,
                        help="The output image file path")

    parser.add_argument("--light-dir", type=str, action="append", default=None,
                        help="Light direction vector (format: x,y,z; use --light-dir=-1,0,1 for negative x); repeat for more lights")
    parser.add_argument("--light-color", type=str, action="append", default=None,
                        help="Light color (format: r,g,b); one per --light-dir")
    parser.add_argument("--brightness", type=float, action="append", default=None,
                        help="Light brightness (default: 1.0); one value or one per light")
    parser.add_argument("--softness", type=float, action="append", default=None,
                        help="Softness of lighting transition (default: 0.0); one value or one per light")

    parser.add_argument("--intensity", type=float, default=None,
                        help="Blend factor between original image (0.0) and lighting effect (1.0) (default: 1.0)")
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="YAML file with a light rig and run options")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker threads for row-parallel processing")
    parser.add_argument("--backend", type=str, choices=("numpy", "torch"), default=None,
                        help="Compute backend (default: numpy)")
    parser.add_argument("--device", type=str, default=None,
                        help="Torch device, e.g. cpu or cuda")
    parser.add_argument("--debug", action="store_true",
                        help="Print array statistics during processing")

    return parser


def _per_light(values: Optional[Sequence[float]], count: int, name: str) -> List[Optional[float]]:
    """Expand a one-or-per-light option into exactly count values."""
    if not values:
        return [None] * count
    if len(values) == 1:
        return list(values) * count
    if len(values) != count:
        raise ValueError(f"--{name} needs 1 or {count} values, got {len(values)}")
    return list(values)


def lights_from_args(args: argparse.Namespace) -> List[Light]:
    """
    Build lights from --light-dir / --light-color pairs.

    Returns an empty list when no --light-dir is given.

    Raises:
        ValueError: If the option counts do not line up
    """
    dirs = args.light_dir or []
    colors = args.light_color or []
    if not dirs and not colors:
        return []
    if len(dirs) != len(colors):
        raise ValueError(
            f"Each --light-dir needs a matching --light-color ({len(dirs)} != {len(colors)})"
        )

    brightness = _per_light(args.brightness, len(dirs), "brightness")
    softness = _per_light(args.softness, len(dirs), "softness")

    lights = []
    for i, (dir_str, color_str) in enumerate(zip(dirs, colors)):
        entry = {'direction': parse_vector(dir_str), 'color': parse_color(color_str)}
        if brightness[i] is not None:
            entry['brightness'] = brightness[i]
        if softness[i] is not None:
            entry['softness'] = softness[i]
        lights.append(Light.from_dict(entry))
    return lights


def apply_cli_overrides(config: RelightConfig, args: argparse.Namespace) -> RelightConfig:
    """Override file options with command line values."""
    if args.intensity is not None:
        config.intensity = clamp_intensity(args.intensity)
        print(f"[Config] Override intensity: {config.intensity}")

    if args.workers is not None:
        config.workers = max(1, args.workers)
        print(f"[Config] Override workers: {config.workers}")

    if args.backend is not None:
        config.backend = args.backend
        print(f"[Config] Override backend: {config.backend}")

    if args.device is not None:
        config.device = args.device

    if args.debug:
        config.debug = True

    return config


def _check_inputs(args: argparse.Namespace):
    if not Path(args.image).is_file():
        raise FileNotFoundError("Input image file not found.")
    if not Path(args.normal_map).is_file():
        raise FileNotFoundError("Normal map file not found.")


def run(args: argparse.Namespace) -> Path:
    """Execute one relighting job described by parsed arguments."""
    _check_inputs(args)

    if args.config:
        file_config = load_config(args.config)
        print(f"[Config] Loaded configuration from: {args.config}")
    else:
        file_config = default_config()

    config = apply_cli_overrides(relight_config_from(file_config), args)

    lights = lights_from_args(args)
    if lights:
        if args.config:
            print("[Config] Command line lights replace config lights")
    else:
        lights = lights_from_config(file_config)
    if not lights:
        raise ValueError("At least one light is required (--light-dir/--light-color or --config)")

    for i, light in enumerate(lights):
        d = light.direction
        print(f"Processing image with light {i + 1}: direction: <{d.x:.4f}, {d.y:.4f}, {d.z:.4f}>, "
              f"color: {light.color}, brightness: {light.brightness}, softness: {light.softness}")
    print(f"  - Intensity: {config.intensity}")

    relighter = Relighter(lights, config)
    return relighter.render_files(args.image, args.normal_map, args.output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    start = time.perf_counter()
    try:
        output = run(args)
    except (RelightError, ValueError, OSError, ImportError) as e:
        print(f"Error: {e}")
        return 1

    print(f"[Output] Output saved to: {Path(output).resolve()}")
    print(f"  - Elapsed: {time.perf_counter() - start:.2f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

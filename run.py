"""
Main entry point for normal-map relighting.

Usage:
    python run.py --image photo.png --normal-map normals.png --output lit.png \
        --light-dir 0.5,0.5,1 --light-color 255,240,220 --intensity 0.8
    python run.py --image photo.png --normal-map normals.png --output lit.png \
        --config configs/relight_config.yaml
"""

import sys
from pathlib import Path

# Add project paths
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from relight.cli import main


if __name__ == "__main__":
    sys.exit(main())

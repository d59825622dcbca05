#!/usr/bin/env python3
"""
===============================================================================
QUATERNIONS - DEMONSTRATION ENTRY POINT
===============================================================================
Rotates (2, 0, 0) by 45 degrees about +Y and prints the result:

    X: 1.4142, Y: 0.0000, Z: -1.4142

USAGE:
    python main.py                        # Built-in scenario
    python main.py --config demo.yaml     # Scenario from YAML
    python main.py -v                     # Log progress to stderr

The single result line goes to stdout; log records go to stderr.

DEPENDENCIES:
    numpy, pyyaml
    Install: pip install numpy pyyaml

===============================================================================
"""

import sys
import argparse
import logging
from pathlib import Path

# ---------------------------------------------------------------------------
# Path setup: ensure the package is importable when run as a script
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from quaternions.config import DemoConfig, load_config
from quaternions.quaternion import Quaternion
from quaternions.vec3 import Vec3

logger = logging.getLogger('QUATERNIONS_DEMO')


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route log records to stderr at WARNING, INFO (-v) or DEBUG (--debug)."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        stream=sys.stderr,
    )


def format_result(v: Vec3, precision: int = 4) -> str:
    """Format a vector as 'X: <x>, Y: <y>, Z: <z>'."""
    return (f"X: {v.x:.{precision}f}, "
            f"Y: {v.y:.{precision}f}, "
            f"Z: {v.z:.{precision}f}")


def run_demo(config: DemoConfig) -> Vec3:
    """
    Build the configured vector and quaternion and rotate one by the other.

    Args:
        config: Demonstration scenario

    Returns:
        The rotated vector
    """
    vx, vy, vz = config.vector
    ax, ay, az = config.axis

    test_vec = (Vec3.builder()
                .x(vx)
                .y(vy)
                .z(vz)
                .build())

    rot_quat = (Quaternion.by_axis_angle()
                .x(ax)
                .y(ay)
                .z(az)
                .angle(config.angle)
                .normalized(config.normalized)
                .build())

    logger.info(f"Vector:     {test_vec}")
    logger.info(f"Quaternion: {rot_quat}")

    rotated_vec = test_vec.rotate(rot_quat)

    logger.info(f"Rotated:    {rotated_vec}")
    return rotated_vec


def main(argv=None) -> int:
    """Main entry point for the demonstration program."""
    parser = argparse.ArgumentParser(
        description='Rotate a vector with a quaternion and print the result'
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Path to demo config YAML')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log progress (INFO) to stderr')
    parser.add_argument('--debug', action='store_true',
                        help='Log every operation (DEBUG) to stderr')

    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, debug=args.debug)

    config = load_config(args.config)
    rotated_vec = run_demo(config)

    print(format_result(rotated_vec, config.precision))
    return 0


if __name__ == '__main__':
    sys.exit(main())

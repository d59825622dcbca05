"""
===============================================================================
QUATERNIONS - Demonstration Configuration
===============================================================================
Scenario for the demonstration program: which vector to rotate, about which
axis, by how much, and how many decimals to print.

Configuration is read from YAML with an optional top-level `demo` section:

    demo:
      vector: [2.0, 0.0, 0.0]
      axis: [0.0, 1.0, 0.0]
      angle: 0.7853981633974483   # radians (or angle_deg: 45.0)
      normalized: true
      precision: 4

Missing keys fall back to the defaults in quaternions.constants. Only the
loader validates its input; the math itself never does.
===============================================================================
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from quaternions.constants import (
    DEG2RAD, DEMO_ANGLE, DEMO_AXIS, DEMO_NORMALIZED, DEMO_PRECISION,
    DEMO_VECTOR,
)

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {'vector', 'axis', 'angle', 'angle_deg', 'normalized', 'precision'}


@dataclass
class DemoConfig:
    """
    Demonstration scenario.

    Attributes:
        vector: Components (x, y, z) of the vector to rotate.
        axis: Rotation axis (x, y, z). Used as given, not normalized.
        angle: Rotation angle [rad].
        normalized: Whether the quaternion builder normalizes its result.
        precision: Decimal places in the printed line.
    """
    vector: Tuple[float, float, float] = DEMO_VECTOR
    axis: Tuple[float, float, float] = DEMO_AXIS
    angle: float = DEMO_ANGLE
    normalized: bool = DEMO_NORMALIZED
    precision: int = DEMO_PRECISION


def _as_triple(name: str, value: Any) -> Tuple[float, float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(
            f"'{name}' must be a list of 3 numbers, got {value!r}"
        )
    try:
        return tuple(float(v) for v in value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{name}' must contain only numbers, got {value!r}") from exc


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"'{name}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{name}' must be a number, got {value!r}") from exc


def config_from_dict(data: Optional[Dict[str, Any]]) -> DemoConfig:
    """
    Build a DemoConfig from parsed YAML.

    Args:
        data: Mapping as returned by yaml.safe_load. Either the `demo`
              section itself or a document containing it. None means an
              empty document.

    Returns:
        DemoConfig with defaults filled in.

    Raises:
        ValueError: On unknown keys or malformed values.
    """
    if data is None:
        return DemoConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

    section = data.get('demo', data)
    if section is None:
        return DemoConfig()
    if not isinstance(section, dict):
        raise ValueError(f"'demo' section must be a mapping, got {type(section).__name__}")

    unknown = set(section) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    if 'angle' in section and 'angle_deg' in section:
        raise ValueError("Specify either 'angle' or 'angle_deg', not both")

    config = DemoConfig()

    if 'vector' in section:
        config.vector = _as_triple('vector', section['vector'])
    if 'axis' in section:
        config.axis = _as_triple('axis', section['axis'])
    if 'angle' in section:
        config.angle = _as_float('angle', section['angle'])
    if 'angle_deg' in section:
        config.angle = _as_float('angle_deg', section['angle_deg']) * DEG2RAD
    if 'normalized' in section:
        if not isinstance(section['normalized'], bool):
            raise ValueError(
                f"'normalized' must be true or false, got {section['normalized']!r}"
            )
        config.normalized = section['normalized']
    if 'precision' in section:
        precision = section['precision']
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError(
                f"'precision' must be a non-negative integer, got {precision!r}"
            )
        config.precision = precision

    return config


def load_config(config_path: Union[str, Path, None] = None) -> DemoConfig:
    """
    Load the demonstration scenario from a YAML file.

    Args:
        config_path: Path to the YAML file. None returns the built-in
                     defaults without touching the filesystem.

    Returns:
        DemoConfig for the demonstration program.
    """
    if config_path is None:
        logger.debug("No configuration file given, using defaults")
        return DemoConfig()

    logger.info(f"Loading configuration from: {config_path}")
    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    config = config_from_dict(data)
    logger.debug(f"Demo configuration: {config}")
    return config

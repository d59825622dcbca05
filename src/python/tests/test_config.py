"""
===============================================================================
QUATERNIONS - Demo Configuration Test Suite
===============================================================================
Tests for the YAML loader behind the demonstration program: defaults,
overrides, degree angles and rejection of malformed documents.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
import yaml

from quaternions.config import DemoConfig, config_from_dict, load_config
from quaternions.constants import DEMO_ANGLE, DEMO_AXIS, DEMO_VECTOR

SHIPPED_CONFIG = os.path.join(os.path.dirname(__file__), '..', '..', '..',
                              'config', 'demo_config.yaml')


@pytest.fixture
def write_config(tmp_path):
    """Write a mapping to a YAML file and return its path."""
    def _write(data):
        path = tmp_path / 'demo.yaml'
        path.write_text(yaml.safe_dump(data))
        return path
    return _write


class TestDefaults:

    def test_dataclass_defaults(self):
        config = DemoConfig()
        assert config.vector == DEMO_VECTOR
        assert config.axis == DEMO_AXIS
        assert config.angle == DEMO_ANGLE
        assert config.normalized is True
        assert config.precision == 4

    def test_no_path_returns_defaults(self):
        assert load_config(None) == DemoConfig()

    def test_empty_document(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')
        assert load_config(path) == DemoConfig()

    def test_empty_demo_section(self):
        assert config_from_dict({'demo': None}) == DemoConfig()

    def test_shipped_config_matches_defaults(self):
        config = load_config(SHIPPED_CONFIG)
        assert config.vector == DEMO_VECTOR
        assert config.axis == DEMO_AXIS
        assert config.angle == pytest.approx(DEMO_ANGLE, abs=1e-15)
        assert config.normalized is True
        assert config.precision == 4


class TestOverrides:

    def test_full_document(self, write_config):
        path = write_config({'demo': {
            'vector': [1, 2, 3],
            'axis': [0.0, 0.0, 1.0],
            'angle': 0.5,
            'normalized': False,
            'precision': 6,
        }})
        config = load_config(path)
        assert config.vector == (1.0, 2.0, 3.0)
        assert config.axis == (0.0, 0.0, 1.0)
        assert config.angle == 0.5
        assert config.normalized is False
        assert config.precision == 6

    def test_partial_document_keeps_defaults(self, write_config):
        config = load_config(write_config({'demo': {'precision': 2}}))
        assert config.precision == 2
        assert config.vector == DEMO_VECTOR
        assert config.angle == DEMO_ANGLE

    def test_section_without_demo_key(self):
        config = config_from_dict({'vector': [0, 1, 0]})
        assert config.vector == (0.0, 1.0, 0.0)

    def test_angle_in_degrees(self):
        config = config_from_dict({'demo': {'angle_deg': 90.0}})
        assert config.angle == pytest.approx(np.pi / 2, abs=1e-15)

    def test_string_path(self, write_config):
        path = write_config({'demo': {'angle': 1.0}})
        assert load_config(str(path)).angle == 1.0


class TestErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / 'missing.yaml')

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown configuration keys: speed"):
            config_from_dict({'demo': {'speed': 3}})

    def test_angle_and_angle_deg(self):
        with pytest.raises(ValueError, match="either 'angle' or 'angle_deg'"):
            config_from_dict({'demo': {'angle': 1.0, 'angle_deg': 45.0}})

    @pytest.mark.parametrize("value", [[1.0, 2.0], [1, 2, 3, 4], 5.0, "abc"])
    def test_bad_vector_shape(self, value):
        with pytest.raises(ValueError, match="'vector' must be a list of 3 numbers"):
            config_from_dict({'demo': {'vector': value}})

    def test_non_numeric_axis(self):
        with pytest.raises(ValueError, match="'axis' must contain only numbers"):
            config_from_dict({'demo': {'axis': [0, 'up', 0]}})

    @pytest.mark.parametrize("value", ["fast", None, True])
    def test_bad_angle(self, value):
        with pytest.raises(ValueError, match="'angle' must be a number"):
            config_from_dict({'demo': {'angle': value}})

    def test_bad_normalized(self):
        with pytest.raises(ValueError, match="'normalized' must be true or false"):
            config_from_dict({'demo': {'normalized': 'yes please'}})

    @pytest.mark.parametrize("value", [-1, 2.5, True, "4"])
    def test_bad_precision(self, value):
        with pytest.raises(ValueError, match="'precision' must be a non-negative integer"):
            config_from_dict({'demo': {'precision': value}})

    def test_document_not_a_mapping(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            config_from_dict([1, 2, 3])

    def test_demo_section_not_a_mapping(self):
        with pytest.raises(ValueError, match="'demo' section must be a mapping"):
            config_from_dict({'demo': [1, 2, 3]})

"""
===============================================================================
QUATERNIONS - 3D Rotation Math
===============================================================================
Immutable vector and quaternion value types for rotating vectors in space
with quaternion algebra.

Modules:
    constants   -- Mathematical constants, tolerances and demo defaults
    vec3        -- Vec3 value type and its builder
    quaternion  -- Quaternion value type, its builders and Hamilton algebra
    config      -- YAML configuration for the demonstration program
===============================================================================
"""

from quaternions.quaternion import (
    Quaternion,
    QuaternionBuilderByAxisAngle,
    QuaternionBuilderByWXYZ,
)
from quaternions.vec3 import Vec3, Vec3Builder

__version__ = '0.1.0'

__all__ = [
    'Quaternion',
    'QuaternionBuilderByAxisAngle',
    'QuaternionBuilderByWXYZ',
    'Vec3',
    'Vec3Builder',
]

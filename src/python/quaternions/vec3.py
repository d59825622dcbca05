"""
===============================================================================
QUATERNIONS - Three-Component Vector
===============================================================================

Immutable 3-vector with a magnitude computed once at construction.

Vectors are created through a fluent builder so that the derived magnitude
is evaluated exactly once from a complete set of components:

    v = Vec3.builder().x(2.0).y(0.0).z(0.0).build()

Rotation
--------
Vec3.rotate(q) applies the sandwich product

    v' = q * v_pure * q_conjugate

where v_pure = [0, v_x, v_y, v_z] is the vector embedded as a pure
quaternion. The magnitude of the result is carried over from the input
vector instead of being recomputed, which is only correct when q is a unit
quaternion. Normalizing q is the caller's job.

===============================================================================
"""

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from quaternions.quaternion import Quaternion

logger = logging.getLogger(__name__)


def _euclidean_norm(components: np.ndarray) -> float:
    """sqrt of the sum of squares, letting NaN/Inf propagate silently."""
    with np.errstate(all='ignore'):
        return float(np.sqrt(np.sum(components * components)))


class Vec3Builder:
    """
    Fluent builder for Vec3.

    Every setter returns the builder itself, so calls chain. Components
    default to 0.0. Any float is accepted, NaN and Inf included.
    """

    def __init__(self) -> None:
        self._x = 0.0
        self._y = 0.0
        self._z = 0.0

    def x(self, val: float) -> 'Vec3Builder':
        self._x = float(val)
        return self

    def y(self, val: float) -> 'Vec3Builder':
        self._y = float(val)
        return self

    def z(self, val: float) -> 'Vec3Builder':
        self._z = float(val)
        return self

    def build(self) -> 'Vec3':
        """
        Finalize the vector.

        Returns
        -------
        Vec3
            Immutable vector with magnitude sqrt(x^2 + y^2 + z^2).
        """
        components = np.array([self._x, self._y, self._z], dtype=np.float64)
        return Vec3(components, _euclidean_norm(components))


class Vec3:
    """
    Immutable 3-component vector with cached magnitude.

    Use Vec3.builder() to create instances. The constructor takes the
    component array and the magnitude as-is; it is the low-level path used
    by the builder and by rotate(), which carries the magnitude over.

    Attributes
    ----------
    x, y, z : float
        Cartesian components.
    magnitude : float
        Euclidean length, computed when the vector was built.
    """

    def __init__(self, components: np.ndarray, magnitude: float) -> None:
        v = np.array(components, dtype=np.float64)
        v.setflags(write=False)
        self._v = v
        self._magnitude = float(magnitude)

    @staticmethod
    def builder() -> Vec3Builder:
        """Start building a vector; all components default to 0.0."""
        return Vec3Builder()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def magnitude(self) -> float:
        """Magnitude as stored at construction (see rotate())."""
        return self._magnitude

    @property
    def components(self) -> np.ndarray:
        """Copy of [x, y, z] as a float64 array."""
        return self._v.copy()

    # =========================================================================
    # ROTATION
    # =========================================================================

    def as_quaternion(self) -> 'Quaternion':
        """
        Lift this vector to the pure quaternion [0, x, y, z].

        Built through the raw-component builder with normalized=False, so
        its norm equals this vector's length.
        """
        from quaternions.quaternion import Quaternion

        return (Quaternion.by_wxyz()
                .x(self.x)
                .y(self.y)
                .z(self.z)
                .normalized(False)
                .build())

    def rotate(self, q: 'Quaternion') -> 'Vec3':
        """
        Rotate this vector by a quaternion.

        Computes r = q * p * q.conjugate() with p the pure-quaternion lift of
        this vector, then projects r back to a vector. The scalar part of r
        is discarded; it is ~0 for a well-formed product but not checked.

        Parameters
        ----------
        q : Quaternion
            Rotation. Must be unit-length for the result to be a pure
            rotation.

        Returns
        -------
        Vec3
            Rotated vector. Its magnitude is copied from this vector, not
            recomputed from the rotated components, so it is stale when q
            is not a unit quaternion.
        """
        p = self.as_quaternion()
        rotated = (q * p * q.conjugate()).as_vec3()

        logger.debug("Rotated %r by %r -> %r", self, q, rotated)

        return Vec3(rotated.components, self._magnitude)

    # =========================================================================
    # REPRESENTATION
    # =========================================================================

    def __repr__(self) -> str:
        return (f"Vec3(x={self.x:+.8f}, y={self.y:+.8f}, "
                f"z={self.z:+.8f}, magnitude={self._magnitude:.8f})")

    def __str__(self) -> str:
        return f"[{self.x:+.6f}, {self.y:+.6f}, {self.z:+.6f}]"

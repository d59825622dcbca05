"""
===============================================================================
QUATERNIONS - Quaternion Algebra
===============================================================================

Immutable quaternion value type for rotating 3-vectors.

Convention
----------
We use the scalar-first convention:

    q = [q_w, q_x, q_y, q_z] = q_w + q_x*i + q_y*j + q_z*k

where q_w is the scalar (real) part and [q_x, q_y, q_z] is the vector
(imaginary) part. A vector v is rotated with the sandwich product

    v' = q * v * q_conjugate

where v is embedded as a pure quaternion (v_w = 0).

Construction
------------
Quaternions are created through one of two fluent builders:

    Quaternion.by_axis_angle().y(1.0).angle(np.pi / 4).normalized(True).build()
    Quaternion.by_wxyz().w(1.0).x(0.0).y(0.0).z(0.0).build()

The builder computes the norm once, from the candidate components. When
`normalized(True)` is requested the four components are divided by that
norm, but the stored norm stays the pre-division value.

Stored norm
-----------
The stored norm is not a live readout of the components:

    - conjugate() and multiplication rebuild through the raw-component
      builder, so their norm is recomputed.
    - inverse() and normalize() carry self.norm over unchanged.

After normalize(), the components are unit-length but `norm` still reports
the magnitude before normalization. Use is_unit() to check the components.

Numerics
--------
No validation is performed. A zero norm, a zero-length axis or non-finite
inputs produce NaN/Inf that propagate through later operations. numpy
floating-point warnings are suppressed for these operations.

===============================================================================
"""

import logging
from typing import Tuple

import numpy as np

from quaternions.constants import AXIS_NORM_TOLERANCE, UNIT_NORM_TOLERANCE
from quaternions.vec3 import Vec3, _euclidean_norm

logger = logging.getLogger(__name__)


# =============================================================================
# BUILDERS
# =============================================================================

class QuaternionBuilderByAxisAngle:
    """
    Fluent builder for a quaternion from a rotation axis and angle.

    The resulting components are

        q = [cos(angle/2), x*sin(angle/2), y*sin(angle/2), z*sin(angle/2)]

    The axis is used as given. A non-unit axis yields a quaternion that is
    not a pure rotation unless normalized(True) is set.
    """

    def __init__(self) -> None:
        self._x = 0.0
        self._y = 0.0
        self._z = 0.0
        self._angle = 0.0
        self._normalized = False

    def x(self, val: float) -> 'QuaternionBuilderByAxisAngle':
        self._x = float(val)
        return self

    def y(self, val: float) -> 'QuaternionBuilderByAxisAngle':
        self._y = float(val)
        return self

    def z(self, val: float) -> 'QuaternionBuilderByAxisAngle':
        self._z = float(val)
        return self

    def angle(self, val: float) -> 'QuaternionBuilderByAxisAngle':
        """Rotation angle in radians."""
        self._angle = float(val)
        return self

    def normalized(self, val: bool) -> 'QuaternionBuilderByAxisAngle':
        self._normalized = bool(val)
        return self

    def build(self) -> 'Quaternion':
        """
        Finalize the quaternion.

        Returns
        -------
        Quaternion
            Quaternion whose stored norm is the magnitude of the half-angle
            candidate, before any normalization.
        """
        half_angle = self._angle / 2.0

        with np.errstate(all='ignore'):
            sin_half = np.sin(half_angle)
            candidate = np.array([
                np.cos(half_angle),
                self._x * sin_half,
                self._y * sin_half,
                self._z * sin_half,
            ], dtype=np.float64)

        return _finalize(candidate, self._normalized)


class QuaternionBuilderByWXYZ:
    """Fluent builder for a quaternion from raw [w, x, y, z] components."""

    def __init__(self) -> None:
        self._w = 0.0
        self._x = 0.0
        self._y = 0.0
        self._z = 0.0
        self._normalized = False

    def w(self, val: float) -> 'QuaternionBuilderByWXYZ':
        self._w = float(val)
        return self

    def x(self, val: float) -> 'QuaternionBuilderByWXYZ':
        self._x = float(val)
        return self

    def y(self, val: float) -> 'QuaternionBuilderByWXYZ':
        self._y = float(val)
        return self

    def z(self, val: float) -> 'QuaternionBuilderByWXYZ':
        self._z = float(val)
        return self

    def normalized(self, val: bool) -> 'QuaternionBuilderByWXYZ':
        self._normalized = bool(val)
        return self

    def build(self) -> 'Quaternion':
        candidate = np.array([self._w, self._x, self._y, self._z],
                             dtype=np.float64)
        return _finalize(candidate, self._normalized)


def _finalize(candidate: np.ndarray, normalized: bool) -> 'Quaternion':
    """Compute the norm of a candidate and optionally divide it out."""
    norm = _euclidean_norm(candidate)

    if normalized:
        with np.errstate(all='ignore'):
            candidate = candidate / norm
        logger.debug("Normalized quaternion candidate (norm = %.6e)", norm)

    return Quaternion(candidate, norm)


# =============================================================================
# QUATERNION
# =============================================================================

class Quaternion:
    """
    Immutable quaternion for 3D rotation.

    A unit quaternion q = [w, x, y, z] parameterizes a rotation by angle
    theta about unit axis n as:

        q = [cos(theta/2), sin(theta/2) * n_x, sin(theta/2) * n_y, sin(theta/2) * n_z]

    Instances are created through Quaternion.by_axis_angle() or
    Quaternion.by_wxyz(). The constructor stores the components and norm
    as given and exists for the builders and for operations that carry the
    norm over (inverse, normalize).

    Attributes
    ----------
    w : float
        Scalar (real) component.
    x, y, z : float
        Imaginary components (i, j, k axes).
    norm : float
        Norm recorded at construction. See the module docstring for when it
        is carried rather than recomputed.

    Examples
    --------
    >>> q = Quaternion.by_axis_angle().z(1.0).angle(np.pi / 2).normalized(True).build()
    >>> v = Vec3.builder().x(1.0).build()
    >>> v.rotate(q)  # ~ [0, 1, 0]
    """

    def __init__(self, components: np.ndarray, norm: float) -> None:
        q = np.array(components, dtype=np.float64)
        q.setflags(write=False)
        self._q = q
        self._norm = float(norm)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @staticmethod
    def by_axis_angle() -> QuaternionBuilderByAxisAngle:
        """Start building from an axis and an angle (radians)."""
        return QuaternionBuilderByAxisAngle()

    @staticmethod
    def by_wxyz() -> QuaternionBuilderByWXYZ:
        """Start building from raw components."""
        return QuaternionBuilderByWXYZ()

    @staticmethod
    def identity() -> 'Quaternion':
        """
        Create the identity quaternion [1, 0, 0, 0].

        The identity represents zero rotation and is the multiplicative
        identity element: q * identity = q for any quaternion q.
        """
        return Quaternion.by_wxyz().w(1.0).build()

    # =========================================================================
    # PROPERTIES - Read access to quaternion components
    # =========================================================================

    @property
    def w(self) -> float:
        """Scalar (real) part of the quaternion."""
        return float(self._q[0])

    @property
    def x(self) -> float:
        """First imaginary component (i-axis)."""
        return float(self._q[1])

    @property
    def y(self) -> float:
        """Second imaginary component (j-axis)."""
        return float(self._q[2])

    @property
    def z(self) -> float:
        """Third imaginary component (k-axis)."""
        return float(self._q[3])

    @property
    def norm(self) -> float:
        """
        Norm recorded when this quaternion was constructed.

        This is not recomputed from the current components. For builders
        with normalized(True) and for normalize() it is the magnitude before
        normalization.
        """
        return self._norm

    @property
    def scalar(self) -> float:
        """Scalar part of the quaternion (alias for w)."""
        return self.w

    @property
    def vector(self) -> np.ndarray:
        """Vector (imaginary) part [x, y, z] as a new array."""
        return self._q[1:4].copy()

    @property
    def components(self) -> np.ndarray:
        """Full quaternion [w, x, y, z] as a new array."""
        return self._q.copy()

    @property
    def rotation_angle(self) -> float:
        """
        Rotation angle in radians, in [0, pi] for a unit quaternion.

        theta = 2 * arccos(|w|). |w| is clipped to [0, 1] to absorb
        floating-point overshoot; NaN passes through.
        """
        with np.errstate(all='ignore'):
            return float(2.0 * np.arccos(np.clip(abs(self.w), 0.0, 1.0)))

    # =========================================================================
    # CONVERSIONS
    # =========================================================================

    def as_vec3(self) -> Vec3:
        """
        Project the vector part to a Vec3, discarding w.

        The magnitude is computed fresh from (x, y, z).
        """
        return (Vec3.builder()
                .x(self.x)
                .y(self.y)
                .z(self.z)
                .build())

    def to_axis_angle(self) -> Tuple[Vec3, float]:
        """
        Convert to an axis-angle pair.

        Returns
        -------
        tuple of (Vec3, float)
            Unit rotation axis and angle in radians. The axis is +Z when
            the vector part is (near) zero, where it is undefined.
        """
        vec = self.vector
        vec_norm = _euclidean_norm(vec)

        if vec_norm < AXIS_NORM_TOLERANCE:
            axis = Vec3.builder().z(1.0).build()
        else:
            axis = (Vec3.builder()
                    .x(vec[0] / vec_norm)
                    .y(vec[1] / vec_norm)
                    .z(vec[2] / vec_norm)
                    .build())

        return axis, self.rotation_angle

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def conjugate(self) -> 'Quaternion':
        """
        Return the quaternion conjugate [w, -x, -y, -z].

        For unit quaternions the conjugate equals the inverse and represents
        the reverse rotation. The result is rebuilt from raw components, so
        its norm is recomputed.
        """
        return (Quaternion.by_wxyz()
                .w(self.w)
                .x(-1.0 * self.x)
                .y(-1.0 * self.y)
                .z(-1.0 * self.z)
                .normalized(False)
                .build())

    def inverse(self) -> 'Quaternion':
        """
        Return the multiplicative inverse.

            q^{-1} = q* / |q|^2

        |q| is this quaternion's stored norm, which is also copied to the
        result. A zero norm yields Inf/NaN components.

        Returns
        -------
        Quaternion
            The inverse, such that q * q^{-1} = identity when the stored
            norm matches the components.
        """
        conj = self.conjugate()
        with np.errstate(all='ignore'):
            norm_sq = self._norm * self._norm
            inv_q = conj._q / norm_sq
        return Quaternion(inv_q, self._norm)

    def normalize(self) -> 'Quaternion':
        """
        Return this quaternion divided by its stored norm.

        The result keeps the stored norm of this quaternion, so `norm` on
        the returned value reports the magnitude before normalization.
        """
        with np.errstate(all='ignore'):
            unit_q = self._q / self._norm
        return Quaternion(unit_q, self._norm)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Multiply this quaternion by another (Hamilton product).

        Quaternion multiplication is NOT commutative: q1 * q2 != q2 * q1
        in general. The product rotates a vector first by `other` and then
        by `self`.

            (a1 + b1*i + c1*j + d1*k) * (a2 + b2*i + c2*j + d2*k) =

            (a1*a2 - b1*b2 - c1*c2 - d1*d2) +
            (a1*b2 + b1*a2 + c1*d2 - d1*c2) i +
            (a1*c2 - b1*d2 + c1*a2 + d1*b2) j +
            (a1*d2 + b1*c2 - c1*b2 + d1*a2) k

        Parameters
        ----------
        other : Quaternion
            The right-hand quaternion in the product.

        Returns
        -------
        Quaternion
            The product, never normalized, even for two unit operands.
        """
        a1, b1, c1, d1 = self.w, self.x, self.y, self.z
        a2, b2, c2, d2 = other.w, other.x, other.y, other.z

        return (Quaternion.by_wxyz()
                .w(a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2)
                .x(a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2)
                .y(a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2)
                .z(a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2)
                .normalized(False)
                .build())

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':
        """Hamilton product, self * other. Order matters."""
        if isinstance(other, Quaternion):
            return self.multiply(other)
        return NotImplemented

    def __repr__(self) -> str:
        return (f"Quaternion(w={self.w:+.8f}, x={self.x:+.8f}, "
                f"y={self.y:+.8f}, z={self.z:+.8f}, norm={self._norm:.8f})")

    def __str__(self) -> str:
        angle_deg = np.degrees(self.rotation_angle)
        return (f"[{self.w:+.6f}, {self.x:+.6f}, {self.y:+.6f}, "
                f"{self.z:+.6f}] (rot={angle_deg:.2f} deg)")

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def is_unit(self, tolerance: float = UNIT_NORM_TOLERANCE) -> bool:
        """
        Check whether the components have unit length.

        The length is recomputed from the components rather than read from
        `norm`, which may be stale.

        Parameters
        ----------
        tolerance : float
            Acceptable deviation from 1.0.
        """
        return abs(_euclidean_norm(self._q) - 1.0) < tolerance

"""
===============================================================================
QUATERNIONS - Mathematical Constants and Defaults
===============================================================================
Central repository for the constants shared by the vector and quaternion
modules and by the demonstration program. Angles are in radians throughout.
===============================================================================
"""

import numpy as np


# =============================================================================
# MATHEMATICAL CONSTANTS
# =============================================================================
PI = np.pi
DEG2RAD = PI / 180.0

# =============================================================================
# TOLERANCES
# =============================================================================
UNIT_NORM_TOLERANCE = 1e-8             # is_unit() default
AXIS_NORM_TOLERANCE = 1e-12            # below this the rotation axis is undefined

# =============================================================================
# DEMONSTRATION SCENARIO
# =============================================================================
# Rotate (2, 0, 0) by 45 degrees about +Y.
DEMO_VECTOR = (2.0, 0.0, 0.0)
DEMO_AXIS = (0.0, 1.0, 0.0)
DEMO_ANGLE = PI / 4.0                  # rad
DEMO_NORMALIZED = True
DEMO_PRECISION = 4                     # decimal places in the printed line

"""Numeric tolerances and buffer types shared by the math modules."""

import numpy as np

EPSILON = 0.000001

# Vectors shorter than this normalize to zero instead of blowing up.
NORMALIZE_EPSILON = 0.0000001

# Squared-length band in which a quaternion is treated as already unit.
QUAT_UNIT_MIN = 0.99999
QUAT_UNIT_MAX = 1.000001

# Below this sin(theta), slerp falls back to plain linear weights.
SLERP_LINEAR_THRESHOLD = 0.005

MATRIX_DTYPE = np.float32
MATRIX_DTYPE_DOUBLE = np.float64

from .math_utils import (
    Vector3,
    Quaternion,
    slerp_quat180,
    slerp_quat360,
    nlerp_quat180,
    nlerp_quat360,
    lerp_val,
    lerp_fract,
)
from .matrix import (
    new_matrix,
    as_matrix,
    identity_matrix,
    multiply_matrix,
    scale_matrix,
    translate_matrix,
    matr_lookat,
    build_projection_matrix,
    build_orthographic_matrix,
    mult_matrix_vec,
    project_matrix,
)
from .frustum import FrustumPlane, new_frustum, extract_frustum, update_frustum
from .orientation import Orientation, update_view, view_quaternion
from .polygon import pinpoly, contains
from .logging_config import setup_logging

__all__ = [
    "Vector3",
    "Quaternion",
    "slerp_quat180",
    "slerp_quat360",
    "nlerp_quat180",
    "nlerp_quat360",
    "lerp_val",
    "lerp_fract",
    "new_matrix",
    "as_matrix",
    "identity_matrix",
    "multiply_matrix",
    "scale_matrix",
    "translate_matrix",
    "matr_lookat",
    "build_projection_matrix",
    "build_orthographic_matrix",
    "mult_matrix_vec",
    "project_matrix",
    "FrustumPlane",
    "new_frustum",
    "extract_frustum",
    "update_frustum",
    "Orientation",
    "update_view",
    "view_quaternion",
    "pinpoly",
    "contains",
    "setup_logging",
]

"""Flat column-major 4x4 matrices.

A matrix is a numpy array of 16 elements where column c, row r lives at
index ``c * 4 + r``, the layout glLoadMatrixf/glUniformMatrix4fv expect.
Functions that take the buffer as their first argument write into it and
return it, so a caller can reuse one buffer per frame.
"""

import logging
import math
import numpy as np

from .config import MATRIX_DTYPE

logger = logging.getLogger(__name__)

_IDENTITY = np.array(
    [
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ],
    dtype=MATRIX_DTYPE,
)


def new_matrix(dtype=MATRIX_DTYPE):
    """Fresh identity buffer."""
    return _IDENTITY.astype(dtype)


def as_matrix(m, dtype=MATRIX_DTYPE):
    """View `m` as a flat 16-element array, without copying when possible."""
    arr = np.asarray(m, dtype=dtype)
    if arr.ndim != 1:
        arr = arr.reshape(-1)
    if arr.size != 16:
        raise ValueError(f"expected 16 matrix elements, got {arr.size}")
    return arr


def _check_buffer(m):
    if not isinstance(m, np.ndarray) or m.shape != (16,):
        raise ValueError("matrix buffer must be a numpy array of shape (16,)")
    return m


def identity_matrix(m):
    _check_buffer(m)[:] = _IDENTITY
    return m


def multiply_matrix(dst, a, b):
    """dst = a * b for column-major a and b.

    `dst` may be None, or the same buffer as `a` or `b`.
    """
    a = as_matrix(a)
    b = as_matrix(b)
    if dst is None:
        dst = new_matrix()
    _check_buffer(dst)

    out = dst
    if np.shares_memory(dst, a) or np.shares_memory(dst, b):
        out = np.empty(16, dtype=dst.dtype)

    with np.errstate(invalid="ignore", over="ignore"):
        for i in range(0, 16, 4):
            for j in range(4):
                out[i + j] = (
                    b[i] * a[j]
                    + b[i + 1] * a[j + 4]
                    + b[i + 2] * a[j + 8]
                    + b[i + 3] * a[j + 12]
                )

    if out is not dst:
        dst[:] = out
    return dst


def scale_matrix(m, xs, ys, zs):
    """Scale the first three basis columns in place."""
    _check_buffer(m)
    m[0:4] *= xs
    m[4:8] *= ys
    m[8:12] *= zs
    return m


def translate_matrix(m, xt, yt, zt):
    """Translate along the matrix's own axes, in place."""
    _check_buffer(m)
    m[12] = m[0] * xt + m[4] * yt + m[8] * zt + m[12]
    m[13] = m[1] * xt + m[5] * yt + m[9] * zt + m[13]
    m[14] = m[2] * xt + m[6] * yt + m[10] * zt + m[14]
    m[15] = m[3] * xt + m[7] * yt + m[11] * zt + m[15]
    return m


def matr_lookat(m, position, dstpos, up):
    """Replacement for gluLookAt.

    Only the rotation block, m[15] and the translation column are written;
    m[3], m[7] and m[11] keep whatever the caller had (normally identity).
    """
    if m is None:
        m = new_matrix()
    _check_buffer(m)

    fwd = (dstpos - position).normalized()
    side = fwd.cross(up).normalized()
    rup = side.cross(fwd)

    m[0] = side.x
    m[1] = rup.x
    m[2] = -fwd.x

    m[4] = side.y
    m[5] = rup.y
    m[6] = -fwd.y

    m[8] = side.z
    m[9] = rup.z
    m[10] = -fwd.z

    m[15] = 1.0

    return translate_matrix(m, -position.x, -position.y, -position.z)


def build_projection_matrix(m, nearv, farv, aspect, fov):
    """OpenGL-style perspective projection; `fov` is the full vertical angle in degrees."""
    if m is None:
        m = new_matrix()
    _check_buffer(m)
    f = m.dtype.type

    with np.errstate(divide="ignore", invalid="ignore"):
        # fov / 360 already halves the angle
        h = f(1.0) / np.tan(f(fov) * f(math.pi / 360.0))
        neg_depth = f(nearv) - f(farv)

        m[:] = 0.0
        m[0] = h / f(aspect)
        m[5] = h
        m[10] = (f(farv) + f(nearv)) / neg_depth
        m[11] = -1.0
        m[14] = f(2.0) * (f(nearv) * f(farv)) / neg_depth
    return m


def build_orthographic_matrix(m, left, right, bottom, top, nearf, farf):
    if m is None:
        m = new_matrix()
    _check_buffer(m)
    f = m.dtype.type

    with np.errstate(divide="ignore", invalid="ignore"):
        irml = f(1.0) / (f(right) - f(left))
        itmb = f(1.0) / (f(top) - f(bottom))
        ifmn = f(1.0) / (f(farf) - f(nearf))

        m[:] = 0.0
        m[0] = f(2.0) * irml
        m[5] = f(2.0) * itmb
        m[10] = f(2.0) * ifmn
        m[12] = -(f(right) + f(left)) * irml
        m[13] = -(f(top) + f(bottom)) * itmb
        m[14] = -(f(farf) + f(nearf)) * ifmn
        m[15] = 1.0
    return m


def mult_matrix_vec(matrix, vec):
    """Column-major matrix times a homogeneous 4-vector."""
    return np.asarray(vec, dtype=MATRIX_DTYPE) @ as_matrix(matrix).reshape(4, 4)


def project_matrix(objx, objy, objz, model_matrix, proj_matrix, viewport):
    """Map an object-space point to window coordinates like gluProject.

    Returns ``(winx, winy, winz)`` with winz in [0, 1], or None when the
    clip-space w is exactly zero.
    """
    obj = np.array([objx, objy, objz, 1.0], dtype=MATRIX_DTYPE)
    clip = mult_matrix_vec(proj_matrix, mult_matrix_vec(model_matrix, obj))

    if clip[3] == 0.0:
        logger.debug("project_matrix: w == 0 for (%s, %s, %s)", objx, objy, objz)
        return None

    ndc = clip[:3] / clip[3]

    # [-1, 1] -> [0, 1]
    ndc = ndc * MATRIX_DTYPE(0.5) + MATRIX_DTYPE(0.5)

    winx = ndc[0] * viewport[2] + viewport[0]
    winy = ndc[1] * viewport[3] + viewport[1]
    return float(winx), float(winy), float(ndc[2])

import logging
from enum import IntEnum

import numpy as np

from .config import MATRIX_DTYPE
from .matrix import as_matrix, multiply_matrix, new_matrix

logger = logging.getLogger(__name__)


class FrustumPlane(IntEnum):
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3
    NEAR = 4
    FAR = 5


# (sign, row) added to row 3 of the combined matrix for each plane
_PLANE_ROWS = (
    (1.0, 0),   # left
    (-1.0, 0),  # right
    (-1.0, 1),  # top
    (1.0, 1),   # bottom
    (1.0, 2),   # near
    (-1.0, 2),  # far
)


def new_frustum():
    return np.zeros((6, 4), dtype=MATRIX_DTYPE)


def normalize_plane(plane):
    """Scale a plane in place so its (a, b, c) normal has unit length."""
    with np.errstate(divide="ignore", invalid="ignore"):
        mag = MATRIX_DTYPE(1.0) / np.sqrt(
            plane[0] * plane[0] + plane[1] * plane[1] + plane[2] * plane[2]
        )
        plane *= mag
    return plane


def extract_frustum(view_projection, frustum=None):
    """Gribb-Hartmann plane extraction from a combined matrix.

    Planes come out in FrustumPlane order with normals pointing inward.
    """
    mmr = as_matrix(view_projection)
    if frustum is None:
        frustum = new_frustum()

    # row r across the four columns: mmr[r], mmr[r + 4], mmr[r + 8], mmr[r + 12]
    rows = mmr.reshape(4, 4).T
    for index, (sign, row) in enumerate(_PLANE_ROWS):
        frustum[index] = rows[3] + sign * rows[row]
        if not frustum[index, :3].any():
            logger.debug("extract_frustum: plane %s has a zero normal", FrustumPlane(index).name)
        normalize_plane(frustum[index])

    return frustum


def update_frustum(projection, modelview, frustum=None):
    """Multiply modelview with projection and extract the six planes."""
    mmr = multiply_matrix(new_matrix(), modelview, projection)
    return extract_frustum(mmr, frustum)

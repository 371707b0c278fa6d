"""Camera / object orientation with a cached rotation matrix."""

import logging

from .math_utils import Quaternion
from .matrix import new_matrix

logger = logging.getLogger(__name__)


class Orientation:

    def __init__(self, roll=0.0, pitch=0.0, yaw=0.0):
        self.roll_deg = 0.0
        self.pitch_deg = 0.0
        self.yaw_deg = 0.0
        self.matrix = new_matrix()
        self.update(roll, pitch, yaw)

    def update(self, roll, pitch, yaw):
        update_view(self, roll, pitch, yaw)
        return self

    def __repr__(self):
        return f"Orientation(roll={self.roll_deg}, pitch={self.pitch_deg}, yaw={self.yaw_deg})"


def view_quaternion(roll, pitch, yaw):
    """Rotation used by `update_view`: (X(pitch) * Z(roll)) * Y(yaw), degrees.

    Unlike `Quaternion.from_euler`, roll is applied before yaw. Saved camera
    states were produced with this order and must keep reproducing.
    """
    pitchq = Quaternion.from_axis_angle(pitch, 1.0, 0.0, 0.0)
    yawq = Quaternion.from_axis_angle(yaw, 0.0, 1.0, 0.0)
    rollq = Quaternion.from_axis_angle(roll, 0.0, 0.0, 1.0)
    return (pitchq * rollq) * yawq


def update_view(dst, roll, pitch, yaw):
    """Store the angles on `dst` and recompute its matrix from scratch."""
    dst.pitch_deg = float(pitch)
    dst.roll_deg = float(roll)
    dst.yaw_deg = float(yaw)
    view_quaternion(roll, pitch, yaw).to_matrix(out=dst.matrix)
    logger.debug("update_view: roll=%s pitch=%s yaw=%s", roll, pitch, yaw)
    return dst

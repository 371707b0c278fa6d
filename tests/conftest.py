"""Shared fixtures: fixed seed, sample quaternions and matrices."""

from __future__ import annotations

import numpy as np
import pytest

from rendermath import Quaternion, new_matrix


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    np.random.seed(12345)


@pytest.fixture()
def quat_a() -> Quaternion:
    return Quaternion.from_axis_angle(40.0, 0.0, 0.0, 1.0)


@pytest.fixture()
def quat_b() -> Quaternion:
    axis = np.array([1.0, 2.0, 2.0]) / 3.0
    return Quaternion.from_axis_angle(75.0, *axis)


@pytest.fixture()
def quat_c() -> Quaternion:
    return Quaternion.from_axis_angle(-120.0, 0.0, 1.0, 0.0)


@pytest.fixture()
def random_matrix() -> np.ndarray:
    return np.random.uniform(-5.0, 5.0, 16).astype(np.float32)


@pytest.fixture()
def identity() -> np.ndarray:
    return new_matrix()

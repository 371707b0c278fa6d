import numpy as np
import pytest

from rendermath import (
    Vector3,
    as_matrix,
    build_orthographic_matrix,
    build_projection_matrix,
    identity_matrix,
    matr_lookat,
    mult_matrix_vec,
    multiply_matrix,
    new_matrix,
    project_matrix,
    scale_matrix,
    translate_matrix,
)

EYE = np.eye(4, dtype=np.float32).reshape(16)


def translation(x, y, z):
    return translate_matrix(new_matrix(), x, y, z)


def scaling(x, y, z):
    return scale_matrix(new_matrix(), x, y, z)


def test_new_matrix_is_identity_copy():
    m = new_matrix()
    np.testing.assert_array_equal(m, EYE)
    m[0] = 5.0
    np.testing.assert_array_equal(new_matrix(), EYE)
    assert new_matrix(np.float64).dtype == np.float64


def test_identity_matrix_overwrites_buffer(random_matrix):
    result = identity_matrix(random_matrix)
    assert result is random_matrix
    np.testing.assert_array_equal(random_matrix, EYE)


def test_multiply_by_identity(random_matrix, identity):
    np.testing.assert_allclose(multiply_matrix(None, identity, random_matrix), random_matrix)
    np.testing.assert_allclose(multiply_matrix(None, random_matrix, identity), random_matrix)


def test_multiply_order_applies_b_first():
    t = translation(1, 2, 3)
    s = scaling(2, 2, 2)
    point = [1.0, 1.0, 1.0, 1.0]

    ts = multiply_matrix(None, t, s)
    np.testing.assert_allclose(mult_matrix_vec(ts, point), [3, 4, 5, 1])

    st = multiply_matrix(None, s, t)
    np.testing.assert_allclose(mult_matrix_vec(st, point), [4, 6, 8, 1])


def test_multiply_matches_column_major_matmul(random_matrix):
    other = np.random.uniform(-5.0, 5.0, 16).astype(np.float32)
    expected = (random_matrix.reshape(4, 4).T @ other.reshape(4, 4).T).T.reshape(16)
    np.testing.assert_allclose(multiply_matrix(None, random_matrix, other), expected, rtol=1e-5, atol=1e-4)


def test_multiply_into_aliased_destination(random_matrix):
    other = np.random.uniform(-5.0, 5.0, 16).astype(np.float32)
    expected = multiply_matrix(None, random_matrix.copy(), other)

    dst = random_matrix
    result = multiply_matrix(dst, dst, other)
    assert result is dst
    np.testing.assert_allclose(dst, expected)


def test_scale_matrix_scales_basis_columns():
    m = scale_matrix(new_matrix(), 2.0, 3.0, 4.0)
    np.testing.assert_array_equal(np.diag(m.reshape(4, 4)), [2, 3, 4, 1])

    filled = np.arange(16, dtype=np.float32)
    scale_matrix(filled, 2.0, 3.0, 4.0)
    np.testing.assert_array_equal(filled[0:4], [0, 2, 4, 6])
    np.testing.assert_array_equal(filled[4:8], [12, 15, 18, 21])
    np.testing.assert_array_equal(filled[8:12], [32, 36, 40, 44])
    np.testing.assert_array_equal(filled[12:16], [12, 13, 14, 15])


def test_translate_matrix_uses_current_basis():
    m = translate_matrix(new_matrix(), 1.0, 2.0, 3.0)
    np.testing.assert_array_equal(m[12:16], [1, 2, 3, 1])

    m = scale_matrix(new_matrix(), 2.0, 2.0, 2.0)
    translate_matrix(m, 1.0, 0.0, 0.0)
    translate_matrix(m, 1.0, 0.0, 0.0)
    np.testing.assert_array_equal(m[12:16], [4, 0, 0, 1])


def test_lookat_down_negative_z_is_translation_only():
    m = matr_lookat(new_matrix(), Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0))
    expected = EYE.copy()
    expected[14] = -5.0
    np.testing.assert_allclose(m, expected, atol=1e-6)


def test_lookat_basis_columns():
    position = Vector3(1, 2, 3)
    target = Vector3(4, 6, 3)
    m = matr_lookat(None, position, target, Vector3(0, 0, 1))

    fwd = Vector3(0.6, 0.8, 0.0)
    side = Vector3(0.8, -0.6, 0.0)
    up = Vector3(0.0, 0.0, 1.0)
    np.testing.assert_allclose(m[[0, 4, 8]], side.to_array(), atol=1e-6)
    np.testing.assert_allclose(m[[1, 5, 9]], up.to_array(), atol=1e-6)
    np.testing.assert_allclose(m[[2, 6, 10]], (-fwd).to_array(), atol=1e-6)

    np.testing.assert_allclose(mult_matrix_vec(m, [1, 2, 3, 1]), [0, 0, 0, 1], atol=1e-5)
    np.testing.assert_allclose(mult_matrix_vec(m, [4, 6, 3, 1]), [0, 0, -5, 1], atol=1e-5)


def test_lookat_coincident_points_collapses_rotation():
    p = Vector3(1, 1, 1)
    m = matr_lookat(new_matrix(), p, p, Vector3(0, 1, 0))
    expected = np.zeros(16, dtype=np.float32)
    expected[15] = 1.0
    np.testing.assert_array_equal(m, expected)


def test_orthographic_unit_cube_is_identity():
    m = build_orthographic_matrix(new_matrix(), -1, 1, -1, 1, -1, 1)
    np.testing.assert_array_equal(m, EYE)


def test_orthographic_screen_space():
    m = build_orthographic_matrix(None, 0, 800, 0, 600, 0, 1)
    assert m[0] == pytest.approx(2.0 / 800)
    assert m[5] == pytest.approx(2.0 / 600)
    assert m[10] == pytest.approx(2.0)
    np.testing.assert_allclose(m[12:16], [-1, -1, -1, 1])
    np.testing.assert_allclose(mult_matrix_vec(m, [800, 600, 0, 1]), [1, 1, -1, 1], atol=1e-6)


def test_perspective_matrix():
    m = build_projection_matrix(new_matrix(), 1.0, 3.0, 2.0, 90.0)
    expected = np.zeros(16, dtype=np.float32)
    expected[0] = 0.5
    expected[5] = 1.0
    expected[10] = -2.0
    expected[11] = -1.0
    expected[14] = -3.0
    np.testing.assert_allclose(m, expected, rtol=1e-6, atol=1e-6)


def test_perspective_fov_is_not_halved_twice():
    m = build_projection_matrix(None, 0.1, 100.0, 1.0, 60.0)
    assert m[5] == pytest.approx(1.0 / np.tan(np.radians(30.0)), rel=1e-6)


def test_perspective_inverted_depth_is_not_validated():
    m = build_projection_matrix(None, 3.0, 1.0, 1.0, 90.0)
    assert m[10] == pytest.approx(2.0)
    assert m[14] == pytest.approx(3.0)


def test_perspective_equal_near_far_propagates_inf():
    m = build_projection_matrix(None, 1.0, 1.0, 1.0, 90.0)
    assert np.isinf(m[10])
    assert np.isinf(m[14])


def test_project_identity_maps_origin_to_viewport_center(identity):
    win = project_matrix(0.0, 0.0, 0.0, identity, identity, (0, 0, 800, 600))
    assert win == pytest.approx((400.0, 300.0, 0.5))


def test_project_through_perspective():
    proj = build_projection_matrix(None, 1.0, 3.0, 1.0, 90.0)
    win = project_matrix(0.0, 0.0, -2.0, new_matrix(), proj, (10, 20, 800, 600))
    assert win == pytest.approx((410.0, 320.0, 0.75))


def test_project_fails_when_w_is_zero():
    proj = build_projection_matrix(None, 1.0, 3.0, 1.0, 90.0)
    assert project_matrix(1.0, 1.0, 0.0, new_matrix(), proj, (0, 0, 800, 600)) is None


def test_as_matrix_rejects_wrong_size():
    with pytest.raises(ValueError):
        as_matrix(np.zeros(15))
    np.testing.assert_array_equal(as_matrix(np.eye(4)), EYE)


def test_in_place_functions_require_numpy_buffer():
    with pytest.raises(ValueError):
        identity_matrix([0.0] * 16)
    with pytest.raises(ValueError):
        translate_matrix(np.zeros((4, 4), dtype=np.float32), 1, 2, 3)

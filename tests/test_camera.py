import numpy as np
import pytest

from vexengine.camera import OrthographicCamera, ortho


def test_ortho_maps_bounds_to_clip_corners():
    m = ortho(-2.0, 2.0, -1.0, 1.0, -1.0, 1.0)
    np.testing.assert_allclose(m @ [2.0, 1.0, 0.0, 1.0], [1.0, 1.0, 0.0, 1.0])
    np.testing.assert_allclose(m @ [-2.0, -1.0, 0.0, 1.0], [-1.0, -1.0, 0.0, 1.0])


def test_ortho_maps_near_and_far():
    m = ortho(0.0, 10.0, 0.0, 5.0, 1.0, 3.0)
    near = m @ [0.0, 0.0, -1.0, 1.0]
    far = m @ [10.0, 5.0, -3.0, 1.0]
    np.testing.assert_allclose(near, [-1.0, -1.0, -1.0, 1.0])
    np.testing.assert_allclose(far, [1.0, 1.0, 1.0, 1.0])


def test_ortho_rejects_degenerate_bounds():
    with pytest.raises(ValueError):
        ortho(1.0, 1.0, -1.0, 1.0, -1.0, 1.0)


def test_new_camera_has_identity_view():
    cam = OrthographicCamera(-1.6, 1.6, -0.9, 0.9)
    np.testing.assert_allclose(cam.view_matrix, np.identity(4))
    np.testing.assert_allclose(cam.projection_matrix, ortho(-1.6, 1.6, -0.9, 0.9, -1.0, 1.0))
    np.testing.assert_allclose(cam.view_projection_matrix, cam.projection_matrix)
    assert cam.rotation == 0.0
    np.testing.assert_allclose(cam.position, [0.0, 0.0, 0.0])


def test_camera_position_maps_to_origin():
    cam = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
    cam.position = (0.5, -0.25, 0.0)
    centre = cam.view_projection_matrix @ [0.5, -0.25, 0.0, 1.0]
    np.testing.assert_allclose(centre, [0.0, 0.0, 0.0, 1.0], atol=1e-12)


def test_rotated_camera_keeps_position_at_centre_and_preserves_distance():
    cam = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
    cam.position = (1.0, 2.0, 0.0)
    cam.rotation = 37.0
    assert cam.rotation == pytest.approx(37.0)
    np.testing.assert_allclose(cam.view_matrix @ [1.0, 2.0, 0.0, 1.0], [0.0, 0.0, 0.0, 1.0], atol=1e-12)
    moved = cam.view_matrix @ [1.3, 2.4, 0.0, 1.0]
    assert np.linalg.norm(moved[:3]) == pytest.approx(np.linalg.norm([0.3, 0.4]))


def test_set_projection_keeps_view():
    cam = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
    cam.position = (0.2, 0.1, 0.0)
    view = cam.view_matrix.copy()
    cam.set_projection(-3.0, 3.0, -2.0, 2.0)
    np.testing.assert_allclose(cam.view_matrix, view)
    expected = ortho(-3.0, 3.0, -2.0, 2.0, -1.0, 1.0)
    np.testing.assert_allclose(cam.projection_matrix, expected)
    np.testing.assert_allclose(cam.view_projection_matrix, expected @ view)


def test_matrices_are_read_only():
    cam = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
    with pytest.raises(ValueError):
        cam.view_matrix[0, 0] = 5.0
    with pytest.raises(ValueError):
        cam.position[0] = 5.0
    assert cam.view_matrix[0, 0] == 1.0
    assert cam.position[0] == 0.0


def test_position_requires_three_components():
    cam = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
    with pytest.raises(ValueError):
        cam.position = (1.0, 2.0)
    np.testing.assert_allclose(cam.position, [0.0, 0.0, 0.0])
    np.testing.assert_allclose(cam.view_matrix, np.identity(4))
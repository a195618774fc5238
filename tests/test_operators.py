import pytest
import numpy as np
from shapeforge import circle, rectangle, Group, Compositor, Operator, X, Y, Z
from shapeforge.api.core import rotation_matrix

@pytest.fixture
def shape():
    return rectangle(size=(1, 2)).extrude(3)

def test_translate_api_and_callable(shape):
    offset = np.array([1, 2, 3])
    t_shape = shape.translate(offset)
    t_op = shape + offset
    assert isinstance(t_shape, Operator)
    assert t_shape.op_type == 'transform'
    assert t_shape.func_name == 'opTranslate'
    point = np.array([[1.1, 2.2, 3.3]])
    expected = shape.to_callable()(point - offset)
    assert np.allclose(t_shape.to_callable()(point), expected)
    assert np.allclose(t_op.to_callable()(point), expected)

def test_rotate_callable():
    bar = rectangle(size=(4, 1)).extrude(1)
    r_callable = bar.rotate(Z, np.pi / 2).to_callable()
    assert r_callable(np.array([[0, 1.9, 0]]))[0] < 0
    assert r_callable(np.array([[1.9, 0, 0]]))[0] > 0

def test_rotate_zero_axis_fails(shape):
    with pytest.raises(ValueError, match="zero vector"):
        shape.rotate((0, 0, 0), 1.0)

def test_rotation_matrix_is_right_handed():
    assert np.allclose(rotation_matrix(Z, np.pi / 2) @ X, Y)
    assert np.allclose(rotation_matrix(X, np.pi / 2) @ Y, Z)

def test_transform_matches_translate(shape, random_points):
    m = np.eye(4)
    m[:3, 3] = (1, -2, 0.5)
    assert np.allclose(shape.transform(m).to_callable()(random_points),
                       shape.translate((1, -2, 0.5)).to_callable()(random_points))

def test_transform_matches_rotate(shape, random_points):
    m = np.eye(4)
    m[:3, :3] = rotation_matrix((1, 1, 0), 0.7)
    assert np.allclose(shape.transform(m).to_callable()(random_points),
                       shape.rotate((1, 1, 0), 0.7).to_callable()(random_points))

def test_transform_requires_4x4(shape):
    with pytest.raises(ValueError, match="4x4"):
        shape.transform(np.eye(3))

def test_extrude_callable():
    c_callable = circle(radius=1.0).extrude(height=1.0).to_callable()
    points = np.array([[0,0,0], [1,0,0.5], [0,0,1]])
    d = np.linalg.norm(points[:, :2], axis=-1) - 1.0
    w = np.stack([d, np.abs(points[:, 2]) - 0.5], axis=-1)
    expected = np.minimum(np.maximum(w[:,0], w[:,1]), 0.0) + np.linalg.norm(np.maximum(w, 0.0), axis=-1)
    assert np.allclose(c_callable(points), expected)

def test_uncentered_extrude_starts_at_zero():
    e_callable = rectangle(2).extrude(4, center=False).to_callable()
    assert e_callable(np.array([[0, 0, 3.5]]))[0] < 0
    assert e_callable(np.array([[0, 0, -0.5]]))[0] > 0

def test_tapered_extrude_scales_profile():
    e_callable = rectangle(2).extrude(2, scale=0.5).to_callable()
    # Half width is 1 at the bottom and 0.5 at the top.
    assert e_callable(np.array([[0.9, 0, -0.9]]))[0] < 0
    assert e_callable(np.array([[0.9, 0, 0.9]]))[0] > 0

def test_polygon_circle_vertices_lie_on_radius():
    p_callable = circle(radius=2.0, segments=6).to_profile_callable()
    angles = np.radians(np.arange(0, 360, 60))
    vertices = np.stack([2 * np.cos(angles), 2 * np.sin(angles), np.zeros(6)], axis=-1)
    assert np.allclose(p_callable(vertices), 0.0, atol=1e-9)
    apothem = 2 * np.cos(np.pi / 6)
    edge_mid = np.array([[apothem * np.cos(np.pi / 6), apothem * np.sin(np.pi / 6), 0]])
    assert np.allclose(p_callable(edge_mid), 0.0, atol=1e-9)
    assert np.isclose(p_callable(np.zeros((1, 3)))[0], -apothem)

def test_circle_needs_three_segments():
    with pytest.raises(ValueError):
        circle(1.0, segments=2)

def test_revolve_callable():
    rev_callable = rectangle(size=(0.4, 1.0)).translate(X).revolve().to_callable()
    prof_callable = rectangle(size=(0.4, 1.0)).translate(X).to_profile_callable()
    points_3d = np.array([[1.2, 0, 0.2], [0, 0.8, -0.4], [-1.0, 0, 0.6]])
    points_2d = np.stack([np.linalg.norm(points_3d[:, :2], axis=-1), points_3d[:, 2], np.zeros(len(points_3d))], axis=-1)
    expected = prof_callable(points_2d)
    assert np.allclose(rev_callable(points_3d), expected)

def test_boolean_operations(random_points):
    a = circle(3).extrude(2)
    b = rectangle(4).extrude(6)
    da, db = a.to_callable()(random_points), b.to_callable()(random_points)
    assert np.allclose((a | b).to_callable()(random_points), np.minimum(da, db))
    assert np.allclose((a & b).to_callable()(random_points), np.maximum(da, db))
    assert np.allclose((a - b).to_callable()(random_points), np.maximum(da, -db))

def test_group_is_union(random_points):
    a, b = circle(1).extrude(1), rectangle(1).extrude(1).translate((3, 0, 0))
    g = Group(a, b)
    assert isinstance(g, Compositor)
    assert np.allclose(g.to_callable()(random_points), (a | b).to_callable()(random_points))

def test_empty_group_is_far_away(random_points):
    assert np.all(Group().to_callable()(random_points) >= 1e9)

def test_unknown_compositor_op():
    with pytest.raises(ValueError, match="Unknown operation type"):
        Compositor([circle(1)], op_type='xor')

def test_unknown_operator_type(shape):
    with pytest.raises(ValueError, match="Unknown OpType"):
        Operator(shape, 'warp', 'opWarp', []).to_callable()

def test_transform_without_inverse_fails(shape):
    with pytest.raises(TypeError, match="no inverse"):
        Operator(shape, 'transform', 'opMystery', []).to_callable()

def test_estimate_bounds_no_object_found():
    s = rectangle(1).extrude(1).translate((100, 100, 100))
    search_bounds = ((-2, -2, -2), (2, 2, 2))
    assert s.estimate_bounds(search_bounds=search_bounds, verbose=False) == search_bounds

def test_estimate_bounds_reports_progress(capsys):
    rectangle(1).extrude(1).estimate_bounds(resolution=8, verbose=True)
    assert "INFO: Estimating bounds" in capsys.readouterr().err

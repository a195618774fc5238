import pytest
import numpy as np
from shapeforge import scalar_vec3, get_radius, UniformSize, TaperedSize, ConfigurationError
from shapeforge.api.sizing import as_size

def test_scalar_expands_to_all_axes():
    assert np.allclose(scalar_vec3(5), (5, 5, 5))
    assert np.allclose(scalar_vec3(2.5), (2.5, 2.5, 2.5))

def test_full_vector_is_kept():
    assert np.allclose(scalar_vec3((1, 2, 3)), (1, 2, 3))
    assert np.allclose(scalar_vec3(np.array([4.0, 5.0, 6.0])), (4, 5, 6))

def test_partial_vector_repeats_x_by_default():
    assert np.allclose(scalar_vec3([20, 40]), (20, 40, 20))
    assert np.allclose(scalar_vec3([7]), (7, 7, 7))

def test_partial_vector_uses_supplied_default():
    assert np.allclose(scalar_vec3([20, 40], default=1), (20, 40, 1))
    assert np.allclose(scalar_vec3([3], default=0), (3, 0, 0))

def test_zero_size_is_allowed():
    assert np.allclose(scalar_vec3(0), (0, 0, 0))
    assert np.allclose(scalar_vec3([0, 5, 0]), (0, 5, 0))

@pytest.mark.parametrize("bad", [
    -1, [1, -2, 3], "abc", [], [1, 2, 3, 4], True, [[1, 2, 3]],
    np.array([[1, 2, 3]]), [1, float('nan'), 3], float('inf'), None,
])
def test_invalid_sizes_are_rejected(bad):
    with pytest.raises(ConfigurationError):
        scalar_vec3(bad)

def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        scalar_vec3(-3)

def test_radius_wins_over_diameter():
    # Legacy precedence rule: a conflicting diameter is ignored, not reported.
    assert get_radius(r=5, d=100) == 5
    assert get_radius(r1=2, d1=100) == 2

def test_diameter_is_halved():
    assert get_radius(d=10) == 5
    assert get_radius(d1=3) == 1.5

def test_default_is_used_when_nothing_given():
    assert get_radius(default=1) == 1

def test_end_specific_values_win():
    assert get_radius(r1=2, r=5) == 2
    assert get_radius(d1=4, d=100) == 2
    assert get_radius(r=3, d1=100) == 3

def test_zero_radius_is_valid():
    assert get_radius(r=0) == 0

@pytest.mark.parametrize("kwargs", [
    {}, {'r': -1}, {'d': -4}, {'default': -1}, {'r': '5'}, {'d': float('nan')}, {'r': True},
])
def test_unresolvable_or_invalid_radius(kwargs):
    with pytest.raises(ConfigurationError):
        get_radius(**kwargs)

def test_as_size_picks_variant():
    assert isinstance(as_size(10), UniformSize)
    assert isinstance(as_size((2, 2, 5), (2, 2, 5)), UniformSize)
    tapered = as_size((4, 4, 10), (2, 2, 10))
    assert isinstance(tapered, TaperedSize)
    assert np.allclose(tapered.envelope, (4, 4, 10))

def test_tapered_envelope_is_componentwise_max():
    t = TaperedSize((2, 6, 3), (4, 1, 3))
    assert np.allclose(t.envelope, (4, 6, 3))

def test_tapered_sizes_must_share_height():
    with pytest.raises(ConfigurationError, match="share a height"):
        TaperedSize((2, 2, 3), (2, 2, 4))

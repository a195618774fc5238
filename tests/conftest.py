import pytest
import numpy as np

@pytest.fixture
def random_points():
    """A reproducible cloud of points around the origin."""
    rng = np.random.default_rng(1234)
    return rng.uniform(-20, 20, size=(200, 3))

@pytest.fixture
def sampled_bounds():
    """
    Estimates bounds on a unit-spaced grid without padding, so each reported
    face lies at most one grid step outside the true one.
    """
    def _sampler(sdf_obj, extent=30):
        resolution = 2 * extent + 1
        search = ((-extent,) * 3, (extent,) * 3)
        min_b, max_b = sdf_obj.estimate_bounds(resolution=resolution, search_bounds=search, padding=0.0, verbose=False)
        return np.array(min_b), np.array(max_b)
    return _sampler

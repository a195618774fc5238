import numpy as np
from abc import ABC, abstractmethod
import sys

X, Y, Z = np.array([1,0,0]), np.array([0,1,0]), np.array([0,0,1])

def _cartesian_product(*arrays):
    la = len(arrays); dtype = np.result_type(*arrays)
    arr = np.empty([len(a) for a in arrays] + [la], dtype=dtype)
    for i, a in enumerate(np.ix_(*arrays)): arr[...,i] = a
    return arr.reshape(-la, la)

def rotation_matrix(axis, angle: float) -> np.ndarray:
    """Returns the 3x3 matrix rotating by `angle` radians about `axis`."""
    ax = np.array(axis, dtype=float)
    if np.linalg.norm(ax) == 0: raise ValueError("Rotation axis cannot be zero vector")
    ax /= np.linalg.norm(ax)
    c, s = np.cos(angle), np.sin(angle)
    kx, ky, kz = ax
    K = np.array([[0, -kz, ky], [kz, 0, -kx], [-ky, kx, 0]])
    return np.eye(3) + s * K + (1 - c) * (K @ K)


class SDFNode(ABC):
    """Abstract base class for all SDF objects in the scene graph."""

    def __init__(self):
        super().__init__()
        if not hasattr(self, 'child'):
            self.child = None

    @abstractmethod
    def to_callable(self):
        """
        Returns a Python function that takes a NumPy array of points (N, 3)
        and returns an array of distances (N,).
        """
        raise NotImplementedError

    def to_profile_callable(self):
        """Returns a callable for the 2D profile of this object (ignoring Z)."""
        return self.to_callable()

    def estimate_bounds(self, resolution=64, search_bounds=((-5, -5, -5), (5, 5, 5)), padding=0.1, verbose=True):
        """Estimates the bounding box of the SDF object by sampling a grid."""
        if verbose:
            print(f"INFO: Estimating bounds with {resolution**3} samples...", file=sys.stderr)

        sdf_callable = self.to_callable()
        axes = [np.linspace(search_bounds[0][i], search_bounds[1][i], resolution) for i in range(3)]
        points_grid = _cartesian_product(*axes).astype('f8')

        distances = sdf_callable(points_grid)
        inside_mask = distances <= 1e-4
        inside_points = points_grid[inside_mask]

        if inside_points.shape[0] < 2:
            if verbose:
                print(f"WARNING: No object surface found within the search bounds {search_bounds}.", file=sys.stderr)
            return search_bounds

        min_coords = np.min(inside_points, axis=0)
        max_coords = np.max(inside_points, axis=0)
        step_size = np.array([(search_bounds[1][i] - search_bounds[0][i]) / (resolution - 1) for i in range(3)])
        min_coords -= step_size
        max_coords += step_size
        size = max_coords - min_coords
        size[size < 1e-6] = padding
        min_coords -= size * padding
        max_coords += size * padding
        return (tuple(min_coords), tuple(max_coords))

    def union(self, *others) -> 'SDFNode':
        from .compositors import Compositor
        return Compositor(children=[self] + list(others), op_type='union')

    def intersection(self, *others) -> 'SDFNode':
        from .compositors import Compositor
        return Compositor(children=[self] + list(others), op_type='intersection')

    def difference(self, other) -> 'SDFNode':
        from .compositors import Compositor
        return Compositor(children=[self, other], op_type='difference')

    def __or__(self, other): return self.union(other)
    def __and__(self, other): return self.intersection(other)
    def __sub__(self, other): return self.difference(other)

    def transform(self, matrix) -> 'SDFNode':
        """Applies a 4x4 affine matrix, mapping local points to world points."""
        from .operators import Operator
        m = np.array(matrix, dtype=float)
        if m.shape != (4, 4):
            raise ValueError(f"Affine transform must be a 4x4 matrix, got shape {m.shape}")
        inv = np.linalg.inv(m)
        lin, off = inv[:3, :3], inv[:3, 3]
        return Operator(self, 'transform', "opAffine", [m], inverse_func=lambda p: p @ lin.T + off)

    def translate(self, offset) -> 'SDFNode':
        from .operators import Operator
        off = np.array(offset, dtype=float)
        return Operator(self, 'transform', "opTranslate", [off], inverse_func=lambda p: p - off)

    def rotate(self, axis, angle: float) -> 'SDFNode':
        from .operators import Operator
        rot = rotation_matrix(axis, angle)
        # Row vectors: p @ rot applies the inverse rotation.
        return Operator(self, 'transform', "opRotateAxis", [np.array(axis, dtype=float), angle], inverse_func=lambda p: p @ rot)

    def __add__(self, offset): return self.translate(offset)

    def extrude(self, height: float, scale: float = 1.0, base_scale: float = 1.0, center: bool = True) -> 'SDFNode':
        """
        Linearly extrudes a 2D profile along Z.

        Args:
            height (float): Total extrusion height.
            scale (float, optional): Profile scale at the top. Defaults to 1.0.
            base_scale (float, optional): Profile scale at the bottom. Defaults to 1.0.
            center (bool, optional): Centers the extrusion on z=0, otherwise it
                                     spans [0, height]. Defaults to True.
        """
        from .operators import Operator
        return Operator(self, 'extrude', "opExtrude", [height, base_scale, scale, center])

    def revolve(self, convexity: int = 2) -> 'SDFNode':
        """Revolves an XY profile a full turn about the Z axis (profile X is the radius)."""
        from .operators import Operator
        return Operator(self, 'revolve', "opRevolve", [convexity])

import itertools
import numpy as np
from .utils import ConfigurationError

AXIS_NAMES = (('left', 'right'), ('front', 'back'), ('bottom', 'top'))

class Connector:
    """
    A named attachment frame: a position, an outward unit direction and a roll
    angle (radians) about that direction.
    """
    def __init__(self, name: str, position, direction, roll: float = 0.0):
        self.name = name
        self.position = np.array(position, dtype=float)
        self.direction = np.array(direction, dtype=float)
        self.roll = float(roll)

    def transformed(self, placement) -> 'Connector':
        """Maps this connector through a Placement."""
        return Connector(self.name, placement.apply_point(self.position),
                         placement.apply_direction(self.direction), self.roll)

    def __eq__(self, other):
        return (isinstance(other, Connector) and self.name == other.name
                and np.allclose(self.position, other.position)
                and np.allclose(self.direction, other.direction)
                and np.isclose(self.roll, other.roll))

    def __repr__(self):
        return f"Connector({self.name!r}, position={tuple(np.round(self.position, 9))}, direction={tuple(np.round(self.direction, 9))}, roll={self.roll})"


def _anchor_vector(vector) -> np.ndarray:
    v = np.array(vector, dtype=float)
    if v.shape != (3,) or not np.any(v):
        raise ConfigurationError(f"Anchor must be a non-zero 3-vector, got {vector!r}")
    return v

def anchor_name(vector) -> str:
    """Canonical name of an anchor vector, vertical component first (e.g. 'top+left+front')."""
    v = np.sign(np.array(vector, dtype=float)).astype(int)
    parts = []
    for axis in (2, 0, 1):
        if v[axis] != 0:
            parts.append(AXIS_NAMES[axis][1 if v[axis] > 0 else 0])
    return '+'.join(parts) if parts else 'center'

def anchor_vectors(include_edges: bool = True):
    """Yields the non-zero anchor vectors, faces first."""
    vectors = [np.array(v) for v in itertools.product((-1, 0, 1), repeat=3) if any(v)]
    vectors.sort(key=lambda v: (int(np.count_nonzero(v)), tuple(-v[[2, 0, 1]])))
    for v in vectors:
        if include_edges or np.count_nonzero(v) == 1:
            yield v


class BoxConnectors:
    """Face centers (and, for cubes, edge midpoints and corners) of a box."""

    def __init__(self, size, include_edges: bool = True):
        self.half = np.array(size, dtype=float) / 2.0
        self.include_edges = include_edges

    def anchor(self, vector) -> Connector:
        v = _anchor_vector(vector)
        return Connector(anchor_name(v), v * self.half, v / np.linalg.norm(v))

    def named(self) -> dict:
        return {anchor_name(v): self.anchor(v) for v in anchor_vectors(self.include_edges)}


class CylinderConnectors:
    """End-cap centers and side points of a (possibly tapered) cylinder."""
    _SIDES = (('right', 0.0), ('back', 90.0), ('left', 180.0), ('front', 270.0))

    def __init__(self, r1: float, r2: float, length: float):
        self.r1, self.r2, self.length = float(r1), float(r2), float(length)

    def side(self, angle: float, name: str = None) -> Connector:
        """Connector on the side wall at mid-height, `angle` in degrees from +X toward +Y."""
        a = np.radians(angle)
        radial = np.array([np.cos(a), np.sin(a), 0.0])
        r_mid = (self.r1 + self.r2) / 2.0
        if self.length > 0:
            normal = radial + np.array([0.0, 0.0, (self.r1 - self.r2) / self.length])
        else:
            normal = radial
        normal /= np.linalg.norm(normal)
        return Connector(name or f"side{angle:g}", radial * r_mid, normal, roll=a)

    def anchor(self, vector) -> Connector:
        v = _anchor_vector(vector)
        half = self.length / 2.0
        if v[0] == 0 and v[1] == 0:
            sign = np.sign(v[2])
            return Connector(anchor_name(v), (0, 0, sign * half), (0, 0, sign))
        angle = np.degrees(np.arctan2(v[1], v[0]))
        if v[2] == 0:
            return self.side(angle, anchor_name(v))
        # Rim point on the top or bottom edge.
        radial = np.array([v[0], v[1], 0.0]) / np.linalg.norm(v[:2])
        r_end = self.r2 if v[2] > 0 else self.r1
        position = radial * r_end + np.array([0.0, 0.0, np.sign(v[2]) * half])
        return Connector(anchor_name(v), position, v / np.linalg.norm(v), roll=np.radians(angle))

    def named(self) -> dict:
        half = self.length / 2.0
        result = {
            'top': Connector('top', (0, 0, half), (0, 0, 1)),
            'bottom': Connector('bottom', (0, 0, -half), (0, 0, -1)),
        }
        for name, angle in self._SIDES:
            result[name] = self.side(angle, name)
        return result


class SphereConnectors:
    """Surface points of a sphere, addressed by anchor direction or spherical angles."""

    def __init__(self, radius: float):
        self.radius = float(radius)

    def surface(self, azimuth: float, polar: float, name: str = None) -> Connector:
        """
        Connector on the surface.

        Args:
            azimuth (float): Degrees from +X toward +Y.
            polar (float): Degrees from +Z (0 is the top pole, 180 the bottom).
        """
        az, pol = np.radians(azimuth), np.radians(polar)
        direction = np.array([np.sin(pol) * np.cos(az), np.sin(pol) * np.sin(az), np.cos(pol)])
        return Connector(name or f"surface{azimuth:g},{polar:g}", direction * self.radius, direction, roll=az)

    def anchor(self, vector) -> Connector:
        v = _anchor_vector(vector)
        direction = v / np.linalg.norm(v)
        return Connector(anchor_name(v), direction * self.radius, direction)

    def named(self) -> dict:
        return {anchor_name(v): self.anchor(v) for v in anchor_vectors()}


def connectors_for(kind: str, size, r1=None, r2=None):
    """Selects the connector set for a geometry kind, in the solid's local frame."""
    envelope = np.array(size, dtype=float)
    if kind == 'cube':
        return BoxConnectors(envelope)
    if kind == 'generic':
        return BoxConnectors(envelope, include_edges=False)
    if kind == 'cylinder':
        r1 = envelope[0] / 2.0 if r1 is None else r1
        r2 = r1 if r2 is None else r2
        return CylinderConnectors(r1, r2, envelope[2])
    if kind == 'sphere':
        return SphereConnectors(envelope.max() / 2.0 if r1 is None else r1)
    raise ConfigurationError(f"Unknown geometry kind '{kind}'. Use 'cube', 'cylinder', 'sphere' or 'generic'.")

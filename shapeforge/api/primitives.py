import numpy as np
from .core import SDFNode
from .placement import orient_and_align, ORIENT_Z, ALLNEG, BOTTOM, CENTER
from .segments import current_smoothness, segment_count
from .sizing import scalar_vec3, get_radius
from .utils import ConfigurationError, _as_float

# --- 2D Profiles ---

class Circle(SDFNode):
    def __init__(self, radius: float = 1.0, segments: int = None):
        super().__init__()
        self.radius = radius
        self.segments = segments
    def to_profile_callable(self):
        r, n = self.radius, self.segments
        if n is None:
            return lambda p: np.linalg.norm(p[:, :2], axis=-1) - r
        # Regular polygon with vertices on the circle, the first one on +X.
        an = np.pi / n
        half_edge = r * np.sin(an)
        def _callable(p):
            length = np.linalg.norm(p[:, :2], axis=-1)
            b = np.mod(np.arctan2(p[:, 1], p[:, 0]), 2 * an) - an
            qx = length * np.cos(b) - r * np.cos(an)
            qy = length * np.abs(np.sin(b)) - half_edge
            qy = qy + np.clip(-qy, 0.0, half_edge)
            return np.hypot(qx, qy) * np.sign(qx)
        return _callable
    def to_callable(self):
        profile = self.to_profile_callable()
        return lambda p: np.maximum(profile(p), np.abs(p[:, 2]) - 0.001)

def circle(radius: float = 1.0, segments: int = None) -> SDFNode:
    """
    Creates a 2D circle in the XY plane.
    By default, this renders as a thin disc in 3D.
    Use .extrude() to create a cylinder.

    Args:
        radius (float): Radius of the circle.
        segments (int, optional): Approximates the circle with a regular
                                  polygon of this many sides. Defaults to an
                                  exact circle.
    """
    if segments is not None and segments < 3:
        raise ConfigurationError(f"A circle needs at least 3 segments, got {segments}")
    return Circle(radius, segments)

class Rectangle(SDFNode):
    def __init__(self, size: tuple = (1.0, 1.0)):
        super().__init__()
        self.size = np.array(size, dtype=float)
    def to_profile_callable(self):
        half = self.size / 2.0
        def _callable(p):
            q = np.abs(p[:, :2]) - half
            return np.linalg.norm(np.maximum(q, 0), axis=-1) + np.minimum(np.max(q, axis=-1), 0)
        return _callable
    def to_callable(self):
        profile = self.to_profile_callable()
        return lambda p: np.maximum(profile(p), np.abs(p[:, 2]) - 0.001)

def rectangle(size=1.0) -> SDFNode:
    """
    Creates a 2D rectangle in the XY plane, centered on the origin.
    By default, this renders as a thin plate in 3D.
    Use .extrude() to create a box.

    Args:
        size (float or tuple): Size of the rectangle.
    """
    if isinstance(size, (int, float)):
        size = (size, size)
    return Rectangle(tuple(size))

# --- Placed Solids ---

def _smoothness(fn, fa, fs):
    return current_smoothness().replace(fn=fn, fa=fa, fs=fs)

def cube(size=1.0, center: bool = None, orient=ORIENT_Z, align=None, children=()):
    """
    Creates a box.

    Args:
        size (float or tuple, optional): A float creates a cube; a 2- or
                                         3-vector gives (x, y, z) with a
                                         missing z equal to x. Defaults to 1.0.
        center (bool, optional): Legacy override of `align`. True centers the
                                 box, False puts its -X-Y-Z corner on the origin.
        orient (optional): Direction the box's local +Z is turned to.
        align (optional): Face/edge/corner placed on the origin. Defaults to
                          the -X-Y-Z corner.
        children (iterable, optional): Geometry moved with the box.
    """
    s = scalar_vec3(size)
    body = rectangle((s[0], s[1])).extrude(s[2], center=True)
    return orient_and_align(body, s, orient=orient, align=align, center=center,
                            noncentered=ALLNEG, kind='cube', children=children)

def cylinder(h=None, r=None, r1=None, r2=None, d=None, d1=None, d2=None, l=None,
             center: bool = None, orient=ORIENT_Z, align=None, children=(),
             fn=None, fa=None, fs=None):
    """
    Creates a cylinder or cone along local Z.

    Args:
        h (float, optional): Height. `l` is accepted as an alias. Defaults to 1.
        r, d (float, optional): Radius or diameter of both ends. Defaults to r=1.
        r1, d1 (float, optional): Bottom radius or diameter.
        r2, d2 (float, optional): Top radius or diameter.
        center (bool, optional): Legacy override of `align`. True centers the
                                 cylinder, False sits it on the origin.
        orient (optional): Direction the axis is turned to.
        align (optional): Face/edge placed on the origin. Defaults to the
                          bottom center.
        children (iterable, optional): Geometry moved with the cylinder.
        fn, fa, fs (optional): Smoothness overrides for this call.
    """
    rad1 = get_radius(r1=r1, r=r, d1=d1, d=d, default=1)
    rad2 = get_radius(r1=r2, r=r, d1=d2, d=d, default=1)
    length = _as_float(h if h is not None else (l if l is not None else 1), 'h' if h is not None else 'l')
    if length < 0:
        raise ConfigurationError(f"Cylinder height must be non-negative, got {length}")
    segments = segment_count(max(rad1, rad2), _smoothness(fn, fa, fs))

    r_max = max(rad1, rad2)
    if r_max > 0:
        body = circle(r_max, segments).extrude(length, scale=rad2 / r_max, base_scale=rad1 / r_max, center=True)
    else:
        body = circle(0.0, segments).extrude(length, center=True)
    return orient_and_align(body, (2 * rad1, 2 * rad1, length), (2 * rad2, 2 * rad2, length),
                            orient=orient, align=align, center=center, noncentered=BOTTOM,
                            kind='cylinder', children=children, r1=rad1, r2=rad2)

def sphere(r=None, d=None, center: bool = None, orient=ORIENT_Z, align=None, children=(),
           fn=None, fa=None, fs=None):
    """
    Creates a sphere.

    Args:
        r, d (float, optional): Radius or diameter. Defaults to r=1.
        center (bool, optional): Legacy override of `align`; a sphere is
                                 centered either way.
        orient (optional): Direction the sphere's local +Z is turned to.
        align (optional): Face/edge/corner of its bounding cube placed on the
                          origin. Defaults to centered.
        children (iterable, optional): Geometry moved with the sphere.
        fn, fa, fs (optional): Smoothness overrides for this call.
    """
    radius = get_radius(r=r, d=d, default=1)
    segments = segment_count(radius, _smoothness(fn, fa, fs))
    # Notch away the left half so the revolved profile is a half disc; a thin
    # strip is kept across the axis so it is not a zero-width seam.
    notch = rectangle((2 * radius + 0.2, 2 * radius + 0.2)).translate((-(radius + 0.11), 0, 0))
    body = (circle(radius, segments) - notch).revolve(convexity=2)
    return orient_and_align(body, 2 * radius, orient=orient, align=align, center=center,
                            noncentered=CENTER, kind='sphere', children=children, r1=radius)

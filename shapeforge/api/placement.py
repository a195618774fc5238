"""
Alignment and orientation of primitives.

Every primitive builds its body centered on the local origin and hands it to
`orient_and_align`, which computes a single affine placement from the body's
bounding size, the requested alignment and the requested orientation. The
same placement is applied to the body, to every attached child and to the
published connectors.

Alignment codes name the face, edge or corner of the bounding box that ends up
on the origin: each axis is -1, 0 or +1. (0, 0, 0) centers the solid;
(1, 1, 1) puts its +X+Y+Z corner on the origin so the solid fills the negative
octant.

Orientation is the world direction the solid's local +Z is turned to. The
rotation is always the minimal one taking +Z onto that direction (axis
Z x d, angle acos(Z . d)); -Z is reached by a half turn about +X.
"""
import numpy as np
from .core import SDFNode, X, Y, Z, rotation_matrix
from .compositors import Group
from .connectors import AXIS_NAMES, connectors_for
from .sizing import as_size
from .utils import ConfigurationError, _as_vector

CENTER = np.array([0, 0, 0])
LEFT, RIGHT = np.array([-1, 0, 0]), np.array([1, 0, 0])
FRONT, BACK = np.array([0, -1, 0]), np.array([0, 1, 0])
BOTTOM, TOP = np.array([0, 0, -1]), np.array([0, 0, 1])
ALLNEG, ALLPOS = np.array([-1, -1, -1]), np.array([1, 1, 1])

ORIENT_X, ORIENT_Y, ORIENT_Z = X, Y, Z
ORIENT_XNEG, ORIENT_YNEG, ORIENT_ZNEG = -X, -Y, -Z

_ALIGN_NAMES = {'center': CENTER, 'allneg': ALLNEG, 'allpos': ALLPOS}
for _axis, (_neg, _pos) in enumerate(AXIS_NAMES):
    _ALIGN_NAMES[_neg] = -np.eye(3, dtype=int)[_axis]
    _ALIGN_NAMES[_pos] = np.eye(3, dtype=int)[_axis]

_ORIENT_NAMES = {
    'x': X, '+x': X, '-x': -X,
    'y': Y, '+y': Y, '-y': -Y,
    'z': Z, '+z': Z, '-z': -Z,
}

def parse_alignment(align) -> np.ndarray:
    """
    Converts an alignment code to an integer 3-vector.

    Accepts a vector with components in {-1, 0, 1}, or a name such as
    'bottom', 'center' or a '+'-joined combination like 'top+left+front'.
    """
    if isinstance(align, str):
        total = np.zeros(3, dtype=int)
        used_axes = set()
        for part in align.lower().split('+'):
            part = part.strip()
            if part not in _ALIGN_NAMES:
                raise ConfigurationError(f"Unknown alignment '{part}' in {align!r}")
            code = _ALIGN_NAMES[part]
            axes = set(np.flatnonzero(code))
            if axes & used_axes:
                raise ConfigurationError(f"Alignment {align!r} names the same axis twice")
            used_axes |= axes
            total += code
        return total
    vec = _as_vector(align, 'align')
    if not np.all(np.isin(vec, (-1.0, 0.0, 1.0))):
        raise ConfigurationError(f"Alignment components must each be -1, 0 or 1, got {tuple(vec)}")
    return vec.astype(int)

def parse_orientation(orient) -> np.ndarray:
    """Converts an orientation (axis name or direction vector) to a unit vector."""
    if isinstance(orient, str):
        key = orient.strip().lower()
        if key not in _ORIENT_NAMES:
            raise ConfigurationError(f"Unknown orientation {orient!r}. Use one of {sorted(_ORIENT_NAMES)} or a vector.")
        return _ORIENT_NAMES[key].astype(float)
    vec = _as_vector(orient, 'orient')
    norm = np.linalg.norm(vec)
    if norm == 0:
        raise ConfigurationError("Orientation vector cannot be zero length")
    return vec / norm

def resolve_alignment(align=None, center=None, noncentered=ALLNEG) -> np.ndarray:
    """
    Picks the effective alignment code.

    A `center` override wins over `align`: True centers the solid, False uses
    the primitive's `noncentered` default. With no override, `align` is used,
    falling back to `noncentered` when it is None.
    """
    if center is not None:
        if not isinstance(center, (bool, np.bool_)):
            raise ConfigurationError(f"'center' must be True, False or None, got {center!r}")
        return CENTER.copy() if center else parse_alignment(noncentered)
    if align is None:
        return parse_alignment(noncentered)
    return parse_alignment(align)

def orientation_matrix(orient) -> np.ndarray:
    """The 3x3 rotation taking local +Z onto the requested direction."""
    d = parse_orientation(orient)
    if np.allclose(d, Z):
        return np.eye(3)
    if np.allclose(d, -Z):
        return rotation_matrix(X, np.pi)
    axis = np.cross(Z, d)
    angle = np.arccos(np.clip(np.dot(Z, d), -1.0, 1.0))
    return rotation_matrix(axis, angle)


class Placement:
    """
    An affine placement: translate in the local frame, then rotate.

    World point = rotation @ (local point + translation).
    """
    def __init__(self, rotation=None, translation=(0, 0, 0)):
        self.rotation = np.eye(3) if rotation is None else np.array(rotation, dtype=float)
        self.translation = np.array(translation, dtype=float)

    @property
    def matrix(self) -> np.ndarray:
        m = np.eye(4)
        m[:3, :3] = self.rotation
        m[:3, 3] = self.rotation @ self.translation
        return m

    def apply_point(self, point) -> np.ndarray:
        return self.rotation @ (np.array(point, dtype=float) + self.translation)

    def apply_direction(self, direction) -> np.ndarray:
        return self.rotation @ np.array(direction, dtype=float)

    def __repr__(self):
        return f"Placement(rotation={self.rotation.tolist()}, translation={tuple(self.translation)})"

def compute_placement(size, orient=ORIENT_Z, align=None, center=None, noncentered=ALLNEG) -> Placement:
    """
    Computes the placement for a solid of the given bounding size.

    Args:
        size (UniformSize or TaperedSize): Bounding size of the centered body.
        orient: Direction local +Z is turned to.
        align: Alignment code or name. None uses `noncentered`.
        center (bool, optional): Legacy override of `align`.
        noncentered: The primitive's default alignment.
    """
    code = resolve_alignment(align, center, noncentered)
    rotation = orientation_matrix(orient)
    translation = -code * as_size(size).envelope / 2.0
    return Placement(rotation, translation)


class Attachable(SDFNode):
    """
    A placed primitive: its body and children moved by one Placement, and the
    connectors of the body in the same world frame.
    """
    def __init__(self, body: SDFNode, size, placement: Placement, kind: str = 'generic',
                 children=(), r1=None, r2=None):
        super().__init__()
        self.size = as_size(size)
        self.placement = placement
        self.kind = kind
        self._local_body = body
        self._local_children = tuple(children)
        self._connectors = connectors_for(kind, self.size.envelope, r1=r1, r2=r2)
        self._radii = (r1, r2)

        matrix = placement.matrix
        self.body = body.transform(matrix)
        self.children = [c.transform(matrix) for c in self._local_children]

    def to_callable(self):
        return Group(self.body, *self.children).to_callable()

    def attach(self, *children) -> 'Attachable':
        """Returns a copy with more children, expressed in this solid's local frame."""
        r1, r2 = self._radii
        return Attachable(self._local_body, self.size, self.placement, self.kind,
                          self._local_children + children, r1=r1, r2=r2)

    @property
    def connectors(self) -> dict:
        """The published connectors, by name, in world coordinates."""
        return {name: c.transformed(self.placement) for name, c in self._connectors.named().items()}

    def connector(self, name: str):
        """Looks up a connector by name, e.g. 'top' or 'bottom+left'."""
        return self.anchor(parse_alignment(name))

    def anchor(self, vector):
        """The connector at a face/edge/corner direction of the bounding box."""
        return self._connectors.anchor(vector).transformed(self.placement)

    def side(self, angle: float):
        """Side-wall connector of a cylinder at `angle` degrees around its axis."""
        if not hasattr(self._connectors, 'side'):
            raise ConfigurationError(f"'{self.kind}' solids have no side connectors")
        return self._connectors.side(angle).transformed(self.placement)

    def surface(self, azimuth: float, polar: float):
        """Surface connector of a sphere at the given spherical angles (degrees)."""
        if not hasattr(self._connectors, 'surface'):
            raise ConfigurationError(f"'{self.kind}' solids have no surface connectors")
        return self._connectors.surface(azimuth, polar).transformed(self.placement)

    @property
    def bounds(self):
        """World-space (min, max) corners of the placed bounding envelope."""
        half = self.size.envelope / 2.0
        corners = np.array([self.placement.apply_point((2 * np.array(s) - 1) * half)
                            for s in np.ndindex(2, 2, 2)])
        return (tuple(corners.min(axis=0)), tuple(corners.max(axis=0)))

def orient_and_align(body: SDFNode, size1, size2=None, orient=ORIENT_Z, align=None, center=None,
                     noncentered=ALLNEG, kind: str = 'generic', children=(), r1=None, r2=None) -> Attachable:
    """
    Places a centered body according to its size, alignment and orientation.

    Args:
        body (SDFNode): The body, centered on the origin in its natural frame.
        size1: Bounding size, or the bottom cross-section of a tapered solid.
        size2 (optional): Top cross-section of a tapered solid.
        orient: Direction the body's local +Z is turned to. Defaults to +Z.
        align: Which face/edge/corner of the bounding box lands on the origin.
        center (bool, optional): Legacy override; True centers, False uses `noncentered`.
        noncentered: Alignment used when neither `center` nor `align` is given.
        kind (str): Connector set to publish: 'cube', 'cylinder', 'sphere' or 'generic'.
        children (iterable of SDFNode): Geometry moved with the body.
        r1, r2 (float, optional): End radii for cylinder/sphere connectors.
    """
    size = as_size(size1, size2)
    placement = compute_placement(size, orient=orient, align=align, center=center, noncentered=noncentered)
    return Attachable(body, size, placement, kind=kind, children=children, r1=r1, r2=r2)

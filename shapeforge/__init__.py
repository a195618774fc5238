from .api.core import SDFNode, X, Y, Z
from .api.utils import ConfigurationError
from .api.sizing import scalar_vec3, get_radius, UniformSize, TaperedSize
from .api.segments import Smoothness, smoothness, current_smoothness, segment_count
from .api.connectors import Connector
from .api.placement import (
    orient_and_align, compute_placement, resolve_alignment, Placement, Attachable,
    CENTER, TOP, BOTTOM, LEFT, RIGHT, FRONT, BACK, ALLNEG, ALLPOS,
    ORIENT_X, ORIENT_Y, ORIENT_Z, ORIENT_XNEG, ORIENT_YNEG, ORIENT_ZNEG,
)
from .api.primitives import cube, cylinder, sphere, circle, rectangle
from .api.compositors import Group, Compositor
from .api.operators import Operator

import numpy as np
from .utils import ConfigurationError, _as_float, _is_number

def scalar_vec3(size, default: float = None) -> np.ndarray:
    """
    Expands a scalar or partial vector into a full (x, y, z) size.

    A scalar `S` becomes (S, S, S). A 1- or 2-component vector keeps the given
    components and fills the missing trailing axes with `default`, or with the
    x component when no default is supplied.

    Args:
        size (float or sequence): The scalar or 1-3 component vector.
        default (float, optional): Fill value for omitted trailing axes.

    Raises:
        ConfigurationError: On negative, non-finite or non-numeric components,
                            or on vectors that are empty or longer than 3.
    """
    if _is_number(size):
        s = _as_float(size, 'size')
        components = [s, s, s]
    elif isinstance(size, (list, tuple, np.ndarray)) and not isinstance(size, (str, bytes)):
        if isinstance(size, np.ndarray) and size.ndim != 1:
            raise ConfigurationError(f"'size' must be a scalar or flat vector, got shape {size.shape}")
        values = [_as_float(v, f"size[{i}]") for i, v in enumerate(size)]
        if not 1 <= len(values) <= 3:
            raise ConfigurationError(f"'size' must have 1 to 3 components, got {len(values)}")
        fill = values[0] if default is None else _as_float(default, 'default')
        components = values + [fill] * (3 - len(values))
    else:
        raise ConfigurationError(f"'size' must be a scalar or vector, got {size!r}")

    result = np.array(components, dtype=float)
    if np.any(result < 0):
        raise ConfigurationError(f"'size' components must be non-negative, got {tuple(result)}")
    return result

def get_radius(r1=None, r=None, d1=None, d=None, default=None) -> float:
    """
    Resolves one end's radius from radius/diameter arguments.

    Precedence is `r1`, `r`, `d1 / 2`, `d / 2`, then `default`. A radius always
    wins over a diameter given for the same end; the diameter is ignored.

    Raises:
        ConfigurationError: If nothing resolves, or the resolved value is
                            negative or not a finite number.
    """
    for value, name, factor in ((r1, 'r1', 1.0), (r, 'r', 1.0), (d1, 'd1', 0.5), (d, 'd', 0.5), (default, 'default', 1.0)):
        if value is None:
            continue
        radius = _as_float(value, name) * factor
        if radius < 0:
            raise ConfigurationError(f"Resolved radius from '{name}' must be non-negative, got {radius}")
        return radius
    raise ConfigurationError("No radius or diameter given and no default available")


class UniformSize:
    """A single bounding size shared by the bottom and top of a solid."""
    def __init__(self, size):
        self.size = scalar_vec3(size)

    @property
    def envelope(self) -> np.ndarray:
        return self.size

    def __repr__(self):
        return f"UniformSize({tuple(self.size)})"

class TaperedSize:
    """
    Distinct bottom and top cross-section sizes of a tapered solid.

    Both sizes share the same height; the envelope used for alignment is the
    componentwise maximum of the two.
    """
    def __init__(self, bottom, top):
        self.bottom = scalar_vec3(bottom)
        self.top = scalar_vec3(top)
        if not np.isclose(self.bottom[2], self.top[2]):
            raise ConfigurationError(f"Tapered sizes must share a height, got {self.bottom[2]} and {self.top[2]}")

    @property
    def envelope(self) -> np.ndarray:
        return np.maximum(self.bottom, self.top)

    def __repr__(self):
        return f"TaperedSize({tuple(self.bottom)}, {tuple(self.top)})"

def as_size(size1, size2=None):
    """Builds a UniformSize, or a TaperedSize when a distinct top size is given."""
    if isinstance(size1, (UniformSize, TaperedSize)):
        return size1
    if size2 is None:
        return UniformSize(size1)
    bottom, top = scalar_vec3(size1), scalar_vec3(size2)
    if np.allclose(bottom, top):
        return UniformSize(bottom)
    return TaperedSize(bottom, top)

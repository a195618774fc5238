import numbers
import numpy as np

class ConfigurationError(ValueError):
    """Raised when a primitive or placement argument is malformed or out of its domain."""


def _is_number(val):
    return isinstance(val, numbers.Real) and not isinstance(val, (bool, np.bool_))

def _as_float(val, name: str) -> float:
    """Converts a finite real scalar to float, or raises ConfigurationError."""
    if not _is_number(val):
        raise ConfigurationError(f"'{name}' must be a number, got {val!r}")
    val = float(val)
    if not np.isfinite(val):
        raise ConfigurationError(f"'{name}' must be finite, got {val!r}")
    return val

def _as_vector(val, name: str, length: int = 3) -> np.ndarray:
    """Converts a sequence of finite reals of the given length to a float array."""
    if isinstance(val, (str, bytes)) or not isinstance(val, (list, tuple, np.ndarray)):
        raise ConfigurationError(f"'{name}' must be a {length}-vector, got {val!r}")
    items = list(np.array(val, dtype=object).flatten()) if isinstance(val, np.ndarray) else list(val)
    if isinstance(val, np.ndarray) and val.ndim != 1:
        raise ConfigurationError(f"'{name}' must be a flat {length}-vector, got shape {val.shape}")
    if len(items) != length:
        raise ConfigurationError(f"'{name}' must have {length} components, got {len(items)}")
    return np.array([_as_float(v, f"{name}[{i}]") for i, v in enumerate(items)])

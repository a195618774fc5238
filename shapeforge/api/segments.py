import math
from contextlib import contextmanager
from contextvars import ContextVar
from .utils import ConfigurationError, _as_float

MIN_FIXED_SEGMENTS = 3
MIN_COMPUTED_SEGMENTS = 5

class Smoothness:
    """
    Circle approximation settings.

    Args:
        fn (int): Fixed number of segments. Overrides `fa` and `fs` when > 0.
        fa (float): Minimum angle (in degrees) of each segment.
        fs (float): Minimum length of each segment.
    """
    __slots__ = ('fn', 'fa', 'fs')

    def __init__(self, fn: int = 0, fa: float = 12.0, fs: float = 2.0):
        fn_val = _as_float(fn, 'fn')
        if fn_val < 0 or fn_val != int(fn_val):
            raise ConfigurationError(f"'fn' must be a non-negative integer, got {fn!r}")
        fa, fs = _as_float(fa, 'fa'), _as_float(fs, 'fs')
        if fa <= 0: raise ConfigurationError(f"'fa' must be positive, got {fa}")
        if fs <= 0: raise ConfigurationError(f"'fs' must be positive, got {fs}")
        object.__setattr__(self, 'fn', int(fn_val))
        object.__setattr__(self, 'fa', fa)
        object.__setattr__(self, 'fs', fs)

    def __setattr__(self, name, value):
        raise AttributeError("Smoothness settings are immutable; use replace()")

    def replace(self, fn=None, fa=None, fs=None) -> 'Smoothness':
        """Returns a copy with the given settings overridden."""
        return Smoothness(
            fn=self.fn if fn is None else fn,
            fa=self.fa if fa is None else fa,
            fs=self.fs if fs is None else fs,
        )

    def __eq__(self, other):
        return isinstance(other, Smoothness) and (self.fn, self.fa, self.fs) == (other.fn, other.fa, other.fs)

    def __hash__(self):
        return hash((self.fn, self.fa, self.fs))

    def __repr__(self):
        return f"Smoothness(fn={self.fn}, fa={self.fa}, fs={self.fs})"

DEFAULT_SMOOTHNESS = Smoothness()

_current = ContextVar('shapeforge_smoothness', default=DEFAULT_SMOOTHNESS)

def current_smoothness() -> Smoothness:
    """Returns the smoothness settings of the active scope."""
    return _current.get()

@contextmanager
def smoothness(fn=None, fa=None, fs=None):
    """
    Opens a nested scope with some smoothness settings overridden.

    Settings not given are inherited from the enclosing scope. The previous
    settings are restored on exit.

        with smoothness(fn=64):
            c = cylinder(r=10, h=5)
    """
    token = _current.set(_current.get().replace(fn=fn, fa=fa, fs=fs))
    try:
        yield _current.get()
    finally:
        _current.reset(token)

def segment_count(radius: float, settings: Smoothness = None) -> int:
    """
    Number of segments used to approximate a circle of the given radius.

    A fixed `fn` is used directly (at least 3). Otherwise the count is the
    larger of the angle-implied count (360 / fa) and the length-implied count
    (circumference / fs), rounded up and never below 5.
    """
    r = _as_float(radius, 'radius')
    if r < 0:
        raise ConfigurationError(f"'radius' must be non-negative, got {r}")
    settings = current_smoothness() if settings is None else settings
    if settings.fn > 0:
        return max(settings.fn, MIN_FIXED_SEGMENTS)
    by_angle = 360.0 / settings.fa
    by_length = 2 * math.pi * r / settings.fs
    return max(int(math.ceil(max(by_angle, by_length))), MIN_COMPUTED_SEGMENTS)

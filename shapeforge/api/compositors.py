import numpy as np
from functools import reduce
from .core import SDFNode

class Compositor(SDFNode):
    """
    A generic node for combining multiple SDFs.
    Unifies Boolean operations (Union, Intersection, Difference) and Groups.
    """

    _OPS = ('union', 'intersection', 'difference')

    def __init__(self, children: list, op_type: str = 'union'):
        super().__init__()
        self.children = children
        self.op_type = op_type.lower()

        if self.op_type not in self._OPS:
            raise ValueError(f"Unknown operation type: {self.op_type}")

    def _make_callable(self, child_callables):
        if not child_callables:
            return lambda p: np.full(len(p), 1e9)

        op_type = self.op_type
        if op_type == 'union':
            return lambda p: reduce(np.minimum, [c(p) for c in child_callables])
        elif op_type == 'intersection':
            return lambda p: reduce(np.maximum, [c(p) for c in child_callables])

        def _diff_hard(p):
            res = child_callables[0](p)
            for c in child_callables[1:]:
                res = np.maximum(res, -c(p))
            return res
        return _diff_hard

    def to_callable(self):
        return self._make_callable([c.to_callable() for c in self.children])

    def to_profile_callable(self):
        return self._make_callable([c.to_profile_callable() for c in self.children])

def Group(*children):
    """
    Creates a union of multiple SDF objects.
    Acts as a helper factory for Compositor.
    """
    return Compositor(list(children), op_type='union')

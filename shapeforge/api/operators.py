import numpy as np
from .core import SDFNode

class Operator(SDFNode):
    """
    A generic node for operations that alter geometry or space.
    Unifies Transform, Extrude and Revolve logic.
    """

    def __init__(self, child: SDFNode, op_type: str, func_name: str, params: list,
                 inverse_func=None):
        super().__init__()
        self.child = child
        self.op_type = op_type
        self.func_name = func_name
        self.params = params

        self.inverse_func = inverse_func

    def to_callable(self):
        return self._make_callable(profile=False)

    def to_profile_callable(self):
        return self._make_callable(profile=True)

    def _make_callable(self, profile):
        if self.op_type in ['extrude', 'revolve']:
            child_func = self.child.to_profile_callable()
        else:
            child_func = self.child.to_profile_callable() if profile else self.child.to_callable()

        if self.op_type == 'transform':
            if self.inverse_func is None: raise TypeError(f"Transform '{self.func_name}' has no inverse mapping.")
            inv_func = self.inverse_func
            return lambda p: child_func(inv_func(p))

        elif self.op_type == 'extrude':
            h, base_scale, top_scale, center = self.params
            half = h / 2.0
            def _ext(p):
                z = p[:, 2] if center else p[:, 2] - half
                if h > 0:
                    t = np.clip((z + half) / h, 0.0, 1.0)
                else:
                    t = np.full(len(p), 0.5)
                k = np.maximum(base_scale + (top_scale - base_scale) * t, 1e-12)
                p_2d = np.stack([p[:, 0] / k, p[:, 1] / k, np.zeros(len(p))], axis=-1)
                d = child_func(p_2d) * k
                w = np.stack([d, np.abs(z) - half], axis=-1)
                return np.minimum(np.maximum(w[:,0], w[:,1]), 0.0) + np.linalg.norm(np.maximum(w, 0.0), axis=-1)
            return _ext

        elif self.op_type == 'revolve':
            def _rev(p):
                r = np.linalg.norm(p[:, [0, 1]], axis=-1)
                p_2d = np.stack([r, p[:, 2], np.zeros_like(r)], axis=-1)
                return child_func(p_2d)
            return _rev

        raise ValueError(f"Unknown OpType: {self.op_type}")

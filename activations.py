# FILE: activations.py
# Sigmoid activation and its derivative.
# Both work on Python floats and on numpy arrays.

import functools

import numpy as np


def sigmoid(v):
    """
    f(v) = 1 / (1 + e^(-v)), computed from e^(-|v|) so exp never overflows.
    float64 saturates: |v| > ~37 gives exactly 1.0 (or a value near 0.0).
    """
    v = np.asarray(v, dtype=float)
    e = np.exp(-np.abs(v))
    out = np.where(v >= 0, 1.0 / (1.0 + e), e / (1.0 + e))
    return out[()] if out.ndim == 0 else out


def sigmoid_derivative(v):
    # v must already be a sigmoid OUTPUT, not the weighted sum z
    return v * (1.0 - v)


def elementwise(f):
    # f(v) -> fn(row, col, value), the form matrix_ops.map_elems calls
    @functools.wraps(f)
    def fn(i, j, v):
        return f(v)

    return fn

# FILE: matrix_ops.py
# Dense matrix primitives used by the perceptron.
# Every operation returns a new float64 matrix; the inputs are never modified.

import numpy as np
import pandas as pd


class DimensionMismatch(ValueError):
    """Operands have shapes the operation cannot combine."""

    def __init__(self, op, shape_a, shape_b=None):
        self.op = op
        self.shape_a = shape_a
        self.shape_b = shape_b
        if shape_b is None:
            msg = f"{op}: expected a 2-D matrix, got shape {shape_a}"
        else:
            msg = f"{op}: incompatible shapes {shape_a} and {shape_b}"
        super().__init__(msg)


def _as_matrix(A, op):
    # no copy when A is already a float64 ndarray
    if isinstance(A, pd.DataFrame):
        A = A.to_numpy(dtype=float)
    M = np.asarray(A, dtype=float)
    if M.ndim != 2:
        raise DimensionMismatch(op, M.shape)
    return M


def _same_shape(A, B, op):
    M = _as_matrix(A, op)
    N = _as_matrix(B, op)
    if M.shape != N.shape:
        raise DimensionMismatch(op, M.shape, N.shape)
    return M, N


def copy_as_dense(A) -> np.ndarray:
    # owned, writeable float64 copy (lists, ndarray, views, DataFrame)
    M = _as_matrix(A, "copy_as_dense")
    return np.array(M, dtype=float, copy=True, order="C")


def transpose(A) -> np.ndarray:
    # read-only view, no data is copied
    view = _as_matrix(A, "transpose").T.view()
    view.flags.writeable = False
    return view


def multiply(A, B) -> np.ndarray:
    """Matrix product A @ B; needs A.cols == B.rows."""
    M = _as_matrix(A, "multiply")
    N = _as_matrix(B, "multiply")
    if M.shape[1] != N.shape[0]:
        raise DimensionMismatch("multiply", M.shape, N.shape)
    return M @ N


def add(A, B) -> np.ndarray:
    M, N = _same_shape(A, B, "add")
    return M + N


def subtract(A, B) -> np.ndarray:
    M, N = _same_shape(A, B, "subtract")
    return M - N


def multiply_elems(A, B) -> np.ndarray:
    """Hadamard (elementwise) product."""
    M, N = _same_shape(A, B, "multiply_elems")
    return M * N


def map_elems(fn, A, vectorized=False) -> np.ndarray:
    """
    Apply fn(row, col, value) -> value to every element of A.

    fn gets plain Python numbers, one call per element. vectorized=True calls
    it once with index grids and values as arrays; only for numpy-safe fn.
    """
    M = _as_matrix(A, "map_elems")
    if not vectorized:
        out = np.empty(M.shape, dtype=float)
        for i in range(M.shape[0]):
            for j in range(M.shape[1]):
                out[i, j] = fn(i, j, float(M[i, j]))
        return out

    rows, cols = np.indices(M.shape)
    out = np.asarray(fn(rows, cols, M.copy()), dtype=float)
    if out.ndim == 0:
        out = np.full(M.shape, float(out))
    if out.shape != M.shape:
        raise ValueError(f"map_elems: fn returned shape {out.shape}, expected {M.shape}")
    return out


def concat(A, B) -> np.ndarray:
    """
    Place the columns of B to the right of A. Both must have the same shape.
    A may be None, which makes it easy to accumulate inside a loop.
    """
    if A is None:
        return copy_as_dense(B)
    M, N = _same_shape(A, B, "concat")
    return np.hstack([M, N])


def format_matrix(A, precision=4) -> str:
    M = _as_matrix(A, "format_matrix")
    lines = []
    for row in M:
        lines.append(" ".join(f"{v:.{precision}f}" for v in row))
    return "\n".join(lines)


def print_matrix(A, title=None, precision=4):
    if title:
        print(title)
    print()
    print(format_matrix(A, precision=precision))
    print()

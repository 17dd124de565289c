# FILE: init_weights.py
# Random generator factory + Kaiming (He) weight initialization.
# The generator is created once by the caller and passed in explicitly,
# so a fixed seed reproduces the whole run.

import numpy as np


def make_rng(seed=None) -> np.random.Generator:
    # seed=None -> fresh OS entropy, drawn once
    return np.random.default_rng(seed)


def kaiming_init(rows: int, cols: int, rng: np.random.Generator) -> np.ndarray:
    """
    Matrix rows x cols, independent draws from N(0, sigma^2),
    sigma = sqrt(2 / (rows * cols)).
    """
    if int(rows) != rows or int(cols) != cols:
        raise ValueError(f"kaiming_init: dimensions must be integers, got {rows}x{cols}")
    rows = int(rows)
    cols = int(cols)
    if rows < 1 or cols < 1:
        raise ValueError(f"kaiming_init: dimensions must be positive, got {rows}x{cols}")

    sigma = np.sqrt(2.0 / (rows * cols))
    return rng.normal(0.0, sigma, size=(rows, cols))

import numpy as np
import pandas as pd

from matrix_ops import DimensionMismatch, copy_as_dense

# label = first feature (x1), the other two are noise
TRAINING_INPUTS = np.array([
    [0, 0, 0],
    [0, 1, 0],
    [0, 0, 1],
    [0, 1, 1],
    [1, 0, 0],
    [1, 1, 0],
    [1, 1, 1],
], dtype=float)

TRAINING_TARGETS = np.array([[0], [0], [0], [0], [1], [1], [1]], dtype=float)

TARGET = "target"


def load_logic_dataset():
    return TRAINING_INPUTS.copy(), TRAINING_TARGETS.copy()


def shuffle(inputs, targets, rng: np.random.Generator):
    """
    Shuffle the rows of inputs and targets with the same permutation.

    Works on copies, the arguments are left untouched. rng.permutation is an
    unbiased Fisher-Yates shuffle, so every row order is equally likely.
    The generator is used as given and never reseeded.
    """
    X = copy_as_dense(inputs)
    T = copy_as_dense(targets)
    if X.shape[0] != T.shape[0]:
        raise DimensionMismatch("shuffle", X.shape, T.shape)

    order = rng.permutation(X.shape[0])
    return X[order], T[order]


def dataset_frame(inputs, targets, predictions=None) -> pd.DataFrame:
    X = copy_as_dense(inputs)
    T = copy_as_dense(targets)
    if X.shape[0] != T.shape[0]:
        raise DimensionMismatch("dataset_frame", X.shape, T.shape)

    df = pd.DataFrame(X, columns=[f"x{k + 1}" for k in range(X.shape[1])])
    df[TARGET] = T[:, 0]
    if predictions is not None:
        P = copy_as_dense(predictions)
        if P.shape[0] != X.shape[0]:
            raise DimensionMismatch("dataset_frame", X.shape, P.shape)
        df["prediction"] = P[:, 0]
    return df

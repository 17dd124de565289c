# FILE: model_perceptron.py
# Single-layer perceptron FROM SCRATCH (3 inputs -> 1 sigmoid output, no bias)
# trained with full-batch gradient descent on a small boolean dataset.
# The label is the first input bit; the network has to learn to ignore the rest.
#
# Output:
#  - metrics_perceptron.csv
#  - perceptron_history.csv
#  - perceptron_error_curve.png
#
# Run: python model_perceptron.py

import os
import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from sklearn.exceptions import NotFittedError
from sklearn.metrics import accuracy_score, mean_absolute_error, mean_squared_error

from activations import elementwise, sigmoid, sigmoid_derivative
from init_weights import kaiming_init, make_rng
from matrix_ops import add, map_elems, multiply, multiply_elems, print_matrix, subtract, transpose
from utils_data import dataset_frame, load_logic_dataset, shuffle

N_ITERATIONS = 200_000
SEED = 42
RECORD_EVERY = 1_000

METRICS_FILE = "metrics_perceptron.csv"
HISTORY_FILE = "perceptron_history.csv"
PLOT_FILE = "perceptron_error_curve.png"

_SIGMOID = elementwise(sigmoid)
_SIGMOID_DER = elementwise(sigmoid_derivative)


def train_step(W, X, T):
    # error = target - prediction, so the gradient is ADDED to W
    # A is computed with W, before the update
    Z = multiply(X, W)                                  # weighted sums
    A = map_elems(_SIGMOID, Z, vectorized=True)         # activations
    E = subtract(T, A)                                  # error
    D = map_elems(_SIGMOID_DER, A, vectorized=True)     # slope, from A (not Z)
    G = multiply_elems(E, D)
    grad = multiply(transpose(X), G)                    # same shape as W
    return add(W, grad), A


def _error_row(iteration, T, A):
    E = T - A
    return {
        "iteration": iteration,
        "mean_abs_error": float(np.mean(np.abs(E))),
        "mse": float(np.mean(E * E)),
    }


def train(W, X, T, n_iterations=N_ITERATIONS, record_every=None):
    """
    Returns (final W, activations of the last iteration, history).
    history gets a row every record_every iterations and at the last one.
    """
    n_iterations = int(n_iterations)
    if n_iterations < 1:
        raise ValueError(f"n_iterations must be >= 1, got {n_iterations}")

    A = None
    rows = []
    for it in range(1, n_iterations + 1):
        W, A = train_step(W, X, T)
        if record_every and (it % record_every == 0 or it == n_iterations):
            rows.append(_error_row(it, T, A))

    history = pd.DataFrame(rows, columns=["iteration", "mean_abs_error", "mse"])
    return W, A, history


def predict(X, W):
    return map_elems(_SIGMOID, multiply(X, W), vectorized=True)


def eval_metrics(targets, activations):
    y_true = np.asarray(targets, dtype=float).ravel()
    y_prob = np.asarray(activations, dtype=float).ravel()
    y_pred = (y_prob > 0.5).astype(float)
    return {
        "accuracy": float(accuracy_score(y_true, y_pred)),
        "mse": float(mean_squared_error(y_true, y_prob)),
        "mae": float(mean_absolute_error(y_true, y_prob)),
    }


class SingleLayerPerceptron:
    def __init__(self, n_iterations=N_ITERATIONS, seed=SEED, record_every=None):
        self.n_iterations = n_iterations
        self.seed = seed
        self.record_every = record_every
        self.w_init = None
        self.w = None
        self.activations_ = None
        self.history_ = None
        self.X_ = None
        self.T_ = None

    def fit(self, X, T):
        rng = make_rng(self.seed)
        n_features = np.shape(X)[1]
        n_outputs = np.shape(T)[1]

        self.w_init = kaiming_init(n_features, n_outputs, rng)
        self.X_, self.T_ = shuffle(X, T, rng)

        self.w, self.activations_, self.history_ = train(
            self.w_init,
            self.X_,
            self.T_,
            n_iterations=self.n_iterations,
            record_every=self.record_every,
        )
        return self

    def predict_proba(self, X):
        if self.w is None:
            raise NotFittedError("SingleLayerPerceptron is not fitted yet, call fit() first")
        return predict(X, self.w)

    def predict(self, X):
        return (self.predict_proba(X) > 0.5).astype(int)


def save_error_curve(history: pd.DataFrame, path):
    plt.figure()
    plt.plot(history["iteration"], history["mean_abs_error"], label="mean |error|")
    plt.plot(history["iteration"], history["mse"], label="MSE")
    plt.yscale("log")
    plt.title("Perceptron: training error")
    plt.xlabel("Iteration")
    plt.ylabel("Error")
    plt.legend()
    plt.tight_layout()
    plt.savefig(path, dpi=150)


def main(n_iterations=N_ITERATIONS, seed=SEED, out_dir=".", show=False):
    t0 = time.time()
    print("=== PERCEPTRON FROM SCRATCH (x1 -> label) ===")

    X, T = load_logic_dataset()
    print("Inputs:", X.shape, "Targets:", T.shape)

    model = SingleLayerPerceptron(
        n_iterations=n_iterations,
        seed=seed,
        record_every=min(RECORD_EVERY, n_iterations),
    )
    model.fit(X, T)

    print_matrix(model.w_init, "\nInitial weights:")
    print_matrix(model.T_, "Target:")
    print_matrix(model.w, "Weights after training:")
    print_matrix(model.activations_, "\nResults after training:")

    print("=== PER SAMPLE ===")
    df = dataset_frame(model.X_, model.T_, predictions=model.activations_)
    print(df.to_string(index=False))

    metrics = eval_metrics(model.T_, model.activations_)
    print("\n=== EVALUARE ===")
    print(f"acc={metrics['accuracy']:.2f} MSE={metrics['mse']:.6f} MAE={metrics['mae']:.6f}")

    os.makedirs(out_dir, exist_ok=True)

    model.history_.to_csv(os.path.join(out_dir, HISTORY_FILE), index=False)

    save_error_curve(model.history_, os.path.join(out_dir, PLOT_FILE))
    if show:
        plt.show()
    plt.close()

    runtime_sec = round(time.time() - t0, 3)
    row = {
        "model": "SingleLayerPerceptron",
        "iterations": n_iterations,
        "seed": seed,
        **metrics,
        "runtime_sec": runtime_sec,
    }
    for k, w in enumerate(model.w[:, 0], start=1):
        row[f"w{k}"] = float(w)
    pd.DataFrame([row]).to_csv(os.path.join(out_dir, METRICS_FILE), index=False)

    print(f"Saved: {METRICS_FILE}, {HISTORY_FILE}, {PLOT_FILE}")
    print("Runtime:", runtime_sec, "sec")
    return model


if __name__ == "__main__":
    main()

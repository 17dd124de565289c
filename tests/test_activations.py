import warnings

import numpy as np
import pytest

from activations import elementwise, sigmoid, sigmoid_derivative
from matrix_ops import map_elems


def test_sigmoid_zero():
    assert sigmoid(0.0) == 0.5


@pytest.mark.parametrize("v", [-30.0, -5.0, -0.1, 0.0, 0.1, 5.0, 30.0])
def test_sigmoid_open_interval(v):
    s = sigmoid(v)
    assert 0.0 < s < 1.0


def test_sigmoid_symmetry():
    v = np.linspace(-6, 6, 25)
    np.testing.assert_allclose(sigmoid(v) + sigmoid(-v), 1.0)


def test_derivative_at_zero():
    assert sigmoid_derivative(sigmoid(0.0)) == 0.25


def test_derivative_takes_activation_not_weighted_sum():
    z = 1.3
    h = 1e-6
    numeric = (sigmoid(z + h) - sigmoid(z - h)) / (2 * h)
    assert sigmoid_derivative(sigmoid(z)) == pytest.approx(numeric, rel=1e-6)
    assert sigmoid_derivative(z) != pytest.approx(numeric, rel=1e-2)


def test_elementwise_with_map_elems():
    Z = np.array([[0.0], [2.0], [-2.0]])
    A = map_elems(elementwise(sigmoid), Z)
    np.testing.assert_allclose(A, 1.0 / (1.0 + np.exp(-Z)))

    scalar = map_elems(elementwise(sigmoid), Z, vectorized=False)
    np.testing.assert_allclose(scalar, A)
    assert elementwise(sigmoid).__name__ == "sigmoid"


@pytest.mark.parametrize("v", [-800.0, -50.0, 50.0, 800.0])
def test_sigmoid_extreme_inputs_do_not_overflow(v):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        s = sigmoid(v)
        arr = sigmoid(np.array([[v], [-v]]))
    assert 0.0 <= s <= 1.0
    np.testing.assert_allclose(arr[:, 0], [s, 1.0 - s], atol=1e-12)


def test_sigmoid_scalar_in_scalar_out():
    assert np.ndim(sigmoid(0.3)) == 0
    assert sigmoid(np.array([[0.3]])).shape == (1, 1)


def test_elementwise_keeps_function_metadata():
    fn = elementwise(sigmoid_derivative)
    assert fn.__name__ == "sigmoid_derivative"
    assert fn.__wrapped__ is sigmoid_derivative

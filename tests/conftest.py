import matplotlib

matplotlib.use("Agg")

import pytest

from init_weights import make_rng


@pytest.fixture
def rng():
    return make_rng(1234)

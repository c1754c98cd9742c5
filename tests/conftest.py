import numpy as np
import pandas as pd
import pytest

from behaviors import MODEL_REGISTRY


class EvenlySpacedDraws:
    """Stand-in random source cycling through (i + 0.5) / n for i in range(n)."""

    def __init__(self, n: int):
        self.n = n
        self.i = 0

    def random(self):
        value = (self.i % self.n + 0.5) / self.n
        self.i += 1
        return value


@pytest.fixture
def evenly_spaced():
    return EvenlySpacedDraws


@pytest.fixture(params=sorted(MODEL_REGISTRY))
def model(request):
    return MODEL_REGISTRY[request.param]()


@pytest.fixture
def indoor_tape():
    return pd.DataFrame({
        "indoor_temp": np.linspace(18.0, 32.0, 15),
        "user_type": ["MEDIUM"] * 15,
        "occupant_transition": ["ARRIVAL"] * 10 + ["PRESENCE"] * 5,
        "system_transition": ["CLOSE_OPEN"] * 10 + ["OPEN_CLOSE"] * 5,
    })

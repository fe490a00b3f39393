import matplotlib

matplotlib.use("Agg")

import pytest

from simple_neural.net import Net


XOR_SAMPLES = [
    ([0.0, 0.0], [0.0]),
    ([0.0, 1.0], [1.0]),
    ([1.0, 0.0], [1.0]),
    ([1.0, 1.0], [0.0]),
]


@pytest.fixture
def xor_samples():
    return list(XOR_SAMPLES)


@pytest.fixture
def small_net():
    """A 3-4-2 net with fixed random weights."""
    return Net([3, 4, 2], seed=1234)


@pytest.fixture
def xor_data_file(tmp_path):
    path = tmp_path / "trainingData.txt"
    lines = ["topology: 2 4 1"]
    for _ in range(50):
        for inputs, targets in XOR_SAMPLES:
            lines.append("in: " + " ".join(str(v) for v in inputs))
            lines.append("out: " + " ".join(str(v) for v in targets))
    path.write_text("\n".join(lines) + "\n")
    return path

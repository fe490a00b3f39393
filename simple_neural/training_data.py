"""
Training data file :

topology: 2 4 1
in: 1.0 0.0
out: 1.0
in: 0.0 0.0
out: 0.0
...
"""

from numpy import empty, random

from .errors import MalformedTopology, TrainingDataError
from .net import check_topology


TOPOLOGY_LABEL = "topology:"
INPUTS_LABEL = "in:"
TARGETS_LABEL = "out:"


class TrainingData():

    def __init__(self, path=None, lines=None) -> None:
        if lines is None:
            if path is None:
                raise TrainingDataError("a data file path or lines are required")
            with open(path, "r") as f:
                lines = f.read().splitlines()
        # blank lines are not records
        self._lines = [ line for line in lines if line.strip() ]
        self._pos = 0
        self.path = path

    @classmethod
    def from_text(cls, text):
        return cls(lines=text.splitlines())

    def is_eof(self):
        return self._pos >= len(self._lines)

    def _next_record(self, label):
        if self.is_eof():
            raise TrainingDataError(f"expected a '{label}' record, reached end of data")
        line_number = self._pos + 1
        tokens = self._lines[self._pos].split()
        self._pos += 1

        if tokens[0] != label:
            raise TrainingDataError(f"record {line_number} : expected '{label}', got '{tokens[0]}'")
        return line_number, tokens[1:]

    def get_topology(self):
        line_number, tokens = self._next_record(TOPOLOGY_LABEL)
        try:
            topology = [ int(token) for token in tokens ]
        except ValueError as e:
            raise MalformedTopology(f"record {line_number} : {e}") from e
        return check_topology(topology)

    def _get_values(self, label):
        line_number, tokens = self._next_record(label)
        try:
            return [ float(token) for token in tokens ]
        except ValueError as e:
            raise TrainingDataError(f"record {line_number} : {e}") from e

    def get_next_inputs(self):
        return self._get_values(INPUTS_LABEL)

    def get_target_outputs(self):
        return self._get_values(TARGETS_LABEL)

    def __iter__(self):
        while not self.is_eof():
            inputs = self.get_next_inputs()
            targets = self.get_target_outputs()
            yield inputs, targets


XOR_TOPOLOGY = [2, 4, 1]


def generate_xor_data(path, nb_samples, seed=None):
    """
    XOR samples :
    0 0 -> 0
    0 1 -> 1
    1 0 -> 1
    1 1 -> 0
    """
    rng = random.default_rng(seed)
    X = rng.integers(low=0, high=2, size=(nb_samples, 2))  # (m, 2)
    y = empty( shape=(nb_samples,), dtype=int )  # (m,)
    for i in range(nb_samples):
        y[i] = int(X[i, 0]) ^ int(X[i, 1])

    with open(path, "w") as f:
        f.write(TOPOLOGY_LABEL + " " + " ".join(str(w) for w in XOR_TOPOLOGY) + "\n")
        for x, target in zip(X, y):
            f.write(f"{INPUTS_LABEL} {float(x[0])} {float(x[1])}\n")
            f.write(f"{TARGETS_LABEL} {float(target)}\n")

    return X, y

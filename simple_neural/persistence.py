"""
Saved net file : one connection per line, "weight velocity",
in the order of Net.flatten_weights(). The file carries no topology,
the net it is loaded into must be built with the same one.
"""

from .errors import PersistenceFormatError


SAVE_FILE_NAME = "savedData.txt"


def save_net(net, path=SAVE_FILE_NAME):
    flat = net.flatten_weights()
    with open(path, "w") as f:
        for i in range(0, len(flat), 2):
            # repr keeps every digit, a reload gives back the same floats
            f.write(f"{float(flat[i])!r} {float(flat[i + 1])!r}\n")


def read_weights(path=SAVE_FILE_NAME):
    flat = []
    with open(path, "r") as f:
        for line_number, line in enumerate(f, start=1):
            tokens = line.split()
            if not tokens:
                continue
            if len(tokens) != 2:
                raise PersistenceFormatError(
                    f"{path}:{line_number} : expected 'weight velocity', got {len(tokens)} values")
            try:
                flat.extend( float(token) for token in tokens )
            except ValueError as e:
                raise PersistenceFormatError(f"{path}:{line_number} : {e}") from e
    return flat


def load_net(net, path=SAVE_FILE_NAME):
    net.load_weights( read_weights(path) )
    return net

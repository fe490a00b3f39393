from .errors import (
    LengthMismatch,
    MalformedTopology,
    NetError,
    NonNumericValue,
    PersistenceFormatError,
    ShapeMismatch,
    TrainingDataError,
)
from .net import Connection, Hyperparameters, Net, Neuron
from .persistence import load_net, save_net
from .training_data import TrainingData, generate_xor_data

__version__ = "0.1.0"

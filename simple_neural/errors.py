"""
Errors raised by the network engine and its file helpers.
All of them are detected before any neuron or connection is modified.
"""


class NetError(Exception):
    pass


class ShapeMismatch(NetError, ValueError):
    """Input or target vector length does not match the topology."""

    def __init__(self, what, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} : expected {expected} values, got {actual}")


class MalformedTopology(NetError, ValueError):
    pass


class PersistenceFormatError(NetError, ValueError):
    pass


class LengthMismatch(PersistenceFormatError):
    """Flat weight vector does not hold exactly what the topology needs."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"weight vector : expected {expected} values, got {actual}")


class TrainingDataError(NetError, ValueError):
    pass


class NonNumericValue(NetError, ValueError):
    pass

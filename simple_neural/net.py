"""
Fully-connected feedforward network trained online by backpropagation
with momentum.

Symbols :
- eta = overall learning rate [0.0..1.0]
- alpha = momentum, multiplier of the last weight change [0.0..n]
- layers[l][n] = neuron n of layer l
- every layer except the output one ends with a bias neuron (activation = 1.0)
- connections are stored on the SOURCE neuron, indexed by destination position
"""

from math import tanh, sqrt
from numbers import Integral

from numpy.random import default_rng

from .errors import LengthMismatch, MalformedTopology, NonNumericValue, PersistenceFormatError, ShapeMismatch


ETA = 0.15
ALPHA = 0.5
SMOOTHING_FACTOR = 100.0
BIAS_VALUE = 1.0


class Hyperparameters():

    def __init__(self, eta=ETA, alpha=ALPHA, smoothing_factor=SMOOTHING_FACTOR) -> None:
        self.eta = eta
        self.alpha = alpha
        self.smoothing_factor = smoothing_factor

    def __repr__(self):
        return f"Hyperparameters(eta={self.eta}, alpha={self.alpha}, smoothing_factor={self.smoothing_factor})"


class Connection():

    def __init__(self, weight, velocity=0.0) -> None:
        self.weight = weight
        self.velocity = velocity  # last weight change, used for momentum

    def __repr__(self):
        return f"Connection(weight={self.weight}, velocity={self.velocity})"


def transfer_function(x):
    # tanh - output range [-1.0, 1.0]
    return tanh(x)


def transfer_function_derivative(a):
    # tanh derivative, expressed with the output a = tanh(x)
    return 1.0 - a * a


class Neuron():

    def __init__(self, num_outputs, index, rng=None) -> None:
        if rng is None:
            rng = default_rng()
        self.activation = 0.0
        self.gradient = 0.0
        self.index = index
        self.connections = [ Connection(weight=float(rng.random())) for _ in range(num_outputs) ]

    def set_activation(self, value):
        self.activation = float(value)

    def get_activation(self):
        return self.activation

    def forward(self, prev_layer):
        total = 0.0
        for neuron in prev_layer:
            total += neuron.activation * neuron.connections[self.index].weight
        self.activation = transfer_function(total)

    def compute_output_gradient(self, target):
        delta = target - self.activation
        self.gradient = delta * transfer_function_derivative(self.activation)

    def compute_hidden_gradient(self, next_neurons):
        """
        next_neurons : neurons of the next layer that own a gradient,
        so its bias neuron (if any) must not be part of it.
        """
        dow = 0.0
        for n, neuron in enumerate(next_neurons):
            dow += self.connections[n].weight * neuron.gradient
        self.gradient = dow * transfer_function_derivative(self.activation)

    def update_incoming_weights(self, prev_layer, eta, alpha):
        # The weights to update are stored in the neurons of the previous layer
        for neuron in prev_layer:
            conn = neuron.connections[self.index]
            new_velocity = (
                # individual input, magnified by the gradient and train rate
                eta * neuron.activation * self.gradient
                # momentum = a fraction of the previous change
                + alpha * conn.velocity
            )
            conn.velocity = new_velocity
            conn.weight += new_velocity

    def __repr__(self):
        return f"Neuron(index={self.index}, activation={self.activation}, outputs={len(self.connections)})"


def to_floats(what, values):
    try:
        return [ float(v) for v in values ]
    except (TypeError, ValueError) as e:
        raise NonNumericValue(f"{what} : {e}") from e


def check_topology(topology):
    topology = list(topology)
    if len(topology) < 2:
        raise MalformedTopology(f"topology needs at least 2 layers, got {len(topology)}")
    for width in topology:
        if isinstance(width, bool) or not isinstance(width, Integral) or width <= 0:
            raise MalformedTopology(f"layer widths must be positive integers, got {width!r}")
    return [ int(width) for width in topology ]


class Net():

    def __init__(self, topology, hyperparameters=None, seed=None) -> None:
        self.topology = check_topology(topology)
        self.hyperparameters = hyperparameters if hyperparameters is not None else Hyperparameters()
        self.error = 0.0
        self.recent_average_error = 0.0

        rng = default_rng(seed)
        self.layers = []
        last = len(self.topology) - 1
        for l, width in enumerate(self.topology):
            num_outputs = 0 if l == last else self.topology[l + 1]
            layer = [ Neuron(num_outputs, n, rng) for n in range(width) ]
            if l != last:
                bias = Neuron(num_outputs, width, rng)
                bias.set_activation(BIAS_VALUE)
                layer.append(bias)
            self.layers.append(layer)

    @property
    def num_layers(self):
        return len(self.layers)

    def neurons(self, l):
        """Neurons of layer l without its bias neuron."""
        return self.layers[l][:self.topology[l]]

    def forward(self, inputs):
        inputs = to_floats("inputs", inputs)
        if len(inputs) != self.topology[0]:
            raise ShapeMismatch("inputs", self.topology[0], len(inputs))

        for neuron, value in zip(self.layers[0], inputs):
            neuron.set_activation(value)

        for l in range(1, self.num_layers):
            prev_layer = self.layers[l - 1]
            for neuron in self.neurons(l):
                neuron.forward(prev_layer)

    def backward(self, targets):
        targets = to_floats("targets", targets)
        if len(targets) != self.topology[-1]:
            raise ShapeMismatch("targets", self.topology[-1], len(targets))

        eta, alpha = self.hyperparameters.eta, self.hyperparameters.alpha
        smoothing = self.hyperparameters.smoothing_factor
        output_layer = self.layers[-1]

        # overall net error (RMS of output neuron errors)
        error = 0.0
        for neuron, target in zip(output_layer, targets):
            delta = target - neuron.activation
            error += delta * delta
        self.error = sqrt(error / len(targets))

        # recent average measurement
        self.recent_average_error = (self.recent_average_error * smoothing + self.error) / (smoothing + 1.0)

        for neuron, target in zip(output_layer, targets):
            neuron.compute_output_gradient(target)

        # gradients on hidden layers, computed with the weights not yet updated
        for l in range(self.num_layers - 2, 0, -1):
            next_neurons = self.neurons(l + 1)
            for neuron in self.layers[l]:
                neuron.compute_hidden_gradient(next_neurons)

        # from the outputs to the first hidden layer, update connection weights
        for l in range(self.num_layers - 1, 0, -1):
            prev_layer = self.layers[l - 1]
            for neuron in self.neurons(l):
                neuron.update_incoming_weights(prev_layer, eta, alpha)

    def results(self):
        return [ neuron.activation for neuron in self.neurons(self.num_layers - 1) ]

    def get_recent_average_error(self):
        return self.recent_average_error

    def num_connections(self):
        return sum( len(neuron.connections) for layer in self.layers[:-1] for neuron in layer )

    def iter_connections(self):
        for layer in self.layers[:-1]:
            for neuron in layer:
                for conn in neuron.connections:
                    yield conn

    def flatten_weights(self):
        flat = []
        for conn in self.iter_connections():
            flat.append(conn.weight)
            flat.append(conn.velocity)
        return flat

    def load_weights(self, flat):
        try:
            flat = [ float(v) for v in flat ]
        except (TypeError, ValueError) as e:
            raise PersistenceFormatError(f"weight vector holds a non numeric value : {e}") from e
        expected = 2 * self.num_connections()
        if len(flat) != expected:
            raise LengthMismatch(expected, len(flat))

        for i, conn in enumerate(self.iter_connections()):
            conn.weight = flat[2 * i]
            conn.velocity = flat[2 * i + 1]

    def __repr__(self):
        return f"Net(topology={self.topology}, {self.hyperparameters})"

"""Perceptrons and multilayer perceptrons trained by backpropagation."""

from __future__ import annotations

import enum
import math
import random
import sys
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO


class ActivationType(enum.IntEnum):
    """Activation functions a neuron can use."""

    SIGMOID = 0
    TANH = 1
    RELU = 2
    STEP = 3


def sigmoid(x: float) -> float:
    """Logistic function 1 / (1 + e^-x)."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def dsigmoid(x: float) -> float:
    """Derivative of the logistic function."""
    s = sigmoid(x)
    return s * (1.0 - s)


def tanh_act(x: float) -> float:
    """Hyperbolic tangent."""
    return math.tanh(x)


def dtanh_act(x: float) -> float:
    """Derivative of the hyperbolic tangent."""
    t = math.tanh(x)
    return 1.0 - t * t


def relu(x: float) -> float:
    """Rectified linear unit."""
    return x if x > 0 else 0.0


def drelu(x: float) -> float:
    """Derivative of the rectified linear unit (0 at the origin)."""
    return float(x > 0)


def step(x: float) -> float:
    """Heaviside step: 1 for x >= 0, else 0."""
    return float(x >= 0)


def dstep(x: float) -> float:
    """Slope of the step function, taken as 0 everywhere."""
    return 0.0 * step(x)


@dataclass(frozen=True)
class Activation:
    """An activation function paired with its derivative."""

    fn: Callable[[float], float]
    derivative: Callable[[float], float]


_ACTIVATIONS = {
    ActivationType.SIGMOID: Activation(sigmoid, dsigmoid),
    ActivationType.TANH: Activation(tanh_act, dtanh_act),
    ActivationType.RELU: Activation(relu, drelu),
    ActivationType.STEP: Activation(step, dstep),
}


def get_activation(kind: ActivationType | int) -> Activation:
    """Return the activation and derivative for ``kind``."""
    return _ACTIVATIONS[ActivationType(kind)]


def _dot(inputs: Sequence[float], weights: Sequence[float]) -> float:
    if len(inputs) > len(weights):
        raise ValueError(
            f"{len(inputs)} inputs (with bias) but only {len(weights)} weights"
        )
    return sum(a * b for a, b in zip(inputs, weights))


class Perceptron:
    """A single neuron with one weight per input plus one for the bias."""

    def __init__(
        self,
        inputs: int,
        activation: ActivationType | int = ActivationType.SIGMOID,
        bias: float = 1.0,
        rng: random.Random | None = None,
    ) -> None:
        if inputs < 0:
            raise ValueError("number of inputs must not be negative")
        rng = rng if rng is not None else random.Random()
        self.bias = bias
        self.activation_type = ActivationType(activation)
        self.weights = [rng.uniform(-1.0, 1.0) for _ in range(inputs + 1)]
        act = get_activation(self.activation_type)
        self.activate = act.fn
        self.derivative = act.derivative

    def run(self, x: Sequence[float]) -> float:
        """Return the neuron's output for inputs ``x``."""
        return self.activate(_dot([*x, self.bias], self.weights))

    def set_weights(self, weights: Sequence[float]) -> None:
        """Replace the weights; the last one applies to the bias."""
        self.weights = [float(w) for w in weights]


class MultilayerPerceptron:
    """A fully connected feed-forward network.

    ``layers`` gives the size of each layer, the first being the input layer.
    """

    def __init__(
        self,
        layers: Sequence[int],
        activation: ActivationType | int = ActivationType.SIGMOID,
        bias: float = 1.0,
        eta: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        if len(layers) < 2:
            raise ValueError("a network needs an input layer and at least one more")
        if any(size <= 0 for size in layers):
            raise ValueError("every layer needs at least one neuron")
        rng = rng if rng is not None else random.Random()
        self.layers = list(layers)
        self.bias = bias
        self.eta = eta
        self.activation_type = ActivationType(activation)
        self.values = [[0.0] * size for size in self.layers]
        self.raw_values = [[0.0] * size for size in self.layers]
        self.deltas = [[0.0] * size for size in self.layers]
        self.network: list[list[Perceptron]] = [[]]
        for previous, size in zip(self.layers, self.layers[1:]):
            self.network.append(
                [
                    Perceptron(previous, self.activation_type, bias, rng)
                    for _ in range(size)
                ]
            )

    def set_weights(self, weights: Sequence[Sequence[Sequence[float]]]) -> None:
        """Set weights layer by layer, starting from the first non-input layer."""
        if len(weights) > len(self.network) - 1:
            raise ValueError("more weight layers than the network has")
        for layer, layer_weights in zip(self.network[1:], weights):
            if len(layer_weights) > len(layer):
                raise ValueError("more neuron weights than the layer has")
            for neuron, neuron_weights in zip(layer, layer_weights):
                neuron.set_weights(neuron_weights)

    def format_weights(self) -> str:
        """Render every neuron's weights, one neuron per line."""
        lines = [""]
        for i, layer in enumerate(self.network[1:], start=1):
            for j, neuron in enumerate(layer):
                text = "".join(f"{w:g}   " for w in neuron.weights)
                lines.append(f"Layer {i} Neuron {j}: {text}")
        lines.append("")
        return "\n".join(lines) + "\n"

    def print_weights(self, file: TextIO | None = None) -> None:
        """Write :meth:`format_weights` to ``file`` (stdout by default)."""
        print(self.format_weights(), end="", file=file if file is not None else sys.stdout)

    def run(self, x: Sequence[float]) -> list[float]:
        """Feed ``x`` forward and return the output layer's values."""
        self.values[0] = [float(v) for v in x]
        for i, layer in enumerate(self.network[1:], start=1):
            inputs = [*self.values[i - 1], self.bias]
            for j, neuron in enumerate(layer):
                raw = _dot(inputs, neuron.weights)
                self.raw_values[i][j] = raw
                self.values[i][j] = neuron.activate(raw)
        return list(self.values[-1])

    def back_propagation(self, x: Sequence[float], y: Sequence[float]) -> float:
        """Train on one sample and return its mean squared error before the update."""
        output = self.run(x)
        if len(y) != len(output):
            raise ValueError(
                f"expected {len(output)} target values, got {len(y)}"
            )
        error = [target - out for target, out in zip(y, output)]
        mse = sum(e * e for e in error) / len(error)

        self.deltas[-1] = [
            neuron.derivative(raw) * e
            for neuron, raw, e in zip(self.network[-1], self.raw_values[-1], error)
        ]

        for i in range(len(self.network) - 2, 0, -1):
            following = list(zip(self.network[i + 1], self.deltas[i + 1]))
            for j, neuron in enumerate(self.network[i]):
                forward_error = sum(n.weights[j] * d for n, d in following)
                self.deltas[i][j] = neuron.derivative(self.raw_values[i][j]) * forward_error

        for i, layer in enumerate(self.network[1:], start=1):
            inputs = [*self.values[i - 1], self.bias]
            for neuron, delta in zip(layer, self.deltas[i]):
                neuron.weights = [
                    w + self.eta * delta * v for w, v in zip(neuron.weights, inputs)
                ] + neuron.weights[len(inputs):]

        return mse
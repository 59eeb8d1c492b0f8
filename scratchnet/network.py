"""A fully connected feed-forward network trained by backpropagation."""

from __future__ import annotations

import os
import random as _random
from collections.abc import Iterable, Iterator, Sequence

from .layer import Layer
from .matrix import Matrix


class ModelFormatError(ValueError):
    """Raised when a saved model cannot be parsed."""


def _fmt(value: float) -> str:
    return f"{value:g}"


class NeuralNetwork:
    """A layered network with weight and bias matrices between layers.

    Layer 0 takes raw input values. Every later layer receives
    ``W @ a + b``, where ``a`` is the activated values of the previous
    layer (the raw values for the input layer). The output of the network
    is the raw value of the last layer.
    """

    def __init__(
        self,
        topology: Iterable[int],
        learning_rate: float,
        rng: _random.Random | None = None,
    ) -> None:
        sizes = tuple(int(size) for size in topology)
        rng = rng if rng is not None else _random.Random()
        weights = [
            Matrix.random(rows, cols, rng) for cols, rows in zip(sizes, sizes[1:])
        ]
        biases = [Matrix.zeros(size, 1) for size in sizes]
        self._init_state(sizes, learning_rate, weights, biases)

    def _init_state(
        self,
        topology: tuple[int, ...],
        learning_rate: float,
        weights: list[Matrix],
        biases: list[Matrix],
    ) -> None:
        if not topology:
            raise ValueError("Topology must have at least one layer")
        if any(size < 0 for size in topology):
            raise ValueError(f"Layer sizes must be non-negative: {topology}")
        self._topology = topology
        self._learning_rate = float(learning_rate)
        self._layers = [Layer(size) for size in topology]
        self._weights = weights
        self._biases = biases
        self._input: list[float] = []
        self._target: list[float] = []
        self._errors: list[float] = []
        self._historical_errors: list[float] = []
        self._error = 0.0

    # ------------------------------------------------------------------
    # Persistence

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> NeuralNetwork:
        """Read a network from a model file."""
        with open(path, encoding="utf-8") as handle:
            return cls.loads(handle.read())

    @classmethod
    def loads(cls, text: str) -> NeuralNetwork:
        """Build a network from the text of a model file."""
        chunks = iter(text.split(";"))

        topology = tuple(
            _parse_int(part) for part in _next_chunk(chunks, "topology").split(",")
        )
        if any(size < 0 for size in topology):
            raise ModelFormatError(f"Negative layer size in topology: {topology}")

        weights = [
            _parse_matrix(_next_chunk(chunks, f"weights {i}"), rows, cols)
            for i, (cols, rows) in enumerate(zip(topology, topology[1:]))
        ]
        biases = [
            _parse_matrix(_next_chunk(chunks, f"biases {i}"), size, 1)
            for i, size in enumerate(topology)
        ]
        learning_rate = _parse_float(_next_chunk(chunks, "learning rate"))

        network = cls.__new__(cls)
        network._init_state(topology, learning_rate, weights, biases)
        return network

    def dumps(self) -> str:
        """Return the model as text: topology, weights, biases, learning rate."""
        parts = [",".join(str(size) for size in self._topology)]
        parts.extend(
            ",".join(_fmt(v) for v in matrix.to_list())
            for matrix in (*self._weights, *self._biases)
        )
        parts.append(_fmt(self._learning_rate))
        return ";".join(parts) + ";"

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the model to a file."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.dumps())

    # ------------------------------------------------------------------
    # Accessors

    @property
    def topology(self) -> tuple[int, ...]:
        return self._topology

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @property
    def layers(self) -> list[Layer]:
        return list(self._layers)

    @property
    def weights(self) -> list[Matrix]:
        return list(self._weights)

    @property
    def biases(self) -> list[Matrix]:
        return list(self._biases)

    @staticmethod
    def _check_index(items: Sequence[object], index: int, what: str) -> None:
        if not 0 <= index < len(items):
            raise IndexError(f"{what} index {index} out of range (0..{len(items) - 1})")

    def neuron_matrix(self, index: int) -> Matrix:
        """Raw values of a layer as a column matrix."""
        self._check_index(self._layers, index, "Layer")
        return self._layers[index].values()

    def activated_neuron_matrix(self, index: int) -> Matrix:
        """Activated values of a layer as a column matrix."""
        self._check_index(self._layers, index, "Layer")
        return self._layers[index].activated_values()

    def derived_neuron_matrix(self, index: int) -> Matrix:
        """Derivative terms of a layer as a column matrix."""
        self._check_index(self._layers, index, "Layer")
        return self._layers[index].derived_values()

    def set_neuron_value(self, layer_index: int, neuron_index: int, value: float) -> None:
        self._check_index(self._layers, layer_index, "Layer")
        self._layers[layer_index].set_value(neuron_index, value)

    def set_input(self, values: Iterable[float]) -> None:
        """Load values into the input layer, starting at its first neuron."""
        values = [float(v) for v in values]
        input_layer = self._layers[0]
        if len(values) > len(input_layer):
            raise IndexError(
                f"{len(values)} input values for an input layer of {len(input_layer)}"
            )
        self._input = values
        for index, value in enumerate(values):
            input_layer.set_value(index, value)

    def set_target(self, values: Iterable[float]) -> None:
        self._target = [float(v) for v in values]

    def set_weight_matrix(self, index: int, matrix: Matrix) -> None:
        self._check_index(self._weights, index, "Weight matrix")
        self._weights[index] = matrix

    def set_bias_matrix(self, index: int, matrix: Matrix) -> None:
        self._check_index(self._biases, index, "Bias matrix")
        self._biases[index] = matrix

    @property
    def errors(self) -> list[float]:
        """Every per-output error recorded so far, in order."""
        return list(self._errors)

    @property
    def error(self) -> float:
        """The total error from the last call to set_errors."""
        return self._error

    @property
    def historical_errors(self) -> list[float]:
        return list(self._historical_errors)

    # ------------------------------------------------------------------
    # Training

    def _layer_output(self, index: int) -> Matrix:
        layer = self._layers[index]
        return layer.values() if index == 0 else layer.activated_values()

    def feed_forward(self) -> None:
        """Propagate the current input through every layer."""
        for i, (weights, bias) in enumerate(zip(self._weights, self._biases[1:])):
            result = weights @ self._layer_output(i) + bias
            next_layer = self._layers[i + 1]
            for k, value in enumerate(result.to_list()):
                next_layer.set_value(k, value)

    def predict(self, values: Iterable[float]) -> Matrix:
        """Feed values forward and return the raw output column."""
        self.set_input(values)
        self.feed_forward()
        return self._layers[-1].values()

    def set_errors(self) -> None:
        """Record half squared errors of the activated output against the target."""
        if not self._target:
            raise ValueError("Target is not set for the neural network")
        output_layer = self._layers[-1]
        if len(self._target) != len(output_layer):
            raise ValueError(
                f"Target size {len(self._target)} differs from output layer size "
                f"{len(output_layer)}"
            )
        self._error = 0.0
        for neuron, target in zip(output_layer.neurons, self._target):
            err = 0.5 * (neuron.activated_val - target) ** 2
            self._errors.append(err)
            self._error += err
        self._historical_errors.append(self._error)

    def back_propagate(self) -> None:
        """Update weights and biases by one gradient step towards the target."""
        self.set_errors()
        output_layer = self._layers[-1]
        error = output_layer.values() - Matrix.column(self._target)
        delta = error.elementwise_multiply(output_layer.derived_values())

        for i in reversed(range(len(self._layers) - 1)):
            weights = self._weights[i]
            biases = self._biases[i + 1]
            gradient = delta @ self._layer_output(i).transpose()
            updated_biases = biases - delta.scaled(self._learning_rate)

            delta = (weights.transpose() @ delta).elementwise_multiply(
                self._layers[i].derived_values()
            )
            updated_weights = weights - gradient.scaled(self._learning_rate)

            self._weights[i] = updated_weights
            self._biases[i + 1] = updated_biases

    # ------------------------------------------------------------------
    # Text output

    def format_input(self) -> str:
        return "==========\nINPUT: \n" + str(self._layers[0].values())

    def format_output(self) -> str:
        return "==========\nOUTPUT: \n" + str(self._layers[-1].values())

    def format_target(self) -> str:
        values = "".join(f"{_fmt(t)}\t" for t in self._target)
        return "==========\nTARGET: \n" + values + "\n"

    def __str__(self) -> str:
        last = len(self._layers) - 1
        pieces: list[str] = []
        for i in range(len(self._layers)):
            pieces.append("=====================\n")
            pieces.append(f"LAYER: {i}\n")
            pieces.append(str(self._layer_output(i)))
            if i != last:
                pieces.append("Weight: \n")
                pieces.append(str(self._weights[i]))
                pieces.append("________________\n")
            if i != 0:
                pieces.append("Bias: \n")
                pieces.append(str(self._biases[i]))
            pieces.append("=====================\n")
        return "".join(pieces)


def _next_chunk(chunks: Iterator[str], what: str) -> str:
    try:
        return next(chunks)
    except StopIteration:
        raise ModelFormatError(f"Model is missing its {what}") from None


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ModelFormatError(f"Invalid integer in model: {text!r}") from None


def _parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ModelFormatError(f"Invalid number in model: {text!r}") from None


def _parse_matrix(chunk: str, rows: int, cols: int) -> Matrix:
    needed = rows * cols
    parts = chunk.split(",") if needed else []
    if len(parts) < needed:
        raise ModelFormatError(
            f"Expected {needed} values for a {rows}x{cols} matrix, got {len(parts)}"
        )
    values = [_parse_float(part) for part in parts[:needed]]
    return Matrix(rows, cols, [values[r * cols:(r + 1) * cols] for r in range(rows)])
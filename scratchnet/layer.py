"""A layer of neurons."""

from __future__ import annotations

from .matrix import Matrix
from .neuron import Neuron


class Layer:
    """An ordered group of neurons, all starting at zero."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Layer size must be non-negative: {size}")
        self._neurons = [Neuron(0.0) for _ in range(size)]

    def __len__(self) -> int:
        return len(self._neurons)

    def _neuron(self, index: int) -> Neuron:
        if not 0 <= index < len(self._neurons):
            raise IndexError(f"Neuron index {index} out of range for layer of {len(self._neurons)}")
        return self._neurons[index]

    def set_value(self, index: int, value: float) -> None:
        """Set the raw value of one neuron."""
        self._neuron(index).val = value

    def value(self, index: int) -> float:
        """Return the raw value of one neuron."""
        return self._neuron(index).val

    @property
    def neurons(self) -> list[Neuron]:
        """A new list of this layer's neurons."""
        return list(self._neurons)

    def values(self) -> Matrix:
        """The raw values as a column matrix."""
        return Matrix.column(n.val for n in self._neurons)

    def activated_values(self) -> Matrix:
        """The activated values as a column matrix."""
        return Matrix.column(n.activated_val for n in self._neurons)

    def derived_values(self) -> Matrix:
        """The derivative terms as a column matrix."""
        return Matrix.column(n.derived_val for n in self._neurons)
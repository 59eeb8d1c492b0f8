"""A small fully connected neural network built from plain Python matrices."""

__version__ = "0.1.0"
__all__ = ["cli", "layer", "matrix", "network", "neuron"]
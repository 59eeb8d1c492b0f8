# scratchnet

A small fully connected feed-forward neural network written with nothing but
the Python standard library. It has its own `Matrix` type, layers of neurons
using the fast sigmoid `f(x) = x / (1 + |x|)`, plain gradient-descent
backpropagation, and a compact text format for saving and loading models.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
scratchnet
```

Builds a network with topology `2, 3, 1` and learning rate `0.1`, feeds it the
input `[0.5, 0.8]`, runs one backpropagation step against the target `[0.1]`,
saves the model and prints `Model saved successfully!`.

Options:

- `-o PATH`, `--output PATH`: the model file to write (default `model.nn` in
  the current directory).
- `--seed N`: seed for the random initial weights, so that runs are repeatable.

## Library use

```python
import random

from scratchnet.network import NeuralNetwork

net = NeuralNetwork([2, 3, 1], 0.1, random.Random(0))

net.set_input([0.5, 0.8])
net.feed_forward()
net.set_target([0.1])
net.back_propagate()

print(net.error)            # total error recorded by the last step
print(net.predict([0.5, 0.8]).to_list())

net.save("model.nn")
restored = NeuralNetwork.load("model.nn")
```

Weights start as uniform random values in `[0, 1)`; biases start at zero.
Layer 0 passes on its raw values; every later layer passes on its activated
values. `predict` returns the raw values of the output layer as a column
matrix.

Each call to `set_errors` (which `back_propagate` makes first) appends the
half squared error of every output neuron to `errors`, sets `error` to their
sum and appends that sum to `historical_errors`. It raises `ValueError` when
no target is set or the target's length differs from the output layer's.

For inspection, `format_input()`, `format_output()` and `format_target()`
return printable text of the current input, output and target, and `str(net)`
shows every layer with its weights and biases.

### Matrices

```python
from scratchnet.matrix import Matrix

a = Matrix.column([1.0, 2.0])
b = Matrix(2, 2, [[1.0, 0.0], [0.0, 1.0]])

product = b @ a
total = a + a
difference = a - a
print(product.transpose())
```

`Matrix.zeros`, `Matrix.random` and `Matrix.column` build new matrices;
values are read and written with `m[row, col]`. `scaled` returns a scaled
copy and `scale` scales in place; `elementwise_multiply`, `to_list` and
`rows` do what their names say. Operations on matrices of mismatched shapes
raise `ValueError`.

## Model file format

A model is a single line of `;`-terminated sections, values separated by `,`:

1. the topology, e.g. `2,3,1;`
2. one section per weight matrix, row by row
3. one section per layer's bias column
4. the learning rate

`NeuralNetwork.loads` and `NeuralNetwork.dumps` read and write the same text
without touching the file system. A malformed model raises
`ModelFormatError`, a subclass of `ValueError`.

## What it does not do

There is no training loop, data set handling or batching: the network is
trained one example at a time by calling `set_input`, `set_target` and
`back_propagate` yourself. The command runs one fixed training step only.
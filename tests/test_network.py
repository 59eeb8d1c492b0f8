import random

import pytest

from scratchnet.matrix import Matrix
from scratchnet.network import ModelFormatError, NeuralNetwork


def make_net(topology=(2, 3, 1), lr=0.1, seed=7):
    return NeuralNetwork(topology, lr, random.Random(seed))


def test_construction_shapes():
    net = make_net((2, 3, 1))
    assert net.topology == (2, 3, 1)
    assert [(w.num_rows, w.num_cols) for w in net.weights] == [(3, 2), (1, 3)]
    assert [(b.num_rows, b.num_cols) for b in net.biases] == [(2, 1), (3, 1), (1, 1)]
    assert all(v == 0.0 for b in net.biases for v in b.to_list())
    assert [len(layer) for layer in net.layers] == [2, 3, 1]


def test_random_weights_in_unit_interval_and_seeded():
    a = make_net((4, 5, 3), seed=3)
    b = make_net((4, 5, 3), seed=3)
    assert all(0.0 <= v < 1.0 for w in a.weights for v in w.to_list())
    assert a.weights == b.weights


def test_empty_topology_rejected():
    with pytest.raises(ValueError):
        NeuralNetwork([], 0.1)


def test_predict_with_zero_weights_returns_bias():
    net = make_net((2, 1))
    net.set_weight_matrix(0, Matrix.zeros(1, 2))
    net.set_bias_matrix(1, Matrix.column([0.3]))
    assert net.predict([0.7, -0.2]).to_list() == [0.3]


def test_hidden_layer_feeds_activated_values():
    net = make_net((1, 1, 1))
    net.set_weight_matrix(0, Matrix(1, 1, [[1.0]]))
    net.set_weight_matrix(1, Matrix(1, 1, [[1.0]]))
    out = net.predict([1.0])
    assert out.to_list() == [pytest.approx(0.5)]
    assert net.neuron_matrix(1).to_list() == [1.0]
    assert net.activated_neuron_matrix(1).to_list() == out.to_list()


def test_set_input_populates_input_layer():
    net = make_net((3, 1))
    net.set_input([1.5, -2.0, 0.0])
    assert net.neuron_matrix(0) == Matrix.column([1.5, -2.0, 0.0])


def test_set_input_too_many_values():
    net = make_net((2, 1))
    with pytest.raises(IndexError):
        net.set_input([1.0, 2.0, 3.0])


def test_set_neuron_value_and_derived():
    net = make_net((2, 1))
    net.set_neuron_value(1, 0, 0.0)
    assert net.derived_neuron_matrix(1).to_list() == [0.0]
    with pytest.raises(IndexError):
        net.set_neuron_value(5, 0, 1.0)


def test_set_weight_matrix_out_of_range():
    net = make_net((2, 1))
    with pytest.raises(IndexError):
        net.set_weight_matrix(1, Matrix.zeros(1, 2))


def test_dumps_format():
    net = make_net((2, 1), lr=0.1)
    net.set_weight_matrix(0, Matrix(1, 2, [[0.5, 0.25]]))
    assert net.dumps() == "2,1;0.5,0.25;0,0;0;0.1;"


def test_round_trip_exact_values():
    net = make_net((2, 2), lr=0.25)
    net.set_weight_matrix(0, Matrix(2, 2, [[0.5, -1.0], [2.0, 0.125]]))
    net.set_bias_matrix(1, Matrix.column([0.75, -0.5]))
    loaded = NeuralNetwork.loads(net.dumps())
    assert loaded.topology == net.topology
    assert loaded.learning_rate == net.learning_rate
    assert loaded.weights == net.weights
    assert loaded.biases == net.biases


def test_round_trip_random_weights_within_precision():
    net = make_net((3, 4, 2))
    loaded = NeuralNetwork.loads(net.dumps())
    for original, copy in zip(net.weights, loaded.weights):
        assert copy.to_list() == pytest.approx(original.to_list(), rel=1e-5)


def test_save_and_load_file(tmp_path):
    net = make_net((2, 3, 1))
    path = tmp_path / "model.nn"
    net.save(path)
    loaded = NeuralNetwork.load(path)
    assert path.read_text() == net.dumps()
    assert loaded.dumps() == net.dumps()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        NeuralNetwork.load(tmp_path / "absent.nn")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2,x;0,0;0,0;0;0.1;",
        "2,1;0.5;0,0;0;0.1;",
        "2,1;0.5,0.25;0,0;0;",
        "2,1;0.5,abc;0,0;0;0.1;",
        "2,1;0.5,0.25",
    ],
)
def test_loads_rejects_bad_models(text):
    with pytest.raises(ModelFormatError):
        NeuralNetwork.loads(text)


def test_set_errors_requires_target():
    net = make_net((2, 1))
    with pytest.raises(ValueError):
        net.set_errors()
    net.set_target([0.1, 0.2])
    with pytest.raises(ValueError):
        net.set_errors()


def test_errors_accumulate_and_total_matches():
    net = make_net((2, 2))
    net.predict([0.3, 0.6])
    net.set_target([0.1, 0.9])
    net.set_errors()
    first = net.error
    assert first == pytest.approx(sum(net.errors))
    assert first >= 0.0
    net.set_errors()
    assert len(net.errors) == 4
    assert net.historical_errors == [first, first]


def test_back_propagate_zero_learning_rate_keeps_parameters():
    net = make_net((2, 3, 1), lr=0.0)
    weights_before = net.weights
    biases_before = net.biases
    net.predict([0.5, 0.8])
    net.set_target([0.1])
    net.back_propagate()
    assert net.weights == weights_before
    assert net.biases == biases_before
    assert len(net.historical_errors) == 1


def test_back_propagate_moves_output_towards_target():
    net = make_net((1, 1), lr=0.5)
    net.set_weight_matrix(0, Matrix(1, 1, [[0.5]]))
    before = net.predict([1.0]).to_list()[0]
    net.set_target([0.0])
    net.back_propagate()
    after = net.predict([1.0]).to_list()[0]
    assert after < before
    assert net.biases[0] == Matrix.zeros(1, 1)
    assert net.biases[1].to_list()[0] < 0.0


def test_back_propagate_preserves_shapes():
    net = make_net((2, 3, 1))
    net.predict([0.5, 0.8])
    net.set_target([0.1])
    net.back_propagate()
    assert [(w.num_rows, w.num_cols) for w in net.weights] == [(3, 2), (1, 3)]
    assert [(b.num_rows, b.num_cols) for b in net.biases] == [(2, 1), (3, 1), (1, 1)]


def test_format_target_and_input():
    net = make_net((2, 1))
    net.set_target([0.5, 0.25])
    assert net.format_target() == "==========\nTARGET: \n0.5\t0.25\t\n"
    net.set_input([1.0, 2.0])
    assert net.format_input() == "==========\nINPUT: \n" + str(Matrix.column([1.0, 2.0]))
    assert net.format_output().startswith("==========\nOUTPUT: \n")


def test_str_lists_every_layer():
    net = make_net((2, 3, 1))
    text = str(net)
    assert all(f"LAYER: {i}\n" in text for i in range(3))
    assert text.count("Weight: \n") == 2
    assert text.count("Bias: \n") == 2
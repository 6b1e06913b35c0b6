import pytest

from mlpnet.logic_gates import build_and_perceptron, build_xor_network, main


@pytest.mark.parametrize("x,expected", [((0, 0), 0), ((0, 1), 0), ((1, 0), 0), ((1, 1), 1)])
def test_and_perceptron(x, expected):
    assert round(build_and_perceptron().run(x)) == expected


def test_and_perceptron_weights():
    assert build_and_perceptron().weights == [10.0, 10.0, -15.0]


@pytest.mark.parametrize("x,expected", [((0, 0), 0), ((0, 1), 1), ((1, 0), 1), ((1, 1), 0)])
def test_xor_network(x, expected):
    assert round(build_xor_network().run(list(x))[0]) == expected


def test_xor_network_weights_listing():
    text = build_xor_network().format_weights()
    assert "Layer 1 Neuron 0: -10   -10   15   " in text
    assert "Layer 1 Neuron 1: 15   15   -10   " in text
    assert "Layer 2 Neuron 0: 10   10   -15   " in text


def test_main_output(capsys):
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "AND Gate: " in text
    assert "Hardcoded weights are :" in text
    lines = [line for line in text.splitlines() if "Rounded Value:" in line]
    assert len(lines) == 4
    assert [line.rsplit(" ", 1)[1] for line in lines] == ["0", "1", "1", "0"]
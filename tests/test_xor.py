import io
import random

import pytest

from mlpnet.network import ActivationType, MultilayerPerceptron
from mlpnet.xor import XorReport, main, threshold, train_xor


def _hardcoded_xor() -> MultilayerPerceptron:
    mlp = MultilayerPerceptron([2, 2, 1], rng=random.Random(1))
    mlp.set_weights([[[-10, -10, 15], [15, 15, -10]], [[10, 10, -15]]])
    return mlp


@pytest.mark.parametrize("value,expected", [(0.5, 1), (0.9, 1), (0.49, 0), (-1.0, 0)])
def test_threshold(value, expected):
    assert threshold(value) == expected


def test_train_xor_rejects_zero_epochs():
    mlp = MultilayerPerceptron([2, 4, 1], rng=random.Random(0))
    with pytest.raises(ValueError):
        train_xor(mlp, "Sigmoid", 0, io.StringIO())


def test_hardcoded_network_stops_early():
    out = io.StringIO()
    report = train_xor(_hardcoded_xor(), "Sigmoid", 3000, out)
    text = out.getvalue()
    assert report.epochs_run == 1
    assert "Early stopping at epoch 0" in text
    assert report.correct == 4
    assert report.accuracy == 100.0
    assert "Accuracy: 100.000000%" in text


def test_report_lines_present():
    out = io.StringIO()
    train_xor(_hardcoded_xor(), "Sigmoid", 5, out)
    text = out.getvalue()
    assert text.startswith("Training the Neural Network as an XOR Gate using Sigmoid...")
    assert "Binary: 1 | Expected: 1" in text
    assert "Input: 1,1 | Output:" in text
    assert "Layer 2 Neuron 0:" in text


def test_report_invariants_after_training():
    mlp = MultilayerPerceptron([2, 4, 1], ActivationType.SIGMOID, 1.0, 0.1, random.Random(7))
    report = train_xor(mlp, "Sigmoid", 200, io.StringIO())
    assert isinstance(report, XorReport)
    assert 1 <= report.epochs_run <= 200
    assert report.best_mse <= report.final_mse
    assert 0 <= report.correct <= 4
    expected_correct = sum(
        threshold(v) == e for v, e in zip(report.outputs, (0, 1, 1, 0))
    )
    assert report.correct == expected_correct
    assert report.outputs == tuple(mlp.run(x)[0] for x in ([0, 0], [0, 1], [1, 0], [1, 1]))


def test_epoch_lines_every_500_and_last():
    mlp = MultilayerPerceptron([2, 4, 1], ActivationType.SIGMOID, 1.0, 0.0, random.Random(3))
    out = io.StringIO()
    report = train_xor(mlp, "Sigmoid", 1001, out)
    text = out.getvalue()
    if report.epochs_run == 1001:
        for epoch in (0, 500, 1000):
            assert f"Epoch {epoch} - MSE" in text
        assert "Epoch 1 - MSE" not in text
    assert report.final_mse == report.best_mse or report.best_mse < report.final_mse


def test_main_runs_all_activations(capsys):
    assert main(["--seed", "5"]) == 0
    text = capsys.readouterr().out
    for name in ("Sigmoid", "Tanh", "ReLU"):
        assert f"Trained XOR Example with {name}" in text
        assert f"XOR Results with {name}:" in text
    assert text.count("Accuracy:") == 3